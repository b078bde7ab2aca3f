"""DeployConfig: the resolved, authoritative deployment configuration.

This is the ONLY config object deployment code sees. Every schema field is
present and type-correct; attributes are snake_case and each alias is the
field's name in the raw per-network configuration.

Instances are produced by resolve_deploy_config(); building one directly
still runs the same type checks but applies no defaults.
"""

from typing import Annotated, Any, Optional, Union

from pydantic import AfterValidator, Field, StrictBool, StrictFloat, StrictInt, StrictStr

from deploy_config.schemas.base import DeployBaseModel
from deploy_config.schemas.fields import DEPLOY_CONFIG_SCHEMA, is_chain_address


def _check_address(value: str) -> str:
    if not is_chain_address(value):
        raise ValueError(f"not a valid address: {value!r}")
    return value


Number = Union[StrictInt, StrictFloat]
ChainAddress = Annotated[StrictStr, AfterValidator(_check_address)]


def _field(alias: str) -> Any:
    """Declare a model field described by its schema registry entry."""
    return Field(alias=alias, description=DEPLOY_CONFIG_SCHEMA[alias].description)


class DeployConfig(DeployBaseModel):
    """Fully resolved deploy configuration for one network.

    Usage
    -----
    Deployment code reads attributes directly:

        config = get_config("goerli")
        config.l2_chain_id
        config.ovm_sequencer_address

    ``to_raw()`` gives back the mapping keyed by config field names.
    """

    network: StrictStr = _field("network")
    is_forked_network: StrictBool = _field("isForkedNetwork")
    num_deploy_confirmations: Number = _field("numDeployConfirmations")
    gas_price: Optional[Number] = _field("gasPrice")

    l1_block_time_seconds: Number = _field("l1BlockTimeSeconds")
    l2_block_gas_limit: Number = _field("l2BlockGasLimit")
    l2_chain_id: Number = _field("l2ChainId")
    ctc_l2_gas_discount_divisor: Number = _field("ctcL2GasDiscountDivisor")
    ctc_enqueue_gas_cost: Number = _field("ctcEnqueueGasCost")
    scc_fault_proof_window_seconds: Number = _field("sccFaultProofWindowSeconds")
    scc_sequencer_publish_window_seconds: Number = _field("sccSequencerPublishWindowSeconds")

    ovm_sequencer_address: ChainAddress = _field("ovmSequencerAddress")
    ovm_proposer_address: ChainAddress = _field("ovmProposerAddress")
    ovm_block_signer_address: ChainAddress = _field("ovmBlockSignerAddress")
    ovm_fee_wallet_address: ChainAddress = _field("ovmFeeWalletAddress")
    ovm_address_manager_owner: ChainAddress = _field("ovmAddressManagerOwner")
    ovm_gas_price_oracle_owner: ChainAddress = _field("ovmGasPriceOracleOwner")
    ovm_whitelist_owner: ChainAddress = _field("ovmWhitelistOwner")

    gas_price_oracle_overhead: Number = _field("gasPriceOracleOverhead")
    gas_price_oracle_scalar: Number = _field("gasPriceOracleScalar")
    gas_price_oracle_decimals: Number = _field("gasPriceOracleDecimals")
    gas_price_oracle_l1_base_fee: Number = _field("gasPriceOracleL1BaseFee")
    gas_price_oracle_l2_gas_price: Number = _field("gasPriceOracleL2GasPrice")
    hf_berlin_block: Number = _field("hfBerlinBlock")

    def to_raw(self) -> dict[str, Any]:
        """Return the configuration keyed by config field names."""
        return self.model_dump(by_alias=True)
