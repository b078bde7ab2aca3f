"""Schema registry: every recognized deploy config field.

DEPLOY_CONFIG_SCHEMA is the single source of truth for field names, their
declared types and their defaults. It is built once at import time and
exposed read-only. Fields without a default are mandatory.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Callable, Mapping

from eth_utils import add_0x_prefix, is_checksum_address, is_checksum_formatted_address, is_hex_address

from deploy_config.errors import UnknownField


ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"


class _NoDefault:
    """Marker for fields that have no default value."""

    def __repr__(self) -> str:
        return "NO_DEFAULT"


NO_DEFAULT: Any = _NoDefault()


def is_chain_address(value: Any) -> bool:
    """Check that ``value`` is a 20-byte hex account address.

    The prefix is "0x" or absent. Lower- or upper-case hex is accepted
    as is; mixed case must be a valid EIP-55 checksum.
    """
    if not isinstance(value, str) or value.startswith("0X"):
        return False
    if not is_hex_address(value):
        return False
    if is_checksum_formatted_address(value):
        return is_checksum_address(add_0x_prefix(value))
    return True


def _is_number(value: Any) -> bool:
    # bool is an int subclass but never a number here
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_string(value: Any) -> bool:
    return isinstance(value, str)


def _is_boolean(value: Any) -> bool:
    return isinstance(value, bool)


class FieldType(str, Enum):
    """Declared value type of a config field.

    Each member dispatches to a pure predicate via ``validate``.
    """
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    ADDRESS = "address"

    def validate(self, value: Any) -> bool:
        """Return True if ``value`` satisfies this type."""
        return _VALIDATORS[self](value)


_VALIDATORS: dict[FieldType, Callable[[Any], bool]] = {
    FieldType.STRING: _is_string,
    FieldType.NUMBER: _is_number,
    FieldType.BOOLEAN: _is_boolean,
    FieldType.ADDRESS: is_chain_address,
}


@dataclass(frozen=True)
class FieldSpec:
    """Declared type and optional default of one config field."""
    name: str
    type: FieldType
    default: Any = NO_DEFAULT
    description: str = ""

    @property
    def has_default(self) -> bool:
        return self.default is not NO_DEFAULT

    @property
    def required(self) -> bool:
        return not self.has_default


def _spec(name: str, type_: FieldType, description: str, default: Any = NO_DEFAULT) -> tuple[str, FieldSpec]:
    return name, FieldSpec(name=name, type=type_, default=default, description=description)


# =============================================================================
# Registry
# =============================================================================

DEPLOY_CONFIG_SCHEMA: Mapping[str, FieldSpec] = MappingProxyType(dict([
    _spec("network", FieldType.STRING,
          "Name of the network to deploy to."),
    _spec("isForkedNetwork", FieldType.BOOLEAN,
          "Whether or not this network is a forked network.", False),
    _spec("numDeployConfirmations", FieldType.NUMBER,
          "Number of confirmations to wait for during deployment.", 0),
    _spec("gasPrice", FieldType.NUMBER,
          "Gas price to use for deployment transactions.", None),
    _spec("l1BlockTimeSeconds", FieldType.NUMBER,
          "Estimated average L1 block time in seconds."),
    _spec("l2BlockGasLimit", FieldType.NUMBER,
          "Gas limit for blocks on L2."),
    _spec("l2ChainId", FieldType.NUMBER,
          "Chain ID for the L2 network."),
    _spec("ctcL2GasDiscountDivisor", FieldType.NUMBER,
          "Discount divisor used to calculate gas burn for L1 to L2 transactions."),
    _spec("ctcEnqueueGasCost", FieldType.NUMBER,
          "Cost of the enqueue function in the CTC."),
    _spec("sccFaultProofWindowSeconds", FieldType.NUMBER,
          "Fault proof window in seconds."),
    _spec("sccSequencerPublishWindowSeconds", FieldType.NUMBER,
          "Sequencer publish window in seconds."),
    _spec("ovmSequencerAddress", FieldType.ADDRESS,
          "Address of the Sequencer (publishes to CTC)."),
    _spec("ovmProposerAddress", FieldType.ADDRESS,
          "Address of the Proposer (publishes to SCC)."),
    _spec("ovmBlockSignerAddress", FieldType.ADDRESS,
          "Address of the account that will sign blocks."),
    _spec("ovmFeeWalletAddress", FieldType.ADDRESS,
          "Address that will receive fees on L1."),
    _spec("ovmAddressManagerOwner", FieldType.ADDRESS,
          "Address of the owner of the AddressManager contract on L1."),
    _spec("ovmGasPriceOracleOwner", FieldType.ADDRESS,
          "Address of the owner of the GasPriceOracle contract on L2."),
    _spec("ovmWhitelistOwner", FieldType.ADDRESS,
          "Whitelist owner address.", ZERO_ADDRESS),
    _spec("gasPriceOracleOverhead", FieldType.NUMBER,
          "Initial overhead value for the GasPriceOracle.", 2750),
    _spec("gasPriceOracleScalar", FieldType.NUMBER,
          "Initial scalar value for the GasPriceOracle.", 1_500_000),
    _spec("gasPriceOracleDecimals", FieldType.NUMBER,
          "Initial decimals for the GasPriceOracle.", 6),
    _spec("gasPriceOracleL1BaseFee", FieldType.NUMBER,
          "Initial L1 base fee for the GasPriceOracle.", 1),
    _spec("gasPriceOracleL2GasPrice", FieldType.NUMBER,
          "Initial L2 gas price for the GasPriceOracle.", 1),
    _spec("hfBerlinBlock", FieldType.NUMBER,
          "Block number at which the Berlin hardfork is enabled.", 0),
]))


def get_field_spec(name: str) -> FieldSpec:
    """Look up a field by its config key.

    Raises
    ------
    UnknownField
        If ``name`` is not a recognized config field.
    """
    try:
        return DEPLOY_CONFIG_SCHEMA[name]
    except KeyError:
        raise UnknownField(name) from None


def required_fields() -> list[str]:
    """Names of fields that have no default, in declaration order."""
    return [name for name, spec in DEPLOY_CONFIG_SCHEMA.items() if spec.required]


def field_defaults() -> dict[str, Any]:
    """Mapping of every defaulted field to its default value."""
    return {name: spec.default for name, spec in DEPLOY_CONFIG_SCHEMA.items() if spec.has_default}
