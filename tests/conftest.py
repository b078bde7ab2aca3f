"""Root-level pytest fixtures for the deploy config test suite.

Provides raw per-network configurations and on-disk config directories.
"""

import pytest

from deploy_config.schemas import DeployConfig, resolve_deploy_config
from tests.helpers.addresses import (
    ADDRESS_MANAGER_OWNER,
    BLOCK_SIGNER,
    FEE_WALLET,
    GAS_PRICE_ORACLE_OWNER,
    PROPOSER,
    SEQUENCER,
)


# =============================================================================
# Raw Configuration Fixtures
# =============================================================================

@pytest.fixture
def raw_config():
    """Raw goerli config holding every mandatory field and nothing else."""
    return {
        "network": "goerli",
        "l1BlockTimeSeconds": 15,
        "l2BlockGasLimit": 15_000_000,
        "l2ChainId": 420,
        "ctcL2GasDiscountDivisor": 32,
        "ctcEnqueueGasCost": 60_000,
        "sccFaultProofWindowSeconds": 10,
        "sccSequencerPublishWindowSeconds": 12_592_000,
        "ovmSequencerAddress": SEQUENCER,
        "ovmProposerAddress": PROPOSER,
        "ovmBlockSignerAddress": BLOCK_SIGNER,
        "ovmFeeWalletAddress": FEE_WALLET,
        "ovmAddressManagerOwner": ADDRESS_MANAGER_OWNER,
        "ovmGasPriceOracleOwner": GAS_PRICE_ORACLE_OWNER,
    }


@pytest.fixture
def resolved_config(raw_config) -> DeployConfig:
    """DeployConfig resolved from raw_config (all defaults applied)."""
    return resolve_deploy_config(raw_config)


@pytest.fixture
def write_network_config(tmp_path):
    """Factory fixture writing ``<tmp_path>/<network>.py`` with a CONFIG dict.

    Examples
    --------
    >>> def test_load(write_network_config, raw_config):
    ...     config_dir = write_network_config("goerli", raw_config)
    """
    def _write(network, config, variable="CONFIG"):
        path = tmp_path / f"{network}.py"
        path.write_text(f"{variable} = {config!r}\n")
        return tmp_path

    return _write


@pytest.fixture
def config_dir(write_network_config, raw_config):
    """Config directory containing a valid goerli.py."""
    return write_network_config("goerli", raw_config)
