"""Goerli deploy configuration.

Fields left out here take their defaults (see deploy_config.schemas.fields).
"""

CONFIG = {
    "network": "goerli",
    "numDeployConfirmations": 1,
    "l1BlockTimeSeconds": 15,
    "l2BlockGasLimit": 15_000_000,
    "l2ChainId": 420,
    "ctcL2GasDiscountDivisor": 32,
    "ctcEnqueueGasCost": 60_000,
    "sccFaultProofWindowSeconds": 10,
    "sccSequencerPublishWindowSeconds": 12592000,
    "ovmSequencerAddress": "0x7431310e026b69bfc676c0013e12a1a11411eec9",
    "ovmProposerAddress": "0x02b1786a85ec3f71fbbba46507780db7cf9014f6",
    "ovmBlockSignerAddress": "0x00000398232e2064f896018496b4b44b3d62751f",
    "ovmFeeWalletAddress": "0xfd1d2e729ae8eee2e146c033bf4400fe75284301",
    "ovmAddressManagerOwner": "0xf80267194936da1e98db10bce06f3147d580a62e",
    "ovmGasPriceOracleOwner": "0xa693b8f8207ff043f6bbc2e2120bbe4c2251efe9",
    "gasPriceOracleL2GasPrice": 1000,
}
