"""Local hardhat node deploy configuration."""

CONFIG = {
    "network": "hardhat",
    "l1BlockTimeSeconds": 15,
    "l2BlockGasLimit": 15_000_000,
    "l2ChainId": 17,
    "ctcL2GasDiscountDivisor": 32,
    "ctcEnqueueGasCost": 60_000,
    "sccFaultProofWindowSeconds": 0,
    "sccSequencerPublishWindowSeconds": 12592000,
    "ovmSequencerAddress": "0x70997970c51812dc3a010c7d01b50e0d17dc79c8",
    "ovmProposerAddress": "0x3c44cdddb6a900fa2b585dd299e03d12fa4293bc",
    "ovmBlockSignerAddress": "0x00000398232e2064f896018496b4b44b3d62751f",
    "ovmFeeWalletAddress": "0x391716d440c151c42cdf1c95c1d83a5427bca52c",
    "ovmAddressManagerOwner": "0xf39fd6e51aad88f6f4ce6ab8827279cfffb92266",
    "ovmGasPriceOracleOwner": "0xa0ee7a142d267c1f36714e4a8f75612f20a79720",
    "gasPriceOracleL2GasPrice": 1,
    "hfBerlinBlock": 0,
}
