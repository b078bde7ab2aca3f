"""Address constants shared across tests."""

SEQUENCER = "0x" + "11" * 20
PROPOSER = "0x" + "22" * 20
BLOCK_SIGNER = "0x" + "33" * 20
FEE_WALLET = "0x" + "44" * 20
ADDRESS_MANAGER_OWNER = "0x" + "55" * 20
GAS_PRICE_ORACLE_OWNER = "0x" + "66" * 20

# EIP-55 reference vector
CHECKSUM_ADDRESS = "0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed"
