"""NodeKit - installation payloads for Solana validator-node services"""

__version__ = "1.0.0"
