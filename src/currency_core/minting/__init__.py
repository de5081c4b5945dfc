"""NFT minting: pin to IPFS, then mint on chain.

Public API:
  - metadata: NftMetadata, NftAttribute
  - ipfs: IpfsPinner, PinResult, PinataPinner, InfuraPinner, LighthousePinner
  - evm: ChainMinter, MintReceipt, Erc721Minter
  - nft: MintResult, mint_nft
"""

from currency_core.minting.evm import ChainMinter, Erc721Minter, MintReceipt
from currency_core.minting.ipfs import InfuraPinner, IpfsPinner, LighthousePinner, PinataPinner, PinResult
from currency_core.minting.metadata import NftAttribute, NftMetadata
from currency_core.minting.nft import MintResult, mint_nft

__all__ = [
    "ChainMinter",
    "Erc721Minter",
    "InfuraPinner",
    "IpfsPinner",
    "LighthousePinner",
    "MintReceipt",
    "MintResult",
    "NftAttribute",
    "NftMetadata",
    "PinResult",
    "PinataPinner",
    "mint_nft",
]
