"""Pin a file and its metadata, then mint a token pointing at them."""

from __future__ import annotations

from dataclasses import dataclass

from loguru import logger

from currency_core.minting.evm import ChainMinter, MintReceipt
from currency_core.minting.ipfs import IpfsPinner, PinResult
from currency_core.minting.metadata import NftMetadata


@dataclass(frozen=True)
class MintResult:
    file: PinResult
    metadata: PinResult
    receipt: MintReceipt

    @property
    def token_uri(self) -> str:
        return self.metadata.uri


def mint_nft(
    file_data: bytes,
    filename: str,
    metadata: NftMetadata,
    pinner: IpfsPinner,
    minter: ChainMinter,
) -> MintResult:
    """Run the three steps in order.

    Errors from the pinner or the minter propagate unchanged; a file that
    was pinned before a later step failed stays pinned.
    """
    file_pin = pinner.pin_file(file_data, filename)
    logger.info("Pinned {} as {}", filename, file_pin.cid)

    document = metadata.model_copy(update={"image": file_pin.uri})
    meta_pin = pinner.pin_json(document.to_json(), f"{filename}.metadata")
    logger.info("Pinned metadata as {}", meta_pin.cid)

    receipt = minter.mint(meta_pin.uri, document)
    return MintResult(file=file_pin, metadata=meta_pin, receipt=receipt)
