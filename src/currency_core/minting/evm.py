"""
ERC-721 minting over JSON-RPC with web3.py.

The contract must expose ``safeMint(address to, string uri)`` and emit the
standard ``Transfer`` event; the minted token id is read from that event.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol

from loguru import logger
from web3 import Web3
from web3.exceptions import Web3Exception
from web3.types import TxParams

from currency_core.errors import MintError
from currency_core.minting.metadata import NftMetadata

RECEIPT_TIMEOUT = 120

ERC721_MINT_ABI: list[dict[str, Any]] = [
    {
        "type": "function",
        "name": "safeMint",
        "stateMutability": "nonpayable",
        "inputs": [
            {"name": "to", "type": "address"},
            {"name": "uri", "type": "string"},
        ],
        "outputs": [],
    },
    {
        "type": "event",
        "name": "Transfer",
        "anonymous": False,
        "inputs": [
            {"name": "from", "type": "address", "indexed": True},
            {"name": "to", "type": "address", "indexed": True},
            {"name": "tokenId", "type": "uint256", "indexed": True},
        ],
    },
]


@dataclass(frozen=True)
class MintReceipt:
    tx_hash: str
    token_id: int | None
    explorer_url: str | None = None


class ChainMinter(Protocol):
    def mint(self, metadata_uri: str, metadata: NftMetadata) -> MintReceipt: ...


def _build_tx_params(w3: Web3, sender: str) -> TxParams:
    """Nonce, chain id and EIP-1559 fees for a transaction from ``sender``."""
    params: TxParams = {
        "from": sender,
        "nonce": w3.eth.get_transaction_count(sender),
        "chainId": w3.eth.chain_id,
    }
    latest = w3.eth.get_block("latest")
    base_fee = latest.get("baseFeePerGas") or w3.eth.gas_price
    try:
        priority_fee = int(w3.eth.max_priority_fee)
    except (ValueError, Web3Exception):
        priority_fee = int(base_fee // 10)
    params["maxPriorityFeePerGas"] = priority_fee
    params["maxFeePerGas"] = base_fee * 2 + priority_fee
    return params


class Erc721Minter:
    """Mints to the signer's own address through ``safeMint``."""

    def __init__(
        self,
        w3: Web3,
        contract_address: str,
        private_key: str,
        explorer_base: str | None = None,
    ) -> None:
        self.w3 = w3
        self.account = w3.eth.account.from_key(private_key)
        self.contract = w3.eth.contract(address=Web3.to_checksum_address(contract_address), abi=ERC721_MINT_ABI)
        self.explorer_base = explorer_base.rstrip("/") if explorer_base else None
        self.log = logger.bind(service="erc721")

    @classmethod
    def from_rpc(
        cls,
        rpc_url: str,
        contract_address: str,
        private_key: str,
        explorer_base: str | None = None,
    ) -> Erc721Minter:
        return cls(Web3(Web3.HTTPProvider(rpc_url)), contract_address, private_key, explorer_base)

    def mint(self, metadata_uri: str, metadata: NftMetadata) -> MintReceipt:
        sender = self.account.address
        self.log.info("Minting {!r} to {}", metadata.name, sender)

        tx = self.contract.functions.safeMint(sender, metadata_uri).build_transaction(
            _build_tx_params(self.w3, sender)
        )
        if "gas" not in tx:
            tx["gas"] = self.w3.eth.estimate_gas(tx)

        signed = self.account.sign_transaction(tx)
        tx_hash = self.w3.eth.send_raw_transaction(signed.raw_transaction)
        receipt = self.w3.eth.wait_for_transaction_receipt(tx_hash, timeout=RECEIPT_TIMEOUT)
        hex_hash = Web3.to_hex(tx_hash)
        if receipt["status"] != 1:
            raise MintError("Mint transaction reverted", context={"tx_hash": hex_hash})

        token_id = None
        events = self.contract.events.Transfer().process_receipt(receipt)
        if events:
            token_id = int(events[0]["args"]["tokenId"])

        explorer_url = f"{self.explorer_base}/tx/{hex_hash}" if self.explorer_base else None
        self.log.success("Minted token {} in {}", token_id, hex_hash)
        return MintReceipt(tx_hash=hex_hash, token_id=token_id, explorer_url=explorer_url)
