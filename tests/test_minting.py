"""Tests for IPFS pinning, ERC-721 minting and the mint pipeline."""

from __future__ import annotations

import json
from unittest.mock import Mock, PropertyMock

import pytest
from pydantic import ValidationError

from currency_core.errors import ApiError, AuthenticationRequired, MintError
from currency_core.minting import (
    Erc721Minter,
    InfuraPinner,
    LighthousePinner,
    MintReceipt,
    NftAttribute,
    NftMetadata,
    PinataPinner,
    PinResult,
    mint_nft,
)
from currency_core.minting.evm import _build_tx_params

CONTRACT = "0x" + "ab" * 20
TX_HASH = b"\x12" * 32


class TestNftMetadata:
    def test_none_fields_dropped(self) -> None:
        meta = NftMetadata(name="Sunrise", attributes=[NftAttribute(trait_type="Mood", value="calm")])
        assert meta.to_json() == {
            "name": "Sunrise",
            "description": "",
            "attributes": [{"trait_type": "Mood", "value": "calm"}],
        }

    def test_name_required(self) -> None:
        with pytest.raises(ValidationError):
            NftMetadata(name="  ")


class TestPinata:
    def test_requires_credentials(self, session: Mock) -> None:
        with pytest.raises(AuthenticationRequired):
            PinataPinner(session=session).pin_json({"a": 1}, "x")
        session.request.assert_not_called()

    def test_pin_file_with_jwt(self, session: Mock, respond) -> None:
        session.request.return_value = respond({"IpfsHash": "bafyfile", "PinSize": 10})
        result = PinataPinner(jwt="jwt", session=session).pin_file(b"\x89PNG", "art.png")
        assert result == PinResult("bafyfile", "https://gateway.pinata.cloud/ipfs/bafyfile")
        assert result.uri == "ipfs://bafyfile"
        args, kwargs = session.request.call_args
        assert args == ("POST", "https://api.pinata.cloud/pinning/pinFileToIPFS")
        assert kwargs["files"] == {"file": ("art.png", b"\x89PNG")}
        assert json.loads(kwargs["data"]["pinataMetadata"]) == {"name": "art.png"}
        assert kwargs["headers"] == {"Authorization": "Bearer jwt"}

    def test_pin_json_with_key_pair(self, session: Mock, respond) -> None:
        session.request.return_value = respond({"IpfsHash": "bafymeta"})
        PinataPinner(api_key="k", api_secret="s", session=session).pin_json({"name": "Sunrise"}, "meta")
        kwargs = session.request.call_args.kwargs
        assert kwargs["json"] == {"pinataContent": {"name": "Sunrise"}, "pinataMetadata": {"name": "meta"}}
        assert kwargs["headers"] == {"pinata_api_key": "k", "pinata_secret_api_key": "s"}

    def test_missing_hash(self, session: Mock, respond) -> None:
        session.request.return_value = respond({"PinSize": 10})
        with pytest.raises(ApiError, match="no IpfsHash"):
            PinataPinner(jwt="jwt", session=session).pin_file(b"x", "x.bin")

    def test_authentication(self, session: Mock, respond) -> None:
        session.request.return_value = respond({"message": "Congratulations!"})
        assert PinataPinner(jwt="jwt", session=session).test_authentication() == {"message": "Congratulations!"}
        assert session.request.call_args.args == ("GET", "https://api.pinata.cloud/data/testAuthentication")


class TestAddApiPinners:
    def test_infura_basic_auth(self, session: Mock, respond) -> None:
        session.request.return_value = respond({"Name": "meta.json", "Hash": "QmMeta", "Size": "20"})
        result = InfuraPinner("id", "secret", session=session).pin_json({"a": 1}, "meta")
        assert result.cid == "QmMeta"
        args, kwargs = session.request.call_args
        assert args == ("POST", "https://ipfs.infura.io:5001/api/v0/add")
        assert kwargs["headers"] == {"Authorization": "Basic aWQ6c2VjcmV0"}
        assert kwargs["files"] == {"file": ("meta.json", b'{"a": 1}')}

    def test_lighthouse_bearer(self, session: Mock, respond) -> None:
        session.request.return_value = respond({"Hash": "bafyL"})
        result = LighthousePinner("lh-key", session=session).pin_file(b"data", "a.txt")
        assert result.url == "https://gateway.lighthouse.storage/ipfs/bafyL"
        assert session.request.call_args.kwargs["headers"] == {"Authorization": "Bearer lh-key"}

    def test_lighthouse_requires_key(self, session: Mock) -> None:
        with pytest.raises(AuthenticationRequired):
            LighthousePinner(session=session).pin_file(b"data", "a.txt")


def _fake_w3(status: int = 1, events: list | None = None) -> tuple[Mock, Mock, Mock]:
    w3 = Mock()
    account = Mock(address="0x" + "cd" * 20)
    account.sign_transaction.return_value = Mock(raw_transaction=b"signed")
    w3.eth.account.from_key.return_value = account
    w3.eth.get_transaction_count.return_value = 3
    w3.eth.chain_id = 11155111
    w3.eth.get_block.return_value = {"baseFeePerGas": 10}
    w3.eth.max_priority_fee = 2
    w3.eth.estimate_gas.return_value = 90_000
    w3.eth.send_raw_transaction.return_value = TX_HASH
    w3.eth.wait_for_transaction_receipt.return_value = {"status": status}

    contract = Mock()
    contract.functions.safeMint.return_value.build_transaction.side_effect = lambda params: {**params, "data": "0x"}
    contract.events.Transfer.return_value.process_receipt.return_value = (
        events if events is not None else [{"args": {"tokenId": 7}}]
    )
    w3.eth.contract.return_value = contract
    return w3, account, contract


class TestTxParams:
    def test_eip1559_fees(self) -> None:
        w3, _, _ = _fake_w3()
        params = _build_tx_params(w3, "0xsender")
        assert params["nonce"] == 3
        assert params["chainId"] == 11155111
        assert params["maxPriorityFeePerGas"] == 2
        assert params["maxFeePerGas"] == 22

    def test_priority_fee_fallback(self) -> None:
        w3, _, _ = _fake_w3()
        w3.eth.get_block.return_value = {}
        w3.eth.gas_price = 100
        type(w3.eth).max_priority_fee = PropertyMock(side_effect=ValueError("method not found"))
        params = _build_tx_params(w3, "0xsender")
        assert params["maxPriorityFeePerGas"] == 10
        assert params["maxFeePerGas"] == 210


class TestErc721Minter:
    def test_mint(self) -> None:
        w3, account, contract = _fake_w3()
        minter = Erc721Minter(w3, CONTRACT, "0xkey", explorer_base="https://sepolia.etherscan.io/")
        receipt = minter.mint("ipfs://bafymeta", NftMetadata(name="Sunrise"))

        hex_hash = "0x" + "12" * 32
        assert receipt == MintReceipt(hex_hash, 7, f"https://sepolia.etherscan.io/tx/{hex_hash}")
        contract.functions.safeMint.assert_called_once_with(account.address, "ipfs://bafymeta")
        signed_tx = account.sign_transaction.call_args.args[0]
        assert signed_tx["gas"] == 90_000
        w3.eth.send_raw_transaction.assert_called_once_with(b"signed")

    def test_reverted(self) -> None:
        w3, _, _ = _fake_w3(status=0)
        with pytest.raises(MintError, match="reverted"):
            Erc721Minter(w3, CONTRACT, "0xkey").mint("ipfs://x", NftMetadata(name="A"))

    def test_no_transfer_event(self) -> None:
        w3, _, _ = _fake_w3(events=[])
        receipt = Erc721Minter(w3, CONTRACT, "0xkey").mint("ipfs://x", NftMetadata(name="A"))
        assert receipt.token_id is None
        assert receipt.explorer_url is None


class TestMintNft:
    def test_pipeline(self) -> None:
        pinner = Mock()
        pinner.pin_file.return_value = PinResult("bafyfile", "https://gw/bafyfile")
        pinner.pin_json.return_value = PinResult("bafymeta", "https://gw/bafymeta")
        minter = Mock()
        minter.mint.return_value = MintReceipt("0xabc", 1)

        result = mint_nft(b"img", "art.png", NftMetadata(name="Sunrise"), pinner, minter)

        payload, name = pinner.pin_json.call_args.args
        assert payload["image"] == "ipfs://bafyfile"
        assert name == "art.png.metadata"
        uri, document = minter.mint.call_args.args
        assert uri == "ipfs://bafymeta"
        assert document.image == "ipfs://bafyfile"
        assert result.token_uri == "ipfs://bafymeta"
        assert result.receipt.tx_hash == "0xabc"

    def test_errors_forwarded(self) -> None:
        pinner = Mock()
        pinner.pin_file.return_value = PinResult("bafyfile", "https://gw/bafyfile")
        pinner.pin_json.side_effect = ApiError("Pinata", "quota exceeded", status=403)
        minter = Mock()
        with pytest.raises(ApiError, match="quota exceeded"):
            mint_nft(b"img", "art.png", NftMetadata(name="Sunrise"), pinner, minter)
        minter.mint.assert_not_called()
