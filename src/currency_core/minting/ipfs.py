"""
IPFS pinning clients.

Each pinner uploads raw bytes or a JSON document and returns the content
id plus a gateway URL. They share ``ApiClient`` so failures surface as
``ApiError`` like every other wrapper.
"""

from __future__ import annotations

import base64
import json
from dataclasses import dataclass
from typing import Any, Protocol

import requests

from currency_core.config import get_settings
from currency_core.errors import ApiError, AuthenticationRequired
from currency_core.services.client import ApiClient


@dataclass(frozen=True)
class PinResult:
    cid: str
    url: str

    @property
    def uri(self) -> str:
        return f"ipfs://{self.cid}"


class IpfsPinner(Protocol):
    def pin_file(self, data: bytes, filename: str) -> PinResult: ...

    def pin_json(self, payload: dict[str, Any], name: str) -> PinResult: ...


def _require(payload: Any, key: str, service: str) -> str:
    if not isinstance(payload, dict) or not payload.get(key):
        raise ApiError(service, f"response has no {key}")
    return str(payload[key])


# =============================================================================
# Pinata
# =============================================================================


class PinataPinner(ApiClient):
    """Pinata pinning API. Authenticates with a JWT or a key/secret pair.

    Without an explicit ``jwt`` the ``pinata_jwt`` setting is used.
    """

    SERVICE = "Pinata"
    BASE_URL = "https://api.pinata.cloud"
    GATEWAY = "https://gateway.pinata.cloud/ipfs"

    def __init__(
        self,
        jwt: str | None = None,
        api_key: str | None = None,
        api_secret: str | None = None,
        *,
        base_url: str | None = None,
        session: requests.Session | None = None,
    ) -> None:
        super().__init__(api_key, base_url, session=session)
        if jwt is None:
            jwt = get_settings().pinata_jwt.get_secret_value() or None
        self.jwt = jwt
        self.api_secret = api_secret

    def _headers(self) -> dict[str, str]:
        if self.jwt:
            return {"Authorization": f"Bearer {self.jwt}"}
        if self.api_key and self.api_secret:
            return {"pinata_api_key": self.api_key, "pinata_secret_api_key": self.api_secret}
        raise AuthenticationRequired("Pinata needs a JWT or an API key and secret")

    def _result(self, payload: Any) -> PinResult:
        cid = _require(payload, "IpfsHash", self.SERVICE)
        return PinResult(cid=cid, url=f"{self.GATEWAY}/{cid}")

    def test_authentication(self) -> dict[str, Any]:
        return self._get("/data/testAuthentication")

    def pin_file(self, data: bytes, filename: str) -> PinResult:
        payload = self._post(
            "/pinning/pinFileToIPFS",
            files={"file": (filename, data)},
            data={"pinataMetadata": json.dumps({"name": filename})},
        )
        return self._result(payload)

    def pin_json(self, payload: dict[str, Any], name: str) -> PinResult:
        body = {"pinataContent": payload, "pinataMetadata": {"name": name}}
        return self._result(self._post("/pinning/pinJSONToIPFS", json=body))


# =============================================================================
# Kubo-compatible /api/v0/add (Infura, Lighthouse)
# =============================================================================


class _AddApiPinner(ApiClient):
    GATEWAY = ""

    def _add(self, data: bytes, filename: str) -> PinResult:
        payload = self._post("/api/v0/add", files={"file": (filename, data)})
        cid = _require(payload, "Hash", self.SERVICE)
        return PinResult(cid=cid, url=f"{self.GATEWAY}/{cid}")

    def pin_file(self, data: bytes, filename: str) -> PinResult:
        return self._add(data, filename)

    def pin_json(self, payload: dict[str, Any], name: str) -> PinResult:
        filename = name if name.endswith(".json") else f"{name}.json"
        return self._add(json.dumps(payload).encode(), filename)


class InfuraPinner(_AddApiPinner):
    SERVICE = "Infura IPFS"
    BASE_URL = "https://ipfs.infura.io:5001"
    GATEWAY = "https://ipfs.io/ipfs"

    def __init__(
        self,
        project_id: str,
        project_secret: str,
        *,
        base_url: str | None = None,
        session: requests.Session | None = None,
    ) -> None:
        super().__init__(project_id, base_url, session=session)
        self.project_secret = project_secret

    def _headers(self) -> dict[str, str]:
        if not (self.api_key and self.project_secret):
            raise AuthenticationRequired("Infura needs a project id and secret")
        token = base64.b64encode(f"{self.api_key}:{self.project_secret}".encode()).decode()
        return {"Authorization": f"Basic {token}"}


class LighthousePinner(_AddApiPinner):
    SERVICE = "Lighthouse"
    API_KEY_SETTING = "lighthouse_api_key"
    BASE_URL = "https://node.lighthouse.storage"
    GATEWAY = "https://gateway.lighthouse.storage/ipfs"

    def _headers(self) -> dict[str, str]:
        if not self.api_key:
            raise AuthenticationRequired("Lighthouse needs an API key")
        return {"Authorization": f"Bearer {self.api_key}"}
