"""Shared fixtures: canned HTTP responses and a stub session."""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any
from unittest.mock import Mock

import pytest
import requests


def make_response(
    payload: Any = None,
    status: int = 200,
    *,
    text: str | None = None,
    reason: str | None = None,
) -> requests.Response:
    """Build a real ``requests.Response`` without touching the network."""
    resp = requests.Response()
    resp.status_code = status
    resp.reason = reason if reason is not None else ("OK" if status < 400 else "Error")
    resp.encoding = "utf-8"
    body = text if text is not None else json.dumps(payload)
    resp._content = body.encode()
    resp.headers["Content-Type"] = "application/json"
    resp.url = "https://example.test/"
    return resp


@pytest.fixture
def respond() -> Callable[..., requests.Response]:
    return make_response


@pytest.fixture
def session() -> Mock:
    """A session whose ``request`` returns an empty 200 JSON object."""
    s = Mock(spec=requests.Session)
    s.request.return_value = make_response({})
    return s
