"""ERC-721 / Metaplex-style token metadata."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator


class NftAttribute(BaseModel):
    trait_type: str
    value: str | int | float
    display_type: str | None = None


class NftMetadata(BaseModel):
    """JSON document pinned to IPFS and referenced by the token URI."""

    name: str
    description: str = ""
    image: str | None = None
    animation_url: str | None = None
    external_url: str | None = None
    attributes: list[NftAttribute] = Field(default_factory=list)
    properties: dict[str, Any] | None = None

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("name must not be empty")
        return v

    def to_json(self) -> dict[str, Any]:
        """Serialise for pinning, leaving out unset optional fields."""
        return self.model_dump(mode="json", exclude_none=True)
