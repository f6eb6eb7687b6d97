from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, Field

from .config import VERSION


# === API Schemas ===


class ErrorEnvelope(BaseModel):
    code: str
    message: str
    details: Optional[dict[str, Any]] = None


class Health(BaseModel):
    status: str = "ok"


class Version(BaseModel):
    version: str = VERSION


class AlphabetOut(BaseModel):
    symbols: str
    low: str
    high: str
    size: int


class BetweenIn(BaseModel):
    left: Optional[str] = Field(default=None, max_length=512)
    right: Optional[str] = Field(default=None, max_length=512)
    alphabet: Optional[str] = Field(default=None, min_length=2, max_length=1024)


class KeyIn(BaseModel):
    key: str = Field(max_length=512)
    alphabet: Optional[str] = Field(default=None, min_length=2, max_length=1024)


class SpreadIn(BetweenIn):
    count: int = Field(ge=0)


class KeyOut(BaseModel):
    key: str


class KeysOut(BaseModel):
    keys: list[str]
