import logging
from typing import Optional

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse

from .alphabet import Alphabet
from .config import SORTKEYS_ALPHABET, SORTKEYS_MAX_SPREAD, VERSION, configure_logging
from .errors import SortKeyError
from .keys import SortKeys
from .models import (
    AlphabetOut,
    BetweenIn,
    ErrorEnvelope,
    Health,
    KeyIn,
    KeyOut,
    KeysOut,
    SpreadIn,
    Version,
)

configure_logging()
logger = logging.getLogger(__name__)

app = FastAPI(title="SortKeys API", version=VERSION)
keys = SortKeys(Alphabet(SORTKEYS_ALPHABET))


# === Helpers ===


def keys_for(alphabet: Optional[str]) -> SortKeys:
    if alphabet is None:
        return keys
    return SortKeys.from_symbols(alphabet)


@app.exception_handler(SortKeyError)
def sort_key_error(request: Request, exc: SortKeyError) -> JSONResponse:
    logger.warning("%s %s rejected: %s (%s)", request.method, request.url.path, exc.code, exc.message)
    body = ErrorEnvelope(code=exc.code, message=exc.message, details=exc.details or None)
    return JSONResponse(status_code=400, content=body.model_dump())


# === Health & metadata ===


@app.get("/v1/health", response_model=Health)
def health() -> Health:
    return Health()


@app.get("/v1/version", response_model=Version)
def version() -> Version:
    return Version()


@app.get("/v1/alphabet", response_model=AlphabetOut)
def alphabet() -> AlphabetOut:
    return AlphabetOut(
        symbols=keys.symbols,
        low=keys.low,
        high=keys.high,
        size=keys.alphabet.size,
    )


# === Key endpoints ===


@app.post("/v1/keys:between", response_model=KeyOut)
def key_between(payload: BetweenIn) -> KeyOut:
    return KeyOut(key=keys_for(payload.alphabet).key_between(payload.left, payload.right))


@app.post("/v1/keys:after", response_model=KeyOut)
def key_after(payload: KeyIn) -> KeyOut:
    return KeyOut(key=keys_for(payload.alphabet).after(payload.key))


@app.post("/v1/keys:before", response_model=KeyOut)
def key_before(payload: KeyIn) -> KeyOut:
    return KeyOut(key=keys_for(payload.alphabet).before(payload.key))


@app.post("/v1/keys:spread", response_model=KeysOut)
def key_spread(payload: SpreadIn) -> KeysOut:
    if payload.count > SORTKEYS_MAX_SPREAD:
        raise HTTPException(status_code=400, detail="count_too_large")
    generator = keys_for(payload.alphabet)
    return KeysOut(keys=generator.keys_between(payload.left, payload.right, payload.count))
