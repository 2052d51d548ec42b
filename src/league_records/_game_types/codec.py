# Area: Game Types
"""
league_records._game_types.codec — Canonical payload encoding
==============================================================

Converts untyped payloads (JSON-like mappings) into the canonical byte
encoding of a game type and back.

Encoding is a two-stage pipeline:
    1. schema check against the game type's payload model
    2. deterministic serialization of the validated model

The canonical form is compact UTF-8 JSON with sorted keys. Two payloads
that validate to the same model always encode to identical bytes.
"""

from __future__ import annotations
import json
import logging
from typing import Any, Dict, List, Mapping, Union

from pydantic import BaseModel, ValidationError

from ..errors import CorruptPayload, PayloadSchemaMismatch
from .registry import GameType, schema_of

logger = logging.getLogger("league_records.codec")


def encode(game_type: Union[GameType, str], payload: Any) -> bytes:
    """
    Validate a payload and return its canonical encoding.

    Parameters
    ----------
    game_type : GameType or str
        The game type whose schema the payload must satisfy.
    payload : Any
        Untyped payload, normally a mapping decoded from JSON.

    Returns
    -------
    bytes
        Canonical encoding of the validated payload.

    Raises
    ------
    UnknownGameType
        If the game type is not registered.
    PayloadSchemaMismatch
        If the payload does not satisfy the schema.
    """
    return _canonical_bytes(_validate(game_type, payload))


def normalize(game_type: Union[GameType, str], payload: Any) -> Dict[str, Any]:
    """Return the validated payload with defaults filled in."""
    return _validate(game_type, payload).model_dump(mode="json")


def decode(game_type: Union[GameType, str], data: bytes) -> Dict[str, Any]:
    """
    Decode canonical bytes back into an untyped payload.

    The bytes must be exactly what `encode` produces for this game type;
    anything else raises CorruptPayload.
    """
    schema = schema_of(game_type)
    type_name = schema.game_type.value

    if not isinstance(data, (bytes, bytearray)):
        raise CorruptPayload(type_name, f"expected bytes, got {type(data).__name__}")
    data = bytes(data)

    try:
        raw = json.loads(data.decode("utf-8"))
    except (UnicodeDecodeError, ValueError) as e:
        raise CorruptPayload(type_name, f"not valid UTF-8 JSON ({e})") from e

    if not isinstance(raw, dict):
        raise CorruptPayload(type_name, f"expected an object, got {type(raw).__name__}")

    try:
        model = schema.payload_model.model_validate(raw)
    except ValidationError as e:
        raise CorruptPayload(type_name, "; ".join(_format_errors(e))) from e

    if _canonical_bytes(model) != data:
        raise CorruptPayload(type_name, "bytes are not in canonical form")

    return model.model_dump(mode="json")


def _validate(game_type: Union[GameType, str], payload: Any) -> BaseModel:
    """Run the schema check stage of the pipeline."""
    schema = schema_of(game_type)
    type_name = schema.game_type.value

    if not isinstance(payload, Mapping):
        raise PayloadSchemaMismatch(
            type_name, [f"expected a mapping, got {type(payload).__name__}"]
        )

    try:
        return schema.payload_model.model_validate(dict(payload))
    except ValidationError as e:
        errors = _format_errors(e)
        logger.debug(f"Payload rejected for {type_name}: {errors}")
        raise PayloadSchemaMismatch(type_name, errors) from e


def _canonical_bytes(model: BaseModel) -> bytes:
    """Serialize a validated model deterministically."""
    return json.dumps(
        model.model_dump(mode="json"),
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
        allow_nan=False,
    ).encode("utf-8")


def _format_errors(error: ValidationError) -> List[str]:
    """Flatten pydantic errors into 'field: message' strings."""
    messages = []
    for item in error.errors():
        location = ".".join(str(part) for part in item.get("loc", ())) or "<payload>"
        messages.append(f"{location}: {item.get('msg', 'invalid value')}")
    return messages
