"""Shared pydantic base model and wire field types.

The swap API encodes u64 amounts as decimal strings, public keys as base58
strings and binary payloads as standard base64. The annotated types below
decode those into ``int``, ``Pubkey`` and ``bytes`` and encode them back when
a model is dumped in JSON mode.
"""

import base64
from collections.abc import Iterator, Mapping
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, PlainSerializer
from pydantic.alias_generators import to_camel
from solders.pubkey import Pubkey

U64_MAX = 2**64 - 1


class WireModel(BaseModel):
    """Base for every model exchanged with the swap API.

    Fields are snake_case in Python and camelCase on the wire. Unknown
    fields in responses are ignored so newer API versions still decode.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        arbitrary_types_allowed=True,
        frozen=True,
        extra="ignore",
    )

    def to_wire(self) -> dict[str, Any]:
        """Dump to the JSON-compatible wire shape, omitting absent fields."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


def parse_pubkey(value: Any) -> Any:
    """Decode a base58 string into a Pubkey, passing Pubkeys through."""
    if isinstance(value, str):
        try:
            return Pubkey.from_string(value)
        except ValueError as e:
            raise ValueError(f"Invalid pubkey {value!r}: {e}") from e
    return value


def _decode_base64(value: Any) -> Any:
    if isinstance(value, str):
        return base64.b64decode(value, validate=True)
    return value


def _encode_base64(value: bytes) -> str:
    return base64.b64encode(value).decode("ascii")


def _to_str(value: Any) -> str:
    return str(value)


def _join_commas(value: list[str]) -> str:
    return ",".join(value)


def split_commas(value: Any) -> Any:
    """Split "a, b" into ["a", "b"], passing lists through."""
    if isinstance(value, str):
        return [item.strip() for item in value.split(",") if item.strip()]
    return value


PubkeyField = Annotated[
    Pubkey,
    BeforeValidator(parse_pubkey),
    PlainSerializer(_to_str, return_type=str, when_used="json"),
]

U64 = Annotated[
    int,
    Field(ge=0, le=U64_MAX),
    PlainSerializer(_to_str, return_type=str, when_used="json"),
]

Base64Payload = Annotated[
    bytes,
    BeforeValidator(_decode_base64),
    PlainSerializer(_encode_base64, return_type=str, when_used="json"),
]

# Dex labels travel as a single comma separated value, e.g. "Raydium,Orca V2"
CommaSeparated = Annotated[
    list[str],
    BeforeValidator(split_commas),
    PlainSerializer(_join_commas, return_type=str, when_used="json"),
]


def flatten_query(data: Mapping[str, Any], prefix: str = "") -> Iterator[tuple[str, str]]:
    """Flatten a JSON-compatible mapping into query-string pairs.

    Scalars map to ``key=value``, nested mappings to ``key[sub]=value`` and
    sequences to ``key[0]=value``. ``None`` values are skipped.
    """
    for key, value in data.items():
        name = f"{prefix}[{key}]" if prefix else str(key)
        if value is None:
            continue
        if isinstance(value, Mapping):
            yield from flatten_query(value, name)
        elif isinstance(value, (list, tuple)):
            yield from flatten_query({str(i): item for i, item in enumerate(value)}, name)
        elif isinstance(value, bool):
            yield name, "true" if value else "false"
        else:
            yield name, str(value)
