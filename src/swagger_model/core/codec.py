"""Object-level combinators used by the generic encoder and decoder.

Encoders here have the shape ``T -> Value`` and decoders ``Value -> T``,
where ``Value`` is a structured document (``json.loads`` output). None of
them mutate their input.
"""

from collections.abc import Callable, Iterable
from typing import Any, TypeVar

from .errors import DecodeError, DeclarationError

T = TypeVar("T")

Value = None | bool | int | float | str | list["Value"] | dict[str, "Value"]
Encoder = Callable[[T], Value]
Decoder = Callable[[Value], T]


def merge_objects(left: Value, right: Value) -> dict[str, Value]:
    """Left-biased union of two objects."""
    if not isinstance(left, dict) or not isinstance(right, dict):
        raise DeclarationError(
            f"cannot merge {type(left).__name__} with {type(right).__name__}, both must be objects"
        )
    return {**right, **left}


def flatten_sub(sub: str, encode_full: Encoder) -> Encoder:
    """Wrap an encoder so the object stored under ``sub`` is spread into its parent.

    Fields of the outer object win over fields of the sub object with the
    same key.
    """

    def encode(x: Any) -> Value:
        outer = encode_full(x)
        if not isinstance(outer, dict):
            raise DeclarationError(f"{type(x).__name__} must encode to an object to flatten {sub!r}")
        if sub not in outer:
            raise DeclarationError(f"{type(x).__name__} has no field encoded as {sub!r}")
        rest = {key: value for key, value in outer.items() if key != sub}
        return merge_objects(rest, outer[sub])

    return encode


def unflatten_sub(sub: str, decode_full: Decoder) -> Decoder:
    """Inverse of ``flatten_sub``.

    The whole input object is duplicated under ``sub``; the decoder of the
    sub field picks out its own keys and ignores the rest.
    """

    def decode(value: Value) -> Any:
        if not isinstance(value, dict):
            raise DeclarationError(f"cannot restore {sub!r} from {type(value).__name__}, expected an object")
        return decode_full({**value, sub: dict(value)})

    return decode


def with_defaults(decode: Decoder, defaults: Iterable[tuple[str, Value]]) -> Decoder:
    """Fill keys missing from an input object before decoding it."""
    fallback = dict(defaults)

    def decode_with_defaults(value: Value) -> Any:
        if not isinstance(value, dict):
            raise DecodeError(f"expected an object, got {type(value).__name__}")
        return decode(merge_objects(value, fallback))

    return decode_with_defaults


def is_empty(value: Value) -> bool:
    return value is None or value == {} or value == []
