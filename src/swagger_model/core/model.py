"""Generic document encoding and decoding for pydantic models.

A ``DocumentModel`` converts to and from structured documents with
``to_json`` / ``from_json``. Plain pydantic behaviour (``model_dump``,
keyword construction) is left untouched: document mode is switched on
through the validation/serialization context only.

Per-type configuration lives in class variables::

    class Info(DocumentModel):
        json_defaults = (("title", ""), ("version", ""))

        title: str
        terms_of_service: str | None = None   # -> "termsOfService"
"""

from collections.abc import Callable
from typing import Annotated, Any, ClassVar, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    SerializationInfo,
    TypeAdapter,
    ValidationError,
    ValidationInfo,
    WrapSerializer,
    WrapValidator,
    model_serializer,
    model_validator,
)
from pydantic_core import PydanticSerializationError

from .codec import Value, flatten_sub, is_empty, unflatten_sub, with_defaults
from .errors import DecodeError, DeclarationError
from .maps import rename_keys
from .options import JsonOptions, ObjectWithSingleField, options_for_type

DOCUMENT_KEY = "swagger_model.document"
FAILURE_KEY = "swagger_model.failure"
ENCODING_KEY = "swagger_model.encoding"


def document_context() -> dict[str, Any]:
    return {DOCUMENT_KEY: True}


def in_document_mode(info: ValidationInfo | SerializationInfo) -> bool:
    context = info.context
    return bool(context) and context.get(DOCUMENT_KEY, False)


def _record_failure(info: SerializationInfo, exc: DeclarationError) -> None:
    # pydantic wraps errors raised by serializers; to_json re-raises this one
    info.context.setdefault(FAILURE_KEY, exc)


class _FieldValues(dict):
    """Attribute-keyed values already picked out of a document."""


def declared_name(prefix: str, attribute: str) -> str:
    """``("Info", "terms_of_service")`` -> ``"InfoTermsOfService"``."""
    return prefix + "".join(part[:1].upper() + part[1:] for part in attribute.split("_"))


class DocumentModel(BaseModel):
    """Base class for types with a structured document form."""

    model_config = ConfigDict(populate_by_name=True)

    json_options: ClassVar[JsonOptions | None] = None
    json_sub: ClassVar[str | None] = None
    json_defaults: ClassVar[tuple[tuple[str, Value], ...]] = ()
    json_omit_empty: ClassVar[bool] = False
    # written even when empty, as long as they were given explicitly
    json_keep_empty: ClassVar[tuple[str, ...]] = ()

    @classmethod
    def document_options(cls) -> JsonOptions:
        if cls.json_options is not None:
            return cls.json_options
        return options_for_type(cls)

    @classmethod
    def document_keys(cls) -> dict[str, str]:
        """Map attribute names to document keys."""
        modifier = cls.document_options().field_label_modifier
        return {
            name: field.alias or modifier(declared_name(cls.__name__, name))
            for name, field in cls.model_fields.items()
        }

    @classmethod
    def from_json(cls, value: Value):
        """Decode a structured document, raising ``DecodeError`` on bad input."""
        try:
            return cls.model_validate(value, context=document_context())
        except ValidationError as exc:
            raise DecodeError(f"cannot decode {cls.__name__}: {exc}") from exc

    @classmethod
    def empty(cls):
        """The value decoded from an empty object, i.e. every default filled in."""
        return cls.from_json({})

    def to_json(self) -> Value:
        context = document_context()
        try:
            return self.model_dump(mode="json", context=context)
        except PydanticSerializationError as exc:
            failure = context.get(FAILURE_KEY)
            if failure is None:
                raise
            raise failure from exc

    def merge(self, other):
        """Combine two values field by field, preferring ``self`` on conflicts."""
        if type(other) is not type(self):
            raise TypeError(f"cannot merge {type(self).__name__} with {type(other).__name__}")
        return type(self).model_construct(
            _fields_set=self.model_fields_set | other.model_fields_set,
            **{name: merge_values(getattr(self, name), getattr(other, name)) for name in type(self).model_fields},
        )

    def __add__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.merge(other)

    @classmethod
    def _generic_decoder(cls, handler: Callable[[Any], Any]) -> Callable[[Value], Any]:
        keys = cls.document_keys()
        targets = {name: field.alias or name for name, field in cls.model_fields.items()}

        def decode_fields(value: dict[str, Value]) -> Any:
            return handler(_FieldValues((targets[name], value[key]) for name, key in keys.items() if key in value))

        decode = decode_fields
        if cls.json_sub is not None:
            decode = unflatten_sub(keys[cls.json_sub], decode)
        if cls.json_defaults:
            decode = with_defaults(decode, cls.json_defaults)

        def decode_object(value: Value) -> Any:
            if not isinstance(value, dict):
                raise DecodeError(f"expected an object for {cls.__name__}, got {type(value).__name__}")
            return decode(value)

        return decode_object

    @classmethod
    def _generic_encoder(cls, handler: Callable[[Any], Any]) -> Callable[[Any], Value]:
        keys = cls.document_keys()
        omit_nothing = cls.document_options().omit_nothing_fields

        def omitted(model: Any, name: str, value: Any) -> bool:
            if name == cls.json_sub:
                return False
            if cls.json_omit_empty and is_empty(value):
                return name not in cls.json_keep_empty or name not in model.model_fields_set
            return omit_nothing and value is None

        def encode(model: Any) -> Value:
            data = {name: value for name, value in handler(model).items() if not omitted(model, name, value)}
            return rename_keys(keys.__getitem__, data)

        if cls.json_sub is not None:
            encode = flatten_sub(keys[cls.json_sub], encode)
        return encode

    @model_validator(mode="wrap")
    @classmethod
    def _from_document(cls, data: Any, handler, info: ValidationInfo) -> Any:
        # a nested model may see the values it handed to pydantic a second time
        if not in_document_mode(info) or isinstance(data, (cls, _FieldValues)):
            return handler(data)
        return cls._generic_decoder(handler)(data)

    @model_serializer(mode="wrap")
    def _to_document(self, handler, info: SerializationInfo) -> Any:
        if not in_document_mode(info):
            return handler(self)
        encoding = info.context.setdefault(ENCODING_KEY, set())
        if id(self) in encoding:
            return handler(self)
        encoding.add(id(self))
        try:
            return type(self)._generic_encoder(handler)(self)
        except DeclarationError as exc:
            _record_failure(info, exc)
            raise
        finally:
            encoding.discard(id(self))


def merge_values(left: Any, right: Any) -> Any:
    """Merge two field values. Empty values give way; strings and other scalars keep ``left``."""
    if left is None or (isinstance(left, (str, list, dict)) and not left):
        return right
    if right is None:
        return left
    if isinstance(left, DocumentModel) and type(left) is type(right):
        return left.merge(right)
    if isinstance(left, dict) and isinstance(right, dict):
        merged = dict(right)
        for key, value in left.items():
            merged[key] = merge_values(value, right[key]) if key in right else value
        return merged
    if isinstance(left, list) and isinstance(right, list):
        return left + right
    return left


def document_codec(
    tp: Any,
    *,
    decode: Callable[[Value, Callable[[Any], Any]], Any] | None = None,
    encode: Callable[[Any, Callable[[Any], Any]], Value] | None = None,
) -> Any:
    """Attach hand-written document conversions to an annotation.

    ``decode(value, handler)`` and ``encode(value, handler)`` only run in
    document mode; ``handler`` is pydantic's default conversion for ``tp``.
    """

    def validate(value: Any, handler, info: ValidationInfo) -> Any:
        if decode is None or not in_document_mode(info):
            return handler(value)
        return decode(value, handler)

    def serialize(value: Any, handler, info: SerializationInfo) -> Any:
        if encode is None or not in_document_mode(info):
            return handler(value)
        try:
            return encode(value, handler)
        except DeclarationError as exc:
            _record_failure(info, exc)
            raise

    return Annotated[tp, WrapValidator(validate), WrapSerializer(serialize)]


def _is_record(variant: Any) -> bool:
    return isinstance(variant, type) and issubclass(variant, DocumentModel)


def sum_type(*variants: type, options: JsonOptions) -> Any:
    """Annotation for a union of variants, tagged per ``options.sum_encoding``.

    The tag of a variant is ``options.constructor_tag_modifier`` applied to
    its class name. Record variants are ``DocumentModel`` subclasses; any
    other class is a plain payload, written under the contents field of a
    ``TaggedObject`` encoding.
    """
    tag_of = {variant: options.constructor_tag_modifier(variant.__name__) for variant in variants}
    by_tag = {tag: variant for variant, tag in tag_of.items()}
    adapters = {variant: TypeAdapter(variant) for variant in variants if not _is_record(variant)}
    encoding = options.sum_encoding

    def variant_for(tag: Any) -> type:
        if not isinstance(tag, str) or tag not in by_tag:
            raise DecodeError(f"unknown tag {tag!r}, expected one of {sorted(by_tag)}")
        return by_tag[tag]

    def decode(value: Value, handler) -> Any:
        if not isinstance(value, dict):
            raise DecodeError(f"expected an object for a tagged value, got {type(value).__name__}")
        if isinstance(encoding, ObjectWithSingleField):
            if len(value) != 1:
                raise DecodeError(f"expected an object with a single field, got keys {sorted(value)}")
            [(tag, payload)] = value.items()
            variant = variant_for(tag)
        else:
            variant = variant_for(value.get(encoding.tag_field_name))
            payload = value
            if not _is_record(variant):
                if encoding.contents_field_name not in value:
                    raise DecodeError(f"missing {encoding.contents_field_name!r} for variant {variant.__name__}")
                payload = value[encoding.contents_field_name]
        if not _is_record(variant):
            return adapters[variant].validate_python(payload, context=document_context())
        if not variant.model_fields:
            return variant()
        return variant.from_json(payload)

    def encode(value: Any, handler) -> Value:
        variant = type(value)
        if variant not in tag_of:
            raise DeclarationError(f"{variant.__name__} is not a variant of {sorted(by_tag)}")
        tag = tag_of[variant]
        payload = handler(value)
        if isinstance(encoding, ObjectWithSingleField):
            if _is_record(variant) and not variant.model_fields:
                payload = []
            return {tag: payload}
        if not _is_record(variant):
            return {encoding.tag_field_name: tag, encoding.contents_field_name: payload}
        return {**payload, encoding.tag_field_name: tag}

    return document_codec(Union[variants], decode=decode, encode=encode)
