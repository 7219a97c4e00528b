"""Derive Swagger schemas from Python types.

>>> from pydantic import BaseModel
>>> class Person(BaseModel):
...     name: str
...     age: int
>>> to_schema(Person).to_json()
{'type': 'object', 'required': ['name', 'age'], 'properties': {'name': {'type': 'string'}, 'age': {'type': 'integer'}}}

Sums of record types are described the way ``ObjectWithSingleField`` encodes
them: an object with exactly one property named after the variant.
"""

import dataclasses
import types
import typing
from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel

from swagger_model.core.model import DocumentModel
from swagger_model.core.options import JsonOptions, default_options
from swagger_model.swagger.schema import Items, ParamSchema, Reference, Schema, SwaggerType

_PRIMITIVES = {
    bool: SwaggerType.BOOLEAN,
    int: SwaggerType.INTEGER,
    float: SwaggerType.NUMBER,
    str: SwaggerType.STRING,
}

_SEQUENCES = (list, set, frozenset, tuple)


def _typed(swagger_type: SwaggerType, **keywords: Any) -> ParamSchema:
    return ParamSchema(type=swagger_type, **keywords)


def _strip_optional(tp: Any) -> Any:
    if typing.get_origin(tp) is Annotated:
        return _strip_optional(typing.get_args(tp)[0])
    if typing.get_origin(tp) in (Union, types.UnionType):
        args = [arg for arg in typing.get_args(tp) if arg is not type(None)]
        if len(args) == 1:
            return _strip_optional(args[0])
    return tp


def _choices_schema(values: list[Any]) -> ParamSchema:
    if all(isinstance(value, bool) for value in values):
        return _typed(SwaggerType.BOOLEAN, enum=values)
    if all(isinstance(value, int) and not isinstance(value, bool) for value in values):
        return _typed(SwaggerType.INTEGER, enum=values)
    return _typed(SwaggerType.STRING, enum=[str(value) for value in values])


def _record_fields(tp: type) -> list[tuple[str, Any, bool]]:
    """(document key, annotation, required) for every field of a record type."""
    if isinstance(tp, type) and issubclass(tp, DocumentModel):
        keys = tp.document_keys()
        return [(keys[name], field.annotation, field.is_required()) for name, field in tp.model_fields.items()]
    if isinstance(tp, type) and issubclass(tp, BaseModel):
        return [
            (field.alias or name, field.annotation, field.is_required()) for name, field in tp.model_fields.items()
        ]
    hints = typing.get_type_hints(tp)
    return [
        (
            field.name,
            hints.get(field.name, Any),
            field.default is dataclasses.MISSING and field.default_factory is dataclasses.MISSING,
        )
        for field in dataclasses.fields(tp)
    ]


def is_record(tp: Any) -> bool:
    return isinstance(tp, type) and (issubclass(tp, BaseModel) or dataclasses.is_dataclass(tp))


def to_param_schema(tp: Any) -> ParamSchema:
    """Schema of a primitive value: a number, string, boolean or enum."""
    tp = _strip_optional(tp)
    if tp in _PRIMITIVES:
        return _typed(_PRIMITIVES[tp])
    if typing.get_origin(tp) is Literal:
        return _choices_schema(list(typing.get_args(tp)))
    if isinstance(tp, type) and issubclass(tp, Enum):
        return _choices_schema([member.value for member in tp])
    raise TypeError(f"{tp!r} has no primitive parameter schema")


def to_items(tp: Any) -> Items:
    """Schema of a non-body parameter: a primitive or an array of primitives."""
    tp = _strip_optional(tp)
    origin = typing.get_origin(tp)
    if origin in _SEQUENCES:
        args = [arg for arg in typing.get_args(tp) if arg is not Ellipsis]
        item = to_items(args[0]) if args else None
        return Items(
            items=item,
            param_schema=_typed(SwaggerType.ARRAY, unique_items=True if origin in (set, frozenset) else None),
        )
    return Items(param_schema=to_param_schema(tp))


def to_schema(tp: Any, options: JsonOptions | None = None) -> Schema:
    """Schema describing values of ``tp``.

    ``options`` supplies the tag modifier used for unions of record types.
    A record type met again while it is being described becomes a
    ``{"$ref": "#/definitions/<Name>"}`` reference.
    """
    return _derive(tp, options or default_options(), ())


def _derive(tp: Any, options: JsonOptions, enclosing: tuple[type, ...]) -> Schema | Reference:
    tp = _strip_optional(tp)
    origin = typing.get_origin(tp)

    if tp is Any:
        return Schema()
    if origin in _SEQUENCES:
        args = [arg for arg in typing.get_args(tp) if arg is not Ellipsis]
        return Schema(
            items=_derive(args[0], options, enclosing) if args else None,
            param_schema=_typed(SwaggerType.ARRAY, unique_items=True if origin in (set, frozenset) else None),
        )
    if origin is dict:
        args = typing.get_args(tp)
        return Schema(
            additional_properties=_derive(args[1], options, enclosing) if args else None,
            param_schema=_typed(SwaggerType.OBJECT),
        )
    if origin in (Union, types.UnionType):
        variants = typing.get_args(tp)
        if not all(is_record(variant) for variant in variants):
            raise TypeError(f"cannot describe {tp!r}: only unions of record types are supported")
        return Schema(
            properties={
                options.constructor_tag_modifier(variant.__name__): _derive(variant, options, enclosing)
                for variant in variants
            },
            max_properties=1,
            min_properties=1,
            param_schema=_typed(SwaggerType.OBJECT),
        )
    if is_record(tp):
        if tp in enclosing:
            return Reference(ref=f"#/definitions/{tp.__name__}")
        fields = _record_fields(tp)
        return Schema(
            required=[key for key, _, required in fields if required],
            properties={key: _derive(annotation, options, enclosing + (tp,)) for key, annotation, _ in fields},
            param_schema=_typed(SwaggerType.OBJECT),
        )
    return Schema(param_schema=to_param_schema(tp))
