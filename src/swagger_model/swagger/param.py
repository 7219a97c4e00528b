"""Operation parameters and response headers.

A parameter document mixes the common fields (``name``, ``required``...)
with the fields of its kind::

    {"name": "limit", "in": "query", "type": "integer"}
    {"name": "pet", "in": "body", "schema": {"$ref": "#/definitions/Pet"}}

``Param.schema_`` holds the kind and is flattened into the parameter object.
"""

from enum import Enum
from typing import Any, Union

from pydantic import Field

from swagger_model.core.errors import DecodeError
from swagger_model.core.model import DocumentModel, document_codec
from swagger_model.swagger.schema import CollectionFormat, Items, ParamSchema, Referenced, Schema


class ParamLocation(str, Enum):
    QUERY = "query"
    HEADER = "header"
    PATH = "path"
    FORM_DATA = "formData"


class ParamBody(DocumentModel):
    schema_: Referenced[Schema]


class ParamOther(DocumentModel):
    json_sub = "param_schema"
    json_omit_empty = True

    in_: ParamLocation
    allow_empty_value: bool | None = None
    collection_format: CollectionFormat | None = None
    items: Items | None = None
    param_schema: ParamSchema = Field(default_factory=ParamSchema)


def _decode_param_kind(value: Any, handler) -> Any:
    if not isinstance(value, dict):
        raise DecodeError(f"expected a parameter object, got {type(value).__name__}")
    if value.get("in") == "body":
        return ParamBody.from_json(value)
    return ParamOther.from_json(value)


def _encode_param_kind(value: Any, handler) -> Any:
    payload = handler(value)
    if isinstance(value, ParamBody):
        return {"in": "body", **payload}
    return payload


ParamAnySchema = document_codec(
    Union[ParamBody, ParamOther],
    decode=_decode_param_kind,
    encode=_encode_param_kind,
)


class Param(DocumentModel):
    json_sub = "schema_"
    json_omit_empty = True

    name: str
    description: str | None = None
    required: bool | None = None
    schema_: ParamAnySchema


class Header(DocumentModel):
    json_sub = "param_schema"
    json_omit_empty = True

    description: str | None = None
    collection_format: CollectionFormat | None = None
    items: Items | None = None
    param_schema: ParamSchema = Field(default_factory=ParamSchema)
