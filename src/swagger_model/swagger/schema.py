"""Schema objects, references and primitive parameter schemas."""

from enum import Enum
from typing import Any, Union

from pydantic import Field

from swagger_model.core.model import DocumentModel, document_codec
from swagger_model.swagger.info import ExternalDocs


class SwaggerType(str, Enum):
    STRING = "string"
    NUMBER = "number"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    ARRAY = "array"
    FILE = "file"
    NULL = "null"
    OBJECT = "object"


class CollectionFormat(str, Enum):
    """How array values are joined in a single parameter."""

    CSV = "csv"
    SSV = "ssv"
    TSV = "tsv"
    PIPES = "pipes"
    MULTI = "multi"  # query and formData only


class Reference(DocumentModel):
    """A JSON reference, ``{"$ref": "#/definitions/Pet"}``."""

    ref: str = Field(alias="$ref")


def _decode_referenced(value: Any, handler) -> Any:
    if isinstance(value, dict) and "$ref" in value:
        return Reference.from_json(value)
    return handler(value)


class Referenced:
    """``Referenced[Schema]`` is either a ``Reference`` or an inline ``Schema``."""

    def __class_getitem__(cls, item: Any) -> Any:
        return document_codec(Union[Reference, item], decode=_decode_referenced)


class Xml(DocumentModel):
    json_omit_empty = True

    name: str | None = None
    namespace: str | None = None
    prefix: str | None = None
    attribute: bool | None = None
    wrapped: bool | None = None


class ParamSchema(DocumentModel):
    """Validation keywords shared by parameters, headers, items and schemas."""

    json_omit_empty = True
    json_keep_empty = ("default", "enum")

    default: Any = None
    type: SwaggerType | None = None
    format: str | None = None
    maximum: float | None = None
    exclusive_maximum: bool | None = None
    minimum: float | None = None
    exclusive_minimum: bool | None = None
    max_length: int | None = None
    min_length: int | None = None
    pattern: str | None = None
    max_items: int | None = None
    min_items: int | None = None
    unique_items: bool | None = None
    enum: list[Any] | None = None
    multiple_of: float | None = None


class Items(DocumentModel):
    """Item description of a non-body array parameter or header."""

    json_sub = "param_schema"
    json_omit_empty = True

    collection_format: CollectionFormat | None = None
    items: "Items | None" = None
    param_schema: ParamSchema = Field(default_factory=ParamSchema)


class Schema(DocumentModel):
    json_sub = "param_schema"
    json_omit_empty = True
    json_keep_empty = ("example",)

    title: str | None = None
    description: str | None = None
    required: list[str] = []
    all_of: list[Referenced["Schema"]] | None = None
    properties: dict[str, Referenced["Schema"]] = {}
    additional_properties: Referenced["Schema"] | None = None
    items: Referenced["Schema"] | None = None
    discriminator: str | None = None
    read_only: bool | None = None
    xml: Xml | None = None
    external_docs: ExternalDocs | None = None
    example: Any = None
    max_properties: int | None = None
    min_properties: int | None = None
    param_schema: ParamSchema = Field(default_factory=ParamSchema)


Items.model_rebuild()
Schema.model_rebuild()
