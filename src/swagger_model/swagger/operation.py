"""Paths, operations and responses."""

from enum import Enum
from typing import Any

from pydantic import Field

from swagger_model.core.maps import parse_keys
from swagger_model.core.model import DocumentModel, document_codec
from swagger_model.swagger.info import ExternalDocs
from swagger_model.swagger.param import Header, Param
from swagger_model.swagger.schema import Referenced, Schema
from swagger_model.swagger.security import SecurityRequirement

MimeList = list[str]

# mime type -> example payload
Example = dict[str, Any]


class Scheme(str, Enum):
    HTTP = "http"
    HTTPS = "https"
    WS = "ws"
    WSS = "wss"


class Response(DocumentModel):
    json_defaults = (("description", ""),)
    json_omit_empty = True

    description: str
    schema_: Referenced[Schema] | None = None
    headers: dict[str, Header] = {}
    examples: Example | None = None


def _decode_status_codes(value: Any, handler) -> Any:
    # the flattened object also holds "default" and vendor extensions
    codes = {key: item for key, item in value.items() if key != "default" and not key.startswith("x-")}
    return handler(parse_keys(int, codes))


StatusCodes = document_codec(dict[int, Referenced[Response]], decode=_decode_status_codes)


class Responses(DocumentModel):
    """Responses of an operation keyed by HTTP status code."""

    json_sub = "responses"
    json_omit_empty = True

    default: Referenced[Response] | None = None
    responses: StatusCodes = Field(default_factory=dict)


class Operation(DocumentModel):
    json_defaults = (("responses", {}),)
    json_omit_empty = True

    tags: list[str] = []
    summary: str | None = None
    description: str | None = None
    external_docs: ExternalDocs | None = None
    operation_id: str | None = None
    consumes: MimeList | None = None
    produces: MimeList | None = None
    parameters: list[Referenced[Param]] = []
    responses: Responses
    schemes: list[Scheme] | None = None
    deprecated: bool | None = None
    security: list[SecurityRequirement] = []


class PathItem(DocumentModel):
    json_omit_empty = True

    get: Operation | None = None
    put: Operation | None = None
    post: Operation | None = None
    delete: Operation | None = None
    options: Operation | None = None
    head: Operation | None = None
    patch: Operation | None = None
    parameters: list[Referenced[Param]] = []
