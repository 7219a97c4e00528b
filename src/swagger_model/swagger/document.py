"""The root Swagger object."""

from typing import Any, Literal

from pydantic import BaseModel

from swagger_model.core.errors import DecodeError
from swagger_model.core.model import DocumentModel, document_codec
from swagger_model.swagger.info import ExternalDocs, Info, Tag
from swagger_model.swagger.operation import MimeList, PathItem, Response, Scheme
from swagger_model.swagger.param import Param
from swagger_model.swagger.schema import Schema
from swagger_model.swagger.security import SecurityRequirement, SecurityScheme


class Host(BaseModel):
    """Host name with an optional port, written as ``"name:port"``."""

    name: str
    port: int | None = None

    def __str__(self) -> str:
        if self.port is None:
            return self.name
        return f"{self.name}:{self.port}"


def parse_host(text: str) -> Host:
    """Split ``"name[:port]"``; IPv6 literals are bracketed, ``"[::1]:8080"``."""
    if text.startswith("["):
        end = text.find("]")
        if end == -1:
            raise DecodeError(f"unterminated IPv6 literal in host {text!r}")
        name, rest = text[: end + 1], text[end + 1 :]
        if not rest:
            return Host(name=name)
        if not rest.startswith(":"):
            raise DecodeError(f"unexpected text after IPv6 literal in host {text!r}")
        sep, port = ":", rest[1:]
    else:
        name, sep, port = text.rpartition(":")
    if not sep:
        return Host(name=text)
    if not port.isdigit():
        raise DecodeError(f"invalid port in host {text!r}")
    return Host(name=name, port=int(port))


def _decode_host(value: Any, handler) -> Host:
    if not isinstance(value, str):
        raise DecodeError(f"expected a host string, got {type(value).__name__}")
    return parse_host(value)


HostName = document_codec(Host, decode=_decode_host, encode=lambda host, handler: str(host))


class Swagger(DocumentModel):
    """A complete API description.

    ``Swagger.empty().to_json()`` is ``{"swagger": "2.0", "info": {"title": "", "version": ""}}``.
    Descriptions combine with ``+``, which merges paths, definitions and the
    other maps key by key.
    """

    json_defaults = (("info", {}),)
    json_omit_empty = True

    swagger: Literal["2.0"] = "2.0"
    info: Info
    host: HostName | None = None
    base_path: str | None = None
    schemes: list[Scheme] | None = None
    consumes: MimeList | None = None
    produces: MimeList | None = None
    paths: dict[str, PathItem] = {}
    definitions: dict[str, Schema] = {}
    parameters: dict[str, Param] = {}
    responses: dict[str, Response] = {}
    security_definitions: dict[str, SecurityScheme] = {}
    security: list[SecurityRequirement] = []
    tags: list[Tag] = []
    external_docs: ExternalDocs | None = None
