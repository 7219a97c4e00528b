"""swagger-model - typed Swagger 2.0 documents.

Every Swagger type converts to and from structured documents (the values
``json.loads`` produces)::

    >>> Swagger.empty().to_json()
    {'swagger': '2.0', 'info': {'title': '', 'version': ''}}

``to_schema`` derives a ``Schema`` from a pydantic model, dataclass or
primitive type.
"""

from swagger_model.core.codec import Value, flatten_sub, merge_objects, unflatten_sub, with_defaults
from swagger_model.core.errors import DecodeError, DeclarationError, SwaggerModelError
from swagger_model.core.keys import lower_first_uppers, make_key_mapper
from swagger_model.core.maps import parse_keys, rename_keys, try_rename_keys
from swagger_model.core.model import DocumentModel, document_codec, sum_type
from swagger_model.core.options import (
    JsonOptions,
    ObjectWithSingleField,
    TaggedObject,
    default_options,
    json_prefix,
    options_for_prefix,
    options_for_type,
)
from swagger_model.derive import to_items, to_param_schema, to_schema
from swagger_model.swagger.document import Host, Swagger
from swagger_model.swagger.info import Contact, ExternalDocs, Info, License, Tag
from swagger_model.swagger.operation import (
    Example,
    MimeList,
    Operation,
    PathItem,
    Response,
    Responses,
    Scheme,
)
from swagger_model.swagger.param import Header, Param, ParamAnySchema, ParamBody, ParamLocation, ParamOther
from swagger_model.swagger.schema import (
    CollectionFormat,
    Items,
    ParamSchema,
    Reference,
    Referenced,
    Schema,
    SwaggerType,
    Xml,
)
from swagger_model.swagger.security import (
    ApiKeyLocation,
    OAuth2Flow,
    SecurityRequirement,
    SecurityScheme,
    SecuritySchemeApiKey,
    SecuritySchemeBasic,
    SecuritySchemeOauth2,
    SecuritySchemeType,
)

__version__ = "0.1.0"

__all__ = [
    "ApiKeyLocation",
    "CollectionFormat",
    "Contact",
    "DecodeError",
    "DeclarationError",
    "DocumentModel",
    "Example",
    "ExternalDocs",
    "Header",
    "Host",
    "Info",
    "Items",
    "JsonOptions",
    "License",
    "MimeList",
    "OAuth2Flow",
    "ObjectWithSingleField",
    "Operation",
    "Param",
    "ParamAnySchema",
    "ParamBody",
    "ParamLocation",
    "ParamOther",
    "ParamSchema",
    "PathItem",
    "Reference",
    "Referenced",
    "Response",
    "Responses",
    "Schema",
    "Scheme",
    "SecurityRequirement",
    "SecurityScheme",
    "SecuritySchemeApiKey",
    "SecuritySchemeBasic",
    "SecuritySchemeOauth2",
    "SecuritySchemeType",
    "Swagger",
    "SwaggerModelError",
    "SwaggerType",
    "Tag",
    "TaggedObject",
    "Value",
    "Xml",
    "default_options",
    "document_codec",
    "flatten_sub",
    "json_prefix",
    "lower_first_uppers",
    "make_key_mapper",
    "merge_objects",
    "options_for_prefix",
    "options_for_type",
    "parse_keys",
    "rename_keys",
    "sum_type",
    "to_items",
    "to_param_schema",
    "to_schema",
    "try_rename_keys",
    "unflatten_sub",
    "with_defaults",
]
