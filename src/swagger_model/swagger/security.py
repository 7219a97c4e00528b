"""Security schemes and requirements."""

from enum import Enum

from swagger_model.core.model import DocumentModel, sum_type
from swagger_model.core.options import TaggedObject, options_for_prefix


class ApiKeyLocation(str, Enum):
    QUERY = "query"
    HEADER = "header"


class OAuth2Flow(str, Enum):
    IMPLICIT = "implicit"
    PASSWORD = "password"
    APPLICATION = "application"
    ACCESS_CODE = "accessCode"


class SecuritySchemeBasic(DocumentModel):
    pass


class SecuritySchemeApiKey(DocumentModel):
    name: str
    in_: ApiKeyLocation


class SecuritySchemeOauth2(DocumentModel):
    json_omit_empty = True

    flow: OAuth2Flow
    authorization_url: str | None = None
    token_url: str | None = None
    scopes: dict[str, str] = {}


# {"type": "basic"}, {"type": "apiKey", ...}, {"type": "oauth2", ...}
SecuritySchemeType = sum_type(
    SecuritySchemeBasic,
    SecuritySchemeApiKey,
    SecuritySchemeOauth2,
    options=options_for_prefix("SecurityScheme").model_copy(
        update={"sum_encoding": TaggedObject(tag_field_name="type")}
    ),
)


class SecurityScheme(DocumentModel):
    json_sub = "type_"
    json_omit_empty = True

    type_: SecuritySchemeType
    description: str | None = None


# scheme name -> required scopes
SecurityRequirement = dict[str, list[str]]
