"""API metadata: info, contact, license, tags and external docs."""

from swagger_model.core.model import DocumentModel


class Contact(DocumentModel):
    json_omit_empty = True

    name: str | None = None
    url: str | None = None
    email: str | None = None


class License(DocumentModel):
    json_omit_empty = True

    name: str
    url: str | None = None


class Info(DocumentModel):
    """Metadata about the API. ``title`` and ``version`` default to ``""``."""

    json_defaults = (("title", ""), ("version", ""))
    json_omit_empty = True

    title: str
    description: str | None = None
    terms_of_service: str | None = None
    contact: Contact | None = None
    license: License | None = None
    version: str


class ExternalDocs(DocumentModel):
    json_omit_empty = True

    description: str | None = None
    url: str


class Tag(DocumentModel):
    json_omit_empty = True

    name: str
    description: str | None = None
    external_docs: ExternalDocs | None = None
