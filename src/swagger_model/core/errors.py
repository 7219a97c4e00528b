"""Error types shared by the encoding and decoding core.

Two tiers are kept apart on purpose:

- ``DecodeError`` is raised for bad input documents and is safe to catch.
- ``DeclarationError`` means a model type was declared incorrectly (missing
  sub field, sub field not encoding to an object). It is never caught by the
  library.
"""


class SwaggerModelError(Exception):
    """Base class for all swagger-model errors."""


class DecodeError(SwaggerModelError, ValueError):
    """A structured document could not be decoded into a typed value."""


class DeclarationError(SwaggerModelError, RuntimeError):
    """A model type is declared in a way the codec cannot work with."""
