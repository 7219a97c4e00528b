"""Read and write Swagger documents as JSON or YAML files."""

import json
import logging
from pathlib import Path

import yaml

from swagger_model.core.codec import Value
from swagger_model.core.errors import DecodeError
from swagger_model.swagger.document import Swagger

logger = logging.getLogger(__name__)

FORMATS = ("json", "yaml")


def format_from_suffix(file_path: Path) -> str | None:
    suffix = file_path.suffix.lower()
    if suffix == ".json":
        return "json"
    if suffix in (".yaml", ".yml"):
        return "yaml"
    return None


def detect_format(file_path: Path) -> str:
    """Detect whether a document file is JSON or YAML.

    Returns: 'json' or 'yaml'.
    """
    fmt = format_from_suffix(file_path)
    if fmt is not None:
        return fmt

    text = file_path.read_text(encoding="utf-8")
    try:
        json.loads(text)
        return "json"
    except (json.JSONDecodeError, ValueError):
        return "yaml"


def _stringify_keys(value: Value) -> Value:
    # YAML reads unquoted status codes such as 200 as integers
    if isinstance(value, dict):
        return {str(key): _stringify_keys(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_stringify_keys(item) for item in value]
    return value


def load_document(file_path: Path) -> dict[str, Value]:
    """Load a JSON or YAML file into a structured document."""
    fmt = detect_format(file_path)
    text = file_path.read_text(encoding="utf-8")
    try:
        doc = json.loads(text) if fmt == "json" else yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise DecodeError(f"{file_path}: not a valid {fmt.upper()} document ({e})") from e

    if not isinstance(doc, dict):
        raise DecodeError(f"{file_path}: expected a mapping at the top level, got {type(doc).__name__}")
    logger.debug("loaded %s as %s (%d top-level keys)", file_path, fmt, len(doc))
    return _stringify_keys(doc)


def read_swagger(file_path: Path) -> Swagger:
    """Parse a Swagger 2.0 file into a ``Swagger`` model."""
    swagger = Swagger.from_json(load_document(file_path))
    logger.debug("decoded %s: %d paths, %d definitions", file_path, len(swagger.paths), len(swagger.definitions))
    return swagger


def dump_document(value: Value, fmt: str = "json", indent: int = 2) -> str:
    """Render a structured document as JSON or YAML text."""
    if fmt == "json":
        return json.dumps(value, indent=indent, ensure_ascii=False) + "\n"
    if fmt == "yaml":
        return yaml.safe_dump(value, sort_keys=False, allow_unicode=True, indent=indent)
    raise ValueError(f"unknown format {fmt!r}, expected one of {FORMATS}")


def write_document(file_path: Path, value: Value, fmt: str | None = None, indent: int = 2) -> None:
    """Write a structured document, picking the format from the suffix if not given."""
    if fmt is None:
        fmt = format_from_suffix(file_path) or "json"
    file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_text(dump_document(value, fmt, indent), encoding="utf-8")
    logger.debug("wrote %s as %s", file_path, fmt)
