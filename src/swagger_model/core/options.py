"""Options consumed by the generic document encoder and decoder."""

from collections.abc import Callable

from pydantic import BaseModel, ConfigDict

from .keys import make_key_mapper


def _identity(name: str) -> str:
    return name


class TaggedObject(BaseModel):
    """Encode a variant as its record fields plus a tag field.

    Variants that are not records keep their payload under
    ``contents_field_name``.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    tag_field_name: str = "tag"
    contents_field_name: str = "contents"


class ObjectWithSingleField(BaseModel):
    """Encode a variant as ``{tag: payload}``."""

    model_config = ConfigDict(frozen=True, extra="forbid")


SumEncoding = TaggedObject | ObjectWithSingleField


class JsonOptions(BaseModel):
    """How field names, variant tags and sums are written to documents."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    field_label_modifier: Callable[[str], str] = _identity
    constructor_tag_modifier: Callable[[str], str] = _identity
    sum_encoding: SumEncoding = TaggedObject()
    omit_nothing_fields: bool = False


def default_options() -> JsonOptions:
    return JsonOptions()


def options_for_prefix(prefix: str) -> JsonOptions:
    """Baseline options with ``prefix`` stripped from fields and variant tags."""
    modifier = make_key_mapper(prefix)
    return default_options().model_copy(
        update={
            "field_label_modifier": modifier,
            "constructor_tag_modifier": modifier,
            "sum_encoding": ObjectWithSingleField(),
        }
    )


json_prefix = options_for_prefix


def options_for_type(cls: type) -> JsonOptions:
    """Options keyed on a type's own name, e.g. ``Info`` for ``InfoTitle``."""
    return options_for_prefix(cls.__name__)
