from dataclasses import dataclass, field
from enum import Enum
from typing import Literal, Optional

import pytest
from pydantic import BaseModel

from swagger_model.core.model import DocumentModel
from swagger_model.core.options import options_for_prefix
from swagger_model.derive import to_items, to_param_schema, to_schema
from swagger_model.swagger.schema import Items, Reference, SwaggerType


class Status(str, Enum):
    ACTIVE = "active"
    BLOCKED = "blocked"


class Person(BaseModel):
    name: str
    age: int
    nickname: Optional[str] = None


@dataclass
class Address:
    street: str
    tags: list[str] = field(default_factory=list)


class Owner(DocumentModel):
    owner_name: str
    owner_pets: list[str] = []


@dataclass
class Tree:
    label: str
    children: list["Tree"] = field(default_factory=list)


class Cat(BaseModel):
    lives: int


class Dog(BaseModel):
    good: bool


class TestParamSchema:
    @pytest.mark.parametrize(
        "tp, swagger_type",
        [(int, SwaggerType.INTEGER), (str, SwaggerType.STRING), (float, SwaggerType.NUMBER), (bool, SwaggerType.BOOLEAN)],
    )
    def test_primitives(self, tp, swagger_type):
        assert to_param_schema(tp).type is swagger_type

    def test_enum(self):
        assert to_param_schema(Status).to_json() == {"type": "string", "enum": ["active", "blocked"]}

    def test_literal(self):
        assert to_param_schema(Literal[1, 2]).to_json() == {"type": "integer", "enum": [1, 2]}

    def test_optional_is_unwrapped(self):
        assert to_param_schema(Optional[int]).type is SwaggerType.INTEGER

    def test_record_rejected(self):
        with pytest.raises(TypeError):
            to_param_schema(Person)


class TestItems:
    def test_array_of_integers(self):
        assert to_items(list[int]).to_json() == {"type": "array", "items": {"type": "integer"}}

    def test_set_is_unique(self):
        assert to_items(set[str]).to_json() == {"type": "array", "uniqueItems": True, "items": {"type": "string"}}

    def test_nested_arrays(self):
        assert to_items(list[list[bool]]).to_json() == {
            "type": "array",
            "items": {"type": "array", "items": {"type": "boolean"}},
        }


class TestSchema:
    def test_pydantic_model(self):
        assert to_schema(Person).to_json() == {
            "type": "object",
            "required": ["name", "age"],
            "properties": {
                "name": {"type": "string"},
                "age": {"type": "integer"},
                "nickname": {"type": "string"},
            },
        }

    def test_dataclass(self):
        assert to_schema(Address).to_json() == {
            "type": "object",
            "required": ["street"],
            "properties": {
                "street": {"type": "string"},
                "tags": {"type": "array", "items": {"type": "string"}},
            },
        }

    def test_document_model_uses_document_keys(self):
        schema = to_schema(Owner)
        assert schema.required == ["ownerName"]
        assert set(schema.properties) == {"ownerName", "ownerPets"}

    def test_dict(self):
        assert to_schema(dict[str, int]).to_json() == {
            "type": "object",
            "additionalProperties": {"type": "integer"},
        }

    def test_list_of_records(self):
        schema = to_schema(list[Person])
        assert schema.param_schema.type is SwaggerType.ARRAY
        assert schema.items.required == ["name", "age"]

    def test_union_of_records(self):
        schema = to_schema(Cat | Dog)
        assert set(schema.properties) == {"Cat", "Dog"}
        assert schema.min_properties == 1
        assert schema.max_properties == 1

    def test_union_tags_follow_options(self):
        schema = to_schema(Cat | Dog, options_for_prefix(""))
        assert set(schema.properties) == {"cat", "dog"}

    def test_union_of_primitives_rejected(self):
        with pytest.raises(TypeError):
            to_schema(int | str)

    def test_recursive_dataclass_refers_to_itself(self):
        assert to_schema(Tree).to_json() == {
            "type": "object",
            "required": ["label"],
            "properties": {
                "label": {"type": "string"},
                "children": {"type": "array", "items": {"$ref": "#/definitions/Tree"}},
            },
        }

    def test_recursive_document_model(self):
        schema = to_schema(Items)
        assert schema.properties["items"] == Reference(ref="#/definitions/Items")
        assert schema.properties["collectionFormat"].param_schema.type is SwaggerType.STRING

    def test_sibling_fields_of_same_type_are_inlined(self):
        class Pair(BaseModel):
            first: Person
            second: Person

        schema = to_schema(Pair)
        assert schema.properties["first"] == schema.properties["second"]
        assert schema.properties["second"].required == ["name", "age"]
