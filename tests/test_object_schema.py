import pytest

from openapi_dsl.exceptions import SchemaTypeError
from openapi_dsl.schema.constructors import array, integer, obj, object_, ref, string


class TestObject:
    def test_required_derived_from_flags(self):
        schema = object_({"a": string(), "b": string.optional()}).to_schema()
        assert schema["required"] == ["a"]
        assert schema["properties"] == {"a": {"type": "string"}, "b": {"type": "string"}}

    def test_shape(self):
        schema = object_({"id": integer()}, "A user").to_schema()
        assert schema == {
            "type": "object",
            "additionalProperties": False,
            "required": ["id"],
            "properties": {"id": {"type": "integer"}},
            "description": "A user",
        }

    def test_required_follows_declaration_order(self):
        schema = object_({"z": string(), "m": string.optional(), "a": string()}).to_schema()
        assert schema["required"] == ["z", "a"]
        assert list(schema["properties"]) == ["z", "m", "a"]

    def test_empty_object_omits_required(self):
        schema = object_({}).to_schema()
        assert "required" not in schema
        assert schema["properties"] == {}

    def test_all_optional_omits_required(self):
        schema = object_({"a": string.optional()}).to_schema()
        assert "required" not in schema

    def test_extra_required_replaces_derived_list(self):
        schema = object_({"a": string(), "b": string()}, extra={"required": ["b"]}).to_schema()
        assert schema["required"] == ["b"]

    def test_extra_can_open_object(self):
        schema = object_({"a": string()}, extra={"additionalProperties": True}).to_schema()
        assert schema["additionalProperties"] is True

    def test_no_flag_leaks_into_nested_properties(self):
        inner = object_({"x": string.optional()})
        schema = object_({"inner": inner}).to_schema()
        assert schema["properties"]["inner"] == {
            "type": "object",
            "additionalProperties": False,
            "properties": {"x": {"type": "string"}},
        }

    def test_nested_optional_object(self):
        address = object_.optional({"city": string()})
        schema = object_({"name": string(), "address": address}).to_schema()
        assert schema["required"] == ["name"]
        assert schema["properties"]["address"]["required"] == ["city"]

    def test_array_of_objects(self):
        schema = array(object_({"id": integer()})).to_schema()
        assert schema["items"]["required"] == ["id"]

    def test_plain_mapping_property_is_required(self):
        schema = object_({"pet": {"$ref": "#/components/schemas/Pet"}}).to_schema()
        assert schema["required"] == ["pet"]

    def test_non_string_property_name(self):
        with pytest.raises(SchemaTypeError):
            object_({1: string()})

    def test_obj_alias(self):
        assert obj is object_

    def test_nodes_inside_extra_are_emitted(self):
        schema = object_({"a": string()}, extra={"allOf": [ref("Base")], "not": integer()}).to_schema()
        assert schema["allOf"] == [{"$ref": "#/components/schemas/Base"}]
        assert schema["not"] == {"type": "integer"}
