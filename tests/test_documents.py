import json as jsonlib

import pytest
import yaml

from openapi_dsl.documents import document, render
from openapi_dsl.exceptions import RenderError
from openapi_dsl.operations import operation, paths
from openapi_dsl.responses import json
from openapi_dsl.schema.constructors import integer, object_, ref, string


def _paths():
    return paths({"listUsers": operation("get", "/users", {200: json(schema=string())})})


class TestDocument:
    def test_minimal_root(self):
        doc = document("Users API", "1.0.0")
        assert doc == {
            "openapi": "3.0.3",
            "info": {"title": "Users API", "version": "1.0.0"},
            "paths": {},
        }

    def test_paths_and_servers(self):
        doc = document(
            "Users API",
            "1.0.0",
            paths=_paths(),
            description="Manage users",
            servers=[{"url": "https://api.example.com"}],
        )
        assert doc["info"]["description"] == "Manage users"
        assert doc["servers"] == [{"url": "https://api.example.com"}]
        assert "/users" in doc["paths"]

    def test_component_schemas_emitted(self):
        user = object_({"id": integer(), "name": string.optional()})
        doc = document(
            "Users API",
            "1.0.0",
            components={
                "schemas": {"User": user, "Raw": {"type": "string"}},
                "securitySchemes": {"BearerAuth": {"type": "http", "scheme": "bearer"}},
            },
        )
        schemas = doc["components"]["schemas"]
        assert schemas["User"]["required"] == ["id"]
        assert schemas["Raw"] == {"type": "string"}
        assert doc["components"]["securitySchemes"]["BearerAuth"]["scheme"] == "bearer"

    def test_extra_top_level_fields(self):
        doc = document("A", "1", openapi="3.1.0", extra={"security": [{"BearerAuth": []}]})
        assert doc["openapi"] == "3.1.0"
        assert doc["security"] == [{"BearerAuth": []}]


class TestRender:
    def test_yaml_keeps_key_order(self):
        text = render(document("Users API", "1.0.0", paths=_paths()))
        assert text.splitlines()[0] == "openapi: 3.0.3"
        assert yaml.safe_load(text)["paths"]["/users"]["get"]["operationId"] == "listUsers"

    def test_json(self):
        doc = document("Users API", "1.0.0", paths=_paths())
        assert jsonlib.loads(render(doc, "json")) == doc

    def test_unicode_is_kept(self):
        text = render(document("Café", "1.0.0"), "yaml")
        assert "Café" in text

    def test_composed_schema_renders(self):
        pet = object_({"name": string()}, extra={"allOf": [ref("Base")], "oneOf": [object_({"a": string()})]})
        doc = document("Pets", "1.0.0", components={"schemas": {"Pet": pet}})
        rendered = jsonlib.loads(render(doc, "json"))
        assert rendered["components"]["schemas"]["Pet"]["allOf"] == [{"$ref": "#/components/schemas/Base"}]
        assert yaml.safe_load(render(doc))["components"]["schemas"]["Pet"]["oneOf"][0]["required"] == ["a"]

    def test_unknown_format(self):
        with pytest.raises(RenderError):
            render({}, "xml")
