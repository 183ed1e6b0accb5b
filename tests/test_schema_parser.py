"""Tests for the schema_parser module."""

from swaggergen.schema_parser import (
    enum_declaration,
    is_scalar,
    resolve_type,
    uses_global_type,
)


class TestResolveType:
    """Test Swagger schema -> TypeScript type conversion."""

    def test_string(self):
        assert resolve_type({"type": "string"}) == "string"

    def test_date_time_is_string(self):
        assert resolve_type({"type": "string", "format": "date-time"}) == "string"

    def test_integer(self):
        assert resolve_type({"type": "integer", "format": "int64"}) == "number"

    def test_number(self):
        assert resolve_type({"type": "number"}) == "number"

    def test_boolean(self):
        assert resolve_type({"type": "boolean"}) == "boolean"

    def test_file(self):
        assert resolve_type({"type": "file"}) == "File"

    def test_array_of_strings(self):
        assert resolve_type({"type": "array", "items": {"type": "string"}}) == "string[]"

    def test_nested_arrays(self):
        schema = {"type": "array", "items": {"type": "array", "items": {"type": "integer"}}}
        assert resolve_type(schema) == "number[][]"

    def test_ref(self):
        assert resolve_type({"$ref": "#/definitions/Pet"}) == "__model.Pet"

    def test_ref_generic_name(self):
        assert resolve_type({"$ref": "#/definitions/Page«Pet»"}) == "__model.PagePet"

    def test_array_of_refs(self):
        schema = {"type": "array", "items": {"$ref": "#/definitions/Pet"}}
        assert resolve_type(schema) == "__model.Pet[]"

    def test_enum(self):
        assert resolve_type({"type": "string", "enum": ["a", "b"]}) == "'a' | 'b'"

    def test_array_of_enum(self):
        schema = {"type": "array", "items": {"type": "string", "enum": ["a", "b"]}}
        assert resolve_type(schema) == "('a' | 'b')[]"

    def test_map(self):
        schema = {"type": "object", "additionalProperties": {"type": "integer"}}
        assert resolve_type(schema) == "{[key: string]: number}"

    def test_plain_object(self):
        assert resolve_type({"type": "object"}) == "object"

    def test_inline_object(self):
        schema = {"type": "object", "required": ["a"], "properties": {"a": {"type": "string"}, "b-c": {}}}
        assert resolve_type(schema) == "{a: string; 'b-c'?: any}"

    def test_all_of(self):
        schema = {"allOf": [{"$ref": "#/definitions/A"}, {"$ref": "#/definitions/B"}]}
        assert resolve_type(schema) == "__model.A & __model.B"

    def test_empty_schema(self):
        assert resolve_type({}) == "any"
        assert resolve_type(None) == "any"


class TestPredicates:
    """Test scalar and global-type checks."""

    def test_primitives_are_scalar(self):
        for t in ("string", "number", "boolean", "any", "File"):
            assert is_scalar(t)

    def test_literal_union_is_scalar(self):
        assert is_scalar("'a' | 'b'")
        assert is_scalar("1 | 2")

    def test_model_is_not_scalar(self):
        assert not is_scalar("__model.Pet")

    def test_array_is_not_scalar(self):
        assert not is_scalar("string[]")

    def test_uses_global_type(self):
        assert uses_global_type("__model.Pet[]")
        assert not uses_global_type("string")


class TestEnumDeclaration:
    """Test enum emission."""

    def test_string_enum(self):
        assert enum_declaration("Status", ["on", "in-progress"]) == (
            "export enum Status {\n"
            "  on = 'on',\n"
            "  'in-progress' = 'in-progress',\n"
            "}"
        )

    def test_numeric_enum_is_union(self):
        assert enum_declaration("Level", [1, 2]) == "export type Level = 1 | 2;"
