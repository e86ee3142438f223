from api_snippet_gen.parser import schema
from api_snippet_gen.parser.schema import NIL_UUID, resolve_example


class TestResolveExample:
    def test_missing_schema(self):
        assert resolve_example(None) == "unknown"

    def test_empty_schema(self):
        assert resolve_example({}) == "unknown"

    def test_non_mapping_schema(self):
        assert resolve_example(True) == "unknown"
        assert resolve_example("string") == "unknown"

    def test_string(self):
        assert resolve_example({"type": "string"}) == "string"

    def test_uuid_string(self):
        assert resolve_example({"type": "string", "format": "uuid"}) == NIL_UUID
        assert NIL_UUID == "00000000-0000-0000-0000-000000000000"

    def test_other_string_format(self):
        assert resolve_example({"type": "string", "format": "date-time"}) == "string"

    def test_number_and_integer(self):
        assert resolve_example({"type": "number"}) == 0
        assert resolve_example({"type": "integer", "format": "int64"}) == 0

    def test_boolean(self):
        assert resolve_example({"type": "boolean"}) is True

    def test_unknown_type(self):
        assert resolve_example({"type": "file"}) == "unknown"
        assert resolve_example({"format": "uuid"}) == "unknown"

    def test_list_type_is_unknown(self):
        assert resolve_example({"type": ["string", "null"]}) == "unknown"

    def test_unresolved_ref_is_unknown(self):
        assert resolve_example({"$ref": "#/components/schemas/Pet"}) == "unknown"


class TestExamplePriority:
    def test_example_overrides_type(self):
        assert resolve_example({"type": "string", "example": 42}) == 42

    def test_falsy_examples_are_kept(self):
        assert resolve_example({"type": "integer", "example": 0}) == 0
        assert resolve_example({"type": "boolean", "example": False}) is False
        assert resolve_example({"type": "object", "example": {}}) == {}
        assert resolve_example({"type": "array", "example": []}) == []
        assert resolve_example({"type": "string", "example": None}) is None

    def test_example_without_type(self):
        assert resolve_example({"example": "hello"}) == "hello"

    def test_container_example_is_copied(self):
        node = {"type": "object", "example": {"tags": ["a"]}}
        result = resolve_example(node)
        result["tags"].append("b")
        assert node["example"] == {"tags": ["a"]}


class TestNestedSchemas:
    def test_object_properties_in_declared_order(self):
        result = resolve_example({
            "type": "object",
            "properties": {"b": {"type": "boolean"}, "a": {"type": "number"}},
        })
        assert result == {"b": True, "a": 0}
        assert list(result) == ["b", "a"]

    def test_object_without_properties(self):
        assert resolve_example({"type": "object"}) == {}

    def test_array_wraps_items(self):
        assert resolve_example({"type": "array", "items": {"type": "string"}}) == ["string"]

    def test_array_without_items(self):
        assert resolve_example({"type": "array"}) == []

    def test_array_with_empty_items(self):
        assert resolve_example({"type": "array", "items": {}}) == ["unknown"]

    def test_deeply_nested(self):
        node = {
            "type": "object",
            "properties": {
                "tags": {"type": "array", "items": {"type": "object", "properties": {"id": {"type": "string", "format": "uuid"}}}},
                "meta": {"type": "object", "properties": {"count": {"type": "integer", "example": 7}}},
            },
        }
        assert resolve_example(node) == {"tags": [{"id": NIL_UUID}], "meta": {"count": 7}}

    def test_self_referential_schema_is_bounded(self):
        node = {"type": "object", "properties": {}}
        node["properties"]["child"] = node
        result = resolve_example(node)

        depth = 0
        while isinstance(result, dict):
            result = result["child"]
            depth += 1
        assert result == "unknown"
        assert depth == schema.MAX_DEPTH + 1

    def test_deterministic(self):
        node = {"type": "object", "properties": {"x": {"type": "array", "items": {"type": "integer"}}}}
        assert resolve_example(node) == resolve_example(node)

    def test_input_not_mutated(self):
        node = {"type": "object", "properties": {"a": {"type": "string"}}}
        resolve_example(node)
        assert node == {"type": "object", "properties": {"a": {"type": "string"}}}
