from api_snippet_gen.generator.validator import validate_json, validate_python, validate_snippets


class TestValidatePython:
    def test_valid_code(self):
        errors = validate_python({"001_get.py": "import requests\nx = 1\n"})
        assert errors == {}

    def test_syntax_error(self):
        errors = validate_python({"001_get.py": 'requests.get("x"\n    params={}\n)'})
        assert "001_get.py" in errors
        assert "SyntaxError" in errors["001_get.py"]

    def test_skips_non_python(self):
        errors = validate_python({"body.json": "{", "001_get.py": "x = 1"})
        assert errors == {}

    def test_skips_empty(self):
        assert validate_python({"001_get.py": ""}) == {}


class TestValidateJson:
    def test_valid_json(self):
        assert validate_json({"body.json": '{"name":"string"}'}) == {}

    def test_invalid_json(self):
        errors = validate_json({"body.json": '{"name":'})
        assert "JSONDecodeError" in errors["body.json"]

    def test_non_finite_constants_rejected(self):
        errors = validate_json({"a.json": '{"value":NaN}', "b.json": "[-Infinity]"})
        assert set(errors) == {"a.json", "b.json"}
        assert "NaN" in errors["a.json"]

    def test_skips_non_json(self):
        assert validate_json({"x.py": "{"}) == {}


class TestValidateSnippets:
    def test_all_valid(self):
        files = {"001_get.py": "x = 1\n", "001_get_body.json": "{}"}
        assert validate_snippets(files) == {}

    def test_collects_both_kinds(self):
        files = {"001_get.py": "def f(\n", "002_post_body.json": "[1,"}
        assert set(validate_snippets(files)) == {"001_get.py", "002_post_body.json"}
