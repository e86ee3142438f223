"""Validates generated snippets for syntax errors.

Snippets are only parsed, never executed.
"""

import ast
import json


def validate_python(snippets: dict[str, str]) -> dict[str, str]:
    """Check Python snippets for syntax errors.

    Returns dict of {name: error_message} for snippets with errors.
    """
    errors = {}
    for name, content in snippets.items():
        if not name.endswith(".py"):
            continue
        if not content.strip():
            continue
        try:
            ast.parse(content, filename=name)
        except SyntaxError as e:
            errors[name] = f"SyntaxError: {e.msg} (line {e.lineno})"
    return errors


def _reject_constant(name: str):
    raise ValueError(f"non-standard JSON constant {name}")


def validate_json(snippets: dict[str, str]) -> dict[str, str]:
    """Check JSON fragments (request bodies, query maps) for format errors.

    NaN and Infinity are rejected: other languages cannot parse them.
    """
    errors = {}
    for name, content in snippets.items():
        if not name.endswith(".json"):
            continue
        try:
            json.loads(content, parse_constant=_reject_constant)
        except json.JSONDecodeError as e:
            errors[name] = f"JSONDecodeError: {e.msg} (line {e.lineno})"
        except ValueError as e:
            errors[name] = f"ValueError: {e}"
    return errors


def validate_snippets(snippets: dict[str, str]) -> dict[str, str]:
    """Run all validations. Returns {name: error_message} for every failure."""
    errors = {}
    errors.update(validate_python(snippets))
    errors.update(validate_json(snippets))
    return errors
