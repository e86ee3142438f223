"""Load OpenAPI documents from disk and check their outer shape."""

from pathlib import Path

import yaml


class DocumentError(ValueError):
    """Raised when a file does not hold a usable OpenAPI document."""


def load_document(file_path: Path) -> dict:
    """Read a JSON or YAML OpenAPI document.

    JSON is parsed by the YAML loader as well, so both formats share one path.
    """
    text = file_path.read_text(encoding="utf-8")
    try:
        doc = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise DocumentError(f"{file_path}: not valid JSON or YAML ({e})") from e
    return validate_document(doc, source=str(file_path))


def validate_document(doc: object, source: str = "document") -> dict:
    """Reject documents the extractor cannot walk. Returns ``doc`` unchanged."""
    if not isinstance(doc, dict):
        raise DocumentError(f"{source}: expected a mapping at the top level")
    if "openapi" not in doc and "swagger" not in doc:
        raise DocumentError(f"{source}: missing 'openapi' version field")
    paths = doc.get("paths")
    if paths is not None and not isinstance(paths, dict):
        raise DocumentError(f"{source}: 'paths' must be a mapping")
    return doc
