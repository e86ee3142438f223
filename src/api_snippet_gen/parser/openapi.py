"""OpenAPI 3.x operation extractor.

Walks the ``paths`` map of a parsed OpenAPI document and builds one
RequestExample per renderable operation.
"""

from typing import Any

from loguru import logger

from .base import RequestExample, RequestParams
from .schema import resolve_example

DEFAULT_SERVER_URL = "http://localhost"

HTTP_METHODS = ("get", "post", "put", "delete", "patch", "head", "options")
RENDERED_METHODS = ("get", "post", "put", "delete")

JSON_MEDIA_TYPE = "application/json"


def default_server_url(doc: dict) -> str:
    """Return the first declared server URL, or ``DEFAULT_SERVER_URL``."""
    servers = doc.get("servers") or []
    if isinstance(servers, list) and servers and isinstance(servers[0], dict) and servers[0].get("url"):
        return servers[0]["url"]
    return DEFAULT_SERVER_URL


def extract_examples(doc: dict) -> list[RequestExample]:
    """Build request examples in document order.

    Only get/post/put/delete operations are emitted; patch/head/options
    are recognized but dropped.
    """
    examples = []
    paths = doc.get("paths") or {}
    if not isinstance(paths, dict):
        logger.debug("Ignoring non-mapping paths: {}", type(paths).__name__)
        return examples

    for path, path_item in paths.items():
        if not path_item or not isinstance(path_item, dict):
            logger.debug("Skipping empty path item {}", path)
            continue

        for method in path_item:
            if method not in HTTP_METHODS:
                continue
            operation = path_item[method]
            if method not in RENDERED_METHODS or not isinstance(operation, dict):
                logger.debug("Skipping {} {}", method.upper(), path)
                continue

            path_params, query_params = _classify_parameters(operation.get("parameters") or [])
            body = _resolve_body(operation.get("requestBody"))

            examples.append(
                RequestExample(
                    method=method.upper(),
                    path=str(path),
                    params=RequestParams(path=path_params, query=query_params, body=body),
                )
            )

    logger.debug("Extracted {} request examples", len(examples))
    return examples


def _classify_parameters(params: list) -> tuple[dict[str, Any], dict[str, Any]]:
    path_params: dict[str, Any] = {}
    query_params: dict[str, Any] = {}
    if not isinstance(params, list):
        return path_params, query_params
    for p in params:
        if not isinstance(p, dict) or "name" not in p:
            continue
        name = str(p["name"])
        example = resolve_example(p.get("schema"))
        # Duplicate names: last one wins.
        if p.get("in") == "path":
            path_params[name] = example
        elif p.get("in") == "query":
            query_params[name] = example
    return path_params, query_params


def _resolve_body(body: dict | None) -> Any:
    if not isinstance(body, dict):
        return None
    content = body.get("content")
    if not isinstance(content, dict):
        return None
    media_type = content.get(JSON_MEDIA_TYPE)
    if not isinstance(media_type, dict):
        return None
    return resolve_example(media_type.get("schema"))
