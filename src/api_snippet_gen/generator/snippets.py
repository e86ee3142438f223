"""Snippet renderers, one per target language.

Each renderer is a pure function ``(example, base_url) -> str``. Path
placeholders and query strings are filled in here, never by the extractor.
"""

import json
import math
import re
from typing import Any, Callable
from urllib.parse import quote_plus

from api_snippet_gen.parser.base import RequestExample

PATH_TOKEN = re.compile(r"{(\w+)}", re.ASCII)


def to_text(value: Any) -> str:
    """Stringify a value the way a JavaScript template literal would."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (list, tuple)):
        return ",".join("" if v is None else to_text(v) for v in value)
    if isinstance(value, dict):
        return "[object Object]"
    return str(value)


def to_json(value: Any, indent: int | None = None) -> str:
    if indent is None:
        return json.dumps(value, separators=(",", ":"), ensure_ascii=False, default=str)
    return json.dumps(value, indent=indent, ensure_ascii=False, default=str)


def to_python(value: Any) -> str:
    """Render a JSON-compatible value as a Python literal."""
    if value is None:
        return "None"
    if isinstance(value, bool):
        return "True" if value else "False"
    if isinstance(value, float) and not math.isfinite(value):
        return f'float("{value}")'
    if isinstance(value, (int, float)):
        return repr(value)
    if isinstance(value, dict):
        items = ", ".join(f"{to_python(str(k))}: {to_python(v)}" for k, v in value.items())
        return "{" + items + "}"
    if isinstance(value, (list, tuple)):
        return "[" + ", ".join(to_python(v) for v in value) + "]"
    return json.dumps(str(value), ensure_ascii=False)


def fill_path(path: str, path_params: dict[str, Any]) -> str:
    """Replace every ``{name}`` token with its example value."""
    return PATH_TOKEN.sub(
        lambda m: to_text(path_params[m.group(1)]) if m.group(1) in path_params else "undefined",
        path,
    )


def encode_query(query: dict[str, Any]) -> str:
    """Form-encode query parameters, preserving declaration order."""
    return "&".join(
        f"{quote_plus(str(k), safe='*')}={quote_plus(to_text(v), safe='*')}" for k, v in query.items()
    )


def build_url(example: RequestExample, base_url: str, with_query: bool = True) -> str:
    url = f"{base_url}{fill_path(example.path, example.path_params)}"
    if with_query:
        query = encode_query(example.query_params)
        if query:
            url = f"{url}?{query}"
    return url


def render_curl(example: RequestExample, base_url: str) -> str:
    parts = [f"curl -X {example.method}"]
    if example.body is not None:
        payload = to_json(example.body).replace("'", "'\\''")
        parts.append('-H "Content-Type: application/json"')
        parts.append(f"-d '{payload}'")
    url = build_url(example, base_url).replace("'", "'\\''")
    parts.append(f"'{url}'")
    return " ".join(parts)


def render_python(example: RequestExample, base_url: str) -> str:
    url = build_url(example, base_url, with_query=False)
    args = []
    if example.query_params:
        args.append(f"    params={to_python(example.query_params)},")
    if example.body is not None:
        args.append(f"    json={to_python(example.body)},")

    opener = f"response = requests.{example.method.lower()}({json.dumps(url)}"
    if args:
        args[-1] = args[-1].rstrip(",")
        opener += ","
    return "\n".join(["import requests", "", opener, *args, ")"])


def render_java(example: RequestExample, base_url: str) -> str:
    lines = [
        f'HttpURLConnection conn = (HttpURLConnection) new URL("{build_url(example, base_url)}").openConnection();',
        f'conn.setRequestMethod("{example.method}");',
    ]
    if example.body is not None:
        lines.extend([
            'conn.setRequestProperty("Content-Type", "application/json");',
            "conn.setDoOutput(true);",
            "OutputStream os = conn.getOutputStream();",
            f"os.write({json.dumps(to_json(example.body), ensure_ascii=False)}.getBytes());",
            "os.flush();",
            "os.close();",
        ])
    lines.append("int responseCode = conn.getResponseCode();")
    return "\n".join(lines)


def render_fetch(example: RequestExample, base_url: str) -> str:
    lines = [f"fetch('{build_url(example, base_url)}', {{"]
    if example.body is not None:
        lines.extend([
            f"  method: '{example.method}',",
            "  headers: {",
            '    "Content-Type": "application/json"',
            "  },",
            f"  body: JSON.stringify({to_json(example.body)})",
        ])
    else:
        lines.append(f"  method: '{example.method}'")
    lines.extend([
        "})",
        ".then(response => response.json())",
        ".then(data => console.log(data))",
        '.catch(error => console.error("Error:", error));',
    ])
    return "\n".join(lines)


def render_axios(example: RequestExample, base_url: str) -> str:
    url = build_url(example, base_url, with_query=False)
    lines = [
        "import axios from 'axios';",
        "",
        f"axios.{example.method.lower()}(`{url}`,",
    ]

    config = []
    if example.query_params:
        config.append(f"  params: {to_json(example.query_params, indent=2)}")
    if example.body is not None:
        config.append(f"  data: {to_json(example.body, indent=2)}")
    if config:
        lines.extend(["  {", ",\n".join(config), "  }"])

    lines.extend([
        ")",
        ".then(response => console.log(response.data))",
        ".catch(error => console.error('Error:', error));",
    ])
    return "\n".join(lines)


Renderer = Callable[[RequestExample, str], str]

# Fixed output order for aggregate rendering.
RENDERERS: dict[str, Renderer] = {
    "curl": render_curl,
    "python": render_python,
    "java": render_java,
    "javascript": render_fetch,
    "axios": render_axios,
}
