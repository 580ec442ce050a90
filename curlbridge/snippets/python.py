"""Render a request as a Python ``requests`` script."""
import json
import math
from typing import Any

from ..http import FormUrlEncodedBody, RawBody, Request
from .headers import effective_headers, is_json, non_empty_fields

INDENT = "    "


def py_string(value: str) -> str:
    """Write ``value`` as a double quoted Python string literal."""
    # Every escape JSON produces is also a valid Python escape.
    return json.dumps(value, ensure_ascii=False)


def py_literal(value: Any, level: int = 0) -> str:
    """Write a decoded JSON value as a Python literal indented with 4 spaces.

    Args:
        value: A value produced by :func:`json.loads`.
        level: The nesting depth of ``value``.

    Returns:
        Python source code for the value.
    """
    if value is None:
        return "None"
    elif isinstance(value, bool):
        return "True" if value else "False"
    elif isinstance(value, float) and not math.isfinite(value):
        return f'float("{value}")'
    elif isinstance(value, (int, float)):
        return repr(value)
    elif isinstance(value, str):
        return py_string(value)

    inner = INDENT * (level + 1)
    outer = INDENT * level
    if isinstance(value, dict):
        if not value:
            return "{}"
        items = [
            f"{inner}{py_string(str(k))}: {py_literal(v, level + 1)}"
            for k, v in value.items()
        ]
        return "{\n" + ",\n".join(items) + f"\n{outer}}}"
    elif isinstance(value, list):
        if not value:
            return "[]"
        items = [f"{inner}{py_literal(v, level + 1)}" for v in value]
        return "[\n" + ",\n".join(items) + f"\n{outer}]"

    return py_string(str(value))


def _raw_payload(content: str) -> str:
    if '"""' in content or "\\" in content or content.endswith('"'):
        return py_string(content)
    return f'"""{content}"""'


def render(request: Request) -> str:
    """Render ``request`` as a script calling ``requests.request``."""
    lines = [
        "import requests",
        "",
        f"url = {py_string(request.url)}",
        f"headers = {py_literal(effective_headers(request))}",
    ]

    arguments = ["headers=headers"]
    match request.body:
        case RawBody(content=content, content_type=content_type):
            payload_argument = "data=payload"
            payload = _raw_payload(content)
            if is_json(content_type):
                try:
                    payload = py_literal(json.loads(content))
                    payload_argument = "json=payload"
                except json.JSONDecodeError:
                    pass
            lines.append(f"payload = {payload}")
            arguments.append(payload_argument)
        case FormUrlEncodedBody(fields=fields):
            lines.append(f"payload = {py_literal(non_empty_fields(fields))}")
            arguments.append("data=payload")

    if not request.verify_ssl:
        arguments.append("verify=False")

    lines.append(
        f"response = requests.request({py_string(request.method.value)}, url, "
        f"{', '.join(arguments)})"
    )
    lines.append("print(response.text)")

    return "\n".join(lines)
