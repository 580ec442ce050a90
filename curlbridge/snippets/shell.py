"""Render a request as a ``curl`` command."""
import json

from ..http import BasicAuth, FormUrlEncodedBody, RawBody, Request
from .headers import effective_headers, form_encode, is_json

LINE_SEPARATOR = " \\\n  "


def shell_quote(value: str) -> str:
    """Wrap ``value`` in single quotes, writing embedded quotes as ``'\\''``."""
    return "'" + value.replace("'", "'\\''") + "'"


def render(request: Request) -> str:
    """Render ``request`` as a multi-line curl command."""
    parts = [
        "curl",
        f"--request {request.method.value}",
        f"--url {shell_quote(request.url)}",
    ]

    for name, value in effective_headers(request, include_basic_auth=False).items():
        parts.append(f"--header '{name}: {value}'")

    auth = request.auth
    if isinstance(auth, BasicAuth) and not request.has_header("Authorization"):
        parts.append(f"--user {shell_quote(f'{auth.username}:{auth.password}')}")

    if not request.verify_ssl:
        parts.append("--insecure")

    match request.body:
        case RawBody(content=content, content_type=content_type):
            data = content
            if is_json(content_type):
                try:
                    data = json.dumps(json.loads(content), indent=2, ensure_ascii=False)
                except json.JSONDecodeError:
                    pass  # sent exactly as written
            parts.append(f"--data {shell_quote(data)}")
        case FormUrlEncodedBody(fields=fields):
            parts.append(f"--data {shell_quote(form_encode(fields))}")

    return LINE_SEPARATOR.join(parts)
