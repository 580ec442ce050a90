"""Render a request as a JavaScript ``fetch`` call."""
import json

from ..http import FormUrlEncodedBody, RawBody, Request
from .headers import effective_headers, form_encode, is_json

_JS_ESCAPES = {
    "\\": "\\\\",
    "'": "\\'",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


def js_string(value: str) -> str:
    """Write ``value`` as a single quoted JavaScript string literal."""
    return "'" + "".join(_JS_ESCAPES.get(c, c) for c in value) + "'"


def _indent(text: str) -> str:
    return text.replace("\n", "\n  ")


def render(request: Request) -> str:
    """Render ``request`` as ``fetch(url, {method, headers, body});``."""
    headers = json.dumps(effective_headers(request), indent=2, ensure_ascii=False)

    body = None
    match request.body:
        case RawBody(content=content, content_type=content_type):
            body = js_string(content)
            if is_json(content_type):
                try:
                    parsed = json.dumps(
                        json.loads(content), indent=2, ensure_ascii=False
                    )
                    body = f"JSON.stringify({_indent(parsed)})"
                except json.JSONDecodeError:
                    pass
        case FormUrlEncodedBody(fields=fields):
            body = js_string(form_encode(fields))

    lines = [
        f"fetch({js_string(request.url)}, {{",
        f"  method: {js_string(request.method.value)},",
        f"  headers: {_indent(headers)},",
    ]
    if body is not None:
        lines.append(f"  body: {body}")
    else:
        # drop the trailing comma of the last property
        lines[-1] = lines[-1].rstrip(",")
    lines.append("});")

    return "\n".join(lines)
