"""Render a request as a Go ``net/http`` program.

Errors are assigned to ``_``; the program illustrates the call rather than handling
failures.
"""
from ..http import FormUrlEncodedBody, RawBody, Request
from .headers import effective_headers, form_encode

_GO_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


def go_string(value: str) -> str:
    """Write ``value`` as an interpreted Go string literal."""
    escaped = []
    for c in value:
        if c in _GO_ESCAPES:
            escaped.append(_GO_ESCAPES[c])
        elif ord(c) < 0x20 or ord(c) == 0x7F:
            escaped.append(f"\\x{ord(c):02x}")
        else:
            escaped.append(c)
    return '"' + "".join(escaped) + '"'


def go_body_string(value: str) -> str:
    """Prefer a raw (backtick) literal so payloads such as JSON stay readable."""
    if "`" in value or "\r" in value:
        return go_string(value)
    return f"`{value}`"


def render(request: Request) -> str:
    """Render ``request`` as a ``main`` package."""
    payload = None
    match request.body:
        case RawBody(content=content):
            payload = go_body_string(content)
        case FormUrlEncodedBody(fields=fields):
            payload = go_string(form_encode(fields))

    imports = ['"fmt"', '"io"', '"net/http"']
    if payload is not None:
        imports.append('"strings"')

    lines = ["package main", "", "import ("]
    lines.extend(f"\t{name}" for name in imports)
    lines.extend([")", "", "func main() {", f"\turl := {go_string(request.url)}"])

    if payload is not None:
        lines.append(f"\tpayload := strings.NewReader({payload})")
        body_argument = "payload"
    else:
        body_argument = "nil"

    lines.append(
        f"\treq, _ := http.NewRequest({go_string(request.method.value)}, url, "
        f"{body_argument})"
    )

    for name, value in effective_headers(request).items():
        lines.append(f"\treq.Header.Add({go_string(name)}, {go_string(value)})")

    lines.extend(
        [
            "\tclient := &http.Client{}",
            "\tres, _ := client.Do(req)",
            "\tdefer res.Body.Close()",
            "\tbody, _ := io.ReadAll(res.Body)",
            "\tfmt.Println(string(body))",
            "}",
        ]
    )

    return "\n".join(lines)
