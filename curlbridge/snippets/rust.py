"""Render a request as an async Rust program using ``reqwest``."""
from ..http import FormUrlEncodedBody, http_method, RawBody, Request
from .headers import effective_headers, form_encode

# reqwest::Client has no shorthand for OPTIONS.
SHORTHAND_METHODS = {
    http_method.GET,
    http_method.POST,
    http_method.PUT,
    http_method.PATCH,
    http_method.DELETE,
    http_method.HEAD,
}

_RUST_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\0": "\\0",
}


def rust_string(value: str) -> str:
    """Write ``value`` as a Rust string literal."""
    escaped = []
    for c in value:
        if c in _RUST_ESCAPES:
            escaped.append(_RUST_ESCAPES[c])
        elif ord(c) < 0x20 or ord(c) == 0x7F:
            escaped.append(f"\\u{{{ord(c):x}}}")
        else:
            escaped.append(c)
    return '"' + "".join(escaped) + '"'


def rust_body_string(value: str) -> str:
    """Prefer a raw string so payloads such as JSON stay readable."""
    if '"#' in value or "\r" in value:
        return rust_string(value)
    return f'r#"{value}"#'


def render(request: Request) -> str:
    """Render ``request`` as a ``#[tokio::main]`` program."""
    url = rust_string(request.url)
    if request.method in SHORTHAND_METHODS:
        call = f"client.{request.method.value.lower()}({url})"
    else:
        call = f"client.request(reqwest::Method::{request.method.value}, {url})"

    lines = [
        "#[tokio::main]",
        "async fn main() -> Result<(), reqwest::Error> {",
        "    let client = reqwest::Client::new();",
        f"    let res = {call}",
    ]

    for name, value in effective_headers(request).items():
        lines.append(f"        .header({rust_string(name)}, {rust_string(value)})")

    match request.body:
        case RawBody(content=content):
            lines.append(f"        .body({rust_body_string(content)})")
        case FormUrlEncodedBody(fields=fields):
            lines.append(f"        .body({rust_string(form_encode(fields))})")

    lines.extend(
        [
            "        .send()",
            "        .await?;",
            '    println!("{}", res.text().await?);',
            "    Ok(())",
            "}",
        ]
    )

    return "\n".join(lines)
