"""Render a request as a Java program using ``java.net.http.HttpClient``."""
from ..http import FormUrlEncodedBody, RawBody, Request
from .headers import effective_headers, form_encode

_JAVA_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\b": "\\b",
    "\f": "\\f",
}


def java_string(value: str) -> str:
    """Write ``value`` as a Java string literal.

    Other control characters use octal escapes. ``\\u`` escapes are translated
    before the source is tokenized, so a ``\\u000a`` would end the literal.
    """
    escaped = []
    for c in value:
        if c in _JAVA_ESCAPES:
            escaped.append(_JAVA_ESCAPES[c])
        elif ord(c) < 0x20 or ord(c) == 0x7F:
            escaped.append(f"\\{ord(c):03o}")
        else:
            escaped.append(c)
    return '"' + "".join(escaped) + '"'


def render(request: Request) -> str:
    """Render ``request`` as a ``Main`` class."""
    match request.body:
        case RawBody(content=content):
            publisher = f"HttpRequest.BodyPublishers.ofString({java_string(content)})"
        case FormUrlEncodedBody(fields=fields):
            publisher = (
                f"HttpRequest.BodyPublishers.ofString"
                f"({java_string(form_encode(fields))})"
            )
        case _:
            publisher = "HttpRequest.BodyPublishers.noBody()"

    lines = [
        "import java.net.URI;",
        "import java.net.http.HttpClient;",
        "import java.net.http.HttpRequest;",
        "import java.net.http.HttpResponse;",
        "",
        "public class Main {",
        "\tpublic static void main(String[] args) throws Exception {",
        "\t\tHttpClient client = HttpClient.newHttpClient();",
        "\t\tHttpRequest request = HttpRequest.newBuilder()",
        f"\t\t\t.uri(URI.create({java_string(request.url)}))",
        f"\t\t\t.method({java_string(request.method.value)}, {publisher})",
    ]

    for name, value in effective_headers(request).items():
        lines.append(f"\t\t\t.header({java_string(name)}, {java_string(value)})")

    lines.extend(
        [
            "\t\t\t.build();",
            "",
            "\t\tHttpResponse<String> response = client.send(request, "
            "HttpResponse.BodyHandlers.ofString());",
            "\t\tSystem.out.println(response.body());",
            "\t}",
            "}",
        ]
    )

    return "\n".join(lines)
