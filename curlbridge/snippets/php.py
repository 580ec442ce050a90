"""Render a request as a PHP script using Guzzle."""
from ..http import FormUrlEncodedBody, RawBody, Request
from .headers import effective_headers, non_empty_fields


def php_string(value: str) -> str:
    """Write ``value`` as a single quoted PHP string literal."""
    return "'" + value.replace("\\", "\\\\").replace("'", "\\'") + "'"


def php_array(values: dict[str, str], indent: str) -> str:
    """Write ``values`` as a short associative array literal."""
    if not values:
        return "[]"
    lines = [
        f"{indent}    {php_string(key)} => {php_string(value)},"
        for key, value in values.items()
    ]
    return "[\n" + "\n".join(lines) + f"\n{indent}]"


def render(request: Request) -> str:
    """Render ``request`` as a single ``$client->request()`` call."""
    options = []

    headers = effective_headers(request)
    if headers:
        options.append(f"    'headers' => {php_array(headers, '    ')},")

    match request.body:
        case RawBody(content=content):
            options.append(f"    'body' => {php_string(content)},")
        case FormUrlEncodedBody(fields=fields):
            options.append(
                f"    'form_params' => {php_array(non_empty_fields(fields), '    ')},"
            )

    if not request.verify_ssl:
        options.append("    'verify' => false,")

    lines = [
        "<?php",
        "",
        "$client = new \\GuzzleHttp\\Client();",
        "",
        f"$response = $client->request({php_string(request.method.value)}, "
        f"{php_string(request.url)}, [",
        *options,
        "]);",
        "",
        "echo $response->getBody();",
    ]

    return "\n".join(lines)
