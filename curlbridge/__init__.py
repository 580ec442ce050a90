"""Translate HTTP requests between curl commands and code snippets."""
from .curl import parse_curl, parse_curl_with_report
from .http import (
    basic_auth,
    bearer_auth,
    decode_body,
    default_request,
    form_body,
    http_method,
    json_body,
    raw_body,
    Request,
)
from .snippets import available_targets, render_snippet

__version__ = "0.1.0"

__all__ = [
    "Request",
    "available_targets",
    "basic_auth",
    "bearer_auth",
    "decode_body",
    "default_request",
    "form_body",
    "http_method",
    "json_body",
    "parse_curl",
    "parse_curl_with_report",
    "raw_body",
    "render_snippet",
]
