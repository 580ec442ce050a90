"""Header policy shared by every snippet generator.

Headers set by the caller always win. Headers derived from the auth, cookies or body
are only added when the caller has not set a header with the same name (compared
case-insensitively), so every target sends the same headers.
"""
import base64
from typing import Optional
from urllib.parse import urlencode

from ..http import (
    BasicAuth,
    BearerAuth,
    Body,
    FormUrlEncodedBody,
    RawBody,
    Request,
)

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


def body_content_type(body: Body) -> Optional[str]:
    """The ``Content-Type`` implied by ``body``, if any."""
    match body:
        case RawBody(content_type=content_type):
            return content_type or None
        case FormUrlEncodedBody():
            return FORM_CONTENT_TYPE
    return None


def is_json(content_type: Optional[str]) -> bool:
    """Whether a declared content type describes JSON."""
    return content_type is not None and "json" in content_type.lower()


def effective_headers(
    request: Request, *, include_basic_auth: bool = True
) -> dict[str, str]:
    """Build the headers a snippet sends.

    Args:
        request: The request being rendered. It is not modified.
        include_basic_auth: Add an ``Authorization`` header for basic auth. Targets
            with a dedicated option (e.g. ``curl --user``) turn this off.

    Returns:
        The caller's headers in order followed by any derived headers.
    """
    headers = dict(request.headers)

    if not request.has_header("Authorization"):
        match request.auth:
            case BasicAuth(username=username, password=password) if include_basic_auth:
                credentials = base64.b64encode(
                    f"{username}:{password}".encode("utf-8")
                ).decode("ascii")
                headers["Authorization"] = f"Basic {credentials}"
            case BearerAuth(token=token):
                headers["Authorization"] = f"Bearer {token}"

    if request.cookies and not request.has_header("Cookie"):
        headers["Cookie"] = "; ".join(f"{c.name}={c.value}" for c in request.cookies)

    content_type = body_content_type(request.body)
    if content_type and not request.has_header("Content-Type"):
        headers["Content-Type"] = content_type

    return headers


def non_empty_fields(fields: dict[str, str]) -> dict[str, str]:
    """Drop form fields whose value is empty."""
    return {key: value for key, value in fields.items() if value}


def form_encode(fields: dict[str, str]) -> str:
    """URL encode form fields as ``key=value&...``, skipping empty values."""
    return urlencode(list(non_empty_fields(fields).items()))
