"""Describes an HTTP request as a plain, serializable value.

Every snippet is rendered from a :class:`Request` and the curl parser produces one.
Bodies and authentication are closed unions; pattern match on them:

.. code-block:: python

   match request.body:
       case RawBody(content=content, content_type=content_type):
           ...
       case FormUrlEncodedBody(fields=fields):
           ...
       case NoBody():
           ...
"""
import base64
import binascii
from dataclasses import dataclass, field
import enum
import json
from typing import Any, Optional, Protocol, Union

from .utils.encoder import CurlbridgeJSONEncoder


class http_method(str, enum.Enum):
    """Describes HTTP methods."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"


class HttpProtocol(str, enum.Enum):
    """Transport hint. Snippets ignore it."""

    tcp = "tcp"
    quic = "quic"


@dataclass(frozen=True)
class NoBody:
    """The request has no body."""


@dataclass(frozen=True)
class RawBody:
    """A body which has already been serialized."""

    #: The payload exactly as it is sent.
    content: str
    #: The declared media type, if any. e.g. ``application/json``
    content_type: Optional[str] = None


@dataclass(frozen=True)
class FormUrlEncodedBody:
    """A body sent as ``application/x-www-form-urlencoded`` fields."""

    fields: dict[str, str] = field(default_factory=dict)


Body = Union[NoBody, RawBody, FormUrlEncodedBody]


@dataclass(frozen=True)
class NoAuth:
    """No authentication."""


@dataclass(frozen=True)
class BasicAuth:
    username: str
    password: str


@dataclass(frozen=True)
class BearerAuth:
    token: str


Auth = Union[NoAuth, BasicAuth, BearerAuth]


@dataclass(frozen=True)
class Cookie:
    """A cookie sent with the request."""

    name: str
    value: str
    domain: Optional[str] = None
    path: Optional[str] = None
    expires: Optional[str] = None
    http_only: Optional[bool] = None
    secure: Optional[bool] = None


@dataclass(frozen=True)
class ProxyConfig:
    url: str
    username: Optional[str] = None
    password: Optional[str] = None


@dataclass(frozen=True)
class Request:
    """Represents an HTTP request."""

    #: The requested url. It is never parsed or rebuilt.
    url: str = ""
    method: http_method = http_method.GET
    #: HTTP headers in the order they were added. Header names keep their case.
    headers: dict[str, str] = field(default_factory=dict)
    #: Query parameters found in the url. Informational only, they are not merged
    #: back into ``url``.
    query_params: dict[str, str] = field(default_factory=dict)
    cookies: list[Cookie] = field(default_factory=list)
    timeout_ms: int = 30000
    follow_redirects: bool = True
    max_redirects: int = 10
    verify_ssl: bool = True
    proxy: Optional[ProxyConfig] = None
    protocol: Optional[HttpProtocol] = None
    body: Body = field(default_factory=NoBody)
    auth: Auth = field(default_factory=NoAuth)

    def __post_init__(self):
        # Accept plain strings such as "post".
        object.__setattr__(self, "method", http_method(self.method.upper()))

    def get_header(self, name: str) -> Optional[str]:
        """Look up a header ignoring the case of its name.

        Args:
            name: The header name. e.g. ``content-type``

        Returns:
            The value of the first matching header or ``None``.
        """
        lowered = name.lower()
        for key, value in self.headers.items():
            if key.lower() == lowered:
                return value
        return None

    def has_header(self, name: str) -> bool:
        """Indicate whether the caller set ``name`` (case-insensitive)."""
        return self.get_header(name) is not None


@dataclass
class Response:
    """Represent an HTTP response returned by a :class:`Transport`."""

    status: int
    status_text: str = ""
    headers: dict[str, str] = field(default_factory=dict)
    cookies: list[Cookie] = field(default_factory=list)
    #: The body of the response encoded with base64.
    body_base64: str = ""
    http_version: str = "HTTP/1.1"
    error: Optional[str] = None


class Transport(Protocol):
    """Sends a request over the network.

    Implementations live outside of this package.
    """

    def send_request(self, request: Request) -> Response:
        ...


def default_request(url: str = "", method: http_method = http_method.GET) -> Request:
    """Create a request with every option at its default.

    Args:
        url: The requested url.
        method: The HTTP method.

    Returns:
        A new request.
    """
    return Request(url=url, method=http_method(method.upper()))


def basic_auth(username: str, password: str) -> BasicAuth:
    return BasicAuth(username=username, password=password)


def bearer_auth(token: str) -> BearerAuth:
    return BearerAuth(token=token)


def raw_body(content: str, content_type: Optional[str] = None) -> RawBody:
    return RawBody(content=content, content_type=content_type)


def json_body(value: Any) -> RawBody:
    """Serialize ``value`` as pretty printed JSON.

    Args:
        value: Any JSON serializable value. Decimals, datetimes and UUIDs are
            supported as well.

    Returns:
        A raw body tagged ``application/json`` with a 2 space indent.
    """
    return RawBody(
        content=json.dumps(
            value, indent=2, ensure_ascii=False, cls=CurlbridgeJSONEncoder
        ),
        content_type="application/json",
    )


def form_body(fields: dict[str, str]) -> FormUrlEncodedBody:
    return FormUrlEncodedBody(fields=dict(fields))


def decode_body(response: Response) -> str:
    """Decode the base64 body of ``response``.

    Returns:
        The decoded text or an empty string when the body is not valid base64.
    """
    try:
        return base64.b64decode(response.body_base64, validate=True).decode(
            "utf-8", errors="replace"
        )
    except (binascii.Error, ValueError):
        return ""


def decode_body_as_json(response: Response) -> Optional[Any]:
    """Decode the body of ``response`` as JSON, or ``None`` if it is not JSON."""
    try:
        return json.loads(decode_body(response))
    except json.JSONDecodeError:
        return None
