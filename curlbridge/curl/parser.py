"""Best effort extraction of a :class:`~curlbridge.http.Request` from a curl command.

The parser is not a shell grammar. The command is normalized and then a fixed list of
rules is applied, each looking for one kind of flag::

    normalize -> url -> method -> headers -> body -> basic auth -> flags -> cookies

A rule that finds nothing leaves the corresponding field at its default. Parsing never
raises.
"""
from dataclasses import dataclass, field, replace
import re
from typing import Any, Optional
from urllib.parse import parse_qsl, urlsplit

from ..http import BasicAuth, Cookie, default_request, http_method, RawBody, Request
from ..logging import getLogger
from ..tracing import get_tracer

logger = getLogger(__name__)

# A value which may be wrapped in single or double quotes. Group 1 is the single
# quoted content, group 2 double quoted and group 3 bare.
_MAYBE_QUOTED = r"""(?:'([^']*)'|"([^"]*)"|([^\s'"]+))"""
# Flags must start a token. e.g. ``-d`` is not found inside ``--data-raw``.
_FLAG = r"(?<!\S)"

RE_LINE_CONTINUATION = re.compile(r"\\\r?\n")
# Group 1 is a quoted span, left untouched. Anything else matched is whitespace.
RE_QUOTED_OR_WHITESPACE = re.compile(r"""('(?:[^']|'\\'')*'|"[^"]*")|\s+""")

RE_URL_FLAG = re.compile(_FLAG + r"--url\s+" + _MAYBE_QUOTED)
RE_URL_QUOTED_AFTER_CURL = re.compile(r"\bcurl\s+(['\"])([^'\"]+)\1")
RE_URL_BARE_AFTER_CURL = re.compile(r"\bcurl\s+([^\s'\"]+)")
RE_URL_ANYWHERE = re.compile(r"(https?://[^\s'\"]+)")

RE_METHOD = re.compile(_FLAG + r"(?:-X|--request)\s+['\"]?(\w+)['\"]?")
RE_HEADER = re.compile(_FLAG + r"(?:-H|--header)\s+" + _MAYBE_QUOTED)
RE_BASIC_AUTH = re.compile(_FLAG + r"(?:-u|--user)\s+" + _MAYBE_QUOTED)
RE_INSECURE = re.compile(_FLAG + r"(?:-k|--insecure)(?!\S)")
RE_LOCATION = re.compile(_FLAG + r"(?:-L|--location)(?!\S)")
RE_COOKIE = re.compile(_FLAG + r"(?:-b|--cookie)\s+" + _MAYBE_QUOTED)

#: Body flags in priority order. Only the first match is used.
BODY_FLAGS: tuple[str, ...] = ("-d", "--data", "--data-raw", "--data-binary")

# ``'\''`` is how a single quote is written inside a single quoted shell string.
SHELL_ESCAPED_QUOTE = "'\\''"


def _body_patterns() -> list[re.Pattern]:
    patterns = []
    for flag in BODY_FLAGS:
        prefix = _FLAG + re.escape(flag) + r"\s+"
        patterns.append(re.compile(prefix + r"'((?:[^']|'\\'')*)'"))
        patterns.append(re.compile(prefix + r'"([^"]*)"'))
        patterns.append(re.compile(prefix + r"""([^\s'"]+)"""))
    return patterns


RE_BODIES = _body_patterns()


def _collapse(match: re.Match) -> str:
    quoted = match.group(1)
    return quoted if quoted is not None else " "


def _first_group(match: re.Match) -> Optional[str]:
    """Return the first group of ``match`` which participated in the match."""
    return next((g for g in match.groups() if g is not None), None)


@dataclass
class CurlParseResult:
    """A parsed request along with the fields no rule was able to find."""

    request: Request
    #: Names of the fields left at their default. e.g. ``["auth", "cookies"]``
    undetected: list[str] = field(default_factory=list)


class CurlParser:
    """Parse a curl command into a request.

    Each ``find_*`` method implements one rule and returns the changes it would make
    to the request, or an empty dictionary when nothing was found.
    """

    def __init__(self, command: str, defaults: Optional[Request] = None):
        self.source = command
        self.command = self.normalize(command)
        self.defaults = defaults if defaults is not None else default_request()

    @staticmethod
    def normalize(command: str) -> str:
        """Join line continuations and collapse whitespace outside of quotes.

        Quoted text is kept as written so multi-line bodies survive.

        Args:
            command: The command as typed or exported.

        Returns:
            The normalized command.
        """
        joined = RE_LINE_CONTINUATION.sub(" ", command)
        return RE_QUOTED_OR_WHITESPACE.sub(_collapse, joined).strip()

    def parse(self) -> CurlParseResult:
        """Apply every rule in order.

        Returns:
            The request built on top of the defaults and the names of the fields
            which were not found.
        """
        changes: dict[str, Any] = {}
        undetected: list[str] = []

        for name, rule in (
            ("url", self.find_url),
            ("method", self.find_method),
            ("headers", self.find_headers),
            ("body", self.find_body),
            ("auth", self.find_basic_auth),
            ("flags", self.find_flags),
            ("cookies", self.find_cookies),
        ):
            found = rule()
            if found:
                logger.debug("Rule '%s' matched: %s", name, sorted(found))
                changes.update(found)
            elif name != "flags":
                undetected.append(name)

        if (
            "body" in changes
            and "method" not in changes
            and self.defaults.method == http_method.GET
        ):
            # An explicit method is never overridden by the body.
            changes["method"] = http_method.POST
            undetected.remove("method")

        return CurlParseResult(
            request=replace(self.defaults, **changes),
            undetected=undetected,
        )

    def find_url(self) -> dict[str, Any]:
        """Find the url.

        The rules are tried in order and the first success wins:

        1. A quoted token immediately following ``curl``.
        2. The first bare token following ``curl``.
        3. An explicit ``--url`` value.
        4. The first ``http(s)://`` text anywhere in the command.

        Only values starting with ``http`` or ``/`` are accepted by rules 1 and 2.
        """
        url: Optional[str] = None

        for pattern in (RE_URL_QUOTED_AFTER_CURL, RE_URL_BARE_AFTER_CURL):
            match = pattern.search(self.command)
            if match and match.group(match.lastindex).startswith(("http", "/")):
                url = match.group(match.lastindex)
                break

        if not url:
            match = RE_URL_FLAG.search(self.command)
            if match:
                url = _first_group(match)

        if not url:
            match = RE_URL_ANYWHERE.search(self.command)
            if match:
                url = match.group(1)

        if not url:
            return {}

        return {"url": url, "query_params": self.query_params(url)}

    @staticmethod
    def query_params(url: str) -> dict[str, str]:
        """Decode the query string of ``url``. Later keys replace earlier ones."""
        try:
            query = urlsplit(url).query
        except ValueError:
            # e.g. an unbalanced IPv6 bracket
            return {}
        return dict(parse_qsl(query, keep_blank_values=True))

    def find_method(self) -> dict[str, Any]:
        """Find ``-X``/``--request``. Unknown methods are ignored."""
        match = RE_METHOD.search(self.command)
        if not match:
            return {}

        method = http_method.__members__.get(match.group(1).upper())
        if method is None:
            logger.debug("Ignoring unsupported method '%s'", match.group(1))
            return {}

        return {"method": method}

    def find_headers(self) -> dict[str, Any]:
        """Find every ``-H``/``--header``.

        Headers are split on the first colon. A repeated header replaces the earlier
        value but keeps its position.
        """
        headers: dict[str, str] = {}
        for match in RE_HEADER.finditer(self.command):
            name, colon, value = (_first_group(match) or "").partition(":")
            name = name.strip()
            if not colon or not name:
                logger.debug("Skipping malformed header '%s'", match.group(0))
                continue
            headers[name] = value.strip()

        if not headers:
            return {}

        return {"headers": {**self.defaults.headers, **headers}}

    def find_body(self) -> dict[str, Any]:
        """Find the first body in :data:`BODY_FLAGS` order."""
        for pattern in RE_BODIES:
            match = pattern.search(self.command)
            if match:
                content = match.group(1).replace(SHELL_ESCAPED_QUOTE, "'")
                return {"body": RawBody(content=content, content_type=None)}

        return {}

    def find_basic_auth(self) -> dict[str, Any]:
        """Find ``-u``/``--user``. A missing password becomes an empty string."""
        match = RE_BASIC_AUTH.search(self.command)
        if not match:
            return {}

        username, _, password = (_first_group(match) or "").partition(":")
        return {"auth": BasicAuth(username=username, password=password)}

    def find_flags(self) -> dict[str, Any]:
        """Find the boolean switches.

        ``-L`` only confirms the default; it can never disable redirects.
        """
        changes: dict[str, Any] = {}
        if RE_INSECURE.search(self.command):
            changes["verify_ssl"] = False
        if RE_LOCATION.search(self.command):
            changes["follow_redirects"] = True
        return changes

    def find_cookies(self) -> dict[str, Any]:
        """Find ``-b``/``--cookie`` values written as ``name=value; ...``.

        Values without ``=`` name a cookie jar file and are skipped.
        """
        cookies: list[Cookie] = []
        for match in RE_COOKIE.finditer(self.command):
            for pair in (_first_group(match) or "").split(";"):
                name, equals, value = pair.strip().partition("=")
                if name and equals:
                    cookies.append(Cookie(name=name, value=value))

        if not cookies:
            return {}

        return {"cookies": [*self.defaults.cookies, *cookies]}


def parse_curl_with_report(
    command: str, defaults: Optional[Request] = None
) -> CurlParseResult:
    """Parse ``command`` and report the fields which were not found.

    Args:
        command: A curl command line.
        defaults: Values for the fields the command does not set. Defaults to
            :func:`~curlbridge.http.default_request`.

    Returns:
        The parse result.
    """
    with get_tracer().start_as_current_span("parse_curl"):
        return CurlParser(command, defaults).parse()


def parse_curl(command: str, defaults: Optional[Request] = None) -> Request:
    """Parse ``command`` into a request.

    Unrecognized input results in ``defaults`` (a GET request with no url when not
    provided). Use :func:`parse_curl_with_report` to learn which fields were missing.
    """
    return parse_curl_with_report(command, defaults).request
