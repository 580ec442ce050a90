"""Parse curl command lines."""
from .parser import CurlParser, CurlParseResult, parse_curl, parse_curl_with_report

__all__ = ["CurlParser", "CurlParseResult", "parse_curl", "parse_curl_with_report"]
