import curlbridge


def test_version():
    assert curlbridge.__version__ == "0.1.0"


def test_parse_then_render():
    request = curlbridge.parse_curl(
        "curl -X PUT 'https://api.example.com/items/1' "
        "-H 'Accept: application/json'"
    )
    snippet = curlbridge.render_snippet("python", request)

    assert 'url = "https://api.example.com/items/1"' in snippet
    assert 'requests.request("PUT", url, headers=headers)' in snippet
    assert '"Accept": "application/json"' in snippet


def test_targets_are_exported():
    assert "curl" in curlbridge.available_targets()
    assert "php" in curlbridge.available_targets()


def test_request_helpers_are_exported():
    request = curlbridge.default_request(
        "https://example.com", curlbridge.http_method.POST
    )

    assert request.method == curlbridge.http_method.POST
    assert curlbridge.bearer_auth("t").token == "t"
