import pytest
from pytest_mock import MockerFixture

from curlbridge.conf import settings
from curlbridge.exceptions import UnsupportedTargetError
from curlbridge.http import (
    form_body,
    http_method,
    json_body,
    raw_body,
    Request,
)
from curlbridge.snippets import (
    available_targets,
    get_renderer,
    go,
    java,
    javascript,
    php,
    python,
    render_snippet,
    rust,
    shell,
    TARGETS,
)

ALL_RENDERERS = [shell, javascript, python, go, rust, java, php]


@pytest.mark.parametrize(
    "target_id,module",
    [
        ("shell", shell),
        ("curl", shell),
        ("javascript", javascript),
        ("fetch", javascript),
        ("python", python),
        ("go", go),
        ("rust", rust),
        ("java", java),
        ("php", php),
        ("  Python ", python),
    ],
)
def test_get_renderer(target_id: str, module):
    assert get_renderer(target_id) is module.render


def test_available_targets():
    assert available_targets() == [
        "shell",
        "curl",
        "javascript",
        "fetch",
        "python",
        "go",
        "rust",
        "java",
        "php",
    ]


def test_render_snippet__unknown_target_falls_back(caplog):
    r = Request(url="https://x.com")

    with caplog.at_level("WARNING", logger="curlbridge"):
        out = render_snippet("cobol", r)

    assert out == shell.render(r)
    assert "Unknown snippet target 'cobol'" in caplog.text


def test_render_snippet__strict():
    with pytest.raises(UnsupportedTargetError) as e:
        render_snippet("cobol", Request(), strict=True)

    assert e.value.target == "cobol"


def test_render_snippet__strict_from_settings(mocker: MockerFixture):
    mocker.patch.object(settings, "STRICT_TARGETS", True)

    with pytest.raises(UnsupportedTargetError):
        render_snippet("cobol", Request())

    assert render_snippet("cobol", Request(), strict=False).startswith("curl")


def test_render_snippet__dispatch(mocker: MockerFixture):
    fake = mocker.Mock(return_value="snippet")
    mocker.patch.dict(TARGETS, {"go": fake})
    r = Request(url="/x")

    assert render_snippet("go", r) == "snippet"
    fake.assert_called_once_with(r)


REQUESTS = [
    Request(url="https://example.com/a?b=1", method=method)
    for method in http_method
] + [
    Request(
        url="https://example.com/json",
        method=http_method.POST,
        headers={"Accept": "application/json"},
        body=json_body({"name": "x", "tags": ["a", "b"], "n": None}),
    ),
    Request(
        url="https://example.com/raw",
        method=http_method.PUT,
        body=raw_body("plain text", "text/plain"),
    ),
    Request(
        url="https://example.com/form",
        method=http_method.PATCH,
        body=form_body({"a": "1"}),
    ),
]


@pytest.mark.parametrize("module", ALL_RENDERERS)
@pytest.mark.parametrize("request_", REQUESTS)
def test_render__contains_url_and_method(module, request_: Request):
    out = module.render(request_)

    assert out, "Expected a snippet."
    assert request_.url in out, "Expected the url in the snippet."
    assert (
        request_.method.value in out or request_.method.value.lower() in out
    ), "Expected the method in the snippet."


@pytest.mark.parametrize("module", ALL_RENDERERS)
def test_render__single_caller_content_type(module):
    r = Request(
        url="https://example.com",
        method=http_method.POST,
        headers={"Content-Type": "text/csv"},
        body=raw_body('{"a": 1}', "application/json"),
    )
    out = module.render(r)

    assert out.count("Content-Type") == 1, "Expected exactly one Content-Type."
    assert "text/csv" in out
    assert "application/json" not in out


@pytest.mark.parametrize("module", [shell, javascript])
def test_render__form_skips_empty_fields(module):
    r = Request(
        url="https://example.com", method="POST", body=form_body({"a": "1", "b": ""})
    )
    out = module.render(r)

    assert "a=1" in out
    assert "b=" not in out


@pytest.mark.parametrize("module", [shell, javascript, python])
def test_render__json_is_indented(module):
    r = Request(
        url="https://example.com",
        method="POST",
        body=raw_body('{"a":1,"b":2}', "application/json"),
    )
    out = module.render(r)

    assert '{"a":1,"b":2}' not in out, "Expected JSON to be re-formatted."
    assert '\n  "a": 1' in out or '\n    "a": 1' in out


@pytest.mark.parametrize("module", ALL_RENDERERS)
def test_render__deterministic(module):
    r = REQUESTS[-3]

    assert module.render(r) == module.render(r)
