import pytest

from curlbridge.http import form_body, json_body, raw_body, Request
from curlbridge.snippets import python


def test_render__get():
    r = Request(url="https://x.com")

    assert python.render(r) == (
        "import requests\n"
        "\n"
        'url = "https://x.com"\n'
        "headers = {}\n"
        'response = requests.request("GET", url, headers=headers)\n'
        "print(response.text)"
    )


def test_render__json_body():
    r = Request(
        url="https://api.example.com/x",
        method="POST",
        headers={"Accept": "application/json"},
        body=json_body({"a": 1}),
    )

    assert python.render(r) == (
        "import requests\n"
        "\n"
        'url = "https://api.example.com/x"\n'
        "headers = {\n"
        '    "Accept": "application/json",\n'
        '    "Content-Type": "application/json"\n'
        "}\n"
        "payload = {\n"
        '    "a": 1\n'
        "}\n"
        'response = requests.request("POST", url, headers=headers, json=payload)\n'
        "print(response.text)"
    )


def test_render__raw_body():
    r = Request(url="/x", method="POST", body=raw_body("line 1\nline 2"))
    out = python.render(r)

    assert 'payload = """line 1\nline 2"""' in out
    assert "data=payload" in out


def test_render__raw_body_needing_escapes():
    r = Request(url="/x", method="POST", body=raw_body('say "hi"'))

    assert 'payload = "say \\"hi\\""' in python.render(r)


def test_render__invalid_json():
    r = Request(url="/x", method="POST", body=raw_body("{oops", "application/json"))
    out = python.render(r)

    assert 'payload = """{oops"""' in out
    assert "data=payload" in out
    assert "json=payload" not in out


def test_render__form_body():
    r = Request(url="/x", method="POST", body=form_body({"a": "1", "b": ""}))
    out = python.render(r)

    assert 'payload = {\n    "a": "1"\n}' in out
    assert "data=payload" in out
    assert '"b"' not in out, "Expected empty fields to be left out."


def test_render__insecure():
    r = Request(url="/x", verify_ssl=False)

    assert "headers=headers, verify=False)" in python.render(r)


@pytest.mark.parametrize(
    "value,literal",
    [
        (None, "None"),
        (True, "True"),
        (False, "False"),
        (3, "3"),
        (1.5, "1.5"),
        (float("inf"), 'float("inf")'),
        ("Zoë", '"Zoë"'),
        ({}, "{}"),
        ([], "[]"),
        (
            {"a": [1, None], "b": {"c": False}},
            '{\n    "a": [\n        1,\n        None\n    ],\n'
            '    "b": {\n        "c": False\n    }\n}',
        ),
    ],
)
def test_py_literal(value, literal):
    assert python.py_literal(value) == literal
