import io
from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from curlbridge.__main__ import main


@pytest.fixture
def command_file(tmp_path: Path) -> Path:
    path = tmp_path / "command.sh"
    path.write_text("curl https://x.com \\\n  -H 'Accept: */*' \\\n  -d 'a=1'\n")
    return path


def test_main__python(command_file: Path, capsys: pytest.CaptureFixture):
    assert main(["--target", "python", str(command_file)]) == 0

    out = capsys.readouterr().out
    assert 'url = "https://x.com"' in out
    assert 'requests.request("POST", url, headers=headers, data=payload)' in out


def test_main__default_target(command_file: Path, capsys: pytest.CaptureFixture):
    assert main([str(command_file)]) == 0

    assert capsys.readouterr().out.startswith("curl \\\n  --request POST")


def test_main__list_targets(capsys: pytest.CaptureFixture):
    assert main(["--list-targets"]) == 0

    assert "rust" in capsys.readouterr().out.splitlines()


def test_main__strict_unknown_target(command_file: Path, capsys: pytest.CaptureFixture):
    assert main(["--strict", "-t", "cobol", str(command_file)]) == 2

    assert capsys.readouterr().out == ""


def test_main__closes_file(mocker: MockerFixture, capsys: pytest.CaptureFixture):
    mock_open = mocker.patch(
        "curlbridge.__main__.open",
        mocker.mock_open(read_data="curl https://x.com"),
        create=True,
    )

    assert main(["command.sh"]) == 0

    mock_open.assert_called_once_with("command.sh")
    mock_open.return_value.__exit__.assert_called_once()
    assert "--url 'https://x.com'" in capsys.readouterr().out


def test_main__stdin(mocker: MockerFixture, capsys: pytest.CaptureFixture):
    mocker.patch("sys.stdin", io.StringIO("curl -X DELETE https://x.com/1"))

    assert main(["-t", "go"]) == 0

    assert 'http.NewRequest("DELETE", url, nil)' in capsys.readouterr().out


def test_main__missing_file(tmp_path: Path):
    with pytest.raises(SystemExit) as exc_info:
        main([str(tmp_path / "missing.sh")])

    assert exc_info.value.code == 2
