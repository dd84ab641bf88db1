from __future__ import annotations

from pathlib import Path

from gts.core.result import Err, Ok
from gts.platform.actions import (
    format_outputs,
    github_remote_url,
    redact,
    write_outputs,
)


def test_format_outputs_single_line() -> None:
    text = format_outputs({"full-tag": "v1.2.4", "tags": '["v1", "v1.2", "v1.2.4"]'})
    assert text == 'full-tag=v1.2.4\ntags=["v1", "v1.2", "v1.2.4"]\n'


def test_format_outputs_multi_line_uses_delimiter() -> None:
    text = format_outputs({"notes": "a\nb"})
    lines = text.splitlines()
    assert lines[0].startswith("notes<<ghadelimiter_")
    delimiter = lines[0].split("<<", 1)[1]
    assert lines[1:] == ["a", "b", delimiter]


def test_write_outputs_appends(tmp_path: Path) -> None:
    path = tmp_path / "output"
    path.write_text("existing=1\n", encoding="utf-8")

    result = write_outputs({"version": "1.2.4"}, path)

    assert result == Ok(None)
    assert path.read_text(encoding="utf-8") == "existing=1\nversion=1.2.4\n"


def test_write_outputs_reports_unwritable_path(tmp_path: Path) -> None:
    path = tmp_path / "missing" / "output"

    result = write_outputs({"version": "1.2.4"}, path)

    assert isinstance(result, Err)
    assert result.error.path == path


def test_github_remote_url() -> None:
    assert github_remote_url("t0k3n", "octo/widgets") == "https://t0k3n@github.com/octo/widgets.git"


def test_github_remote_url_custom_server() -> None:
    url = github_remote_url("t0k3n", "/octo/widgets/", server="https://ghe.example.com/")
    assert url == "https://t0k3n@ghe.example.com/octo/widgets.git"


def test_redact() -> None:
    assert redact("https://t0k3n@github.com/o/r.git", "t0k3n") == "https://***@github.com/o/r.git"
    assert redact("origin", None) == "origin"
