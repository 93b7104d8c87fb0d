from __future__ import annotations

import json
import textwrap
from pathlib import Path

from snudown_parser.cli import cli


def _write(tmp_path: Path, filename: str, content: str) -> Path:
    path = tmp_path / filename
    path.write_text(content, encoding="utf-8")
    return path


def _write_pyproject(base: Path, body: str) -> Path:
    path = base / "pyproject.toml"
    path.write_text(textwrap.dedent(body).lstrip(), encoding="utf-8")
    return path


def test_cli_prints_outline_by_default(cli_runner, tmp_path):
    target = _write(tmp_path, "doc.html", "<h2>Title</h2><ul><li>a</li><li>b</li></ul>")

    result = cli_runner.invoke(cli, [str(target)])

    assert result.exit_code == 0
    assert result.output == "## Title\n\n- a\n- b\n"


def test_cli_prints_json(cli_runner, tmp_path):
    target = _write(tmp_path, "doc.html", r'<p><a href=\"https://x.example\">x</a></p>')

    result = cli_runner.invoke(cli, [str(target), "--format", "json"])

    assert result.exit_code == 0
    payload = json.loads(result.output)
    assert payload["links"] == ["https://x.example"]
    assert payload["components"][0]["type"] == "text"
    assert payload["components"][0]["content"]["links"] == [
        {"href": "https://x.example", "start": 0, "end": 1}
    ]


def test_cli_comprehensive_document(cli_runner, tmp_path, comprehensive_html):
    target = _write(tmp_path, "comment.html", comprehensive_html)

    result = cli_runner.invoke(cli, [str(target), "--format", "json"])

    assert result.exit_code == 0
    assert len(json.loads(result.output)["components"]) == 10


def test_cli_plain_quotes_and_default_link(cli_runner, tmp_path):
    target = _write(tmp_path, "doc.html", '<p><a href="https://plain.example">x</a> <a>y</a></p>')

    result = cli_runner.invoke(
        cli,
        [str(target), "--format", "json", "--plain-quotes", "--default-link", "https://d.example"],
    )

    assert result.exit_code == 0
    assert json.loads(result.output)["links"] == ["https://plain.example", "https://d.example"]


def test_cli_reads_project_config(cli_runner, tmp_path):
    _write_pyproject(
        tmp_path,
        """
        [tool.snudown-parser]
        outline_indent = "  "
        """,
    )
    target = _write(tmp_path, "doc.html", "<ol><li>a<ol><li>b</li></ol></li></ol>")

    result = cli_runner.invoke(cli, [str(target)])

    assert result.exit_code == 0
    assert result.output == "1. a\n  1. b\n"


def test_cli_rejects_invalid_config(cli_runner, tmp_path):
    _write_pyproject(
        tmp_path,
        """
        [tool.snudown-parser]
        max_file_size = 0
        """,
    )
    target = _write(tmp_path, "doc.html", "<p>x</p>")

    result = cli_runner.invoke(cli, [str(target)])

    assert result.exit_code != 0
    assert "max_file_size" in result.output


def test_cli_enforces_size_limit_from_environment(cli_runner, tmp_path, monkeypatch):
    monkeypatch.setenv("SNUDOWN_PARSER_MAX_FILE_SIZE", "4")
    target = _write(tmp_path, "doc.html", "<p>too long</p>")

    result = cli_runner.invoke(cli, [str(target)])

    assert result.exit_code != 0
    assert "maximum allowed size" in result.output


def test_cli_reports_malformed_input(cli_runner, tmp_path):
    target = _write(tmp_path, "doc.html", "<p>x</p></ul>")

    result = cli_runner.invoke(cli, [str(target)])

    assert result.exit_code != 0
    assert "Malformed input" in result.output


def test_cli_rejects_missing_file(cli_runner, tmp_path):
    result = cli_runner.invoke(cli, [str(tmp_path / "missing.html")])

    assert result.exit_code != 0
