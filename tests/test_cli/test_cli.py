"""Tests for the stylecascade command line interface."""

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from stylecascade import __version__
from stylecascade.cli.main import cli


PAGE = """<html>
  <head>
    <style>
      p { color: blue }
      #intro { color: green !important }
      p::first-letter { font-size: 2em }
      @media (max-width: 500px) { p { margin: 0 } }
    </style>
  </head>
  <body><p id="intro" style="color: red">Hello</p><div/></body>
</html>
"""


@pytest.fixture
def page(tmp_path: Path) -> Path:
    path = tmp_path / "page.html"
    path.write_text(PAGE)
    return path


def _run(*args: str):
    return CliRunner().invoke(cli, list(args))


class TestVersion:
    def test_version(self):
        result = _run("--version")
        assert result.exit_code == 0
        assert __version__ in result.output


class TestRulesCommand:
    def test_lists_rules_by_specificity(self, page):
        result = _run("rules", str(page))
        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert lines[0] == "Rules: 3"
        assert lines[1].strip().startswith("(1,0,0)  #intro")
        assert "color: green !important" in lines[1]

    def test_environment_options(self, page):
        result = _run("rules", str(page), "--width", "400")
        assert result.exit_code == 0
        assert "Rules: 4" in result.output

    def test_extra_css(self, page, tmp_path):
        css = tmp_path / "extra.css"
        css.write_text("div { display: none }")
        result = _run("rules", str(page), "--css", str(css))
        assert "div { display: none }" in result.output

    def test_missing_file(self):
        assert _run("rules", "/nonexistent/page.html").exit_code != 0

    def test_malformed_document(self, tmp_path):
        bad = tmp_path / "bad.html"
        bad.write_text("<html><body></html>")
        result = _run("rules", str(bad))
        assert result.exit_code == 1
        assert "Parse error" in result.output


class TestResolveCommand:
    def test_text_output(self, page):
        result = _run("resolve", str(page), "p")
        assert result.exit_code == 0
        assert "color: green  !important" in result.output
        assert "::first-letter:" in result.output
        assert "font-size: 2em" in result.output

    def test_json_output(self, page):
        result = _run("resolve", str(page), "#intro", "--json")
        assert result.exit_code == 0
        payload = json.loads(result.output)
        assert payload["element"] == {"color": "green"}
        assert payload["pseudo_elements"] == {"::first-letter": {"font-size": "2em"}}

    def test_json_without_pseudo_elements(self, page):
        payload = json.loads(_run("resolve", str(page), "div", "--json").output)
        assert payload == {"element": None, "pseudo_elements": None}

    def test_media_dependent_rule(self, page):
        payload = json.loads(_run("resolve", str(page), "p", "--json", "--width", "400").output)
        assert payload["element"]["margin"] == "0"

    def test_no_matching_element(self, page):
        result = _run("resolve", str(page), "span")
        assert result.exit_code == 1
        assert "No element matches" in result.output
