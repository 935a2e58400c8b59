"""Integration tests for the command line interface on a temporary vault."""

import json

import pytest
from typer.testing import CliRunner

from fontinjector import __version__
from fontinjector.cli import app

runner = CliRunner()

STYLESHEET = (".obsidian", "snippets", "custom-font.css")
SETTINGS = (".obsidian", "plugins", "custom-font", "data.json")


@pytest.fixture
def vault(tmp_path):
    """A vault with two fonts and one stray file in its font directory."""
    fonts = tmp_path / ".obsidian" / "fonts"
    fonts.mkdir(parents=True)
    (fonts / "MyFont.woff2").write_bytes(b"\x00\x01\x02")
    (fonts / "Lato.ttf").write_bytes(b"\xff")
    (fonts / "readme.md").write_text("notes", encoding="utf-8")
    return tmp_path


def stylesheet(vault):
    return vault.joinpath(*STYLESHEET).read_text(encoding="utf-8")


def test_version():
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_select_writes_stylesheet_and_settings(vault):
    result = runner.invoke(app, ["select", "MyFont.woff2", "--vault", str(vault)])

    assert result.exit_code == 0, result.output
    css = stylesheet(vault)
    assert "/* custom-font-plugin-base64 */" in css
    assert "data:font/woff2;base64,AAEC" in css
    assert "--font-default: 'myfont';" in css
    settings = json.loads(vault.joinpath(*SETTINGS).read_text(encoding="utf-8"))
    assert settings["font"] == "MyFont.woff2"


def test_select_all(vault):
    result = runner.invoke(app, ["select", "all", "-d", str(vault), "-q"])

    assert result.exit_code == 0, result.output
    css = stylesheet(vault)
    assert css.count("@font-face") == 2
    assert css.index("'lato'") < css.index("'myfont'")
    assert ".font-lato {" in css


def test_clear_empties_stylesheet(vault):
    runner.invoke(app, ["select", "MyFont.woff2", "--vault", str(vault)])

    result = runner.invoke(app, ["clear", "--vault", str(vault)])

    assert result.exit_code == 0, result.output
    assert stylesheet(vault) == ""


def test_select_missing_font_fails(vault):
    result = runner.invoke(app, ["select", "Missing.ttf", "--vault", str(vault)])

    assert result.exit_code == 1
    assert not vault.joinpath(*STYLESHEET).exists()


def test_apply_force_mode(vault):
    runner.invoke(app, ["select", "MyFont.woff2", "--vault", str(vault), "-q"])

    result = runner.invoke(app, ["apply", "--force", "--vault", str(vault), "-q"])

    assert result.exit_code == 0, result.output
    css = stylesheet(vault)
    assert "/* custom-font-plugin-force */\n* {\n    font-family: 'myfont' !important;\n}" in css
    assert "--font-default: 'myfont' !important;" in css


def test_apply_without_changes_reuses_cache(vault):
    runner.invoke(app, ["select", "MyFont.woff2", "--vault", str(vault), "-q"])
    cache_dir = vault / ".obsidian" / "plugins" / "custom-font"
    cached = sorted(p.name for p in cache_dir.glob("MyFont.woff2.*.css"))

    result = runner.invoke(app, ["apply", "--vault", str(vault), "-q"])

    assert result.exit_code == 0, result.output
    assert len(cached) == 1
    assert sorted(p.name for p in cache_dir.glob("MyFont.woff2.*.css")) == cached


def test_apply_empty_custom_css_fails(vault):
    runner.invoke(app, ["select", "MyFont.woff2", "--vault", str(vault), "-q"])

    result = runner.invoke(app, ["apply", "--custom-css", " ", "--vault", str(vault)])

    assert result.exit_code == 1
    assert "Please enter custom CSS" in result.output


def test_list(vault):
    result = runner.invoke(app, ["list", "--vault", str(vault)])

    assert result.exit_code == 0, result.output
    assert "MyFont.woff2" in result.output
    assert "Lato.ttf" in result.output
    assert "readme.md" not in result.output


def test_missing_vault(tmp_path):
    result = runner.invoke(app, ["select", "all", "--vault", str(tmp_path / "nope")])

    assert result.exit_code == 1
    assert "Vault not found" in result.output


def test_convert_stdout(vault):
    font = vault / ".obsidian" / "fonts" / "MyFont.woff2"

    result = runner.invoke(app, ["convert", str(font), "--stdout"])

    assert result.exit_code == 0, result.output
    assert result.output.startswith("@font-face {")
    assert ":root {" in result.output


def test_convert_writes_default_file(vault, monkeypatch):
    monkeypatch.chdir(vault)
    font = vault / ".obsidian" / "fonts" / "MyFont.woff2"

    result = runner.invoke(app, ["convert", str(font), "--template", "force", "-q"])

    assert result.exit_code == 0, result.output
    css = (vault / "MyFont-font.css").read_text(encoding="utf-8")
    assert "/* Force style for all elements */" in css


def test_convert_rejects_non_fonts(vault):
    result = runner.invoke(app, ["convert", str(vault / ".obsidian" / "fonts" / "readme.md")])

    assert result.exit_code == 1
    assert "Please select valid font files" in result.output


def test_convert_custom_without_selector(vault):
    font = vault / ".obsidian" / "fonts" / "MyFont.woff2"

    result = runner.invoke(app, ["convert", str(font), "-t", "custom", "--stdout"])

    assert result.exit_code == 1
    assert "class name" in result.output
