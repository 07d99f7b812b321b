"""Tests for the command-line interface."""

from __future__ import annotations

import pytest

from svgrecolor.cli import main
from tests.conftest import RED_RECT_SVG


def test_convert_file(tmp_path, capsys):
    source = tmp_path / "icon.svg"
    source.write_text(RED_RECT_SVG, encoding="utf-8")
    target = tmp_path / "out.svg"

    assert main(["--file", str(source), str(target)]) == 0
    assert 'fill="currentColor"' in target.read_text(encoding="utf-8")
    assert "1 colors replaced" in capsys.readouterr().out


def test_convert_file_default_output(tmp_path):
    source = tmp_path / "icon.svg"
    source.write_text(RED_RECT_SVG, encoding="utf-8")

    assert main(["-f", str(source), "--crop"]) == 0
    output = (tmp_path / "icon-converted.svg").read_text(encoding="utf-8")
    assert 'viewBox="10 10 30 20"' in output


def test_missing_file(tmp_path, capsys):
    assert main(["--file", str(tmp_path / "nope.svg")]) == 1
    assert "File not found" in capsys.readouterr().out


def test_missing_directory(tmp_path):
    assert main(["--directory", str(tmp_path / "nope")]) == 1


def test_directory_with_broken_file(tmp_path, capsys):
    icons = tmp_path / "icons"
    icons.mkdir()
    (icons / "good.svg").write_text(RED_RECT_SVG, encoding="utf-8")
    (icons / "broken.svg").write_text("<svg>", encoding="utf-8")

    assert main(["--directory", str(icons)]) == 1
    out = capsys.readouterr().out
    assert "Converted 1/2 SVG files" in out
    assert (tmp_path / "icons-converted" / "good.svg").exists()


def test_loose_semicolons(tmp_path):
    source = tmp_path / "icon.svg"
    source.write_text('<svg><rect style="fill:#fff"/></svg>', encoding="utf-8")
    target = tmp_path / "out.svg"

    main(["--file", str(source), str(target)])
    assert "#fff" in target.read_text(encoding="utf-8")

    main(["--file", str(source), str(target), "--loose-semicolons"])
    assert "fill: currentColor" in target.read_text(encoding="utf-8")


def test_mode_is_required():
    with pytest.raises(SystemExit):
        main([])


def test_too_many_paths(tmp_path):
    with pytest.raises(SystemExit):
        main(["--file", "a.svg", "b.svg", "c.svg"])
