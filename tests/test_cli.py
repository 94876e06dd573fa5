"""Tests for the command line entry point."""

import pytest
from PIL import Image

from tagcloud.__main__ import main, parse_args


def test_parse_args_defaults():
    args = parse_args([])

    assert args.counts == [25, 50, 100]
    assert args.center == [350, 350]
    assert args.width == 700
    assert args.height == 700
    assert args.seed is None
    assert args.max_attempts is None


def test_main_writes_images_and_readme(tmp_path):
    exit_code = main(["--counts", "3", "8", "--output-dir", str(tmp_path), "--seed", "1", "--width", "200", "--height", "150", "--center", "100", "75"])

    assert exit_code == 0
    for name in ("layout_1.png", "layout_2.png"):
        with Image.open(tmp_path / name) as image:
            assert image.size == (200, 150)

    readme = (tmp_path / "README.md").read_text(encoding="utf-8")
    assert "![Layout 1](layout_1.png)" in readme
    assert "![Layout 2](layout_2.png)" in readme


def test_main_reports_invalid_configuration(tmp_path, capsys):
    exit_code = main(["--counts", "3", "--output-dir", str(tmp_path), "--width", "0"])

    assert exit_code == 1
    assert "Error:" in capsys.readouterr().err
    assert not (tmp_path / "README.md").exists()


def test_negative_count_rejected_before_any_output(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["--counts", "3", "-1", "--output-dir", str(tmp_path)])

    assert exc_info.value.code == 2
    assert "non-negative" in capsys.readouterr().err
    assert list(tmp_path.iterdir()) == []


def test_placement_failure_leaves_no_partial_output(tmp_path):
    """A layout that cannot be completed stops the run before files are written."""
    exit_code = main(["--counts", "1", "5", "--output-dir", str(tmp_path), "--seed", "1", "--max-attempts", "1"])

    assert exit_code == 1
    assert list(tmp_path.iterdir()) == []
