"""Tests for the command line entry point."""

import logging

import pytest

from svgjsx.main import main


def test_converts_directory(source_dir, output_dir, caplog):
    with caplog.at_level(logging.INFO):
        main([str(source_dir), str(output_dir)])
    assert (output_dir / "IconClose.js").is_file()
    assert not (output_dir / "ArrowLeft.js").exists()
    assert "Files found: 1" in caplog.text


@pytest.mark.parametrize("flag", ["-r", "--recursive"])
def test_recursive_flag(source_dir, output_dir, flag):
    main([str(source_dir), str(output_dir), flag])
    assert (output_dir / "ArrowLeft.js").is_file()


def test_no_recursive_flag(source_dir, output_dir, tmp_path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text("discovery:\n  recursive: true\n", encoding="utf-8")
    main([str(source_dir), str(output_dir), "--config", str(config_path), "--no-recursive"])
    assert not (output_dir / "ArrowLeft.js").exists()


def test_help_exits_zero(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--help"])
    assert exc.value.code == 0
    assert "source_path" in capsys.readouterr().out


def test_missing_arguments():
    with pytest.raises(SystemExit) as exc:
        main([])
    assert exc.value.code == 1


def test_missing_output_argument(source_dir):
    with pytest.raises(SystemExit) as exc:
        main([str(source_dir)])
    assert exc.value.code == 1


def test_missing_source_directory(tmp_path, output_dir, caplog):
    with pytest.raises(SystemExit) as exc:
        main([str(tmp_path / "missing"), str(output_dir)])
    assert exc.value.code == 1
    assert not output_dir.exists()
    assert "Source directory not found" in caplog.text


def test_bad_config_leaves_no_output_directory(source_dir, output_dir, tmp_path, caplog):
    with pytest.raises(SystemExit) as exc:
        main([str(source_dir), str(output_dir), "--config", str(tmp_path / "missing.yaml")])
    assert exc.value.code == 1
    assert not output_dir.exists()
    assert "Could not load config" in caplog.text


def test_invalid_yaml_config(source_dir, output_dir, tmp_path):
    config_path = tmp_path / "broken.yaml"
    config_path.write_text("discovery: [unclosed\n", encoding="utf-8")
    with pytest.raises(SystemExit) as exc:
        main([str(source_dir), str(output_dir), "--config", str(config_path)])
    assert exc.value.code == 1
    assert not output_dir.exists()
