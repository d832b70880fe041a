import pytest

from beanchase.app import build_parser, main


def test_parser_defaults():
    args = build_parser().parse_args([])
    assert args.assets == "Assets"
    assert args.map == 0
    assert args.verbose is False
    assert args.log_file is None


def test_parser_reads_options(tmp_path):
    args = build_parser().parse_args(["--assets", str(tmp_path), "--map", "2", "-v"])
    assert args.assets == str(tmp_path)
    assert args.map == 2
    assert args.verbose is True


def test_parser_rejects_unknown_map():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["--map", "7"])


def test_main_fails_without_assets(tmp_path, capsys):
    status = main(["--assets", str(tmp_path / "missing")])
    assert status == 1
    assert "failed to load font" in capsys.readouterr().err