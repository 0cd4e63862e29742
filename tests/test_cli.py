from pathlib import Path

import pytest

from luatp import __version__
from luatp.cli import build_parser, main


def write(path: Path, text: str) -> str:
    path.write_text(text, encoding="utf-8")
    return str(path)


def test_parser_collects_repeated_options() -> None:
    args = build_parser().parse_args(["-f", "a.txt", "-l", "m.lua", "-f", "b.txt", "-o", "out.txt"])

    assert args.input_files == ["a.txt", "b.txt"]
    assert args.preload_scripts == ["m.lua"]
    assert args.output == "out.txt"


def test_parser_defaults_to_console_output() -> None:
    args = build_parser().parse_args(["-f", "a.txt"])

    assert args.output == "console"
    assert args.preload_scripts == []
    assert args.encoding == "utf-8"


def test_version_flag(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["-v"])

    assert excinfo.value.code == 0
    assert __version__ in capsys.readouterr().out


def test_no_arguments_prints_help(capsys: pytest.CaptureFixture[str]) -> None:
    assert main([]) == 1
    assert "usage:" in capsys.readouterr().out


def test_missing_input_option_is_a_usage_error(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    script = write(tmp_path / "m.lua", "")

    with pytest.raises(SystemExit) as excinfo:
        main(["-l", script])

    assert excinfo.value.code == 2
    assert "Input file is not specified" in capsys.readouterr().err


def test_nonexistent_input_file_is_a_usage_error(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    missing = str(tmp_path / "nope.txt")

    with pytest.raises(SystemExit) as excinfo:
        main(["-f", missing])

    assert excinfo.value.code == 2
    assert f"Provided input file {missing} does not exist" in capsys.readouterr().err


def test_successful_run_writes_output_file(tmp_path: Path) -> None:
    script = write(tmp_path / "m.lua", "macro('up', {'raw'}, function(s) echo(s:upper()) end)\n")
    source = write(tmp_path / "in.txt", "up(hello) world\n")
    output = tmp_path / "out.txt"

    assert main(["-l", script, "-f", source, "-o", str(output)]) == 0
    assert output.read_text(encoding="utf-8") == "HELLO world\n"


def test_successful_run_prints_to_console(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    source = write(tmp_path / "in.txt", "<?lua echo(1 + 1) lua?>\n")

    assert main(["-f", source]) == 0
    assert capsys.readouterr().out == "2\n"


def test_processing_error_is_reported_with_location(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    source = write(tmp_path / "in.txt", "ok\n<?lua error('exploded') lua?>\n")
    output = tmp_path / "out.txt"

    assert main(["-f", source, "-o", str(output)]) == 1

    err = capsys.readouterr().err
    assert f"Error at {source}:2" in err
    assert "exploded" in err
    assert not output.exists()
