from pathlib import Path

import pytest

from varpp.cli.main import cli_entry_point

SOURCE = """\
header
#if VARIANT == 1
#output 1
variant one
#elif VARIANT == 2
#output 2
variant two
#endif
footer
"""


def _run(argv: list[str]) -> int | str | None:
    with pytest.raises(SystemExit) as exit_info:
        cli_entry_point(prog="varpp", argv=argv)
    return exit_info.value.code


def test_cli_preprocess_into_stdout(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    source = tmp_path / "source.txt"
    source.write_text(SOURCE)

    assert _run([str(source), "-DVARIANT=2"]) == 0
    assert capsys.readouterr().out == "header\nvariant two\nfooter\n"


def test_cli_preprocess_single_output_index(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    source = tmp_path / "source.txt"
    source.write_text(SOURCE)

    assert _run([str(source), "-DVARIANT=1", "-O", "0"]) == 0
    assert capsys.readouterr().out == "header\n"


def test_cli_preprocess_into_files(tmp_path: Path) -> None:
    source = tmp_path / "source.txt"
    source.write_text(SOURCE)
    output = tmp_path / "out.txt"

    assert _run([str(source), "-DVARIANT=2", "-o", str(output)]) == 0
    assert (tmp_path / "out.0.txt").read_text() == "header\n"
    assert (tmp_path / "out.1.txt").read_text() == ""
    assert (tmp_path / "out.2.txt").read_text() == "variant two\nfooter\n"


def test_cli_preprocess_into_single_file(tmp_path: Path) -> None:
    source = tmp_path / "source.txt"
    source.write_text(SOURCE)
    output = tmp_path / "out.txt"

    assert _run([str(source), "-o", str(output)]) == 0
    assert output.read_text() == "header\nfooter\n"


def test_cli_preprocess_error(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    source = tmp_path / "source.txt"
    source.write_text("text\n#if 1 / 0\n#endif\n")

    assert _run([str(source)]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "'source.txt:2'" in captured.err
    assert "[division-by-zero-error]" in captured.err


def test_cli_preprocess_output_index_never_selected(tmp_path: Path) -> None:
    source = tmp_path / "source.txt"
    source.write_text("text\n")
    assert _run([str(source), "-O", "3"]) == 1


def test_cli_user_definitions_override_toolchain(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    source = tmp_path / "source.txt"
    source.write_text("__VARPP__\n")

    assert _run([str(source), "-D__VARPP__=7"]) == 0
    assert capsys.readouterr().out == "7\n"

    assert _run([str(source), "--no-toolchain-definitions"]) == 0
    assert capsys.readouterr().out == "__VARPP__\n"


def test_cli_evaluate(capsys: pytest.CaptureFixture[str]) -> None:
    assert _run(["-e", "LEVEL * 2 + 1", "-DLEVEL=3"]) == 0
    assert capsys.readouterr().out == "7\n"


def test_cli_evaluate_error(capsys: pytest.CaptureFixture[str]) -> None:
    assert _run(["-e", "3 3"]) == 1
    assert "[malformed-operator-sequence-error]" in capsys.readouterr().err


def test_cli_version(capsys: pytest.CaptureFixture[str]) -> None:
    assert _run(["--version"]) == 0
    assert "[Varpp toolchain]" in capsys.readouterr().out
