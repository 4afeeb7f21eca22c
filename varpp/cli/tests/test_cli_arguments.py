from pathlib import Path

import pytest

from varpp.cli.definitions import construct_propagated_toolchain_definitions
from varpp.cli.goals.preprocess import infer_output_buffer_filepath
from varpp.cli.parser.builder import build_cli_parser
from varpp.cli.parser.parser import parse_cli_arguments, parse_raw_definition


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("DEBUG", ("DEBUG", 1)),
        ("LEVEL=2", ("LEVEL", 2)),
        ("OFFSET=-4", ("OFFSET", -4)),
        ("NAME=release", ("NAME", "release")),
        ("EQUATION=a=b", ("EQUATION", "a=b")),
        ("EMPTY=", ("EMPTY", "")),
        ("WIDE=4294967297", ("WIDE", 1)),
        ("LOWEST=-2147483648", ("LOWEST", -2147483648)),
        ("LONG=" + "0" * 5000 + "7", ("LONG", 7)),
    ],
)
def test_parse_raw_definition(raw: str, expected: tuple[str, int | str]) -> None:
    assert parse_raw_definition(raw) == expected


def test_parse_cli_arguments(tmp_path: Path) -> None:
    source = tmp_path / "source.txt"
    source.write_text("text\n")

    parser = build_cli_parser("varpp")
    args = parse_cli_arguments(
        parser.parse_args(
            [
                str(source),
                "-DDEBUG",
                "-D",
                "LEVEL=3",
                "--directive-prefix",
                "@",
                "--unknown-directives",
                "append",
                "-o",
                str(tmp_path / "out.txt"),
                "-O",
                "1",
            ],
        ),
    )

    assert args.source_filepath == source
    assert args.definitions == [("DEBUG", 1), ("LEVEL", 3)]
    assert args.preprocessor.directive_prefix == "@"
    assert args.preprocessor.unknown_directive_policy == "append"
    assert args.output_filepath == tmp_path / "out.txt"
    assert args.output_index == 1
    assert args.toolchain_definitions
    assert not args.verbose


def test_parse_cli_arguments_defaults(tmp_path: Path) -> None:
    source = tmp_path / "source.txt"
    source.write_text("text\n")

    args = parse_cli_arguments(build_cli_parser("varpp").parse_args([str(source)]))
    assert args.preprocessor.directive_prefix == "#"
    assert args.preprocessor.unknown_directive_policy == "fail"
    assert args.output_filepath is None
    assert args.output_index is None


def test_parse_cli_arguments_missing_source() -> None:
    with pytest.raises(SystemExit) as exit_info:
        parse_cli_arguments(build_cli_parser("varpp").parse_args(["does-not-exist.txt"]))
    assert exit_info.value.code == 1


def test_parse_cli_arguments_output_overwrites_source(tmp_path: Path) -> None:
    source = tmp_path / "source.txt"
    source.write_text("text\n")
    with pytest.raises(SystemExit):
        parse_cli_arguments(build_cli_parser("varpp").parse_args([str(source), "-o", str(source)]))


def test_parse_cli_arguments_exclusive_goals() -> None:
    with pytest.raises(SystemExit):
        parse_cli_arguments(build_cli_parser("varpp").parse_args(["--version", "-e", "1"]))


def test_infer_output_buffer_filepath() -> None:
    output = Path("build") / "out.txt"
    assert infer_output_buffer_filepath(output, 0, is_single_output=True) == output
    assert infer_output_buffer_filepath(output, 2, is_single_output=False) == Path("build") / "out.2.txt"
    assert infer_output_buffer_filepath(Path("out"), 1, is_single_output=False) == Path("out.1")


def test_toolchain_definitions() -> None:
    definitions = dict(construct_propagated_toolchain_definitions(platform="linux"))
    assert definitions["__VARPP__"] == 1
    assert definitions["OS_LINUX"] == 1
    assert "OS_DARWIN" not in definitions
