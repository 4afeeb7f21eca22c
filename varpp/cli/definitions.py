import sys

from libvarpp.consts import VARPP_VERSION
from libvarpp.preprocessor.macros import MacroValue


def construct_propagated_toolchain_definitions(
    *,
    platform: str = sys.platform,
) -> list[tuple[str, MacroValue]]:
    """Definitions that toolchain propagates into each preprocessing (after user ones, so user may override them)."""
    toolchain_definitions: list[tuple[str, MacroValue]] = []
    match platform:
        case "darwin":
            toolchain_definitions = [
                ("OS_POSIX", 1),
                ("OS_DARWIN", 1),
                ("OS_MACOS", 1),
            ]
        case "linux":
            toolchain_definitions = [
                ("OS_POSIX", 1),
                ("OS_LINUX", 1),
            ]
        case "win32":
            toolchain_definitions = [
                ("OS_WINDOWS", 1),
            ]

    return [
        ("__VARPP__", 1),
        ("__VARPP_VERSION__", VARPP_VERSION),
        *toolchain_definitions,
    ]
