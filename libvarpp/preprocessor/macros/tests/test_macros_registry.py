import pytest

from libvarpp.preprocessor.macros import Macro, MacrosRegistry, registry_from_definitions
from libvarpp.preprocessor.macros.errors import InvalidDefinitionNameError


def test_registry_from_definitions() -> None:
    registry = registry_from_definitions([("A", 1), ("B", "text")])
    assert registry["A"] == Macro(name="A", value=1)
    assert registry["B"].expansion == "text"


def test_registry_duplicates_first_definition_wins() -> None:
    registry = registry_from_definitions([("A", 1), ("A", 2)])
    assert registry["A"].value == 1


def test_registry_define_returns_existing_on_duplicate() -> None:
    registry = MacrosRegistry()
    original = registry.define("A", 1)
    assert registry.define("A", 2) is original


@pytest.mark.parametrize("name", ["", "A B", "A-B", "A.B", "#A"])
def test_registry_invalid_names(name: str) -> None:
    with pytest.raises(InvalidDefinitionNameError):
        registry_from_definitions([(name, 1)])


def test_macro_boolean_expansion() -> None:
    assert Macro(name="A", value=True).expansion == "1"
    assert Macro(name="A", value=False).expansion == "0"
