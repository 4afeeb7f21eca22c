from libvarpp.preprocessor.macros import registry_from_definitions, try_expand_macros_in_line


def test_expand_integer_macro() -> None:
    macros = registry_from_definitions([("DEBUG", 1)])
    assert try_expand_macros_in_line("#if DEBUG", macros) == "#if 1"


def test_expand_string_macro_verbatim() -> None:
    macros = registry_from_definitions([("NAME", "release build")])
    assert try_expand_macros_in_line("name: NAME!", macros) == "name: release build!"


def test_expand_multiple_words_keeps_text_between() -> None:
    macros = registry_from_definitions([("A", 1), ("B", 20)])
    assert try_expand_macros_in_line("(A + x) * B;", macros) == "(1 + x) * 20;"


def test_expand_negative_integer() -> None:
    macros = registry_from_definitions([("OFFSET", -4)])
    assert try_expand_macros_in_line("OFFSET", macros) == "-4"


def test_expand_matches_only_whole_words() -> None:
    macros = registry_from_definitions([("DEBUG", 1)])
    assert try_expand_macros_in_line("DEBUG2 _DEBUG DEBUG_LEVEL", macros) is None
    assert try_expand_macros_in_line("x=DEBUG,y=DEBUG", macros) == "x=1,y=1"


def test_expand_is_case_sensitive() -> None:
    macros = registry_from_definitions([("DEBUG", 1)])
    assert try_expand_macros_in_line("debug Debug", macros) is None


def test_expand_is_not_recursive() -> None:
    macros = registry_from_definitions([("A", "B"), ("B", "A")])
    assert try_expand_macros_in_line("A B", macros) == "B A"


def test_expand_word_at_end_of_line() -> None:
    macros = registry_from_definitions([("LAST", 9)])
    assert try_expand_macros_in_line("value = LAST", macros) == "value = 9"


def test_expand_without_known_words_returns_nothing() -> None:
    macros = registry_from_definitions([("DEBUG", 1)])
    line = "  plain text, with (symbols) & 123  "
    assert try_expand_macros_in_line(line, macros) is None


def test_expand_with_empty_registry() -> None:
    assert try_expand_macros_in_line("DEBUG", registry_from_definitions([])) is None


def test_expand_into_empty_string() -> None:
    macros = registry_from_definitions([("EMPTY", "")])
    assert try_expand_macros_in_line("[EMPTY]", macros) == "[]"
