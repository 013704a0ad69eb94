from __future__ import annotations

import pytest

from optscan.exceptions import OptScanError
from optscan.parser.errors import LongSpecError
from optscan.parser.grammar import Grammar
from optscan.parser.grammar import LongSpec
from optscan.parser.grammar import ShortSpec


def test_short_spec_lookup() -> None:
    spec = ShortSpec("vho:a")

    assert spec.lookup("v") is False
    assert spec.lookup("o") is True
    assert spec.lookup("a") is False
    assert spec.lookup("x") is None
    assert "h" in spec
    assert str(spec) == "vho:a"


def test_short_spec_colon_is_not_an_option() -> None:
    spec = ShortSpec(":o:")

    assert spec.lookup(":") is None
    assert spec.lookup("o") is True


def test_short_spec_first_declaration_wins() -> None:
    assert ShortSpec("oo:").lookup("o") is False


def test_empty_short_spec_is_falsy() -> None:
    assert not ShortSpec("")
    assert not ShortSpec(":")
    assert ShortSpec("v")


@pytest.mark.parametrize(
    ["entry", "expected"],
    [
        ("verbose", LongSpec("verbose")),
        (("verbose",), LongSpec("verbose", False, None)),
        (["output", True], LongSpec("output", True, None)),
        (("output", True, "o"), LongSpec("output", True, "o")),
        (("output", 1, "o"), LongSpec("output", False, "o")),
        (("output", True, None), LongSpec("output", True, None)),
        (LongSpec("name", True), LongSpec("name", True)),
    ],
)
def test_long_spec_coerce(entry: object, expected: LongSpec) -> None:
    assert LongSpec.coerce(entry) == expected


@pytest.mark.parametrize(
    ["spec", "key"],
    [
        (LongSpec("verbose", False, "v"), "v"),
        (LongSpec("verbose", False, "vv"), "verbose"),
        (LongSpec("verbose", False, ""), "verbose"),
        (LongSpec("verbose"), "verbose"),
    ],
)
def test_long_spec_key(spec: LongSpec, key: str) -> None:
    assert spec.key == key


@pytest.mark.parametrize(
    "entry",
    [42, None, (), ("a", True, "b", "c"), ("", True), (3, True)],
)
def test_long_spec_coerce_rejects_malformed(entry: object) -> None:
    with pytest.raises(LongSpecError) as e:
        LongSpec.coerce(entry)

    assert isinstance(e.value, OptScanError)
    assert str(e.value).startswith(f"long option {entry!r}: ")


def test_grammar_find_long_uses_declared_order() -> None:
    grammar = Grammar("v", [("name", True), ("name", False, "n")])

    assert grammar.find_long("name") == LongSpec("name", True)
    assert grammar.find_long("other") is None


def test_grammar_is_empty() -> None:
    assert Grammar().is_empty()
    assert not Grammar("v").is_empty()
    assert not Grammar(long_options=["verbose"]).is_empty()


def test_grammar_accepts_short_spec_instance() -> None:
    spec = ShortSpec("o:")

    assert Grammar(spec).short_options is spec
