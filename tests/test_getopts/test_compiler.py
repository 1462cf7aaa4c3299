"""Tests for option-specification compilation."""

import pytest
from optkit.lib.getopts import SpecCompiler, TokenClassifier, spec_compile
from optkit.lib.getopts.compiler import count_parse
from optkit.models.dataModel import OptionSpec, SpecTable


@pytest.fixture
def compiler() -> SpecCompiler:
    return SpecCompiler()


def test_aliases_share_one_record(compiler):
    table = compiler.compile("-e,--example:0:1 -t -x:1")
    short = table.lookup("-e")
    long = table.lookup("--example")
    assert short is long
    assert short.canonicalKey == "-e"
    assert (short.requiredCount, short.optionalCount) == (0, 1)


def test_flag_without_colon(compiler):
    table = compiler.compile("-t")
    spec = table.lookup("-t")
    assert spec.canonicalKey == "-t"
    assert spec.requiredCount == 0
    assert spec.optionalCount == 0
    assert spec.is_flag


def test_required_only(compiler):
    spec = compiler.compile("-x:1").lookup("-x")
    assert spec.requiredCount == 1
    assert spec.optionalCount == 0


def test_three_aliases_first_is_canonical(compiler):
    table = compiler.compile("--verbose,-v,-V:2:3")
    for alias in ("--verbose", "-v", "-V"):
        spec = table.lookup(alias)
        assert spec.canonicalKey == "--verbose"
        assert spec.requiredCount == 2
        assert spec.optionalCount == 3
    assert table.aliases_of(table.lookup("-v")) == ["--verbose", "-v", "-V"]


def test_empty_spec(compiler):
    table = compiler.compile("")
    assert len(table) == 0
    assert table.lookup("-t") is None


def test_whitespace_separates_definitions(compiler):
    table = compiler.compile("  -a\t-b:1\n-c:0:2  ")
    assert sorted(table.aliases) == ["-a", "-b", "-c"]
    assert len(table.bound()) == 3


def test_non_numeric_count_is_zero(compiler):
    spec = compiler.compile("-x:abc:2").lookup("-x")
    assert spec.requiredCount == 0
    assert spec.optionalCount == 2


def test_trailing_colon_keeps_defaults(compiler):
    spec = compiler.compile("-x:").lookup("-x")
    assert spec.is_flag


def test_extra_colons_overwrite_optional(compiler):
    spec = compiler.compile("-x:1:2:3").lookup("-x")
    assert spec.requiredCount == 1
    assert spec.optionalCount == 3


def test_comma_inside_count_binds_alias(compiler):
    table = compiler.compile("-x:1,2")
    assert "1" in table
    assert table.lookup("1") is table.lookup("-x")
    assert table.lookup("-x").canonicalKey == "-x"
    assert table.lookup("-x").requiredCount == 2


def test_comma_inside_optional_count_binds_alias(compiler):
    table = compiler.compile("-x:1:3,4")
    spec = table.lookup("-x")
    assert table.lookup("3") is spec
    assert (spec.requiredCount, spec.optionalCount) == (1, 4)


def test_count_alias_is_recognized_when_classifying(compiler):
    result = TokenClassifier(compiler.compile("-x:1,2")).classify(["1", "a", "b"])
    assert result.options == {"-x": "a b "}


def test_empty_aliases_bind_nothing(compiler):
    table = compiler.compile(",-x :1")
    assert "" not in table
    assert table.lookup("-x").canonicalKey == "-x"
    assert len(table.bound()) == 1


def test_duplicate_alias_last_write_wins(compiler):
    table = compiler.compile("-a,-b:1 -b:0:2")
    first = table.lookup("-a")
    second = table.lookup("-b")
    assert first is not second
    assert first.requiredCount == 1
    assert second.canonicalKey == "-b"
    assert second.optionalCount == 2
    assert table.aliases_of(first) == ["-a"]


def test_duplicate_definition_orphans_earlier_record(compiler):
    table = compiler.compile("-t:1 -t")
    assert table.lookup("-t").is_flag
    assert len(table.specs) == 2
    assert len(table.bound()) == 1


def test_dashless_keys_are_allowed(compiler):
    table = compiler.compile("run,r:1")
    assert table.lookup("r").canonicalKey == "run"


def test_table_sealed_after_compile(compiler):
    table = compiler.compile("-t")
    assert table.sealed
    with pytest.raises(RuntimeError):
        table.alias_bind("-u", 0)
    with pytest.raises(RuntimeError):
        table.spec_add(OptionSpec())


def test_open_table_rejects_bad_index():
    table = SpecTable()
    with pytest.raises(IndexError):
        table.alias_bind("-t", 0)


def test_spec_compile_shortcut():
    assert spec_compile("-t").lookup("-t").canonicalKey == "-t"


@pytest.mark.parametrize(
    "text, expected",
    [("3", 3), ("12abc", 12), ("abc", 0), ("", 0), ("-4", 0), ("+5", 5), ("007", 7)],
)
def test_count_parse(text, expected):
    assert count_parse(text) == expected
