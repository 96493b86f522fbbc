import pytest

from ultimate_logger import LogLevel

ORDERED = [
    LogLevel.TRACE,
    LogLevel.DEBUG,
    LogLevel.INFO,
    LogLevel.WARNING,
    LogLevel.ERROR,
    LogLevel.CRITICAL,
]


def test_ordinals_follow_severity():
    assert [lvl.ordinal() for lvl in ORDERED] == [0, 1, 2, 3, 4, 5]


def test_levels_compare_by_rank():
    assert LogLevel.TRACE < LogLevel.DEBUG < LogLevel.INFO
    assert LogLevel.INFO < LogLevel.WARNING < LogLevel.ERROR < LogLevel.CRITICAL
    assert LogLevel.CRITICAL > LogLevel.TRACE
    assert LogLevel.WARNING >= LogLevel.WARNING
    assert sorted(reversed(ORDERED)) == ORDERED


def test_labels():
    assert [lvl.label() for lvl in ORDERED] == [
        "trace", "debug", "info", "warning", "error", "critical",
    ]
    assert str(LogLevel.ERROR) == "error"


def test_colors_are_distinct():
    colors = [lvl.color() for lvl in ORDERED]
    assert len(set(colors)) == len(colors)
    assert LogLevel.ERROR.color() == "red"
    assert LogLevel.CRITICAL.color() == "bright_red"


def test_from_name_is_case_insensitive():
    assert LogLevel.from_name("warning") is LogLevel.WARNING
    assert LogLevel.from_name(" Critical ") is LogLevel.CRITICAL


def test_from_name_rejects_unknown():
    with pytest.raises(ValueError, match="Unknown log level"):
        LogLevel.from_name("verbose")


def test_comparison_with_other_types_is_unsupported():
    with pytest.raises(TypeError):
        LogLevel.INFO < 3
