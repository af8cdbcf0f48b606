import pytest

from MarkdownTree.emphasis import classify


@pytest.mark.parametrize("delimiter", ["*", "_"])
def test_single_run_is_italic(delimiter):
    assert classify(delimiter, 1) == "i"


@pytest.mark.parametrize("delimiter", ["*", "_"])
def test_double_run_is_bold(delimiter):
    assert classify(delimiter, 2) == "b"


@pytest.mark.parametrize("count", [3, 4, 0])
def test_other_counts_fall_back_to_italic(count):
    assert classify("*", count) == "i"


@pytest.mark.parametrize("delimiter", ["~", "=", "+", ""])
def test_unknown_delimiter_has_no_tag(delimiter):
    assert classify(delimiter, 2) is None
