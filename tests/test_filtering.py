"""Tests for the filtered_list helper.

filtered_list must avoid copying whenever it can: the original sequence when
everything passes, a shared empty sequence when nothing does.
"""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from treedeflib import filtered_list
from treedeflib._common.filtering import EMPTY


@pytest.mark.parametrize("orig", [[], [1], [1, 2], [1, 2, 3]])
def test_filter_all_or_none(orig):
    """All-pass returns the very same list, none-pass returns an empty sequence."""
    none_of = filtered_list(orig, lambda e: False)
    assert len(none_of) == 0

    all_of = filtered_list(orig, lambda e: True)
    assert all_of is orig


def test_none_passing_returns_shared_empty():
    """Nothing passing gives back the shared empty sequence, not a new list."""
    assert filtered_list([1, 2, 3], lambda e: False) is EMPTY
    assert filtered_list((4, 5), lambda e: e > 10) is EMPTY


@pytest.mark.parametrize("predicate,expected", [
    # keep and remove beginning
    (lambda e: e == 1, [1]),
    (lambda e: e != 1, [2, 3]),
    # keep and remove middle
    (lambda e: e == 2, [2]),
    (lambda e: e != 2, [1, 3]),
    # keep and remove end
    (lambda e: e == 3, [3]),
    (lambda e: e != 3, [1, 2]),
])
def test_filter_specific(predicate, expected):
    """A mixed result is a new list holding exactly the passing elements, in order."""
    orig = [1, 2, 3]
    result = filtered_list(orig, predicate)

    assert result == expected
    assert result is not orig
    assert orig == [1, 2, 3], "Input must not be modified"


def test_works_with_tuples():
    """Any sequence can be filtered, including immutable ones."""
    orig = ("a", "bb", "ccc")
    assert filtered_list(orig, lambda s: len(s) > 0) is orig
    assert filtered_list(orig, lambda s: len(s) > 1) == ["bb", "ccc"]


def test_empty_input_is_returned_unchanged():
    """Every element of an empty sequence passes, so nothing is copied."""
    orig = []
    assert filtered_list(orig, lambda e: True) is orig
    assert filtered_list(orig, lambda e: False) is orig
