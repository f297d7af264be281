# src/e2e/test_index_nearest_key.py
import pytest
from wordmatch.index import ValueIndex


def _index(*keys: int) -> ValueIndex:
    idx = ValueIndex()
    for k in keys:
        idx.add(k, f"w{k}")
    return idx


@pytest.mark.parametrize("target", [0, 1, 7, 24, 500])
def test_empty_index_finds_nothing(target):
    assert ValueIndex().nearest_key(target) is None


def test_margin_two_lower_side_wins():
    # margin 1: 6 and 8 are empty; margin 2: 5 is checked before 9
    assert _index(5, 10).nearest_key(7) == 5


def test_lower_preferred_over_upper_at_same_margin():
    assert _index(23, 25).nearest_key(24) == 23


def test_upper_side_found_when_lower_is_empty():
    assert _index(24).nearest_key(23) == 24


def test_exact_key_is_never_returned():
    idx = _index(24)
    assert idx.nearest_key(24) is None
    idx.add(30, "w30")
    assert idx.nearest_key(24) == 30


def test_exact_key_skipped_in_favour_of_neighbour():
    assert _index(10, 12).nearest_key(10) == 12


def test_target_above_max_key_searches_downward():
    assert _index(3).nearest_key(40) == 3


def test_upper_candidates_beyond_max_key_are_not_tested():
    idx = _index(5)
    assert idx.max_key == 5
    assert idx.nearest_key(4) == 5
    assert idx.nearest_key(5) is None


def test_add_tracks_max_key_and_bucket_membership():
    idx = ValueIndex()
    assert idx.max_key is None
    assert idx.add(9, "ice") is True
    assert idx.add(9, "ice") is False
    idx.add(3, "ab")
    assert idx.max_key == 9
    assert len(idx) == 2 and 9 in idx and 4 not in idx
    assert list(idx.bucket(9)) == ["ice"]
    assert idx.bucket(4) is None
    assert idx.bucket(None) is None


def test_docstring_example_holds():
    import doctest
    import wordmatch.index as index_mod
    failed, attempted = doctest.testmod(index_mod)
    assert attempted > 0 and failed == 0
