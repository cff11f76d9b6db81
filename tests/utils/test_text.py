from __future__ import annotations

from elision.utils import common_prefix, common_suffix, valid_surrogate_pair_at

HIGH = "\ud83d"
LOW = "\ude00"


def test_common_prefix_and_suffix() -> None:
    assert common_prefix("interview", "internal") == "inter"
    assert common_suffix("testing", "resting") == "esting"
    assert common_prefix("", "abc") == ""
    assert common_suffix("abc", "xyz") == ""


def test_common_prefix_backs_off_before_split_pair() -> None:
    assert common_prefix("a" + HIGH + LOW, "a" + HIGH + "\ude01") == "a"


def test_common_suffix_backs_off_after_split_pair() -> None:
    assert common_suffix(HIGH + LOW + "z", "\ud83e" + LOW + "z") == "z"


def test_valid_surrogate_pair_at_bounds() -> None:
    text = "x" + HIGH + LOW

    assert valid_surrogate_pair_at(text, 1)
    assert not valid_surrogate_pair_at(text, 0)
    assert not valid_surrogate_pair_at(text, 2)
    assert not valid_surrogate_pair_at(text, -1)
