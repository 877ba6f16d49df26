import pytest

from nvmefabrics.textutil import strcount, strends, strstarts


@pytest.mark.parametrize(
    "haystack, needle, expected",
    [
        ("aaa aaa", "a", 6),
        ("aaa aaa", "ab", 0),
        ("aaa aaa", "aa", 2),
    ],
)
def test_strcount_documented_examples(haystack, needle, expected):
    assert strcount(haystack, needle) == expected


def test_strcount_empty_haystack():
    assert strcount("", "x") == 0


def test_strcount_empty_needle_rejected():
    with pytest.raises(ValueError):
        strcount("abc", "")


def test_strcount_non_overlapping_invariant():
    text = "nvme-nvme-nvme"
    assert strcount(text, "nvme") * len("nvme") <= len(text)
    assert strcount(text, "nvme") == len(text.split("nvme")) - 1


def test_strstarts():
    assert strstarts("nvme-subsys0", "nvme")
    assert not strstarts("nvme", "nvme-subsys")
    assert strstarts("anything", "")


def test_strends():
    assert strends("nvme0n1", "n1")
    assert not strends("n1", "nvme0n1")
    assert strends("abc", "")
    assert not strends("abc", "ab")