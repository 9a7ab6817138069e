import pytest

from satdpll.bitvector import BitVector
from satdpll.interval import BoolInterval


@pytest.mark.parametrize("text", ["1-0", "----", "0", "10101010-1", "111000---"])
def test_string_round_trip(text):
    assert str(BoolInterval.from_string(text)) == text


def test_from_string_components():
    interval = BoolInterval.from_string("1-0")
    assert [interval[i] for i in range(3)] == ["1", "-", "0"]
    assert len(interval) == 3


def test_from_string_vectors():
    interval = BoolInterval.from_string("1-0")
    assert str(interval.vec) == "100"
    assert str(interval.dnc) == "010"


def test_from_string_empty_raises():
    with pytest.raises(ValueError):
        BoolInterval.from_string("")


def test_from_vectors_matching():
    interval = BoolInterval.from_vectors("100", "010")
    assert interval == BoolInterval.from_string("1-0")


def test_from_vectors_mismatch_gives_default():
    interval = BoolInterval.from_vectors("10", "010")
    assert str(interval) == "00000000"


def test_from_vectors_none_gives_default():
    interval = BoolInterval.from_vectors(None, "010")
    assert len(interval) == 8
    assert interval.rank() == 8


def test_init_length_mismatch():
    with pytest.raises(ValueError):
        BoolInterval(BitVector(3), BitVector(4))


def test_init_copies_vectors():
    vec = BitVector.from_string("10")
    interval = BoolInterval(vec, BitVector(2))
    vec[1] = 1
    assert str(interval) == "10"


def test_setitem_values():
    interval = BoolInterval.from_string("---")
    interval[0] = "1"
    interval[1] = "0"
    assert str(interval) == "10-"
    interval[0] = "-"
    assert str(interval) == "-0-"
    assert interval.vec[0] == 0


def test_index_out_of_range():
    interval = BoolInterval.from_string("1-0")
    with pytest.raises(IndexError):
        interval[3]
    with pytest.raises(IndexError):
        interval[3] = "1"
    assert str(interval) == "1-0"
    assert len(interval) == 3


def test_copy_is_independent():
    interval = BoolInterval.from_string("1-0")
    clone = interval.copy()
    clone[1] = "1"
    assert interval == BoolInterval.from_string("1-0")
    assert clone == BoolInterval.from_string("110")


def test_equality():
    assert BoolInterval.from_string("1-0") == BoolInterval.from_string("1-0")
    assert not (BoolInterval.from_string("1-0") == BoolInterval.from_string("1-1"))
    assert not (BoolInterval.from_string("1-0") == BoolInterval.from_string("1-0-"))


def test_rank():
    assert BoolInterval.from_string("1-0").rank() == 2
    assert BoolInterval.from_string("----").rank() == 0


@pytest.mark.parametrize(
    "left, right, expected",
    [
        ("1-0", "0--", True),
        ("1-0", "1-1", True),
        ("1-0", "--0", False),
        ("---", "101", False),
        ("1-0", "1-0", False),
    ],
)
def test_is_orthogonal(left, right, expected):
    a = BoolInterval.from_string(left)
    b = BoolInterval.from_string(right)
    assert a.is_orthogonal(b) is expected
    assert b.is_orthogonal(a) is expected


@pytest.mark.parametrize(
    "left, right, expected",
    [
        ("1-0", "1--", True),
        ("1-0", "0-1", False),
        ("---", "101", False),
        ("1-0", "0-0", True),
    ],
)
def test_is_equal_component(left, right, expected):
    a = BoolInterval.from_string(left)
    b = BoolInterval.from_string(right)
    assert a.is_equal_component(b) is expected
    assert b.is_equal_component(a) is expected


def test_comparison_length_mismatch_raises():
    with pytest.raises(ValueError):
        BoolInterval.from_string("10").is_orthogonal(BoolInterval.from_string("101"))
    with pytest.raises(ValueError):
        BoolInterval.from_string("10").is_equal_component(BoolInterval.from_string("101"))