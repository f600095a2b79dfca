import pytest

from pushswap.parsing import (
    INT_MAX,
    INT_MIN,
    ParseError,
    build_stack,
    has_duplicates,
    parse_int,
    rank,
    split_words,
)


def test_parse_plain_number():
    assert parse_int("42") == 42


def test_parse_with_whitespace_and_sign():
    assert parse_int("  -17  ") == -17
    assert parse_int("+5") == 5
    assert parse_int("\t9\n") == 9


def test_parse_leading_zeros():
    assert parse_int("007") == 7


def test_parse_limits():
    assert parse_int("-2147483648") == INT_MIN
    assert parse_int(str(INT_MAX)) == INT_MAX
    assert parse_int("   -2147483648") == INT_MIN


def test_lone_sign_followed_by_space_is_zero():
    assert parse_int("- ") == 0


@pytest.mark.parametrize(
    "text",
    ["2147483648", "", "   ", "abc", "1a", "--1", "+-1", "+", "-", "1 2", "-02147483648", "-2147483649"],
)
def test_parse_rejects(text):
    with pytest.raises(ParseError):
        parse_int(text)


def test_parse_error_is_value_error():
    with pytest.raises(ValueError):
        parse_int("x")


def test_split_words_drops_empty_pieces():
    assert split_words("  1 2   3 ", " ") == ["1", "2", "3"]
    assert split_words("", " ") == []
    assert split_words("   ", " ") == []


def test_has_duplicates():
    assert has_duplicates([1, 2, 1]) is True
    assert has_duplicates([1, 2, 3]) is False
    assert has_duplicates([]) is False


def test_rank_example():
    assert rank([30, 10, 20]) == [2, 0, 1]


def test_rank_is_permutation_consistent_with_order():
    values = [5, -3, 99, 0, 12, -40]
    ranks = rank(values)
    assert sorted(ranks) == list(range(len(values)))
    for i, vi in enumerate(values):
        for j, vj in enumerate(values):
            assert (vi < vj) == (ranks[i] < ranks[j])


def test_build_stack_keeps_order_and_ranks():
    stack = build_stack(["3", "1", "2"])
    assert stack.values() == [3, 1, 2]
    assert stack.indices() == rank([3, 1, 2])
    assert sorted(stack.indices()) == [0, 1, 2]


@pytest.mark.parametrize("args", [[], ["1", ""], ["1", "1"], ["1", "+1"], ["1", "x"]])
def test_build_stack_rejects(args):
    with pytest.raises(ParseError):
        build_stack(args)