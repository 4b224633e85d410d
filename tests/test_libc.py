import pytest

from metalib.libc import atoi, is_prime, isneg, strcmp, strncmp, strncpy, strstr


@pytest.mark.parametrize(
    "text, expected",
    [("42", 42), ("-7", -7), ("--5", 5), ("x12y34", 12), ("abc", 0), ("", 0)],
)
def test_atoi(text, expected):
    assert atoi(text) == expected


def test_atoi_out_of_bounds_gives_zero():
    assert atoi("99999999999") == 0
    assert atoi("2147483647") == 2147483647


@pytest.mark.parametrize("nb", [2, 3, 5, 7, 11, 13, 97])
def test_is_prime_true(nb):
    assert is_prime(nb) is True


@pytest.mark.parametrize("nb", [-7, 0, 1, 4, 9, 100])
def test_is_prime_false(nb):
    assert is_prime(nb) is False


def test_isneg():
    assert isneg(0) is True
    assert isneg(-3) is True
    assert isneg(5) is False


def test_strcmp():
    assert strcmp("abc", "abc") == 0
    assert strcmp("abc", "abd") < 0
    assert strcmp("abd", "abc") > 0
    assert strcmp("ab", "abc") == -ord("c")


def test_strncmp():
    assert strncmp("abcdef", "abcxyz", 3) == 0
    assert strncmp("abcdef", "abcxyz", 4) < 0
    assert strncmp("b", "a", 0) > 0


def test_strncpy():
    assert strncpy("abcdef", 2) == "abc"
    assert strncpy("ab", 10) == "ab"
    assert strncpy("abc", -1) == ""