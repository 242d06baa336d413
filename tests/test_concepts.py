import pytest

from chartviz.concepts import (
    DOMAIN_MAX,
    DOMAIN_MIN,
    INVALID_FLOAT,
    AsymptoteType,
    Domain,
    Equation,
    Interval,
    format_domain,
    format_equation,
    format_number,
    format_point,
    is_digit,
    parse_float,
)


def test_default_domain_spans_limits():
    domain = Domain()
    assert domain.left == DOMAIN_MIN
    assert domain.right == DOMAIN_MAX
    assert domain.contains(0.0)
    assert domain.contains(DOMAIN_MIN)
    assert domain.contains(DOMAIN_MAX)
    assert not domain.contains(DOMAIN_MAX + 1)


def test_closed_domain_includes_ends():
    domain = Domain(left=-1.0, right=1.0)
    assert domain.contains(-1.0)
    assert domain.contains(1.0)
    assert not domain.contains(1.5)


def test_open_domain_excludes_ends():
    domain = Domain(left=-1.0, right=1.0, open_left=True, open_right=True)
    assert not domain.contains(-1.0)
    assert not domain.contains(1.0)
    assert domain.contains(0.5)


def test_format_default_domain():
    assert format_domain(Domain()) == "[-inf,inf]"


def test_format_domain_with_numbers():
    assert format_domain(Domain(left=1.5, right=2.25)) == "[1.50,2.25]"


def test_format_domain_open_right_uses_parenthesis():
    text = format_domain(Domain(open_right=True))
    assert text.startswith("[-inf,")
    assert text.endswith(")")


def test_format_domain_open_left_gives_only_parenthesis():
    assert format_domain(Domain(open_left=True)) == "("


def test_format_equation_valid_is_empty():
    assert format_equation(Equation(1.0, 2.0, True)) == ""


def test_format_equation_without_slope():
    assert format_equation(Equation(offset=1.0)) == "y=1.000000"


def test_format_equation_positive_slope():
    text = format_equation(Equation(offset=0.0, slope=2.0))
    assert text.startswith("y=")
    assert text.endswith("x")
    assert "+" in text


def test_format_equation_negative_slope_keeps_sign_of_value():
    text = format_equation(Equation(offset=0.0, slope=-2.0))
    assert "--" in text
    assert text.endswith("x")


def test_format_number():
    assert format_number(3.14159, 2) == "3.14"
    assert format_number(2.0, 0) == "2"


def test_format_point_joins_coordinates():
    assert format_point((1.0, 2.5)) == format_number(1.0, 2) + " , " + format_number(2.5, 2)


def test_parse_float_reads_numbers():
    assert parse_float("2.5") == 2.5
    assert parse_float("  4abc") == 4.0
    assert parse_float("-8") == -8.0


def test_parse_float_invalid_returns_max():
    assert parse_float("abc") == INVALID_FLOAT
    assert parse_float("") == INVALID_FLOAT


@pytest.mark.parametrize("ch", list("0123456789"))
def test_is_digit_accepts_digits(ch):
    assert is_digit(ch) is True


@pytest.mark.parametrize("ch", ["a", ".", " ", "", "12"])
def test_is_digit_rejects_others(ch):
    assert is_digit(ch) is False


def test_value_types_hold_fields():
    interval = Interval(1.0, 2.0)
    assert (interval.a, interval.b) == (1.0, 2.0)
    assert Equation() == Equation(0.0, 0.0, False)
    assert len(AsymptoteType) == 4