from __future__ import annotations

import pytest

from fizzbuzz.classifier import classify, format_line, iter_lines


@pytest.mark.parametrize("number", [15, 30, 45, 150, 0, -15])
def test_classify_multiples_of_fifteen(number):
    assert classify(number) == "FizzBuzz"


@pytest.mark.parametrize("number", [3, 6, 9, 12, 99, -3])
def test_classify_multiples_of_three_only(number):
    assert classify(number) == "Fizz"


@pytest.mark.parametrize("number", [5, 10, 20, 25, 100, -5])
def test_classify_multiples_of_five_only(number):
    assert classify(number) == "Buzz"


@pytest.mark.parametrize("number", [1, 2, 4, 7, 8, 11, 98, -7])
def test_classify_other_numbers_render_decimal(number):
    assert classify(number) == str(number)


def test_classify_covers_two_full_periods():
    """Every number in 1..30 matches its divisibility class."""
    for number in range(1, 31):
        if number % 15 == 0:
            expected = "FizzBuzz"
        elif number % 3 == 0:
            expected = "Fizz"
        elif number % 5 == 0:
            expected = "Buzz"
        else:
            expected = str(number)
        assert classify(number) == expected


def test_format_line_joins_number_and_label():
    assert format_line(7) == "7: 7"
    assert format_line(9) == "9: Fizz"
    assert format_line(15) == "15: FizzBuzz"


def test_iter_lines_first_period():
    assert list(iter_lines(15)) == [
        "1: 1",
        "2: 2",
        "3: Fizz",
        "4: 4",
        "5: Buzz",
        "6: Fizz",
        "7: 7",
        "8: 8",
        "9: Fizz",
        "10: Buzz",
        "11: 11",
        "12: Fizz",
        "13: 13",
        "14: 14",
        "15: FizzBuzz",
    ]


@pytest.mark.parametrize("maximum", [0, -1, -100])
def test_iter_lines_empty_below_one(maximum):
    assert list(iter_lines(maximum)) == []
