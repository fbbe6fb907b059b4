import pytest

from shtools.fizzbuzz import DIVISORS, fizzbuzz, main


@pytest.mark.parametrize("n, name", [(3, "Fizz"), (5, "Buzz"), (7, "Wizz"), (17, "Peach")])
def test_single_divisor(n, name):
    assert fizzbuzz(n) == name


def test_no_divisor_gives_number():
    assert fizzbuzz(1) == "1"
    assert fizzbuzz(2) == "2"
    assert fizzbuzz(19) == "19"


def test_names_in_divisor_order():
    assert fizzbuzz(15) == "Fizz" + "Buzz" + "Claire"


def test_zero_has_every_name():
    result = fizzbuzz(0)
    assert result.startswith("FizzBuzz")
    assert result.endswith("Peach")
    assert len(result) == sum(len(name) for _, name in DIVISORS)


@pytest.mark.parametrize("n", range(1, 200))
def test_result_is_number_or_names(n):
    result = fizzbuzz(n)
    names = [name for divisor, name in DIVISORS if n % divisor == 0]
    if names:
        assert result == "".join(names)
    else:
        assert result == str(n)


def test_main_numbers(capsys):
    assert main(["3", "4"]) == 0
    assert capsys.readouterr().out == "Fizz\n4\n"


def test_main_octal_input(capsys):
    assert main(["011"]) == 0
    assert capsys.readouterr().out == fizzbuzz(0o11) + "\n"


def test_main_invalid_number(capsys):
    assert main(["3", "x"]) == 1
    captured = capsys.readouterr()
    assert captured.out == "Fizz\n"
    assert captured.err == 'given string "x" is not a valid number.\n'


def test_main_option_is_checked_as_number(capsys):
    assert main(["-p", "3"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert '"-p"' in captured.err


def test_main_help(capsys):
    assert main(["-h"]) == 0
    assert capsys.readouterr().out.startswith("Usage: fizzbuzz")