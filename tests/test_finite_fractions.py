import pytest

from labworks.finite_fractions import check_numbers, has_finite_representation, main


@pytest.mark.parametrize(
    "fraction, base, expected",
    [
        (0.5, 2, True),
        (0.0, 10, True),
        (0.1, 10, True),
        (1 / 3, 10, False),
        (1 / 3, 3, True),
        (0.1, 2, False),
    ],
)
def test_has_finite_representation(fraction, base, expected):
    assert has_finite_representation(fraction, base) is expected


def test_check_numbers_uses_fractional_part():
    assert check_numbers(10, 0.3, 2.5, 1 / 3) == [True, True, False]


def test_check_numbers_matches_single_checks():
    numbers = (0.25, 3.75, 0.2, 7.0, 0.125)
    for base in (2, 3, 10):
        expected = [has_finite_representation(n - int(n), base) for n in numbers]
        assert check_numbers(base, *numbers) == expected


def test_check_numbers_without_numbers():
    assert check_numbers(10) == []


def test_main_demo(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Number 0.500000 have finite representation" in out
    assert len(out.splitlines()) == 10


def test_main_with_arguments(capsys):
    assert main(["2", "0.75"]) == 0
    assert capsys.readouterr().out == "Number 0.750000 have finite representation\n"


def test_main_rejects_bad_base(capsys):
    assert main(["two", "0.5"]) == 1
    assert "Incorrect input" in capsys.readouterr().out