import pytest

from labworks.taylor import (
    compare_polynomials,
    evaluate_decomposition,
    evaluate_polynomial,
    main,
    shift_polynomial,
)

F = (-2.0, 1.0, -3.0, 0.0, 1.0)


@pytest.mark.parametrize("x", [-4.0, -1.0, 0.0, 2.5, 5.0, 10.0])
def test_expansion_agrees_with_polynomial(x):
    g = shift_polynomial(3.0, *F)
    assert evaluate_decomposition(x, g, 3.0) == pytest.approx(evaluate_polynomial(x, F))


def test_compare_accepts_correct_expansion():
    g = shift_polynomial(3.0, *F)
    assert compare_polynomials(F, g, 5.0, 3.0) is True


def test_compare_rejects_wrong_expansion():
    g = shift_polynomial(3.0, *F)
    g[0] += 1.0
    assert compare_polynomials(F, g, 5.0, 3.0) is False


def test_shift_by_zero_keeps_coefficients():
    assert shift_polynomial(0.0, 1.0, 2.0, 3.0) == [1.0, 2.0, 3.0]


def test_zero_polynomial():
    assert shift_polynomial(1.0, 0.0, 0.0, 0.0, 0.0) == [0.0, 0.0, 0.0, 0.0]


def test_leading_coefficient_is_unchanged():
    g = shift_polynomial(3.0, *F)
    assert len(g) == len(F)
    assert g[-1] == pytest.approx(F[-1])


def test_constant_term_is_value_at_a():
    g = shift_polynomial(-2.0, *F)
    assert g[0] == pytest.approx(evaluate_polynomial(-2.0, F))


def test_no_coefficients():
    with pytest.raises(ValueError):
        shift_polynomial(1.0)


def test_main_prints_check(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    f_part, g_part = lines[1].split(", ")
    assert f_part.split(" = ")[1] == g_part.split(" = ")[1]