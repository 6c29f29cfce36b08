import logging
from concurrent.futures import ThreadPoolExecutor

import pytest

from config.config import AngleUnit, CalculatorConfig
from core.calculator import Calculator, calculate
from core.errors import CalculatorError, EvalError, ParseError

DEGREE = CalculatorConfig(angle_unit=AngleUnit.DEGREE)
RADIAN = CalculatorConfig(angle_unit=AngleUnit.RADIAN)


def test_basic_arithmetic() -> None:
    assert calculate("1+2") == 3.0
    assert calculate("2+3*4") == 14.0
    assert calculate("(2+3)*4") == 20.0
    assert calculate("2-3-4") == -5.0
    assert calculate("8/4/2") == 1.0
    assert calculate("-2^2") == -4.0
    assert calculate("2*-3") == -6.0


def test_power_is_left_associative() -> None:
    assert calculate("2^3^2") == 64.0


def test_scientific_notation() -> None:
    assert calculate("3.375e+09^(1/3)") == pytest.approx(1500.0)
    assert calculate("5e-02") == pytest.approx(0.05)
    assert calculate("2e+02 + 28") == 228.0


def test_functions_in_radians() -> None:
    assert calculate("sqrt(cos(17+e) ) ", RADIAN) == pytest.approx(0.8036167306671608)
    assert calculate("e+tg(250)/pi", RADIAN) == pytest.approx(1.4363579480746753)
    assert calculate("sqrt(ln(e))", RADIAN) == 1.0
    assert calculate("exp(5)+ sin(pi) *ctg(3)", RADIAN) == pytest.approx(148.4131591025766)
    assert calculate("sin(pi/2)", RADIAN) == pytest.approx(1.0)
    assert calculate("sqrt(2^2 * 5 + 1)", RADIAN) == pytest.approx(4.58257569495584)
    assert calculate("ln(exp(2))", RADIAN) == pytest.approx(2.0)
    assert calculate("ln(e^2)", RADIAN) == pytest.approx(2.0)


def test_functions_in_degrees() -> None:
    assert calculate("sin(90)", DEGREE) == pytest.approx(1.0)
    assert calculate("e+tg(250)/pi", DEGREE) == pytest.approx(3.592831053138179)
    assert calculate("sin(90)", {"angle_unit": "degree"}) == pytest.approx(1.0)


def test_minus_after_pi_or_parenthesis_is_unary() -> None:
    assert calculate("e-1") == pytest.approx(1.718281828459045)
    for expression in ("pi-1", "(2)-1", "2*(3)-1"):
        with pytest.raises(EvalError, match="invalid expression"):
            calculate(expression)


def test_overflow_errors() -> None:
    for expression in ("1e+300 * 1e+300", "1e+308 / 0.5", "1e+308 + 1e+308",
                       "-1e+308 -1e+308", "1e+300^2", "exp(2000)"):
        with pytest.raises(EvalError, match="overflow"):
            calculate(expression)


def test_domain_errors() -> None:
    with pytest.raises(EvalError, match="^error while calculating: calculating natural logarithm"):
        calculate("ln(-5)")
    with pytest.raises(EvalError, match="negative operand"):
        calculate("sqrt(-5)")
    with pytest.raises(EvalError, match="division by zero"):
        calculate("1/(2-2)")
    with pytest.raises(EvalError, match="π/2"):
        calculate("tg(90)", DEGREE)


def test_parse_errors_are_wrapped() -> None:
    with pytest.raises(ParseError) as excinfo:
        calculate("2 * -23.3.5")
    assert str(excinfo.value) == "error while parsing: invalid operation or number: 23.3.5"
    assert isinstance(excinfo.value.__cause__, ParseError)


def test_ill_formed_expressions() -> None:
    with pytest.raises(EvalError, match="invalid expression"):
        calculate("2 4 / 5")
    with pytest.raises(EvalError, match="invalid expression"):
        calculate("")
    with pytest.raises(CalculatorError):
        calculate("2 +")


def test_unbalanced_parentheses() -> None:
    assert calculate("1+2)") == 3.0
    with pytest.raises(EvalError, match="unexpected token"):
        calculate("(1+2")
    strict = CalculatorConfig(strict_parentheses=True)
    with pytest.raises(ParseError, match="unbalanced parentheses"):
        calculate("1+2)", strict)
    with pytest.raises(ParseError, match="unbalanced parentheses"):
        calculate("(1+2", strict)


def test_repeated_calls_give_the_same_outcome() -> None:
    calculator = Calculator()
    assert calculator.calculate("sqrt(2)") == calculator.calculate("sqrt(2)")
    messages = []
    for _ in range(2):
        with pytest.raises(EvalError) as excinfo:
            calculator.calculate("1e+300 * 1e+300")
        messages.append(str(excinfo.value))
    assert messages[0] == messages[1]


def test_concurrent_calls() -> None:
    expressions = ["1+2", "sin(pi/2)", "2^10", "sqrt(16)"] * 25
    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(calculate, expressions))
    assert results == [calculate(expression) for expression in expressions]


def test_long_expressions() -> None:
    assert calculate(" + ".join(["1"] * 250)) == 250.0
    assert calculate("+".join(["1"] * 1026)) == 1026.0
    assert calculate("*".join(["2"] * 156)) == 2.0 ** 156
    assert calculate("(" * 300 + "1+1" + ")" * 300) == 2.0
    assert calculate("+".join(["1" + "0" * 249] * 4)) == pytest.approx(4e249)


def test_tokens_and_postfix_are_logged(caplog) -> None:
    with caplog.at_level(logging.DEBUG, logger="core.calculator"):
        calculate("1+2")
    assert "Tokens: 1 + 2" in caplog.text
    assert "Postfix: 1 2 +" in caplog.text


def test_out_of_range_literals_are_rejected() -> None:
    for expression in ("1" + "0" * 400, "sqrt(" + "9" * 400 + ")", "-" + "9" * 400):
        with pytest.raises(ParseError, match="invalid operation or number"):
            calculate(expression)


def test_non_ascii_digits_are_rejected() -> None:
    with pytest.raises(ParseError, match="invalid operation or number: ٣"):
        calculate("٣+1")


def test_tangent_at_multiples_of_half_pi() -> None:
    with pytest.raises(EvalError, match="calculating tangent"):
        calculate("tg(0)")
    with pytest.raises(EvalError, match="calculating tangent"):
        calculate("tg(pi)")


def test_config_forms() -> None:
    assert Calculator(AngleUnit.DEGREE).config == DEGREE
    assert Calculator("degree").config == DEGREE
    assert calculate("sin(90)", AngleUnit.DEGREE) == pytest.approx(1.0)
    with pytest.raises(ValueError, match="Expected CalculatorConfig"):
        Calculator(42)
    with pytest.raises(ValueError, match="angle unit"):
        Calculator("grad")
