import math

import pytest
from hypothesis import given, strategies as st

from mlisp.errors import MLispArityError, MLispDivisionByZero, MLispTypeError
from mlisp.interpreter import Interpreter
from mlisp.types.environment import Environment
from mlisp.interpreter import eval_source


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 1 2)", 3),
        ("(- 10 3)", 7),
        ("(* 6 7)", 42),
        ("(/ 7 2)", 3),
        ("(/ -7 2)", -3),
        ("(/ 7 -2)", -3),
        ("(% 7 2)", 1),
        ("(% -7 2)", -1),
        ("(% 7 -2)", 1),
        ("(+ (* 2 3) (- 10 4))", 12),
        ("(+ 1 2.0)", 3.0),
        ("(+ 1.5 2)", 3.5),
        ("(- 1 0.5)", 0.5),
        ("(* 2 2.5)", 5.0),
        ("(/ 7.0 2)", 3.5),
        ("(/ 7 2.0)", 3.5),
        ("(% 7.5 2)", 1.5),
        ("(% -7.5 2)", -1.5),
        ('(+ "a" "b")', "ab"),
        ('(+ "" "b")', "b"),
    ],
)
def test_arithmetic(interp, source, expected):
    result = interp.eval(source)
    assert result == expected
    assert type(result) is type(expected)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(< 1 2)", True),
        ("(< 2 1)", False),
        ("(> 2 1)", True),
        ("(< 1 1.5)", True),
        ("(> 1.5 1)", True),
        ('(< "abc" "abd")', True),
        ('(> "b" "abc")', True),
        ("(= 3 3)", True),
        ("(= 3 4)", False),
        ('(= "a" "a")', True),
        ("(!= 3 4)", True),
        ("(!= 1 1.0)", False),
        ("(!= 1.5 2.5)", True),
        ('(!= "a" "a")', False),
        ("(& true true)", True),
        ("(& true false)", False),
        ("(| false true)", True),
        ("(| false false)", False),
    ],
)
def test_comparison_and_logic(interp, source, expected):
    assert interp.eval(source) is expected


@pytest.mark.parametrize(
    "source",
    [
        "(= 1.0 1.0)",  # no float case for =
        "(= 1 1.0)",
        "(= true true)",
        '(= 1 "1")',
        '(+ 1 "a")',
        '(- "a" "b")',
        "(+ true 1)",
        "(* true false)",
        "(& 1 true)",
        "(| true 0)",
        '(< 1 "a")',
        "(< true false)",
        "(+ (list 1) (list 2))",
    ],
)
def test_operator_type_errors(interp, source):
    with pytest.raises(MLispTypeError):
        interp.eval(source)


def test_type_error_names_operator_and_operands(interp):
    with pytest.raises(MLispTypeError) as exc:
        interp.eval('(+ 1 "a")')
    assert exc.value.form == "+ operator"
    assert exc.value.operands == (1, "a")
    assert str(exc.value) == 'Invalid types for + operator: 1 "a"'


@pytest.mark.parametrize("op", ["+", "-", "*", "/", "%", "<", ">", "!="])
def test_int_beyond_float_range_with_float(interp, op):
    huge = 10 ** 400
    with pytest.raises(MLispTypeError) as exc:
        interp.eval(f"({op} {huge} 0.5)")
    assert exc.value.form == f"{op} operator"
    assert exc.value.operands == (huge, 0.5)


def test_int_grown_beyond_float_range_with_float(interp):
    interp.eval("((define big (* 100000000000000000000 100000000000000000000)))")
    interp.eval("((define big (* big (* big (* big (* big (* big (* big (* big big)))))))))")
    assert interp.eval("(> big 0)") is True
    with pytest.raises(MLispTypeError):
        interp.eval("(+ big 1.5)")


@pytest.mark.parametrize("source", ["(+ 1)", "(+ 1 2 3)", "(-)"])
def test_operator_arity(interp, source):
    with pytest.raises(MLispArityError):
        interp.eval(source)


@pytest.mark.parametrize("source,op", [("(/ 1 0)", "/"), ("(% 5 0)", "%"), ("(/ (- 2 2) (- 2 2))", "/")])
def test_integer_division_by_zero(interp, source, op):
    with pytest.raises(MLispDivisionByZero) as exc:
        interp.eval(source)
    assert exc.value.operator == op


def test_float_division_by_zero_follows_ieee(interp):
    assert interp.eval("(/ 1.0 0)") == math.inf
    assert interp.eval("(/ -1 0.0)") == -math.inf
    assert math.isnan(interp.eval("(/ 0.0 0)"))
    assert math.isnan(interp.eval("(% 1.0 0)"))


def test_logic_operators_do_not_short_circuit(interp, capsys):
    # The right operand is evaluated even though the left decides the result;
    # print returns nil, which then fails the bool check.
    with pytest.raises(MLispTypeError):
        interp.eval('(& false (print "evaluated"))')
    assert capsys.readouterr().out == "evaluated\n"


def test_operands_evaluated_left_to_right(interp, capsys):
    with pytest.raises(MLispTypeError):
        interp.eval('(+ (print "left") (print "right"))')
    assert capsys.readouterr().out == "left\nright\n"


small_ints = st.integers(min_value=-10**9, max_value=10**9)


@given(small_ints, small_ints.filter(lambda b: b != 0))
def test_integer_division_truncates_toward_zero(a, b):
    env = Environment()
    q = eval_source(f"(/ {a} {b})", env)
    m = eval_source(f"(% {a} {b})", env)
    assert q * b + m == a
    assert abs(m) < abs(b)
    assert m == 0 or (m < 0) == (a < 0)


@given(small_ints, st.floats(min_value=-1e9, max_value=1e9, allow_nan=False, allow_infinity=False))
def test_int_float_mix_promotes_to_float(a, b):
    interp = Interpreter()
    result = interp.eval(f"(+ {a} {b!r})")
    assert type(result) is float
    assert result == float(a) + b


@given(small_ints, small_ints)
def test_int_pairs_stay_int(a, b):
    interp = Interpreter()
    for op, expected in (("+", a + b), ("-", a - b), ("*", a * b)):
        result = interp.eval(f"({op} {a} {b})")
        assert type(result) is int
        assert result == expected
