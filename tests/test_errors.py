import pytest

from mlisp import errors
from mlisp.types.symbol import Symbol


@pytest.mark.parametrize(
    "error,message",
    [
        (errors.MLispUnboundSymbol(Symbol("x")), "Unbound symbol: x"),
        (errors.MLispUnboundFunction(Symbol("f")), "Unbound function: f"),
        (errors.MLispNotCallable(Symbol("x"), "s"), 'Not a lambda: x is bound to "s"'),
        (errors.MLispArityError("map", 2, 1), "Invalid number of arguments for map: expected 2, got 1"),
        (errors.MLispTypeError("if condition", (1,)), "Invalid types for if condition: 1"),
        (errors.MLispMalformedForm("define", "name must be a symbol"), "Invalid define: name must be a symbol"),
        (errors.MLispSyntaxError("Unmatched '('"), "Unmatched '('"),
        (errors.MLispDivisionByZero("/", 7), "Division by zero: (/ 7 0)"),
        (errors.MLispRecursionDepth(1000), "Maximum recursion depth exceeded (limit 1000)"),
    ],
)
def test_messages_and_hierarchy(error, message):
    assert isinstance(error, errors.MLispError)
    assert str(error) == message


def test_fields_are_kept():
    error = errors.MLispTypeError("+ operator", [1.5, True])
    assert error.form == "+ operator"
    assert error.operands == (1.5, True)
    assert str(error) == "Invalid types for + operator: 1.5 true"


def test_errors_surface_through_interpreter(interp):
    with pytest.raises(errors.MLispError):
        interp.eval('(print "unterminated)')
