"""Evaluate reverse Polish notation expressions over single-digit operands."""

from __future__ import annotations

import enum
import string
import sys


class RPNError(Exception):
    """The expression cannot be evaluated."""


class Operator(enum.IntEnum):
    ADD = 1
    SUBTRACT = 2
    MULTIPLY = 3
    DIVIDE = 4


_SYMBOLS = {
    "+": Operator.ADD,
    "-": Operator.SUBTRACT,
    "*": Operator.MULTIPLY,
    "/": Operator.DIVIDE,
}


def operator_code(c: str) -> Operator | None:
    """Return the operator written as ``c``, or None if it is not one."""
    return _SYMBOLS.get(c)


def _truncating_divide(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return -quotient if (a < 0) != (b < 0) else quotient


def apply_operation(a: int, b: int, op_code: int) -> int:
    """Apply the operator ``op_code`` to ``a`` and ``b``; division truncates."""
    try:
        op = Operator(op_code)
    except ValueError:
        raise RPNError("Unknown operator") from None
    if op is Operator.ADD:
        return a + b
    if op is Operator.SUBTRACT:
        return a - b
    if op is Operator.MULTIPLY:
        return a * b
    if b == 0:
        raise RPNError("Division by zero")
    return _truncating_divide(a, b)


def evaluate_rpn(expr: str) -> int:
    """Evaluate a whitespace-separated RPN expression."""
    stack: list[int] = []
    for token in expr.split():
        if len(token) == 1 and token in string.digits:
            stack.append(int(token))
            continue
        op = operator_code(token) if len(token) == 1 else None
        if op is None:
            raise RPNError(f"Invalid token: {token}")
        if len(stack) < 2:
            raise RPNError("Not enough operands")
        b = stack.pop()
        a = stack.pop()
        stack.append(apply_operation(a, b, op))
    if len(stack) != 1:
        raise RPNError("Invalid expression")
    return stack[0]


def main(argv: list[str] | None = None) -> int:
    """Evaluate the single expression given on the command line."""
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 1:
        print('Usage: RPN "expression"', file=sys.stderr)
        return 1
    try:
        result = evaluate_rpn(args[0])
    except RPNError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())