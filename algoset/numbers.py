"""Integer puzzles: digit reversal, palindromes, Roman numerals and more."""

from __future__ import annotations

import operator
from collections.abc import Iterable, Sequence
from functools import reduce
from itertools import combinations

INT32_MAX = 2**31 - 1
INT32_MIN = -(2**31)

_THOUSANDS = ("", "M", "MM", "MMM")
_HUNDREDS = ("", "C", "CC", "CCC", "CD", "D", "DC", "DCC", "DCCC", "CM")
_TENS = ("", "X", "XX", "XXX", "XL", "L", "LX", "LXX", "LXXX", "XC")
_ONES = ("", "I", "II", "III", "IV", "V", "VI", "VII", "VIII", "IX")

_ROMAN_VALUES = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}


def _truncating_div(left: int, right: int) -> int:
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


_OPERATORS = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _truncating_div,
}


def reverse_integer(x: int) -> int:
    """Reverse the decimal digits of a 32-bit integer, keeping its sign.

    Returns 0 when the reversed value does not fit in 32 bits.
    """
    if not INT32_MIN <= x <= INT32_MAX:
        raise ValueError(f"{x} is not a 32-bit signed integer")
    magnitude = int(str(abs(x))[::-1])
    if magnitude > INT32_MAX:
        return 0
    return -magnitude if x < 0 else magnitude


def is_palindrome_number(x: int) -> bool:
    """Whether ``x`` reads the same backwards; negative numbers never do."""
    if x < 0:
        return False
    digits = str(x)
    return digits == digits[::-1]


def int_to_roman(num: int) -> str:
    """Write ``num`` (0 to 3999) in Roman numerals; 0 gives an empty string."""
    if not 0 <= num <= 3999:
        raise ValueError(f"{num} cannot be written in Roman numerals")
    thousands, rest = divmod(num, 1000)
    hundreds, rest = divmod(rest, 100)
    tens, ones = divmod(rest, 10)
    return _THOUSANDS[thousands] + _HUNDREDS[hundreds] + _TENS[tens] + _ONES[ones]


def roman_to_int(s: str) -> int:
    """Value of the Roman numeral ``s``; a smaller symbol before a larger subtracts."""
    try:
        values = [_ROMAN_VALUES[ch] for ch in s]
    except KeyError as error:
        raise ValueError(f"{s!r} holds a character that is not a Roman numeral") from error
    return sum(
        -value if value < following else value
        for value, following in zip(values, values[1:] + [0])
    )


def eval_rpn(tokens: Iterable[str]) -> int:
    """Evaluate integer arithmetic in reverse Polish notation.

    Division truncates toward zero.  The bottom of the stack is the result.
    """
    stack: list[int] = []
    for token in tokens:
        apply = _OPERATORS.get(token)
        if apply is None:
            stack.append(int(token))
            continue
        if len(stack) < 2:
            raise ValueError(f"operator {token!r} needs two operands")
        right = stack.pop()
        left = stack.pop()
        stack.append(apply(left, right))
    if not stack:
        raise ValueError("expression is empty")
    return stack[0]


def is_happy(n: int) -> bool:
    """Whether repeatedly summing the squares of the digits of ``n`` reaches 1."""
    seen = {n}
    while n != 1:
        n = sum(int(digit) ** 2 for digit in str(abs(n)))
        if n in seen:
            return False
        seen.add(n)
    return True


def subset_xor_sum(nums: Sequence[int]) -> int:
    """Sum over every subset of ``nums`` of the XOR of its elements."""
    return sum(
        reduce(operator.xor, subset, 0)
        for size in range(len(nums) + 1)
        for subset in combinations(nums, size)
    )