"""Algorithms over strings: matching, parsing, splitting and generating text."""

from __future__ import annotations

import string
from collections.abc import Iterable, Sequence
from functools import cmp_to_key, lru_cache
from itertools import chain, product

_ROMAN_VALUES = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}
_ROMAN_SUBTRACTIVE = {"V": "I", "X": "I", "L": "X", "C": "X", "D": "C", "M": "C"}

_PHONE_LETTERS = {
    "2": "abc",
    "3": "def",
    "4": "ghi",
    "5": "jkl",
    "6": "mno",
    "7": "pqrs",
    "8": "tuv",
    "9": "wxyz",
}

_CLOSERS = {")": "(", "]": "[", "}": "{"}

_WORD_END = ""


def _trunc_div(a: int, b: int) -> int:
    """Divide integers, rounding the quotient towards zero."""
    if b == 0:
        raise ZeroDivisionError("division by zero")
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def is_match(s: str, p: str) -> bool:
    """Tell whether ``p``, with ``.`` for any character and ``*`` for repetition, matches all of ``s``."""
    if p.startswith("*"):
        raise ValueError("a pattern cannot start with '*'")
    m, n = len(s), len(p)
    dp = [[False] * (n + 1) for _ in range(m + 1)]
    dp[0][0] = True
    for i in range(m + 1):
        for j in range(1, n + 1):
            if p[j - 1] == "*":
                repeated = p[j - 2]
                dp[i][j] = dp[i][j - 2] or (
                    i > 0 and dp[i - 1][j] and repeated in (s[i - 1], ".")
                )
            else:
                dp[i][j] = i > 0 and dp[i - 1][j - 1] and p[j - 1] in (s[i - 1], ".")
    return dp[m][n]


def is_palindrome(s: str) -> bool:
    """Tell whether the ASCII letters and digits of ``s`` read the same both ways, ignoring case."""
    kept = [char.lower() for char in s if char.isascii() and char.isalnum()]
    return kept == kept[::-1]


def roman_to_int(s: str) -> int:
    """Convert a Roman numeral to an integer."""
    total = 0
    previous = ""
    for char in s:
        try:
            value = _ROMAN_VALUES[char]
        except KeyError:
            raise ValueError(f"{char!r} is not a Roman numeral digit") from None
        if previous and _ROMAN_SUBTRACTIVE.get(char) == previous:
            value -= 2 * _ROMAN_VALUES[previous]
        total += value
        previous = char
    return total


def palindrome_partitions(s: str) -> list[list[str]]:
    """Return every way to cut ``s`` into palindromic pieces, shortest first piece first."""
    result: list[list[str]] = []
    path: list[str] = []

    def search(start: int) -> None:
        if start == len(s):
            result.append(list(path))
            return
        for end in range(start + 1, len(s) + 1):
            piece = s[start:end]
            if piece == piece[::-1]:
                path.append(piece)
                search(end)
                path.pop()

    search(0)
    return result


def word_break(s: str, word_dict: Iterable[str]) -> bool:
    """Tell whether ``s`` splits into dictionary words, using a prefix tree."""
    root: dict = {}
    for word in word_dict:
        node = root
        for char in word:
            node = node.setdefault(char, {})
        node[_WORD_END] = True

    n = len(s)
    fits = [False] * (n + 1)
    fits[n] = True
    for start in range(n - 1, -1, -1):
        node = root
        for end in range(start + 1, n + 1):
            node = node.get(s[end - 1])
            if node is None:
                break
            if _WORD_END in node and fits[end]:
                fits[start] = True
                break
    return fits[0]


def word_break_dfs(s: str, word_dict: Iterable[str]) -> bool:
    """Tell whether ``s`` splits into dictionary words, by depth-first search."""
    words = set(word_dict)

    @lru_cache(maxsize=None)
    def fits(start: int) -> bool:
        if start == len(s):
            return True
        return any(
            s[start:end] in words and fits(end) for end in range(start + 1, len(s) + 1)
        )

    return fits(0)


def word_break_dp(s: str, word_dict: Iterable[str]) -> bool:
    """Tell whether ``s`` splits into dictionary words, by bottom-up dynamic programming."""
    words = set(word_dict)
    fits = [True] + [False] * len(s)
    for end in range(1, len(s) + 1):
        fits[end] = any(
            fits[start] and s[start:end] in words for start in range(end - 1, -1, -1)
        )
    return fits[len(s)]


def word_break_sentences(s: str, word_dict: Iterable[str]) -> list[str]:
    """Return every sentence of dictionary words, space separated, that spells ``s``."""
    words = set(word_dict)

    @lru_cache(maxsize=None)
    def sentences(text: str) -> tuple[str, ...]:
        found: list[str] = [text] if text in words else []
        for cut in range(len(text)):
            suffix = text[cut:]
            if suffix in words:
                found.extend(f"{head} {suffix}" for head in sentences(text[:cut]))
        return tuple(found)

    return list(sentences(s))


def longest_common_prefix(strs: Sequence[str]) -> str:
    """Return the longest prefix shared by all the strings."""
    if not strs:
        raise ValueError("no strings given")
    prefix = []
    for chars in zip(*strs):
        if len(set(chars)) != 1:
            break
        prefix.append(chars[0])
    return "".join(prefix)


def eval_rpn(tokens: Iterable[str]) -> int:
    """Evaluate integer arithmetic in reverse Polish notation; division truncates towards zero."""
    operations = {
        "+": lambda a, b: a + b,
        "-": lambda a, b: a - b,
        "*": lambda a, b: a * b,
        "/": _trunc_div,
    }
    stack: list[int] = []
    for token in tokens:
        operation = operations.get(token)
        if operation is None:
            try:
                stack.append(int(token))
            except ValueError:
                raise ValueError(f"{token!r} is neither an operator nor an integer") from None
            continue
        if len(stack) < 2:
            raise ValueError(f"operator {token!r} needs two operands")
        right = stack.pop()
        left = stack.pop()
        stack.append(operation(left, right))
    if not stack:
        raise ValueError("no expression to evaluate")
    return stack[-1]


def fraction_to_decimal(numerator: int, denominator: int) -> str:
    """Write a fraction as a decimal, enclosing a repeating part in parentheses."""
    if denominator == 0:
        raise ZeroDivisionError("denominator is zero")
    if numerator == 0:
        return "0"
    sign = "-" if (numerator < 0) != (denominator < 0) else ""
    divisor = abs(denominator)
    whole, remainder = divmod(abs(numerator), divisor)
    if not remainder:
        return f"{sign}{whole}"

    digits: list[str] = []
    seen: dict[int, int] = {}
    while remainder:
        if remainder in seen:
            start = seen[remainder]
            fraction = "".join(digits[:start]) + "(" + "".join(digits[start:]) + ")"
            return f"{sign}{whole}.{fraction}"
        seen[remainder] = len(digits)
        digit, remainder = divmod(remainder * 10, divisor)
        digits.append(str(digit))
    return f"{sign}{whole}.{''.join(digits)}"


def letter_combinations(digits: str) -> list[str]:
    """Return every word a phone keypad can spell from ``digits``, in keypad order."""
    if not digits:
        return []
    try:
        letters = [_PHONE_LETTERS[digit] for digit in digits]
    except KeyError as error:
        raise ValueError(f"{error.args[0]!r} has no letters on a phone keypad") from None
    return ["".join(combination) for combination in product(*letters)]


def title_to_number(title: str) -> int:
    """Convert a spreadsheet column title such as ``AB`` to its column number."""
    result = 0
    for char in title:
        if char not in string.ascii_uppercase:
            raise ValueError(f"{char!r} is not an upper-case letter")
        result = result * 26 + ord(char) - ord("A") + 1
    return result


def largest_number(nums: Iterable[int]) -> str:
    """Arrange the numbers to form the largest possible concatenation."""

    def order(a: str, b: str) -> int:
        if a + b > b + a:
            return -1
        if a + b < b + a:
            return 1
        return 0

    result = "".join(sorted((str(num) for num in nums), key=cmp_to_key(order)))
    return "0" if result.startswith("0") else result


def is_valid_parentheses(s: str) -> bool:
    """Tell whether every bracket in ``s`` is closed in the right order."""
    if len(s) % 2:
        return False
    stack: list[str] = []
    for char in s:
        opener = _CLOSERS.get(char)
        if opener is None:
            stack.append(char)
        elif not stack or stack.pop() != opener:
            return False
    return not stack


def generate_parentheses(n: int) -> list[str]:
    """Return every balanced string of ``n`` pairs of parentheses."""
    if n < 0:
        raise ValueError("n must not be negative")
    result: list[str] = []

    def extend(text: str, opens: int, closes: int) -> None:
        if opens == 0 and closes == 0:
            result.append(text)
            return
        if opens:
            extend(text + "(", opens - 1, closes)
        if closes > opens:
            extend(text + ")", opens, closes - 1)

    extend("", n, n)
    return result


def calculate(s: str) -> int:
    """Evaluate ``+ - * /`` integer arithmetic without parentheses; division truncates towards zero."""
    total = 0
    term = 0
    number = 0
    operator = "+"
    for char in chain(s, [None]):
        if char is not None and char.isspace():
            continue
        if char is not None and char in string.digits:
            number = number * 10 + int(char)
            continue
        if char is not None and char not in "+-*/":
            raise ValueError(f"unexpected character {char!r}")
        if operator == "*":
            term *= number
        elif operator == "/":
            term = _trunc_div(term, number)
        else:
            total += term
            term = number if operator == "+" else -number
        if char is not None:
            operator = char
        number = 0
    return total + term