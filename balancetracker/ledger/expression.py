"""Mini README: Arithmetic evaluator for balance adjustments.

Structure:
    * evaluate - whitelist check followed by recursive-descent evaluation.
    * _tokenise - splits validated text into numbers, operators and brackets.
    * _Parser - grammar below, one method per rule.

Grammar::

    expression := term (("+" | "-") term)*
    term       := unary (("*" | "/") unary)*
    unary      := ("+" | "-") unary | primary
    primary    := NUMBER | "(" expression ")"

Only the characters ``0-9 + - * / ( ) .`` and whitespace are accepted. Text
holding anything else is rejected before a single token is read.
"""

from __future__ import annotations

import math
import re
from typing import List, Tuple

from .errors import InvalidExpression

_ALLOWED = re.compile(r"^[0-9+\-*/().\s]+$")
_TOKEN = re.compile(r"\s*(?:(\d+\.?\d*|\.\d+)|(.))")

Token = Tuple[str, str]


def evaluate(text: str) -> float:
    """Evaluate ``text`` as infix arithmetic and return the result as a float."""

    if not isinstance(text, str) or not _ALLOWED.match(text):
        raise InvalidExpression(f"Expression contains unsupported characters: {text!r}")
    try:
        result = _Parser(_tokenise(text), text).parse()
    except RecursionError as error:
        raise InvalidExpression(f"Expression is nested too deeply: {text[:40]!r}...") from error
    if not math.isfinite(result):
        raise InvalidExpression(f"Expression result is out of range: {text!r}")
    return result


def _tokenise(text: str) -> List[Token]:
    tokens: List[Token] = []
    position = 0
    stripped_end = len(text.rstrip())
    while position < stripped_end:
        match = _TOKEN.match(text, position)
        if match is None:
            raise InvalidExpression(f"Unable to read expression: {text!r}")
        number, symbol = match.groups()
        if number is not None:
            tokens.append(("number", number))
        else:
            tokens.append(("op", symbol))
        position = match.end()
    return tokens


class _Parser:
    def __init__(self, tokens: List[Token], source: str) -> None:
        self._tokens = tokens
        self._index = 0
        self._source = source

    def parse(self) -> float:
        value = self._expression()
        if self._index != len(self._tokens):
            raise self._error(f"unexpected {self._tokens[self._index][1]!r}")
        return value

    def _peek(self) -> str:
        if self._index < len(self._tokens):
            kind, value = self._tokens[self._index]
            return value if kind == "op" else ""
        return ""

    def _error(self, reason: str) -> InvalidExpression:
        return InvalidExpression(f"Malformed expression {self._source!r}: {reason}")

    def _expression(self) -> float:
        value = self._term()
        while self._peek() in ("+", "-"):
            operator = self._tokens[self._index][1]
            self._index += 1
            right = self._term()
            value = value + right if operator == "+" else value - right
        return value

    def _term(self) -> float:
        value = self._unary()
        while self._peek() in ("*", "/"):
            operator = self._tokens[self._index][1]
            self._index += 1
            right = self._unary()
            if operator == "*":
                value *= right
            elif right == 0:
                raise self._error("division by zero")
            else:
                value /= right
        return value

    def _unary(self) -> float:
        operator = self._peek()
        if operator in ("+", "-"):
            self._index += 1
            operand = self._unary()
            return operand if operator == "+" else -operand
        return self._primary()

    def _primary(self) -> float:
        if self._index >= len(self._tokens):
            raise self._error("unexpected end of input")
        kind, value = self._tokens[self._index]
        if kind == "number":
            self._index += 1
            return float(value)
        if value == "(":
            self._index += 1
            inner = self._expression()
            if self._peek() != ")":
                raise self._error("missing closing parenthesis")
            self._index += 1
            return inner
        raise self._error(f"unexpected {value!r}")
