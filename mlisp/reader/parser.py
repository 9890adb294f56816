"""
  Lexer and Parser for mlisp source text.

- Streaming lexer, recursive-descent parser
- Emits Python primitives and the node classes in mlisp.types.symbol:

    - lists            -> Python list
    - integer literals -> int
    - other numerals   -> float
    - "text"           -> str (no escape processing)
    - define list print lambda map filter reduce -> Keyword
    - if               -> If
    - + - * / % < > = != & |                     -> Operator
    - anything else    -> Symbol

A program is exactly one parenthesized root form.
"""

from __future__ import annotations

import re
from typing import Iterator, Optional, Iterable

from mlisp import SExpression
from mlisp.errors import MLispSyntaxError
from mlisp.types.symbol import If, Keyword, Operator, Symbol, KEYWORDS, OPERATORS


TOKEN_RE = re.compile(
    r"\s*(?:"
    r"(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r'|(?P<string>"[^"]*")'  # double-quoted string, ends at the next quote
    r'|(?P<unterminated>"[^"]*)'  # opening quote with no closing one
    r"|(?P<atom>[^\s()]+)"  # numbers, reserved words, symbols
    r")",
    re.DOTALL,
)

INTEGER_RE = re.compile(r"[+-]?\d+")
FLOAT_RE = re.compile(
    r"[+-]?(?:\d+\.?\d*(?:[eE][+-]?\d+)?|\.\d+(?:[eE][+-]?\d+)?|inf|infinity|nan)",
    re.IGNORECASE,
)


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples.

    String tokens carry their text without the surrounding quotes.
    """
    pos = 0
    n = len(source)
    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if m is None or m.lastgroup is None:
            # Only trailing whitespace is left
            break
        pos = m.end()
        kind = m.lastgroup
        text = m.group(kind)
        if kind == "unterminated":
            raise MLispSyntaxError(f"Unterminated string: {text[1:]}")
        if kind == "string":
            yield kind, text[1:-1]
        else:
            yield kind, text


def read_atom(word: str) -> SExpression:
    """Classify a bare word: number, reserved word or symbol."""
    if INTEGER_RE.fullmatch(word):
        return int(word)
    if FLOAT_RE.fullmatch(word):
        return float(word)
    if word in KEYWORDS:
        return Keyword(word)
    if word in OPERATORS:
        return Operator(word)
    if word == "if":
        return If
    return Symbol(word)


class TokenStream:
    def __init__(self, token_iter: Iterable[tuple[str, str]]):
        self.tokens = iter(token_iter)
        self.buffer: list[tuple[str, str]] = []

    def peek(self) -> tuple[Optional[str], Optional[str]]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None
        return self.buffer[0]

    def advance(self) -> tuple[Optional[str], Optional[str]]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, (None, None))

    def parse_expr(self) -> SExpression:
        """Parse one form. Returns None when the stream is exhausted."""
        tok_type, tok_val = self.advance()
        if tok_type is None:
            return None

        if tok_type == "lparen":
            items = []
            while True:
                nxt, _ = self.peek()
                if nxt is None:
                    raise MLispSyntaxError("Unmatched '('")
                if nxt == "rparen":
                    self.advance()
                    return items
                items.append(self.parse_expr())

        if tok_type == "rparen":
            raise MLispSyntaxError("Unexpected ')'")

        if tok_type == "string":
            return tok_val

        return read_atom(tok_val)


def parse(source: str) -> list[SExpression]:
    """Parse a whole program: exactly one parenthesized root form."""
    stream = TokenStream(lex(source))
    tok_type, tok_val = stream.peek()
    if tok_type != "lparen":
        found = "end of input" if tok_type is None else repr(tok_val)
        raise MLispSyntaxError(f"Expected '(' to start a program, found {found}")
    root = stream.parse_expr()
    tok_type, tok_val = stream.peek()
    if tok_type is not None:
        raise MLispSyntaxError(f"Unexpected input after the root form: {tok_val!r}")
    return root
