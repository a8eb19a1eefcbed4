"""
  Bebop Reader, Lexer and Parser

- Streaming, lazy parsing
- Emits Python values directly:

    - numbers -> int (digits only) / float (fraction or exponent)
    - strings -> str (double-quoted, taken literally, may span lines)
    - symbols -> Symbol
    - ( ... ) -> SExpr
    - [ ... ] -> QExpr
    - ; starts a comment running to the end of the line
"""

from __future__ import annotations

import re
from typing import Iterator, Optional

from bebop import Expression
from bebop.errors import BebopSyntaxError
from bebop.types.expressions import SExpr, QExpr
from bebop.types.symbol import Symbol


TOKEN_RE = re.compile(
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r"|(?P<lbracket>\[)"  # [
    r"|(?P<rbracket>\])"  # ]
    r'|(?P<string>"[^"]*")'  # double-quoted strings, no escapes
    r"|(?P<atom>[A-Za-z0-9_+\\:\-*/=<>|!&%.]+)"  # numbers and symbols
)

WHITESPACE_RE = re.compile(r"\s*")

INTEGER_RE = re.compile(r"[+-]?\d+")
NUMBER_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")

CLOSERS: dict[str, tuple[str, type]] = {
    "lparen": ("rparen", SExpr),
    "lbracket": ("rbracket", QExpr),
}

BRACKET_TEXT: dict[str, str] = {
    "lparen": "(",
    "rparen": ")",
    "lbracket": "[",
    "rbracket": "]",
}


def _line_col(source: str, pos: int) -> tuple[int, int]:
    line = source.count("\n", 0, pos) + 1
    col = pos - (source.rfind("\n", 0, pos) + 1) + 1
    return line, col


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples."""
    pos = 0
    n = len(source)

    while True:
        pos = WHITESPACE_RE.match(source, pos).end()
        if pos >= n:
            return

        m = TOKEN_RE.match(source, pos)
        if not m:
            line, col = _line_col(source, pos)
            if source[pos] == '"':
                raise BebopSyntaxError(
                    f"Unterminated string starting at line {line}, column {col}"
                )
            raise BebopSyntaxError(
                f"Unexpected character {source[pos]!r} at line {line}, column {col}"
            )

        kind = m.lastgroup
        pos = m.end()
        if kind == "comment":
            continue
        yield kind, m.group(kind)


def read_atom(token: str) -> Expression:
    """Classify an atom token; number detection wins over symbols."""
    if NUMBER_RE.fullmatch(token):
        if INTEGER_RE.fullmatch(token):
            return int(token)
        return float(token)

    unsigned = token[1:] if token[0] in "+-" else token
    if unsigned[:1].isdigit() or unsigned.startswith("."):
        raise BebopSyntaxError(f"Malformed number: {token!r}")
    if "." in token:
        raise BebopSyntaxError(f"Invalid symbol: {token!r}")
    return Symbol(token)


class TokenStream:
    def __init__(self, token_iter: Iterator[tuple[str, str]]):
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

    def parse_expr(self) -> Optional[Expression]:
        """Read one expression; None once the input is exhausted."""
        tok_type, tok_val = self.advance()
        if tok_type is None:
            return None

        if tok_type == "atom":
            return read_atom(tok_val)

        if tok_type == "string":
            return tok_val[1:-1]

        if tok_type in CLOSERS:
            closer, kind = CLOSERS[tok_type]
            items = []
            while True:
                next_type, _ = self.peek()
                if next_type is None:
                    raise BebopSyntaxError(f"Unmatched '{BRACKET_TEXT[tok_type]}'")
                if next_type == closer:
                    self.advance()
                    return kind(items)
                if next_type in ("rparen", "rbracket"):
                    raise BebopSyntaxError(
                        f"Expected '{BRACKET_TEXT[closer]}' but found '{BRACKET_TEXT[next_type]}'"
                    )
                items.append(self.parse_expr())

        # A closing bracket with nothing open
        raise BebopSyntaxError(f"Unexpected '{tok_val}'")

    def parse_all(self) -> Iterator[Expression]:
        while True:
            tok_type, _ = self.peek()
            if tok_type is None:
                break
            yield self.parse_expr()


def parse(source: str) -> list[Expression]:
    """Read every top-level expression in `source`."""
    try:
        return list(TokenStream(lex(source)).parse_all())
    except RecursionError:
        raise BebopSyntaxError("Expression nested too deeply to read") from None
