"""
  Lisp Reader, Lexer and Parser

- Regex lexer, recursive-descent token stream
- Emits frozen Form dataclasses (unity_lisp.types.forms):

    - words          -> Word       (the bare word `yield` -> Yield)
    - numbers        -> Number     (literal text kept, never converted)
    - strings        -> String     (restricted character set, no escapes)
    - :kw            -> Keyword
    - infix ops      -> InfixOperator (only when followed by whitespace)
    - .-field        -> Accessor
    - .method        -> Method
    - ^Type name     -> Hint
    - %              -> PercentArg
    - #(...)         -> SugarLambda
    - λtoken         -> KeywordFn
    - (...) [...] {...} -> ListForm / VectorForm / MapForm
    - ; comments are discarded

Items inside vectors and maps must be separated by whitespace; inside lists
whitespace around parens is optional, e.g. `(f(g))`.

A malformed program is one whole-program failure: `parse` returns a
ParseFailure and never a partial tree.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator, NamedTuple, Optional

from unity_lisp.types.errors import UnitySyntaxError
from unity_lisp.types.forms import (
    Accessor, Form, Hint, InfixOperator, Keyword, KeywordFn, ListForm, MapForm,
    Method, Number, PercentArg, Program, String, SugarLambda, VectorForm, Word, Yield,
)

WORD = r"[a-zA-Z!?][a-zA-Z!?.0-9<>-]*"

TOKEN_RE = re.compile(
    r"(?P<lparen>\()"
    r"|(?P<rparen>\))"
    r"|(?P<lbracket>\[)"
    r"|(?P<rbracket>\])"
    r"|(?P<lbrace>\{)"
    r"|(?P<rbrace>\})"
    r"|(?P<sugar_lambda>#(?=\())"  # #( ... )
    r'|(?P<string>"[a-zA-Z!?0-9 ,.:;]*")'  # restricted character set
    r"|(?P<infix>(?:<=|>=|==|!=|[+*/]+|-|<|>|is|as|and)(?=\s))"  # infix position only
    r"|(?P<number>-?[0-9]+\.?[0-9]*)"
    r"|(?P<yield>yield(?![a-zA-Z!?.0-9<>-]))"
    r"|(?P<accessor>\.-" + WORD + r")"
    r"|(?P<method>\." + WORD + r")"
    r"|(?P<hint>\^" + WORD + r"\s+" + WORD + r")"
    r"|(?P<keyword>:" + WORD + r")"
    r"|(?P<keyword_fn>λ)"
    r"|(?P<percent>%)"
    r"|(?P<word>" + WORD + r")"
)

BLANK_RE = re.compile(r"(?:\s+|;[^\n]*)+")

PAIRS = {"lparen": "rparen", "lbracket": "rbracket", "lbrace": "rbrace"}
CLOSER_TEXT = {"rparen": ")", "rbracket": "]", "rbrace": "}"}


class Token(NamedTuple):
    type: str
    value: str
    pos: int
    spaced: bool  # preceded by whitespace or a comment


def _location(source: str, pos: int) -> tuple[int, int, str]:
    line = source.count("\n", 0, pos) + 1
    line_start = source.rfind("\n", 0, pos) + 1
    line_end = source.find("\n", pos)
    if line_end == -1:
        line_end = len(source)
    return line, pos - line_start + 1, source[line_start:line_end]


def syntax_error(source: str, pos: int, message: str) -> UnitySyntaxError:
    line, column, context = _location(source, pos)
    return UnitySyntaxError(message, line, column, context)


def lex(source: str) -> Iterator[Token]:
    """Token generator: yields Token tuples, skipping whitespace and comments."""
    pos = 0
    n = len(source)
    while True:
        blank = BLANK_RE.match(source, pos)
        spaced = blank is not None
        if blank:
            pos = blank.end()
        if pos >= n:
            return

        m = TOKEN_RE.match(source, pos)
        if not m:
            if source[pos] == '"':
                raise syntax_error(source, pos, "Malformed string literal")
            raise syntax_error(source, pos, f"Unexpected character {source[pos]!r}")
        for nm in TOKEN_RE.groupindex:
            if m.group(nm) is not None:
                yield Token(nm, m.group(nm), pos, spaced)
                break
        pos = m.end()


class TokenStream:
    def __init__(self, source: str):
        self.source = source
        self.tokens = lex(source)
        self.buffer: list[Token] = []
        self.last: Optional[Token] = None

    def peek(self) -> Optional[Token]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None
        return self.buffer[0]

    def advance(self) -> Optional[Token]:
        tok = self.peek()
        if tok is not None:
            self.buffer.pop(0)
            self.last = tok
        return tok

    def error(self, tok: Optional[Token], message: str) -> UnitySyntaxError:
        pos = len(self.source) if tok is None else tok.pos
        return syntax_error(self.source, pos, message)

    def parse_expr(self) -> Form:
        tok = self.advance()
        if tok is None:
            raise self.error(None, "Unexpected end of input")

        kind, val = tok.type, tok.value

        if kind == "word":
            return Word(val)
        if kind == "number":
            return Number(val)
        if kind == "string":
            return String(val[1:-1])
        if kind == "keyword":
            return Keyword(val[1:])
        if kind == "infix":
            return InfixOperator(val)
        if kind == "accessor":
            return Accessor(val[2:])
        if kind == "method":
            return Method(val[1:])
        if kind == "hint":
            type_name, bound_name = val[1:].split()
            return Hint((Word(type_name), Word(bound_name)))
        if kind == "yield":
            return Yield()
        if kind == "percent":
            return PercentArg()

        if kind == "sugar_lambda":
            # The regex guarantees a '(' follows
            return SugarLambda(self.parse_expr())

        if kind == "keyword_fn":
            nxt = self.peek()
            if nxt is None or nxt.spaced or nxt.type in PAIRS or nxt.type in CLOSER_TEXT:
                raise self.error(nxt, "Expected a token after 'λ'")
            return KeywordFn(self.parse_expr())

        if kind in PAIRS:
            items = self._parse_items(tok, PAIRS[kind], spaced=kind != "lparen")
            if kind == "lparen":
                return ListForm(items)
            if kind == "lbracket":
                return VectorForm(items)
            return MapForm(items)

        raise self.error(tok, f"Unexpected '{val}'")

    def _parse_items(self, opener: Token, closer: str, spaced: bool) -> tuple:
        items = []
        while True:
            tok = self.peek()
            if tok is None:
                raise self.error(None, f"Expected '{CLOSER_TEXT[closer]}' to close '{opener.value}'")
            if tok.type == closer:
                self.advance()
                return tuple(items)
            if tok.type in CLOSER_TEXT:
                raise self.error(tok, f"Expected '{CLOSER_TEXT[closer]}' but found '{tok.value}'")
            if spaced and items and not tok.spaced:
                raise self.error(tok, "Expected whitespace between items")
            items.append(self.parse_expr())

    def parse_all(self) -> Iterator[Form]:
        while self.peek() is not None:
            yield self.parse_expr()


@dataclass(frozen=True)
class ParseFailure:
    """Whole-program parse failure. `str()` gives the text echoed into the output."""

    message: str
    line: int
    column: int
    context: str = ""

    def __str__(self) -> str:
        caret = " " * (self.column - 1) + "^"
        return f"Parse error at line {self.line}, column {self.column}:\n{self.context}\n{caret}\n{self.message}"


def read_program(source: str) -> Program:
    """Parse every top-level form; raises UnitySyntaxError on malformed input."""
    stream = TokenStream(source)
    try:
        return list(stream.parse_all())
    except RecursionError:
        raise stream.error(stream.last, "Forms nested too deeply") from None


def parse(source: str) -> Program | ParseFailure:
    try:
        return read_program(source)
    except UnitySyntaxError as e:
        return ParseFailure(e.message, e.line, e.column, e.context)
