"""Token kinds, tokens and a cursor over a token sequence."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum

from rak.errors import CompileError


class TokenKind(Enum):
    """The kinds of token the compiler understands; values are display labels."""

    EOF = "end of file"
    COMMA = "','"
    COLON = "':'"
    SEMICOLON = "';'"
    LPAREN = "'('"
    RPAREN = "')'"
    LBRACKET = "'['"
    RBRACKET = "']'"
    LBRACE = "'{'"
    RBRACE = "'}'"
    DOT = "'.'"
    DOTDOT = "'..'"
    AMP = "'&'"
    AMPAMP = "'&&'"
    PIPEPIPE = "'||'"
    EQ = "'='"
    EQEQ = "'=='"
    BANG = "'!'"
    BANGEQ = "'!='"
    GT = "'>'"
    GTEQ = "'>='"
    LT = "'<'"
    LTEQ = "'<='"
    PLUS = "'+'"
    PLUSEQ = "'+='"
    MINUS = "'-'"
    MINUSEQ = "'-='"
    STAR = "'*'"
    STAREQ = "'*='"
    SLASH = "'/'"
    SLASHEQ = "'/='"
    PERCENT = "'%'"
    PERCENTEQ = "'%='"
    NUMBER = "number"
    STRING = "string"
    IDENT = "identifier"
    BREAK_KW = "'break'"
    CONTINUE_KW = "'continue'"
    DO_KW = "'do'"
    ELSE_KW = "'else'"
    FALSE_KW = "'false'"
    IF_KW = "'if'"
    LET_KW = "'let'"
    LOOP_KW = "'loop'"
    NIL_KW = "'nil'"
    RETURN_KW = "'return'"
    TRUE_KW = "'true'"
    WHILE_KW = "'while'"

    @property
    def label(self) -> str:
        return self.value


@dataclass(frozen=True)
class Token:
    """A token with its source text and position."""

    kind: TokenKind
    text: str = ""
    line: int = 1
    column: int = 1

    @property
    def is_blank(self) -> bool:
        """True for the blank identifier ``_``."""
        return self.kind is TokenKind.IDENT and self.text == "_"


def unexpected_token_error(token: Token) -> CompileError:
    """Build the error for a token that cannot start or continue a construct."""
    if token.kind is TokenKind.EOF:
        return CompileError(
            f"unexpected end of file at {token.line}:{token.column}"
        )
    return CompileError(
        f"unexpected token '{token.text}' at {token.line}:{token.column}"
    )


def expected_token_error(kind: TokenKind, token: Token) -> CompileError:
    """Build the error for a token of the wrong kind."""
    if token.kind is TokenKind.EOF:
        return CompileError(
            f"expected {kind.label}, but got end of file "
            f"at {token.line}:{token.column}"
        )
    return CompileError(
        f"expected {kind.label}, but got '{token.text}' "
        f"at {token.line}:{token.column}"
    )


class TokenStream:
    """A one-token lookahead cursor that ends in an endless end-of-file token."""

    def __init__(self, tokens: Iterable[Token]) -> None:
        self._tokens: Iterator[Token] = iter(tokens)
        self._eof = Token(TokenKind.EOF, "", 1, 1)
        self.token = self._pull()

    def _pull(self) -> Token:
        tok = next(self._tokens, None)
        if tok is None:
            return self._eof
        if tok.kind is TokenKind.EOF:
            self._eof = tok
        else:
            self._eof = Token(
                TokenKind.EOF, "", tok.line, tok.column + len(tok.text)
            )
        return tok

    def match(self, kind: TokenKind) -> bool:
        """True if the current token is of ``kind``."""
        return self.token.kind is kind

    def advance(self) -> Token:
        """Move to the next token and return the one just passed."""
        current = self.token
        if current.kind is not TokenKind.EOF:
            self.token = self._pull()
        return current

    def consume(self, kind: TokenKind) -> Token:
        """Advance past a token of ``kind``, or raise if the current one differs."""
        if not self.match(kind):
            raise expected_token_error(kind, self.token)
        return self.advance()