"""
Token stream for the MySQL grammar, built on the sqlparse lexer.

sqlparse does the character level work (quoting rules, comments, numbers);
this module only re-labels its token types into the handful of kinds the
grammar cares about, drops layout, and tracks line/column positions.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import List

from sqlparse.lexer import Lexer
from sqlparse import tokens as T

from tableforge.exceptions import SQLSyntaxError


class TokenKind(Enum):
    WORD = "word"              # keywords and bare identifiers
    QUOTED_NAME = "quoted"     # `backtick quoted` identifiers
    STRING = "string"          # 'single' or "double" quoted literals
    NUMBER = "number"
    PUNCT = "punct"            # ( ) , ; . and friends
    OPERATOR = "operator"
    OTHER = "other"            # placeholders, \N, user variables
    EOF = "eof"


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    value: str
    line: int = 1
    column: int = 0

    @property
    def upper(self) -> str:
        return self.value.upper()

    def is_word(self, *words: str) -> bool:
        return self.kind is TokenKind.WORD and (not words or self.upper in words)

    def is_punct(self, value: str) -> bool:
        return self.kind is TokenKind.PUNCT and self.value == value

    def __str__(self):
        return self.value if self.kind is not TokenKind.EOF else "<EOF>"


_WORD_RE = re.compile(r"\S+")


def _kind_of(ttype, value: str) -> TokenKind:
    if ttype in T.String:
        return TokenKind.STRING
    if ttype in T.Number:
        return TokenKind.NUMBER
    if ttype in T.Punctuation:
        return TokenKind.PUNCT
    if ttype in T.Operator or ttype in T.Wildcard or ttype in T.Assignment:
        # LIKE, REGEXP and DIV come out as operators
        return TokenKind.WORD if value[0].isalpha() else TokenKind.OPERATOR
    if ttype in T.Name.Placeholder:
        return TokenKind.OTHER
    if ttype in T.Name or ttype in T.Keyword:
        if value.startswith("`"):
            return TokenKind.QUOTED_NAME
        if value[0] in "@[#$":
            return TokenKind.OTHER
        return TokenKind.WORD
    return TokenKind.OTHER


def _advance(line: int, column: int, text: str):
    newlines = text.count("\n")
    if newlines:
        return line + newlines, len(text) - text.rfind("\n") - 1
    return line, column + len(text)


def tokenize(sql: str) -> List[Token]:
    """
    Splits ``sql`` into grammar tokens, ending with one EOF token.

    Raises:
        SQLSyntaxError: on a character sqlparse cannot assign to any token
    """
    result: List[Token] = []
    line, column = 1, 0
    offset = 0
    for ttype, value in Lexer.get_default_instance().get_tokens(sql):
        offset += len(value)
        if ttype in T.Whitespace or ttype in T.Comment:
            line, column = _advance(line, column, value)
            continue
        if ttype is T.Error:
            statement = sql[sql.rfind(";", 0, offset - len(value)) + 1:offset].strip()
            raise SQLSyntaxError(f"token recognition error at: '{value}'", line, column,
                                 statement=statement)

        kind = _kind_of(ttype, value)
        if kind in (TokenKind.WORD, TokenKind.OPERATOR) and len(value.split()) > 1:
            # sqlparse glues some keyword pairs (NOT NULL, PRIMARY KEY,
            # DOUBLE PRECISION); the grammar wants them one word at a time
            for match in _WORD_RE.finditer(value):
                word_line, word_col = _advance(line, column, value[:match.start()])
                result.append(Token(TokenKind.WORD, match.group(), word_line, word_col))
        else:
            result.append(Token(kind, value, line, column))
        line, column = _advance(line, column, value)

    result.append(Token(TokenKind.EOF, "", line, column))
    return result
