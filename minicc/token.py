from dataclasses import dataclass, field
from enum import IntEnum


class TokenType(IntEnum):
    IntKeyword = 1
    Identifier = 2
    Assign = 3
    Number = 4
    Plus = 5
    Multiply = 6
    LParen = 7
    RParen = 8
    Semicolon = 9
    EndOfInput = 10


@dataclass(frozen=True)
class Token:
    kind: TokenType
    text: str = ""
    location: int = field(default=0, compare=False)

    def __str__(self) -> str:
        return f"{self.kind.name}: {self.text}"


def new_token(token_type: TokenType, text: str = "", location: int = 0) -> Token:
    return Token(token_type, text, location)


def equal(token: Token, token_type: TokenType) -> bool:
    return token.kind == token_type
