from minicc.token import Token, TokenType


class CompileError(Exception):
    """Base class for errors raised while compiling a program."""


class ParseError(CompileError):
    """Raised at the first token that does not fit the grammar."""

    def __init__(self, expected: tuple[TokenType, ...], found: Token) -> None:
        self.expected = expected
        self.found = found
        names = " or ".join(kind.name for kind in expected)
        super().__init__(f"Expected {names}, found {found.kind.name}")

    @property
    def location(self) -> int:
        return self.found.location
