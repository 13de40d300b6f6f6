from minicc.errors import ParseError
from minicc.token import TokenType, Token, equal
from minicc.utils import Cursor


class Parse:
    """Recursive descent recognizer for a single declaration.

    program    ::= "int" identifier "=" expression ";"
    expression ::= term ("+" term)*
    term       ::= factor ("*" factor)*
    factor     ::= number | "(" expression ")"

    Nothing is built; a successful run only means the tokens are well formed.
    """

    tokens: Cursor[Token]

    def __init__(self, tokens: list[Token]) -> None:
        self.tokens = Cursor(tokens)

    @property
    def position(self) -> int:
        return self.tokens.position

    def expect(self, token_type: TokenType) -> Token:
        token = self.tokens.peek()
        if not equal(token, token_type):
            raise ParseError((token_type,), token)
        return next(self.tokens)

    def parse_program(self) -> None:
        self.expect(TokenType.IntKeyword)
        self.expect(TokenType.Identifier)
        self.expect(TokenType.Assign)
        self.expression()
        self.expect(TokenType.Semicolon)

    def expression(self) -> None:
        self.term()
        while equal(self.tokens.peek(), TokenType.Plus):
            self.expect(TokenType.Plus)
            self.term()

    def term(self) -> None:
        self.factor()
        while equal(self.tokens.peek(), TokenType.Multiply):
            self.expect(TokenType.Multiply)
            self.factor()

    def factor(self) -> None:
        token = self.tokens.peek()
        if equal(token, TokenType.LParen):
            self.expect(TokenType.LParen)
            self.expression()
            self.expect(TokenType.RParen)
            return
        if equal(token, TokenType.Number):
            self.expect(TokenType.Number)
            return
        raise ParseError((TokenType.Number, TokenType.LParen), token)


def parse(tokens: list[Token]) -> None:
    Parse(tokens).parse_program()
