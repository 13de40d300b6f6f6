import string

from minicc.token import TokenType, Token, new_token

PUNCTUATORS = {
    "=": TokenType.Assign,
    "+": TokenType.Plus,
    "*": TokenType.Multiply,
    "(": TokenType.LParen,
    ")": TokenType.RParen,
    ";": TokenType.Semicolon,
}

KEYWORDS = {"int": TokenType.IntKeyword}


def is_identifier_start(char: str) -> bool:
    return char in string.ascii_letters or char == "_"


def is_identifier_char(char: str) -> bool:
    return is_identifier_start(char) or char in string.digits


def convert_keyword(tokens: list[Token]) -> None:
    for index, token in enumerate(tokens):
        if token.kind == TokenType.Identifier and token.text in KEYWORDS:
            tokens[index] = new_token(KEYWORDS[token.text], token.text, token.location)


def tokenize(expression: str) -> list[Token]:
    """Split ``expression`` into tokens, always ending with ``EndOfInput``.

    Whitespace and characters outside the language are skipped without
    complaint, so this never fails.
    """
    index = 0
    tokens = []
    while index < len(expression):
        if is_identifier_start(expression[index]):
            end = index
            while end < len(expression) and is_identifier_char(expression[end]):
                end += 1
            tokens.append(
                new_token(TokenType.Identifier, expression[index:end], index)
            )
            index = end
            continue
        if expression[index] in string.digits:
            end = index
            while end < len(expression) and expression[end] in string.digits:
                end += 1
            tokens.append(new_token(TokenType.Number, expression[index:end], index))
            index = end
            continue
        if (token_type := PUNCTUATORS.get(expression[index])) is not None:
            tokens.append(new_token(token_type, expression[index], index))
        index += 1
    tokens.append(new_token(TokenType.EndOfInput, "", index))
    convert_keyword(tokens)
    return tokens
