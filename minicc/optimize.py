from minicc.token import TokenType, Token, new_token, equal

FOLDABLE = (TokenType.Number, TokenType.Plus, TokenType.Number)


def is_foldable(tokens: list[Token], index: int) -> bool:
    return all(
        equal(token, token_type)
        for token, token_type in zip(tokens[index : index + 3], FOLDABLE)
    )


def fold(tokens: list[Token]) -> list[Token]:
    """Fold ``Number + Number`` triplets into one ``Number``, in place.

    Matching is positional over the flat token list, so a parenthesized pair
    still folds while ``*`` never does. After a fold
    the same index is examined again, so ``1 + 2 + 3`` collapses to ``6``.
    """
    index = 0
    while index <= len(tokens) - 3:
        if not is_foldable(tokens, index):
            index += 1
            continue
        left, right = tokens[index], tokens[index + 2]
        value = int(left.text) + int(right.text)
        tokens[index] = new_token(TokenType.Number, str(value), left.location)
        del tokens[index + 1 : index + 3]
    return tokens
