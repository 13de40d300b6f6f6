import logging
from dataclasses import dataclass, field

from minicc.optimize import fold
from minicc.parse import parse
from minicc.semantic import check
from minicc.token import Token
from minicc.tokenize import tokenize

logger = logging.getLogger(__name__)


@dataclass
class CompileResult:
    tokens: list[Token] = field(default_factory=list)
    optimized: list[Token] = field(default_factory=list)


def compile_source(expression: str) -> CompileResult:
    tokens = tokenize(expression)
    logger.debug("tokenized %d tokens", len(tokens))
    parse(tokens)
    logger.debug("parse ok")
    check(tokens)
    # fold works in place; keep the lexer output intact for the caller
    optimized = fold(list(tokens))
    logger.debug("folded %d tokens into %d", len(tokens), len(optimized))
    return CompileResult(tokens, optimized)
