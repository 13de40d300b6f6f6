"""Tests for the full pipeline and its command line driver."""

from __future__ import annotations

import logging

import pytest
from click.testing import CliRunner

from minicc.compiler import compile_source
from minicc.errors import ParseError
from minicc.helper import error_message
from minicc.main import main
from minicc.semantic import check
from minicc.token import Token, TokenType
from minicc.tokenize import tokenize


class TestSemanticCheck:
    def test_logs_and_succeeds(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="minicc.semantic"):
            assert check(tokenize("int x = 1;")) is None
        assert "variables properly declared" in caplog.text

    def test_leaves_tokens_alone(self) -> None:
        tokens = tokenize("int x = 1 + 2;")
        before = list(tokens)
        check(tokens)
        assert tokens == before


class TestCompileSource:
    def test_returns_raw_and_folded_tokens(self) -> None:
        result = compile_source("int x = (2 + 3) * 4;")
        assert len(result.tokens) == 12
        assert result.tokens[4] == Token(TokenType.Number, "2")
        assert len(result.optimized) == 10
        assert result.optimized[4] == Token(TokenType.Number, "5")

    def test_raw_tokens_are_not_aliased(self) -> None:
        result = compile_source("int x = 1 + 2;")
        assert result.tokens is not result.optimized
        assert [t.text for t in result.tokens] == ["int", "x", "=", "1", "+", "2", ";", ""]

    def test_runs_semantic_check(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="minicc.semantic"):
            compile_source("int x = 1;")
        assert "variables properly declared" in caplog.text

    def test_parse_error_propagates(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="minicc.semantic"):
            with pytest.raises(ParseError):
                compile_source("int x = 2 + ;")
        assert "variables properly declared" not in caplog.text


class TestErrorMessage:
    def test_caret_under_location(self) -> None:
        assert error_message("int x = 2 + ;", 12, "oops") == (
            "int x = 2 + ;\n" "            ^ oops\n"
        )

    def test_only_offending_line_is_shown(self) -> None:
        assert error_message("int x\n= 2 + ;", 12, "oops") == (
            "= 2 + ;\n" "      ^ oops\n"
        )


class TestMain:
    def test_default_program(self) -> None:
        result = CliRunner().invoke(main, [])
        assert result.exit_code == 0
        assert "Tokens:" in result.output
        assert "Optimized Tokens:" in result.output
        optimized = result.output.split("Optimized Tokens:")[1]
        assert "Number: 5" in optimized
        assert "Number: 2" not in optimized
        assert "EndOfInput: " in optimized

    def test_custom_program(self) -> None:
        result = CliRunner().invoke(main, ["--quiet", "int y = 1 + 2 + 3;"])
        assert result.exit_code == 0
        optimized = result.output.split("Optimized Tokens:")[1]
        assert "Number: 6" in optimized

    def test_syntax_error_exits_with_status_one(self) -> None:
        result = CliRunner().invoke(main, ["int x = 2 + ;"])
        assert result.exit_code == 1
        assert "Expected Number or LParen, found Semicolon" in result.output
        assert "Tokens:" not in result.output
