"""Tests for MatcherExpression parsing."""

from __future__ import annotations

import pytest

from json_tree_validator.exceptions import MatcherExpressionError
from json_tree_validator.matchers.expression import (
    MatcherExpression,
    is_matcher_expression,
)


class TestIsMatcherExpression:
    @pytest.mark.parametrize(
        "text",
        [
            "@equalsIgnoreCase('lorem')@",
            "@isNumber()@",
            "@ignore@",
            "  @contains('a')@ ",
            "@greaterThan(5)@",
        ],
    )
    def test_recognised(self, text: str) -> None:
        assert is_matcher_expression(text)

    @pytest.mark.parametrize(
        "value",
        ["lorem", "@", "@@", "user@example.com", "@1abc()@", "@name(@", 5, None],
    )
    def test_not_recognised(self, value: object) -> None:
        assert not is_matcher_expression(value)


class TestParse:
    def test_single_quoted_argument(self) -> None:
        expression = MatcherExpression.parse("@equalsIgnoreCase('lorem ipsum')@")
        assert expression.name == "equalsIgnoreCase"
        assert expression.arguments == ("lorem ipsum",)
        assert expression.first_argument == "lorem ipsum"

    def test_no_arguments(self) -> None:
        expression = MatcherExpression.parse("@isNumber()@")
        assert expression.arguments == ()
        assert expression.first_argument is None

    def test_no_parentheses(self) -> None:
        assert MatcherExpression.parse("@ignore@").arguments == ()

    def test_multiple_arguments(self) -> None:
        expression = MatcherExpression.parse("@between('1', '10')@")
        assert expression.arguments == ("1", "10")

    def test_unquoted_arguments_are_stripped(self) -> None:
        expression = MatcherExpression.parse("@between( 1 , 10 )@")
        assert expression.arguments == ("1", "10")

    def test_comma_inside_quotes(self) -> None:
        expression = MatcherExpression.parse("@contains('a, b')@")
        assert expression.arguments == ("a, b",)

    def test_double_quotes(self) -> None:
        expression = MatcherExpression.parse('@contains("it\'s")@')
        assert expression.arguments == ("it's",)

    def test_quoted_whitespace_is_kept(self) -> None:
        expression = MatcherExpression.parse("@trim('  x ')@")
        assert expression.arguments == ("  x ",)

    def test_keeps_original_text(self) -> None:
        text = " @isNumber()@ "
        assert MatcherExpression.parse(text).text == text

    def test_parse_is_cached(self) -> None:
        text = "@contains('cached')@"
        assert MatcherExpression.parse(text) is MatcherExpression.parse(text)

    def test_unterminated_quote(self) -> None:
        with pytest.raises(MatcherExpressionError, match="Unterminated quote"):
            MatcherExpression.parse("@contains('x)@")

    def test_text_after_quoted_argument(self) -> None:
        with pytest.raises(MatcherExpressionError):
            MatcherExpression.parse("@contains('x'y)@")

    def test_not_an_expression(self) -> None:
        with pytest.raises(MatcherExpressionError):
            MatcherExpression.parse("lorem")

    def test_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            MatcherExpression.parse("lorem")
