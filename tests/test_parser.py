import warnings

import pytest
from pytest import raises

from calcparse import CalcWarning, ExprParser, ParsingError, SourcePosition, parse
from calcparse.box import Add, Ident, NumLiteral
from calcparse.parser import (parse_expr, parse_ident, parse_number,
                              parse_parens, parse_term)


class TestTerm(object):
    @pytest.mark.parametrize("text, expected", [
        ("test", Ident("test")),
        ("61", NumLiteral(61.0)),
        ("_x1", Ident("_x1")),
        ("  ( 1 )  ", NumLiteral(1.0)),
    ])
    def test_term(self, text, expected):
        rest, res = parse_term(text)
        assert rest == ""
        assert res == expected

    def test_no_rule_matches(self):
        with raises(ParsingError) as excinfo:
            parse_term("  $")
        assert excinfo.value.remaining == "$"
        assert "expected number" in excinfo.value.message

    def test_number_before_ident(self):
        rest, res = parse_term("1abc")
        assert res == NumLiteral(1.0)
        assert rest == "abc"


class TestNumber(object):
    @pytest.mark.parametrize("text, value", [
        ("123", 123.0),
        ("1.5", 1.5),
        ("1.", 1.0),
        (".5", 0.5),
        ("-2", -2.0),
        ("+2", 2.0),
        ("1e3", 1000.0),
        ("2.5E-1", 0.25),
    ])
    def test_number(self, text, value):
        rest, res = parse_number(text)
        assert rest == ""
        assert res == NumLiteral(value)

    def test_skips_surrounding_whitespace(self):
        assert parse_number(" \t12\n + 1") == ("+ 1", NumLiteral(12.0))

    @pytest.mark.parametrize("text", ["--", "-", ".", "abc", ""])
    def test_malformed(self, text):
        with raises(ParsingError):
            parse_number(text)

    def test_stops_at_second_dot(self):
        assert parse_number("1..2") == (".2", NumLiteral(1.0))

    @pytest.mark.parametrize("text, lexeme", [
        ("1e", "1e"),
        ("1e+", "1e+"),
        ("2E-", "2E-"),
        ("1.e x", "1.e"),
    ])
    def test_dangling_exponent(self, text, lexeme):
        with raises(ParsingError) as excinfo:
            parse_number(text)
        assert excinfo.value.message == f"malformed number {lexeme!r}"

    def test_dangling_exponent_in_term(self):
        with raises(ParsingError) as excinfo:
            parse_term("1e + 2")
        assert excinfo.value.message == "malformed number '1e'"
        assert excinfo.value.remaining == "e + 2"


class TestIdent(object):
    def test_ident(self):
        assert parse_ident("  foo_1 bar") == ("bar", Ident("foo_1"))

    def test_not_ident(self):
        with raises(ParsingError):
            parse_ident("1foo")


class TestParens(object):
    def test_parens(self):
        assert parse_parens("( a + 1 ) x") == ("x", Add(Ident("a"), NumLiteral(1.0)))

    def test_missing_open(self):
        with raises(ParsingError) as excinfo:
            parse_parens("1)")
        assert excinfo.value.message == "expected '('"

    def test_missing_close(self):
        with raises(ParsingError) as excinfo:
            parse_parens("(1 + 2")
        assert excinfo.value.message == "expected ')'"
        assert excinfo.value.remaining == ""

    def test_inner_error_propagates(self):
        with raises(ParsingError) as excinfo:
            parse_term("(1 + $)")
        assert excinfo.value.remaining == "$)"


class TestExpr(object):
    def test_left_associative(self):
        rest, res = parse_expr("((1 + 2) + (3 + 4)) + 5 + 6")
        assert rest == ""
        n = NumLiteral
        assert res == Add(Add(Add(Add(n(1), n(2)), Add(n(3), n(4))), n(5)), n(6))

    def test_single_term(self):
        assert parse_expr("pi") == ("", Ident("pi"))

    def test_no_space_around_plus(self):
        assert parse_expr("1+2") == ("", Add(NumLiteral(1), NumLiteral(2)))

    def test_leaves_remainder(self):
        assert parse_expr("1 + 2 )") == (")", Add(NumLiteral(1), NumLiteral(2)))

    def test_missing_continuation(self):
        with raises(ParsingError):
            parse_expr("1 + ")

    def test_bad_leading_term(self):
        with raises(ParsingError):
            parse_expr("+")

    def test_deterministic(self):
        assert parse_expr("(a + 1) + b") == parse_expr("(a + 1) + b")


class TestParse(object):
    def test_error_position(self):
        with raises(ParsingError) as excinfo:
            parse("1 + (2 + )")
        assert excinfo.value.get_source_pos() == SourcePosition(9, 1, 10)

    def test_error_position_multiline(self):
        with raises(ParsingError) as excinfo:
            parse("1 +\n  $")
        pos = excinfo.value.source_pos
        assert pos.lineno == 2
        assert pos.colno == 3

    def test_trailing_input_warns(self):
        with pytest.warns(CalcWarning):
            assert parse("1 + 2 3") == Add(NumLiteral(1), NumLiteral(2))

    def test_trailing_whitespace_no_warning(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            assert parse("1 \n") == NumLiteral(1)

    def test_strict_rejects_trailing_input(self):
        with raises(ParsingError) as excinfo:
            parse("1 + 2 3", strict=True)
        assert excinfo.value.source_pos.idx == 6

    def test_max_depth(self):
        parser = ExprParser(max_depth=3)
        assert parser.parse("(((1)))") == NumLiteral(1)
        with raises(ParsingError) as excinfo:
            parser.parse("((((1))))")
        assert excinfo.value.message == "expression nested too deeply"
        assert excinfo.value.source_pos.idx == 4

    def test_default_depth_does_not_exhaust_stack(self):
        text = "(" * 5000 + "1" + ")" * 5000
        with raises(ParsingError):
            parse(text)

    def test_long_chain(self):
        expr = parse(" + ".join(["1"] * 2000))
        assert isinstance(expr, Add)

    def test_long_chain_equality(self):
        text = " + ".join(["1"] * 5000)
        first, second = parse(text), parse(text)
        assert first == second
        assert hash(first) == hash(second)
        assert first != parse(text + " + 2")
        assert repr(first).count("Add(") == 4999

    def test_warning_points_at_caller(self):
        with pytest.warns(CalcWarning) as record:
            parse("1 2")
        assert record[0].filename == __file__

    def test_warning_points_at_caller_of_method(self):
        with pytest.warns(CalcWarning) as record:
            ExprParser().parse("1 2")
        assert record[0].filename == __file__
