import re
import warnings

from .box import Add, Ident, NumLiteral, SourcePosition
from .errors import CalcWarning, ParsingError
from .utils import peek_char, advance_char, skip_whitespace

DEFAULT_MAX_DEPTH = 200


class Match:
    """封装匹配到的词素和剩余输入"""

    def __init__(self, lexeme, rest):
        self.lexeme = lexeme
        self.rest = rest


class Rule:
    """封装词素的名称和正则表达式对象"""

    def __init__(self, name, pattern, flags=0):
        self.name = name
        self.re = re.compile(pattern, flags=flags)

    def matches(self, s):
        """
        从剩余输入 s 的开头匹配
        :return: 如果规则匹配，则返回一个`Match`对象；如果不匹配，则返回None
        """
        m = self.re.match(s)
        return Match(m.group(0), s[m.end():]) if m is not None else None


FLOAT = Rule("NUMBER", r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
IDENTIFIER = Rule("IDENT", r"[A-Za-z_][A-Za-z0-9_]*")
# 指数部分缺少数字，例如 "1e"、"2E-"
DANGLING_EXPONENT = Rule("EXPONENT", r"[eE][+-]?(?![0-9])")


class ExprParser:
    """
    递归下降的表达式解析器。每个解析函数接收剩余输入，返回 (剩余输入, 语法树)，失败时抛出 ParsingError。

    >>> from calcparse.parser import ExprParser
    >>> ExprParser().parse("1 + 2 + x")
    Add(Add(NumLiteral(1.0), NumLiteral(2.0)), Ident('x'))

    :param max_depth: 括号允许的最大嵌套层数，超出时抛出 ParsingError 而不是耗尽调用栈。
    """

    def __init__(self, max_depth=DEFAULT_MAX_DEPTH):
        self.max_depth = max_depth
        # term 的候选规则，第一条优先
        self.term_rules = (
            lambda text, depth: self.parse_number(text),
            lambda text, depth: self.parse_ident(text),
            self.parse_parens,
        )

    def parse(self, text, strict=False, stacklevel=1):
        """
        解析整段输入并返回语法树。
        :param strict: 为 True 时未消费的尾部输入视为错误；否则忽略尾部并发出 CalcWarning。
        :param stacklevel: 调用者与本函数之间的栈帧数，用于让警告指向调用者。
        """
        try:
            rest, expr = self.parse_expr(text)
            if skip_whitespace(rest):
                if strict:
                    raise ParsingError("unexpected trailing input", rest)
                warnings.warn(f"Trailing input {rest!r} ignored", CalcWarning, stacklevel=stacklevel + 1)
        except ParsingError as e:
            if e.source_pos is None:
                e.source_pos = SourcePosition.locate(text, e.remaining)
            raise
        return expr

    def parse_expr(self, text, depth=0):
        """expr := term ( '+' term )*，左结合"""
        if depth > self.max_depth:
            raise ParsingError("expression nested too deeply", text)
        text, acc = self.parse_term(text, depth)
        while True:
            after_plus = self._plus(text)
            if after_plus is None:
                return text, acc
            text, right = self.parse_term(after_plus, depth)
            acc = Add(acc, right)

    def _plus(self, text):
        rest = skip_whitespace(text)
        if peek_char(rest) != "+":
            return None
        return skip_whitespace(advance_char(rest))

    def parse_term(self, text, depth=0):
        """term := number | ident | '(' expr ')'，按顺序尝试，取第一个成功的规则"""
        furthest = None
        for rule in self.term_rules:
            try:
                return rule(text, depth)
            except ParsingError as e:
                # 保留走得最远的错误，相同时取后者
                if furthest is None or len(e.remaining) <= len(furthest.remaining):
                    furthest = e
        start = skip_whitespace(text)
        if len(furthest.remaining) >= len(start):
            # 没有任何规则取得进展
            raise ParsingError("expected number, identifier or '('", start)
        raise furthest

    def parse_number(self, text):
        start = skip_whitespace(text)
        match = FLOAT.matches(start)
        if match is None:
            raise ParsingError("expected number", start)
        dangling = DANGLING_EXPONENT.matches(match.rest)
        if dangling is not None:
            raise ParsingError(f"malformed number {match.lexeme + dangling.lexeme!r}", match.rest)
        return skip_whitespace(match.rest), NumLiteral(float(match.lexeme))

    def parse_ident(self, text):
        start = skip_whitespace(text)
        match = IDENTIFIER.matches(start)
        if match is None:
            raise ParsingError("expected identifier", start)
        return skip_whitespace(match.rest), Ident(match.lexeme)

    def parse_parens(self, text, depth=0):
        start = skip_whitespace(text)
        if peek_char(start) != "(":
            raise ParsingError("expected '('", start)
        rest, expr = self.parse_expr(advance_char(start), depth + 1)
        rest = skip_whitespace(rest)
        if peek_char(rest) != ")":
            raise ParsingError("expected ')'", rest)
        return skip_whitespace(advance_char(rest)), expr


DEFAULT_PARSER = ExprParser()

parse_expr = DEFAULT_PARSER.parse_expr
parse_term = DEFAULT_PARSER.parse_term
parse_number = DEFAULT_PARSER.parse_number
parse_ident = DEFAULT_PARSER.parse_ident
parse_parens = DEFAULT_PARSER.parse_parens


def parse(text, strict=False):
    return DEFAULT_PARSER.parse(text, strict=strict, stacklevel=2)
