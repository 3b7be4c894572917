from enum import Enum

from .utils import peek_char, advance_char, take_while, is_ascii_letter, is_ascii_digit


class Token(Enum):
    """词法单元种类，不携带文本或位置"""
    IDENT = "IDENT"
    NUMBER = "NUMBER"
    LPAREN = "LPAREN"
    RPAREN = "RPAREN"


NUMBER_CHARS = frozenset("-+.0123456789")


def skip_spaces(text):
    """只跳过 U+0020 空格，制表符和换行符不算空白"""
    while peek_char(text) == " ":
        text = advance_char(text)
    return text


def scan_number(text):
    """
    匹配由 '-', '+', '.' 和数字组成的最长串，不做结构校验（"--1..2" 也是一个数字）。
    :return: (剩余输入, Token.NUMBER 或 None)
    """
    rest, lexeme = take_while(text, lambda ch: ch in NUMBER_CHARS)
    if not lexeme:
        return text, None
    return rest, Token.NUMBER


def scan_ident(text):
    """首字符必须是 ASCII 字母，之后是字母或数字"""
    ch = peek_char(text)
    if ch is None or not is_ascii_letter(ch):
        return text, None
    rest, _ = take_while(text, lambda c: is_ascii_letter(c) or is_ascii_digit(c))
    return rest, Token.IDENT


def _scan_char(text, char, token):
    if peek_char(text) == char:
        return advance_char(text), token
    return text, None


def scan_lparen(text):
    return _scan_char(text, "(", Token.LPAREN)


def scan_rparen(text):
    return _scan_char(text, ")", Token.RPAREN)


# 匹配规则，第一条优先
DEFAULT_RULES = (scan_ident, scan_number, scan_lparen, scan_rparen)


class Lexer:
    """词法分析器，lex()获取 Token 流"""

    def __init__(self, rules=DEFAULT_RULES):
        self.rules = tuple(rules)

    def next_token(self, text):
        """
        跳过空格后按顺序尝试每条规则，返回第一个成功的结果。
        :return: (剩余输入, Token 或 None)
        """
        text = skip_spaces(text)
        for rule in self.rules:
            rest, token = rule(text)
            if token is not None:
                return rest, token
        return text, None

    def lex(self, s):
        return LexerStream(self, s)


class LexerStream:
    """词法分析器流，遇到无法识别的字符时直接结束，不报错"""

    def __init__(self, lexer, s):
        self.lexer = lexer
        self.s = s  # 剩余输入

    def __iter__(self):
        return self

    def __next__(self):
        if not self.s:
            raise StopIteration
        rest, token = self.lexer.next_token(self.s)
        if token is None:
            # 无法识别：截断
            self.s = ""
            raise StopIteration
        self.s = rest
        return token


DEFAULT_LEXER = Lexer()


def next_token(text):
    return DEFAULT_LEXER.next_token(text)


def tokenize(text):
    """将输入转换为 Token 列表，遇到无法识别的字符时返回已得到的部分"""
    return list(DEFAULT_LEXER.lex(text))
