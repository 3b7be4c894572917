# =============================================================================
# Scanning Utils
# =============================================================================
# 所有函数都以剩余输入（字符串后缀）为游标，返回新的剩余输入，不修改任何共享状态。

WHITESPACE = " \t\r\n"


def peek_char(text):
    """返回第一个字符，输入为空时返回 None"""
    return text[0] if text else None


def advance_char(text):
    """跳过一个字符"""
    return text[1:]


def take_while(text, predicate):
    """
    消费满足 predicate 的最长前缀。
    :return: (剩余输入, 匹配到的词素)
    """
    end = 0
    while end < len(text) and predicate(text[end]):
        end += 1
    return text[end:], text[:end]


def skip_whitespace(text):
    """跳过空格、制表符和换行符（解析器使用）"""
    return text.lstrip(WHITESPACE)


def is_ascii_letter(ch):
    return "a" <= ch <= "z" or "A" <= ch <= "Z"


def is_ascii_digit(ch):
    return "0" <= ch <= "9"
