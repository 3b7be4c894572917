class CalcWarning(Warning):
    pass


class ParsingError(Exception):
    """
    文法规则无法在当前位置匹配。
    :param remaining: 出错位置处尚未消费的输入。
    :param source_pos: 源位置，由整段输入的入口函数（parse/evaluate）补全。
    """

    def __init__(self, message, remaining, source_pos=None):
        super().__init__(message)
        self.message = message
        self.remaining = remaining
        self.source_pos = source_pos

    def get_source_pos(self):
        return self.source_pos

    def __repr__(self):
        return f'ParsingError({self.message!r}, {self.source_pos!r})'


class UnboundIdentifier(Exception):
    """求值时遇到未定义的标识符"""

    def __init__(self, name):
        super().__init__(f"Unknown name {name!r}")
        self.name = name

    def __repr__(self):
        return f'UnboundIdentifier({self.name!r})'
