import math

from .box import Add, Ident, NumLiteral
from .errors import UnboundIdentifier
from .parser import DEFAULT_PARSER

DEFAULT_CONSTANTS = {"pi": math.pi}


class Interpreter:
    """
    对语法树求值，结果为浮点数。
    :param constants: 标识符到数值的映射，默认只有 pi。
    :param parser: 用于 evaluate() 的解析器。
    """

    def __init__(self, constants=None, parser=DEFAULT_PARSER):
        self.constants = dict(DEFAULT_CONSTANTS if constants is None else constants)
        self.parser = parser

    def evaluate(self, text, strict=False, stacklevel=1):
        return self.eval(self.parser.parse(text, strict=strict, stacklevel=stacklevel + 1))

    def eval(self, node):
        if isinstance(node, NumLiteral):
            return node.value
        elif isinstance(node, Ident):
            try:
                return self.constants[node.name]
            except KeyError:
                raise UnboundIdentifier(node.name) from None
        elif isinstance(node, Add):
            # 沿左侧展开加法链，长链不会递归过深；先左后右
            rights = []
            while isinstance(node, Add):
                rights.append(node.right)
                node = node.left
            total = self.eval(node)
            for right in reversed(rights):
                total += self.eval(right)
            return total
        else:
            raise TypeError(f"Unknown node type: {type(node).__name__}")


DEFAULT_INTERPRETER = Interpreter()


def eval_expr(node):
    return DEFAULT_INTERPRETER.eval(node)


def evaluate(text, strict=False):
    """解析并求值，失败时抛出 ParsingError 或 UnboundIdentifier"""
    return DEFAULT_INTERPRETER.evaluate(text, strict=strict, stacklevel=2)
