from .errors import CalcWarning, ParsingError, UnboundIdentifier
from .box import Add, Expression, Ident, NumLiteral, SourcePosition
from .lexer import Lexer, Token, tokenize
from .parser import ExprParser, parse
from .interpreter import Interpreter, evaluate

__version__ = '0.1.0'

__all__ = [
    "Lexer", "Token", "tokenize",
    "ExprParser", "ParsingError", "parse",
    "Interpreter", "UnboundIdentifier", "evaluate",
    "Expression", "Ident", "NumLiteral", "Add",
    "SourcePosition", "CalcWarning",
]
