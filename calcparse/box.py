class BaseBox:
    """
    用于封装解析器结果的基类。
    """
    __slots__ = ()


class SourcePosition:
    """封装源位置信息（索引，行号，列号）"""

    def __init__(self, idx, lineno, colno):
        self.idx = idx
        self.lineno = lineno
        self.colno = colno

    @classmethod
    def locate(cls, text, remaining):
        """根据原始输入和剩余输入计算位置"""
        idx = len(text) - len(remaining)
        lineno = text.count("\n", 0, idx) + 1
        last_nl = text.rfind("\n", 0, idx)
        # 没有换行符时 last_nl 为 -1，列号 = idx + 1
        return cls(idx, lineno, idx - last_nl)

    def __repr__(self):
        return f"SourcePosition(idx={self.idx}, lineno={self.lineno}, colno={self.colno})"

    def __eq__(self, other):
        if not isinstance(other, SourcePosition):
            return NotImplemented
        return (self.idx, self.lineno, self.colno) == (other.idx, other.lineno, other.colno)


class Expression(BaseBox):
    """
    抽象语法树节点。节点构建后不可修改，子节点只属于一个父节点。
    """
    __slots__ = ()

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def _key(self):
        raise NotImplementedError

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash((type(self).__name__, self._key()))


class Ident(Expression):
    """未解析的符号引用"""
    __slots__ = ("name",)

    def __init__(self, name):
        object.__setattr__(self, "name", name)

    def _key(self):
        return (self.name,)

    def __repr__(self):
        return f"Ident({self.name!r})"


class NumLiteral(Expression):
    __slots__ = ("value",)

    def __init__(self, value):
        object.__setattr__(self, "value", float(value))

    def _key(self):
        return (self.value,)

    def __repr__(self):
        return f"NumLiteral({self.value!r})"


class Add(Expression):
    __slots__ = ("left", "right")

    def __init__(self, left, right):
        object.__setattr__(self, "left", left)
        object.__setattr__(self, "right", right)

    def _spine(self):
        """沿左侧展开加法链，返回 (最左侧的非加法节点, 自内向外的右操作数)"""
        rights = []
        node = self
        while isinstance(node, Add):
            rights.append(node.right)
            node = node.left
        rights.reverse()
        return node, rights

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        base, rights = self._spine()
        other_base, other_rights = other._spine()
        return len(rights) == len(other_rights) and base == other_base and rights == other_rights

    def __hash__(self):
        base, rights = self._spine()
        return hash(("Add", base, tuple(rights)))

    def __repr__(self):
        base, rights = self._spine()
        return "Add(" * len(rights) + repr(base) + "".join(f", {right!r})" for right in rights)
