"""core/exceptions.py - 计算错误分类"""


class CalculationError(Exception):
    """所有计算错误的基类，携带出错时的Token快照"""

    def __init__(self, message, tokens=()):
        super().__init__(message)
        self.tokens = tuple(tokens)


class InvalidBoundary(CalculationError):
    """首个或末尾元素不是数字"""

    def __init__(self, tokens=()):
        super().__init__("first or last element not numeric", tokens)


class DivideByZero(CalculationError):
    """除数为零"""

    def __init__(self, index, tokens=()):
        super().__init__(f"division by zero at token {index}", tokens)
        self.index = index


class MalformedExpression(CalculationError):
    """折叠无法得到数值（相邻操作符、非法Token、溢出等）"""
    pass
