"""core/token_system.py"""
import re
from dataclasses import dataclass
from enum import Enum

import numpy as np

from core.exceptions import InvalidBoundary, DivideByZero


class TokenType(Enum):
    NUMBER = "number"      # 十进制数字
    OPERATOR = "operator"  # 四则操作符
    INVALID = "invalid"    # 无法识别，追加时接受，求值时拒绝


# 可选符号 + 整数/小数 + 可选指数，例如 12、12.5、.5、-2.0、1e3
NUMBER_PATTERN = re.compile(r'[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?')


@dataclass(frozen=True)
class Token:
    """不可变Token，按类型和文本判等"""
    type: TokenType
    text: str

    @classmethod
    def from_text(cls, text):
        """根据文本判定Token类型；已是Token则原样返回"""
        if isinstance(text, Token):
            return text
        text = str(text)
        if text in TOKEN_DEFINITIONS:
            return TOKEN_DEFINITIONS[text]
        if NUMBER_PATTERN.fullmatch(text) and np.isfinite(float(text)):
            return cls(TokenType.NUMBER, text)
        return cls(TokenType.INVALID, text)

    @property
    def is_number(self):
        return self.type == TokenType.NUMBER

    @property
    def is_operator(self):
        return self.type == TokenType.OPERATOR

    @property
    def value(self):
        """数字Token的float64值，其他类型为None"""
        if not self.is_number:
            return None
        return np.float64(self.text)

    @property
    def name(self):
        """操作符名称（对应Operators中的方法名）"""
        return OPERATOR_NAMES.get(self.text) if self.is_operator else None

    @property
    def precedence(self):
        return OPERATOR_PRECEDENCE.get(self.text, 0) if self.is_operator else 0

    def __str__(self):
        return self.text


# 操作符定义（键为规范符号）
TOKEN_DEFINITIONS = {
    '+': Token(TokenType.OPERATOR, '+'),
    '-': Token(TokenType.OPERATOR, '-'),
    '*': Token(TokenType.OPERATOR, '*'),
    '/': Token(TokenType.OPERATOR, '/'),
}

OPERATOR_NAMES = {'+': 'add', '-': 'sub', '*': 'mul', '/': 'div'}

# 乘除优先于加减，同级左结合
OPERATOR_PRECEDENCE = {'+': 1, '-': 1, '*': 2, '/': 2}


class TokenSequence:
    """正在构建的表达式：有序、可变，追加时不做校验"""

    def __init__(self, tokens=()):
        self._tokens = []
        self.extend(tokens)

    def append(self, token):
        self._tokens.append(Token.from_text(token))

    def extend(self, tokens):
        for token in tokens:
            self.append(token)

    def clear(self):
        self._tokens.clear()

    def snapshot(self):
        """返回当前顺序的不可变副本，而不是内部列表本身"""
        return tuple(self._tokens)

    def texts(self):
        return tuple(token.text for token in self._tokens)

    def __len__(self):
        return len(self._tokens)

    def __iter__(self):
        return iter(self.snapshot())

    def __repr__(self):
        return f"TokenSequence({list(self.texts())!r})"


class ExpressionValidator:
    """求值前的两步校验"""

    @staticmethod
    def has_numeric_boundaries(tokens):
        """首尾元素都必须是数字；空序列视为不满足"""
        if not tokens:
            return False
        return tokens[0].is_number and tokens[-1].is_number

    @staticmethod
    def find_literal_zero_division(tokens, zero_literal="0"):
        """
        纯语法检查：只识别紧跟在 / 之后、文本恰为零字面量的Token。
        返回第一个出错位置，没有则返回None。
        """
        for index in range(1, len(tokens)):
            if tokens[index].text == zero_literal and tokens[index - 1].text == '/':
                return index
        return None

    @staticmethod
    def is_alternating(tokens):
        """数字与操作符严格交替，且以数字开头和结尾"""
        if len(tokens) % 2 == 0:
            return False
        for index, token in enumerate(tokens):
            expected = TokenType.NUMBER if index % 2 == 0 else TokenType.OPERATOR
            if token.type != expected:
                return False
        return True

    @staticmethod
    def validate(tokens, zero_literal="0"):
        """
        依次执行边界检查和除零检查
        Raises:
            InvalidBoundary: 首或尾不是数字
            DivideByZero: / 后紧跟零字面量
        """
        tokens = tuple(tokens)
        if not ExpressionValidator.has_numeric_boundaries(tokens):
            raise InvalidBoundary(tokens)

        index = ExpressionValidator.find_literal_zero_division(tokens, zero_literal)
        if index is not None:
            raise DivideByZero(index, tokens)
