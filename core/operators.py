"""core/operators.py"""
import logging

import numpy as np

logger = logging.getLogger(__name__)


class Operators:
    """四则运算的静态方法集合，统一在float64上计算"""

    @staticmethod
    def _as_float(operand):
        return np.float64(operand)

    @staticmethod
    def add(operand1, operand2):
        """加法操作符"""
        with np.errstate(over='ignore', invalid='ignore'):
            return Operators._as_float(operand1) + Operators._as_float(operand2)

    @staticmethod
    def sub(operand1, operand2):
        """减法操作符"""
        with np.errstate(over='ignore', invalid='ignore'):
            return Operators._as_float(operand1) - Operators._as_float(operand2)

    @staticmethod
    def mul(operand1, operand2):
        """乘法操作符"""
        with np.errstate(over='ignore', invalid='ignore'):
            return Operators._as_float(operand1) * Operators._as_float(operand2)

    @staticmethod
    def div(operand1, operand2):
        """
        除法操作符。除数为0时不抛异常，按IEEE规则得到inf或nan，
        由调用方决定是否在此之前拦截。
        """
        with np.errstate(over='ignore', divide='ignore', invalid='ignore'):
            return np.divide(Operators._as_float(operand1), Operators._as_float(operand2))

    @staticmethod
    def apply(token, operand1, operand2):
        """按操作符Token分派到对应方法"""
        op_method = getattr(Operators, token.name or '', None)
        if op_method is None:
            raise ValueError(f"Unknown binary operator: {token.text}")
        result = op_method(operand1, operand2)
        logger.debug(f"{operand1} {token.text} {operand2} = {result}")
        return result
