"""中缀表达式求值器 - 先校验，再按优先级两遍折叠"""
import logging

import numpy as np

from core.exceptions import DivideByZero, MalformedExpression
from core.operators import Operators
from core.token_system import ExpressionValidator

logger = logging.getLogger(__name__)


class InfixEvaluator:
    """评估中缀Token序列的值"""

    @staticmethod
    def evaluate(token_sequence, zero_literal="0", strict=True, runtime_zero_check=True):
        """
        Args:
            token_sequence: Token序列（任意可迭代对象，内部会取快照）
            zero_literal: 除零语法检查使用的零字面量
            strict: 折叠失败时抛出MalformedExpression；为False时返回None
            runtime_zero_check: 折叠过程中除数值为0时抛出DivideByZero
        Returns:
            float64结果，宽松模式下折叠失败返回None
        """
        tokens = tuple(token_sequence)
        ExpressionValidator.validate(tokens, zero_literal)

        result = InfixEvaluator._fold(tokens, runtime_zero_check)
        if result is None:
            if strict:
                raise MalformedExpression("expression could not be folded to a number", tokens)
            logger.debug(f"Fold produced no value: {' '.join(t.text for t in tokens)}")
        return result

    @staticmethod
    def _fold(tokens, runtime_zero_check):
        if not ExpressionValidator.is_alternating(tokens):
            logger.debug("Numbers and operators do not alternate")
            return None

        # 第一遍：乘除立即作用于当前项，加减把当前项收入terms
        terms = [tokens[0].value]
        additive_ops = []
        for i in range(1, len(tokens), 2):
            op, operand = tokens[i], tokens[i + 1]
            if op.precedence == 2:
                if runtime_zero_check and op.name == 'div' and operand.value == 0:
                    raise DivideByZero(i + 1, tokens)
                terms[-1] = Operators.apply(op, terms[-1], operand.value)
            else:
                additive_ops.append(op)
                terms.append(operand.value)

        # 第二遍：从左到右处理加减
        result = terms[0]
        for op, term in zip(additive_ops, terms[1:]):
            result = Operators.apply(op, result, term)

        if not np.isfinite(result):
            logger.debug(f"Non-finite fold result: {result}")
            return None
        return np.float64(result)
