"""求值器状态 - 不做任何同步，由外层保证同一时刻只有一个调用"""
import logging
from enum import Enum
from typing import Optional

from config.config import EVALUATOR_CONFIG
from core import InfixEvaluator, TokenSequence

logger = logging.getLogger(__name__)


class EvaluatorState(Enum):
    EMPTY = "empty"
    ACCUMULATING = "accumulating"
    EVALUATED = "evaluated"


class ExpressionState:
    """(Token序列, 最近一次结果) 二元组及其操作"""

    def __init__(self, strict=None, runtime_zero_check=None, zero_literal=None):
        self.strict = EVALUATOR_CONFIG["strict_fold"] if strict is None else strict
        self.runtime_zero_check = (EVALUATOR_CONFIG["runtime_zero_check"]
                                   if runtime_zero_check is None else runtime_zero_check)
        self.zero_literal = zero_literal or EVALUATOR_CONFIG["zero_literal"]

        self._sequence = TokenSequence()
        self._result: Optional[float] = None
        self._evaluated = False

    def set_expression(self, tokens):
        """整体替换Token序列，不影响已存结果"""
        self._sequence = TokenSequence(tokens)
        self._evaluated = False

    def append(self, token):
        self._sequence.append(token)
        self._evaluated = False

    def evaluate(self):
        """
        校验并折叠当前序列；失败时抛出异常，序列和结果都保持不变
        Returns:
            新的结果（宽松模式下可能为None）
        """
        result = InfixEvaluator.evaluate(
            self._sequence.snapshot(),
            zero_literal=self.zero_literal,
            strict=self.strict,
            runtime_zero_check=self.runtime_zero_check,
        )
        self._result = None if result is None else float(result)
        self._evaluated = True
        return self._result

    def all_clear(self):
        self._sequence.clear()
        self._result = None
        self._evaluated = False

    def current_tokens(self):
        return self._sequence.snapshot()

    def last_result(self) -> Optional[float]:
        return self._result

    @property
    def state(self) -> EvaluatorState:
        if self._evaluated:
            return EvaluatorState.EVALUATED
        if len(self._sequence) == 0:
            return EvaluatorState.EMPTY
        return EvaluatorState.ACCUMULATING
