"""键盘会话 - 把按键转换成Token序列并驱动求值器"""
import logging
from typing import List, Optional

from calculator import Evaluator
from config.config import KEYPAD_CONFIG
from core import CalculationError, TOKEN_DEFINITIONS
from keypad.display import format_number, from_display, render_expression

logger = logging.getLogger(__name__)


class KeypadSession:
    """
    模拟计算器按键：数字累积、小数点开关、操作符续算、= 和 AC。
    会话本身不是线程安全的，共享状态只在求值器里。
    """

    def __init__(self, evaluator=None):
        self.evaluator = evaluator or Evaluator()
        self._pending: List[str] = []
        self._chars: List[str] = []
        self._decimal_pending = False

        self.current_number = 0.0
        self.result: Optional[float] = None
        self.expression_line = ""
        self.last_error: Optional[CalculationError] = None

    @property
    def pending_tokens(self):
        return tuple(self._pending)

    @property
    def decimal_pending(self):
        return self._decimal_pending

    def _reset_input(self):
        self.current_number = 0.0
        self._chars = []

    def press_digit(self, digit):
        digit = str(digit)
        if len(digit) != 1 or not digit.isdigit():
            raise ValueError(f"Not a digit key: {digit!r}")

        if self._decimal_pending:
            self._chars.append(".")
            self._decimal_pending = False
        self._chars.append(digit)
        try:
            self.current_number = float("".join(self._chars))
        except ValueError:
            # 例如连续两次小数点得到 "1.2.3"
            self.current_number = 0.0

    def press_decimal(self):
        self._decimal_pending = not self._decimal_pending

    def press_operator(self, glyph):
        symbol = from_display(glyph)
        if symbol not in TOKEN_DEFINITIONS:
            raise ValueError(f"Unknown operator key: {glyph!r}")

        self._pending.append(format_number(self.current_number))
        self._pending.append(symbol)

        # 上一次 = 的结果存在时，从结果继续
        if self.result is not None:
            self._pending = [format_number(self.result), symbol]
            self.result = None

        self.expression_line = render_expression(self._pending)
        self._reset_input()

    def press_equals(self):
        """
        提交当前表达式并求值
        Returns:
            结果；校验失败时返回None并记录在last_error中
        """
        self._pending.append(format_number(self.current_number))
        self._reset_input()

        try:
            self.evaluator.set_expression(self._pending)
            self.evaluator.evaluate()
        except CalculationError as e:
            logger.warning(f"Calculation failed for {self._pending}: {e}")
            self.last_error = e
            return None

        self.result = self.evaluator.last_result()
        self.expression_line = render_expression(self._pending)
        self._pending = []
        self.last_error = None
        return self.result

    def press_all_clear(self):
        self.evaluator.all_clear()
        self._pending = []
        self._decimal_pending = False
        self._reset_input()
        self.result = None
        self.expression_line = ""
        self.last_error = None

    def press(self, key):
        """按单个键分派"""
        if key in KEYPAD_CONFIG["all_clear_keys"]:
            return self.press_all_clear()
        if key == KEYPAD_CONFIG["equals_key"]:
            return self.press_equals()
        if key == KEYPAD_CONFIG["decimal_key"]:
            return self.press_decimal()
        if len(key) == 1 and key.isdigit():
            return self.press_digit(key)
        return self.press_operator(key)

    def replay(self, keys):
        """依次按下字符串中的每个键，忽略空白"""
        for key in keys:
            if key.isspace():
                continue
            self.press(key)
        return self.result
