"""独占访问的求值器 - 线程版（单工作线程actor）与asyncio版"""
import asyncio
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Optional, Tuple

from calculator.state import EvaluatorState, ExpressionState
from core import Token

logger = logging.getLogger(__name__)


class Evaluator:
    """
    所有操作提交给同一个工作线程，按到达顺序逐个执行。
    调用方阻塞等待自己的那一轮；异常在调用方线程重新抛出。
    """

    def __init__(self, strict=None, runtime_zero_check=None, zero_literal=None):
        self._state = ExpressionState(strict, runtime_zero_check, zero_literal)
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="evaluator")

    def _submit(self, fn, *args):
        logger.debug(f"Submitting {fn.__name__}")
        return self._executor.submit(fn, *args).result()

    def set_expression(self, tokens) -> None:
        # 在调用方线程取快照
        self._submit(self._state.set_expression, tuple(tokens))

    def append(self, token) -> None:
        self._submit(self._state.append, token)

    def evaluate(self) -> Optional[float]:
        return self._submit(self._state.evaluate)

    def all_clear(self) -> None:
        self._submit(self._state.all_clear)
        logger.info("Evaluator cleared")

    def current_tokens(self) -> Tuple[Token, ...]:
        return self._submit(self._state.current_tokens)

    def last_result(self) -> Optional[float]:
        return self._submit(self._state.last_result)

    @property
    def state(self) -> EvaluatorState:
        return self._submit(lambda: self._state.state)

    def close(self):
        """等待已提交的操作完成后关闭工作线程"""
        self._executor.shutdown(wait=True)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False


class AsyncEvaluator:
    """
    协程版：asyncio.Lock按FIFO唤醒等待者，持锁期间不再await其他资源，
    因此每个操作的读-改-写都是原子的。
    """

    def __init__(self, strict=None, runtime_zero_check=None, zero_literal=None):
        self._state = ExpressionState(strict, runtime_zero_check, zero_literal)
        self._lock = asyncio.Lock()

    async def set_expression(self, tokens) -> None:
        tokens = tuple(tokens)
        async with self._lock:
            self._state.set_expression(tokens)

    async def append(self, token) -> None:
        async with self._lock:
            self._state.append(token)

    async def evaluate(self) -> Optional[float]:
        async with self._lock:
            return self._state.evaluate()

    async def all_clear(self) -> None:
        async with self._lock:
            self._state.all_clear()
        logger.info("Evaluator cleared")

    async def current_tokens(self) -> Tuple[Token, ...]:
        async with self._lock:
            return self._state.current_tokens()

    async def last_result(self) -> Optional[float]:
        async with self._lock:
            return self._state.last_result()

    async def state(self) -> EvaluatorState:
        async with self._lock:
            return self._state.state
