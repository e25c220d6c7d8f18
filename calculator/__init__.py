"""求值器模块 - 状态与独占访问封装"""
from .state import EvaluatorState, ExpressionState
from .evaluator import Evaluator, AsyncEvaluator

__all__ = ['EvaluatorState', 'ExpressionState', 'Evaluator', 'AsyncEvaluator']
