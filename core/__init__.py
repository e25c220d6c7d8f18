"""核心模块 - Token系统、中缀求值器和操作符"""
from .token_system import (
    TokenType, Token, TOKEN_DEFINITIONS, OPERATOR_NAMES,
    OPERATOR_PRECEDENCE, TokenSequence, ExpressionValidator
)
from .operators import Operators
from .infix_evaluator import InfixEvaluator
from .exceptions import (
    CalculationError, InvalidBoundary, DivideByZero, MalformedExpression
)

__all__ = [
    'TokenType', 'Token', 'TOKEN_DEFINITIONS', 'OPERATOR_NAMES',
    'OPERATOR_PRECEDENCE', 'TokenSequence', 'ExpressionValidator',
    'Operators', 'InfixEvaluator',
    'CalculationError', 'InvalidBoundary', 'DivideByZero', 'MalformedExpression'
]
