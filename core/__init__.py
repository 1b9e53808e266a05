"""核心模块 - Token系统、调度场转换器、RPN评估器和操作符"""
from .errors import (
    CalculatorError, ConversionError, UnableToParseIntError, OperatorStackError,
    UnbalancedParenthesesError, EvaluationError, OperandStackError,
    ArithmeticFault, UnknownOperatorError
)
from .token_system import (
    TokenType, Token, Associativity, OPERATOR_DEFINITIONS,
    get_precedence, integer_bounds, format_tokens
)
from .shunting_yard import ShuntingYardConverter, convert
from .rpn_evaluator import RPNEvaluator
from .operators import Operators

evaluate = RPNEvaluator.evaluate

__all__ = [
    'CalculatorError', 'ConversionError', 'UnableToParseIntError', 'OperatorStackError',
    'UnbalancedParenthesesError', 'EvaluationError', 'OperandStackError',
    'ArithmeticFault', 'UnknownOperatorError',
    'TokenType', 'Token', 'Associativity', 'OPERATOR_DEFINITIONS',
    'get_precedence', 'integer_bounds', 'format_tokens',
    'ShuntingYardConverter', 'convert', 'RPNEvaluator', 'Operators', 'evaluate'
]
