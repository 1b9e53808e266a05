"""core/errors.py - 计算器异常体系"""


class CalculatorError(Exception):
    """所有计算器异常的基类"""
    kind = "CalculatorError"

    def __str__(self):
        message = super().__str__()
        return f"{self.kind}: {message}" if message else self.kind


# 转换阶段（中缀 -> 后缀）=======================

class ConversionError(CalculatorError):
    kind = "ConversionError"


class UnableToParseIntError(ConversionError):
    """数字串超出整数表示范围"""
    kind = "UnableToParseInt"

    def __init__(self, literal, position, message=None):
        self.literal = literal
        self.position = position
        super().__init__(message or f"cannot parse '{literal}' at position {position}")


class OperatorStackError(ConversionError):
    """操作符栈意外为空（内部不变量被破坏）"""
    kind = "OperatorStackError"


class UnbalancedParenthesesError(ConversionError):
    """括号不匹配（仅严格模式）"""
    kind = "UnbalancedParentheses"

    def __init__(self, position, message=None):
        self.position = position
        super().__init__(message or f"unbalanced parenthesis at position {position}")


# 求值阶段 ====================================

class EvaluationError(CalculatorError):
    kind = "EvaluationError"


class OperandStackError(EvaluationError):
    """操作数栈下溢或剩余多个操作数"""
    kind = "OperandStackError"


class ArithmeticFault(EvaluationError):
    """除零、负指数、结果溢出"""
    kind = "ArithmeticError"


class UnknownOperatorError(CalculatorError):
    kind = "UnknownOperator"

    def __init__(self, operator):
        self.operator = operator
        super().__init__(f"unknown operator: {operator!r}")
