"""RPN表达式求值器 - 调用统一的Operators类"""
import logging

from core.errors import OperandStackError, UnknownOperatorError
from core.token_system import TokenType, OPERATOR_DEFINITIONS, format_tokens
from core.operators import Operators

logger = logging.getLogger(__name__)


class RPNEvaluator:
    """评估RPN表达式的值"""

    @staticmethod
    def evaluate(token_sequence, int_dtype="int32", allow_partial=False):
        """
        评估RPN表达式
        Args:
            token_sequence: 后缀顺序的Token序列
            int_dtype: 整数类型（决定溢出范围）
            allow_partial: 是否允许部分表达式（栈中剩余多个元素时返回栈顶）
        Returns:
            整数结果
        Raises:
            OperandStackError: 操作数不足 / 空表达式 / 剩余多个操作数
            ArithmeticFault: 除零、负指数、溢出
        """
        stack = []

        for token in token_sequence:
            if token.type == TokenType.NUMBER:
                stack.append(token.value)
                continue

            info = OPERATOR_DEFINITIONS.get(token.value)
            if info is None:
                raise UnknownOperatorError(token.value)

            if len(stack) < 2:
                raise OperandStackError(f"Insufficient operands for {token.name}")

            # 后入栈的是右操作数
            operand2 = stack.pop()
            operand1 = stack.pop()

            op_method = getattr(Operators, info.method)
            stack.append(op_method(operand1, operand2, int_dtype))

        # 返回结果处理
        if len(stack) == 0:
            raise OperandStackError("Empty stack after evaluation")
        if len(stack) > 1:
            if allow_partial:
                logger.debug(f"Partial expression with {len(stack)} stack elements, returning top")
                return stack[-1]
            logger.debug(f"RPN expression: {format_tokens(token_sequence)}")
            raise OperandStackError(f"Stack has {len(stack)} elements after evaluation, expected 1")

        return stack[0]
