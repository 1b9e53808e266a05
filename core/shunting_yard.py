"""core/shunting_yard.py - 中缀表达式 -> 后缀(RPN) Token 序列"""
import logging

from core.errors import OperatorStackError, UnableToParseIntError, UnbalancedParenthesesError
from core.token_system import (
    Token, OPERATOR_SYMBOLS, LEFT_PAREN, RIGHT_PAREN,
    should_pop, integer_bounds
)

logger = logging.getLogger(__name__)

DIGITS = frozenset('0123456789')


class ShuntingYardConverter:
    """
    调度场算法转换器
    只保存配置；操作符栈和输出队列在每次 convert 调用内新建，调用之间不共享状态
    """

    def __init__(self, int_dtype="int32", strict_parentheses=False):
        self.int_dtype = int_dtype
        self.strict_parentheses = strict_parentheses
        self._max_value = integer_bounds(int_dtype)[1]
        self._max_digits = len(str(self._max_value))

    def convert(self, expression):
        """
        Args:
            expression: 中缀表达式文本
        Returns:
            后缀顺序的 Token 元组
        Raises:
            UnableToParseIntError, OperatorStackError, UnbalancedParenthesesError(严格模式)
        """
        operator_stack = []
        output_queue = []
        open_positions = []  # 未匹配的 '(' 的位置，与栈中的括号一一对应

        i = 0
        length = len(expression)
        while i < length:
            ch = expression[i]

            if ch.isspace():
                i += 1
                continue

            if ch in DIGITS:
                start = i
                while i + 1 < length and expression[i + 1] in DIGITS:
                    i += 1
                output_queue.append(self._parse_number(expression[start:i + 1], start))

            elif ch in OPERATOR_SYMBOLS:
                self._push_operator(ch, operator_stack, output_queue)

            elif ch == LEFT_PAREN:
                operator_stack.append(ch)
                open_positions.append(i)

            elif ch == RIGHT_PAREN:
                self._close_group(i, operator_stack, output_queue, open_positions)

            else:
                logger.debug(f"Ignoring character {ch!r} at position {i}")

            i += 1

        # 剩余操作符全部出栈
        while operator_stack:
            op = operator_stack.pop()
            if op == LEFT_PAREN:
                position = open_positions.pop()
                if self.strict_parentheses:
                    raise UnbalancedParenthesesError(position)
                logger.warning(f"Dropping unclosed '(' at position {position} in expression: {expression.strip()!r}")
                continue
            output_queue.append(Token.operator(op))

        logger.debug(f"RPN for {expression.strip()!r}: {' '.join(t.name for t in output_queue)}")
        return tuple(output_queue)

    def _parse_number(self, literal, position):
        # 去掉前导零后位数超过上限的数字串直接拒绝，不交给 int() 转换
        digits = literal.lstrip('0') or '0'
        if len(digits) > self._max_digits:
            raise UnableToParseIntError(literal, position)
        value = int(digits)
        if value > self._max_value:
            raise UnableToParseIntError(literal, position)
        return Token.number(value)

    @staticmethod
    def _pop_operator(operator_stack):
        try:
            return operator_stack.pop()
        except IndexError:
            raise OperatorStackError("operator stack is empty") from None

    def _push_operator(self, o1, operator_stack, output_queue):
        # 栈顶是操作符（不是括号）且满足优先级/结合性条件时先出栈
        while (operator_stack
               and operator_stack[-1] in OPERATOR_SYMBOLS
               and should_pop(o1, operator_stack[-1])):
            o2 = self._pop_operator(operator_stack)
            output_queue.append(Token.operator(o2))
        operator_stack.append(o1)

    def _close_group(self, position, operator_stack, output_queue, open_positions):
        # 栈为空时视为遇到隐式的 '('
        while (operator_stack[-1] if operator_stack else LEFT_PAREN) != LEFT_PAREN:
            output_queue.append(Token.operator(self._pop_operator(operator_stack)))

        if operator_stack:
            operator_stack.pop()
            open_positions.pop()
        elif self.strict_parentheses:
            raise UnbalancedParenthesesError(position)
        else:
            logger.warning(f"Unmatched ')' at position {position}, treating as implicitly opened")


def convert(expression, int_dtype="int32", strict_parentheses=False):
    """便捷函数：中缀文本 -> 后缀 Token 元组"""
    return ShuntingYardConverter(int_dtype, strict_parentheses).convert(expression)
