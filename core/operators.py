"""core/operators.py"""
import logging

from core.errors import ArithmeticFault
from core.token_system import integer_bounds

logger = logging.getLogger(__name__)


class Operators:
    """所有二元操作符的静态方法集合（带范围检查的整数运算）"""

    @staticmethod
    def ensure_in_range(value, int_dtype="int32", op_name=None):
        """结果超出整数类型范围时抛出 ArithmeticFault"""
        low, high = integer_bounds(int_dtype)
        if value < low or value > high:
            raise ArithmeticFault(
                f"{op_name or 'result'} overflows {int_dtype}: {value}"
            )
        return value

    @staticmethod
    def add(operand1, operand2, int_dtype="int32"):
        """加法操作符"""
        return Operators.ensure_in_range(operand1 + operand2, int_dtype, 'add')

    @staticmethod
    def sub(operand1, operand2, int_dtype="int32"):
        """减法操作符"""
        return Operators.ensure_in_range(operand1 - operand2, int_dtype, 'sub')

    @staticmethod
    def mul(operand1, operand2, int_dtype="int32"):
        """乘法操作符"""
        return Operators.ensure_in_range(operand1 * operand2, int_dtype, 'mul')

    @staticmethod
    def div(operand1, operand2, int_dtype="int32"):
        """整数除法，向零截断（-7 / 2 == -3）"""
        if operand2 == 0:
            raise ArithmeticFault(f"division by zero: {operand1} / 0")
        quotient = abs(operand1) // abs(operand2)
        if (operand1 < 0) != (operand2 < 0):
            quotient = -quotient
        return Operators.ensure_in_range(quotient, int_dtype, 'div')

    @staticmethod
    def pow(operand1, operand2, int_dtype="int32"):
        """幂运算，指数必须是非负整数"""
        if operand2 < 0:
            raise ArithmeticFault(f"negative exponent: {operand1} ^ {operand2}")
        low, high = integer_bounds(int_dtype)
        # 逐步相乘，避免巨大指数先算出超大整数
        result = 1
        for _ in range(operand2):
            result *= operand1
            if result < low or result > high:
                raise ArithmeticFault(f"pow overflows {int_dtype}: {operand1} ^ {operand2}")
            if result in (0, 1) and operand1 in (0, 1):
                break
            if operand1 == -1:
                result = 1 if operand2 % 2 == 0 else -1
                break
        return result
