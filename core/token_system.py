"""core/token_system.py"""
from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Union

import numpy as np

from core.errors import UnknownOperatorError


class TokenType(Enum):
    NUMBER = "number"  # 操作数
    OPERATOR = "operator"  # 操作符


class Associativity(Enum):
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class Token:
    type: TokenType
    value: Union[int, str]

    @classmethod
    def number(cls, value):
        return cls(TokenType.NUMBER, int(value))

    @classmethod
    def operator(cls, symbol):
        if symbol not in OPERATOR_DEFINITIONS:
            raise UnknownOperatorError(symbol)
        return cls(TokenType.OPERATOR, symbol)

    @property
    def is_number(self):
        return self.type == TokenType.NUMBER

    @property
    def is_operator(self):
        return self.type == TokenType.OPERATOR

    @property
    def name(self):
        return str(self.value)

    def __str__(self):
        return self.name


@dataclass(frozen=True)
class OperatorInfo:
    symbol: str
    precedence: int
    associativity: Associativity
    method: str  # Operators 中对应的静态方法名


# 操作符定义表：优先级越高结合越紧
OPERATOR_DEFINITIONS = {
    '^': OperatorInfo('^', 4, Associativity.RIGHT, 'pow'),
    '*': OperatorInfo('*', 3, Associativity.LEFT, 'mul'),
    '/': OperatorInfo('/', 3, Associativity.LEFT, 'div'),
    '+': OperatorInfo('+', 2, Associativity.LEFT, 'add'),
    '-': OperatorInfo('-', 2, Associativity.LEFT, 'sub'),
}

OPERATOR_SYMBOLS = frozenset(OPERATOR_DEFINITIONS)
LEFT_PAREN = '('
RIGHT_PAREN = ')'


def get_precedence(symbol: str) -> Tuple[int, Associativity]:
    """返回 (优先级, 结合性)；所有优先级比较都必须经过这里"""
    info = OPERATOR_DEFINITIONS.get(symbol)
    if info is None:
        raise UnknownOperatorError(symbol)
    return info.precedence, info.associativity


def should_pop(incoming: str, stack_top: str) -> bool:
    """
    incoming 入栈前，栈顶操作符 stack_top 是否应先出栈
    左结合：prec(incoming) <= prec(top)
    右结合：prec(incoming) <  prec(top)
    """
    prec_in, assoc_in = get_precedence(incoming)
    prec_top, _ = get_precedence(stack_top)
    if assoc_in == Associativity.LEFT:
        return prec_in <= prec_top
    return prec_in < prec_top


def integer_bounds(int_dtype="int32") -> Tuple[int, int]:
    """整数类型的取值范围 (min, max)"""
    info = np.iinfo(np.dtype(int_dtype))
    return int(info.min), int(info.max)


def format_tokens(token_sequence) -> str:
    """后缀序列 -> 空格分隔字符串"""
    return ' '.join(t.name for t in token_sequence)
