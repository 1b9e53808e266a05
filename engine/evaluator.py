import logging
from collections import OrderedDict
from dataclasses import dataclass
from typing import Tuple

from core import ShuntingYardConverter, RPNEvaluator, Token, format_tokens
from config.config import CALCULATOR_CONFIG, EVALUATOR_CONFIG

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EvaluationResult:
    expression: str
    tokens: Tuple[Token, ...]
    value: int

    @property
    def rpn(self):
        return format_tokens(self.tokens)


class ExpressionEvaluator:

    def __init__(self, cache_size=None, int_dtype=None, strict_parentheses=None,
                 allow_partial=None):
        self.cache_size = EVALUATOR_CONFIG['cache_size'] if cache_size is None else cache_size
        self.int_dtype = int_dtype or CALCULATOR_CONFIG['int_dtype']
        self.strict_parentheses = (CALCULATOR_CONFIG['strict_parentheses']
                                   if strict_parentheses is None else strict_parentheses)
        self.allow_partial = (CALCULATOR_CONFIG['allow_partial']
                              if allow_partial is None else allow_partial)

        self.converter = ShuntingYardConverter(self.int_dtype, self.strict_parentheses)
        self.rpn_evaluator = RPNEvaluator
        # 使用有限大小的OrderedDict实现LRU缓存
        self._result_cache = OrderedDict()
        self._cache_hits = 0
        self._cache_misses = 0

    def _manage_cache(self):
        """管理缓存大小"""
        while len(self._result_cache) > self.cache_size:
            # 删除最久未使用的条目
            self._result_cache.popitem(last=False)

    def clear_cache(self):
        """清空缓存（供外部调用）"""
        self._result_cache.clear()
        logger.info(f"Cache cleared. Hits: {self._cache_hits}, Misses: {self._cache_misses}")
        self._cache_hits = 0
        self._cache_misses = 0

    def cache_info(self):
        return {
            'hits': self._cache_hits,
            'misses': self._cache_misses,
            'size': len(self._result_cache),
            'max_size': self.cache_size,
        }

    def evaluate(self, expression: str) -> EvaluationResult:
        """
        Args:
            expression: 中缀表达式文本
        Returns:
            EvaluationResult（后缀Token序列 + 整数结果）
        Raises:
            CalculatorError 的各个子类；失败结果不缓存
        """
        if expression in self._result_cache:
            # 移到末尾（最近使用）
            self._result_cache.move_to_end(expression)
            self._cache_hits += 1
            logger.debug(f"Cache hit for expression: {expression[:50]}")
            return self._result_cache[expression]

        self._cache_misses += 1

        tokens = self.converter.convert(expression)
        value = self.rpn_evaluator.evaluate(tokens, self.int_dtype, allow_partial=self.allow_partial)
        result = EvaluationResult(expression, tokens, value)

        if self.cache_size > 0:
            self._result_cache[expression] = result
            self._manage_cache()
        return result

    def __call__(self, expression: str) -> int:
        return self.evaluate(expression).value
