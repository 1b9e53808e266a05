"""评估器模块 - 表达式求值门面与结果缓存"""
from .evaluator import ExpressionEvaluator, EvaluationResult

__all__ = ['ExpressionEvaluator', 'EvaluationResult']
