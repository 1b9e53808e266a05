"""数据模块 - 表达式文件加载与批量评估"""
from .data_loader import load_expressions, evaluate_expressions, summarize_results

__all__ = ['load_expressions', 'evaluate_expressions', 'summarize_results']
