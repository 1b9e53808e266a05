"""数据加载与批量评估模块"""
import logging

import pandas as pd

from config.config import BATCH_CONFIG
from core import CalculatorError

logger = logging.getLogger(__name__)


def load_expressions(file_path, column=None):
    """
    加载表达式文件

    Parameters:
    - file_path: .csv 文件（按列读取）或纯文本文件（每行一个表达式）
    - column: CSV 中的表达式列名, 默认为 BATCH_CONFIG['expression_column']

    Returns:
    - expressions: 表达式字符串 Series
    """
    column = column or BATCH_CONFIG['expression_column']
    logger.info(f"Loading expressions from {file_path}")

    if str(file_path).endswith('.csv'):
        frame = pd.read_csv(file_path, dtype=str, keep_default_na=False)

        # 确保表达式列存在
        if column not in frame.columns:
            raise ValueError(f"Expression column '{column}' not found in {file_path}.")

        expressions = frame[column]
    else:
        # 纯文本：跳过空行和注释行
        prefix = BATCH_CONFIG['comment_prefix']
        with open(file_path, 'r', encoding='utf-8') as f:
            lines = [line.strip() for line in f]
        expressions = pd.Series(
            [line for line in lines if line and not line.startswith(prefix)],
            dtype=object
        )

    expressions = expressions.reset_index(drop=True).rename(column)
    logger.info(f"Loaded {len(expressions)} expressions")
    return expressions


def evaluate_expressions(expressions, evaluator):
    """
    逐个评估表达式，单个失败只记录错误，不中断整个批次

    Parameters:
    - expressions: 表达式序列（list 或 Series）
    - evaluator: ExpressionEvaluator 实例

    Returns:
    - results: DataFrame，列为 expression / rpn / result / error
    """
    columns = {name: [] for name in BATCH_CONFIG['result_columns']}
    for expression in expressions:
        try:
            outcome = evaluator.evaluate(expression)
            rpn, value, error = outcome.rpn, outcome.value, ''
        except CalculatorError as e:
            logger.error(f"Error evaluating expression '{expression[:50]}': {e}")
            rpn, value, error = '', None, e.kind
        columns['expression'].append(expression)
        columns['rpn'].append(rpn)
        columns['result'].append(value)
        columns['error'].append(error)

    # 可空整数类型，失败行为 <NA>
    columns['result'] = pd.array(columns['result'], dtype='Int64')
    return pd.DataFrame(columns)


def summarize_results(results):
    """统计批量评估结果"""
    failed_mask = results['error'] != ''
    return {
        'total': int(len(results)),
        'ok': int((~failed_mask).sum()),
        'failed': int(failed_mask.sum()),
        'errors': {kind: int(count) for kind, count in results.loc[failed_mask, 'error'].value_counts().items()},
    }
