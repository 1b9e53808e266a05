"""配置文件"""
import logging

import numpy as np

logger = logging.getLogger(__name__)

# 计算核心参数
CALCULATOR_CONFIG = {
    "int_dtype": "int32",  # 32位有符号整数，字面量和运算结果都受此范围约束
    "strict_parentheses": False,  # False: 多余的 ')' 视为隐式 '('，未闭合的 '(' 直接丢弃
    "allow_partial": False,  # True: 剩余多个操作数时返回栈顶
}

# 表达式评估器参数
EVALUATOR_CONFIG = {
    "cache_size": 1000,  # LRU缓存条目上限
}

# 交互式命令行
SHELL_CONFIG = {
    "prompt": "Enter your expression: ",
    "separator": "----------------",
}

# 批量评估
BATCH_CONFIG = {
    "expression_column": "expression",
    "result_columns": ["expression", "rpn", "result", "error"],
    "comment_prefix": "#",
}

# 日志
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


# 验证配置
def validate_config():
    """验证配置的合理性"""
    dtype = np.dtype(CALCULATOR_CONFIG["int_dtype"])
    assert np.issubdtype(dtype, np.signedinteger), "int_dtype 必须是有符号整数类型"
    assert EVALUATOR_CONFIG["cache_size"] >= 0, "cache_size 不能为负"
    assert BATCH_CONFIG["expression_column"] in BATCH_CONFIG["result_columns"]
    logger.info("Configuration validated successfully!")
