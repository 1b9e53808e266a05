"""主程序入口 - 交互式计算器 / 单表达式 / 批量文件"""
import argparse
import logging
import sys

from config.config import CALCULATOR_CONFIG, SHELL_CONFIG, LOG_FORMAT, validate_config
from core import CalculatorError
from engine import ExpressionEvaluator
from data.data_loader import load_expressions, evaluate_expressions, summarize_results

logger = logging.getLogger(__name__)


def report(evaluator, expression, out=None):
    """评估一个表达式并打印 RPN、结果或错误；成功返回 True"""
    out = out or sys.stdout
    try:
        outcome = evaluator.evaluate(expression)
    except CalculatorError as e:
        print(e, file=out)
        return False
    print(f"RPN: {outcome.rpn}", file=out)
    print(f"Result: {outcome.value}", file=out)
    return True


def run_shell(evaluator, stdin=None, out=None):
    """交互循环，读到 EOF 或 Ctrl-C 时结束"""
    stdin = stdin or sys.stdin
    out = out or sys.stdout
    try:
        while True:
            print(SHELL_CONFIG['prompt'], file=out)
            line = stdin.readline()
            if not line:
                break
            report(evaluator, line, out)
            print(SHELL_CONFIG['separator'], file=out)
    except KeyboardInterrupt:
        logger.debug("Shell interrupted")

    info = evaluator.cache_info()
    logger.debug(f"Shell finished. Cache hits: {info['hits']}, misses: {info['misses']}")


def run_batch(evaluator, input_path, output_path=None, out=None):
    out = out or sys.stdout
    expressions = load_expressions(input_path)
    results = evaluate_expressions(expressions, evaluator)
    summary = summarize_results(results)
    logger.info(f"Evaluated {summary['total']} expressions: {summary['ok']} ok, {summary['failed']} failed")
    for kind, count in summary['errors'].items():
        logger.info(f"  - {kind}: {count}")

    if output_path:
        logger.info(f"Saving results to {output_path}")
        results.to_csv(output_path, index=False)
    else:
        print(results.to_string(index=False), file=out)
    return summary


def main(args):
    validate_config()

    evaluator = ExpressionEvaluator(
        int_dtype=args.int_dtype,
        strict_parentheses=args.strict_parentheses,
        allow_partial=args.allow_partial
    )

    if args.expression is not None:
        return 0 if report(evaluator, args.expression) else 1

    if args.input_path:
        summary = run_batch(evaluator, args.input_path, args.output_path)
        return 0 if summary['failed'] == 0 else 1

    run_shell(evaluator)
    return 0


def build_parser():
    parser = argparse.ArgumentParser(description="Integer infix calculator (shunting-yard + RPN)")

    parser.add_argument(
        "--expression", "-e",
        type=str,
        default=None,
        help="Evaluate a single expression and exit"
    )
    parser.add_argument(
        "--input_path",
        type=str,
        default=None,
        help="Path to a .csv or text file with one expression per line"
    )
    parser.add_argument(
        "--output_path",
        type=str,
        default=None,
        help="Path to save batch results as CSV (prints a table when omitted)"
    )
    parser.add_argument(
        "--int_dtype",
        type=str,
        default=CALCULATOR_CONFIG['int_dtype'],
        choices=["int8", "int16", "int32", "int64"],
        help="Integer width used for literals and arithmetic (default: int32)"
    )
    parser.add_argument(
        "--strict_parentheses",
        action="store_true",
        help="Report unbalanced parentheses instead of recovering"
    )
    parser.add_argument(
        "--allow_partial",
        action="store_true",
        help="Return the top of the operand stack when operands are left over"
    )
    parser.add_argument(
        "--log_level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)"
    )
    return parser


def cli(argv=None):
    args = build_parser().parse_args(argv)

    # 设置日志
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format=LOG_FORMAT
    )
    return main(args)


if __name__ == "__main__":
    sys.exit(cli())
