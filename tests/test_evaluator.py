import unittest

from core import UnableToParseIntError, UnbalancedParenthesesError, ArithmeticFault, OperandStackError
from engine import ExpressionEvaluator, EvaluationResult


class Test_ExpressionEvaluator(unittest.TestCase):
    def setUp(self):
        self.evaluator = ExpressionEvaluator()

    def test_result(self):
        outcome = self.evaluator.evaluate("10 * 2 + 100")
        self.assertIsInstance(outcome, EvaluationResult)
        self.assertEqual(outcome.expression, "10 * 2 + 100")
        self.assertEqual(outcome.rpn, "10 2 * 100 +")
        self.assertEqual(outcome.value, 120)

    def test_callable(self):
        self.assertEqual(self.evaluator("2^3^2"), 512)
        self.assertEqual(self.evaluator("20 / 4 / 5"), 1)
        self.assertEqual(self.evaluator("7 / 2"), 3)

    def test_errors_propagate(self):
        self.assertRaises(UnableToParseIntError, lambda: self.evaluator.evaluate("99999999999"))
        self.assertRaises(ArithmeticFault, lambda: self.evaluator.evaluate("1 / 0"))
        self.assertRaises(OperandStackError, lambda: self.evaluator.evaluate(""))

    def test_defaults_from_config(self):
        self.assertEqual(self.evaluator.int_dtype, "int32")
        self.assertFalse(self.evaluator.strict_parentheses)
        self.assertFalse(self.evaluator.allow_partial)
        self.assertEqual(self.evaluator.cache_size, 1000)

    def test_options(self):
        strict = ExpressionEvaluator(strict_parentheses=True)
        self.assertRaises(UnbalancedParenthesesError, lambda: strict.evaluate("3 + 4)"))
        self.assertEqual(self.evaluator("3 + 4)"), 7)

        partial = ExpressionEvaluator(allow_partial=True)
        self.assertEqual(partial("3 4"), 4)

        wide = ExpressionEvaluator(int_dtype="int64")
        self.assertEqual(wide("2 ^ 40"), 1099511627776)


class Test_Cache(unittest.TestCase):
    def test_hit(self):
        evaluator = ExpressionEvaluator()
        first = evaluator.evaluate("1 + 2")
        second = evaluator.evaluate("1 + 2")
        self.assertIs(first, second)
        info = evaluator.cache_info()
        self.assertEqual((info['hits'], info['misses'], info['size']), (1, 1, 1))

    def test_eviction(self):
        evaluator = ExpressionEvaluator(cache_size=2)
        evaluator.evaluate("1")
        evaluator.evaluate("2")
        evaluator.evaluate("1")  # "2" 变为最久未使用
        evaluator.evaluate("3")
        self.assertEqual(list(evaluator._result_cache), ["1", "3"])

    def test_disabled(self):
        evaluator = ExpressionEvaluator(cache_size=0)
        evaluator.evaluate("1 + 2")
        evaluator.evaluate("1 + 2")
        self.assertEqual(evaluator.cache_info()['size'], 0)
        self.assertEqual(evaluator.cache_info()['misses'], 2)

    def test_failures_not_cached(self):
        evaluator = ExpressionEvaluator()
        for _ in range(2):
            self.assertRaises(ArithmeticFault, lambda: evaluator.evaluate("1 / 0"))
        self.assertEqual(evaluator.cache_info()['misses'], 2)
        self.assertEqual(evaluator.cache_info()['size'], 0)

    def test_clear(self):
        evaluator = ExpressionEvaluator()
        evaluator.evaluate("1 + 2")
        evaluator.evaluate("1 + 2")
        with self.assertLogs('engine.evaluator', level='INFO') as cm:
            evaluator.clear_cache()
        self.assertIn("Hits: 1, Misses: 1", cm.output[0])
        self.assertEqual(evaluator.cache_info(), {'hits': 0, 'misses': 0, 'size': 0, 'max_size': 1000})


if __name__ == '__main__':
    unittest.main()
