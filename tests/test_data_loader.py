import os
import tempfile
import unittest

import pandas as pd

from data.data_loader import load_expressions, evaluate_expressions, summarize_results
from engine import ExpressionEvaluator


class Test_LoadExpressions(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.tmpdir = self._tmp.name

    def tearDown(self):
        self._tmp.cleanup()

    def _write(self, name, text):
        path = os.path.join(self.tmpdir, name)
        with open(path, 'w', encoding='utf-8') as f:
            f.write(text)
        return path

    def test_text_file(self):
        path = self._write("exprs.txt", "# sample\n\n10 * 2 + 100\n  2^3^2  \n")
        expressions = load_expressions(path)
        self.assertEqual(list(expressions), ["10 * 2 + 100", "2^3^2"])
        self.assertEqual(expressions.name, "expression")

    def test_csv_file(self):
        path = self._write("exprs.csv", "id,expression\n1,7 / 2\n2,20 / 4 / 5\n")
        self.assertEqual(list(load_expressions(path)), ["7 / 2", "20 / 4 / 5"])

    def test_csv_custom_column(self):
        path = self._write("exprs.csv", "formula\n1 + 1\n")
        self.assertEqual(list(load_expressions(path, column="formula")), ["1 + 1"])

    def test_csv_missing_column(self):
        path = self._write("exprs.csv", "formula\n1 + 1\n")
        self.assertRaises(ValueError, lambda: load_expressions(path))


class Test_EvaluateExpressions(unittest.TestCase):
    def test_batch(self):
        expressions = ["10 * 2 + 100", "2^3^2", "99999999999", "1 / 0"]
        with self.assertLogs('data.data_loader', level='ERROR'):
            results = evaluate_expressions(expressions, ExpressionEvaluator())

        self.assertEqual(list(results.columns), ["expression", "rpn", "result", "error"])
        self.assertEqual(str(results['result'].dtype), "Int64")
        self.assertEqual(list(results['rpn'][:2]), ["10 2 * 100 +", "2 3 2 ^ ^"])
        self.assertEqual(int(results['result'][0]), 120)
        self.assertEqual(int(results['result'][1]), 512)
        self.assertTrue(pd.isna(results['result'][2]))
        self.assertEqual(list(results['error']), ["", "", "UnableToParseInt", "ArithmeticError"])

        summary = summarize_results(results)
        self.assertEqual(summary['total'], 4)
        self.assertEqual(summary['ok'], 2)
        self.assertEqual(summary['failed'], 2)
        self.assertEqual(summary['errors'], {"UnableToParseInt": 1, "ArithmeticError": 1})

    def test_long_literal_does_not_abort_batch(self):
        with self.assertLogs('data.data_loader', level='ERROR'):
            results = evaluate_expressions(["1 + 1", "9" * 5000, "2^3^2"], ExpressionEvaluator())
        self.assertEqual(list(results['error']), ["", "UnableToParseInt", ""])
        self.assertEqual(int(results['result'][2]), 512)
        self.assertTrue(pd.isna(results['result'][1]))

    def test_empty_batch(self):
        results = evaluate_expressions([], ExpressionEvaluator())
        self.assertEqual(len(results), 0)
        self.assertEqual(summarize_results(results), {'total': 0, 'ok': 0, 'failed': 0, 'errors': {}})


if __name__ == '__main__':
    unittest.main()
