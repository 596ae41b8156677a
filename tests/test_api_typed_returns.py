"""Tests for the public API returning typed objects."""

import json
import unittest

from polyeq_pkg.api import recognize, recognize_tokens, require_equation, tokenize_line
from polyeq_pkg.config import MAX_INPUT_LENGTH, MAX_NUMBER_DIGITS
from polyeq_pkg.types import (
    ParseError,
    RecognitionResult,
    ValidationError,
    VariableCount,
)


class TestRecognize(unittest.TestCase):
    """Test recognize() return values."""

    def test_single_variable_equation(self):
        result = recognize("x^3 + x^2 = 5")
        self.assertIsInstance(result, RecognitionResult)
        self.assertTrue(result.ok)
        self.assertTrue(result.is_equation)
        self.assertEqual(result.degree, 3)
        self.assertEqual(result.variable_count, VariableCount.ONE)
        self.assertEqual(result.variables, ["x"])
        self.assertTrue(result.is_single_variable)

    def test_linear_equation(self):
        result = recognize("2x + 1 = 7")
        self.assertEqual(result.degree, 1)

    def test_numeric_equation(self):
        result = recognize("3 + 4 = 7")
        self.assertTrue(result.is_equation)
        self.assertEqual(result.variable_count, VariableCount.NONE)
        self.assertFalse(result.is_single_variable)

    def test_two_variables(self):
        result = recognize("x + y = 3")
        self.assertTrue(result.is_equation)
        self.assertEqual(result.variable_count, VariableCount.MANY)
        self.assertEqual(result.variables, ["x", "y"])
        self.assertFalse(result.is_single_variable)

    def test_not_an_equation_has_no_measurements(self):
        for line in ["x^-2 = 0", "x + = 3", "x = 1 )", "", "x^4 + 1"]:
            with self.subTest(line=line):
                result = recognize(line)
                self.assertTrue(result.ok)
                self.assertFalse(result.is_equation)
                self.assertIsNone(result.degree)
                self.assertIsNone(result.variable_count)
                self.assertIsNone(result.variables)

    def test_sequential_calls_are_independent(self):
        self.assertEqual(recognize("x^5=0").degree, 5)
        self.assertEqual(recognize("x=0").degree, 1)

    def test_validation_failure(self):
        result = recognize("x" * (MAX_INPUT_LENGTH + 1))
        self.assertFalse(result.ok)
        self.assertIn("too long", result.error.lower())

    def test_oversized_numbers_are_reported_not_raised(self):
        for line in ["x^" + "9" * 5000 + " = 0", "9" * 5000 + "x = 0"]:
            with self.subTest(line=line[:12]):
                result = recognize(line)
                self.assertFalse(result.ok)
                self.assertFalse(result.is_equation)
                self.assertIsNone(result.degree)
                self.assertIn("number too long", result.error.lower())

    def test_large_exponent_within_digit_limit(self):
        result = recognize("x^" + "9" * MAX_NUMBER_DIGITS + " = 0")
        self.assertTrue(result.is_equation)
        self.assertEqual(result.degree, int("9" * MAX_NUMBER_DIGITS))

    def test_recognize_tokens(self):
        result = recognize_tokens(tokenize_line("y^2 = 4"))
        self.assertEqual(result.degree, 2)
        self.assertEqual(result.variables, ["y"])


class TestRequireEquation(unittest.TestCase):
    """Test the raising variant."""

    def test_returns_result(self):
        self.assertEqual(require_equation("x^2 = 1").degree, 2)

    def test_not_an_equation(self):
        with self.assertRaises(ParseError) as ctx:
            require_equation("x +")
        self.assertEqual(ctx.exception.code, "NOT_AN_EQUATION")

    def test_number_too_long(self):
        with self.assertRaises(ValidationError) as ctx:
            require_equation("x^" + "9" * 5000 + " = 0")
        self.assertEqual(ctx.exception.code, "NUMBER_TOO_LONG")

    def test_too_long(self):
        with self.assertRaises(ValidationError) as ctx:
            require_equation("1" * (MAX_INPUT_LENGTH + 1))
        self.assertEqual(ctx.exception.code, "TOO_LONG")


class TestSerialization(unittest.TestCase):
    """Test to_dict and repr."""

    def test_to_dict_equation(self):
        data = recognize("x^2 = 1").to_dict()
        self.assertEqual(
            data,
            {
                "ok": True,
                "equation": True,
                "degree": 2,
                "variable_count": "one",
                "variables": ["x"],
                "tokens": ["x", "^", "2", "=", "1"],
            },
        )
        json.dumps(data)

    def test_to_dict_not_equation(self):
        data = recognize("x +").to_dict()
        self.assertEqual(data, {"ok": True, "equation": False, "tokens": ["x", "+"]})

    def test_to_dict_error(self):
        data = RecognitionResult(ok=False, error="boom").to_dict()
        self.assertEqual(data, {"ok": False, "equation": False, "error": "boom"})

    def test_repr(self):
        self.assertIn("degree=2", repr(recognize("x^2 = 1")))
        self.assertIn("variable_count=ONE", repr(recognize("x^2 = 1")))
        self.assertEqual(
            repr(RecognitionResult(ok=False, error="boom")),
            "RecognitionResult(ok=False, error='boom')",
        )


if __name__ == "__main__":
    unittest.main()
