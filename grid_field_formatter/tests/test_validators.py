from decimal import Decimal

from django.core.exceptions import ValidationError
from django.test import SimpleTestCase

from grid_field_formatter.validators import coerce_columns, validate_columns


class ValidateColumnsTests(SimpleTestCase):
    def test_accepts_values_between_zero_and_thirteen(self):
        for value in ("1", "4", "12", 6, " 3 ", "1.5", 12.9, Decimal("0.5")):
            with self.subTest(value=value):
                validate_columns(value)

    def test_rejects_out_of_range_and_non_numeric(self):
        for value in ("0", 0, "-1", -4, "13", 13, "100", "abc", "", None, "nan", "inf", True, "1_2", "1,5", "0x5"):
            with self.subTest(value=value):
                with self.assertRaises(ValidationError) as ctx:
                    validate_columns(value)
                self.assertEqual(ctx.exception.code, "invalid_columns")

    def test_message_names_the_field(self):
        with self.assertRaises(ValidationError) as ctx:
            validate_columns("20", name="Columns")
        self.assertIn("Columns must be a number between 1 and 12.", ctx.exception.messages)


class CoerceColumnsTests(SimpleTestCase):
    def test_whole_numbers_are_kept(self):
        self.assertEqual(coerce_columns("4"), 4)
        self.assertEqual(coerce_columns(12), 12)

    def test_fractions_are_floored_to_at_least_one(self):
        self.assertEqual(coerce_columns("1.5"), 1)
        self.assertEqual(coerce_columns("0.5"), 1)
        self.assertEqual(coerce_columns("12.9"), 12)

    def test_non_numeric_falls_back_to_one(self):
        self.assertEqual(coerce_columns("abc"), 1)

    def test_digit_separators_are_not_numeric(self):
        with self.assertRaises(ValidationError):
            validate_columns("1_2")
        self.assertEqual(coerce_columns("1_2"), 1)
