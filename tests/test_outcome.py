"""
Unit tests for the validation outcome model.
"""
import dataclasses
import unittest

from askguard.core.error_handling import InputRejectedError
from askguard.models.outcome import ValidationOutcome


class TestValidationOutcome(unittest.TestCase):
    """Test cases for ValidationOutcome."""

    def test_accept(self):
        """Test accepted outcome carries cleaned text and no reason."""
        outcome = ValidationOutcome.accept("clean text")

        self.assertTrue(outcome.accepted)
        self.assertTrue(outcome.is_valid)
        self.assertEqual(outcome.cleaned_text, "clean text")
        self.assertIsNone(outcome.reason)

    def test_reject(self):
        """Test rejected outcome carries reason and no cleaned text."""
        outcome = ValidationOutcome.reject("Input is null")

        self.assertFalse(outcome.accepted)
        self.assertFalse(outcome.is_valid)
        self.assertEqual(outcome.reason, "Input is null")
        self.assertIsNone(outcome.cleaned_text)

    def test_outcome_is_immutable(self):
        """Test outcomes cannot be mutated after construction."""
        outcome = ValidationOutcome.accept("text")
        with self.assertRaises(dataclasses.FrozenInstanceError):
            outcome.accepted = False

    def test_invariant_enforced(self):
        """Test inconsistent field combinations are refused."""
        with self.assertRaises(ValueError):
            ValidationOutcome(accepted=True, reason="nope")
        with self.assertRaises(ValueError):
            ValidationOutcome(accepted=False, cleaned_text="text")
        with self.assertRaises(ValueError):
            ValidationOutcome(accepted=False)
        with self.assertRaises(ValueError):
            ValidationOutcome(accepted=True)
        with self.assertRaises(ValueError):
            ValidationOutcome(accepted=False, reason="nope", unchanged=True)

    def test_accept_without_text_is_unchanged(self):
        """Test accept() without text marks the outcome as a pass-through."""
        outcome = ValidationOutcome.accept()

        self.assertTrue(outcome.accepted)
        self.assertTrue(outcome.unchanged)
        self.assertIsNone(outcome.cleaned_text)
        self.assertFalse(ValidationOutcome.accept("text").unchanged)

    def test_equal_outcomes_compare_equal(self):
        """Test outcomes are plain values."""
        self.assertEqual(ValidationOutcome.reject("x"), ValidationOutcome.reject("x"))
        self.assertNotEqual(ValidationOutcome.accept("x"), ValidationOutcome.accept("y"))

    def test_raise_if_rejected_returns_text(self):
        """Test raise_if_rejected returns cleaned text for accepted outcomes."""
        self.assertEqual(ValidationOutcome.accept("fine").raise_if_rejected(), "fine")

    def test_raise_if_rejected_raises(self):
        """Test raise_if_rejected raises with the rejection reason."""
        with self.assertRaises(InputRejectedError) as ctx:
            ValidationOutcome.reject("Contains spam words").raise_if_rejected()

        self.assertEqual(ctx.exception.reason, "Contains spam words")
        self.assertEqual(str(ctx.exception), "Contains spam words")


if __name__ == '__main__':
    unittest.main()
