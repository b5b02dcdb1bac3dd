"""
Unit tests for step configuration models and configuration errors.
"""
import unittest

from pydantic import ValidationError

from askguard.core.error_handling import PipelineConfigurationError, configuration_error_from
from askguard.models.step_config import (
    LengthBounds,
    RepetitionLimits,
    DenylistConfig,
    QualityThresholds,
    TokenBudget,
    PresetConfig,
)


class TestLengthBounds(unittest.TestCase):
    """Test cases for LengthBounds."""

    def test_valid_bounds(self):
        """Test equal bounds are allowed."""
        bounds = LengthBounds(min_length=3, max_length=3)
        self.assertEqual(bounds.min_length, 3)

    def test_min_above_max(self):
        """Test min_length above max_length fails."""
        with self.assertRaises(ValidationError):
            LengthBounds(min_length=10, max_length=9)

    def test_zero_max(self):
        """Test max_length must be positive."""
        with self.assertRaises(ValidationError):
            LengthBounds(min_length=0, max_length=0)

    def test_frozen(self):
        """Test bounds cannot be changed after creation."""
        bounds = LengthBounds(min_length=1, max_length=5)
        with self.assertRaises(ValidationError):
            bounds.max_length = 50

    def test_extra_fields_forbidden(self):
        """Test unknown knobs are refused."""
        with self.assertRaises(ValidationError):
            LengthBounds(min_length=1, max_length=5, max_words=3)


class TestDenylistConfig(unittest.TestCase):
    """Test cases for DenylistConfig."""

    def test_entries_normalized(self):
        """Test entries are trimmed, lower-cased and de-duplicated."""
        config = DenylistConfig(
            useless_phrases=["  Hello ", "HELLO", "", "   "],
            spam_tokens=("BUY",)
        )

        self.assertEqual(config.useless_phrases, frozenset({"hello"}))
        self.assertEqual(config.spam_tokens, frozenset({"buy"}))

    def test_defaults_empty(self):
        """Test both lists default to empty."""
        config = DenylistConfig()
        self.assertEqual(config.useless_phrases, frozenset())
        self.assertEqual(config.spam_tokens, frozenset())

    def test_non_string_entries(self):
        """Test non-string entries fail."""
        with self.assertRaises(ValidationError):
            DenylistConfig(useless_phrases=["ok", 42])


class TestThresholdModels(unittest.TestCase):
    """Test cases for numeric thresholds."""

    def test_ratio_bounds(self):
        """Test ratio limits are inclusive of 0 and 1."""
        self.assertEqual(QualityThresholds(min_letter_ratio=0).min_letter_ratio, 0.0)
        self.assertEqual(QualityThresholds(min_letter_ratio=1).min_letter_ratio, 1.0)
        with self.assertRaises(ValidationError):
            QualityThresholds(min_letter_ratio=1.01)

    def test_positive_integers(self):
        """Test repetition and token limits must be positive."""
        with self.assertRaises(ValidationError):
            RepetitionLimits(max_repeated_chars=0)
        with self.assertRaises(ValidationError):
            TokenBudget(max_tokens=0)

    def test_preset_config(self):
        """Test a preset config bundles one model per step."""
        config = PresetConfig(
            name="tiny",
            length=LengthBounds(min_length=1, max_length=10),
            repetition=RepetitionLimits(max_repeated_chars=3),
            denylist=DenylistConfig(useless_phrases=["x"]),
            quality=QualityThresholds(min_letter_ratio=0.2),
            tokens=TokenBudget(max_tokens=5)
        )
        self.assertEqual(config.tokens.max_tokens, 5)
        self.assertIn("x", config.denylist.useless_phrases)


class TestConfigurationErrorConversion(unittest.TestCase):
    """Test cases for configuration_error_from."""

    def test_message_names_component_and_field(self):
        """Test converted errors name the component and failing field."""
        try:
            LengthBounds(min_length=-1, max_length=5)
        except ValidationError as e:
            error = configuration_error_from(e, "LengthStep")

        self.assertIsInstance(error, PipelineConfigurationError)
        self.assertIn("LengthStep", str(error))
        self.assertIn("min_length", str(error))


if __name__ == '__main__':
    unittest.main()
