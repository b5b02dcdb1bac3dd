"""
Shared constants for the validation pipeline.

This module consolidates the rejection reasons returned to callers so that
steps, tests and the HTTP layer that consumes them agree on the wording.
"""

# Rejection reasons
REASON_NULL_INPUT = "Input is null"
REASON_EMPTY_AFTER_CLEANING = "Input is empty after cleaning"
REASON_TOO_SHORT_TEMPLATE = "Input is too short (minimum {min_length} characters)"
REASON_TOO_LONG_TEMPLATE = "Input is too long (maximum {max_length} characters)"
REASON_ONLY_SPACES = "Contains only spaces"
REASON_ONLY_PUNCTUATION = "Contains only punctuation"
REASON_EXCESSIVE_REPETITION = "Contains excessive character repetition"
REASON_SPAM_PATTERN = "Contains spam patterns"
REASON_USELESS_INPUT = "Common input with no informational value"
REASON_SPAM_WORDS = "Contains spam words"
REASON_NO_VALID_LETTERS = "Does not contain valid letters"
REASON_LOW_LETTER_RATIO = "Does not contain sufficient meaningful content"
REASON_TOO_MANY_TOKENS_TEMPLATE = "Input would consume too many tokens: {estimated_tokens}"

# Token estimation
CHARS_PER_TOKEN = 4  # Rough average for English text

# Pipeline naming
CUSTOM_PIPELINE_NAME = "custom"
