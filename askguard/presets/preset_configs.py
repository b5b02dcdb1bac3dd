"""
Threshold and word-list configuration for each pipeline preset.

Word lists are immutable module data. get_preset_config() builds a fresh
frozen PresetConfig snapshot on every call, so no two pipelines share a
mutable list.
"""
from askguard.models.step_config import (
    PresetConfig,
    LengthBounds,
    RepetitionLimits,
    DenylistConfig,
    QualityThresholds,
    TokenBudget,
)
from .preset_types import PipelinePreset

# Common inputs that carry no question (English and Spanish)
COMMON_USELESS_PHRASES = (
    "hello", "hi", "hey", "ok", "okay", "yes", "no", "nothing", "hola", "si",
    "test", "testing", "?", "??", "???", "...", "hahaha", "haha", "lol",
    "lmao", "xd", "asd", "asdf", "qwerty", "123", "abc", "nada", "prueba",
)

# Conversational fillers rejected only by the strict preset
CONVERSATIONAL_FILLERS = (
    "how are you", "what's up", "como estas", "que tal",
)

# Keyboard-mashing tokens
COMMON_SPAM_TOKENS = (
    "aaaaa", "bbbbb", "ccccc", "ddddd", "eeeee", "fffff", "ggggg",
    "hhhhh", "iiiii", "jjjjj", "kkkkk", "lllll", "mmmmm", "nnnnn",
)

LENIENT_USELESS_PHRASES = (
    "test", "testing", "asd", "asdf", "qwerty", "123",
)

LENIENT_SPAM_TOKENS = COMMON_SPAM_TOKENS[:5]


def _strict_config() -> PresetConfig:
    return PresetConfig(
        name=PipelinePreset.STRICT.value,
        length=LengthBounds(min_length=5, max_length=2000),
        repetition=RepetitionLimits(max_repeated_chars=5),
        denylist=DenylistConfig(
            useless_phrases=COMMON_USELESS_PHRASES + CONVERSATIONAL_FILLERS,
            spam_tokens=COMMON_SPAM_TOKENS
        ),
        quality=QualityThresholds(min_letter_ratio=0.5),
        tokens=TokenBudget(max_tokens=500)
    )


def _default_config() -> PresetConfig:
    return PresetConfig(
        name=PipelinePreset.DEFAULT.value,
        length=LengthBounds(min_length=2, max_length=4000),
        repetition=RepetitionLimits(max_repeated_chars=10),
        denylist=DenylistConfig(
            useless_phrases=COMMON_USELESS_PHRASES,
            spam_tokens=COMMON_SPAM_TOKENS
        ),
        quality=QualityThresholds(min_letter_ratio=0.3),
        tokens=TokenBudget(max_tokens=1000)
    )


def _lenient_config() -> PresetConfig:
    return PresetConfig(
        name=PipelinePreset.LENIENT.value,
        length=LengthBounds(min_length=1, max_length=8000),
        repetition=RepetitionLimits(max_repeated_chars=20),
        denylist=DenylistConfig(
            useless_phrases=LENIENT_USELESS_PHRASES,
            spam_tokens=LENIENT_SPAM_TOKENS
        ),
        quality=QualityThresholds(min_letter_ratio=0.1),
        tokens=TokenBudget(max_tokens=2000)
    )


_CONFIG_BUILDERS = {
    PipelinePreset.STRICT: _strict_config,
    PipelinePreset.DEFAULT: _default_config,
    PipelinePreset.LENIENT: _lenient_config,
}


def get_preset_config(preset: PipelinePreset) -> PresetConfig:
    """
    Build the configuration snapshot for a preset.

    Args:
        preset: Preset to configure

    Returns:
        Frozen PresetConfig for the preset
    """
    return _CONFIG_BUILDERS[preset]()
