"""
Run text through a validation preset from the command line.

Usage:
    python scripts/validate_text.py "What is the capital of France?"
    python scripts/validate_text.py --preset strict --file questions.txt
"""
import argparse
import logging
import sys
from pathlib import Path
from typing import Iterable, List

from askguard.core.logging import setup_logging
from askguard.presets import PipelinePreset
from askguard.services.pipeline_factory import get_pipeline

logger = logging.getLogger(__name__)


def validate_texts(texts: Iterable[str], preset: str) -> List[dict]:
    """
    Validate each text and collect the outcomes.

    Args:
        texts: Texts to validate
        preset: Preset name

    Returns:
        One result dict per text
    """
    pipeline = get_pipeline(preset)
    results = []
    for text in texts:
        outcome = pipeline.validate(text)
        results.append({
            "input": text,
            "accepted": outcome.accepted,
            "reason": outcome.reason,
            "cleaned_text": outcome.cleaned_text,
        })
    return results


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Validate text against a pipeline preset")
    parser.add_argument("texts", nargs="*", help="Texts to validate")
    parser.add_argument(
        "--preset",
        default=None,
        choices=[p.value for p in PipelinePreset],
        help="Preset to use (default: VALIDATION_PRESET setting)"
    )
    parser.add_argument("--file", type=Path, help="File with one text per line")
    args = parser.parse_args(argv)

    setup_logging()

    texts = list(args.texts)
    if args.file:
        texts.extend(args.file.read_text(encoding="utf-8").splitlines())

    if not texts:
        parser.error("provide texts as arguments or with --file")

    results = validate_texts(texts, args.preset)
    rejected = 0
    for result in results:
        if result["accepted"]:
            print(f"✓ {result['cleaned_text']!r}")
        else:
            rejected += 1
            print(f"✗ {result['input']!r}: {result['reason']}")

    logger.info(f"Validated {len(results)} texts, {rejected} rejected")
    return 1 if rejected else 0


if __name__ == "__main__":
    sys.exit(main())
