"""
Tests for the validate_text command-line script.
"""
import sys
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

# Add scripts directory to path
sys.path.insert(0, str(Path(__file__).parent.parent / "scripts"))

from validate_text import main, validate_texts


class TestValidateTextScript(unittest.TestCase):
    """Test cases for scripts/validate_text.py."""

    def test_validate_texts(self):
        """Test outcomes are collected per input."""
        results = validate_texts(["  What is DNS?  ", "hi"], "default")

        self.assertTrue(results[0]["accepted"])
        self.assertEqual(results[0]["cleaned_text"], "What is DNS?")
        self.assertFalse(results[1]["accepted"])
        self.assertEqual(results[1]["reason"], "Common input with no informational value")

    @patch("validate_text.setup_logging")
    def test_exit_code_reflects_rejections(self, _mock_setup):
        """Test exit code is 0 when all texts pass and 1 otherwise."""
        self.assertEqual(main(["--preset", "lenient", "How do vaccines work?"]), 0)
        self.assertEqual(main(["--preset", "strict", "how are you"]), 1)

    @patch("validate_text.setup_logging")
    def test_reads_file(self, _mock_setup):
        """Test texts can be read from a file, one per line."""
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "questions.txt"
            path.write_text("Why is the sky blue?\nWhat causes tides?\n", encoding="utf-8")
            self.assertEqual(main(["--file", str(path)]), 0)


if __name__ == '__main__':
    unittest.main()
