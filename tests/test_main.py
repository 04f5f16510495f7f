import io
import json
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path
from unittest.mock import patch

import main
from queens.engine.validator import ValidationResult


class CliTests(unittest.TestCase):
    def test_writes_json_output(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            output = Path(tmpdir) / "board.json"
            code = main.main(["--dimension", "5", "--seed", "3", "--output", str(output), "--log-level", "WARNING"])
            self.assertEqual(code, 0)
            payload = json.loads(output.read_text(encoding="utf-8"))
            self.assertEqual(payload["dimension"], 5)
            self.assertEqual(len(payload["candidates"]), 5)
            self.assertEqual(len(payload["regions"]), 5)
            self.assertEqual(payload["validation"], [])
            self.assertIsNone(payload["solution_count"])

    def test_check_unique_and_save(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            stream = io.StringIO()
            with redirect_stdout(stream):
                code = main.main([
                    "--dimension", "4", "--seed", "1", "--check-unique",
                    "--save", "--store-dir", tmpdir, "--log-level", "WARNING",
                ])
            self.assertEqual(code, 0)
            payload = json.loads(stream.getvalue())
            self.assertIn(payload["solution_count"], (1, 2))
            self.assertEqual(len(list(Path(tmpdir).glob("*.json"))), 1)

    def test_palette_file_extends_colours(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            palette = Path(tmpdir) / "palette.txt"
            palette.write_text("# warm\nred\norange\n\nyellow\ngold\n", encoding="utf-8")
            self.assertEqual(main.parse_palette_file(palette), ["red", "orange", "yellow", "gold"])

    def test_failure_returns_non_zero_and_saves(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            code = main.main([
                "--dimension", "3", "--max-attempts", "5",
                "--save", "--store-dir", tmpdir, "--log-level", "CRITICAL",
            ])
            self.assertEqual(code, 1)
            docs = list(Path(tmpdir).glob("*.json"))
            self.assertEqual(len(docs), 1)
            self.assertEqual(json.loads(docs[0].read_text(encoding="utf-8"))["status"], "failed")

    def test_pretty_output_reports_validation_messages(self) -> None:
        failing = ValidationResult(ok=False, messages=["Region 'hsl(18, 100%, 50%)' is not connected"])
        stdout, stderr = io.StringIO(), io.StringIO()
        with patch("main.BoardValidator") as fake_validator:
            fake_validator.return_value.validate.return_value = failing
            with redirect_stdout(stdout), redirect_stderr(stderr):
                code = main.main(["--dimension", "4", "--seed", "1", "--pretty", "--log-level", "CRITICAL"])
        self.assertEqual(code, 1)
        self.assertTrue(stdout.getvalue())
        self.assertIn("Validation: Region 'hsl(18, 100%, 50%)' is not connected", stderr.getvalue())

    def test_pretty_output_is_quiet_on_valid_board(self) -> None:
        stderr = io.StringIO()
        with redirect_stdout(io.StringIO()), redirect_stderr(stderr):
            code = main.main(["--dimension", "5", "--seed", "3", "--pretty", "--log-level", "CRITICAL"])
        self.assertEqual(code, 0)
        self.assertNotIn("Validation:", stderr.getvalue())

    def test_invalid_dimension_returns_non_zero(self) -> None:
        self.assertEqual(main.main(["--dimension", "0", "--log-level", "CRITICAL"]), 1)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
