"""End-to-end tests for the textdiff command line.

This module runs ``python -m textdiff`` as a subprocess, simulating real-world
usage and testing the complete pipeline from command line to output.
"""

import json
import os
import subprocess
import sys

import pytest
from utils import cleanup_test_dir, create_test_temp_dir


@pytest.mark.e2e
@pytest.mark.cli
@pytest.mark.slow
class TestDiffCLI:
    """End-to-end tests for the diff command."""

    def setup_method(self):
        """Set up test environment."""
        self.temp_dir = create_test_temp_dir()

        self.file1 = self.temp_dir / "doc1.md"
        self.file1.write_text(
            """# Document Title

## Introduction
This is the original introduction.

## Methods
We used traditional approaches.

## Results
The results were good.
""",
            encoding="utf-8",
        )

        self.file2 = self.temp_dir / "doc2.md"
        self.file2.write_text(
            """# Document Title

## Introduction
This is the updated introduction.

## Methods
We used   traditional approaches.

## Results
The results were good.

## Conclusion
We achieved our goals.
""",
            encoding="utf-8",
        )

    def teardown_method(self):
        """Clean up test environment."""
        cleanup_test_dir(self.temp_dir)

    def _run(self, args: list[str], stdin: str | None = None) -> subprocess.CompletedProcess:
        """Run textdiff as a subprocess.

        Parameters
        ----------
        args : list[str]
            Command line arguments
        stdin : str, optional
            Text piped to standard input

        Returns
        -------
        subprocess.CompletedProcess
            Result of the subprocess execution

        """
        env = dict(os.environ)
        env.pop("TEXTDIFF_CONFIG", None)
        env["HOME"] = str(self.temp_dir)
        return subprocess.run(
            [sys.executable, "-m", "textdiff"] + args,
            cwd=self.temp_dir,
            input=stdin,
            capture_output=True,
            text=True,
            encoding="utf-8",
            env=env,
        )

    def test_basic_diff(self):
        """Unified output with headers and hunks."""
        result = self._run([str(self.file1), str(self.file2)])

        assert result.returncode == 0, f"Command failed: {result.stderr}"
        assert f"--- {self.file1}" in result.stdout
        assert f"+++ {self.file2}" in result.stdout
        assert "@@" in result.stdout
        assert "+## Conclusion" in result.stdout
        assert "Added: +" in result.stderr

    def test_ignore_whitespace(self):
        """Whitespace-only edits disappear with -w."""
        plain = self._run([str(self.file1), str(self.file2)])
        ignored = self._run([str(self.file1), str(self.file2), "-w"])
        assert "traditional" in plain.stdout
        assert "-We used traditional" not in ignored.stdout

    def test_json_format(self):
        """JSON output is valid and structured."""
        result = self._run(["diff", str(self.file1), str(self.file2), "--format", "json"])

        assert result.returncode == 0
        data = json.loads(result.stdout)
        assert data["type"] == "text_diff"
        assert data["statistics"]["lines_added"] >= 2
        assert data["file_a"] == str(self.file1)

    def test_stdin_input(self):
        """'-' reads one side from stdin."""
        result = self._run(["-", str(self.file1)], stdin=self.file1.read_text(encoding="utf-8"))
        assert result.returncode == 0
        assert result.stdout == ""
        assert "No differences found." in result.stderr

    def test_exit_code(self):
        """--exit-code turns differences into status 1."""
        result = self._run([str(self.file1), str(self.file2), "--exit-code"])
        assert result.returncode == 1

    def test_missing_file(self):
        """Missing input exits with the file error code."""
        result = self._run([str(self.temp_dir / "missing.md"), str(self.file2)])
        assert result.returncode == 4
        assert "File not found" in result.stderr

    def test_session_round_trip(self):
        """A saved session can be listed and replayed."""
        saved = self._run([str(self.file1), str(self.file2), "--save-session"])
        assert saved.returncode == 0
        timestamp = saved.stderr.split("Session saved: ")[1].split()[0]

        listed = self._run(["sessions", "list"])
        assert timestamp in listed.stdout

        replayed = self._run(["sessions", "replay", timestamp, "--color", "never"])
        assert replayed.returncode == 0
        assert "+## Conclusion" in replayed.stdout
