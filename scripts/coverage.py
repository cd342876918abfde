#!/usr/bin/env python3
"""Run the test suite with coverage and generate reports.

Produces a terminal summary and an HTML report in htmlcov/.

Usage (from the repo root):
    python scripts/coverage.py            # terminal + HTML report
    python scripts/coverage.py --html     # open HTML report in browser after
"""

import subprocess
import sys
from pathlib import Path

SCRIPT_DIR = Path(__file__).resolve().parent
ROOT_DIR = SCRIPT_DIR.parent


def run(*args: str) -> None:
    """Run a command with the current interpreter, exiting on failure."""
    result = subprocess.run(
        [sys.executable, *args],
        cwd=str(ROOT_DIR),
    )
    if result.returncode != 0:
        sys.exit(result.returncode)


def main() -> None:
    print("Running tests with coverage...")
    run(
        "-m",
        "coverage",
        "run",
        "--source=twister,twister_cmp,twister_viz",
        "-m",
        "pytest",
        "twister/",
        "twister_cmp/",
        "twister_viz/",
    )

    print("\n=== Coverage Report ===")
    run("-m", "coverage", "report")

    print("\nGenerating HTML report...")
    run("-m", "coverage", "html")

    htmlcov = ROOT_DIR / "htmlcov" / "index.html"
    print(f"HTML report: {htmlcov}")

    if "--html" in sys.argv[1:]:
        import webbrowser

        webbrowser.open(htmlcov.as_uri())


if __name__ == "__main__":
    main()
