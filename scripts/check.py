#!/usr/bin/env python3
"""Cross-platform composite quality checks for local and CI use."""

from __future__ import annotations

import argparse
import os
import subprocess
from pathlib import Path


def _run_checked(*, label: str, command: list[str], env: dict[str, str]) -> None:
    print(label, flush=True)
    completed = subprocess.run(command, env=env, check=False)
    if completed.returncode != 0:
        raise SystemExit(f"{label} failed with exit code {completed.returncode}.")


def main() -> int:
    parser = argparse.ArgumentParser(description="Run repository quality checks.")
    parser.add_argument("--skip-typecheck", action="store_true")
    parser.add_argument("--skip-tests", action="store_true")
    parser.add_argument("--skip-qt-tests", action="store_true")
    args = parser.parse_args()

    root = Path(__file__).resolve().parent.parent
    os.chdir(root)

    env = os.environ.copy()
    env["PYTHONPATH"] = "."
    env.setdefault("QT_QPA_PLATFORM", "offscreen")

    if not args.skip_typecheck:
        _run_checked(label="Running mypy...", command=["uv", "run", "mypy"], env=env)

    if not args.skip_tests:
        _run_checked(
            label="Running core engine tests with coverage gate...",
            command=[
                "uv",
                "run",
                "pytest",
                "tests/listwindow/unit/api",
                "tests/listwindow/unit/runtime",
                "--cov=listwindow.api",
                "--cov=listwindow.runtime",
                "--cov-report=term-missing",
                "--cov-fail-under=90",
            ],
            env=env,
        )

    if not args.skip_qt_tests:
        _run_checked(
            label="Running Qt adapter tests...",
            command=["uv", "run", "--extra", "qt", "pytest", "tests/listwindow/unit/qt"],
            env=env,
        )

    print("All selected checks passed.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
