#!/usr/bin/env python3
"""
Development scripts for the switchboard project.

Usage: python scripts.py <command>

Every command shells out through ``uv run`` so the project's dev extra is used.
"""

import subprocess
import sys
from collections.abc import Callable
from pathlib import Path

PACKAGE_DIR = "src/switchboard/"


def run_command(cmd: list[str], description: str) -> bool:
    """Run a command and report whether it exited cleanly."""
    print(f"\n🔄 {description}: {' '.join(cmd)}")
    try:
        subprocess.run(cmd, check=True)
    except subprocess.CalledProcessError as e:
        print(f"❌ {description} failed with exit code {e.returncode}")
        return False
    except FileNotFoundError:
        print(f"❌ Command not found: {cmd[0]}")
        return False
    print(f"✅ {description} passed")
    return True


def run_all(commands: list[tuple[list[str], str]]) -> int:
    """Run every command, even after a failure, and return a process exit code."""
    results = [run_command(cmd, description) for cmd, description in commands]
    return 0 if all(results) else 1


def run_tests() -> int:
    return run_all([(["uv", "run", "pytest", "-v"], "Tests")])


def run_lint() -> int:
    code = run_all(
        [
            (["uv", "run", "ruff", "check", "."], "Ruff linting"),
            (["uv", "run", "ruff", "format", "--check", "."], "Ruff formatting"),
        ]
    )
    if code:
        print("\n💡 uv run ruff format . && uv run ruff check --fix . fixes most of these")
    return code


def run_typecheck() -> int:
    return run_all(
        [
            (["uv", "run", "mypy", PACKAGE_DIR], "MyPy type checking"),
            (["uv", "run", "pyright", PACKAGE_DIR], "Pyright type checking"),
        ]
    )


def run_demos() -> int:
    """Run each script in demo/ so usage examples keep working."""
    demos = sorted(path for path in Path("demo").glob("*.py") if not path.name.startswith("_"))
    if not demos:
        print("⚠️  No demo scripts found")
        return 0
    return run_all([(["uv", "run", "python", str(demo)], f"Demo {demo.name}") for demo in demos])


COMMANDS: dict[str, Callable[[], int]] = {
    "test": run_tests,
    "lint": run_lint,
    "typecheck": run_typecheck,
    "demos": run_demos,
}


def check_all() -> int:
    """Run every command and print a summary table."""
    results = {name: command() == 0 for name, command in COMMANDS.items()}

    print(f"\n{'=' * 20} SUMMARY {'=' * 20}")
    for name, passed in results.items():
        print(f"{name:<15} {'✅ PASS' if passed else '❌ FAIL'}")
    return 0 if all(results.values()) else 1


if __name__ == "__main__":
    available = [*COMMANDS, "check"]
    if len(sys.argv) != 2 or sys.argv[1] not in available:
        print(f"Available commands: {', '.join(available)}")
        print("Usage: python scripts.py <command>")
        sys.exit(1)

    command = sys.argv[1]
    sys.exit(check_all() if command == "check" else COMMANDS[command]())
