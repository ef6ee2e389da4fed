#!/usr/bin/env python3
"""
Development scripts for the bindkeys project.

Each check shells out through uv; ``python scripts.py check`` runs them all.
"""

import subprocess
import sys
from pathlib import Path

PACKAGE_DIR = "src/bindkeys/"


def run_command(cmd: list[str], description: str) -> bool:
    """Run a command and return True if successful."""
    print(f"\n🔄 {description}...")
    print(f"Running: {' '.join(cmd)}")

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
    """Run every command, even after a failure, and report overall status."""
    results = [run_command(cmd, desc) for cmd, desc in commands]
    return 0 if all(results) else 1


def run_tests() -> int:
    """Run the test suite."""
    print("🧪 Running test suite")
    return run_all([(["uv", "run", "pytest", "-v"], "Tests")])


def run_lint() -> int:
    """Run ruff lint and format checks."""
    print("🔍 Running linting checks")
    status = run_all(
        [
            (["uv", "run", "ruff", "check", "."], "Ruff linting"),
            (["uv", "run", "ruff", "format", "--check", "."], "Ruff formatting"),
        ]
    )
    if status:
        print("\n💡 To auto-fix, run: uv run ruff format . && uv run ruff check --fix .")
    return status


def run_typecheck() -> int:
    """Run type checking with both mypy and pyright."""
    print("🔬 Running type checking")
    return run_all(
        [
            (["uv", "run", "mypy", PACKAGE_DIR], "MyPy type checking"),
            (["uv", "run", "pyright", PACKAGE_DIR], "Pyright type checking"),
        ]
    )


def run_demos() -> int:
    """Run every demo script to make sure the public API still works end to end."""
    print("🎭 Running demo scripts")

    demo_dir = Path("demo")
    if not demo_dir.exists():
        print("❌ Demo directory not found")
        return 1

    demos = sorted(path for path in demo_dir.glob("*.py") if not path.name.startswith("_"))
    if not demos:
        print("⚠️  No demo files found in demo directory")
        return 0

    return run_all([(["uv", "run", "python", str(path)], f"Demo: {path.name}") for path in demos])


COMMANDS = {
    "test": run_tests,
    "lint": run_lint,
    "typecheck": run_typecheck,
    "demos": run_demos,
}


def check_all() -> int:
    """Run all checks and print a summary."""
    print("🚀 Running all checks for bindkeys")

    results = {}
    for name, func in COMMANDS.items():
        print(f"\n{'=' * 20} {name} {'=' * 20}")
        results[name] = func() == 0

    print(f"\n{'=' * 20} SUMMARY {'=' * 20}")
    for name, passed in results.items():
        print(f"{name:<15} {'✅ PASS' if passed else '❌ FAIL'}")

    if all(results.values()):
        print("\n🎉 All checks passed!")
        return 0
    print("\n💥 Some checks failed. Please fix the issues above.")
    return 1


if __name__ == "__main__":
    commands = {**COMMANDS, "check": check_all}
    if len(sys.argv) > 1 and sys.argv[1] in commands:
        sys.exit(commands[sys.argv[1]]())
    if len(sys.argv) > 1:
        print(f"Unknown command: {sys.argv[1]}")
    print(f"Available commands: {', '.join(commands)}")
    print("Usage: python scripts.py <command>")
    sys.exit(1 if len(sys.argv) > 1 else 0)
