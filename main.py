"""
Main entry point: solve test case files and print their constant terms.

Usage: python main.py [file.json ...]
"""

import asyncio
import sys

from runner import solve_files

DEFAULT_FILES = ['test_case_1.json', 'test_case_2.json']


def report(path, outcome):
    """Print one test case outcome. Returns True on success."""
    print("\n" + "=" * 60)
    print(f"Processing {path}")
    print("=" * 60)

    if isinstance(outcome, Exception):
        print(f"  ✗ Error: {outcome}")
        return False

    print(f"  Number of points (n): {outcome.n}")
    print(f"  Parameter k: {outcome.k}")
    print(f"  Decoded points: {[(p.x, p.y) for p in outcome.points]}")
    print(f"  Strategy: {outcome.strategy.value}")
    print(f"  ✓ Constant c: {outcome.constant}")

    for mismatch in outcome.mismatches:
        print(f"  Warning: point ({mismatch.point.x}, {mismatch.point.y}) "
              f"differs from model by {mismatch.difference}")
    return True


async def main(paths):
    """Solve all files and report each one."""
    # constants and decoded values may exceed the default int-to-str limit
    if hasattr(sys, 'set_int_max_str_digits'):
        sys.set_int_max_str_digits(0)

    results = await solve_files(paths)

    ok = True
    for path in paths:
        ok = report(path, results[path]) and ok
    return 0 if ok else 1


if __name__ == "__main__":
    paths = sys.argv[1:] or DEFAULT_FILES
    sys.exit(asyncio.run(main(paths)))
