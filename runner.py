"""
Batch processing of test case files.
Test cases share no state, so they are solved concurrently.
"""

import asyncio

from reconstruct import process
from samples import load


async def solve_file(path, strategy=None):
    """Load and solve a single test case file."""
    test_case = await asyncio.to_thread(load, path)
    return process(test_case, strategy)


async def solve_files(paths, strategy=None):
    """
    Solve each file independently.

    Returns {path: Result or exception}; a file that cannot be read,
    decoded or solved does not stop the others.
    """
    tasks = [solve_file(path, strategy) for path in paths]
    outcomes = await asyncio.gather(*tasks, return_exceptions=True)

    results = {}
    for path, outcome in zip(paths, outcomes):
        # ReconstructionError, JSONDecodeError and UnicodeDecodeError are ValueErrors
        if isinstance(outcome, BaseException) and not isinstance(
                outcome, (ValueError, OSError)):
            raise outcome
        results[path] = outcome
    return results
