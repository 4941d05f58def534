#!/usr/bin/env python3
"""
Main test runner for the loxparse test suite.

Author: xwest
"""

import sys
import os
import unittest

# Add the project root to the Python path
project_root = os.path.abspath(os.path.dirname(__file__))
sys.path.insert(0, project_root)


def run_all_tests() -> bool:
    """Discover and run every test module under tests/."""
    print("loxparse Test Suite")
    print("=" * 60)

    suite = unittest.defaultTestLoader.discover(
        os.path.join(project_root, "tests"), top_level_dir=project_root
    )
    result = unittest.TextTestRunner(verbosity=2).run(suite)

    print("=" * 60)
    if result.wasSuccessful():
        print(f"All {result.testsRun} tests passed")
    else:
        print(f"{len(result.failures)} failure(s), {len(result.errors)} error(s)")
    return result.wasSuccessful()


if __name__ == "__main__":
    sys.exit(0 if run_all_tests() else 1)
