#!/usr/bin/env python3
# =============================================================================
#     File: conftest.py
#  Created: 2025-07-09 14:58
#   Author: Bernie Roesler
#
"""
Configuration file for pytest to set up the testing environment.
"""
# =============================================================================

import matplotlib


def pytest_addoption(parser):
    """Add command-line options for pytest."""
    parser.addoption(
        "--make-figures",
        action="store_true",
        default=False,
        help="Save the fill-in figures made by the plotting tests."
    )


def pytest_configure(config):
    """Plot without a display."""
    matplotlib.use('Agg')

# =============================================================================
# =============================================================================
