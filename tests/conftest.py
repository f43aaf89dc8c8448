"""Shared pytest configuration for the project test suite."""
from __future__ import annotations

import sys
from pathlib import Path
from typing import Dict

import pytest


# Ensure the repository root (which contains the ``monthpace`` package) is importable.
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture
def january_2024_values() -> Dict[str, int]:
    """Jan 1-14 2024: every weekday twice, Monday first"""
    return {
        '2024-01-01': 100,  # Mon
        '2024-01-02': 80,   # Tue
        '2024-01-03': 90,   # Wed
        '2024-01-04': 110,  # Thu
        '2024-01-05': 120,  # Fri
        '2024-01-06': 60,   # Sat
        '2024-01-07': 50,   # Sun
        '2024-01-08': 105,  # Mon
        '2024-01-09': 85,   # Tue
        '2024-01-10': 95,   # Wed
        '2024-01-11': 115,  # Thu
        '2024-01-12': 125,  # Fri
        '2024-01-13': 65,   # Sat
        '2024-01-14': 55,   # Sun
    }
