#!/usr/bin/env python3
"""
Box-Plot Report

Command-line wrapper around ``fuzzy_boxplot.cli``.

Usage:
    python bin/boxplot_report.py a=1 b=2 c=3 d=4 e=5
    python bin/boxplot_report.py a=1 b=2 c=3 d=4 e=40 --fuzziness 5 --json
"""
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from fuzzy_boxplot.cli import main


if __name__ == "__main__":
    sys.exit(main())
