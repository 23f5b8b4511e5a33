"""
Smart Interview Coach - answer evaluation and readiness reporting

Scores typed and spoken interview answers and compiles per-session
readiness reports.
"""

__version__ = "0.1.0"
__author__ = "Smart Interview Coach Team"
