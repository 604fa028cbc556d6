"""
guidelint — enforce the team Python style guide.

Checks naming, docstrings, imports, line length, quoting, mutable defaults,
exception handling, CLI entry points and requirement pinning.

Usage:
    guidelint check src/ tests/
    guidelint rules
"""

__version__ = '0.4.0'
