"""
Test configuration and fixtures
"""

import os
import textwrap

import pytest

from guidelint.config import LintConfig
from guidelint.runner import lint_file


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep GUIDELINT_* variables from the developer's shell out of the tests"""
    for name in list(os.environ):
        if name.startswith('GUIDELINT_'):
            monkeypatch.delenv(name)


@pytest.fixture
def write_file(tmp_path):
    """Write dedented text to a file under tmp_path and return its path"""

    def _write(name: str, text: str) -> str:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(textwrap.dedent(text).lstrip('\n'), encoding='utf-8')
        return str(path)

    return _write


@pytest.fixture
def lint(write_file):
    """Lint a snippet and return the reported codes (or violations with full=True)"""

    def _lint(text: str, name: str = 'example.py', select: str | None = None,
              full: bool = False, **settings):
        config = LintConfig(select=select, **settings)
        report = lint_file(write_file(name, text), config)
        if full:
            return report.violations
        return [v.code for v in report.violations]

    return _lint
