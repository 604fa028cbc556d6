"""
Tests for import checks (I001-I004)
"""

import pytest

from guidelint.checks.imports import FUTURE, LOCAL, STDLIB, THIRD_PARTY, classify, own_package


class TestClassify:
    """Import group classification"""

    @pytest.mark.parametrize('module, level, expected', [
        ('__future__', 0, FUTURE),
        ('os.path', 0, STDLIB),
        ('json', 0, STDLIB),
        ('click', 0, THIRD_PARTY),
        ('myapp.models', 0, LOCAL),
        (None, 1, LOCAL),
        ('sibling', 2, LOCAL),
    ])
    def test_classify(self, module, level, expected):
        assert classify(module, level, {'myapp'}) == expected

    def test_own_package(self, write_file):
        write_file('shop/__init__.py', '')
        write_file('shop/orders/__init__.py', '')
        path = write_file('shop/orders/models.py', 'x = 1\n')
        assert own_package(path) == 'shop'

    def test_loose_module_has_no_package(self, write_file):
        assert own_package(write_file('script.py', 'x = 1\n')) is None


class TestImportStyle:
    """I001 / I002 / I003"""

    def test_multiple_imports_on_one_line(self, lint):
        violations = lint('import os, sys\n', select='I', full=True)
        assert [v.code for v in violations] == ['I002']
        assert '(os, sys)' in violations[0].message

    def test_wildcard_import(self, lint):
        assert lint('from os.path import *\n', select='I') == ['I001']

    def test_relative_import(self, lint):
        assert lint('from . import sibling\n', select='I') == ['I003']

    def test_relative_imports_can_be_allowed(self, lint):
        assert lint('from .models import Order\n', select='I', allow_relative_imports=True) == []

    def test_one_import_per_line_passes(self, lint):
        assert lint('import os\nimport sys\nfrom os import path, sep\n', select='I') == []


class TestImportOrder:
    """I004"""

    def test_well_ordered_groups(self, lint):
        text = '''
        from __future__ import annotations

        import logging
        import os

        import click
        from pydantic import BaseModel

        import myapp
        from . import sibling
        '''
        assert lint(text, select='I004', local_packages=['myapp']) == []

    def test_stdlib_after_third_party(self, lint):
        violations = lint('import click\nimport os\n', select='I', full=True)
        assert [(v.code, v.line) for v in violations] == [('I004', 2)]
        assert 'standard library' in violations[0].message
        assert 'third-party' in violations[0].message

    def test_third_party_after_local(self, lint):
        text = 'import myapp\nimport click\n'
        assert lint(text, select='I', local_packages=['myapp']) == ['I004']

    def test_own_package_counts_as_local(self, lint, write_file):
        write_file('shop/__init__.py', '')
        text = 'from shop import helpers\nimport click\n'
        assert lint(text, name='shop/views.py', select='I') == ['I004']

    def test_nested_imports_are_not_ordered(self, lint):
        text = '''
        import click


        def load():
            import json
            return json
        '''
        assert lint(text, select='I') == []
