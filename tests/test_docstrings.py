"""
Tests for docstring checks (D001-D004)
"""

DOCUMENTED = '''
"""Billing helpers."""


class Invoice:
    """A customer invoice."""

    def total(self):
        """Sum of all lines."""
        return 0

    def _round(self, value):
        return value

    def __repr__(self):
        return 'Invoice()'


def issue(invoice):
    """Send an invoice."""

    def render():
        return ''

    return render()
'''


class TestPresence:
    """D001 / D002 / D003"""

    def test_documented_module_passes(self, lint):
        assert lint(DOCUMENTED, select='D') == []

    def test_empty_module_needs_no_docstring(self, lint):
        assert lint('', select='D') == []

    def test_missing_module_docstring(self, lint):
        assert lint('x = 1\n', select='D') == ['D001']

    def test_private_module_is_exempt(self, lint):
        assert lint('x = 1\n', name='_internal.py', select='D') == []

    def test_package_init_needs_docstring(self, lint):
        assert lint('x = 1\n', name='pkg/__init__.py', select='D') == ['D001']

    def test_missing_class_docstring(self, lint):
        text = '"""Module."""\n\n\nclass Invoice:\n    pass\n'
        violations = lint(text, select='D', full=True)
        assert [(v.code, v.line) for v in violations] == [('D002', 4)]

    def test_private_class_is_exempt(self, lint):
        assert lint('"""Module."""\n\n\nclass _Cache:\n    pass\n', select='D') == []

    def test_missing_function_and_method_docstrings(self, lint):
        text = '''
        """Module."""


        def issue():
            pass


        class Invoice:
            """Invoice."""

            async def total(self):
                pass
        '''
        violations = lint(text, select='D', full=True)
        assert [(v.code, v.line) for v in violations] == [('D003', 4), ('D003', 11)]

    def test_overload_and_setter_are_exempt(self, lint):
        text = '''
        """Module."""
        from typing import overload


        @overload
        def parse(value: int) -> int: ...


        def parse(value):
            """Parse a value."""
            return value


        class Box:
            """Box."""

            @property
            def size(self):
                """Box size."""
                return 1

            @size.setter
            def size(self, value):
                pass
        '''
        assert lint(text, select='D') == []


class TestQuoting:
    """D004"""

    def test_single_quoted_module_docstring(self, lint):
        assert lint("'''Module.'''\n", select='D') == ['D004']

    def test_raw_triple_double_is_fine(self, lint):
        assert lint('r"""Module with \\d escapes."""\n', select='D') == []

    def test_function_docstring_in_single_quotes(self, lint):
        text = '"""Module."""\n\n\ndef issue():\n    \'Send it.\'\n'
        violations = lint(text, select='D', full=True)
        assert [(v.code, v.line, v.column) for v in violations] == [('D004', 5, 5)]
