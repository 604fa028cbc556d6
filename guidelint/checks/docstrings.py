"""
docstrings.py — PEP257 docstring presence and quoting.

Public means the name does not start with an underscore. Only the module, its
classes (at any class nesting depth) and the functions directly inside them
are public API; functions nested in functions are implementation detail.
"""

import ast

from guidelint.checks import checker
from guidelint.schemas import RuleInfo
from guidelint.source import PYTHON

RULES = [
    RuleInfo(code='D001', name='missing-module-docstring', section='docstrings',
             summary='Public module has no docstring'),
    RuleInfo(code='D002', name='missing-class-docstring', section='docstrings',
             summary='Public class has no docstring'),
    RuleInfo(code='D003', name='missing-function-docstring', section='docstrings',
             summary='Public function or method has no docstring'),
    RuleInfo(code='D004', name='docstring-quotes', section='docstrings',
             summary='Docstrings use triple double quotes (""")'),
]

_FUNCTIONS = (ast.FunctionDef, ast.AsyncFunctionDef)


def _docstring_node(node) -> ast.Constant | None:
    body = getattr(node, 'body', None)
    if not body or not isinstance(body[0], ast.Expr):
        return None
    value = body[0].value
    if isinstance(value, ast.Constant) and isinstance(value.value, str):
        return value
    return None


def _is_public(name: str) -> bool:
    return not name.startswith('_')


def _decorator_names(node) -> set[str]:
    names = set()
    for deco in node.decorator_list:
        target = deco.func if isinstance(deco, ast.Call) else deco
        if isinstance(target, ast.Name):
            names.add(target.id)
        elif isinstance(target, ast.Attribute):
            names.add(target.attr)
    return names


def _needs_docstring(func) -> bool:
    if not _is_public(func.name):
        return False
    # @overload stubs and @prop.setter / @prop.deleter share the main docstring
    return not _decorator_names(func) & {'overload', 'setter', 'deleter'}


def _uses_triple_double(source, node: ast.Constant) -> bool:
    text = source.lines[node.lineno - 1][node.col_offset:]
    return text.lstrip('rRuU').startswith('"""')


def _scopes(tree: ast.Module):
    """Yield (node, kind) for every class and function that belongs to the API surface."""
    stack = [tree]
    while stack:
        parent = stack.pop()
        for child in parent.body:
            if isinstance(child, ast.ClassDef):
                yield child, 'class'
                stack.append(child)
            elif isinstance(child, _FUNCTIONS):
                yield child, 'function'


@checker(PYTHON, rules=RULES)
def check_docstrings(source, config):
    tree = source.tree

    module_doc = _docstring_node(tree)
    name = source.module_name
    public_module = _is_public(name) or (name.startswith('__') and name.endswith('__'))
    if module_doc is None:
        if tree.body and public_module:
            yield source.violation('D001', 1, 1, 'missing docstring in public module')
    elif not _uses_triple_double(source, module_doc):
        yield source.node_violation(
            'D004', module_doc, 'use """triple double quotes""" for docstrings',
        )

    for node, kind in _scopes(tree):
        doc = _docstring_node(node)
        if doc is not None:
            if not _uses_triple_double(source, doc):
                yield source.node_violation(
                    'D004', doc, 'use """triple double quotes""" for docstrings',
                )
            continue

        if kind == 'class' and _is_public(node.name):
            yield source.node_violation(
                'D002', node, f'missing docstring in public class {node.name!r}',
            )
        elif kind == 'function' and _needs_docstring(node):
            yield source.node_violation(
                'D003', node, f'missing docstring in public function {node.name!r}',
            )
