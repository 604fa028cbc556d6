"""
defaults.py — Mutable default arguments.

A default is evaluated once, when the function is defined, so a list, dict
or set default is shared by every call. Default to None and create the value
inside the function instead:

    def add(item, bucket=None):
        if bucket is None:
            bucket = []
"""

import ast

from guidelint.checks import checker
from guidelint.schemas import RuleInfo
from guidelint.source import PYTHON

RULES = [
    RuleInfo(code='B001', name='mutable-default', section='defaults',
             summary='Mutable default argument; default to None and build the value inside'),
]

MUTABLE_LITERALS = (ast.List, ast.Dict, ast.Set, ast.ListComp, ast.DictComp, ast.SetComp)
MUTABLE_CALLS = frozenset({
    'list', 'dict', 'set', 'bytearray',
    'defaultdict', 'OrderedDict', 'deque', 'Counter',
    'collections.defaultdict', 'collections.OrderedDict',
    'collections.deque', 'collections.Counter',
})


def _call_name(node: ast.Call) -> str | None:
    func = node.func
    if isinstance(func, ast.Name):
        return func.id
    if isinstance(func, ast.Attribute) and isinstance(func.value, ast.Name):
        return f'{func.value.id}.{func.attr}'
    return None


def is_mutable(node: ast.AST | None) -> bool:
    if node is None:
        return False
    if isinstance(node, MUTABLE_LITERALS):
        return True
    return isinstance(node, ast.Call) and _call_name(node) in MUTABLE_CALLS


@checker(PYTHON, rules=RULES)
def check_mutable_defaults(source, config):
    for node in ast.walk(source.tree):
        if not isinstance(node, (ast.FunctionDef, ast.AsyncFunctionDef, ast.Lambda)):
            continue
        # kw_defaults holds None for keyword-only arguments without a default
        for default in [*node.args.defaults, *node.args.kw_defaults]:
            if is_mutable(default):
                yield source.node_violation(
                    'B001', default, 'mutable default argument; default to None instead',
                )
