"""
naming.py — PEP8 naming conventions.

  functions, methods, arguments, modules  → snake_case
  classes                                 → CapWords
  never l, O or I as a single-character name
"""

import ast
import re
from fnmatch import fnmatchcase

from guidelint.checks import checker
from guidelint.schemas import RuleInfo
from guidelint.source import PYTHON

RULES = [
    RuleInfo(code='N001', name='function-name', section='naming',
             summary='Function or method name should be snake_case'),
    RuleInfo(code='N002', name='class-name', section='naming',
             summary='Class name should be CapWords'),
    RuleInfo(code='N003', name='argument-name', section='naming',
             summary='Argument name should be snake_case'),
    RuleInfo(code='N004', name='module-name', section='naming',
             summary='Module file name should be short, lowercase snake_case'),
    RuleInfo(code='N005', name='ambiguous-name', section='naming',
             summary="Never use 'l', 'O' or 'I' as a single-character name"),
]

AMBIGUOUS_NAMES = frozenset({'l', 'O', 'I'})
MAX_MODULE_NAME = 30

_SNAKE_RE = re.compile(r'^[a-z0-9][a-z0-9_]*$')
_CAPWORDS_RE = re.compile(r'^[A-Z][a-zA-Z0-9]*$')


def is_dunder(name: str) -> bool:
    return len(name) > 4 and name.startswith('__') and name.endswith('__')


def is_snake_case(name: str) -> bool:
    core = name.strip('_')
    return not core or bool(_SNAKE_RE.match(core))


def is_cap_words(name: str) -> bool:
    return bool(_CAPWORDS_RE.match(name.lstrip('_')))


def _ignored(name: str, patterns: list[str]) -> bool:
    return any(fnmatchcase(name, pattern) for pattern in patterns)


@checker(PYTHON, rules=RULES)
def check_naming(source, config):
    module = source.module_name
    if not is_dunder(module) and (not is_snake_case(module) or len(module) > MAX_MODULE_NAME):
        yield source.violation(
            'N004', 1, 1, f'module name {module!r} should be short, lowercase snake_case',
        )

    for node in ast.walk(source.tree):
        if isinstance(node, (ast.FunctionDef, ast.AsyncFunctionDef)):
            name = node.name
            exempt = is_dunder(name) or _ignored(name, config.naming_ignore)
            if not (exempt or is_snake_case(name)):
                yield source.node_violation(
                    'N001', node, f'function name {name!r} should be snake_case',
                )

        elif isinstance(node, ast.ClassDef):
            if not is_cap_words(node.name):
                yield source.node_violation(
                    'N002', node, f'class name {node.name!r} should be CapWords',
                )

        elif isinstance(node, ast.arg):
            if node.arg in AMBIGUOUS_NAMES:
                yield source.node_violation(
                    'N005', node, f'ambiguous argument name {node.arg!r}',
                )
            elif not is_snake_case(node.arg):
                yield source.node_violation(
                    'N003', node, f'argument name {node.arg!r} should be snake_case',
                )

        elif isinstance(node, ast.Name) and isinstance(node.ctx, ast.Store):
            if node.id in AMBIGUOUS_NAMES:
                yield source.node_violation(
                    'N005', node, f'ambiguous variable name {node.id!r}',
                )

        elif isinstance(node, ast.ExceptHandler) and node.name in AMBIGUOUS_NAMES:
            yield source.node_violation(
                'N005', node, f'ambiguous exception name {node.name!r}',
            )
