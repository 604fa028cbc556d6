"""
imports.py — Import style.

  one module per import statement, no wildcards, absolute imports
  groups ordered: __future__, standard library, third-party, local

Local packages are those listed in `local_packages` plus the top-level
package the linted file itself belongs to (found by walking up through
directories that contain an __init__.py).
"""

import ast
import os
import sys

from guidelint.checks import checker
from guidelint.schemas import RuleInfo
from guidelint.source import PYTHON

RULES = [
    RuleInfo(code='I001', name='wildcard-import', section='imports',
             summary='Wildcard import hides where names come from'),
    RuleInfo(code='I002', name='multiple-imports', section='imports',
             summary='Import one module per import statement'),
    RuleInfo(code='I003', name='relative-import', section='imports',
             summary='Use absolute imports'),
    RuleInfo(code='I004', name='import-order', section='imports',
             summary='Group imports: __future__, stdlib, third-party, local'),
]

FUTURE, STDLIB, THIRD_PARTY, LOCAL = range(4)
GROUP_NAMES = {
    FUTURE:      '__future__',
    STDLIB:      'standard library',
    THIRD_PARTY: 'third-party',
    LOCAL:       'local',
}


def own_package(path: str) -> str | None:
    """Return the top-level package name containing path, or None for a loose module."""
    directory = os.path.dirname(os.path.abspath(path))
    package = None
    while os.path.isfile(os.path.join(directory, '__init__.py')):
        package = os.path.basename(directory)
        parent = os.path.dirname(directory)
        if parent == directory:
            break
        directory = parent
    return package


def classify(module: str | None, level: int, local_packages: set[str]) -> int:
    if level > 0:
        return LOCAL
    top = (module or '').split('.')[0]
    if top == '__future__':
        return FUTURE
    if top in local_packages:
        return LOCAL
    if top in sys.stdlib_module_names:
        return STDLIB
    return THIRD_PARTY


def _display(node: ast.Import | ast.ImportFrom) -> str:
    if isinstance(node, ast.Import):
        return node.names[0].name
    return '.' * node.level + (node.module or '')


@checker(PYTHON, rules=RULES)
def check_imports(source, config):
    for node in ast.walk(source.tree):
        if isinstance(node, ast.Import) and len(node.names) > 1:
            names = ', '.join(alias.name for alias in node.names)
            yield source.node_violation('I002', node, f'multiple imports on one line ({names})')

        elif isinstance(node, ast.ImportFrom):
            if any(alias.name == '*' for alias in node.names):
                yield source.node_violation(
                    'I001', node, f'wildcard import from {_display(node)!r}',
                )
            if node.level > 0 and not config.allow_relative_imports:
                yield source.node_violation(
                    'I003', node, f'relative import {_display(node)!r}; use an absolute import',
                )

    local_packages = set(config.local_packages)
    package = own_package(source.path)
    if package:
        local_packages.add(package)

    highest = FUTURE
    for node in source.tree.body:
        if not isinstance(node, (ast.Import, ast.ImportFrom)):
            continue
        module = node.names[0].name if isinstance(node, ast.Import) else node.module
        level = getattr(node, 'level', 0) or 0
        group = classify(module, level, local_packages)
        if group < highest:
            yield source.node_violation(
                'I004', node,
                f'{GROUP_NAMES[group]} import {_display(node)!r} should come before '
                f'{GROUP_NAMES[highest]} imports',
            )
        else:
            highest = group
