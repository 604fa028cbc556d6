"""
cli_design.py — Command-line entry points.

Scripts build their CLI with click, and only run it from behind an
`if __name__ == '__main__':` guard so the module stays importable (tests,
console_scripts entry points, `python -m`).
"""

import ast

from guidelint.checks import checker
from guidelint.schemas import RuleInfo
from guidelint.source import PYTHON

RULES = [
    RuleInfo(code='C001', name='unguarded-entry-point', section='CLI design',
             summary="Entry point called at import time; wrap it in if __name__ == '__main__'"),
    RuleInfo(code='C002', name='argparse-cli', section='CLI design',
             summary='Command-line parsing uses argparse; build CLIs with click'),
]

ENTRY_POINTS = frozenset({'main', 'cli', 'run'})


def _called_name(stmt: ast.stmt) -> str | None:
    if not (isinstance(stmt, ast.Expr) and isinstance(stmt.value, ast.Call)):
        return None
    func = stmt.value.func
    if isinstance(func, ast.Name):
        return func.id
    return None


@checker(PYTHON, rules=RULES)
def check_cli_design(source, config):
    for stmt in source.tree.body:
        name = _called_name(stmt)
        if name in ENTRY_POINTS:
            yield source.node_violation(
                'C001', stmt,
                f"{name}() runs at import time; call it under if __name__ == '__main__':",
            )

    for node in ast.walk(source.tree):
        if isinstance(node, ast.Import):
            if any(alias.name == 'argparse' for alias in node.names):
                yield source.node_violation('C002', node, 'argparse imported; use click for CLIs')
        elif isinstance(node, ast.ImportFrom) and node.module == 'argparse' and not node.level:
            yield source.node_violation('C002', node, 'argparse imported; use click for CLIs')
