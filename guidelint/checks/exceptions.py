"""
exceptions.py — Exception handling.
"""

import ast

from guidelint.checks import checker
from guidelint.schemas import RuleInfo
from guidelint.source import PYTHON

RULES = [
    RuleInfo(code='E001', name='bare-except', section='exceptions',
             summary='Bare except also catches SystemExit and KeyboardInterrupt'),
]


@checker(PYTHON, rules=RULES)
def check_bare_except(source, config):
    for node in ast.walk(source.tree):
        if isinstance(node, ast.ExceptHandler) and node.type is None:
            yield source.node_violation(
                'E001', node, "bare 'except:'; catch a specific exception (or Exception)",
            )
