"""
checks — Rule checker registry for guidelint.

Each checker module registers plain functions with the @checker decorator:

    @checker(PYTHON, rules=[RuleInfo(code='X001', ...)])
    def check_something(source, config):
        yield source.violation('X001', line, column, 'message')

A checker runs against one file kind (python or requirements), owns the
codes it declares and never depends on another checker's output. Selection,
ignore lists and noqa comments are applied afterwards by the runner.
"""

from collections.abc import Callable, Iterator

from guidelint.schemas import RuleInfo, Violation

CheckFunc = Callable[..., Iterator[Violation]]


class Checker:
    def __init__(self, func: CheckFunc, kind: str, rules: list[RuleInfo]):
        self.func = func
        self.kind = kind
        self.rules = rules
        self.name = func.__name__

    @property
    def codes(self) -> list[str]:
        return [rule.code for rule in self.rules]

    def __call__(self, source, config) -> Iterator[Violation]:
        return self.func(source, config)

    def __repr__(self) -> str:
        codes = ', '.join(self.codes)
        return f'<Checker {self.name} [{codes}]>'


_CHECKERS: list[Checker] = []
_RULES:    dict[str, RuleInfo] = {}


def checker(kind: str, rules: list[RuleInfo]):
    """Register a checker function for one file kind and a set of rule codes."""
    def decorator(func: CheckFunc) -> CheckFunc:
        for rule in rules:
            if rule.code in _RULES:
                raise ValueError(f'Rule {rule.code} registered twice')
            _RULES[rule.code] = rule
        _CHECKERS.append(Checker(func, kind, list(rules)))
        return func
    return decorator


def register_rule(rule: RuleInfo) -> RuleInfo:
    """Register a rule reported by the runner itself rather than a checker."""
    _RULES.setdefault(rule.code, rule)
    return rule


def checkers_for(kind: str) -> list[Checker]:
    return [c for c in _CHECKERS if c.kind == kind]


def all_rules() -> list[RuleInfo]:
    return sorted(_RULES.values(), key=lambda r: r.code)


def get_rule(code: str) -> RuleInfo | None:
    return _RULES.get(code)


# Import checker modules so their @checker decorators run.
from guidelint.checks import (  # noqa: E402,F401
    cli_design,
    defaults,
    docstrings,
    exceptions,
    imports,
    lines,
    naming,
    pinning,
    quotes,
)
