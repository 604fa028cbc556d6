"""
lines.py — Physical-line checks: length, trailing whitespace, tab indentation.
"""

import tokenize

from guidelint.checks import checker
from guidelint.schemas import RuleInfo
from guidelint.source import FSTRING_END, FSTRING_START, PYTHON

RULES = [
    RuleInfo(code='L001', name='line-too-long', section='line length',
             summary='Line is longer than max_line_length characters'),
    RuleInfo(code='L002', name='trailing-whitespace', section='whitespace',
             summary='Line ends with whitespace'),
    RuleInfo(code='L003', name='tab-indentation', section='whitespace',
             summary='Indentation uses tab characters; indent with four spaces'),
]


def _is_long_url(line: str) -> bool:
    """A line holding nothing but one URL (optionally commented) cannot be wrapped."""
    stripped = line.strip().lstrip('#').strip()
    return '://' in stripped and len(stripped.split()) == 1


def _string_continuation_lines(source) -> set[int]:
    """Line numbers that sit inside a multi-line string literal (not its first line)."""
    inside: set[int] = set()
    fstring_starts: list[int] = []
    for tok in source.tokens:
        if tok.type == tokenize.STRING and tok.end[0] > tok.start[0]:
            inside.update(range(tok.start[0] + 1, tok.end[0] + 1))
        elif tok.type == FSTRING_START:
            fstring_starts.append(tok.start[0])
        elif tok.type == FSTRING_END and fstring_starts:
            first = fstring_starts.pop()
            inside.update(range(first + 1, tok.end[0] + 1))
    return inside


@checker(PYTHON, rules=RULES)
def check_lines(source, config):
    in_strings = _string_continuation_lines(source)
    limit = config.max_line_length

    for lineno, line in enumerate(source.lines, start=1):
        length = len(line)
        if length > limit and not (config.ignore_long_urls and _is_long_url(line)):
            yield source.violation(
                'L001', lineno, limit + 1,
                f'line too long ({length} > {limit} characters)',
            )

        # a form feed between sections is allowed and is not trailing whitespace
        content = line.rstrip('\x0c')
        stripped = content.rstrip()
        if stripped != content:
            yield source.violation(
                'L002', lineno, len(stripped) + 1, 'trailing whitespace',
            )

        if lineno in in_strings:
            continue
        indent = line[:len(line) - len(line.lstrip())]
        if '\t' in indent:
            yield source.violation(
                'L003', lineno, indent.index('\t') + 1,
                'indentation contains tabs',
            )
