"""
quotes.py — Consistent string quoting.

Single-line string literals use the configured quote character (quote_style,
default 'single'). A literal is left alone when switching would force an
escape, i.e. its body already contains the preferred quote. Triple-quoted
strings, and so docstrings, are never reported.
"""

import tokenize

from guidelint.checks import checker
from guidelint.schemas import RuleInfo
from guidelint.source import FSTRING_END, FSTRING_START, PYTHON

RULES = [
    RuleInfo(code='Q001', name='string-quotes', section='quoting',
             summary='String literal does not use the project quote style'),
]

QUOTE_CHARS = {'single': "'", 'double': '"'}


def _split_prefix(literal: str) -> tuple[str, str]:
    """Split 'rb"abc"' into ('rb', '"abc"')."""
    index = 0
    while index < len(literal) and literal[index] not in '\'"':
        index += 1
    return literal[:index], literal[index:]


def _is_triple(body: str) -> bool:
    return body[:3] in ('"""', "'''")


def _fstring_text(source, tokens, start_index: int) -> str:
    """Source text of a single-line f-string from FSTRING_START to its FSTRING_END."""
    start = tokens[start_index]
    depth = 0
    for tok in tokens[start_index:]:
        if tok.type == FSTRING_START:
            depth += 1
        elif tok.type == FSTRING_END:
            depth -= 1
            if depth == 0:
                line = source.lines[start.start[0] - 1]
                if tok.end[0] != start.start[0]:
                    return line[start.start[1]:]
                return line[start.start[1]:tok.end[1]]
    return start.string


@checker(PYTHON, rules=RULES)
def check_quotes(source, config):
    preferred = QUOTE_CHARS[config.quote_style]
    tokens = source.tokens
    # quote bodies of the f-strings enclosing the current token (3.12+ tokens)
    open_fstrings: list[str] = []

    for index, tok in enumerate(tokens):
        if tok.type == FSTRING_END:
            if open_fstrings:
                open_fstrings.pop()
            continue
        if tok.type == tokenize.STRING:
            literal = tok.string
        elif tok.type == FSTRING_START:
            literal = _fstring_text(source, tokens, index)
        else:
            continue

        # before 3.12 a string nested in f'...' cannot reuse the outer quote
        nested = preferred in open_fstrings
        if tok.type == FSTRING_START:
            open_fstrings.append(_split_prefix(tok.string)[1])
        if nested:
            continue

        _, body = _split_prefix(literal)
        if not body or _is_triple(body) or body[0] == preferred:
            continue
        if preferred in body[1:-1]:
            continue

        yield source.violation(
            'Q001', tok.start[0], tok.start[1] + 1,
            f'use {config.quote_style} quotes ({preferred}) for string literals',
        )
