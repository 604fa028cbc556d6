"""
pinning.py — Dependency pinning in pip requirements files.

Applications deploy from requirements files that pin every distribution
to an exact version (`name==1.2.3`), so that two installs of the same
commit get the same code. Each distribution appears once.

Lines that are pip options (-r, -e, --index-url ...), local paths and URLs
are not requirements and are skipped. Direct references (`name @ url`) are
pinned by definition.
"""

import re

from guidelint.checks import checker
from guidelint.schemas import RuleInfo
from guidelint.source import REQUIREMENTS

RULES = [
    RuleInfo(code='P001', name='unpinned-requirement', section='dependency pinning',
             summary='Requirement is not pinned to an exact version with =='),
    RuleInfo(code='P002', name='duplicate-requirement', section='dependency pinning',
             summary='Distribution is listed more than once'),
]

_COMMENT_RE = re.compile(r'(^|\s)#.*$')
_REQUIREMENT_RE = re.compile(
    r'^(?P<name>[A-Za-z0-9](?:[A-Za-z0-9._-]*[A-Za-z0-9])?)'
    r'\s*(?:\[[^\]]*\])?'
    r'\s*(?P<spec>.*)$'
)
_PINNED_RE = re.compile(r'^===?\s*[^\s,*<>=!~]+$')


def normalise_name(name: str) -> str:
    """PEP 503 normalised distribution name."""
    return re.sub(r'[-_.]+', '-', name).lower()


def logical_lines(lines: list[str]):
    """Yield (first physical line number, text) with backslash continuations joined."""
    buffer = ''
    start = None
    for lineno, line in enumerate(lines, start=1):
        if start is None:
            start = lineno
        if line.endswith('\\'):
            buffer += line[:-1] + ' '
            continue
        yield start, buffer + line
        buffer = ''
        start = None
    if start is not None:
        yield start, buffer


def parse_requirement(text: str) -> tuple[str, str] | None:
    """Return (name, version spec) for a requirement line, or None for anything else."""
    text = _COMMENT_RE.sub('', text).strip()
    if not text or text.startswith(('-', '.', '/')) or '://' in text.split('@')[0]:
        return None

    text = text.split(';', 1)[0]
    # per-requirement options such as --hash=sha256:...
    text = ' '.join(part for part in text.split() if not part.startswith('--'))

    match = _REQUIREMENT_RE.match(text)
    if not match:
        return None
    return match.group('name'), match.group('spec').strip()


def is_pinned(spec: str) -> bool:
    return spec.startswith('@') or bool(_PINNED_RE.match(spec))


@checker(REQUIREMENTS, rules=RULES)
def check_pinning(source, config):
    seen: dict[str, int] = {}

    for lineno, text in logical_lines(source.lines):
        parsed = parse_requirement(text)
        if parsed is None:
            continue
        name, spec = parsed
        column = text.index(name) + 1

        if not is_pinned(spec):
            detail = f' ({spec})' if spec else ''
            yield source.violation(
                'P001', lineno, column, f'{name!r} is not pinned with =={detail}',
            )

        key = normalise_name(name)
        if key in seen:
            yield source.violation(
                'P002', lineno, column,
                f'{name!r} is already listed on line {seen[key]}',
            )
        else:
            seen[key] = lineno
