"""
source.py — One file on disk, read once and viewed as lines, tokens or AST.

Every checker receives a SourceFile. The token stream and syntax tree are
built lazily and cached, so a file with only line-level checks enabled is
never parsed.
"""

import ast
import io
import os
import re
import tokenize
from functools import cached_property

from guidelint.errors import SourceReadError
from guidelint.schemas import Violation

PYTHON = 'python'
REQUIREMENTS = 'requirements'

# f-strings are tokenized piecewise from Python 3.12; -1 never matches a token
FSTRING_START = getattr(tokenize, 'FSTRING_START', -1)
FSTRING_END   = getattr(tokenize, 'FSTRING_END', -1)

# '# noqa' alone, or '# noqa: A001, B002' (codes comma and/or space separated)
_NOQA_RE = re.compile(
    r'#\s*noqa(?::\s?(?P<codes>[A-Z][0-9]+(?:[,\s]+[A-Z][0-9]+)*))?',
    re.IGNORECASE,
)
_REQUIREMENTS_NAME_RE = re.compile(r'^(requirements.*|.*[-_]requirements)\.txt$')


def detect_kind(path: str) -> str | None:
    """Return PYTHON, REQUIREMENTS, or None for files guidelint does not lint."""
    name = os.path.basename(path)
    if name.endswith('.py'):
        return PYTHON
    if _REQUIREMENTS_NAME_RE.match(name):
        return REQUIREMENTS
    parent = os.path.basename(os.path.dirname(os.path.abspath(path)))
    if parent == 'requirements' and name.endswith('.txt'):
        return REQUIREMENTS
    return None


def split_lines(text: str) -> list[str]:
    """
    Split on \\n, \\r\\n and \\r only.

    Form feeds and the other separators str.splitlines() honours stay inside
    the line, matching the line numbers of tokens and AST nodes.
    """
    return [line.rstrip('\r\n') for line in io.StringIO(text, newline='').readlines()]


def parse_noqa(lines: list[str]) -> dict[int, frozenset[str] | None]:
    """
    Map 1-based line numbers to suppressed codes.

    A value of None means a blanket '# noqa' (every code suppressed).
    """
    result: dict[int, frozenset[str] | None] = {}
    for lineno, line in enumerate(lines, start=1):
        if '#' not in line:
            continue
        match = _NOQA_RE.search(line)
        if not match:
            continue
        codes = match.group('codes')
        if codes is None:
            result[lineno] = None
        else:
            result[lineno] = frozenset(c.upper() for c in re.split(r'[,\s]+', codes) if c)
    return result


class SourceFile:
    """A decoded source file plus lazily-built views of it."""

    def __init__(self, path: str, text: str, kind: str | None = None):
        self.path = path
        self.text = text
        self.kind = kind or detect_kind(path) or PYTHON
        self.lines = split_lines(text)

    @classmethod
    def from_path(cls, path: str) -> 'SourceFile':
        """Read and decode a file, honouring PEP 263 encoding cookies."""
        try:
            with open(path, 'rb') as fh:
                raw = fh.read()
            encoding, _ = tokenize.detect_encoding(io.BytesIO(raw).readline)
            text = raw.decode(encoding)
        except OSError as exc:
            raise SourceReadError(path, exc.strerror or str(exc)) from exc
        except (UnicodeDecodeError, SyntaxError, LookupError) as exc:
            raise SourceReadError(path, f'cannot decode file ({exc})') from exc
        return cls(path, text)

    # ── Lazy views ────────────────────────────────────────────────────────────

    @cached_property
    def tree(self) -> ast.Module:
        return ast.parse(self.text, filename=self.path)

    @cached_property
    def tokens(self) -> list[tokenize.TokenInfo]:
        return list(tokenize.generate_tokens(io.StringIO(self.text).readline))

    @cached_property
    def noqa(self) -> dict[int, frozenset[str] | None]:
        return parse_noqa(self.lines)

    @property
    def module_name(self) -> str:
        return os.path.splitext(os.path.basename(self.path))[0]

    @property
    def is_package_init(self) -> bool:
        return self.module_name == '__init__'

    # ── Helpers for checkers ──────────────────────────────────────────────────

    def violation(self, code: str, line: int, column: int, message: str) -> Violation:
        return Violation(
            path    = self.path,
            line    = max(line, 1),
            column  = max(column, 1),
            code    = code,
            message = message,
        )

    def node_violation(self, code: str, node: ast.AST, message: str) -> Violation:
        """Build a Violation at an AST node (ast columns are 0-based)."""
        return self.violation(code, node.lineno, node.col_offset + 1, message)

    def is_suppressed(self, violation: Violation) -> bool:
        if violation.line not in self.noqa:
            return False
        codes = self.noqa[violation.line]
        return codes is None or violation.code in codes
