"""
runner.py — Run every registered checker over a set of files.

  lint_source() — check an already-loaded SourceFile
  lint_file()   — read one file and check it
  lint_paths()  — discover files and aggregate a LintReport

Per-file failures never abort a run: an unreadable file is reported as E902,
a Python file that does not parse as E999 (and no other check runs on it).
"""

import logging
import tokenize

from guidelint.checks import checkers_for, register_rule
from guidelint.discovery import discover
from guidelint.errors import SourceReadError
from guidelint.schemas import FileReport, LintReport, RuleInfo, Violation
from guidelint.source import SourceFile

logger = logging.getLogger(__name__)

READ_ERROR = register_rule(RuleInfo(
    code='E902', name='read-error', section='runner',
    summary='File could not be read or decoded',
))
SYNTAX_ERROR = register_rule(RuleInfo(
    code='E999', name='syntax-error', section='runner',
    summary='File is not valid Python; no other checks ran',
))


def _syntax_violation(source: SourceFile, exc: Exception) -> Violation:
    if isinstance(exc, SyntaxError):
        line, column = exc.lineno or 1, exc.offset or 1
        message = f'{type(exc).__name__}: {exc.msg}'
    else:
        # tokenize.TokenError carries (message, (line, column))
        message, (line, column) = exc.args[0], exc.args[1]
        message = f'TokenError: {message}'
        column += 1
    return source.violation(SYNTAX_ERROR.code, line, column, message)


def lint_source(source: SourceFile, config) -> FileReport:
    report = FileReport(path=source.path, kind=source.kind)
    found: list[Violation] = []

    try:
        for check in checkers_for(source.kind):
            found.extend(check(source, config))
    except (SyntaxError, tokenize.TokenError) as exc:
        logger.info('%s does not parse: %s', source.path, exc)
        found = [_syntax_violation(source, exc)]

    report.violations = sorted(
        (v for v in found if config.is_enabled(v.code) and not source.is_suppressed(v)),
        key=Violation.sort_key,
    )
    return report


def lint_file(path: str, config) -> FileReport:
    try:
        source = SourceFile.from_path(path)
    except SourceReadError as exc:
        logger.warning('Cannot read %s: %s', path, exc.reason)
        report = FileReport(path=path, kind='unknown')
        if config.is_enabled(READ_ERROR.code):
            report.violations.append(Violation(
                path=path, line=1, column=1, code=READ_ERROR.code, message=exc.reason,
            ))
        return report
    return lint_source(source, config)


def lint_paths(paths: list[str], config) -> LintReport:
    report = LintReport()
    for path in discover(paths, config):
        file_report = lint_file(path, config)
        logger.debug('%s: %d violation(s)', path, len(file_report.violations))
        report.add(file_report)
    return report
