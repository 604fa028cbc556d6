"""
reporters.py — Render a LintReport or the rule catalogue for the terminal.

  text — one 'path:line:col: CODE message' line per violation plus a summary
  json — the LintReport serialised by pydantic
"""

import json

from guidelint.checks import get_rule
from guidelint.schemas import LintReport, RuleInfo


def _plural(count: int, word: str) -> str:
    return f'{count} {word}' + ('' if count == 1 else 's')


def summary_line(report: LintReport) -> str:
    files = _plural(report.files_checked, 'file')
    if not report.violations:
        return f'All {files} passed.'
    found = _plural(len(report.violations), 'violation')
    files = _plural(report.files_with_violations, 'file')
    return f'Found {found} in {files}.'


def statistics_lines(report: LintReport) -> list[str]:
    lines = []
    for code, count in report.statistics.items():
        rule = get_rule(code)
        name = rule.name if rule else ''
        lines.append(f'{count:<6} {code}  {name}'.rstrip())
    return lines


def format_text(report: LintReport, statistics: bool = False) -> str:
    lines = [v.format() for v in report.violations]
    if statistics and report.violations:
        lines.append('')
        lines.extend(statistics_lines(report))
    lines.append(summary_line(report))
    return '\n'.join(lines)


def format_json(report: LintReport) -> str:
    return report.model_dump_json(indent=2)


def format_report(report: LintReport, output_format: str = 'text',
                  statistics: bool = False) -> str:
    if output_format == 'json':
        return format_json(report)
    return format_text(report, statistics=statistics)


def format_rules(rules: list[RuleInfo], output_format: str = 'text') -> str:
    if output_format == 'json':
        return json.dumps([rule.model_dump() for rule in rules], indent=2)

    width = max((len(rule.name) for rule in rules), default=0)
    lines = []
    section = None
    for rule in sorted(rules, key=lambda r: (r.section, r.code)):
        if rule.section != section:
            if section is not None:
                lines.append('')
            section = rule.section
            lines.append(f'[{section}]')
        lines.append(f'  {rule.code}  {rule.name:<{width}}  {rule.summary}')
    return '\n'.join(lines)
