"""
Tests for the click command-line interface
"""

import json
import logging

import pytest
from click.testing import CliRunner

from guidelint import __version__
from guidelint.cli import EXIT_ERROR, EXIT_OK, EXIT_VIOLATIONS, cli


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def project(tmp_path, monkeypatch):
    """A throwaway project directory used as the working directory"""
    (tmp_path / 'pyproject.toml').write_text('[tool.guidelint]\nignore = ["D"]\n')
    (tmp_path / 'clean.py').write_text("greeting = 'hello'\n")
    monkeypatch.chdir(tmp_path)
    return tmp_path


class TestCheckCommand:
    """guidelint check"""

    def test_clean_project(self, runner, project):
        result = runner.invoke(cli, ['check'])
        assert result.exit_code == EXIT_OK
        assert 'All 1 file passed.' in result.output

    def test_violations_exit_one(self, runner, project):
        (project / 'bad.py').write_text('greeting = "hello"\n')
        result = runner.invoke(cli, ['check', '.'])
        assert result.exit_code == EXIT_VIOLATIONS
        assert 'bad.py:1:12: Q001' in result.output
        assert 'Found 1 violation in 1 file.' in result.output

    def test_exit_zero(self, runner, project):
        (project / 'bad.py').write_text('greeting = "hello"\n')
        result = runner.invoke(cli, ['check', '--exit-zero'])
        assert result.exit_code == EXIT_OK

    def test_command_line_overrides_pyproject(self, runner, project):
        (project / 'bad.py').write_text('greeting = "hello"\n')
        result = runner.invoke(cli, ['check', '--quote-style', 'double', 'bad.py'])
        assert result.exit_code == EXIT_OK

    def test_select_and_ignore(self, runner, project):
        (project / 'bad.py').write_text('import os, sys\ngreeting = "hello"\n')
        result = runner.invoke(cli, ['check', '--select', 'I,Q', '--ignore', 'Q001'])
        assert result.exit_code == EXIT_VIOLATIONS
        assert 'I002' in result.output
        assert 'Q001' not in result.output

    def test_max_line_length(self, runner, project):
        (project / 'long.py').write_text("message = 'this line is long'\n")
        result = runner.invoke(cli, ['check', '--max-line-length', '20', 'long.py'])
        assert result.exit_code == EXIT_VIOLATIONS
        assert 'long.py:1:21: L001 line too long (29 > 20 characters)' in result.output

    def test_max_line_length_out_of_range(self, runner, project):
        result = runner.invoke(cli, ['check', '--max-line-length', '5'])
        assert result.exit_code == EXIT_ERROR
        assert 'max_line_length' in result.output

    def test_json_format(self, runner, project):
        (project / 'bad.py').write_text('greeting = "hello"\n')
        result = runner.invoke(cli, ['check', '--format', 'json', 'bad.py'])
        data = json.loads(result.output)
        assert data['statistics'] == {'Q001': 1}
        assert data['violations'][0]['path'] == 'bad.py'

    def test_statistics(self, runner, project):
        (project / 'bad.py').write_text('a = "x"\nb = "y"\n')
        result = runner.invoke(cli, ['check', '--statistics'])
        assert 'string-quotes' in result.output

    def test_missing_path_exits_two(self, runner, project):
        result = runner.invoke(cli, ['check', 'does-not-exist'])
        assert result.exit_code == EXIT_ERROR
        assert 'No such file or directory: does-not-exist' in result.output

    def test_invalid_config_exits_two(self, runner, project):
        (project / 'pyproject.toml').write_text('[tool.guidelint]\nquote-style = "fancy"\n')
        result = runner.invoke(cli, ['check'])
        assert result.exit_code == EXIT_ERROR
        assert 'quote_style' in result.output

    def test_environment_configuration(self, runner, project, monkeypatch):
        (project / 'bad.py').write_text("greeting = 'hello'\n")
        monkeypatch.setenv('GUIDELINT_QUOTE_STYLE', 'double')
        result = runner.invoke(cli, ['check', 'bad.py'])
        assert result.exit_code == EXIT_VIOLATIONS

    def test_log_level_from_dotenv(self, runner, project, monkeypatch):
        (project / '.env').write_text('GUIDELINT_LOG_LEVEL=debug\n')
        calls = []
        monkeypatch.setattr(logging, 'basicConfig', lambda **kwargs: calls.append(kwargs))
        result = runner.invoke(cli, ['check', 'clean.py'])
        assert result.exit_code == EXIT_OK
        assert calls[0]['level'] == logging.DEBUG


class TestRulesCommand:
    """guidelint rules / --version"""

    def test_rules_text(self, runner):
        result = runner.invoke(cli, ['rules'])
        assert result.exit_code == 0
        assert '[naming]' in result.output
        assert 'P001' in result.output

    def test_rules_json(self, runner):
        result = runner.invoke(cli, ['rules', '--format', 'json'])
        codes = [rule['code'] for rule in json.loads(result.output)]
        assert codes == sorted(codes)
        assert 'E999' in codes

    def test_version(self, runner):
        result = runner.invoke(cli, ['--version'])
        assert __version__ in result.output
