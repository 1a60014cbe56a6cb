"""
Tests for CLI module
"""

import json
import pytest
from unittest.mock import Mock, patch

from deskopen import desktop
from deskopen.cli import CLI, main
from deskopen.exceptions import QueryError
from deskopen.models import DetectionResult
from deskopen.strategies import OtherStrategy


@pytest.fixture
def cli():
    """Create CLI instance"""
    return CLI()


@pytest.fixture
def strategy():
    """Install a strategy with mocked queries"""
    strategy = OtherStrategy()
    strategy.detect = Mock(return_value=DetectionResult.detected(True, 'environment'))
    strategy.browser_command = Mock(return_value=['/usr/bin/xdg-open', 'https://example.com'])
    strategy.open_command = Mock(return_value=['/usr/bin/xdg-open', '/tmp/x.pdf'])
    desktop.set_strategy(strategy)
    return strategy


class TestCLIRun:
    """Test CLI run method"""

    def test_run_no_args_shows_help(self, cli, capsys):
        assert cli.run([]) == 1
        assert 'usage: deskopen' in capsys.readouterr().out

    def test_run_with_help_flag(self, cli):
        with pytest.raises(SystemExit) as exc_info:
            cli.run(['--help'])
        assert exc_info.value.code == 0

    def test_run_with_version_flag(self, cli, capsys):
        with pytest.raises(SystemExit) as exc_info:
            cli.run(['--version'])
        assert exc_info.value.code == 0
        assert 'deskopen v' in capsys.readouterr().out

    def test_run_color_only_shows_help(self, cli):
        assert cli.run(['--color', 'never']) == 1

    def test_unknown_command(self, cli):
        with pytest.raises(SystemExit) as exc_info:
            cli.run(['frobnicate'])
        assert exc_info.value.code == 2

    def test_keyboard_interrupt(self, cli, strategy, capsys):
        strategy.detect.side_effect = KeyboardInterrupt
        assert cli.run(['check']) == 130
        assert 'Aborted' in capsys.readouterr().err

    def test_main_exits(self):
        with patch('sys.argv', ['deskopen']):
            with pytest.raises(SystemExit) as exc_info:
                main()
        assert exc_info.value.code == 1


class TestCheck:
    """Test check command"""

    def test_available(self, cli, strategy, capsys):
        assert cli.run(['check']) == 0
        assert 'Desktop available' in capsys.readouterr().out

    def test_not_available(self, cli, strategy, capsys):
        strategy.detect.return_value = DetectionResult.detected(False, 'environment')
        assert cli.run(['check']) == 1
        assert 'No desktop available' in capsys.readouterr().out

    def test_quiet(self, cli, strategy, capsys):
        assert cli.run(['check', '-q']) == 0
        assert capsys.readouterr().out == ''

    def test_query_error(self, cli, strategy, capsys):
        strategy.detect.side_effect = QueryError('GetProcessWindowStation', 5)
        assert cli.run(['check']) == 2
        assert 'GetProcessWindowStation failed' in capsys.readouterr().err

    def test_query_error_assume_no_desktop(self, cli, strategy, capsys):
        strategy.detect.side_effect = QueryError('GetProcessWindowStation', 5)
        assert cli.run(['check', '--assume-no-desktop']) == 1
        assert 'assuming no desktop' in capsys.readouterr().out

    def test_inconclusive_result(self, cli, strategy, capsys):
        strategy.detect.return_value = DetectionResult.query_error(-60500, 'SessionGetInfo')
        assert cli.run(['check']) == 2
        assert '-60500' in capsys.readouterr().err

    def test_inconclusive_result_assume_no_desktop(self, cli, strategy):
        strategy.detect.return_value = DetectionResult.query_error(-60500, 'SessionGetInfo')
        assert cli.run(['check', '-q', '--assume-no-desktop']) == 1


class TestLaunchCommands:
    """Test browse and open commands"""

    @patch('deskopen.strategies.run_helper', return_value=True)
    def test_browse(self, mock_run_helper, cli, strategy):
        assert cli.run(['browse', 'https://example.com']) == 0
        mock_run_helper.assert_called_once_with(['/usr/bin/xdg-open', 'https://example.com'])

    @patch('deskopen.strategies.run_helper', return_value=False)
    def test_browse_failure(self, mock_run_helper, cli, strategy):
        assert cli.run(['browse', 'https://example.com']) == 1

    @patch('deskopen.strategies.run_helper', return_value=True)
    def test_open(self, mock_run_helper, cli, strategy):
        assert cli.run(['open', '/tmp/x.pdf']) == 0
        strategy.open_command.assert_called_with('/tmp/x.pdf')

    @patch('deskopen.strategies.run_helper')
    def test_dry_run(self, mock_run_helper, cli, strategy, capsys):
        strategy.browser_command.return_value = ['/usr/bin/firefox', 'https://example.com/a b']
        assert cli.run(['browse', '--dry-run', 'https://example.com/a b']) == 0
        assert capsys.readouterr().out.strip() == "/usr/bin/firefox 'https://example.com/a b'"
        mock_run_helper.assert_not_called()

    @patch('deskopen.strategies.run_helper')
    def test_dry_run_no_handler(self, mock_run_helper, cli, strategy, capsys):
        strategy.open_command.return_value = None
        assert cli.run(['open', '-n', '/tmp/x.pdf']) == 1
        assert 'Cannot find an application to open /tmp/x.pdf' in capsys.readouterr().err
        mock_run_helper.assert_not_called()

    @patch('deskopen.strategies.run_helper')
    def test_require_desktop_refuses(self, mock_run_helper, cli, strategy, capsys):
        strategy.detect.return_value = DetectionResult.detected(False, 'environment')
        assert cli.run(['browse', '--require-desktop', 'https://example.com']) == 1
        assert 'No desktop environment available' in capsys.readouterr().err
        mock_run_helper.assert_not_called()

    @patch('deskopen.strategies.run_helper', return_value=True)
    def test_require_desktop_passes(self, mock_run_helper, cli, strategy):
        assert cli.run(['open', '--require-desktop', '/tmp/x.pdf']) == 0

    def test_require_desktop_query_error(self, cli, strategy, capsys):
        strategy.detect.side_effect = QueryError('GetUserObjectInformationA', 6)
        assert cli.run(['browse', '--require-desktop', 'https://example.com']) == 1
        assert 'Error: GetUserObjectInformationA failed' in capsys.readouterr().err


class TestInfo:
    """Test info command"""

    def test_info(self, cli, strategy, capsys):
        assert cli.run(['info']) == 0
        out = capsys.readouterr().out
        assert 'Platform: other' in out
        assert 'Desktop: available (environment)' in out
        assert 'Browser: /usr/bin/xdg-open' in out

    def test_info_no_handlers(self, cli, strategy, capsys):
        strategy.browser_command.return_value = None
        strategy.open_command.return_value = None
        assert cli.run(['info']) == 0
        out = capsys.readouterr().out
        assert 'Browser: none found' in out
        assert 'Opener: none found' in out

    def test_info_query_error(self, cli, strategy, capsys):
        strategy.detect.side_effect = QueryError('GetProcessWindowStation', 5)
        assert cli.run(['info']) == 0
        assert 'query failed' in capsys.readouterr().out

    def test_info_inconclusive(self, cli, strategy, capsys):
        strategy.detect.return_value = DetectionResult.query_error(-60500, 'SessionGetInfo')
        assert cli.run(['info']) == 0
        assert 'status -60500' in capsys.readouterr().out


    def test_info_json(self, cli, strategy, capsys):
        strategy.detect.return_value = DetectionResult.detected(False, 'environment')
        assert cli.run(['info', '--json']) == 0
        info = json.loads(capsys.readouterr().out)
        assert info['platform'] == 'other'
        assert info['desktop'] == {'available': False, 'method': 'environment',
                                   'error_code': None}
        assert info['query_error'] is None
        assert info['browser'] == ['/usr/bin/xdg-open', 'https://example.com']

    def test_info_json_query_error(self, cli, strategy, capsys):
        strategy.detect.side_effect = QueryError('GetProcessWindowStation', 5)
        strategy.open_command.return_value = None
        assert cli.run(['info', '--json']) == 0
        info = json.loads(capsys.readouterr().out)
        assert info['desktop'] is None
        assert info['query_error'] == 'GetProcessWindowStation failed (error 5)'
        assert info['opener'] is None


class TestColor:
    """Test color selection"""

    def test_color_always(self, cli, strategy, capsys):
        cli.run(['--color', 'always', 'check'])
        assert '\033[' in capsys.readouterr().out

    def test_color_from_environment(self, cli, strategy, capsys, monkeypatch):
        monkeypatch.setenv('DESKOPEN_COLOR', 'always')
        cli.run(['check'])
        assert '\033[' in capsys.readouterr().out

    def test_color_flag_wins(self, cli, strategy, capsys, monkeypatch):
        monkeypatch.setenv('DESKOPEN_COLOR', 'always')
        cli.run(['--color', 'never', 'check'])
        assert '\033[' not in capsys.readouterr().out
