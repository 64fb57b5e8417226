import subprocess
import sys

import pytest

from cpu_profile.core import runner as runner_module
from cpu_profile.core.errors import CommandExecutionError, ToolNotFoundError
from cpu_profile.core.runner import CommandRunner


class Completed:
    def __init__(self, stdout="", returncode=0):
        self.stdout = stdout
        self.returncode = returncode


@pytest.fixture
def recorded_run(monkeypatch):
    calls = []

    def _install(result=None, exception=None):
        def fake_run(argv, **kwargs):
            calls.append((argv, kwargs))
            if exception is not None:
                raise exception
            return result
        monkeypatch.setattr(runner_module.subprocess, "run", fake_run)
        return calls

    return _install


def test_run_uses_argument_vector(recorded_run):
    calls = recorded_run(Completed("x86_64\n"))

    result = CommandRunner(timeout=10).run('uname', ['-m'])

    argv, kwargs = calls[0]
    assert argv == ['uname', '-m']
    assert 'shell' not in kwargs
    assert kwargs['timeout'] == 10
    assert kwargs['capture_output'] is True
    assert kwargs['encoding'] == 'utf-8'
    assert kwargs['errors'] == 'replace'
    assert result.ok
    assert result.stdout == "x86_64\n"


def test_zero_timeout_means_unbounded(recorded_run):
    calls = recorded_run(Completed())

    CommandRunner(timeout=0).run('uname')

    assert calls[0][1]['timeout'] is None


def test_run_checked_raises_on_non_zero_exit(recorded_run):
    recorded_run(Completed("", 2))

    with pytest.raises(CommandExecutionError) as excinfo:
        CommandRunner().run_checked('sysctl', ['-n', 'hw.model'])

    assert excinfo.value.command == 'sysctl'
    assert excinfo.value.exit_status == 2
    assert excinfo.value.timed_out is False


def test_timeout_is_command_execution_error(recorded_run):
    recorded_run(exception=subprocess.TimeoutExpired(['system_profiler'], 30))

    with pytest.raises(CommandExecutionError) as excinfo:
        CommandRunner().run('system_profiler', ['SPHardwareDataType'])

    assert excinfo.value.timed_out is True
    assert excinfo.value.exit_status is None


def test_spawn_failure_is_command_execution_error(recorded_run):
    recorded_run(exception=FileNotFoundError("uname"))

    with pytest.raises(CommandExecutionError) as excinfo:
        CommandRunner().run('uname', ['-r'])

    assert excinfo.value.exit_status is None


def test_ensure_available_names_missing_command(monkeypatch):
    monkeypatch.setattr(runner_module.shutil, "which",
                        lambda command: None if command == 'sysctl' else f"/bin/{command}")

    with pytest.raises(ToolNotFoundError) as excinfo:
        CommandRunner().ensure_available('uname', 'sysctl')

    assert excinfo.value.command == 'sysctl'
    assert 'sysctl' in str(excinfo.value)


def test_ensure_available_passes(monkeypatch):
    monkeypatch.setattr(runner_module.shutil, "which", lambda command: f"/bin/{command}")

    CommandRunner().ensure_available('uname', 'cat')


def test_invalid_utf8_output_is_replaced():
    script = "import sys; sys.stdout.buffer.write(b'Debian \\xe9\\n')"

    result = CommandRunner(timeout=30).run(sys.executable, ['-c', script])

    assert result.ok
    assert result.stdout == "Debian �\n"
