import sys

import psutil

from cpu_profile.core.runtime import RuntimeInfo


def test_defaults_describe_current_interpreter():
    runtime = RuntimeInfo()

    assert runtime.release == sys.version_info.major * 100 + sys.version_info.minor
    assert runtime.version.startswith(f"{sys.version_info.major}.{sys.version_info.minor}")


def test_schedulable_threads_uses_affinity(monkeypatch):
    class FakeProcess:
        def cpu_affinity(self):
            return [0, 1, 2]

    monkeypatch.setattr(psutil, "Process", FakeProcess)

    assert RuntimeInfo().schedulable_threads() == 3


def test_schedulable_threads_without_affinity(monkeypatch):
    class FakeProcess:
        pass

    monkeypatch.setattr(psutil, "Process", FakeProcess)
    monkeypatch.setattr(psutil, "cpu_count", lambda logical=True: 12)

    assert RuntimeInfo().schedulable_threads() == 12


def test_schedulable_threads_is_never_zero(monkeypatch):
    class FakeProcess:
        pass

    monkeypatch.setattr(psutil, "Process", FakeProcess)
    monkeypatch.setattr(psutil, "cpu_count", lambda logical=True: None)

    assert RuntimeInfo().schedulable_threads() == 1
