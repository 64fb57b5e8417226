import logging

import pytest

from cpu_profile.core.logger import LOGGER_NAME
from cpu_profile.core.runner import CommandResult, CommandRunner
from cpu_profile.core.runtime import RuntimeInfo


class FakeRunner(CommandRunner):
    """
    CommandRunner scripté : aucune commande réelle n'est lancée

    Args:
        responses: {(commande, arg1, ...): sortie ou (sortie, code)}
        available: Commandes présentes dans le PATH (toutes si None)
    """

    def __init__(self, responses=None, available=None):
        super().__init__(timeout=1)
        self.responses = dict(responses or {})
        self.available = available
        self.calls = []

    def which(self, command):
        if self.available is None or command in self.available:
            return f"/usr/bin/{command}"
        return None

    def run(self, command, args=()):
        key = (command,) + tuple(args)
        self.calls.append(key)
        response = self.responses.get(key, ("", 1))
        if isinstance(response, str):
            response = (response, 0)
        stdout, exit_status = response
        return CommandResult(command, args, stdout, exit_status)


class FakeRuntime(RuntimeInfo):
    def __init__(self, threads=6):
        super().__init__(release=312, version="3.12.1")
        self.threads = threads

    def schedulable_threads(self):
        return self.threads


@pytest.fixture
def fake_runtime():
    return FakeRuntime()


@pytest.fixture
def make_runner():
    def _make(responses=None, available=None):
        return FakeRunner(responses, available)
    return _make


@pytest.fixture(autouse=True)
def reset_profile_logger():
    """Retire les handlers installés par ProfileLogger entre deux tests"""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
