"""Shared fixtures: a recording progress sink and a fixed game version."""

import pytest

from kspver.progress import ConfigSource, PatchProgress
from kspver.versioning import GameVersion


class RecordingProgress(PatchProgress):
    """PatchProgress fake that records every call in order."""

    def __init__(self):
        self.events = []

    def warning(self, source, message):
        self.events.append(("warning", source, message))

    def error(self, source, message):
        self.events.append(("error", source, message))

    def exception(self, message, error):
        self.events.append(("exception", message, error))

    def ksp_version_unsatisfied_root(self, source):
        self.events.append(("ksp_version_unsatisfied_root", source))

    def ksp_version_unsatisfied_node(self, source, path):
        self.events.append(("ksp_version_unsatisfied_node", source, path))

    def ksp_version_unsatisfied_value(self, source, path):
        self.events.append(("ksp_version_unsatisfied_value", source, path))

    def needs_unsatisfied_root(self, source):
        self.events.append(("needs_unsatisfied_root", source))

    def of_kind(self, kind):
        return [e for e in self.events if e[0] == kind]


@pytest.fixture
def progress():
    return RecordingProgress()


@pytest.fixture
def source():
    return ConfigSource("GameData/Example/part.cfg")


@pytest.fixture
def game_version():
    return GameVersion(1, 8, 1)
