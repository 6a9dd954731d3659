"""
Progress reporting for version checks.

The checker never prints or decides how problems are displayed. It
reports every removal, diagnostic and failure to a PatchProgress sink:

    - PatchProgress: the abstract sink interface
    - LoggingPatchProgress: production sink writing to `logging`
    - ProgressCounter: running totals kept by the logging sink

IMPORTANT:
    Sink methods are called mid-traversal and must not raise.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConfigSource:
    """
    Identifies the configuration a tree came from (e.g. a file URL).

    Properties:
        url: Identifier shown in reports
    """

    url: str

    def __str__(self) -> str:
        return self.url


class PatchProgress(ABC):
    """Sink for everything the checker wants to tell the user."""

    @abstractmethod
    def warning(self, source: ConfigSource, message: str) -> None:
        ...

    @abstractmethod
    def error(self, source: ConfigSource, message: str) -> None:
        ...

    @abstractmethod
    def exception(self, message: str, error: BaseException) -> None:
        ...

    @abstractmethod
    def ksp_version_unsatisfied_root(self, source: ConfigSource) -> None:
        ...

    @abstractmethod
    def ksp_version_unsatisfied_node(self, source: ConfigSource, path: str) -> None:
        ...

    @abstractmethod
    def ksp_version_unsatisfied_value(self, source: ConfigSource, path: str) -> None:
        ...

    @abstractmethod
    def needs_unsatisfied_root(self, source: ConfigSource) -> None:
        ...


@dataclass
class ProgressCounter:
    """Running totals of reported events."""
    warnings: int = 0
    errors: int = 0
    exceptions: int = 0
    ksp_version_unsatisfied: int = 0
    needs_unsatisfied: int = 0

    def summary(self) -> str:
        return (
            f"{self.ksp_version_unsatisfied} removed by KSP_VERSION, "
            f"{self.needs_unsatisfied} removed by NEEDS, "
            f"{self.warnings} warning(s), {self.errors} error(s), "
            f"{self.exceptions} exception(s)"
        )


class LoggingPatchProgress(PatchProgress):
    """PatchProgress that logs every event and keeps a ProgressCounter."""

    def __init__(self, counter: ProgressCounter | None = None):
        self.counter = counter if counter is not None else ProgressCounter()

    def warning(self, source: ConfigSource, message: str) -> None:
        self.counter.warnings += 1
        logger.warning(f"{source}: {message}")

    def error(self, source: ConfigSource, message: str) -> None:
        self.counter.errors += 1
        logger.error(f"{source}: {message}")

    def exception(self, message: str, error: BaseException) -> None:
        self.counter.exceptions += 1
        logger.error(message, exc_info=error)

    def ksp_version_unsatisfied_root(self, source: ConfigSource) -> None:
        self.counter.ksp_version_unsatisfied += 1
        logger.info(f"Deleting root node in file {source} as it can't satisfy its KSP_VERSION")

    def ksp_version_unsatisfied_node(self, source: ConfigSource, path: str) -> None:
        self.counter.ksp_version_unsatisfied += 1
        logger.info(f"Deleting node in file {source} subnode: {path} as it can't satisfy its KSP_VERSION")

    def ksp_version_unsatisfied_value(self, source: ConfigSource, path: str) -> None:
        self.counter.ksp_version_unsatisfied += 1
        logger.info(f"Deleting value in file {source} value: {path} as it can't satisfy its KSP_VERSION")

    def needs_unsatisfied_root(self, source: ConfigSource) -> None:
        self.counter.needs_unsatisfied += 1
        logger.info(f"Deleting root node in file {source} as it can't satisfy its NEEDS")
