"""
Tests for the logging progress sink and its counters.
"""

import logging

from kspver.progress import ConfigSource, LoggingPatchProgress, ProgressCounter


SOURCE = ConfigSource("GameData/Example/part.cfg")


def test_config_source_str():
    assert str(SOURCE) == "GameData/Example/part.cfg"


def test_counts_unsatisfied_events(caplog):
    progress = LoggingPatchProgress()
    with caplog.at_level(logging.INFO, logger="kspver.progress"):
        progress.ksp_version_unsatisfied_node(SOURCE, "PART/MODULE:KSP_VERSION[2.0]")
        progress.ksp_version_unsatisfied_value(SOURCE, "PART/mass:KSP_VERSION[2.0]")
        progress.ksp_version_unsatisfied_root(SOURCE)
        progress.needs_unsatisfied_root(SOURCE)

    assert progress.counter.ksp_version_unsatisfied == 3
    assert progress.counter.needs_unsatisfied == 1
    assert "PART/MODULE:KSP_VERSION[2.0]" in caplog.text
    assert "can't satisfy its NEEDS" in caplog.text


def test_warning_and_error(caplog):
    progress = LoggingPatchProgress()
    with caplog.at_level(logging.WARNING, logger="kspver.progress"):
        progress.warning(SOURCE, "odd value")
        progress.error(SOURCE, "node has no name")

    assert progress.counter.warnings == 1
    assert progress.counter.errors == 1
    levels = [r.levelno for r in caplog.records]
    assert levels == [logging.WARNING, logging.ERROR]
    assert "GameData/Example/part.cfg: node has no name" in caplog.text


def test_exception_logged_with_traceback(caplog):
    progress = LoggingPatchProgress()
    try:
        raise ValueError("boom")
    except ValueError as e:
        error = e

    with caplog.at_level(logging.ERROR, logger="kspver.progress"):
        progress.exception("Exception while checking KSP_VERSION", error)

    assert progress.counter.exceptions == 1
    assert caplog.records[0].exc_info[1] is error


def test_shared_counter():
    counter = ProgressCounter()
    LoggingPatchProgress(counter).warning(SOURCE, "a")
    LoggingPatchProgress(counter).warning(SOURCE, "b")
    assert counter.warnings == 2


def test_summary():
    counter = ProgressCounter(ksp_version_unsatisfied=2, errors=1)
    assert counter.summary() == (
        "2 removed by KSP_VERSION, 0 removed by NEEDS, "
        "0 warning(s), 1 error(s), 0 exception(s)"
    )
