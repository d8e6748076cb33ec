"""Unit tests for the logging setup helpers."""

import logging

import pytest

from voter_registry.logging import (
    SourceTagFilter,
    console_level_from_counts,
    flight_recorder_handler,
)


@pytest.mark.parametrize(
    ("verbose", "quiet", "expected"),
    [
        (0, 0, logging.WARNING),
        (1, 0, logging.INFO),
        (2, 0, logging.DEBUG),
        (5, 0, logging.DEBUG),
        (0, 1, logging.ERROR),
        (0, 9, logging.CRITICAL),
        (1, 1, logging.WARNING),
    ],
)
def test_console_level_from_counts(verbose: int, quiet: int, expected: int):
    assert console_level_from_counts(verbose, quiet) == expected


@pytest.mark.parametrize(
    ("name", "tag"),
    [
        ("voter_registry.service_layer.registry", ""),
        ("voter_registry", ""),
        ("sqlalchemy.engine.Engine", "[sqlalchemy]"),
        ("voter_registry_extras", "[voter_registry_extras]"),
    ],
)
def test_source_tag_filter(name: str, tag: str):
    """Only records from outside the project are tagged."""
    record = logging.LogRecord(name, logging.INFO, __file__, 1, "msg", None, None)

    assert SourceTagFilter().filter(record) is True
    assert record.source_tag == tag


def test_flight_recorder_dumps_on_warning(tmp_path):
    """Buffered DEBUG records reach the file once a WARNING arrives."""
    path = tmp_path / "recorder.log"
    handler = flight_recorder_handler(path, capacity=10)
    logger = logging.getLogger("voter_registry.tests.recorder")
    logger.propagate = False
    logger.setLevel(logging.DEBUG)
    logger.addHandler(handler)
    try:
        logger.debug("breadcrumb")
        assert not path.exists()

        logger.warning("something odd")
    finally:
        logger.removeHandler(handler)
        handler.close()

    content = path.read_text(encoding="utf-8")
    assert "breadcrumb" in content
    assert "something odd" in content
