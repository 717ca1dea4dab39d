"""Shared pytest fixtures for redeye tests."""
from __future__ import annotations

import logging

import pytest

from redeye.parsers.apache import CombinedLogParser, CommonLogParser


@pytest.fixture()
def common_parser() -> CommonLogParser:
    return CommonLogParser()


@pytest.fixture()
def combined_parser() -> CombinedLogParser:
    return CombinedLogParser()


@pytest.fixture()
def common_log_lines() -> list[str]:
    return [
        '125.125.125.125 - dsmith [10/Oct/1999:21:15:05 +0500] "GET /index.html HTTP/1.0" 200 1043',
        '192.168.1.1 - - [01/Aug/2025:10:00:00 +0000] "GET /api/v1/health HTTP/1.1" 200 512',
        '10.0.0.1 - bob [01/Aug/2025:10:00:01 +0000] "POST /api/v1/jobs HTTP/1.1" 201 1024',
        '192.168.1.2 - - [01/Aug/2025:10:00:02 -0700] "GET /missing HTTP/1.1" 404 128',
    ]


@pytest.fixture()
def combined_log_lines() -> list[str]:
    return [
        '127.0.0.1 - frank [10/Oct/2000:13:55:36 -0700] "GET /apache_pb.gif HTTP/1.0" 200 2326 '
        '"http://www.example.com/start.html" "Mozilla/4.08 [en] (Win98; I ;Nav)"',
        '10.0.0.7 - - [01/Aug/2025:10:00:03 +0000] "GET /robots.txt HTTP/1.1" 404 0 "-" "-"',
    ]


@pytest.fixture(autouse=True)
def _reset_redeye_logger():
    """Drop handlers the CLI installs so later tests don't write to closed streams."""
    yield
    logger = logging.getLogger("redeye")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
