"""Shared fixtures for the he_daily tests."""

import logging

import pytest


@pytest.fixture
def file_logger():
    logger = logging.getLogger("HE_Daily_test")
    logger.setLevel(logging.DEBUG)
    return logger


@pytest.fixture
def config_vars():
    return {
        'portal_url': 'https://ipv6.he.net',
        'session_cookie': 'PHPSESSID',
        'log_file': '',
        'debug': 'off',
        'dry_run': 'no',
        'command_failure': 'skip',
        'http_timeout': None,
        'max_attempts': 26,
        'sites_file': '',
    }


class FakeResponse(object):

    def __init__(self, status_code=200, reason='OK'):
        self.status_code = status_code
        self.reason = reason


@pytest.fixture
def fake_response():
    return FakeResponse
