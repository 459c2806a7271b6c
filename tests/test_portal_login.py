"""Tests for the portal login."""

import pytest
import requests

from he_daily.helpers.exceptions import AuthenticationError
from he_daily.testers.portal_login import he_login, login_url


def _session_with_post(monkeypatch, status_code=200, cookies=(), error=None, calls=None, response_cls=None):
    session = requests.Session()

    def fake_post(url, data=None, **kwargs):
        if calls is not None:
            calls.append((url, data))
        if error is not None:
            raise error
        for name, domain in cookies:
            session.cookies.set(name, 'abc123', domain=domain, path='/')
        return response_cls(status_code=status_code)

    monkeypatch.setattr(session, 'post', fake_post)
    return session


def test_login_url(config_vars):
    assert login_url(config_vars) == 'https://ipv6.he.net/certification/login.php'


def test_login_ok_returns_session(monkeypatch, config_vars, file_logger, fake_response):
    calls = []
    session = _session_with_post(monkeypatch, cookies=[('PHPSESSID', 'ipv6.he.net')],
        calls=calls, response_cls=fake_response)

    result = he_login('user', 'pass', config_vars, file_logger, session=session)

    assert result is session
    assert calls == [('https://ipv6.he.net/certification/login.php', {'f_user': 'user', 'f_pass': 'pass'})]


def test_login_accepts_parent_domain_cookie(monkeypatch, config_vars, file_logger, fake_response):
    session = _session_with_post(monkeypatch, cookies=[('PHPSESSID', '.he.net')], response_cls=fake_response)

    assert he_login('user', 'pass', config_vars, file_logger, session=session) is session


def test_login_bad_status(monkeypatch, config_vars, file_logger, fake_response):
    session = _session_with_post(monkeypatch, status_code=403, cookies=[('PHPSESSID', 'ipv6.he.net')],
        response_cls=fake_response)

    with pytest.raises(AuthenticationError):
        he_login('user', 'pass', config_vars, file_logger, session=session)


def test_login_without_session_cookie(monkeypatch, config_vars, file_logger, fake_response):
    session = _session_with_post(monkeypatch, cookies=[('other', 'ipv6.he.net')], response_cls=fake_response)

    with pytest.raises(AuthenticationError) as exc_info:
        he_login('user', 'pass', config_vars, file_logger, session=session)

    assert 'PHPSESSID' in str(exc_info.value)


def test_login_cookie_for_other_site(monkeypatch, config_vars, file_logger, fake_response):
    session = _session_with_post(monkeypatch, cookies=[('PHPSESSID', 'example.com')], response_cls=fake_response)

    with pytest.raises(AuthenticationError):
        he_login('user', 'pass', config_vars, file_logger, session=session)


def test_login_transport_error(monkeypatch, config_vars, file_logger, fake_response):
    session = _session_with_post(monkeypatch, error=requests.exceptions.ConnectionError('no route'),
        response_cls=fake_response)

    with pytest.raises(AuthenticationError) as exc_info:
        he_login('user', 'pass', config_vars, file_logger, session=session)

    assert 'no route' in str(exc_info.value)
