"""
Log in to the Hurricane Electric IPv6 certification portal
"""
from urllib.parse import urlparse

import requests

from he_daily.helpers.exceptions import AuthenticationError


def login_url(config_vars):
    return "{}/certification/login.php".format(config_vars['portal_url'])


def _has_session_cookie(session, cookie_name, portal_host):
    '''
    Check the cookie jar for a session cookie that would be sent to the portal
    '''
    for cookie in session.cookies:

        if cookie.name != cookie_name:
            continue

        cookie_domain = cookie.domain.lstrip('.')

        if not cookie_domain or portal_host == cookie_domain or portal_host.endswith('.' + cookie_domain):
            return True

    return False


def he_login(username, password, config_vars, file_logger, session=None):
    '''
    Log in to the portal and return a requests session carrying the login
    cookie. The session is then used read-only for all result submissions.

    Raises AuthenticationError if the post fails, the portal does not answer
    with a 200 or no session cookie is set.
    '''
    if session is None:
        session = requests.Session()

    url = login_url(config_vars)
    cookie_name = config_vars['session_cookie']
    portal_host = urlparse(config_vars['portal_url']).hostname or ''

    form_data = {
        'f_user': username,
        'f_pass': password,
    }

    file_logger.info("Logging in to certification portal as: {}".format(username))
    file_logger.debug("  Login URL: {}".format(url))

    try:
        response = session.post(url, data=form_data, timeout=config_vars.get('http_timeout'))
    except requests.exceptions.RequestException as err:
        raise AuthenticationError("Failed to login. http error occurred: {}".format(err))

    if response.status_code != 200:
        raise AuthenticationError("Failed to login. Got '{} {}' response.".format(response.status_code, response.reason))

    if not _has_session_cookie(session, cookie_name, portal_host):
        raise AuthenticationError("Failed to login. Couldn't find a session ID ({}) in response".format(cookie_name))

    file_logger.info("  Login OK.")

    return session
