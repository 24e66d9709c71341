#
# WatsonKit
#
# Copyright (C) 2017 Boris Raicheff
# All rights reserved
#


import base64
import logging
import threading

import requests

from .errors import WatsonAuthenticationError
from .rest import USER_AGENT


__all__ = [
    'AuthenticationStrategy',
    'BasicAuthenticationStrategy',
    'APIKeyAuthenticationStrategy',
    'FacebookAuthenticationStrategy',
    'TokenAuthenticationStrategy',
]


logger = logging.getLogger('WatsonKit')


TOKEN_URL = 'https://stream.watsonplatform.net/authorization/api/v1/token'

TOKEN_HEADER = 'X-Watson-Authorization-Token'


class _Flight(object):

    def __init__(self):
        self.done = threading.Event()
        self.error = None


class AuthenticationStrategy(object):
    """
    Holds a credential and knows how to attach it to a request.

    Strategies that exchange their credential for a short-lived token
    (``requires_token``) refresh it through :meth:`refresh_token`. Concurrent
    refreshes are collapsed into a single network exchange: the first caller
    performs it and everyone else waits for its outcome.
    """

    requires_token = False

    def __init__(self, session=None, timeout=60):
        self.token = None
        self.retries = 0
        self.session = session or requests.Session()
        self.timeout = timeout
        self._lock = threading.Lock()
        self._flight = None

    @property
    def is_refreshing(self):
        return self._flight is not None

    def refresh_token(self):
        with self._lock:
            flight = self._flight
            leader = flight is None
            if leader:
                flight = self._flight = _Flight()
                self.retries += 1
        if leader:
            try:
                self.token = self.fetch_token()
                logger.info('%s: token refreshed', type(self).__name__)
            except Exception as error:
                self.token = None
                flight.error = error
            finally:
                with self._lock:
                    self._flight = None
                flight.done.set()
        else:
            flight.done.wait()
        if flight.error is not None:
            raise flight.error
        return self.token

    def fetch_token(self):
        return self.token

    def authenticate(self, request):
        raise NotImplementedError

    def _exchange(self, url, params, auth=None):
        headers = {'User-Agent': USER_AGENT}
        try:
            response = self.session.get(url, params=params, auth=auth, headers=headers, timeout=self.timeout)
        except requests.RequestException as error:
            raise WatsonAuthenticationError(message=str(error)) from error
        if response.status_code != 200:
            message = 'Token authentication failed.'
            try:
                message = response.json().get('description', message)
            except (ValueError, AttributeError):
                pass
            raise WatsonAuthenticationError(response.status_code, message)
        if not response.text:
            raise WatsonAuthenticationError(response.status_code, 'Expected token data to be received from server.')
        return response.text


class BasicAuthenticationStrategy(AuthenticationStrategy):
    """
    HTTP basic authentication.

    With a ``token_url`` the credentials are exchanged for a temporary Watson
    token, which is then sent in the ``X-Watson-Authorization-Token`` header.
    Without one, every request carries the ``Authorization: Basic`` header.
    """

    def __init__(self, username, password, token_url=None, service_url=None, **kwargs):
        super(BasicAuthenticationStrategy, self).__init__(**kwargs)
        self.username = username
        self.password = password
        self.token_url = token_url
        self.service_url = service_url

    @property
    def requires_token(self):
        return self.token_url is not None

    @property
    def credentials(self):
        userpass = '{}:{}'.format(self.username, self.password).encode('utf-8')
        return 'Basic ' + base64.b64encode(userpass).decode('ascii')

    def fetch_token(self):
        if self.token_url is None:
            return None
        params = {'url': self.service_url}
        return self._exchange(self.token_url, params, auth=(self.username, self.password))

    def authenticate(self, request):
        if self.token_url is not None and self.token is not None:
            request.headers[TOKEN_HEADER] = self.token
        else:
            request.headers['Authorization'] = self.credentials
        return request


class APIKeyAuthenticationStrategy(AuthenticationStrategy):
    """A static API key; the key is its own token and refreshing is a no-op."""

    def __init__(self, api_key, name='apikey', location='query', **kwargs):
        super(APIKeyAuthenticationStrategy, self).__init__(**kwargs)
        if location not in ('query', 'header'):
            raise ValueError('location must be "query" or "header"')
        self.api_key = api_key
        self.name = name
        self.location = location
        self.token = api_key

    def refresh_token(self):
        self.token = self.api_key
        return self.token

    def authenticate(self, request):
        if self.location == 'header':
            request.headers[self.name] = self.api_key
        else:
            request.params[self.name] = self.api_key
        return request


class FacebookAuthenticationStrategy(AuthenticationStrategy):
    """Exchange a Facebook OAuth token for a Watson token."""

    requires_token = True

    def __init__(self, token_url, fb_token, **kwargs):
        super(FacebookAuthenticationStrategy, self).__init__(**kwargs)
        self.token_url = token_url
        self.fb_token = fb_token

    def fetch_token(self):
        return self._exchange(self.token_url, {'fbtoken': self.fb_token})

    def authenticate(self, request):
        request.headers[TOKEN_HEADER] = self.token
        return request


class TokenAuthenticationStrategy(AuthenticationStrategy):
    """A Watson token obtained elsewhere, e.g. from a server-side ``get_token``."""

    def __init__(self, token, header=TOKEN_HEADER, **kwargs):
        super(TokenAuthenticationStrategy, self).__init__(**kwargs)
        self.token = token
        self.header = header

    def refresh_token(self):
        return self.token

    def authenticate(self, request):
        request.headers[self.header] = self.token
        return request


# EOF
