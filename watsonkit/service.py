#
# WatsonKit
#
# Copyright (C) 2017 Boris Raicheff
# All rights reserved
#


import logging
from concurrent.futures import ThreadPoolExecutor
from http.client import UNAUTHORIZED

import requests

from .authentication import APIKeyAuthenticationStrategy, BasicAuthenticationStrategy
from .errors import WatsonApiException
from .mapping import decode, decode_list
from .rest import RestRequest, join_url


__all__ = ['WatsonService']


ACCEPTABLE = range(200, 300)

MAX_RETRIES = 1


class WatsonService(object):
    """
    Base class of every Watson service facade.

    A service holds one :class:`requests.Session`, one authentication strategy
    and a logger. Subclasses expose one method per REST operation; each builds
    a :class:`RestRequest` with :meth:`request`, sends it with :meth:`execute`
    and maps the JSON body with :meth:`decode`.

    :param url: service URL, defaults to :attr:`default_url`
    :param auth: an :class:`~watsonkit.authentication.AuthenticationStrategy`
    :param session: a :class:`requests.Session` to share connection pools
    :param logger: a :class:`logging.Logger`; defaults to ``WatsonKit.<name>``
    :param timeout: per request timeout in seconds
    :param opt_out: send ``X-Watson-Learning-Opt-Out``
    """

    #: Base URL of the service API
    default_url = None

    #: Suffix of the Flask config keys, e.g. ``TEXTTOSPEECH``
    config_prefix = None

    #: Error domain reported on :class:`WatsonApiException`
    domain = None

    #: Whether the service expects a ``version`` query parameter
    default_version = None

    token_url = None

    def __init__(self, url=None, auth=None, session=None, logger=None, timeout=60, opt_out=True,
                 version=None, username=None, password=None, api_key=None):
        self.url = url or self.default_url
        self.session = session or requests.Session()
        self.logger = logger or logging.getLogger('WatsonKit.{}'.format(type(self).__name__))
        self.timeout = timeout
        self.version = version or self.default_version
        self.auth = auth or self.make_auth(username, password, api_key)
        self.opt_out = opt_out
        self._executor = None

    def init_app(self, app, session=None):
        """Configure the service from ``WATSON_<PREFIX>_*`` keys of a Flask app."""
        prefix = 'WATSON_{}_'.format(self.config_prefix)
        config = app.config
        if session is not None:
            self.session = session
        self.url = config.get(prefix + 'URL', self.url)
        self.version = config.get(prefix + 'VERSION', self.version)
        self.timeout = config.get('WATSON_TIMEOUT', self.timeout)
        self.opt_out = config.get('WATSON_LEARNING_OPT_OUT', self.opt_out)
        auth = self.make_auth(
            config.get(prefix + 'USERNAME'),
            config.get(prefix + 'PASSWORD'),
            config.get(prefix + 'APIKEY'),
        )
        if auth is None:
            self.logger.error('WATSON_%s credentials not set', self.config_prefix)
            return False
        self.auth = auth
        return True

    def make_auth(self, username=None, password=None, api_key=None):
        if api_key:
            return APIKeyAuthenticationStrategy(api_key, session=self.session, timeout=self.timeout)
        if username and password:
            service_url = self.url.rsplit('/api', 1)[0] + '/api' if self.token_url else None
            return BasicAuthenticationStrategy(
                username, password, token_url=self.token_url, service_url=service_url,
                session=self.session, timeout=self.timeout)
        return None

    @property
    def default_headers(self):
        headers = {}
        if self.opt_out:
            headers['X-Watson-Learning-Opt-Out'] = '1'
        return headers

    def request(self, method, path='', params=None, headers=None, versioned=False, **kwargs):
        url = join_url(self.url, path)
        if versioned:
            params = {'version': self.version, **(params or {})}
        return RestRequest(method, url, headers={**self.default_headers, **(headers or {})}, params=params, **kwargs)

    def execute(self, request, acceptable=ACCEPTABLE):
        """
        Send ``request`` and return the :class:`requests.Response`.

        A missing token is fetched first. A ``401`` triggers one token refresh
        and one resend. Any other unacceptable status raises
        :class:`WatsonApiException`; transport errors propagate unchanged.
        """
        auth = self.auth
        try:
            if auth is not None and auth.requires_token and auth.token is None:
                auth.refresh_token()

            response = self._send(request)

            if response.status_code == UNAUTHORIZED and auth is not None and auth.requires_token:
                if auth.retries <= MAX_RETRIES:
                    self.logger.info('%s %s: token rejected, refreshing', request.method, request.url)
                    auth.refresh_token()
                    response = self._send(request)
        finally:
            if auth is not None:
                auth.retries = 0

        if response.status_code in acceptable:
            return response
        raise self.error_from_response(response)

    def _send(self, request):
        if self.auth is not None:
            self.auth.authenticate(request)
        prepared = request.prepare(self.session)
        response = self.session.send(prepared, timeout=self.timeout)
        self.logger.debug('%s %s -> %s', request.method, prepared.url, response.status_code)
        return response

    def error_from_response(self, response):
        return WatsonApiException.from_response(response, self.domain)

    def decode(self, model, response, path=()):
        return decode(model, self._json(response), path).unwrap()

    def decode_list(self, model, response, path=()):
        return decode_list(model, self._json(response), path).unwrap()

    def _json(self, response):
        try:
            return response.json()
        except ValueError:
            raise WatsonApiException(response.status_code, 'Response body is not valid JSON.',
                                     domain=self.domain, response=response)

    @property
    def executor(self):
        if self._executor is None:
            self._executor = ThreadPoolExecutor(thread_name_prefix=type(self).__name__)
        return self._executor

    def call_async(self, operation, *args, success=None, failure=None, **kwargs):
        """
        Run ``operation`` (a method of this service) on a worker thread.

        Exactly one of ``success(result)`` or ``failure(error)`` is invoked.
        The returned future resolves to the result, or to ``None`` after a
        failure.
        """

        def run():
            try:
                result = operation(*args, **kwargs)
            except Exception as error:
                self.logger.debug('%s failed: %s', getattr(operation, '__name__', operation), error)
                if failure is not None:
                    failure(error)
                return None
            if success is not None:
                success(result)
            return result

        return self.executor.submit(run)

    def close(self):
        if self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None
        self.session.close()


# EOF
