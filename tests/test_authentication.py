"""
Tests for the authentication strategies.
"""
import base64
import threading
import time
from urllib.parse import parse_qs, urlsplit

import pytest

from watsonkit.authentication import (
    TOKEN_HEADER,
    APIKeyAuthenticationStrategy,
    BasicAuthenticationStrategy,
    FacebookAuthenticationStrategy,
    TokenAuthenticationStrategy,
)
from watsonkit.errors import WatsonAuthenticationError
from watsonkit.rest import RestRequest


def make_request():
    return RestRequest('GET', 'https://example.com/api/v1/voices')


class TestAPIKeyAuthentication:

    def test_token_equals_key(self):
        auth = APIKeyAuthenticationStrategy('secret-key')
        assert auth.token == 'secret-key'
        assert auth.requires_token is False

    def test_refresh_is_idempotent_and_never_errors(self):
        auth = APIKeyAuthenticationStrategy('secret-key')
        assert auth.refresh_token() == 'secret-key'
        assert auth.refresh_token() == 'secret-key'
        assert auth.token == 'secret-key'
        assert auth.is_refreshing is False

    def test_attaches_query_parameter(self):
        request = APIKeyAuthenticationStrategy('k', name='api_key').authenticate(make_request())
        assert request.params['api_key'] == 'k'

    def test_attaches_header(self):
        request = APIKeyAuthenticationStrategy('k', name='X-Api-Key', location='header').authenticate(make_request())
        assert request.headers['X-Api-Key'] == 'k'

    def test_rejects_unknown_location(self):
        with pytest.raises(ValueError):
            APIKeyAuthenticationStrategy('k', location='cookie')


class TestBasicAuthentication:

    def test_attaches_basic_header_without_token_url(self):
        auth = BasicAuthenticationStrategy('user', 'pass')
        request = auth.authenticate(make_request())
        expected = 'Basic ' + base64.b64encode(b'user:pass').decode()
        assert request.headers['Authorization'] == expected
        assert auth.requires_token is False

    def test_exchanges_credentials_for_token(self, session):
        session.respond(text='watson-token')
        auth = BasicAuthenticationStrategy(
            'user', 'pass', token_url='https://example.com/authorization/api/v1/token',
            service_url='https://example.com/text-to-speech/api', session=session)

        assert auth.refresh_token() == 'watson-token'
        assert auth.token == 'watson-token'
        assert auth.retries == 1

        sent = session.last
        assert parse_qs(urlsplit(sent.url).query) == {'url': ['https://example.com/text-to-speech/api']}
        assert sent.headers['Authorization'].startswith('Basic ')

        request = auth.authenticate(make_request())
        assert request.headers[TOKEN_HEADER] == 'watson-token'

    def test_bad_credentials_leave_token_unset(self, session):
        session.respond(401, json_body={'code': 401, 'description': 'Not Authorized'})
        auth = BasicAuthenticationStrategy('user', 'wrong', token_url='https://example.com/token', session=session)

        with pytest.raises(WatsonAuthenticationError) as excinfo:
            auth.refresh_token()

        assert auth.token is None
        assert excinfo.value.code == 401
        assert excinfo.value.message == 'Not Authorized'
        assert auth.is_refreshing is False

    def test_default_error_message(self, session):
        session.respond(500, text='oops')
        auth = BasicAuthenticationStrategy('user', 'pass', token_url='https://example.com/token', session=session)
        with pytest.raises(WatsonAuthenticationError, match='Token authentication failed.'):
            auth.refresh_token()


class TestFacebookAuthentication:

    def test_exchanges_facebook_token(self, session):
        session.respond(text='watson-token')
        auth = FacebookAuthenticationStrategy('https://example.com/token', 'fb-token', session=session)

        auth.refresh_token()

        assert auth.token == 'watson-token'
        assert parse_qs(urlsplit(session.last.url).query) == {'fbtoken': ['fb-token']}
        assert auth.authenticate(make_request()).headers[TOKEN_HEADER] == 'watson-token'

    def test_bogus_facebook_token(self, session):
        session.respond(401, text='Unauthorized')
        auth = FacebookAuthenticationStrategy('https://example.com/token', 'SomeBogusOAuthTokenGoesHere',
                                              session=session)
        with pytest.raises(WatsonAuthenticationError):
            auth.refresh_token()
        assert auth.token is None


class TestTokenAuthentication:

    def test_static_token(self):
        auth = TokenAuthenticationStrategy('abc')
        assert auth.refresh_token() == 'abc'
        assert auth.authenticate(make_request()).headers[TOKEN_HEADER] == 'abc'


class SlowStrategy(BasicAuthenticationStrategy):

    def __init__(self):
        super().__init__('user', 'pass', token_url='https://example.com/token')
        self.calls = 0
        self.started = threading.Event()
        self.error = None

    def fetch_token(self):
        self.calls += 1
        self.started.set()
        time.sleep(0.2)
        if self.error is not None:
            raise self.error
        return 'token-{}'.format(self.calls)


class TestSingleFlightRefresh:

    def run_concurrently(self, auth, count=5):
        results, errors = [], []

        def refresh():
            try:
                results.append(auth.refresh_token())
            except Exception as error:
                errors.append(error)

        threads = [threading.Thread(target=refresh) for _ in range(count)]
        threads[0].start()
        auth.started.wait(1)
        for thread in threads[1:]:
            thread.start()
        for thread in threads:
            thread.join(2)
        return results, errors

    def test_concurrent_refreshes_share_one_exchange(self):
        auth = SlowStrategy()
        results, errors = self.run_concurrently(auth)
        assert auth.calls == 1
        assert results == ['token-1'] * 5
        assert errors == []
        assert auth.is_refreshing is False

    def test_concurrent_waiters_observe_the_same_error(self):
        auth = SlowStrategy()
        auth.error = WatsonAuthenticationError(401)
        results, errors = self.run_concurrently(auth, count=3)
        assert auth.calls == 1
        assert results == []
        assert len(errors) == 3
        assert all(error is auth.error for error in errors)
        assert auth.token is None

    def test_sequential_refreshes_each_exchange(self):
        auth = SlowStrategy()
        auth.refresh_token()
        auth.refresh_token()
        assert auth.calls == 2
        assert auth.token == 'token-2'
        assert auth.retries == 2
