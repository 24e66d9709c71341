"""
Pytest configuration for WatsonKit tests.

Every service talks to a FakeSession: a real requests.Session whose send()
returns queued responses instead of touching the network.
"""
import json
from http.client import responses

import pytest
import requests
from requests.structures import CaseInsensitiveDict


def make_response(status=200, json_body=None, text=None, content=None, headers=None):
    response = requests.Response()
    response.status_code = status
    response.reason = responses.get(status, '')
    response.encoding = 'utf-8'
    response.headers = CaseInsensitiveDict(headers or {})
    if json_body is not None:
        response._content = json.dumps(json_body).encode('utf-8')
        response.headers.setdefault('Content-Type', 'application/json')
    elif text is not None:
        response._content = text.encode('utf-8')
        response.headers.setdefault('Content-Type', 'text/plain')
    else:
        response._content = content or b''
    return response


class FakeSession(requests.Session):

    def __init__(self):
        super().__init__()
        self.queue = []
        self.sent = []
        self.send_kwargs = []

    def respond(self, status=200, json_body=None, text=None, content=None, headers=None):
        self.queue.append(make_response(status, json_body, text, content, headers))

    def fail(self, error):
        self.queue.append(error)

    def send(self, request, **kwargs):
        self.sent.append(request)
        self.send_kwargs.append(kwargs)
        if not self.queue:
            raise AssertionError('unexpected request: {} {}'.format(request.method, request.url))
        response = self.queue.pop(0)
        if isinstance(response, Exception):
            raise response
        response.request = request
        response.url = request.url
        return response

    @property
    def last(self):
        return self.sent[-1]


@pytest.fixture
def session():
    return FakeSession()


@pytest.fixture
def service_factory(session):
    """Build a service wired to the fake session with basic credentials."""

    def factory(cls, **kwargs):
        kwargs.setdefault('session', session)
        if 'auth' not in kwargs and 'api_key' not in kwargs:
            kwargs.setdefault('username', 'user')
            kwargs.setdefault('password', 'pass')
        return cls(**kwargs)

    return factory
