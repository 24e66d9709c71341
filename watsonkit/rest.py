#
# WatsonKit
#
# Copyright (C) 2017 Boris Raicheff
# All rights reserved
#


import platform
from urllib.parse import urlsplit

import requests


__all__ = ['MediaType', 'RestRequest', 'USER_AGENT', 'join_url']


USER_AGENT = 'watsonkit/0.2.0 Python/{}'.format(platform.python_version())


class MediaType(object):

    JSON = 'application/json'
    TEXT = 'text/plain'
    HTML = 'text/html'
    CSV = 'text/csv'
    XML = 'application/xml'
    FORM = 'application/x-www-form-urlencoded'
    MULTIPART = 'multipart/form-data'
    OCTET_STREAM = 'application/octet-stream'
    WAV = 'audio/wav'
    OGG = 'audio/ogg;codecs=opus'
    FLAC = 'audio/flac'
    MP3 = 'audio/mp3'
    WEBM = 'audio/webm'
    L16 = 'audio/l16'


def join_url(service_url, path=''):
    """
    Concatenate a service URL and an endpoint path.

    Raises :class:`ValueError` if ``service_url`` is not an absolute http(s) URL.
    """
    parts = urlsplit(service_url or '')
    if parts.scheme not in ('http', 'https', 'ws', 'wss') or not parts.netloc:
        raise ValueError('Invalid service URL: {!r}'.format(service_url))
    return service_url.rstrip('/') + path


def _query_value(value):
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, (list, tuple)):
        return ','.join(str(item) for item in value)
    return value


class RestRequest(object):
    """
    Everything needed to perform one HTTP round trip against a Watson service.

    Authentication strategies mutate :attr:`headers` and :attr:`params` before
    the request is prepared, so a request can be re-authenticated and resent
    after a token refresh without being rebuilt.
    """

    def __init__(self, method, url, headers=None, params=None, accept=None, content_type=None,
                 data=None, json=None, files=None):
        join_url(url)
        self.method = method.upper()
        self.url = url
        self.headers = {'User-Agent': USER_AGENT}
        self.headers.update(headers or {})
        if accept is not None:
            self.headers['Accept'] = accept
        if content_type is not None:
            self.headers['Content-Type'] = content_type
        self.params = {k: _query_value(v) for k, v in (params or {}).items() if v is not None}
        self.data = data
        self.json = json
        self.files = files

    def __repr__(self):
        return '<RestRequest [{} {}]>'.format(self.method, self.url)

    def prepare(self, session):
        request = requests.Request(
            self.method,
            self.url,
            headers=self.headers,
            params=self.params,
            data=self.data,
            json=self.json,
            files=self.files,
        )
        return session.prepare_request(request)


# EOF
