#
# WatsonKit
#
# Copyright (C) 2017 Boris Raicheff
# All rights reserved
#


from http.client import responses


class WatsonException(Exception):
    """Base class for every error raised by WatsonKit."""


class WatsonApiException(WatsonException):
    """
    A Watson service answered with an unacceptable status.

    :param code: HTTP status (or the service's own error code)
    :param message: human readable message extracted from the error body
    :param info: secondary detail (``statusInfo``, ``description``...)
    :param domain: name of the service that produced the error
    :param response: the :class:`requests.Response`, when there is one
    """

    def __init__(self, code, message=None, info=None, domain=None, response=None):
        self.code = code
        self.message = message or responses.get(code, 'Unknown error')
        self.info = info
        self.domain = domain
        self.response = response
        super(WatsonApiException, self).__init__(self.message)

    def __str__(self):
        text = 'Error: {}, Code: {}'.format(self.message, self.code)
        if self.info:
            text += ', Info: {}'.format(self.info)
        return text

    @classmethod
    def from_response(cls, response, domain=None):
        """Translate a non-2xx :class:`requests.Response` into an exception."""
        try:
            body = response.json()
        except ValueError:
            body = None
        code, message, info = parse_error_body(body)
        return cls(code or response.status_code, message or response.reason, info, domain, response)


class WatsonAuthenticationError(WatsonException):

    def __init__(self, code=None, message='Token authentication failed.'):
        self.code = code
        self.message = message
        super(WatsonAuthenticationError, self).__init__(message)


class WatsonDecodeError(WatsonException):
    """A payload did not match the schema of the model it was decoded into."""

    def __init__(self, model, errors, payload=None):
        self.model = model
        self.errors = errors
        self.payload = payload
        super(WatsonDecodeError, self).__init__(
            'Unable to decode {}: {}'.format(getattr(model, '__name__', model), errors))


def parse_error_body(body):
    """
    Extract ``(code, message, info)`` from the known Watson error shapes.

    Any part that cannot be found is ``None``.
    """

    if not isinstance(body, dict):
        return None, None, None

    # Language Translation, Relationship Extraction
    if 'error_code' in body:
        return _int(body['error_code']), body.get('error_message'), None

    error = body.get('error')

    # Visual Recognition: {"error": {"code": 404, "description": "..."}}
    if isinstance(error, dict):
        return _int(error.get('code')), error.get('description') or error.get('message'), error.get('error_id')

    # AlchemyAPI: {"status": "ERROR", "statusInfo": "invalid-api-key"}
    if 'statusInfo' in body:
        return _int(body.get('code')), body.get('status'), body['statusInfo']

    # Tone Analyzer, Conversation, Text to Speech: {"code": 400, "error": "...", "description": "..."}
    if error is not None:
        return _int(body.get('code')), error, body.get('description')

    if 'message' in body:
        return _int(body.get('code')), body['message'], body.get('description')

    return _int(body.get('code')), body.get('description'), None


def _int(value):
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


# EOF
