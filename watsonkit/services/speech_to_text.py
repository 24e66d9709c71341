#
# WatsonKit
#
# Copyright (C) 2017 Boris Raicheff
# All rights reserved
#


import base64
import hashlib
import hmac
import uuid
from http.client import BAD_REQUEST, OK
from typing import List, Optional

from flask import Response, abort, request, url_for
from flask.signals import Namespace

from ..authentication import TOKEN_URL
from ..errors import WatsonException
from ..mapping import WatsonModel
from ..rest import MediaType, RestRequest
from ..service import WatsonService


namespace = Namespace()


recognitions_started = namespace.signal('recognitions.started')
recognitions_completed = namespace.signal('recognitions.completed')
recognitions_completed_with_results = namespace.signal('recognitions.completed_with_results')
recognitions_failed = namespace.signal('recognitions.failed')


ENDPOINT = 'watson-speech-to-text'


class SpeechModel(WatsonModel):
    name: str
    language: Optional[str] = None
    rate: Optional[int] = None
    url: Optional[str] = None
    description: Optional[str] = None
    sessions: Optional[str] = None


class WordAlternative(WatsonModel):
    word: str
    confidence: float


class WordAlternativeResults(WatsonModel):
    start_time: float
    end_time: float
    alternatives: List[WordAlternative]


class SpeechRecognitionAlternative(WatsonModel):
    transcript: str
    confidence: Optional[float] = None
    # [[word, start, end], ...] and [[word, confidence], ...]
    timestamps: Optional[List[list]] = None
    word_confidence: Optional[List[list]] = None


class SpeechRecognitionResult(WatsonModel):
    final: bool
    alternatives: List[SpeechRecognitionAlternative]
    keywords_result: Optional[dict] = None
    word_alternatives: Optional[List[WordAlternativeResults]] = None


class SpeechRecognitionResults(WatsonModel):
    results: List[SpeechRecognitionResult] = []
    result_index: Optional[int] = None
    warnings: Optional[List[str]] = None

    @property
    def best_transcript(self):
        return ''.join(result.alternatives[0].transcript for result in self.results if result.alternatives)


class RecognitionJob(WatsonModel):
    id: str
    status: str
    created: Optional[str] = None
    updated: Optional[str] = None
    url: Optional[str] = None
    user_token: Optional[str] = None
    results: Optional[List[SpeechRecognitionResults]] = None
    warnings: Optional[List[str]] = None


class RegisterStatus(WatsonModel):
    status: str
    url: str


class SpeechToText(WatsonService):
    """
    https://www.ibm.com/watson/developercloud/speech-to-text.html
    """

    default_url = 'https://stream.watsonplatform.net/speech-to-text/api'

    config_prefix = 'SPEECHTOTEXT'

    domain = 'com.ibm.watson.developer-cloud.SpeechToTextV1'

    blueprint = None

    user_secret = None

    def init_app(self, app, blueprint=None, session=None):
        if not super(SpeechToText, self).init_app(app, session):
            return False

        # Blueprint
        if blueprint is not None:
            blueprint.add_url_rule('/watson/speech-to-text', ENDPOINT, self.handle_callback, methods=['GET', 'POST'])
            self.blueprint = blueprint

        # Secret
        user_secret = app.config.get('WATSON_SPEECHTOTEXT_USER_SECRET')
        if user_secret is None:
            self.logger.error('WATSON_SPEECHTOTEXT_USER_SECRET not set')
            return True
        self.user_secret = user_secret
        return True

    def get_models(self):
        """
        http://www.ibm.com/watson/developercloud/speech-to-text/api/v1/#get_models
        """
        response = self.execute(self.request('GET', '/v1/models', accept=MediaType.JSON))
        return self.decode_list(SpeechModel, response, ('models',))

    def get_model(self, model_id):
        req = self.request('GET', '/v1/models/{}'.format(model_id), accept=MediaType.JSON)
        return self.decode(SpeechModel, self.execute(req))

    def recognize(self, audio, content_type, **settings):
        """
        http://www.ibm.com/watson/developercloud/speech-to-text/api/v1/#recognize_sessionless_nonmp12

        ``settings`` are passed through as query parameters (``model``,
        ``timestamps``, ``max_alternatives``...).
        """
        req = self.request(
            'POST', '/v1/recognize', params=settings, accept=MediaType.JSON, content_type=content_type, data=audio)
        return self.decode(SpeechRecognitionResults, self.execute(req))

    def create_job(self, audio, content_type, user_token=None, callback=True, **settings):
        """
        http://www.ibm.com/watson/developercloud/speech-to-text/api/v1/#async_methods

        With ``callback`` the job reports to this service's callback route;
        a service without one (no blueprint given to :meth:`init_app`)
        creates a job that has to be polled with :meth:`check_job`.

        :return: ``(job, user_token)``
        """
        user_token = user_token or uuid.uuid4().hex
        params = {'user_token': user_token, **settings}
        if callback and self.blueprint is not None:
            params['callback_url'] = self._callback_url
        req = self.request(
            'POST', '/v1/recognitions', params=params, accept=MediaType.JSON, content_type=content_type, data=audio)
        return self.decode(RecognitionJob, self.execute(req)), user_token

    def check_job(self, id):
        """
        http://www.ibm.com/watson/developercloud/speech-to-text/api/v1/#check_job
        """
        req = self.request('GET', '/v1/recognitions/{id}'.format(id=id), accept=MediaType.JSON)
        return self.decode(RecognitionJob, self.execute(req))

    def check_jobs(self):
        response = self.execute(self.request('GET', '/v1/recognitions', accept=MediaType.JSON))
        return self.decode_list(RecognitionJob, response, ('recognitions',))

    def delete_job(self, id):
        """
        http://www.ibm.com/watson/developercloud/speech-to-text/api/v1/#delete_job
        """
        self.execute(self.request('DELETE', '/v1/recognitions/{id}'.format(id=id)))

    def register_callback(self):
        """
        http://www.ibm.com/watson/developercloud/doc/speech-to-text/async.shtml#register

        Raises :class:`WatsonException` if the service has no callback route.
        """
        params = {'callback_url': self._callback_url, 'user_secret': self.user_secret}
        req = self.request('POST', '/v1/register_callback', params=params, accept=MediaType.JSON)
        return self.decode(RegisterStatus, self.execute(req))

    def unregister_callback(self):
        params = {'callback_url': self._callback_url}
        self.execute(self.request('POST', '/v1/unregister_callback', params=params))

    def get_token(self):
        req = RestRequest('GET', TOKEN_URL, headers=self.default_headers, params={'url': self.url})
        return self.execute(req).text

    def handle_callback(self):
        """
        Callback route of asynchronous recognitions.

        A ``GET`` is the allow-list challenge and is answered with the signed
        ``challenge_string``. A ``POST`` is a job notification; its ``event``
        (e.g. ``recognitions.completed``) names the signal that is sent with
        the remaining fields as keyword arguments.

        http://www.ibm.com/watson/developercloud/speech-to-text/api/v1/#async_methods
        """
        if request.method == 'GET':
            challenge_string = request.args.get('challenge_string')
            if challenge_string is None:
                self._reject('allow-list request without challenge_string')
            self._verify_signature(challenge_string.encode())
            return challenge_string

        self._verify_signature(request.get_data())
        notification = request.get_json(silent=True)
        if not isinstance(notification, dict) or 'event' not in notification:
            self._reject('notification without an event')
        event = notification.pop('event')
        self.logger.info('recognition callback: %s %s', event, notification.get('id'))
        namespace.signal(event).send(self, **notification)
        return Response(status=OK)

    def sign(self, message):
        digest = hmac.new(self.user_secret.encode(), message, hashlib.sha1).digest()
        return base64.b64encode(digest)

    def _verify_signature(self, message):
        if self.user_secret is None:
            self._reject('no user secret configured')
        signature = request.headers.get('X-Callback-Signature')
        if signature is None:
            self._reject('missing X-Callback-Signature')
        if not hmac.compare_digest(self.sign(message), signature.encode()):
            self._reject('X-Callback-Signature mismatch')

    def _reject(self, reason):
        self.logger.warning('rejected recognition callback from %s: %s', request.remote_addr, reason)
        abort(BAD_REQUEST)

    @property
    def _callback_url(self):
        if self.blueprint is None:
            raise WatsonException('SpeechToText has no callback route; pass a blueprint to init_app')
        return url_for('.'.join((self.blueprint.name, ENDPOINT)), _external=True)


# EOF
