#
# WatsonKit
#
# Copyright (C) 2017 Boris Raicheff
# All rights reserved
#


import json
import logging
from urllib.parse import urlencode

from websockets.asyncio.client import connect

from ..errors import WatsonApiException
from ..mapping import decode
from ..rest import USER_AGENT, join_url
from .speech_to_text import SpeechRecognitionResults


__all__ = ['SpeechToTextSocket']


WEBSOCKET_URL = 'wss://stream.watsonplatform.net/speech-to-text/api/v1/recognize'


class SpeechToTextSocket(object):
    """
    Streaming recognition over the ``/v1/recognize`` WebSocket.

    http://www.ibm.com/watson/developercloud/doc/speech-to-text/websockets.shtml

    The conversation is ``start`` message, binary audio, ``stop`` message.
    The server acknowledges ``start`` with ``{"state": "listening"}``, streams
    result messages, and answers ``stop`` with another ``listening`` state once
    every final result has been delivered.

    :param token: Watson token, see :meth:`SpeechToText.get_token`
    :param token_name: ``watson-token``, or ``access_token`` for IAM tokens
    :param on_results: called with the accumulated
        :class:`~watsonkit.services.speech_to_text.SpeechRecognitionResults`
        after every result message
    :param on_error: called with a :class:`WatsonApiException`
    """

    def __init__(self, token, url=WEBSOCKET_URL, model=None, customization_id=None, opt_out=True,
                 token_name='watson-token', on_results=None, on_error=None, on_listening=None, logger=None,
                 connector=connect):
        query = {token_name: token}
        if model is not None:
            query['model'] = model
        if customization_id is not None:
            query['customization_id'] = customization_id
        if opt_out:
            query['x-watson-learning-opt-out'] = 'true'
        self.url = join_url(url) + '?' + urlencode(query)
        self.on_results = on_results
        self.on_error = on_error
        self.on_listening = on_listening
        self.logger = logger or logging.getLogger('WatsonKit.SpeechToTextSocket')
        self.connector = connector
        self.connection = None
        self.results = []
        self.listening = 0

    async def connect(self):
        self.connection = await self.connector(self.url, user_agent_header=USER_AGENT)
        self.logger.debug('connected to %s', self.url)
        return self.connection

    async def start(self, content_type, **settings):
        self.results = []
        self.listening = 0
        message = {'action': 'start', 'content-type': content_type, **settings}
        await self.connection.send(json.dumps(message))

    async def send_audio(self, chunk):
        await self.connection.send(chunk)

    async def stop(self):
        await self.connection.send(json.dumps({'action': 'stop'}))

    async def close(self):
        if self.connection is not None:
            await self.connection.close()
            self.connection = None

    async def receive(self):
        """Consume server messages until the end-of-recognition ``listening`` state."""
        async for message in self.connection:
            if not self.handle_message(message):
                break
        return SpeechRecognitionResults(results=self.results)

    def handle_message(self, message):
        """
        Dispatch one text frame; returns ``False`` when the recognition is over.
        """
        try:
            payload = json.loads(message)
        except (TypeError, ValueError):
            self.logger.warning('ignoring non JSON frame')
            return True
        if not isinstance(payload, dict):
            self.logger.warning('ignoring non object frame: %r', payload)
            return True

        if 'error' in payload:
            error = WatsonApiException(400, payload['error'], domain='com.ibm.watson.developer-cloud.SpeechToTextV1')
            if self.on_error is not None:
                self.on_error(error)
            return False

        if payload.get('state') == 'listening':
            self.listening += 1
            if self.on_listening is not None:
                self.on_listening()
            return self.listening < 2

        if 'results' in payload:
            result = decode(SpeechRecognitionResults, payload)
            if not result.ok:
                self.logger.warning('malformed results message: %s', result.errors)
                return True
            update = result.value
            index = update.result_index or 0
            self.results[index:index + len(update.results)] = update.results
            if self.on_results is not None:
                self.on_results(SpeechRecognitionResults(results=self.results, result_index=index))
        return True

    async def recognize(self, chunks, content_type, **settings):
        """
        Stream ``chunks`` (an iterable of bytes) and return the final results.
        """
        await self.connect()
        try:
            await self.start(content_type, **settings)
            for chunk in chunks:
                await self.send_audio(chunk)
            await self.stop()
            return await self.receive()
        finally:
            await self.close()


# EOF
