#
# WatsonKit
#
# Copyright (C) 2017 Boris Raicheff
# All rights reserved
#


from typing import Optional

from ..authentication import TOKEN_URL
from ..mapping import WatsonModel
from ..rest import MediaType, RestRequest
from ..service import WatsonService


class Customization(WatsonModel):
    customization_id: str
    name: Optional[str] = None
    language: Optional[str] = None
    owner: Optional[str] = None
    created: Optional[str] = None
    last_modified: Optional[str] = None
    description: Optional[str] = None


class SupportedFeatures(WatsonModel):
    custom_pronunciation: Optional[bool] = None
    voice_transformation: Optional[bool] = None


class Voice(WatsonModel):
    name: str
    language: Optional[str] = None
    gender: Optional[str] = None
    url: Optional[str] = None
    description: Optional[str] = None
    customizable: Optional[bool] = None
    supported_features: Optional[SupportedFeatures] = None
    customization: Optional[Customization] = None


class Pronunciation(WatsonModel):
    pronunciation: str


class TextToSpeech(WatsonService):
    """
    https://www.ibm.com/watson/developercloud/text-to-speech.html
    """

    default_url = 'https://stream.watsonplatform.net/text-to-speech/api'

    config_prefix = 'TEXTTOSPEECH'

    domain = 'com.ibm.watson.developer-cloud.TextToSpeechV1'

    def synthesize(self, text, voice=None, accept=MediaType.WAV, customization_id=None):
        """
        http://www.ibm.com/watson/developercloud/text-to-speech/api/v1/#synthesize_audio

        :return: ``(audio, content_type)``
        """
        params = {'voice': voice, 'customization_id': customization_id}
        request = self.request('POST', '/v1/synthesize', params=params, accept=accept, json={'text': text})
        response = self.execute(request)
        return response.content, response.headers['content-type']

    def get_voices(self):
        """
        http://www.ibm.com/watson/developercloud/text-to-speech/api/v1/#get_voices
        """
        response = self.execute(self.request('GET', '/v1/voices', accept=MediaType.JSON))
        return self.decode_list(Voice, response, ('voices',))

    def get_voice(self, voice, customization_id=None):
        params = {'customization_id': customization_id}
        request = self.request('GET', '/v1/voices/{}'.format(voice), params=params, accept=MediaType.JSON)
        return self.decode(Voice, self.execute(request))

    def get_pronunciation(self, text, voice=None, format=None):
        """
        http://www.ibm.com/watson/developercloud/text-to-speech/api/v1/#get_pronunciation

        :param format: ``ipa`` or ``spr``
        """
        params = {'text': text, 'voice': voice, 'format': format}
        request = self.request('GET', '/v1/pronunciation', params=params, accept=MediaType.JSON)
        return self.decode(Pronunciation, self.execute(request))

    def get_token(self):
        # http://www.ibm.com/watson/developercloud/doc/getting_started/gs-tokens.shtml
        request = RestRequest('GET', TOKEN_URL, headers=self.default_headers, params={'url': self.url})
        return self.execute(request).text


# EOF
