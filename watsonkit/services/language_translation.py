#
# WatsonKit
#
# Copyright (C) 2017 Boris Raicheff
# All rights reserved
#


from typing import List, Optional

from ..mapping import WatsonModel
from ..rest import MediaType
from ..service import WatsonService


class TranslationModel(WatsonModel):
    model_id: str
    name: Optional[str] = None
    source: Optional[str] = None
    target: Optional[str] = None
    base_model_id: Optional[str] = None
    domain: Optional[str] = None
    customizable: Optional[bool] = None
    default_model: Optional[bool] = None
    owner: Optional[str] = None
    status: Optional[str] = None


class Translation(WatsonModel):
    translation: str


class TranslateResponse(WatsonModel):
    word_count: Optional[int] = None
    character_count: Optional[int] = None
    translations: List[Translation]

    @property
    def texts(self):
        return [item.translation for item in self.translations]


class IdentifiableLanguage(WatsonModel):
    language: str
    name: Optional[str] = None


class IdentifiedLanguage(WatsonModel):
    language: str
    confidence: float


class LanguageTranslation(WatsonService):
    """
    https://www.ibm.com/watson/developercloud/language-translation.html
    """

    default_url = 'https://gateway.watsonplatform.net/language-translation/api'

    config_prefix = 'LANGUAGETRANSLATION'

    domain = 'com.ibm.watson.developer-cloud.LanguageTranslationV2'

    def get_models(self, source=None, target=None, default_models_only=None):
        """
        https://www.ibm.com/watson/developercloud/language-translation/api/v2/#list_models
        """
        params = {'source': source, 'target': target, 'default': default_models_only}
        request = self.request('GET', '/v2/models', params=params, accept=MediaType.JSON)
        return self.decode_list(TranslationModel, self.execute(request), ('models',))

    def get_model(self, model_id):
        request = self.request('GET', '/v2/models/{}'.format(model_id), accept=MediaType.JSON)
        return self.decode(TranslationModel, self.execute(request))

    def create_model(self, base_model_id, forced_glossary, name=None):
        """
        Train a custom model from a TMX glossary.

        :param forced_glossary: file object (or bytes) of the TMX glossary
        :return: the new model ID
        """
        params = {'base_model_id': base_model_id, 'name': name}
        files = {'forced_glossary': ('glossary.tmx', forced_glossary, MediaType.OCTET_STREAM)}
        request = self.request('POST', '/v2/models', params=params, accept=MediaType.JSON, files=files)
        return self.decode(str, self.execute(request), ('model_id',))

    def delete_model(self, model_id):
        self.execute(self.request('DELETE', '/v2/models/{}'.format(model_id), accept=MediaType.JSON))

    def translate(self, text, model_id=None, source=None, target=None):
        """
        Translate ``text`` (a string or a list of strings) either with
        ``model_id`` or with a ``source``/``target`` language pair.
        """
        if model_id is None and not (source and target):
            raise ValueError('Either model_id or both source and target are required')
        body = {'text': [text] if isinstance(text, str) else list(text)}
        if model_id is not None:
            body['model_id'] = model_id
        else:
            body.update(source=source, target=target)
        request = self.request(
            'POST', '/v2/translate', accept=MediaType.JSON, content_type=MediaType.JSON, json=body)
        return self.decode(TranslateResponse, self.execute(request))

    def get_identifiable_languages(self):
        request = self.request('GET', '/v2/identifiable_languages', accept=MediaType.JSON)
        return self.decode_list(IdentifiableLanguage, self.execute(request), ('languages',))

    def identify(self, text):
        """
        :return: identified languages, most likely first
        """
        request = self.request(
            'POST', '/v2/identify', accept=MediaType.JSON, content_type=MediaType.TEXT, data=text.encode('utf-8'))
        languages = self.decode_list(IdentifiedLanguage, self.execute(request), ('languages',))
        return sorted(languages, key=lambda language: language.confidence, reverse=True)


# EOF
