#
# WatsonKit
#
# Copyright (C) 2017 Boris Raicheff
# All rights reserved
#


import logging

import requests
from flask import Blueprint

from .services import (
    AlchemyDataNews,
    AlchemyLanguage,
    AlchemyVision,
    Conversation,
    LanguageTranslation,
    NaturalLanguageClassifier,
    PersonalityInsights,
    SpeechToText,
    TextToSpeech,
    ToneAnalyzer,
    VisualRecognition,
)


logger = logging.getLogger('WatsonKit')


class Watson(object):
    """
    Flask extension giving an app one configured client per Watson service.

    API:
    https://www.ibm.com/watson/developercloud

    Services whose credentials are missing from ``app.config`` are left
    unconfigured and logged; see :meth:`WatsonService.init_app` for the keys.

    :param app: Flask app to initialize with. Defaults to `None`
    :param blueprint: blueprint receiving the Speech to Text callback route
    :param url_prefix: prefix of the default blueprint
    """

    blueprint = None

    def __init__(self, app=None, blueprint=None, url_prefix=None):
        self.speech_to_text = SpeechToText()
        self.text_to_speech = TextToSpeech()
        self.language_translation = LanguageTranslation()
        self.natural_language_classifier = NaturalLanguageClassifier()
        self.tone_analyzer = ToneAnalyzer()
        self.personality_insights = PersonalityInsights()
        self.conversation = Conversation()
        self.visual_recognition = VisualRecognition()
        self.alchemy_language = AlchemyLanguage()
        self.alchemy_vision = AlchemyVision()
        self.alchemy_data_news = AlchemyDataNews()
        if app is not None:
            self.init_app(app, blueprint, url_prefix)

    @property
    def services(self):
        return [
            self.speech_to_text,
            self.text_to_speech,
            self.language_translation,
            self.natural_language_classifier,
            self.tone_analyzer,
            self.personality_insights,
            self.conversation,
            self.visual_recognition,
            self.alchemy_language,
            self.alchemy_vision,
            self.alchemy_data_news,
        ]

    def init_app(self, app, blueprint=None, url_prefix=None):

        # Blueprint
        if blueprint is None:
            blueprint = Blueprint('watson', __name__, url_prefix=url_prefix)
        self.blueprint = blueprint

        # Services
        session = requests.Session()
        self.speech_to_text.init_app(app, blueprint, session)
        for service in self.services[1:]:
            service.init_app(app, session)

        if blueprint.name not in app.blueprints:
            app.register_blueprint(blueprint)

        app.extensions['watson'] = self
        logger.debug('configured %d Watson services', sum(service.auth is not None for service in self.services))


# EOF
