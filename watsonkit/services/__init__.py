#
# WatsonKit
#
# Copyright (C) 2017 Boris Raicheff
# All rights reserved
#


from .alchemy_data_news import AlchemyDataNews
from .alchemy_language import AlchemyLanguage
from .alchemy_vision import AlchemyVision
from .conversation import Conversation
from .language_translation import LanguageTranslation
from .natural_language_classifier import NaturalLanguageClassifier
from .personality_insights import PersonalityInsights
from .speech_to_text import SpeechToText
from .speech_to_text_socket import SpeechToTextSocket
from .text_to_speech import TextToSpeech
from .tone_analyzer import ToneAnalyzer
from .visual_recognition import VisualRecognition


__all__ = [
    'AlchemyDataNews',
    'AlchemyLanguage',
    'AlchemyVision',
    'Conversation',
    'LanguageTranslation',
    'NaturalLanguageClassifier',
    'PersonalityInsights',
    'SpeechToText',
    'SpeechToTextSocket',
    'TextToSpeech',
    'ToneAnalyzer',
    'VisualRecognition',
]


# EOF
