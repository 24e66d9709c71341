"""
Tests for the Tone Analyzer service.
"""
import json
from urllib.parse import parse_qs, urlsplit

from watsonkit.services.tone_analyzer import ToneAnalyzer


TONE = {
    'document_tone': {'tone_categories': [
        {'category_id': 'emotion_tone', 'category_name': 'Emotion Tone', 'tones': [
            {'score': 0.8, 'tone_id': 'joy', 'tone_name': 'Joy'},
            {'score': 0.1, 'tone_id': 'anger', 'tone_name': 'Anger'},
        ]},
        {'category_id': 'language_tone', 'tones': [{'score': 0.3, 'tone_id': 'analytical'}]},
    ]},
    'sentences_tone': [
        {'sentence_id': 0, 'text': 'I am happy.', 'input_from': 0, 'input_to': 11, 'tone_categories': []},
    ],
}


def test_get_tone(service_factory, session):
    session.respond(json_body=TONE)
    analyzer = service_factory(ToneAnalyzer)

    analysis = analyzer.get_tone('I am happy.', tones=['emotion', 'language'], sentences=True)

    assert analysis.category('emotion_tone').tones[0].tone_id == 'joy'
    assert analysis.category('social_tone') is None
    assert analysis.sentences_tone[0].input_to == 11
    sent = session.last
    assert urlsplit(sent.url).path == '/tone-analyzer/api/v3/tone'
    assert parse_qs(urlsplit(sent.url).query) == {
        'version': ['2016-05-19'],
        'tones': ['emotion,language'],
        'sentences': ['true'],
    }
    assert json.loads(sent.body) == {'text': 'I am happy.'}


def test_get_tone_without_sentences(service_factory, session):
    session.respond(json_body={'document_tone': {'tone_categories': []}})
    analysis = service_factory(ToneAnalyzer).get_tone('Hi', sentences=False)
    assert analysis.sentences_tone is None
    assert parse_qs(urlsplit(session.last.url).query)['sentences'] == ['false']
