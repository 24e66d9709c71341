"""
Tests for the Natural Language Classifier service.
"""
import json

import pytest

from watsonkit.errors import WatsonApiException
from watsonkit.services.natural_language_classifier import NaturalLanguageClassifier


CLASSIFIER = {
    'classifier_id': '10D41B-nlc-1',
    'url': 'https://gateway.watsonplatform.net/natural-language-classifier/api/v1/classifiers/10D41B-nlc-1',
    'name': 'weather',
    'language': 'en',
    'created': '2015-08-24T18:42:25.324Z',
    'status': 'Available',
}


@pytest.fixture
def classifier(service_factory):
    return service_factory(NaturalLanguageClassifier)


def test_get_classifiers(classifier, session):
    session.respond(json_body={'classifiers': [CLASSIFIER]})
    classifiers = classifier.get_classifiers()
    assert [item.classifier_id for item in classifiers] == ['10D41B-nlc-1']
    assert classifiers[0].status == 'Available'


def test_get_classifiers_empty(classifier, session):
    session.respond(json_body={'classifiers': []})
    assert classifier.get_classifiers() == []


def test_classify(classifier, session):
    session.respond(json_body={
        'classifier_id': '10D41B-nlc-1',
        'text': 'How hot will it be today?',
        'top_class': 'temperature',
        'classes': [
            {'class_name': 'temperature', 'confidence': 0.99},
            {'class_name': 'conditions', 'confidence': 0.01},
        ],
    })

    classification = classifier.classify('10D41B-nlc-1', 'How hot will it be today?')

    assert classification.top_class == 'temperature'
    assert classification.classes[0].confidence == 0.99
    assert session.last.url.endswith('/v1/classifiers/10D41B-nlc-1/classify')
    assert json.loads(session.last.body) == {'text': 'How hot will it be today?'}


def test_classify_missing_classifier_async_yields_none(classifier, session):
    session.respond(404, json_body={'code': 404, 'error': 'Not found', 'description': 'Classifier not found'})
    errors = []

    future = classifier.call_async(classifier.classify, 'InvalidClassifier', 'Is it sunny?', failure=errors.append)

    assert future.result(timeout=5) is None
    assert isinstance(errors[0], WatsonApiException)
    assert errors[0].code == 404
    classifier.close()


def test_create_classifier(classifier, session):
    session.respond(json_body=dict(CLASSIFIER, status='Training'))

    created = classifier.create_classifier(b'{"language": "en", "name": "weather"}', b'How hot?,temperature\n')

    assert created.status == 'Training'
    assert b'name="training_metadata"' in session.last.body
    assert b'name="training_data"' in session.last.body


def test_delete_classifier(classifier, session):
    session.respond(json_body={})
    classifier.delete_classifier('10D41B-nlc-1')
    assert session.last.method == 'DELETE'
