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


class Classifier(WatsonModel):
    classifier_id: str
    url: Optional[str] = None
    name: Optional[str] = None
    language: Optional[str] = None
    created: Optional[str] = None
    status: Optional[str] = None
    status_description: Optional[str] = None


class ClassifiedClass(WatsonModel):
    class_name: str
    confidence: float


class Classification(WatsonModel):
    classifier_id: str
    url: Optional[str] = None
    text: Optional[str] = None
    top_class: Optional[str] = None
    classes: List[ClassifiedClass] = []


class NaturalLanguageClassifier(WatsonService):
    """
    https://www.ibm.com/watson/developercloud/nl-classifier.html
    """

    default_url = 'https://gateway.watsonplatform.net/natural-language-classifier/api'

    config_prefix = 'NATURALLANGUAGECLASSIFIER'

    domain = 'com.ibm.watson.developer-cloud.NaturalLanguageClassifierV1'

    def get_classifiers(self):
        """Returns an empty list if no classifiers are available."""
        response = self.execute(self.request('GET', '/v1/classifiers', accept=MediaType.JSON))
        return self.decode_list(Classifier, response, ('classifiers',))

    def get_classifier(self, classifier_id):
        request = self.request('GET', '/v1/classifiers/{}'.format(classifier_id), accept=MediaType.JSON)
        return self.decode(Classifier, self.execute(request))

    def create_classifier(self, training_metadata, training_data):
        """
        Train a new classifier.

        :param training_metadata: JSON file (or bytes) with ``language`` and ``name``
        :param training_data: CSV file (or bytes) of ``text,class`` rows
        """
        files = {
            'training_metadata': ('training_metadata.json', training_metadata, MediaType.JSON),
            'training_data': ('training_data.csv', training_data, MediaType.CSV),
        }
        request = self.request('POST', '/v1/classifiers', accept=MediaType.JSON, files=files)
        return self.decode(Classifier, self.execute(request))

    def delete_classifier(self, classifier_id):
        self.execute(self.request('DELETE', '/v1/classifiers/{}'.format(classifier_id)))

    def classify(self, classifier_id, text):
        """
        The classifier status must be ``Available`` before it can classify.
        """
        request = self.request(
            'POST',
            '/v1/classifiers/{}/classify'.format(classifier_id),
            accept=MediaType.JSON,
            content_type=MediaType.JSON,
            json={'text': text},
        )
        return self.decode(Classification, self.execute(request))


# EOF
