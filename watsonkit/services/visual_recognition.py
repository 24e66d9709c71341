#
# WatsonKit
#
# Copyright (C) 2017 Boris Raicheff
# All rights reserved
#


import json
from typing import List, Optional

from pydantic import Field

from ..authentication import APIKeyAuthenticationStrategy
from ..mapping import WatsonModel
from ..rest import MediaType
from ..service import WatsonService


class ClassResult(WatsonModel):
    class_name: str = Field(alias='class')
    score: float
    type_hierarchy: Optional[str] = None


class ClassifierResult(WatsonModel):
    name: str
    classifier_id: str
    classes: List[ClassResult] = []


class ErrorInfo(WatsonModel):
    error_id: Optional[str] = None
    description: Optional[str] = None


class ClassifiedImage(WatsonModel):
    source_url: Optional[str] = None
    resolved_url: Optional[str] = None
    image: Optional[str] = None
    error: Optional[ErrorInfo] = None
    classifiers: List[ClassifierResult] = []


class ClassifiedImages(WatsonModel):
    images_processed: Optional[int] = None
    images: List[ClassifiedImage] = []
    warnings: Optional[List[dict]] = None


class FaceLocation(WatsonModel):
    left: int
    top: int
    width: int
    height: int


class FaceAge(WatsonModel):
    min: Optional[int] = None
    max: Optional[int] = None
    score: float


class FaceGender(WatsonModel):
    gender: str
    score: float


class Face(WatsonModel):
    age: Optional[FaceAge] = None
    gender: Optional[FaceGender] = None
    face_location: Optional[FaceLocation] = None


class ImageWithFaces(WatsonModel):
    source_url: Optional[str] = None
    resolved_url: Optional[str] = None
    image: Optional[str] = None
    error: Optional[ErrorInfo] = None
    faces: List[Face] = []


class ImagesWithFaces(WatsonModel):
    images_processed: Optional[int] = None
    images: List[ImageWithFaces] = []


class VisualRecognitionClassifier(WatsonModel):
    classifier_id: str
    name: str
    owner: Optional[str] = None
    status: Optional[str] = None
    explanation: Optional[str] = None
    created: Optional[str] = None
    classes: Optional[List[dict]] = None


class VisualRecognition(WatsonService):
    """
    https://www.ibm.com/watson/developercloud/visual-recognition.html
    """

    default_url = 'https://gateway-a.watsonplatform.net/visual-recognition/api'

    config_prefix = 'VISUALRECOGNITION'

    domain = 'com.ibm.watson.developer-cloud.VisualRecognitionV3'

    default_version = '2016-05-20'

    def make_auth(self, username=None, password=None, api_key=None):
        if api_key:
            return APIKeyAuthenticationStrategy(api_key, name='api_key', session=self.session, timeout=self.timeout)
        return super(VisualRecognition, self).make_auth(username, password)

    def _image_request(self, path, url, image, parameters):
        if url is not None:
            params = {'url': url, **parameters}
            return self.request('GET', path, params=params, versioned=True, accept=MediaType.JSON)
        if image is None:
            raise ValueError('Either url or image is required')
        files = {'images_file': ('image', image, MediaType.OCTET_STREAM)}
        parameters = {k: v for k, v in parameters.items() if v is not None}
        if parameters:
            files['parameters'] = ('parameters.json', json.dumps(parameters), MediaType.JSON)
        return self.request('POST', path, versioned=True, accept=MediaType.JSON, files=files)

    def classify(self, url=None, image=None, classifier_ids=None, owners=None, threshold=None):
        """
        https://www.ibm.com/watson/developercloud/visual-recognition/api/v3/#classify_an_image

        :param image: image (or zip) file object or bytes, used when ``url`` is not given
        """
        parameters = {'classifier_ids': classifier_ids, 'owners': owners, 'threshold': threshold}
        request = self._image_request('/v3/classify', url, image, parameters)
        return self.decode(ClassifiedImages, self.execute(request))

    def detect_faces(self, url=None, image=None):
        request = self._image_request('/v3/detect_faces', url, image, {})
        return self.decode(ImagesWithFaces, self.execute(request))

    def get_classifiers(self, verbose=None):
        params = {'verbose': verbose}
        request = self.request('GET', '/v3/classifiers', params=params, versioned=True, accept=MediaType.JSON)
        return self.decode_list(VisualRecognitionClassifier, self.execute(request), ('classifiers',))

    def get_classifier(self, classifier_id):
        request = self.request(
            'GET', '/v3/classifiers/{}'.format(classifier_id), versioned=True, accept=MediaType.JSON)
        return self.decode(VisualRecognitionClassifier, self.execute(request))

    def delete_classifier(self, classifier_id):
        self.execute(self.request('DELETE', '/v3/classifiers/{}'.format(classifier_id), versioned=True))


# EOF
