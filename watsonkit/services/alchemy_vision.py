#
# WatsonKit
#
# Copyright (C) 2017 Boris Raicheff
# All rights reserved
#


from typing import List, Optional

from pydantic import Field

from ..mapping import StringFloat, StringInt, WatsonModel
from ..rest import MediaType
from .alchemy import AlchemyResult, AlchemyService
from .alchemy_language import DisambiguatedLinks


class Gender(WatsonModel):
    gender: str
    score: StringFloat


class Age(WatsonModel):
    age_range: str = Field(alias='ageRange')
    score: StringFloat


class Identity(WatsonModel):
    name: str
    score: StringFloat
    disambiguated: Optional[DisambiguatedLinks] = None


class ImageFace(WatsonModel):
    position_x: StringInt = Field(alias='positionX')
    position_y: StringInt = Field(alias='positionY')
    width: StringInt
    height: StringInt
    gender: Optional[Gender] = None
    age: Optional[Age] = None
    identity: Optional[Identity] = None


class FaceTags(AlchemyResult):
    image_faces: List[ImageFace] = Field(default=[], alias='imageFaces')


class ImageKeyword(WatsonModel):
    text: str
    score: StringFloat


class ImageKeywords(AlchemyResult):
    image_keywords: List[ImageKeyword] = Field(default=[], alias='imageKeywords')


class AlchemyVision(AlchemyService):
    """
    http://www.ibm.com/watson/developercloud/alchemy-vision.html
    """

    domain = 'com.watsonplatform.alchemyVision'

    def _image_request(self, call, url, image, **params):
        if url is not None:
            return self.request('GET', '/url/URL' + call, params={'url': url, **params}, accept=MediaType.JSON)
        if image is None:
            raise ValueError('Either url or image is required')
        params['imagePostMode'] = 'raw'
        return self.request(
            'POST', '/image/Image' + call, params=params, accept=MediaType.JSON,
            content_type=MediaType.OCTET_STREAM, data=image)

    def get_ranked_image_face_tags(self, url=None, image=None, known_identities=None):
        params = {'knowledgeGraph': known_identities}
        request = self._image_request('GetRankedImageFaceTags', url, image, **params)
        return self.decode(FaceTags, self.execute(request))

    def get_ranked_image_keywords(self, url=None, image=None, force_show_all=None):
        params = {'forceShowAll': force_show_all}
        request = self._image_request('GetRankedImageKeywords', url, image, **params)
        return self.decode(ImageKeywords, self.execute(request))


# EOF
