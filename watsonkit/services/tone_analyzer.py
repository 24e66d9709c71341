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


class ToneScore(WatsonModel):
    score: float
    tone_id: str
    tone_name: Optional[str] = None


class ToneCategory(WatsonModel):
    category_id: str
    category_name: Optional[str] = None
    tones: List[ToneScore] = []


class SentenceAnalysis(WatsonModel):
    sentence_id: int
    text: Optional[str] = None
    input_from: Optional[int] = None
    input_to: Optional[int] = None
    tone_categories: List[ToneCategory] = []


class DocumentTone(WatsonModel):
    tone_categories: List[ToneCategory] = []


class ToneAnalysis(WatsonModel):
    document_tone: DocumentTone
    sentences_tone: Optional[List[SentenceAnalysis]] = None

    def category(self, category_id):
        for category in self.document_tone.tone_categories:
            if category.category_id == category_id:
                return category
        return None


class ToneAnalyzer(WatsonService):
    """
    https://www.ibm.com/watson/developercloud/tone-analyzer.html
    """

    default_url = 'https://gateway.watsonplatform.net/tone-analyzer/api'

    config_prefix = 'TONEANALYZER'

    domain = 'com.watsonplatform.toneanalyzer'

    default_version = '2016-05-19'

    def get_tone(self, text, tones=None, sentences=None):
        """
        https://www.ibm.com/watson/developercloud/tone-analyzer/api/v3/#post-tone

        :param tones: subset of ``emotion``, ``language``, ``social``
        :param sentences: ``False`` to skip sentence level analysis
        """
        params = {'tones': tones, 'sentences': sentences}
        request = self.request(
            'POST',
            '/v3/tone',
            params=params,
            versioned=True,
            accept=MediaType.JSON,
            content_type=MediaType.JSON,
            json={'text': text},
        )
        return self.decode(ToneAnalysis, self.execute(request))


# EOF
