#
# WatsonKit
#
# Copyright (C) 2017 Boris Raicheff
# All rights reserved
#


from typing import List, Optional

from pydantic import Field

from ..mapping import StringFloat, StringInt, WatsonModel
from .alchemy import AlchemyResult, AlchemyService


class Sentiment(WatsonModel):
    type: str
    score: Optional[StringFloat] = None
    mixed: Optional[StringInt] = None


class DisambiguatedLinks(WatsonModel):
    name: Optional[str] = None
    sub_type: Optional[List[str]] = Field(default=None, alias='subType')
    website: Optional[str] = None
    dbpedia: Optional[str] = None
    freebase: Optional[str] = None
    yago: Optional[str] = None
    opencyc: Optional[str] = None
    umbel: Optional[str] = None
    crunchbase: Optional[str] = None


class Entity(WatsonModel):
    type: str
    text: str
    relevance: Optional[StringFloat] = None
    count: Optional[StringInt] = None
    sentiment: Optional[Sentiment] = None
    disambiguated: Optional[DisambiguatedLinks] = None


class Entities(AlchemyResult):
    entities: List[Entity] = []


class Keyword(WatsonModel):
    text: str
    relevance: Optional[StringFloat] = None
    sentiment: Optional[Sentiment] = None


class Keywords(AlchemyResult):
    keywords: List[Keyword] = []


class Concept(WatsonModel):
    text: str
    relevance: Optional[StringFloat] = None
    website: Optional[str] = None
    dbpedia: Optional[str] = None
    freebase: Optional[str] = None


class Concepts(AlchemyResult):
    concepts: List[Concept] = []


class DocumentSentiment(AlchemyResult):
    doc_sentiment: Sentiment = Field(alias='docSentiment')


class Language(AlchemyResult):
    iso_639_1: Optional[str] = Field(default=None, alias='iso-639-1')
    iso_639_2: Optional[str] = Field(default=None, alias='iso-639-2')
    iso_639_3: Optional[str] = Field(default=None, alias='iso-639-3')
    ethnologue: Optional[str] = None
    native_speakers: Optional[str] = Field(default=None, alias='native-speakers')
    wikipedia: Optional[str] = None


class AlchemyLanguage(AlchemyService):
    """
    http://www.ibm.com/watson/developercloud/alchemy-language.html

    Every call takes exactly one of ``text``, ``url`` or ``html``.
    """

    domain = 'com.watsonplatform.alchemyLanguage'

    def get_entities(self, text=None, url=None, html=None, sentiment=None, disambiguate=None,
                     max_retrieve=None):
        params = {'sentiment': sentiment, 'disambiguate': disambiguate, 'maxRetrieve': max_retrieve}
        request = self.source_request('GetRankedNamedEntities', text, url, html, **params)
        return self.decode(Entities, self.execute(request))

    def get_keywords(self, text=None, url=None, html=None, sentiment=None, max_retrieve=None):
        params = {'sentiment': sentiment, 'maxRetrieve': max_retrieve}
        request = self.source_request('GetRankedKeywords', text, url, html, **params)
        return self.decode(Keywords, self.execute(request))

    def get_concepts(self, text=None, url=None, html=None, max_retrieve=None):
        request = self.source_request('GetRankedConcepts', text, url, html, maxRetrieve=max_retrieve)
        return self.decode(Concepts, self.execute(request))

    def get_sentiment(self, text=None, url=None, html=None):
        request = self.source_request('GetTextSentiment', text, url, html)
        return self.decode(DocumentSentiment, self.execute(request))

    def get_language(self, text=None, url=None, html=None):
        request = self.source_request('GetLanguage', text, url, html)
        return self.decode(Language, self.execute(request))


# EOF
