#
# WatsonKit
#
# Copyright (C) 2017 Boris Raicheff
# All rights reserved
#


from typing import Any, Dict, List, Optional

from ..mapping import StringInt, WatsonModel
from ..rest import MediaType
from .alchemy import AlchemyResult, AlchemyService


class NewsDocument(WatsonModel):
    id: str
    source: Dict[str, Any] = {}
    timestamp: Optional[int] = None


class NewsResult(WatsonModel):
    docs: List[NewsDocument] = []
    next: Optional[str] = None
    count: Optional[StringInt] = None


class News(AlchemyResult):
    result: NewsResult


class AlchemyDataNews(AlchemyService):
    """
    http://www.ibm.com/watson/developercloud/alchemydata-news.html
    """

    domain = 'com.watsonplatform.alchemyDataNews'

    def get_news(self, start, end, query=None, return_fields=None, count=None):
        """
        :param start: e.g. ``now-1d`` or a UNIX timestamp
        :param end: e.g. ``now``
        :param query: mapping of query fields, e.g.
            ``{'q.enriched.url.title': 'O[IBM^Apple]'}``
        :param return_fields: list of fields to include in each document
        """
        params = {'start': start, 'end': end, 'return': return_fields, 'count': count, **(query or {})}
        request = self.request('GET', '/data/GetNews', params=params, accept=MediaType.JSON)
        return self.decode(News, self.execute(request))


# EOF
