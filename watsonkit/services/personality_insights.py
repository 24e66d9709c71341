#
# WatsonKit
#
# Copyright (C) 2017 Boris Raicheff
# All rights reserved
#


from typing import List, Optional

from pydantic import Field

from ..mapping import WatsonModel
from ..rest import MediaType
from ..service import WatsonService


class Trait(WatsonModel):
    trait_id: str
    name: str
    category: Optional[str] = None
    percentile: float
    raw_score: Optional[float] = None
    significant: Optional[bool] = None
    children: Optional[List['Trait']] = None


class Behavior(WatsonModel):
    trait_id: str
    name: str
    category: Optional[str] = None
    percentage: float


class ConsumptionPreference(WatsonModel):
    consumption_preference_id: str
    name: str
    score: float


class ConsumptionPreferencesCategory(WatsonModel):
    consumption_preference_category_id: str
    name: str
    consumption_preferences: List[ConsumptionPreference] = []


class Profile(WatsonModel):
    processed_language: str
    word_count: int
    word_count_message: Optional[str] = None
    personality: List[Trait]
    needs: List[Trait] = []
    values: List[Trait] = []
    behavior: Optional[List[Behavior]] = None
    consumption_preferences: Optional[List[ConsumptionPreferencesCategory]] = None
    warnings: List[dict] = []


class ContentItem(WatsonModel):
    """One input item, serialized with :meth:`to_json`."""

    content: str
    id: Optional[str] = None
    created: Optional[int] = None
    updated: Optional[int] = None
    contenttype: Optional[str] = None
    language: Optional[str] = None
    parentid: Optional[str] = None
    reply: Optional[bool] = None
    forward: Optional[bool] = None
    user_id: Optional[str] = Field(default=None, alias='userid')

    def to_json(self):
        return self.model_dump(by_alias=True, exclude_none=True)


class PersonalityInsights(WatsonService):
    """
    https://www.ibm.com/watson/developercloud/personality-insights.html
    """

    default_url = 'https://gateway.watsonplatform.net/personality-insights/api'

    config_prefix = 'PERSONALITYINSIGHTS'

    domain = 'com.ibm.watson.developer-cloud.PersonalityInsightsV3'

    default_version = '2016-10-20'

    def _profile_request(self, content, accept, content_language, accept_language, params):
        headers = {'Content-Language': content_language, 'Accept-Language': accept_language}
        headers = {k: v for k, v in headers.items() if v is not None}
        if isinstance(content, str):
            kwargs = {'content_type': MediaType.TEXT + ';charset=utf-8', 'data': content.encode('utf-8')}
        else:
            items = [item.to_json() if isinstance(item, ContentItem) else item for item in content]
            kwargs = {'content_type': MediaType.JSON, 'json': {'contentItems': items}}
        return self.request('POST', '/v3/profile', params=params, headers=headers, versioned=True,
                            accept=accept, **kwargs)

    def get_profile(self, content, content_language=None, accept_language=None, raw_scores=None,
                    consumption_preferences=None):
        """
        https://www.ibm.com/watson/developercloud/personality-insights/api/v3/#profile

        :param content: plain text, or a list of :class:`ContentItem`
        """
        params = {'raw_scores': raw_scores, 'consumption_preferences': consumption_preferences}
        request = self._profile_request(content, MediaType.JSON, content_language, accept_language, params)
        return self.decode(Profile, self.execute(request))

    def get_profile_csv(self, content, content_language=None, accept_language=None, raw_scores=None,
                        csv_headers=None, consumption_preferences=None):
        params = {
            'raw_scores': raw_scores,
            'csv_headers': csv_headers,
            'consumption_preferences': consumption_preferences,
        }
        request = self._profile_request(content, MediaType.CSV, content_language, accept_language, params)
        return self.execute(request).text


# EOF
