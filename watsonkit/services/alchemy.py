#
# WatsonKit
#
# Copyright (C) 2017 Boris Raicheff
# All rights reserved
#


from http.client import BAD_REQUEST
from typing import Optional

from pydantic import Field

from ..authentication import APIKeyAuthenticationStrategy
from ..errors import WatsonApiException
from ..mapping import StringInt, WatsonModel
from ..rest import MediaType
from ..service import WatsonService


class AlchemyResult(WatsonModel):
    status: str
    status_info: Optional[str] = Field(default=None, alias='statusInfo')
    url: Optional[str] = None
    language: Optional[str] = None
    total_transactions: Optional[StringInt] = Field(default=None, alias='totalTransactions')


class AlchemyService(WatsonService):
    """
    Common plumbing of the AlchemyAPI services.

    Every call carries ``apikey`` and ``outputMode=json`` as query parameters.
    AlchemyAPI reports failures with ``200 OK`` and a
    ``{"status": "ERROR", "statusInfo": ...}`` body, which is turned into a
    :class:`WatsonApiException` with code 400.
    """

    default_url = 'https://gateway-a.watsonplatform.net/calls'

    config_prefix = 'ALCHEMY'

    def make_auth(self, username=None, password=None, api_key=None):
        if not api_key:
            return None
        return APIKeyAuthenticationStrategy(api_key, name='apikey', session=self.session, timeout=self.timeout)

    def request(self, method, path='', params=None, headers=None, versioned=False, **kwargs):
        params = {'outputMode': 'json', **(params or {})}
        return super(AlchemyService, self).request(method, path, params, headers, versioned, **kwargs)

    def execute(self, request, *args, **kwargs):
        response = super(AlchemyService, self).execute(request, *args, **kwargs)
        try:
            body = response.json()
        except ValueError:
            return response
        if isinstance(body, dict) and body.get('status') == 'ERROR':
            raise WatsonApiException(
                BAD_REQUEST, body['status'], body.get('statusInfo'), self.domain, response)
        return response

    def source_request(self, call, text=None, url=None, html=None, **params):
        """
        POST a form-encoded call against whichever source is given.

        ``call`` is the call name without its source prefix, e.g.
        ``GetRankedNamedEntities``.
        """
        if text is not None:
            path, data = '/text/Text' + call, {'text': text}
        elif url is not None:
            path, data = '/url/URL' + call, {'url': url}
        elif html is not None:
            path, data = '/html/HTML' + call, {'html': html}
        else:
            raise ValueError('One of text, url or html is required')
        return self.request(
            'POST', path, params=params, accept=MediaType.JSON, content_type=MediaType.FORM, data=data)


# EOF
