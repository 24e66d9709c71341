#
# WatsonKit
#
# Copyright (C) 2017 Boris Raicheff
# All rights reserved
#


from typing import Any, Dict, List, Optional

from ..mapping import WatsonModel
from ..rest import MediaType
from ..service import WatsonService


class Intent(WatsonModel):
    intent: str
    confidence: float


class Entity(WatsonModel):
    entity: str
    location: List[int] = []
    value: str
    confidence: Optional[float] = None


class OutputData(WatsonModel):
    text: List[str] = []
    log_messages: List[dict] = []
    nodes_visited: Optional[List[str]] = None


class MessageResponse(WatsonModel):
    input: Optional[Dict[str, Any]] = None
    alternate_intents: Optional[bool] = None
    context: Dict[str, Any] = {}
    entities: List[Entity] = []
    intents: List[Intent] = []
    output: OutputData

    @property
    def conversation_id(self):
        return self.context.get('conversation_id')


class Conversation(WatsonService):
    """
    https://www.ibm.com/watson/developercloud/conversation.html
    """

    default_url = 'https://gateway.watsonplatform.net/conversation/api'

    config_prefix = 'CONVERSATION'

    domain = 'com.ibm.watson.developer-cloud.ConversationV1'

    default_version = '2017-05-26'

    def message(self, workspace_id, text=None, context=None, entities=None, intents=None, output=None,
                alternate_intents=None):
        """
        https://www.ibm.com/watson/developercloud/conversation/api/v1/#send_message

        Pass the ``context`` of the previous :class:`MessageResponse` to
        continue the same conversation.
        """
        body = {
            'input': {'text': text} if text is not None else None,
            'context': context,
            'entities': entities,
            'intents': intents,
            'output': output,
            'alternate_intents': alternate_intents,
        }
        body = {k: v for k, v in body.items() if v is not None}
        request = self.request(
            'POST',
            '/v1/workspaces/{}/message'.format(workspace_id),
            versioned=True,
            accept=MediaType.JSON,
            content_type=MediaType.JSON,
            json=body,
        )
        return self.decode(MessageResponse, self.execute(request))


# EOF
