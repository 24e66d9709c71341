#
# WatsonKit
#
# Copyright (C) 2017 Boris Raicheff
# All rights reserved
#


from .authentication import (
    APIKeyAuthenticationStrategy,
    AuthenticationStrategy,
    BasicAuthenticationStrategy,
    FacebookAuthenticationStrategy,
    TokenAuthenticationStrategy,
)
from .errors import WatsonApiException, WatsonAuthenticationError, WatsonDecodeError, WatsonException
from .extension import Watson
from .mapping import DecodeFailure, Decoded, WatsonModel, decode, decode_list
from .rest import MediaType, RestRequest
from .service import WatsonService
from .services import *


__version__ = '0.2.0'


# EOF
