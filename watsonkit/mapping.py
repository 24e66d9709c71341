#
# WatsonKit
#
# Copyright (C) 2017 Boris Raicheff
# All rights reserved
#


"""
Declarative JSON-to-model decoding.

Models are frozen pydantic models; each field declares its wire key as an
alias. :func:`decode` never returns a half-populated object silently: it
returns either :class:`Decoded` or :class:`DecodeFailure`.
"""


from typing import Annotated, Any, List, Union

from pydantic import BaseModel, BeforeValidator, ConfigDict, TypeAdapter, ValidationError

from .errors import WatsonDecodeError


__all__ = [
    'WatsonModel',
    'Decoded',
    'DecodeFailure',
    'StringInt',
    'StringFloat',
    'decode',
    'decode_list',
]


class WatsonModel(BaseModel):

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra='ignore', protected_namespaces=())


def _number(cast):
    def coerce(value):
        if not isinstance(value, str):
            return value
        value = value.strip()
        if cast is int and '.' in value:
            number = float(value)
            if not number.is_integer():
                raise ValueError('{!r} is not an integer'.format(value))
            return int(number)
        return cast(value)
    return coerce


# AlchemyAPI returns most numbers as strings.
StringInt = Annotated[int, BeforeValidator(_number(int))]
StringFloat = Annotated[float, BeforeValidator(_number(float))]


class Decoded(object):

    ok = True

    def __init__(self, value):
        self.value = value

    def __repr__(self):
        return '<Decoded {!r}>'.format(self.value)

    def unwrap(self):
        return self.value


class DecodeFailure(object):

    ok = False

    def __init__(self, model, errors, payload=None):
        self.model = model
        self.errors = errors
        self.payload = payload

    def __repr__(self):
        return '<DecodeFailure {} {}>'.format(getattr(self.model, '__name__', self.model), self.errors)

    def unwrap(self):
        raise WatsonDecodeError(self.model, self.errors, self.payload)


DecodeResult = Union[Decoded, DecodeFailure]


def _walk(payload, path):
    for key in path:
        if not isinstance(payload, dict) or key not in payload:
            raise KeyError(key)
        payload = payload[key]
    return payload


def decode(model, payload: Any, path=()) -> DecodeResult:
    """
    Decode ``payload`` (optionally below the key ``path``) into ``model``.

    ``model`` may be a :class:`WatsonModel` subclass or any type pydantic
    understands (``str``, ``List[str]``...).
    """
    try:
        value = _walk(payload, path)
    except KeyError as error:
        return DecodeFailure(model, ['missing key {!r}'.format(error.args[0])], payload)
    try:
        if isinstance(model, type) and issubclass(model, BaseModel):
            return Decoded(model.model_validate(value))
        return Decoded(TypeAdapter(model).validate_python(value))
    except ValidationError as error:
        return DecodeFailure(model, error.errors(include_url=False), payload)


def decode_list(model, payload, path=()) -> DecodeResult:
    result = decode(List[model], payload, path)
    if not result.ok:
        result.model = model
    return result


# EOF
