"""
Tests for declarative response decoding.
"""
from typing import List, Optional

import pytest
from pydantic import Field

from watsonkit.errors import WatsonDecodeError
from watsonkit.mapping import DecodeFailure, Decoded, StringFloat, StringInt, WatsonModel, decode, decode_list


class Face(WatsonModel):
    position_x: StringInt = Field(alias='positionX')
    score: Optional[StringFloat] = None


class Model(WatsonModel):
    model_id: str
    name: Optional[str] = None
    faces: List[Face] = []


class TestDecode:

    def test_success_populates_fields(self):
        result = decode(Model, {'model_id': 'en-es', 'name': 'English to Spanish', 'ignored': 1})
        assert isinstance(result, Decoded)
        assert result.ok
        assert result.value.model_id == 'en-es'
        assert result.value.name == 'English to Spanish'

    def test_optional_fields_default_to_none(self):
        model = decode(Model, {'model_id': 'x'}).unwrap()
        assert model.name is None
        assert model.faces == []

    def test_missing_required_field_is_reported(self):
        result = decode(Model, {'name': 'nameless'})
        assert isinstance(result, DecodeFailure)
        assert not result.ok
        assert result.errors[0]['loc'] == ('model_id',)
        with pytest.raises(WatsonDecodeError):
            result.unwrap()

    def test_wrong_shape_is_reported(self):
        assert not decode(Model, ['not', 'an', 'object']).ok

    def test_string_encoded_numbers_are_coerced(self):
        model = decode(Model, {'model_id': 'x', 'faces': [{'positionX': '12', 'score': '0.93'}]}).unwrap()
        assert model.faces[0].position_x == 12
        assert model.faces[0].score == pytest.approx(0.93)

    def test_string_encoded_float_into_int(self):
        assert decode(Face, {'positionX': '7.0'}).unwrap().position_x == 7

    def test_fractional_string_into_int_is_reported(self):
        result = decode(Face, {'positionX': '12.5'})
        assert not result.ok
        assert result.errors[0]['loc'] == ('positionX',)

    def test_garbage_number_is_reported(self):
        assert not decode(Face, {'positionX': 'twelve'}).ok

    def test_path_is_walked(self):
        assert decode(str, {'model_id': 'abc'}, ('model_id',)).unwrap() == 'abc'

    def test_missing_path_key_is_reported(self):
        result = decode(str, {'other': 'abc'}, ('model_id',))
        assert not result.ok
        assert 'model_id' in result.errors[0]

    def test_models_are_immutable(self):
        model = decode(Model, {'model_id': 'x'}).unwrap()
        with pytest.raises(Exception):
            model.model_id = 'y'


class TestDecodeList:

    def test_decodes_array_under_key(self):
        payload = {'models': [{'model_id': 'a'}, {'model_id': 'b'}]}
        models = decode_list(Model, payload, ('models',)).unwrap()
        assert [model.model_id for model in models] == ['a', 'b']

    def test_one_bad_element_fails_the_list(self):
        result = decode_list(Model, {'models': [{'model_id': 'a'}, {}]}, ('models',))
        assert not result.ok
        assert result.model is Model
