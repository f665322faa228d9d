import pytest
from pydantic import ValidationError

from esclient.models.search_models import ResponseEnvelope


def test_envelope_reads_underscore_fields():
    env = ResponseEnvelope.model_validate_json(
        b'{"ok":true,"_index":"products","_type":"item","_id":"42",'
        b'"found":true,"_source":{"name":"widget"}}'
    )
    assert env.ok is True
    assert (env.index, env.type, env.id) == ("products", "item", "42")
    assert env.found is True
    assert env.source == {"name": "widget"}


def test_envelope_defaults_and_extra_fields():
    env = ResponseEnvelope.model_validate({"_version": 3, "result": "deleted"})
    assert env.ok is False
    assert env.found is False
    assert env.id == ""
    assert env.source is None


def test_envelope_rejects_non_boolean_flags():
    with pytest.raises(ValidationError):
        ResponseEnvelope.model_validate_json(b'{"ok": "true"}')
    with pytest.raises(ValidationError):
        ResponseEnvelope.model_validate_json(b'{"ok": true, "found": 1}')


def test_envelope_exists_flag_is_optional():
    assert ResponseEnvelope.model_validate_json(b"{}").exists is None
    assert ResponseEnvelope.model_validate_json(b'{"exists": false}').exists is False
