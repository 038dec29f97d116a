"""
Tests for environment driven settings.
"""

import json

from formengine.config import Settings
from formengine.services import serializer as serializer_module
from formengine.services.serializer import FormSerializer


def test_defaults():
    settings = Settings()
    assert settings.DEFAULT_SUBMIT_BUTTON_TEXT == "Submit Form"
    assert settings.EXPORT_INDENT == 2
    assert settings.STRICT_IMPORT is False


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("FORMENGINE_IMPORTED_FORM_TITLE", "Uploaded Form")
    monkeypatch.setenv("FORMENGINE_STRICT_IMPORT", "true")

    settings = Settings()

    assert settings.IMPORTED_FORM_TITLE == "Uploaded Form"
    assert settings.STRICT_IMPORT is True


def test_serializer_reads_settings(monkeypatch):
    monkeypatch.setattr(serializer_module.settings, "IMPORTED_FORM_TITLE", "From Settings")
    monkeypatch.setattr(serializer_module.settings, "EXPORT_INDENT", 4)

    form = FormSerializer().deserialize(json.dumps({"steps": [{"id": "s", "title": "S"}]}))

    assert form.title == "From Settings"
    assert FormSerializer().indent == 4
