# -*- coding: utf-8 -*-
"""
Tests for mapping exceptions to user-facing messages.
"""

import requests

from services.error_mapper import map_exception
from services.exceptions import ApiException, NetworkException, ValidationException
from services.translation_manager import tr


class TestMapException:

    def test_api_error_uses_call_site_message(self):
        error = ApiException("boom", status_code=500)
        assert map_exception(error, "exam.create") == tr("error.exam.create_failed")
        assert error.context == "exam.create"

    def test_api_error_without_context(self):
        assert map_exception(ApiException("boom", status_code=400)) == tr("error.api.rejected")

    def test_timeout_is_reported_as_timeout(self):
        error = NetworkException("slow", original_error=requests.exceptions.Timeout("Read timed out"))
        assert map_exception(error) == tr("error.api.timeout")

    def test_connection_failure(self):
        error = NetworkException("refused", original_error=requests.exceptions.ConnectionError("refused"))
        assert map_exception(error, "exam.load") == tr("error.api.connection")

    def test_validation_message_is_shown_as_is(self):
        error = ValidationException("Exam name is required", field="name")
        assert map_exception(error) == "Exam name is required"

    def test_unknown_error(self):
        assert map_exception(RuntimeError("x")) == tr("error.unexpected")
