# -*- coding: utf-8 -*-
"""
Tests for the question bank API client.

The HTTP session is replaced with a mock; no network access.
"""

import json
from unittest.mock import MagicMock

import pytest
import requests

from services.api_client import ApiConfig, QuestionBankApiClient, get_api_client, reset_api_client
from services.exceptions import ApiException, NetworkException, RemoteError


def _response(status_code: int, body) -> requests.Response:
    response = requests.Response()
    response.status_code = status_code
    response.reason = "OK" if status_code < 400 else "Error"
    response.url = "http://store.test/rest/v1/x"
    response.encoding = "utf-8"
    response._content = json.dumps(body).encode("utf-8") if body is not None else b""
    return response


@pytest.fixture
def client():
    api = QuestionBankApiClient(ApiConfig(
        base_url="http://store.test/",
        anon_key="anon-key",
        timeout=5,
        extraction_timeout=60,
    ))
    api.session = MagicMock()
    return api


class TestExams:

    def test_list_exams_requests_ordered_rows(self, client):
        client.session.request.return_value = _response(200, [{"id": "e1", "name": "GATE"}])

        exams = client.list_exams()

        assert exams == [{"id": "e1", "name": "GATE"}]
        kwargs = client.session.request.call_args.kwargs
        assert kwargs["method"] == "GET"
        assert kwargs["url"] == "http://store.test/rest/v1/exams"
        assert kwargs["params"] == {"select": "*", "order": "name"}
        assert kwargs["headers"]["apikey"] == "anon-key"
        assert kwargs["headers"]["Authorization"] == "Bearer anon-key"
        assert kwargs["timeout"] == 5

    def test_empty_body_gives_empty_list(self, client):
        client.session.request.return_value = _response(200, None)
        assert client.list_exams() == []

    def test_create_exam_asks_for_representation(self, client):
        client.session.request.return_value = _response(
            201, [{"id": "e9", "name": "CAT", "description": None}]
        )

        row = client.create_exam("CAT")

        assert row["id"] == "e9"
        kwargs = client.session.request.call_args.kwargs
        assert kwargs["method"] == "POST"
        assert kwargs["json"] == [{"name": "CAT", "description": None}]
        assert kwargs["headers"]["Prefer"] == "return=representation"

    def test_create_exam_without_returned_row_fails(self, client):
        client.session.request.return_value = _response(201, [])
        with pytest.raises(ApiException):
            client.create_exam("CAT")


class TestCourses:

    def test_list_courses_filters_by_exam(self, client):
        client.session.request.return_value = _response(200, [])

        client.list_courses("e1")

        kwargs = client.session.request.call_args.kwargs
        assert kwargs["url"] == "http://store.test/rest/v1/courses"
        assert kwargs["params"]["exam_id"] == "eq.e1"
        assert kwargs["params"]["order"] == "name"

    def test_create_course_sends_exam_id(self, client):
        client.session.request.return_value = _response(
            201, [{"id": "c1", "exam_id": "e1", "name": "Physics"}]
        )

        row = client.create_course("e1", "Physics", "Mechanics")

        assert row["exam_id"] == "e1"
        assert client.session.request.call_args.kwargs["json"] == [
            {"exam_id": "e1", "name": "Physics", "description": "Mechanics"}
        ]


class TestQuestions:

    def test_insert_nothing_skips_request(self, client):
        assert client.insert_questions([]) == []
        client.session.request.assert_not_called()

    def test_extract_questions_posts_multipart(self, client, pdf_files):
        client.session.request.return_value = _response(
            200, {"questions": [{"question_type": "MCQ", "question_statement": "Q1"}]}
        )

        questions = client.extract_questions(pdf_files[0], {"courseId": "c1"})

        assert questions == [{"question_type": "MCQ", "question_statement": "Q1"}]
        kwargs = client.session.request.call_args.kwargs
        assert kwargs["url"] == "http://store.test/functions/v1/extract-questions"
        assert kwargs["files"]["file"][0] == "paper1.pdf"
        assert json.loads(kwargs["data"]["metadata"]) == {"courseId": "c1"}
        assert "Content-Type" not in kwargs["headers"]
        assert kwargs["timeout"] == 60


class TestErrors:

    def test_http_error_becomes_api_exception(self, client):
        client.session.request.return_value = _response(409, {"message": "duplicate key"})

        with pytest.raises(ApiException) as exc_info:
            client.list_exams()

        assert exc_info.value.status_code == 409
        assert exc_info.value.response_data == {"message": "duplicate key"}
        assert isinstance(exc_info.value, RemoteError)

    def test_connection_error_becomes_network_exception(self, client):
        client.session.request.side_effect = requests.exceptions.ConnectionError("refused")

        with pytest.raises(NetworkException) as exc_info:
            client.list_exams()

        assert isinstance(exc_info.value.original_error, requests.exceptions.ConnectionError)

    def test_timeout_becomes_network_exception(self, client):
        client.session.request.side_effect = requests.exceptions.Timeout("timed out")
        with pytest.raises(NetworkException):
            client.create_exam("CAT")


def test_get_api_client_is_shared():
    reset_api_client()
    try:
        config = ApiConfig(base_url="http://store.test", anon_key="k")
        first = get_api_client(config)
        assert get_api_client() is first
    finally:
        reset_api_client()


class TestExtractionBody:

    def test_null_questions_means_none_found(self, client, pdf_files):
        client.session.request.return_value = _response(200, {"questions": None})
        assert client.extract_questions(pdf_files[0], {}) == []

    def test_bare_list_is_accepted(self, client, pdf_files):
        client.session.request.return_value = _response(200, [{"question_type": "NAT"}])
        assert client.extract_questions(pdf_files[0], {}) == [{"question_type": "NAT"}]

    @pytest.mark.parametrize("body", [
        {"questions": "not a list"},
        {"questions": [1, 2]},
        "unexpected",
    ])
    def test_malformed_body_raises_api_exception(self, client, pdf_files, body):
        client.session.request.return_value = _response(200, body)

        with pytest.raises(ApiException) as exc_info:
            client.extract_questions(pdf_files[0], {})

        assert exc_info.value.context == "extraction"
