# -*- coding: utf-8 -*-
"""
Question Bank API Client
========================

Thin request/response layer over the PostgREST (Supabase) store that holds
exams, courses and questions, plus the edge function that extracts questions
from PDFs. Holds no state besides its configuration.
"""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

import requests

from services.exceptions import ApiException, NetworkException
from utils.logger import get_logger

logger = get_logger(__name__)

_LOG_BODY_LIMIT = 1000


@dataclass
class ApiConfig:
    """
    Connection settings for the store.

    Example .env:
        SUPABASE_URL=https://xyzcompany.supabase.co
        SUPABASE_ANON_KEY=eyJhbGciOi...
    """
    base_url: str = None  # Will be loaded from Config
    anon_key: str = None  # Will be loaded from Config
    timeout: int = None
    extraction_timeout: int = None

    def __post_init__(self):
        """Load from Config if not provided."""
        from app.config import Config

        if self.base_url is None:
            self.base_url = Config.SUPABASE_URL
        if self.anon_key is None:
            self.anon_key = Config.SUPABASE_ANON_KEY
        if self.timeout is None:
            self.timeout = Config.API_TIMEOUT
        if self.extraction_timeout is None:
            self.extraction_timeout = Config.EXTRACTION_TIMEOUT


class QuestionBankApiClient:
    """
    API client for the question bank store.

    Usage:
        client = QuestionBankApiClient(ApiConfig(base_url="http://localhost:54321"))
        exams = client.list_exams()
    """

    REST_PREFIX = "/rest/v1"
    FUNCTIONS_PREFIX = "/functions/v1"

    def __init__(self, config: ApiConfig):
        self.config = config
        self.base_url = config.base_url.rstrip('/')
        self.session = requests.Session()
        logger.info(f"API client ready for {self.base_url}")

    def _headers(self, json_body: bool = True) -> Dict[str, str]:
        headers = {
            "apikey": self.config.anon_key,
            "Authorization": f"Bearer {self.config.anon_key}",
            "Accept": "application/json",
        }
        if json_body:
            headers["Content-Type"] = "application/json"
        return headers

    def _request(
        self,
        method: str,
        endpoint: str,
        json_data: Optional[Any] = None,
        params: Optional[Dict] = None,
        extra_headers: Optional[Dict[str, str]] = None,
        files: Optional[Dict] = None,
        data: Optional[Dict] = None,
        timeout: Optional[int] = None,
    ) -> Any:
        """
        Execute an HTTP request and translate failures.

        Args:
            method: HTTP method (GET, POST, ...)
            endpoint: Path below the base URL (e.g. "/rest/v1/exams")
            json_data: JSON payload
            params: Query parameters
            extra_headers: Headers merged over the defaults
            files: Multipart files (switches off the JSON content type)
            data: Multipart form fields
            timeout: Overrides the configured timeout

        Returns:
            Decoded JSON body, or None for an empty body

        Raises:
            ApiException: the store answered with an error status
            NetworkException: the request never got an answer
        """
        url = f"{self.base_url}{endpoint}"
        headers = self._headers(json_body=files is None)
        if extra_headers:
            headers.update(extra_headers)

        logger.info(f"[API REQ] {method} {endpoint}")
        if params:
            logger.info(f"[API REQ] Params: {params}")
        if json_data is not None:
            logger.debug(f"[API REQ] Body: {json.dumps(json_data, ensure_ascii=False, default=str)}")

        try:
            response = self.session.request(
                method=method,
                url=url,
                json=json_data,
                params=params,
                headers=headers,
                files=files,
                data=data,
                timeout=timeout or self.config.timeout,
            )
            response.raise_for_status()

            result = None
            if response.text:
                result = response.json()

            logger.info(f"[API RES] {response.status_code} {endpoint}")
            if result is not None:
                res_str = json.dumps(result, ensure_ascii=False, default=str)
                if len(res_str) > _LOG_BODY_LIMIT:
                    logger.debug(f"[API RES] Body (truncated): {res_str[:_LOG_BODY_LIMIT]}...")
                else:
                    logger.debug(f"[API RES] Body: {res_str}")

            return result

        except requests.exceptions.HTTPError as e:
            status_code = e.response.status_code if e.response is not None else 0
            response_data = {}
            try:
                response_data = e.response.json() if e.response is not None else {}
            except ValueError:
                pass
            logger.error(f"[API ERR] {status_code} {method} {endpoint} | Response: {response_data}")
            raise ApiException(
                message=str(e),
                status_code=status_code,
                response_data=response_data if isinstance(response_data, dict) else {"errors": response_data}
            )
        except (requests.exceptions.ConnectionError, requests.exceptions.Timeout) as e:
            logger.error(f"Network error: {endpoint} - {e}")
            raise NetworkException(message=str(e), original_error=e)
        except requests.exceptions.RequestException as e:
            logger.error(f"Request failed: {endpoint} - {e}")
            raise NetworkException(message=str(e), original_error=e)

    def _insert(self, table: str, rows: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        """Insert rows and return the stored representation."""
        result = self._request(
            "POST",
            f"{self.REST_PREFIX}/{table}",
            json_data=rows,
            extra_headers={"Prefer": "return=representation"},
        )
        return result or []

    @staticmethod
    def _single(rows: List[Dict[str, Any]], table: str) -> Dict[str, Any]:
        if not rows:
            raise ApiException(message=f"Insert into {table} returned no row", context=table)
        return rows[0]

    # ==================== Exams ====================

    def list_exams(self) -> List[Dict[str, Any]]:
        """All exams ordered by name."""
        exams = self._request(
            "GET",
            f"{self.REST_PREFIX}/exams",
            params={"select": "*", "order": "name"},
        )
        logger.info(f"Fetched {len(exams or [])} exams")
        return exams or []

    def create_exam(self, name: str, description: Optional[str] = None) -> Dict[str, Any]:
        """Insert one exam and return the stored row."""
        rows = self._insert("exams", [{"name": name, "description": description}])
        return self._single(rows, "exams")

    # ==================== Courses ====================

    def list_courses(self, exam_id: str) -> List[Dict[str, Any]]:
        """Courses of one exam ordered by name."""
        courses = self._request(
            "GET",
            f"{self.REST_PREFIX}/courses",
            params={"select": "*", "exam_id": f"eq.{exam_id}", "order": "name"},
        )
        logger.info(f"Fetched {len(courses or [])} courses for exam {exam_id}")
        return courses or []

    def create_course(
        self,
        exam_id: str,
        name: str,
        description: Optional[str] = None
    ) -> Dict[str, Any]:
        """Insert one course under an exam and return the stored row."""
        rows = self._insert(
            "courses",
            [{"exam_id": exam_id, "name": name, "description": description}],
        )
        return self._single(rows, "courses")

    # ==================== Questions ====================

    def insert_questions(self, rows: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        """Bulk insert extracted questions."""
        if not rows:
            return []
        stored = self._insert("questions", rows)
        logger.info(f"Inserted {len(stored)} questions")
        return stored

    def extract_questions(self, pdf_path: Path, metadata: Dict[str, Any]) -> List[Dict[str, Any]]:
        """
        Send one PDF to the extraction function.

        Args:
            pdf_path: PDF on disk
            metadata: Batch metadata (course, slot, part, year, type settings)

        Returns:
            Raw question dicts as produced by the function
        """
        from app.config import Config

        pdf_path = Path(pdf_path)
        with pdf_path.open("rb") as handle:
            result = self._request(
                "POST",
                f"{self.FUNCTIONS_PREFIX}/{Config.EXTRACTION_FUNCTION}",
                files={"file": (pdf_path.name, handle, "application/pdf")},
                data={"metadata": json.dumps(metadata)},
                timeout=self.config.extraction_timeout,
            )

        questions = result.get("questions") if isinstance(result, dict) else result
        if questions is None:
            return []
        if not isinstance(questions, list) or not all(isinstance(q, dict) for q in questions):
            logger.error(f"[API ERR] Unexpected extraction body for {pdf_path.name}: {str(result)[:_LOG_BODY_LIMIT]}")
            raise ApiException(
                message=f"Extraction returned an unexpected body for {pdf_path.name}",
                response_data=result if isinstance(result, dict) else {"body": result},
                context="extraction",
            )
        return questions


# Singleton instance
_api_client_instance: Optional[QuestionBankApiClient] = None


def get_api_client(config: Optional[ApiConfig] = None) -> QuestionBankApiClient:
    """
    Shared API client instance.

    Args:
        config: Used only when the instance is first created

    Returns:
        QuestionBankApiClient instance
    """
    global _api_client_instance

    if _api_client_instance is None:
        if config is None:
            config = ApiConfig()
        _api_client_instance = QuestionBankApiClient(config)

    return _api_client_instance


def reset_api_client():
    """Drop the shared instance (used by tests)."""
    global _api_client_instance
    _api_client_instance = None
