# -*- coding: utf-8 -*-
"""
Visit API Service - Persists wizard records via the REST API.

Connects to the /visits and /inspections endpoints. Creates a record
with POST and updates an existing one with PUT.
"""

import json
from typing import Any, Dict, Optional

import requests

from app.config import Config
from controllers.base_controller import OperationResult
from models.form_record import FormType
from services.exceptions import ApiException, NetworkException
from utils.logger import get_logger

logger = get_logger(__name__)


class VisitApiService:
    """
    Save collaborator of the wizards.

    Usage:
        service = VisitApiService(auth_token=session_token)
        result = service.submit_record(payload, "COMPLETED")
    """

    def __init__(
        self,
        endpoint: str = None,
        auth_token: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[int] = None,
        session: Optional[requests.Session] = None
    ):
        self.base_url = (base_url or Config.API_BASE_URL).rstrip('/')
        self.endpoint = endpoint or Config.VISITS_ENDPOINT
        self.timeout = timeout or Config.API_TIMEOUT
        self._auth_token = auth_token or Config.API_TOKEN
        self._session = session or requests.Session()

    @classmethod
    def for_form_type(cls, form_type: FormType, **kwargs) -> 'VisitApiService':
        """Service bound to the endpoint that stores ``form_type`` records."""
        if FormType(form_type) == FormType.VEHICLE_INSPECTION:
            return cls(endpoint=Config.INSPECTIONS_ENDPOINT, **kwargs)
        return cls(endpoint=Config.VISITS_ENDPOINT, **kwargs)

    def set_auth_token(self, token: str):
        """Set the authentication token."""
        self._auth_token = token

    def _headers(self) -> Dict[str, str]:
        """Get request headers with authentication."""
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        if self._auth_token:
            headers["Authorization"] = f"Bearer {self._auth_token}"
        return headers

    def submit_record(
        self,
        payload: Dict[str, Any],
        status: str,
        record_id: Optional[str] = None
    ) -> OperationResult:
        """
        Create or update a record.

        Args:
            payload: Body built by the wizard ({"visit_data", "form_data"})
            status: Record status to store (DRAFT, COMPLETED, ...)
            record_id: Id of the record to update, None to create

        Returns:
            OperationResult with the response body as data

        Raises:
            ApiException: The server answered with an error status
            NetworkException: The server could not be reached
        """
        body = dict(payload)
        body["visit_data"] = dict(body.get("visit_data") or {}, status=status)

        if record_id:
            method, url = "PUT", f"{self.base_url}{self.endpoint}/{record_id}"
        else:
            method, url = "POST", f"{self.base_url}{self.endpoint}"

        logger.info(f"[API REQ] {method} {url} (status={status})")
        logger.debug(f"[API REQ] Body: {json.dumps(body, ensure_ascii=False, default=str)}")

        try:
            response = self._session.request(
                method=method,
                url=url,
                data=json.dumps(body, ensure_ascii=False, default=str).encode("utf-8"),
                headers=self._headers(),
                timeout=self.timeout
            )
            response.raise_for_status()

        except requests.exceptions.HTTPError as e:
            status_code = e.response.status_code if e.response is not None else 0
            response_data = {}
            try:
                response_data = e.response.json() if e.response is not None else {}
            except ValueError:
                pass
            logger.error(f"[API ERR] {status_code} {method} {url} | Response: {response_data}")
            raise ApiException(
                message=str(e),
                status_code=status_code,
                response_data=response_data,
                context="visit"
            )
        except (requests.exceptions.ConnectionError, requests.exceptions.Timeout) as e:
            logger.error(f"Network error: {method} {url} - {e}")
            raise NetworkException(message=str(e), original_error=e, context="visit")
        except requests.exceptions.RequestException as e:
            logger.error(f"Request failed: {method} {url} - {e}")
            raise NetworkException(message=str(e), original_error=e, context="visit")

        data = None
        if response.text:
            try:
                data = response.json()
            except ValueError:
                logger.warning(f"[API RES] Non-JSON body from {url}")

        logger.info(f"[API RES] {response.status_code} {method} {url}")
        return OperationResult.ok(data=data, message=str(response.status_code))
