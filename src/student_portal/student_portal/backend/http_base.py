from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import requests

from ..core.exceptions import ApiResponseError, TransportError
from .connection import ApiConnection

logger = logging.getLogger(__name__)


def parse_json_safe(response: requests.Response) -> Any:
    """Decode the body only when the backend declares JSON; otherwise None."""
    content_type = response.headers.get("content-type", "")
    if "application/json" not in content_type:
        return None
    try:
        return response.json()
    except ValueError:
        return None


def fetch_json(
    conn: ApiConnection,
    method: str,
    path: str,
    *,
    params: Optional[Dict[str, Any]] = None,
    json: Any = None,
    error_message: str = "Request failed",
) -> Any:
    """Send one request to the backend and return the decoded JSON body.

    Raises TransportError when the request could not be made and
    ApiResponseError for any non-2xx answer (message taken from `{error}`).
    """

    if params:
        params = {k: v for k, v in params.items() if v is not None}

    try:
        response = conn.session.request(
            method,
            conn.url(path),
            params=params or None,
            json=json,
            timeout=conn.timeout,
        )
    except requests.RequestException as e:
        logger.error("%s %s failed: %s", method, path, e)
        raise TransportError(error_message) from e

    data = parse_json_safe(response)
    if not response.ok:
        message = error_message
        if isinstance(data, dict) and data.get("error"):
            message = str(data["error"])
        logger.warning("%s %s -> %s: %s", method, path, response.status_code, message)
        raise ApiResponseError(message, status_code=response.status_code, payload=data if isinstance(data, dict) else None)

    return data


def as_list(data: Any, *keys: str) -> List[Dict[str, Any]]:
    """Accept a bare JSON array or one wrapped under any of `keys`."""
    if isinstance(data, list):
        return list(data)
    if isinstance(data, dict):
        for key in keys:
            value = data.get(key)
            if isinstance(value, list):
                return list(value)
    return []


def first_or_none(data: Any) -> Optional[Dict[str, Any]]:
    if isinstance(data, list):
        return data[0] if data else None
    if isinstance(data, dict) and data:
        return data
    return None


def record_id(row: Dict[str, Any]) -> str:
    """Backend rows carry their key as `_id` or `id`."""
    value = row.get("_id", row.get("id"))
    return "" if value is None else str(value)


def ref_id(value: Any) -> str:
    """Normalize a reference that may be a plain id or an embedded document."""
    if isinstance(value, dict):
        return record_id(value)
    return "" if value is None else str(value)
