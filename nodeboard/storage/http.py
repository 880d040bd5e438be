"""HTTP reporting backend for nodeboard."""

import logging

import requests

from ..config import DEFAULT_TIMEOUT, USER_AGENT
from ..core.errors import ReportError
from ..core.info import SystemInfo

logger = logging.getLogger(__name__)


def send_to_server(
    info: SystemInfo,
    url: str,
    timeout: float = DEFAULT_TIMEOUT,
) -> int:
    """POST system info as JSON to the onboarding endpoint.

    The response status and body are not checked: any HTTP response
    counts as delivered. The request is attempted exactly once.

    Args:
        info: Record to report
        url: Endpoint URL
        timeout: Seconds to wait for connect and for each read

    Returns:
        HTTP status code of the response (informational only)

    Raises:
        ReportError: If the record cannot be encoded or the request
            cannot be sent (DNS, connection, timeout)
    """
    try:
        body = info.to_json().encode("utf-8")
    except (ValueError, TypeError) as e:
        raise ReportError(f"Error marshaling JSON: {e}") from e

    headers = {"Content-Type": "application/json", "User-Agent": USER_AGENT}

    logger.debug("POST %s (%d bytes)", url, len(body))
    try:
        response = requests.post(url, data=body, headers=headers, timeout=timeout)
    except requests.RequestException as e:
        raise ReportError(f"Error connecting to server: {e}") from e

    status = response.status_code
    response.close()
    logger.debug("Server responded with HTTP %d", status)
    return status
