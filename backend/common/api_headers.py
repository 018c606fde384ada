import requests
from typing import Any, Dict, Iterable, Optional, Tuple

_REDACTED = "***"


class ApiError(Exception):
    """Upstream call failed: transport error, timeout, non-200 status or undecodable body."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


def redact(text: str, secrets: Iterable[Optional[str]]) -> str:
    """Replace every non-empty secret in `text` with a placeholder."""
    out = str(text)
    for secret in secrets:
        if secret:
            out = out.replace(secret, _REDACTED)
    return out


def get_json_with_headers(
    url: str,
    params: Dict[str, Any],
    timeout: float = 15,
) -> Tuple[Any, Dict[str, str]]:
    """
    Performs a GET request and returns (parsed JSON, lowercased response headers).
    Raises ApiError on any failure. Error text never contains query param values
    that look like credentials (apiKey is redacted).
    """
    secrets = [params.get("apiKey")]
    try:
        response = requests.get(url, params=params, timeout=timeout)
    except requests.Timeout as e:
        raise ApiError(redact(f"Timed out after {timeout}s: {e}", secrets)) from e
    except requests.RequestException as e:
        raise ApiError(redact(str(e), secrets)) from e

    if response.status_code != 200:
        raise ApiError(
            redact(f"HTTP {response.status_code}: {response.text[:300]}", secrets),
            status_code=response.status_code,
        )

    try:
        data = response.json()
    except ValueError as e:
        raise ApiError(redact(f"Invalid JSON from upstream: {response.text[:120]!r}", secrets)) from e

    headers = {str(k).lower(): v for k, v in response.headers.items()}
    return data, headers
