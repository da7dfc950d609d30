"""Centralized network boundary helpers."""

from __future__ import annotations

import http.client
import urllib.error
import urllib.request

from ..errors import NetworkError


def http_get(url: str, timeout_seconds: int = 30) -> tuple[int, str]:
    req = urllib.request.Request(url, method="GET")
    with urllib.request.urlopen(req, timeout=timeout_seconds) as resp:  # nosec - caller controls endpoint
        return int(resp.status), resp.read().decode("utf-8")


def fetch_text(url: str, timeout_seconds: int = 30) -> str:
    try:
        status, body = http_get(url, timeout_seconds)
    except urllib.error.HTTPError as exc:
        raise NetworkError(f"GET {url} failed with status {exc.code}") from exc
    except (urllib.error.URLError, http.client.HTTPException, OSError) as exc:
        raise NetworkError(f"GET {url} failed: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise NetworkError(f"GET {url} returned non-text content") from exc
    except ValueError as exc:
        raise NetworkError(f"GET {url} failed: invalid URL ({exc})") from exc
    if not 200 <= status < 300:
        raise NetworkError(f"GET {url} failed with status {status}")
    return body
