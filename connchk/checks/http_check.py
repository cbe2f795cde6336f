from __future__ import annotations

import logging
from typing import Any

import requests

from connchk.checks.results import CheckFailure
from connchk.config import settings

logger = logging.getLogger(__name__)

MAX_BODY_CHARS = 240


def _read_body(resp: requests.Response) -> str:
    try:
        text = resp.text
    except (requests.RequestException, UnicodeDecodeError) as exc:
        return f"<body unavailable: {exc}>"
    text = text.replace("\r", "").replace("\n", "\\n")
    if len(text) > MAX_BODY_CHARS:
        # marker counts toward the limit
        text = text[: MAX_BODY_CHARS - 3] + "..."
    return text


def failure_detail(resp: requests.Response) -> str:
    status = f"{resp.status_code} {resp.reason}" if resp.reason else str(resp.status_code)
    return f"HTTP {status}: {_read_body(resp)}"


def _expect_status(resp: requests.Response, expected: int) -> None:
    if resp.status_code != expected:
        raise CheckFailure(failure_detail(resp), status_code=resp.status_code)


def _send(method: str, url: str, **kwargs: Any) -> requests.Response:
    try:
        if method == "GET":
            return requests.get(url, timeout=settings.CONNCHK_TIMEOUT_SECONDS, stream=True, **kwargs)
        return requests.post(url, timeout=settings.CONNCHK_TIMEOUT_SECONDS, stream=True, **kwargs)
    except requests.RequestException as exc:
        raise CheckFailure(f"{exc.__class__.__name__}: {exc}") from exc


def run_http_get(url: str) -> None:
    with _send("GET", url) as resp:
        logger.debug("GET %s -> %s", url, resp.status_code)
        _expect_status(resp, requests.codes.ok)


def run_http_form(url: str, params: dict[str, str], ok: int) -> None:
    with _send("POST", url, data=params) as resp:
        logger.debug("POST form %s -> %s (want %s)", url, resp.status_code, ok)
        _expect_status(resp, ok)


def run_http_json(url: str, body: Any, ok: int) -> None:
    with _send("POST", url, json=body) as resp:
        logger.debug("POST json %s -> %s (want %s)", url, resp.status_code, ok)
        _expect_status(resp, ok)
