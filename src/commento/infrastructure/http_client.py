"""Shared HTTP client utilities (requests + retry/backoff).

HTTP logic lives here so every provider sends requests the same way.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests
from tenacity import (
    before_sleep_log,
    retry as tenacity_retry,
    retry_if_exception,
    stop_after_attempt,
    stop_after_delay,
    wait_exponential,
    wait_random,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RetryConfig:
    max_attempts: int = 1
    initial_delay: float = 1.0
    backoff_multiplier: float = 2.0
    jitter: float = 0.1  # +/-10% by default


def retry_config_from_dict(config: Dict[str, Any]) -> RetryConfig:
    """Parse retry config from a provider config dict, clamping bad values."""
    defaults = RetryConfig()

    def _number(key: str, cast, default):
        try:
            return cast(config.get(key, default))
        except (TypeError, ValueError):
            return default

    max_attempts = _number("max_attempts", int, defaults.max_attempts)
    initial_delay = _number("initial_delay", float, defaults.initial_delay)
    backoff_multiplier = _number("backoff_multiplier", float, defaults.backoff_multiplier)
    jitter = _number("jitter", float, defaults.jitter)

    return RetryConfig(
        max_attempts=max(1, max_attempts),
        initial_delay=max(0.0, initial_delay),
        backoff_multiplier=max(1.0, backoff_multiplier),
        jitter=max(0.0, jitter),
    )


def _should_retry_http_error(exception: requests.exceptions.HTTPError) -> bool:
    """Check if HTTPError should be retried."""
    status_code = exception.response.status_code if exception.response is not None else None
    # Don't retry on auth errors or most 4xx (except 429)
    if status_code in (401, 403):
        return False
    if status_code and 400 <= status_code < 500 and status_code != 429:
        return False
    # Retry on 429 and 5xx
    return True


def _retry_condition(exception: BaseException) -> bool:
    if isinstance(exception, requests.exceptions.HTTPError):
        return _should_retry_http_error(exception)
    # Network errors
    return isinstance(exception, requests.exceptions.RequestException)


def post_json_with_retries(
    url: str,
    *,
    payload: Dict[str, Any],
    headers: Dict[str, str],
    timeout: float,
    retry: RetryConfig,
    deadline: Optional[float] = None,
) -> requests.Response:
    """POST JSON, retrying network errors, 429 and 5xx up to retry.max_attempts.

    With a deadline, each attempt gets an equal share of it as its request
    timeout and no new attempt starts once the deadline has passed.
    """
    stop = stop_after_attempt(retry.max_attempts)
    if deadline is not None:
        timeout = min(timeout, deadline / retry.max_attempts)
        stop = stop | stop_after_delay(deadline)

    wait = wait_exponential(
        multiplier=retry.initial_delay,
        exp_base=retry.backoff_multiplier,
        min=retry.initial_delay,
        max=60.0,
    )
    if retry.jitter > 0:
        jitter_amount = retry.initial_delay * retry.jitter
        wait = wait + wait_random(-jitter_amount, jitter_amount)

    @tenacity_retry(
        stop=stop,
        wait=wait,
        retry=retry_if_exception(_retry_condition),
        reraise=True,
        before_sleep=before_sleep_log(logger, logging.WARNING),
    )
    def _request_with_retry() -> requests.Response:
        logger.debug(f"HTTP POST {url}")
        resp = requests.post(url, json=payload, headers=headers, timeout=timeout)
        resp.raise_for_status()
        return resp

    return _request_with_retry()
