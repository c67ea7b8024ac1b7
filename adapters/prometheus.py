"""Prometheus HTTP API adapter for instant queries."""

from __future__ import annotations

import json
import logging
from typing import Any

import httpx

from checks.config import Settings, load_settings

logger = logging.getLogger(__name__)

QUERY_PATH = "/api/v1/query"


def query_url(server: str) -> str:
    """Return the instant-query endpoint for a Prometheus base URL."""
    return f"{server.rstrip('/')}{QUERY_PATH}"


def _client_kwargs(settings: Settings) -> dict[str, Any]:
    kwargs: dict[str, Any] = {"headers": {"User-Agent": settings.user_agent}}
    if settings.timeout is not None:
        kwargs["timeout"] = settings.timeout
    return kwargs


def query_prometheus(server: str, query: str, *, settings: Settings | None = None) -> str:
    """Run one instant query and return the response body.

    Error statuses still return their body; Prometheus error payloads carry
    no result so they fall through to an unparsable value. Transport
    failures return an empty string.
    """
    settings = settings or load_settings()
    url = query_url(server)
    logger.debug("Querying %s", url, extra={"query": query})
    try:
        with httpx.Client(**_client_kwargs(settings)) as client:
            r = client.get(url, params={"query": query})
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        logger.warning("Prometheus request to %s failed: %s", url, exc)
        return ""
    if r.status_code >= 400:
        logger.warning("Prometheus returned HTTP %s for %s", r.status_code, url)
    return r.text


def _sample_value(sample: Any) -> Any:
    # Samples are [<unix time>, "<value>"].
    return sample[1]


def extract_value(body: str) -> str:
    """Return the raw value of the first result in a query response.

    Only the first series of a vector or matrix is consulted; a matrix
    contributes its most recent sample. Returns ``""`` when no value can be
    found.
    """
    if not body:
        return ""
    try:
        payload = json.loads(body)
    except ValueError:
        logger.warning("Prometheus response is not valid JSON")
        return ""
    if not isinstance(payload, dict) or payload.get("status", "success") != "success":
        error = payload.get("error") if isinstance(payload, dict) else None
        logger.warning("Prometheus query failed: %s", error or "unexpected payload")
        return ""

    data = payload.get("data")
    if not isinstance(data, dict):
        logger.warning("Prometheus response has no data section")
        return ""
    result_type = data.get("resultType", "vector")
    result = data.get("result")
    try:
        if result_type in ("scalar", "string"):
            value = _sample_value(result)
        elif result_type == "matrix":
            value = _sample_value(result[0]["values"][-1])
        else:
            value = _sample_value(result[0]["value"])
    except (IndexError, KeyError, TypeError):
        logger.info("Prometheus query returned no %s result", result_type)
        return ""
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def fetch_value(server: str, query: str, *, settings: Settings | None = None) -> str:
    """Query Prometheus and extract the first result's raw value."""
    return extract_value(query_prometheus(server, query, settings=settings))
