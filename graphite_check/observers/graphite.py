"""
Reads datapoints for a target from the Graphite render API.
"""

import socket
from collections.abc import Callable
from typing import Any
from urllib.parse import quote

import requests

from graphite_check.config import CheckConfig
from graphite_check.core import Datapoint, TransportError
from graphite_check.logging_config import get_logger

logger = get_logger(__name__)

HOSTNAME_PLACEHOLDER = "$"
TARGET_SAFE_CHARS = "$.,()*{}:"

CONNECT_FAILED = "Failed to connect to graphite server"
NO_DATA = "No data for time period and/or target"


def format_target(
    target: str,
    hostname_sub: str = "_",
    placeholder: str = HOSTNAME_PLACEHOLDER,
    hostname: str | None = None
) -> tuple[str, str | None]:
    """
    Replace the hostname placeholder in a target.

    The hostname has its dots replaced by hostname_sub so it forms a single
    Graphite path node.

    Args:
        target: Target template, e.g. "servers.$.load"
        hostname_sub: Replacement for "." in the hostname
        placeholder: Placeholder to replace
        hostname: Fully-qualified hostname (resolved locally if not given)

    Returns:
        (resolved target, formatted hostname or None if nothing was replaced)
    """
    if placeholder not in target:
        return target, None

    fqdn = hostname if hostname is not None else socket.getfqdn()
    formatted = fqdn.replace(".", hostname_sub)
    return target.replace(placeholder, formatted), formatted


def render_url(server: str, target: str, timespan: int) -> str:
    """Build the render API URL for the last timespan minutes (plus one)."""
    # Graphite function syntax stays readable; "&", "#", spaces etc. are escaped
    query_target = quote(target, safe=TARGET_SAFE_CHARS)
    return f"http://{server}/render?format=json&target={query_target}&from=-{timespan + 1}min"


class SeriesFetcher:
    """
    Fetches one target's datapoints from Graphite.

    A single GET is issued; failures are reported, never retried.
    """

    def __init__(
        self,
        config: CheckConfig,
        hostname_resolver: Callable[[], str] = socket.getfqdn
    ):
        """
        Initialize the fetcher.

        Args:
            config: Validated check configuration (server and target required)
            hostname_resolver: Returns the local fully-qualified hostname
        """
        self.config = config
        self.hostname_resolver = hostname_resolver
        self.formatted_host: str | None = None

    def resolve_target(self) -> str:
        """Return the target with any hostname placeholder substituted."""
        target = self.config.target or ""
        if HOSTNAME_PLACEHOLDER not in target:
            return target

        resolved, self.formatted_host = format_target(
            target,
            self.config.hostname_sub,
            hostname=self.hostname_resolver()
        )
        return resolved

    def fetch(self) -> list[Datapoint]:
        """
        Request the datapoints of the first series in the response.

        Raises:
            TransportError: If Graphite cannot be reached or returns no series
        """
        url = render_url(self.config.server or "", self.resolve_target(), self.config.timespan)
        logger.debug("Requesting %s", url)

        try:
            response = requests.get(url, timeout=self.config.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            logger.error("Graphite request failed: %s", e)
            raise TransportError(CONNECT_FAILED) from e

        try:
            payload = response.json()
        except ValueError as e:
            logger.error("Graphite returned a non-JSON body: %s", e)
            raise TransportError(NO_DATA) from e

        datapoints = parse_datapoints(payload)
        logger.info("Received %s datapoint(s) for %s", len(datapoints), url)
        return datapoints


def parse_datapoints(payload: Any) -> list[Datapoint]:
    """
    Extract datapoints from a decoded render API response.

    Raises:
        TransportError: If the first series or its datapoints are missing or malformed
    """
    if not isinstance(payload, list) or not payload:
        raise TransportError(NO_DATA)

    first = payload[0]
    raw_points = first.get("datapoints") if isinstance(first, dict) else None
    if not isinstance(raw_points, list):
        raise TransportError(NO_DATA)

    datapoints = []
    for pair in raw_points:
        if not isinstance(pair, (list, tuple)) or len(pair) != 2:
            raise TransportError(NO_DATA)
        value, timestamp = pair
        try:
            datapoints.append(Datapoint(
                value=None if value is None else float(value),
                timestamp=int(timestamp)
            ))
        except (TypeError, ValueError) as e:
            raise TransportError(NO_DATA) from e

    return datapoints
