"""HTTP access to a single Riak node's status endpoints."""

from __future__ import annotations

import logging

import requests

from riak_exporter.config import Settings
from riak_exporter.consts import PROJECT_NAME, VERSION
from riak_exporter.exceptions import RiakNodeDown, RiakUnreachable, StatsFetchFailed
from riak_exporter.schemas.stats import JsonValue, parse_stats_payload

logger = logging.getLogger(__name__)


class RiakClient:
    """Issues the ``/ping`` and ``/stats`` requests against the Riak HTTP API.

    Every request is bounded by ``settings.timeout_seconds``. Failures are
    raised as ``ScrapeError`` subclasses; callers decide how to degrade.
    """

    def __init__(self, settings: Settings, session: requests.Session | None = None) -> None:
        self.settings = settings
        self._session = session or requests.Session()
        self._session.headers.update({"User-Agent": f"{PROJECT_NAME}/{VERSION}"})

    def ping(self) -> None:
        """Check that the node answers its liveness endpoint with 200.

        Raises:
            RiakUnreachable: If the request fails or times out
            RiakNodeDown: If the node answers with any other status
        """
        url = self.settings.ping_url
        try:
            with self._session.get(url, timeout=self.settings.timeout_seconds) as response:
                status_code = response.status_code
        except requests.RequestException as e:
            raise RiakUnreachable(f"error trying to ping the Riak node: {e}", url=url) from e

        if status_code != 200:
            raise RiakNodeDown(status_code, url=url)

    def fetch_stats(self) -> dict[str, JsonValue]:
        """Fetch and parse the node's stats object.

        Raises:
            RiakUnreachable: If the request fails or times out
            StatsFetchFailed: If the status is not 200 or the body cannot be read
            StatsPayloadInvalid: If the body is not a JSON object
        """
        url = self.settings.stats_url
        try:
            response = self._session.get(
                url, timeout=self.settings.timeout_seconds, stream=True
            )
        except requests.RequestException as e:
            raise RiakUnreachable(
                f"error trying to fetch the stats for the Riak node: {e}", url=url
            ) from e

        with response:
            if response.status_code != 200:
                raise StatsFetchFailed(
                    f"error when fetching the stats for the Riak node (status={response.status_code})",
                    url=url,
                    status_code=response.status_code,
                )
            try:
                body = response.content
            except requests.RequestException as e:
                raise StatsFetchFailed(
                    f"error reading the response body for the stats endpoint: {e}", url=url
                ) from e

        logger.debug("Fetched %d bytes of stats from %s", len(body), url)
        return parse_stats_payload(body, url=url)
