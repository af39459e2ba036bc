# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

# Client for the ClearlyDefined REST API, see https://api.clearlydefined.io/api-docs/

import logging
from enum import Enum
from typing import Any, Collection, Generator, Optional, Union
from urllib.parse import quote

import requests

from clearlydefined_client.model.coordinates import Coordinates
from clearlydefined_client.model.curations import (
    ContributionPatch,
    ContributionSummary,
    Curation,
    HarvestRequest,
)
from clearlydefined_client.model.definitions import Defined

logger = logging.getLogger(__name__)

# characters kept as they are inside a single path segment, "/" is not one
_PATH_SEGMENT_SAFE = "@:-._~"


class Server(Enum):
    """
    Known deployments of the service, see
    https://github.com/clearlydefined/service/blob/661934a/schemas/swagger.yaml#L8-L14.
    """

    # curations open PRs against https://github.com/clearlydefined/curated-data
    PRODUCTION = "https://api.clearlydefined.io"
    # curations open PRs against https://github.com/clearlydefined/curated-data-dev
    DEVELOPMENT = "https://dev-api.clearlydefined.io"
    LOCALHOST = "http://localhost:4000"


class ClearlyDefinedService:
    """Typed access to the definitions, curations and harvest endpoints."""

    def __init__(
        self,
        server: Union[Server, str] = Server.PRODUCTION,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            server: A known Server or the base URL of any other deployment
            session: HTTP session to send requests with, a new one by default
            timeout: Seconds to wait for each request, no limit by default
        """
        base_url = server.value if isinstance(server, Server) else server
        self.base_url = base_url.rstrip("/")
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout
        logger.debug("Initialized ClearlyDefined client for %s", self.base_url)

    def get_definitions(
        self, coordinates: Collection[Union[Coordinates, str]]
    ) -> dict[str, Defined]:
        """
        Return a batch of definitions keyed by their coordinate string, see
        https://api.clearlydefined.io/api-docs/#/definitions/post_definitions.
        """
        body = [str(coordinate) for coordinate in coordinates]
        data = self._request("POST", "definitions", json=body).json()
        return {key: Defined.from_json(value) for key, value in data.items()}

    def search_definitions(self, pattern: str) -> list[str]:
        """
        Search for coordinates of existing definitions matching the pattern,
        see https://api.clearlydefined.io/api-docs/#/definitions/get_definitions.
        The pattern should hold the relevant parts of the coordinates, usually
        namespace, name and version.
        """
        response = self._request("GET", "definitions", params={"pattern": pattern})
        return list(response.json())

    def get_curation(self, coordinates: Coordinates) -> Curation:
        """
        Return the curation of a component revision, see
        https://api.clearlydefined.io/api-docs/#/curations/get_curations__type___provider___namespace___name___revision_.
        """
        path = self._path("curations", *coordinates.path_segments())
        return Curation.from_json(self._request("GET", path).json())

    def put_curation(self, patch: ContributionPatch) -> ContributionSummary:
        """
        Upload curation data, this opens a PR against the curated data repository,
        see https://api.clearlydefined.io/api-docs/#/curations/patch_curations.
        """
        response = self._request("PATCH", "curations", json=patch.to_json())
        summary = ContributionSummary.from_json(response.json())
        logger.info("Curation submitted as PR #%d: %s", summary.pr_number, summary.url)
        return summary

    def harvest(self, harvest_requests: Collection[HarvestRequest]) -> str:
        """
        Ask the service to harvest the given components, see
        https://api.clearlydefined.io/api-docs/#/harvest/post_harvest.
        The service replies with HARVEST_CREATED once the requests are queued.
        """
        body = [request.to_json() for request in harvest_requests]
        return self._request("POST", "harvest", json=body).text

    def harvest_tools(self, coordinates: Coordinates) -> list[str]:
        """
        List the tools (as "tool/version") that produced data for a component,
        see https://api.clearlydefined.io/api-docs/#/harvest/get_harvest__type___provider___namespace___name___revision_.
        """
        path = self._path("harvest", *coordinates.path_segments())
        response = self._request("GET", path, params={"form": "list"})
        return list(response.json())

    def harvest_tool_data(
        self,
        coordinates: Coordinates,
        tool: str,
        tool_version: str,
        chunk_size: int = 8192,
    ) -> Generator[bytes, None, None]:
        """
        Stream the raw output of one tool version for a component, see
        https://api.clearlydefined.io/api-docs/#/harvest/get_harvest__type___provider___namespace___name___revision___tool___toolVersion_.

        The status is checked before the generator is returned. The connection
        is released once the data is read, or when the generator is closed.
        """
        path = self._path("harvest", *coordinates.path_segments(), tool, tool_version)
        response = self._request("GET", path, params={"form": "streamed"}, stream=True)
        return self._iter_chunks(response, chunk_size)

    @staticmethod
    def _iter_chunks(
        response: requests.Response, chunk_size: int
    ) -> Generator[bytes, None, None]:
        try:
            yield from response.iter_content(chunk_size=chunk_size)
        finally:
            response.close()

    def _path(self, *segments: str) -> str:
        return "/".join(quote(segment, safe=_PATH_SEGMENT_SAFE) for segment in segments)

    def _request(self, method: str, path: str, **kwargs: Any) -> requests.Response:
        url = f"{self.base_url}/{path}"
        logger.debug("%s %s", method, url)
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            logger.error(
                "Request to ClearlyDefined failed for %s %s: %s",
                method,
                url,
                e,
                exc_info=True,
            )
            raise
        try:
            response.raise_for_status()
        except requests.HTTPError as e:
            response.close()
            logger.error(
                "ClearlyDefined returned %s for %s %s: %s",
                response.status_code,
                method,
                url,
                e,
                exc_info=True,
            )
            raise
        return response
