# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

from typing import Any
from unittest import mock

import pytest
import requests

from clearlydefined_client.model.coordinates import parse_coordinates
from clearlydefined_client.model.curations import (
    HARVEST_CREATED,
    ContributionInfo,
    ContributionPatch,
    ContributionType,
    Curation,
    HarvestRequest,
    Patch,
)
from clearlydefined_client.model.definitions import HarvestStatus, Licensed
from clearlydefined_client.service.clearly_defined_service import (
    ClearlyDefinedService,
    Server,
)

DEFINED_JSON: dict[str, Any] = {
    "coordinates": {
        "type": "npm",
        "provider": "npmjs",
        "name": "left-pad",
        "revision": "1.3.0",
    },
    "described": {"tools": ["clearlydefined/1.5.0"]},
    "licensed": {"declared": "WTFPL"},
    "scores": {"effective": 50, "tool": 50},
    "_meta": {"schemaVersion": "1.6.1", "updated": "2023-02-01T10:12:44.612Z"},
}


def create_session_mock(
    json_data: Any = None, text: str = "", content: list[bytes] | None = None
) -> mock.Mock:
    response = mock.Mock()
    response.status_code = 200
    response.json.return_value = json_data
    response.text = text
    response.iter_content.return_value = iter(content or [])
    session = mock.Mock()
    session.request.return_value = response
    return session


def test_server_urls() -> None:
    assert ClearlyDefinedService(Server.PRODUCTION).base_url == (
        "https://api.clearlydefined.io"
    )
    assert ClearlyDefinedService(Server.DEVELOPMENT).base_url == (
        "https://dev-api.clearlydefined.io"
    )
    assert ClearlyDefinedService("http://example.com/api/").base_url == (
        "http://example.com/api"
    )


def test_get_definitions_posts_coordinate_strings() -> None:
    session = create_session_mock({"npm/npmjs/-/left-pad/1.3.0": DEFINED_JSON})
    service = ClearlyDefinedService(Server.PRODUCTION, session=session, timeout=5)

    definitions = service.get_definitions(
        [parse_coordinates("npm/npmjs/-/left-pad/1.3.0"), "pypi/pypi/-/requests"]
    )

    session.request.assert_called_once_with(
        "POST",
        "https://api.clearlydefined.io/definitions",
        timeout=5,
        json=["npm/npmjs/-/left-pad/1.3.0", "pypi/pypi/-/requests"],
    )
    defined = definitions["npm/npmjs/-/left-pad/1.3.0"]
    assert defined.licensed.declared == "WTFPL"
    assert defined.harvest_status == HarvestStatus.PARTIALLY_HARVESTED


def test_search_definitions() -> None:
    session = create_session_mock(["npm/npmjs/-/left-pad/1.3.0"])
    service = ClearlyDefinedService(Server.PRODUCTION, session=session)

    assert service.search_definitions("left-pad") == ["npm/npmjs/-/left-pad/1.3.0"]
    session.request.assert_called_once_with(
        "GET",
        "https://api.clearlydefined.io/definitions",
        timeout=None,
        params={"pattern": "left-pad"},
    )


def test_get_curation_builds_path_from_segments() -> None:
    session = create_session_mock({"licensed": {"declared": "MIT"}})
    service = ClearlyDefinedService(Server.DEVELOPMENT, session=session)

    curation = service.get_curation(parse_coordinates("npm/npmjs/@babel/core/7.22.0"))

    assert curation == Curation(licensed=Licensed(declared="MIT"))
    session.request.assert_called_once_with(
        "GET",
        "https://dev-api.clearlydefined.io/curations/npm/npmjs/@babel/core/7.22.0",
        timeout=None,
    )


def test_path_segments_are_escaped() -> None:
    session = create_session_mock(["scancode/3.2.2"])
    service = ClearlyDefinedService(Server.PRODUCTION, session=session)

    service.harvest_tools(parse_coordinates("git/github/org/repo/refs/tags/v1"))

    session.request.assert_called_once_with(
        "GET",
        "https://api.clearlydefined.io/harvest/git/github/org/repo/refs%2Ftags%2Fv1",
        timeout=None,
        params={"form": "list"},
    )


def test_get_curation_needs_revision() -> None:
    session = create_session_mock()
    service = ClearlyDefinedService(Server.PRODUCTION, session=session)

    with pytest.raises(ValueError):
        service.get_curation(parse_coordinates("npm/npmjs/-/left-pad"))
    session.request.assert_not_called()


def test_put_curation() -> None:
    session = create_session_mock(
        {"prNumber": 7, "url": "https://github.com/clearlydefined/curated-data/pull/7"}
    )
    service = ClearlyDefinedService(Server.PRODUCTION, session=session)
    patch = ContributionPatch(
        contribution_info=ContributionInfo(
            type=ContributionType.MISSING,
            summary="Add license",
            details="No license found.",
            resolution="Declared in package.json.",
            removed_definitions=False,
        ),
        patches=[
            Patch(
                coordinates=parse_coordinates("npm/npmjs/-/left-pad"),
                revisions={"1.3.0": Curation(licensed=Licensed(declared="WTFPL"))},
            )
        ],
    )

    summary = service.put_curation(patch)

    assert summary.pr_number == 7
    session.request.assert_called_once_with(
        "PATCH",
        "https://api.clearlydefined.io/curations",
        timeout=None,
        json=patch.to_json(),
    )


def test_harvest_returns_reply_text() -> None:
    session = create_session_mock(text=HARVEST_CREATED)
    service = ClearlyDefinedService(Server.PRODUCTION, session=session)

    result = service.harvest(
        [
            HarvestRequest(
                coordinates=parse_coordinates("npm/npmjs/-/left-pad/1.3.0"),
                tool="scancode",
            )
        ]
    )

    assert result == HARVEST_CREATED
    session.request.assert_called_once_with(
        "POST",
        "https://api.clearlydefined.io/harvest",
        timeout=None,
        json=[{"tool": "scancode", "coordinates": "npm/npmjs/-/left-pad/1.3.0"}],
    )


def test_harvest_tool_data_streams_bytes() -> None:
    session = create_session_mock(content=[b'{"content"', b": 1}"])
    service = ClearlyDefinedService(Server.PRODUCTION, session=session)

    chunks = service.harvest_tool_data(
        parse_coordinates("npm/npmjs/-/left-pad/1.3.0"), "scancode", "3.2.2"
    )

    assert b"".join(chunks) == b'{"content": 1}'
    session.request.assert_called_once_with(
        "GET",
        "https://api.clearlydefined.io/harvest/npm/npmjs/-/left-pad/1.3.0/scancode/3.2.2",
        timeout=None,
        params={"form": "streamed"},
        stream=True,
    )


def test_http_errors_are_raised(caplog: pytest.LogCaptureFixture) -> None:
    session = create_session_mock()
    response = session.request.return_value
    response.status_code = 404
    response.raise_for_status.side_effect = requests.HTTPError(
        "404 Client Error", response=response
    )
    service = ClearlyDefinedService(Server.PRODUCTION, session=session)

    with pytest.raises(requests.HTTPError):
        service.search_definitions("left-pad")
    assert "ClearlyDefined returned 404" in caplog.text


def test_connection_errors_are_raised() -> None:
    session = mock.Mock()
    session.request.side_effect = requests.ConnectionError("connection refused")
    service = ClearlyDefinedService(Server.LOCALHOST, session=session)

    with pytest.raises(requests.ConnectionError):
        service.search_definitions("left-pad")


def test_connection_errors_are_logged_with_traceback(
    caplog: pytest.LogCaptureFixture,
) -> None:
    session = mock.Mock()
    session.request.side_effect = requests.ConnectionError("connection refused")
    service = ClearlyDefinedService(Server.LOCALHOST, session=session)

    with pytest.raises(requests.ConnectionError):
        service.harvest_tools(parse_coordinates("npm/npmjs/-/left-pad/1.3.0"))
    assert "Request to ClearlyDefined failed" in caplog.text
    assert caplog.records[-1].exc_info is not None


def test_http_errors_are_logged_with_traceback(
    caplog: pytest.LogCaptureFixture,
) -> None:
    session = create_session_mock()
    response = session.request.return_value
    response.status_code = 500
    response.raise_for_status.side_effect = requests.HTTPError(
        "500 Server Error", response=response
    )
    service = ClearlyDefinedService(Server.PRODUCTION, session=session)

    with pytest.raises(requests.HTTPError):
        service.search_definitions("left-pad")
    assert caplog.records[-1].exc_info is not None


def test_harvest_tool_data_closes_response_on_http_error() -> None:
    session = create_session_mock(content=[b"never read"])
    response = session.request.return_value
    response.status_code = 404
    response.raise_for_status.side_effect = requests.HTTPError(
        "404 Client Error", response=response
    )
    service = ClearlyDefinedService(Server.PRODUCTION, session=session)

    with pytest.raises(requests.HTTPError):
        service.harvest_tool_data(
            parse_coordinates("npm/npmjs/-/left-pad/1.3.0"), "scancode", "3.2.2"
        )
    response.close.assert_called_once()
    response.iter_content.assert_not_called()


def test_harvest_tool_data_closes_response_once_read() -> None:
    session = create_session_mock(content=[b"a", b"b"])
    response = session.request.return_value
    service = ClearlyDefinedService(Server.PRODUCTION, session=session)

    chunks = service.harvest_tool_data(
        parse_coordinates("npm/npmjs/-/left-pad/1.3.0"), "scancode", "3.2.2", 4
    )
    response.close.assert_not_called()

    assert list(chunks) == [b"a", b"b"]
    response.iter_content.assert_called_once_with(chunk_size=4)
    response.close.assert_called_once()


def test_harvest_tool_data_closes_response_when_abandoned() -> None:
    session = create_session_mock(content=[b"a", b"b", b"c"])
    response = session.request.return_value
    service = ClearlyDefinedService(Server.PRODUCTION, session=session)

    chunks = service.harvest_tool_data(
        parse_coordinates("npm/npmjs/-/left-pad/1.3.0"), "scancode", "3.2.2"
    )
    assert next(chunks) == b"a"
    chunks.close()

    response.close.assert_called_once()
