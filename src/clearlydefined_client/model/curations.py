# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

"""Curation and harvest payloads sent to the service.

Outbound documents are sparse: a field left as None is not written at all,
since the service reads curations as patches over the current definition.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from clearlydefined_client.exceptions import SchemaError
from clearlydefined_client.model.coordinates import Coordinates
from clearlydefined_client.model.definitions import Described, FileEntry, Licensed
from clearlydefined_client.model.json_fields import (
    expect_object,
    freeze,
    optional,
    optional_tuple,
    required,
    required_int,
    required_str,
    required_tuple,
    sparse,
)

# Body returned by POST /harvest once the requests were queued.
HARVEST_CREATED = "Created"


@dataclass(frozen=True)
class Curation:
    described: Optional[Described] = None
    licensed: Optional[Licensed] = None
    files: Optional[tuple[FileEntry, ...]] = None

    def __post_init__(self) -> None:
        freeze(self, "files")

    def to_json(self) -> dict[str, Any]:
        return sparse(described=self.described, licensed=self.licensed, files=self.files)

    @staticmethod
    def from_json(data: dict[str, Any]) -> "Curation":
        expect_object(data, "Curation")
        return Curation(
            described=optional(data, "described", Described.from_json),
            licensed=optional(data, "licensed", Licensed.from_json),
            files=optional_tuple(data, "Curation", "files", FileEntry.from_json),
        )


class ContributionType(Enum):
    MISSING = "Missing"
    INCORRECT = "Incorrect"
    INCOMPLETE = "Incomplete"
    AMBIGUOUS = "Ambiguous"
    OTHER = "Other"


@dataclass(frozen=True)
class ContributionInfo:
    type: ContributionType
    summary: str  # up to 100 chars, used as the PR title
    details: str  # the problem being addressed
    resolution: str  # what the PR changes and where the data comes from
    removed_definitions: bool

    def to_json(self) -> dict[str, Any]:
        return sparse(
            type=self.type,
            summary=self.summary,
            details=self.details,
            resolution=self.resolution,
            removedDefinitions=self.removed_definitions,
        )

    @staticmethod
    def from_json(data: dict[str, Any]) -> "ContributionInfo":
        expect_object(data, "ContributionInfo")
        type_value = required_str(data, "ContributionInfo", "type")
        try:
            contribution_type = ContributionType(type_value)
        except ValueError:
            raise SchemaError(
                "ContributionInfo", "type", f"unknown ('{type_value}')"
            )
        return ContributionInfo(
            type=contribution_type,
            summary=required_str(data, "ContributionInfo", "summary"),
            details=required_str(data, "ContributionInfo", "details"),
            resolution=required_str(data, "ContributionInfo", "resolution"),
            removed_definitions=bool(
                required(data, "ContributionInfo", "removedDefinitions")
            ),
        )


@dataclass(frozen=True)
class Patch:
    coordinates: Coordinates
    revisions: Mapping[str, Curation]  # revision -> curation for that revision

    def __post_init__(self) -> None:
        freeze(self, "revisions")

    def to_json(self) -> dict[str, Any]:
        return sparse(coordinates=self.coordinates, revisions=self.revisions)

    @staticmethod
    def from_json(data: dict[str, Any]) -> "Patch":
        expect_object(data, "Patch")
        revisions = required(data, "Patch", "revisions")
        if not isinstance(revisions, dict):
            raise SchemaError("Patch", "revisions", "not a JSON object")
        return Patch(
            coordinates=Coordinates.from_json(required(data, "Patch", "coordinates")),
            revisions={
                revision: Curation.from_json(curation)
                for revision, curation in revisions.items()
            },
        )


@dataclass(frozen=True)
class ContributionPatch:
    contribution_info: ContributionInfo
    patches: tuple[Patch, ...]

    def __post_init__(self) -> None:
        freeze(self, "patches")

    def to_json(self) -> dict[str, Any]:
        return sparse(contributionInfo=self.contribution_info, patches=self.patches)

    @staticmethod
    def from_json(data: dict[str, Any]) -> "ContributionPatch":
        expect_object(data, "ContributionPatch")
        return ContributionPatch(
            contribution_info=ContributionInfo.from_json(
                required(data, "ContributionPatch", "contributionInfo")
            ),
            patches=required_tuple(
                data, "ContributionPatch", "patches", Patch.from_json
            ),
        )


@dataclass(frozen=True)
class ContributionSummary:
    pr_number: int
    url: str

    @staticmethod
    def from_json(data: dict[str, Any]) -> "ContributionSummary":
        expect_object(data, "ContributionSummary")
        return ContributionSummary(
            pr_number=required_int(data, "ContributionSummary", "prNumber"),
            url=required_str(data, "ContributionSummary", "url"),
        )


@dataclass(frozen=True)
class HarvestRequest:
    coordinates: Coordinates
    tool: Optional[str] = None  # harvest with every tool when None
    policy: Optional[str] = None

    def to_json(self) -> dict[str, Any]:
        # the harvest queue wants coordinates in their string form
        return sparse(
            tool=self.tool, coordinates=str(self.coordinates), policy=self.policy
        )
