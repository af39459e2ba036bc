# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

"""Records returned by the definitions endpoint.

They follow the service schemas in
https://github.com/clearlydefined/service/blob/master/schemas/definition-1.0.json.
Every field is optional unless noted, and score records are all or nothing:
if a score object is present, each of its numbers must be present too.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from clearlydefined_client.exceptions import SchemaError
from clearlydefined_client.model.coordinates import (
    NAMESPACE_PLACEHOLDER,
    ComponentType,
    Coordinates,
    Provider,
)
from clearlydefined_client.model.json_fields import (
    optional,
    expect_object,
    freeze,
    optional_tuple,
    required,
    required_int,
    required_str,
    sparse,
)


class HarvestStatus(Enum):
    NOT_HARVESTED = "Not harvested"
    PARTIALLY_HARVESTED = "Partially harvested"
    HARVESTED = "Harvested"


class Nature(Enum):
    LICENSE = "license"
    NOTICE = "notice"

    @staticmethod
    def from_json(value: str) -> "Nature":
        try:
            return Nature(value)
        except ValueError:
            raise SchemaError("FileEntry", "natures", f"unknown ('{value}')")


@dataclass(frozen=True)
class FinalScore:
    effective: int
    tool: int

    def to_json(self) -> dict[str, Any]:
        return {"effective": self.effective, "tool": self.tool}

    @staticmethod
    def from_json(data: dict[str, Any]) -> "FinalScore":
        expect_object(data, "FinalScore")
        return FinalScore(
            effective=required_int(data, "FinalScore", "effective"),
            tool=required_int(data, "FinalScore", "tool"),
        )


@dataclass(frozen=True)
class DescribedScore:
    total: int
    date: int
    source: int

    def to_json(self) -> dict[str, Any]:
        return {"total": self.total, "date": self.date, "source": self.source}

    @staticmethod
    def from_json(data: dict[str, Any]) -> "DescribedScore":
        expect_object(data, "DescribedScore")
        return DescribedScore(
            total=required_int(data, "DescribedScore", "total"),
            date=required_int(data, "DescribedScore", "date"),
            source=required_int(data, "DescribedScore", "source"),
        )


@dataclass(frozen=True)
class LicensedScore:
    total: int
    declared: int
    discovered: int
    consistency: int
    spdx: int
    texts: int

    def to_json(self) -> dict[str, Any]:
        return {
            "total": self.total,
            "declared": self.declared,
            "discovered": self.discovered,
            "consistency": self.consistency,
            "spdx": self.spdx,
            "texts": self.texts,
        }

    @staticmethod
    def from_json(data: dict[str, Any]) -> "LicensedScore":
        expect_object(data, "LicensedScore")
        return LicensedScore(
            total=required_int(data, "LicensedScore", "total"),
            declared=required_int(data, "LicensedScore", "declared"),
            discovered=required_int(data, "LicensedScore", "discovered"),
            consistency=required_int(data, "LicensedScore", "consistency"),
            spdx=required_int(data, "LicensedScore", "spdx"),
            texts=required_int(data, "LicensedScore", "texts"),
        )


@dataclass(frozen=True)
class Meta:
    schema_version: str
    updated: str

    def to_json(self) -> dict[str, Any]:
        return {"schemaVersion": self.schema_version, "updated": self.updated}

    @staticmethod
    def from_json(data: dict[str, Any]) -> "Meta":
        expect_object(data, "Meta")
        return Meta(
            schema_version=required_str(data, "Meta", "schemaVersion"),
            updated=required_str(data, "Meta", "updated"),
        )


@dataclass(frozen=True)
class Attribution:
    parties: Optional[tuple[str, ...]] = None
    unknown: Optional[int] = None

    def __post_init__(self) -> None:
        freeze(self, "parties")

    def to_json(self) -> dict[str, Any]:
        return sparse(parties=self.parties, unknown=self.unknown)

    @staticmethod
    def from_json(data: dict[str, Any]) -> "Attribution":
        expect_object(data, "Attribution")
        return Attribution(
            parties=optional_tuple(data, "Attribution", "parties"),
            unknown=optional(data, "unknown"),
        )


@dataclass(frozen=True)
class Discovered:
    expressions: Optional[tuple[str, ...]] = None
    unknown: Optional[int] = None

    def __post_init__(self) -> None:
        freeze(self, "expressions")

    def to_json(self) -> dict[str, Any]:
        return sparse(expressions=self.expressions, unknown=self.unknown)

    @staticmethod
    def from_json(data: dict[str, Any]) -> "Discovered":
        expect_object(data, "Discovered")
        return Discovered(
            expressions=optional_tuple(data, "Discovered", "expressions"),
            unknown=optional(data, "unknown"),
        )


@dataclass(frozen=True)
class Facet:
    files: Optional[int] = None
    attribution: Optional[Attribution] = None
    discovered: Optional[Discovered] = None

    def to_json(self) -> dict[str, Any]:
        return sparse(
            files=self.files,
            attribution=self.attribution,
            discovered=self.discovered,
        )

    @staticmethod
    def from_json(data: dict[str, Any]) -> "Facet":
        expect_object(data, "Facet")
        return Facet(
            files=optional(data, "files"),
            attribution=optional(data, "attribution", Attribution.from_json),
            discovered=optional(data, "discovered", Discovered.from_json),
        )


@dataclass(frozen=True)
class Facets:
    core: Optional[Facet] = None
    data: Optional[Facet] = None
    dev: Optional[Facet] = None
    doc: Optional[Facet] = None
    examples: Optional[Facet] = None
    tests: Optional[Facet] = None

    def to_json(self) -> dict[str, Any]:
        return sparse(
            core=self.core,
            data=self.data,
            dev=self.dev,
            doc=self.doc,
            examples=self.examples,
            tests=self.tests,
        )

    @staticmethod
    def from_json(data: dict[str, Any]) -> "Facets":
        expect_object(data, "Facets")
        return Facets(
            core=optional(data, "core", Facet.from_json),
            data=optional(data, "data", Facet.from_json),
            dev=optional(data, "dev", Facet.from_json),
            doc=optional(data, "doc", Facet.from_json),
            examples=optional(data, "examples", Facet.from_json),
            tests=optional(data, "tests", Facet.from_json),
        )


@dataclass(frozen=True)
class SourceLocation:
    """
    Where the sources of a component live. Same fields as Coordinates, but
    a located source always has a concrete revision.
    """

    type: ComponentType
    provider: Provider
    namespace: Optional[str]
    name: str
    revision: str
    path: Optional[str] = None
    url: Optional[str] = None

    def to_json(self) -> dict[str, Any]:
        return sparse(
            type=self.type,
            provider=self.provider,
            namespace=self.namespace,
            name=self.name,
            revision=self.revision,
            path=self.path,
            url=self.url,
        )

    @staticmethod
    def from_json(data: dict[str, Any]) -> "SourceLocation":
        expect_object(data, "SourceLocation")
        type_value = required_str(data, "SourceLocation", "type")
        provider_value = required_str(data, "SourceLocation", "provider")
        try:
            component_type = ComponentType(type_value)
        except ValueError:
            raise SchemaError("SourceLocation", "type", f"unknown ('{type_value}')")
        try:
            provider = Provider(provider_value)
        except ValueError:
            raise SchemaError(
                "SourceLocation", "provider", f"unknown ('{provider_value}')"
            )
        namespace = data.get("namespace")
        return SourceLocation(
            type=component_type,
            provider=provider,
            namespace=None if namespace == NAMESPACE_PLACEHOLDER else namespace,
            name=required_str(data, "SourceLocation", "name"),
            revision=required_str(data, "SourceLocation", "revision"),
            path=optional(data, "path"),
            url=optional(data, "url"),
        )


@dataclass(frozen=True)
class URLs:
    registry: Optional[str] = None
    version: Optional[str] = None
    download: Optional[str] = None

    def to_json(self) -> dict[str, Any]:
        return sparse(
            registry=self.registry, version=self.version, download=self.download
        )

    @staticmethod
    def from_json(data: dict[str, Any]) -> "URLs":
        expect_object(data, "URLs")
        return URLs(
            registry=optional(data, "registry"),
            version=optional(data, "version"),
            download=optional(data, "download"),
        )


@dataclass(frozen=True)
class Hashes:
    md5: Optional[str] = None
    sha1: Optional[str] = None
    sha256: Optional[str] = None
    git_sha: Optional[str] = None

    def to_json(self) -> dict[str, Any]:
        return sparse(
            md5=self.md5, sha1=self.sha1, sha256=self.sha256, gitSha=self.git_sha
        )

    @staticmethod
    def from_json(data: dict[str, Any]) -> "Hashes":
        expect_object(data, "Hashes")
        return Hashes(
            md5=optional(data, "md5"),
            sha1=optional(data, "sha1"),
            sha256=optional(data, "sha256"),
            git_sha=optional(data, "gitSha"),
        )


@dataclass(frozen=True)
class Described:
    score: Optional[DescribedScore] = None
    tool_score: Optional[DescribedScore] = None
    facets: Optional[Facets] = None
    source_location: Optional[SourceLocation] = None
    urls: Optional[URLs] = None
    project_website: Optional[str] = None
    issue_tracker: Optional[str] = None
    release_date: Optional[str] = None
    hashes: Optional[Hashes] = None
    files: Optional[int] = None
    tools: Optional[tuple[str, ...]] = None  # e.g. "scancode/3.2.2"

    def __post_init__(self) -> None:
        freeze(self, "tools")

    def to_json(self) -> dict[str, Any]:
        return sparse(
            score=self.score,
            toolScore=self.tool_score,
            facets=self.facets,
            sourceLocation=self.source_location,
            urls=self.urls,
            projectWebsite=self.project_website,
            issueTracker=self.issue_tracker,
            releaseDate=self.release_date,
            hashes=self.hashes,
            files=self.files,
            tools=self.tools,
        )

    @staticmethod
    def from_json(data: dict[str, Any]) -> "Described":
        expect_object(data, "Described")
        return Described(
            score=optional(data, "score", DescribedScore.from_json),
            tool_score=optional(data, "toolScore", DescribedScore.from_json),
            facets=optional(data, "facets", Facets.from_json),
            source_location=optional(data, "sourceLocation", SourceLocation.from_json),
            urls=optional(data, "urls", URLs.from_json),
            project_website=optional(data, "projectWebsite"),
            issue_tracker=optional(data, "issueTracker"),
            release_date=optional(data, "releaseDate"),
            hashes=optional(data, "hashes", Hashes.from_json),
            files=optional(data, "files"),
            tools=optional_tuple(data, "Described", "tools"),
        )


@dataclass(frozen=True)
class Licensed:
    score: Optional[LicensedScore] = None
    tool_score: Optional[LicensedScore] = None
    declared: Optional[str] = None  # SPDX expression
    facets: Optional[Facets] = None

    def to_json(self) -> dict[str, Any]:
        return sparse(
            score=self.score,
            toolScore=self.tool_score,
            declared=self.declared,
            facets=self.facets,
        )

    @staticmethod
    def from_json(data: dict[str, Any]) -> "Licensed":
        expect_object(data, "Licensed")
        return Licensed(
            score=optional(data, "score", LicensedScore.from_json),
            tool_score=optional(data, "toolScore", LicensedScore.from_json),
            declared=optional(data, "declared"),
            facets=optional(data, "facets", Facets.from_json),
        )


@dataclass(frozen=True)
class FileEntry:
    path: str
    license: Optional[str] = None
    attributions: Optional[tuple[str, ...]] = None
    facets: Optional[Facets] = None
    hashes: Optional[Hashes] = None
    token: Optional[str] = None
    natures: Optional[frozenset[Nature]] = None

    def __post_init__(self) -> None:
        freeze(self, "attributions", "natures")

    def to_json(self) -> dict[str, Any]:
        return sparse(
            path=self.path,
            license=self.license,
            attributions=self.attributions,
            facets=self.facets,
            hashes=self.hashes,
            token=self.token,
            natures=self.natures,
        )

    @staticmethod
    def from_json(data: dict[str, Any]) -> "FileEntry":
        expect_object(data, "FileEntry")
        natures = optional_tuple(data, "FileEntry", "natures", Nature.from_json)
        return FileEntry(
            path=required_str(data, "FileEntry", "path"),
            license=optional(data, "license"),
            attributions=optional_tuple(data, "FileEntry", "attributions"),
            facets=optional(data, "facets", Facets.from_json),
            hashes=optional(data, "hashes", Hashes.from_json),
            token=optional(data, "token"),
            natures=frozenset(natures) if natures is not None else None,
        )


def harvest_status(described: Described) -> HarvestStatus:
    """
    Tell how far the harvest of a component got, based only on the tools
    that produced data for it. Mirrors the indicator of the ClearlyDefined
    website, see
    https://github.com/clearlydefined/website/blob/de42d2c/src/components/Navigation/Ui/HarvestIndicator.js#L8.
    """
    if described.tools is None:
        return HarvestStatus.NOT_HARVESTED
    if len(described.tools) > 2:
        return HarvestStatus.HARVESTED
    return HarvestStatus.PARTIALLY_HARVESTED


@dataclass(frozen=True)
class Defined:
    """A definition as returned by POST /definitions."""

    coordinates: Coordinates
    described: Described
    licensed: Licensed
    scores: FinalScore
    meta: Meta
    files: Optional[tuple[FileEntry, ...]] = None
    id: Optional[str] = None

    def __post_init__(self) -> None:
        freeze(self, "files")

    @property
    def harvest_status(self) -> HarvestStatus:
        return harvest_status(self.described)

    def to_json(self) -> dict[str, Any]:
        return sparse(
            coordinates=self.coordinates,
            described=self.described,
            licensed=self.licensed,
            files=self.files,
            scores=self.scores,
            _id=self.id,
            _meta=self.meta,
        )

    @staticmethod
    def from_json(data: dict[str, Any]) -> "Defined":
        expect_object(data, "Defined")
        return Defined(
            coordinates=Coordinates.from_json(required(data, "Defined", "coordinates")),
            described=Described.from_json(required(data, "Defined", "described")),
            licensed=Licensed.from_json(required(data, "Defined", "licensed")),
            files=optional_tuple(data, "Defined", "files", FileEntry.from_json),
            scores=FinalScore.from_json(required(data, "Defined", "scores")),
            id=optional(data, "_id"),
            meta=Meta.from_json(required(data, "Defined", "_meta")),
        )
