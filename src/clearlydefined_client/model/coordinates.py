# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

"""Component coordinates and their canonical string form.

A coordinate string looks like ``type/provider/namespace/name/revision``.
A missing namespace is written as ``-`` and a missing revision is left out,
so ``npm/npmjs/-/left-pad`` is a valid four segment coordinate.
See https://docs.clearlydefined.io/using-data#a-note-on-definition-coordinates.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from clearlydefined_client.exceptions import ParseError, SchemaError
from clearlydefined_client.model.json_fields import expect_object, required_str, sparse

NAMESPACE_PLACEHOLDER = "-"
SEGMENT_SEPARATOR = "/"
MAX_SEGMENTS = 5
MIN_SEGMENTS = 4


class ComponentType(Enum):
    """
    The shape of a component, as known by the service.
    """

    COMPOSER = "composer"
    CRATE = "crate"
    DEB = "deb"
    DEBSRC = "debsrc"
    GEM = "gem"
    GIT = "git"
    GO = "go"
    MAVEN = "maven"
    NPM = "npm"
    NUGET = "nuget"
    POD = "pod"
    PYPI = "pypi"
    SOURCE_ARCHIVE = "sourcearchive"

    def __str__(self) -> str:
        return self.value


class Provider(Enum):
    """
    Where a component can be found.
    """

    COCOAPODS = "cocoapods"
    CRATES_IO = "cratesio"
    DEBIAN = "debian"
    GITHUB = "github"
    GITLAB = "gitlab"
    GOLANG = "golang"
    MAVEN_CENTRAL = "mavencentral"
    MAVEN_GOOGLE = "mavengoogle"
    NPM_JS = "npmjs"
    NUGET = "nuget"
    PACKAGIST = "packagist"
    PYPI = "pypi"
    RUBYGEMS = "rubygems"
    SOURCEFORGE = "sourceforge"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Coordinates:
    """Identifies one component, optionally pinned to a revision."""

    type: ComponentType
    provider: Provider
    namespace: Optional[str]  # GitHub org, npm scope, Maven group id, ...
    name: str
    revision: Optional[str] = None  # None lets the service pick the latest

    def __str__(self) -> str:
        return format_coordinates(self)

    @staticmethod
    def from_string(value: str) -> "Coordinates":
        return parse_coordinates(value)

    def path_segments(self) -> list[str]:
        """Return the type, provider, namespace, name and revision segments
        used by the path based endpoints. These always need a revision."""
        if self.revision is None:
            raise ValueError(f"Coordinates '{self}' need a revision for this call.")
        return [
            self.type.value,
            self.provider.value,
            self.namespace if self.namespace is not None else NAMESPACE_PLACEHOLDER,
            self.name,
            self.revision,
        ]

    def to_json(self) -> dict[str, Any]:
        return sparse(
            type=self.type,
            provider=self.provider,
            namespace=self.namespace,
            name=self.name,
            revision=self.revision,
        )

    @staticmethod
    def from_json(data: Any) -> "Coordinates":
        # the service writes coordinates as objects, but some payloads carry
        # the canonical string instead
        if isinstance(data, str):
            return parse_coordinates(data)
        expect_object(data, "Coordinates")
        type_value = required_str(data, "Coordinates", "type")
        provider_value = required_str(data, "Coordinates", "provider")
        try:
            component_type = ComponentType(type_value)
        except ValueError:
            raise SchemaError("Coordinates", "type", f"unknown ('{type_value}')")
        try:
            provider = Provider(provider_value)
        except ValueError:
            raise SchemaError(
                "Coordinates", "provider", f"unknown ('{provider_value}')"
            )
        namespace = data.get("namespace")
        return Coordinates(
            type=component_type,
            provider=provider,
            namespace=None if namespace == NAMESPACE_PLACEHOLDER else namespace,
            name=required_str(data, "Coordinates", "name"),
            revision=data.get("revision"),
        )


def parse_coordinates(value: str) -> Coordinates:
    """
    Parse a coordinate string into Coordinates.

    Only the first four separators split the string, anything after them
    belongs to the revision (e.g. ``git/github/org/name/refs/tags/v1``).

    Raises:
        ParseError: If fewer than four segments are given, the type or
            provider is not an exact match of a known value, or the name is
            empty or the namespace placeholder.
    """
    parts = value.split(SEGMENT_SEPARATOR, MAX_SEGMENTS - 1)
    if len(parts) < MIN_SEGMENTS:
        raise ParseError(value, "too few segments")
    try:
        component_type = ComponentType(parts[0])
    except ValueError:
        raise ParseError(value, "unknown type")
    try:
        provider = Provider(parts[1])
    except ValueError:
        raise ParseError(value, "unknown provider")
    if parts[3] in ("", NAMESPACE_PLACEHOLDER):
        raise ParseError(value, "missing name")
    return Coordinates(
        type=component_type,
        provider=provider,
        namespace=None if parts[2] == NAMESPACE_PLACEHOLDER else parts[2],
        name=parts[3],
        revision=parts[4] if len(parts) == MAX_SEGMENTS else None,
    )


def format_coordinates(coordinates: Coordinates) -> str:
    parts = [
        coordinates.type.value,
        coordinates.provider.value,
        (
            coordinates.namespace
            if coordinates.namespace is not None
            else NAMESPACE_PLACEHOLDER
        ),
        coordinates.name,
    ]
    if coordinates.revision is not None:
        parts.append(coordinates.revision)
    return SEGMENT_SEPARATOR.join(parts)
