# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

from clearlydefined_client.model.coordinates import (
    ComponentType,
    Coordinates,
    Provider,
    format_coordinates,
    parse_coordinates,
)
from clearlydefined_client.model.curations import (
    HARVEST_CREATED,
    ContributionInfo,
    ContributionPatch,
    ContributionSummary,
    ContributionType,
    Curation,
    HarvestRequest,
    Patch,
)
from clearlydefined_client.model.definitions import (
    Defined,
    Described,
    HarvestStatus,
    Licensed,
    harvest_status,
)

__all__ = [
    "ComponentType",
    "ContributionInfo",
    "ContributionPatch",
    "ContributionSummary",
    "ContributionType",
    "Coordinates",
    "Curation",
    "Defined",
    "Described",
    "HARVEST_CREATED",
    "HarvestRequest",
    "HarvestStatus",
    "Licensed",
    "Patch",
    "Provider",
    "format_coordinates",
    "harvest_status",
    "parse_coordinates",
]
