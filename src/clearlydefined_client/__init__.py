# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

from clearlydefined_client.exceptions import ParseError, SchemaError
from clearlydefined_client.model.coordinates import (
    ComponentType,
    Coordinates,
    Provider,
    format_coordinates,
    parse_coordinates,
)
from clearlydefined_client.model.definitions import HarvestStatus, harvest_status
from clearlydefined_client.service.clearly_defined_service import (
    ClearlyDefinedService,
    Server,
)

__all__ = [
    "ClearlyDefinedService",
    "ComponentType",
    "Coordinates",
    "HarvestStatus",
    "ParseError",
    "Provider",
    "SchemaError",
    "Server",
    "format_coordinates",
    "harvest_status",
    "parse_coordinates",
]
