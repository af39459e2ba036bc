# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

from clearlydefined_client.service.clearly_defined_service import (
    ClearlyDefinedService,
    Server,
)

__all__ = ["ClearlyDefinedService", "Server"]
