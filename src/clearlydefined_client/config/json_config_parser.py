# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

import json
import logging

from clearlydefined_client.adaptors.os import open_file
from clearlydefined_client.model.curations import ContributionPatch


class JsonConfigParser:
    """Parser for the JSON documents handed to the CLI."""

    @staticmethod
    def load_contribution_patch(patch_file_path: str) -> ContributionPatch:
        """Load a curation contribution from a JSON file.

        The file holds the same document PATCH /curations expects:
        {"contributionInfo": {...}, "patches": [{"coordinates": ..., "revisions": {...}}]}

        Args:
            patch_file_path: Path to the JSON file with the contribution

        Returns:
            The parsed ContributionPatch

        Raises:
            FileNotFoundError: If the file is not found
            json.JSONDecodeError: If the JSON file is invalid
            SchemaError: If a mandatory field of the contribution is missing
        """
        try:
            return ContributionPatch.from_json(json.loads(open_file(patch_file_path)))
        except FileNotFoundError:
            logging.error(f"Contribution file not found: {patch_file_path}")
            raise
        except json.JSONDecodeError:
            logging.error(f"Invalid JSON in contribution file: {patch_file_path}")
            raise
        except Exception as e:
            logging.error(f"Failed to load contribution: {str(e)}")
            raise
