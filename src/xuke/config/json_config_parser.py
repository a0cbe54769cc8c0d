# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

import json
import logging
from typing import Any

from xuke.adaptors.os import open_file
from xuke.metadata_collector.build_scope import BuildScope
from xuke.metadata_collector.dependency import Dependency

logger = logging.getLogger("xuke")


class JsonConfigParser:
    """Parser for the JSON resolution manifest consumed by xuke."""

    @staticmethod
    def parse_dependency(entry: Any) -> Dependency:
        """Parse one dependency entry of a scope.

        Accepted formats:
          - "org.example:lib:1.0"
          - {"group": "org.example", "name": "lib", "version": "1.0"}

        Raises:
            ValueError: If the entry matches neither format
        """
        if isinstance(entry, str):
            return Dependency.from_coordinates(entry)
        if isinstance(entry, dict):
            try:
                return Dependency(
                    group=str(entry["group"]),
                    name=str(entry["name"]),
                    version=str(entry["version"]),
                )
            except KeyError as e:
                raise ValueError(
                    f"Invalid dependency entry: {entry}. Missing key {e}"
                ) from e
        raise ValueError(
            f"Invalid dependency entry: {entry}. "
            "Expected 'group:name:version' or an object with group, name and version"
        )

    @staticmethod
    def parse_scopes(manifest: Any) -> list[BuildScope]:
        """Parse the scopes of an already decoded manifest.

        Raises:
            ValueError: If the manifest format is invalid
        """
        if not isinstance(manifest, dict) or not isinstance(
            manifest.get("scopes"), list
        ):
            raise ValueError("Invalid manifest: expected an object with a 'scopes' list")
        scopes = []
        for scope in manifest["scopes"]:
            if not isinstance(scope, dict) or "name" not in scope:
                raise ValueError(f"Invalid scope entry: {scope}. Missing 'name'")
            resolvable = scope.get("resolvable", True)
            if not isinstance(resolvable, bool):
                raise ValueError(
                    f"Invalid 'resolvable' value for scope {scope['name']}: {resolvable}"
                )
            scopes.append(
                BuildScope(
                    name=str(scope["name"]),
                    resolvable=resolvable,
                    dependencies=[
                        JsonConfigParser.parse_dependency(entry)
                        for entry in scope.get("dependencies", [])
                    ],
                )
            )
        return scopes

    @staticmethod
    def load_build_scopes(manifest_file_path: str) -> list[BuildScope]:
        """Load the resolved scopes from a JSON manifest file.

        Args:
            manifest_file_path: Path to the JSON manifest listing resolved scopes

        Returns:
            List of BuildScope objects, in manifest order

        Raises:
            FileNotFoundError: If the manifest file is not found
            json.JSONDecodeError: If the JSON file is invalid
            ValueError: If the manifest format is invalid
        """
        try:
            manifest = json.loads(open_file(manifest_file_path))
            return JsonConfigParser.parse_scopes(manifest)
        except FileNotFoundError:
            logger.error(f"Manifest file not found: {manifest_file_path}")
            raise
        except json.JSONDecodeError:
            logger.error(f"Invalid JSON in manifest file: {manifest_file_path}")
            raise
        except ValueError as e:
            logger.error(f"Invalid manifest file {manifest_file_path}: {e}")
            raise
