# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

from abc import ABC, abstractmethod

from xuke.metadata_collector.dependency import Dependency


class MetadataFetcher(ABC):
    @abstractmethod
    def fetch(self, dependency: Dependency) -> str | None:
        """Return the POM document of the dependency, or None when it cannot be located."""
        raise NotImplementedError


def pom_relative_path(dependency: Dependency) -> list[str]:
    """Maven repository layout of a POM, as path segments."""
    return [
        *dependency.group.split("."),
        dependency.name,
        dependency.version,
        f"{dependency.name}-{dependency.version}.pom",
    ]
