# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

import logging

from xuke.adaptors.os import expand_user, glob_files, is_file, open_file, path_join
from xuke.metadata_collector.dependency import Dependency
from xuke.metadata_collector.fetchers.abstract_metadata_fetcher import (
    MetadataFetcher,
    pom_relative_path,
)

logger = logging.getLogger("xuke")


class MavenLocalRepositoryFetcher(MetadataFetcher):
    """Reads POMs from a Maven local repository (usually ~/.m2/repository)."""

    def __init__(self, repository_path: str) -> None:
        self.repository_path = expand_user(repository_path)

    def fetch(self, dependency: Dependency) -> str | None:
        pom_path = path_join(self.repository_path, *pom_relative_path(dependency))
        if not is_file(pom_path):
            logger.debug(f"No POM for {dependency} in {self.repository_path}")
            return None
        return open_file(pom_path)


class GradleCacheFetcher(MetadataFetcher):
    """Reads POMs from the Gradle module cache.

    The cache stores each artifact under a directory named after its hash:
    <root>/<group>/<name>/<version>/<sha1>/<name>-<version>.pom
    """

    def __init__(self, cache_path: str) -> None:
        self.cache_path = expand_user(cache_path)

    def fetch(self, dependency: Dependency) -> str | None:
        pattern = path_join(
            self.cache_path,
            dependency.group,
            dependency.name,
            dependency.version,
            "*",
            f"{dependency.name}-{dependency.version}.pom",
        )
        matches = glob_files(pattern)
        if len(matches) != 1:
            # none found, or several variants we cannot choose between
            logger.debug(
                f"Found {len(matches)} cached POMs for {dependency}, expected exactly one"
            )
            return None
        return open_file(matches[0])
