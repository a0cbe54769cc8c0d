# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

import logging

import requests

from xuke.metadata_collector.dependency import Dependency
from xuke.metadata_collector.fetchers.abstract_metadata_fetcher import (
    MetadataFetcher,
    pom_relative_path,
)

logger = logging.getLogger("xuke")


class RemoteRepositoryFetcher(MetadataFetcher):
    """Downloads POMs from remote Maven repositories, trying them in order.

    No timeout is applied unless one is given explicitly.
    """

    def __init__(self, repositories: list[str], timeout: float | None = None) -> None:
        self.repositories = [repository.rstrip("/") for repository in repositories]
        self.timeout = timeout

    def _pom_url(self, repository: str, dependency: Dependency) -> str:
        return "/".join([repository, *pom_relative_path(dependency)])

    def fetch(self, dependency: Dependency) -> str | None:
        for repository in self.repositories:
            request_uri = self._pom_url(repository, dependency)
            try:
                response = requests.get(request_uri, timeout=self.timeout)
            except requests.RequestException as e:
                logger.warning(
                    f"Failed to fetch POM for {dependency} from {repository}: {e}"
                )
                continue
            if response.status_code == 200:
                return response.text
            if response.status_code == 404:
                logger.debug(f"{repository} has no POM for {dependency}")
            else:
                logger.warning(
                    f"{repository} is returning a {response.status_code} for "
                    f"{dependency}. Skipping."
                )
        return None
