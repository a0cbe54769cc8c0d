# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

"""License aggregator uses the passed fetcher to collect license declarations
for every dependency of a project."""

import logging
from concurrent.futures import ThreadPoolExecutor

from xuke.errors import MetadataParseError
from xuke.metadata_collector.dependency import Dependency, License, LicenseData
from xuke.metadata_collector.fetchers.abstract_metadata_fetcher import (
    MetadataFetcher,
)
from xuke.metadata_collector.license_extractor import extract_licenses

logger = logging.getLogger("xuke")


class LicenseAggregator:
    def __init__(self, fetcher: MetadataFetcher, max_workers: int = 1) -> None:
        if max_workers < 1:
            raise ValueError(f"max_workers must be at least 1, got {max_workers}")
        self.fetcher = fetcher
        self.max_workers = max_workers

    def _collect_licenses(self, dependency: Dependency) -> list[License]:
        document = self.fetcher.fetch(dependency)
        if document is None:
            logger.debug(f"No metadata found for {dependency}")
            return []
        try:
            return extract_licenses(document, source=str(dependency))
        except MetadataParseError as e:
            logger.warning(f"Ignoring malformed metadata for {dependency}: {e}")
            return []

    def aggregate(self, dependencies: list[Dependency]) -> LicenseData:
        if self.max_workers == 1:
            results = [self._collect_licenses(dep) for dep in dependencies]
        else:
            # map() yields in submission order whatever the completion order is
            with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
                results = list(executor.map(self._collect_licenses, dependencies))

        license_data: LicenseData = {}
        for dependency, licenses in zip(dependencies, results):
            license_data[dependency] = licenses
        return license_data
