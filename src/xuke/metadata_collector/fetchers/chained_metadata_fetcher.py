# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

from xuke.metadata_collector.dependency import Dependency
from xuke.metadata_collector.fetchers.abstract_metadata_fetcher import (
    MetadataFetcher,
)


class ChainedMetadataFetcher(MetadataFetcher):
    # local sources go first so the network is only used for misses
    def __init__(self, fetchers: list[MetadataFetcher]) -> None:
        self.fetchers = fetchers

    def fetch(self, dependency: Dependency) -> str | None:
        for fetcher in self.fetchers:
            document = fetcher.fetch(dependency)
            if document is not None:
                return document
        return None
