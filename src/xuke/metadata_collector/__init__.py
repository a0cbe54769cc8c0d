# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

from xuke.metadata_collector.build_scope import BuildScope, collect_dependencies
from xuke.metadata_collector.dependency import Dependency, License, LicenseData
from xuke.metadata_collector.license_aggregator import LicenseAggregator

__all__ = [
    "BuildScope",
    "Dependency",
    "License",
    "LicenseAggregator",
    "LicenseData",
    "collect_dependencies",
]
