# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

"""Collects the licenses of a project's dependencies and writes them to a
report whose format is picked from the output file extension."""

import logging

from xuke.adaptors.os import create_dirs, file_extension, parent_dir, write_file
from xuke.errors import OutputWriteError
from xuke.metadata_collector.build_scope import BuildScope, collect_dependencies
from xuke.metadata_collector.dependency import Dependency, LicenseData
from xuke.metadata_collector.fetchers.abstract_metadata_fetcher import (
    MetadataFetcher,
)
from xuke.metadata_collector.license_aggregator import LicenseAggregator
from xuke.report_generator.format_options import FormatOptions
from xuke.report_generator.formatters.text_formatter import (
    NO_LICENSE_FOUND,
    describe_license,
)
from xuke.report_generator.report_generator import ReportGenerator

logger = logging.getLogger("xuke")


def summarize(license_data: LicenseData) -> str:
    lines = []
    for dependency, licenses in license_data.items():
        if not licenses:
            lines.append(f"{dependency}: {NO_LICENSE_FOUND}")
        for license in licenses:
            lines.append(f"{dependency}: {describe_license(license)}")
    return "\n".join(lines)


class CollectLicensesTask:
    def __init__(self, fetcher: MetadataFetcher, max_workers: int = 1) -> None:
        self.aggregator = LicenseAggregator(fetcher, max_workers=max_workers)

    def run(
        self,
        scopes: list[BuildScope],
        allowed_scope_names: list[str],
        output_path: str,
        output_package: str = "",
    ) -> LicenseData:
        # fail on an unknown format before resolving anything
        report_generator = ReportGenerator.for_extension(file_extension(output_path))
        dependencies = collect_dependencies(scopes, allowed_scope_names)
        return self._collect(
            report_generator, dependencies, output_path, output_package
        )

    def run_for_dependencies(
        self,
        dependencies: list[Dependency],
        output_path: str,
        output_package: str = "",
    ) -> LicenseData:
        report_generator = ReportGenerator.for_extension(file_extension(output_path))
        return self._collect(
            report_generator, dependencies, output_path, output_package
        )

    def _collect(
        self,
        report_generator: ReportGenerator,
        dependencies: list[Dependency],
        output_path: str,
        output_package: str,
    ) -> LicenseData:
        logger.info(f"Collecting licenses of {len(dependencies)} dependencies")
        license_data = self.aggregator.aggregate(dependencies)
        report = report_generator.generate_report(
            license_data, FormatOptions(package_path=output_package)
        )
        self._write_report(output_path, report)
        logger.info(summarize(license_data))
        return license_data

    def _write_report(self, output_path: str, report: str) -> None:
        try:
            output_dir = parent_dir(output_path)
            if output_dir:
                create_dirs(output_dir)
            write_file(output_path, report)
        except OSError as e:
            raise OutputWriteError(output_path, str(e)) from e
