# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

from xuke.metadata_collector.dependency import LicenseData
from xuke.report_generator.format_options import FormatOptions
from xuke.report_generator.formatter_factory import formatter_from_file_extension
from xuke.report_generator.formatters.abstract_formatter import LicenseFormatter


class ReportGenerator:
    def __init__(self, formatter: LicenseFormatter):
        self.formatter = formatter

    @classmethod
    def for_extension(cls, extension: str) -> "ReportGenerator":
        return cls(formatter_from_file_extension(extension))

    def generate_report(
        self, license_data: LicenseData, options: FormatOptions | None = None
    ) -> str:
        return self.formatter.format(license_data, options or FormatOptions())
