# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

from xuke.metadata_collector.dependency import License, LicenseData
from xuke.report_generator.format_options import FormatOptions
from xuke.report_generator.formatters.abstract_formatter import LicenseFormatter

NO_LICENSE_FOUND = "No license information found"


def describe_license(license: License) -> str:
    """Single line description, shared with the run summary."""
    description = license.name or "(unnamed license)"
    if license.url:
        description += f" <{license.url}>"
    details = [value for value in (license.distribution, license.comments) if value]
    if details:
        description += f" ({', '.join(details)})"
    return description


class TextFormatter(LicenseFormatter):
    def format(self, license_data: LicenseData, options: FormatOptions) -> str:
        lines = []
        for dependency, licenses in license_data.items():
            lines.append(str(dependency))
            if not licenses:
                lines.append(f"    {NO_LICENSE_FOUND}")
            for license in licenses:
                lines.append(f"    {describe_license(license)}")
            lines.append("")
        return "\n".join(lines)
