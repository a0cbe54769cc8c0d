# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

from xuke.metadata_collector.dependency import LicenseData
from xuke.report_generator.format_options import FormatOptions
from xuke.report_generator.formatters.abstract_formatter import LicenseFormatter


def _cell(value: str) -> str:
    return value.replace("|", "\\|").replace("\n", " ")


class MarkdownFormatter(LicenseFormatter):
    def format(self, license_data: LicenseData, options: FormatOptions) -> str:
        lines = [
            "# Third-party licenses",
            "",
            "| Dependency | Version | License | URL |",
            "| --- | --- | --- | --- |",
        ]
        for dependency, licenses in license_data.items():
            component = _cell(f"{dependency.group}:{dependency.name}")
            version = _cell(dependency.version)
            if not licenses:
                lines.append(f"| {component} | {version} |  |  |")
            for license in licenses:
                url = f"<{license.url}>" if license.url else ""
                lines.append(
                    f"| {component} | {version} | {_cell(license.name)} | {_cell(url)} |"
                )
        return "\n".join(lines) + "\n"
