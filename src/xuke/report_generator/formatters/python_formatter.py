# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

from xuke.metadata_collector.dependency import LicenseData
from xuke.report_generator.format_options import FormatOptions
from xuke.report_generator.formatters.abstract_formatter import LicenseFormatter


class PythonFormatter(LicenseFormatter):
    """Generates an importable Python module with a LICENSES tuple."""

    def format(self, license_data: LicenseData, options: FormatOptions) -> str:
        module_doc = "Third-party licenses"
        if options.package_path:
            module_doc += f" of {options.package_path}"
        lines = [
            "# Generated by xuke. Do not edit.",
            f'"""{module_doc}."""',
            "",
            "LICENSES = (",
        ]
        for dependency, licenses in license_data.items():
            lines.append("    {")
            lines.append(f'        "group": {dependency.group!r},')
            lines.append(f'        "name": {dependency.name!r},')
            lines.append(f'        "version": {dependency.version!r},')
            lines.append('        "licenses": (')
            for license in licenses:
                lines.append("            {")
                lines.append(f'                "name": {license.name!r},')
                lines.append(f'                "url": {license.url!r},')
                lines.append(f'                "distribution": {license.distribution!r},')
                lines.append(f'                "comments": {license.comments!r},')
                lines.append("            },")
            lines.append("        ),")
            lines.append("    },")
        lines.append(")")
        lines.append("")
        return "\n".join(lines)
