# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

from html import escape

from xuke.metadata_collector.dependency import License, LicenseData
from xuke.report_generator.format_options import FormatOptions
from xuke.report_generator.formatters.abstract_formatter import LicenseFormatter


class HTMLFormatter(LicenseFormatter):
    def _license_item(self, license: License) -> str:
        name = escape(license.name)
        if license.url:
            name = f'<a href="{escape(license.url)}">{name}</a>'
        if license.comments:
            name += f" <small>{escape(license.comments)}</small>"
        return f"      <li>{name}</li>"

    def format(self, license_data: LicenseData, options: FormatOptions) -> str:
        lines = [
            "<!DOCTYPE html>",
            "<html>",
            "<head>",
            '  <meta charset="utf-8">',
            "  <title>Third-party licenses</title>",
            "</head>",
            "<body>",
            "  <h1>Third-party licenses</h1>",
            "  <dl>",
        ]
        for dependency, licenses in license_data.items():
            lines.append(f"    <dt>{escape(str(dependency))}</dt>")
            lines.append("    <dd>")
            if licenses:
                lines.append("      <ul>")
                lines.extend(
                    "  " + self._license_item(license) for license in licenses
                )
                lines.append("      </ul>")
            else:
                lines.append("      No license information found")
            lines.append("    </dd>")
        lines.extend(["  </dl>", "</body>", "</html>", ""])
        return "\n".join(lines)
