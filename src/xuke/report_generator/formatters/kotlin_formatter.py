# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

from xuke.metadata_collector.dependency import Dependency, License, LicenseData
from xuke.report_generator.format_options import FormatOptions
from xuke.report_generator.formatters.abstract_formatter import LicenseFormatter


def kotlin_string(value: str) -> str:
    escaped = (
        value.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("$", "\\$")
        .replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
    )
    return f'"{escaped}"'


class KotlinFormatter(LicenseFormatter):
    """Generates a Kotlin source file exposing the licenses as a list of data classes."""

    HEADER = """\
// Generated by xuke. Do not edit.

data class License(
    val name: String,
    val url: String,
    val distribution: String,
    val comments: String,
)

data class Dependency(
    val group: String,
    val name: String,
    val version: String,
    val licenses: List<License>,
)

object Licenses {
    val dependencies: List<Dependency> = listOf("""

    def _license(self, license: License) -> list[str]:
        indent = " " * 16
        return [
            f"{indent}License(",
            f"{indent}    name = {kotlin_string(license.name)},",
            f"{indent}    url = {kotlin_string(license.url)},",
            f"{indent}    distribution = {kotlin_string(license.distribution)},",
            f"{indent}    comments = {kotlin_string(license.comments)},",
            f"{indent}),",
        ]

    def _dependency(self, dependency: Dependency, licenses: list[License]) -> list[str]:
        indent = " " * 8
        lines = [
            f"{indent}Dependency(",
            f"{indent}    group = {kotlin_string(dependency.group)},",
            f"{indent}    name = {kotlin_string(dependency.name)},",
            f"{indent}    version = {kotlin_string(dependency.version)},",
        ]
        if not licenses:
            lines.append(f"{indent}    licenses = emptyList(),")
        else:
            lines.append(f"{indent}    licenses = listOf(")
            for license in licenses:
                lines.extend(self._license(license))
            lines.append(f"{indent}    ),")
        lines.append(f"{indent}),")
        return lines

    def format(self, license_data: LicenseData, options: FormatOptions) -> str:
        lines = []
        if options.package_path:
            lines.extend([f"package {options.package_path}", ""])
        lines.append(self.HEADER)
        for dependency, licenses in license_data.items():
            lines.extend(self._dependency(dependency, licenses))
        lines.extend(["    )", "}", ""])
        return "\n".join(lines)
