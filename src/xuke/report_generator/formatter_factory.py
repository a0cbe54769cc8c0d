# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

from types import MappingProxyType

from xuke.errors import UnsupportedFormatError
from xuke.report_generator.formatters.abstract_formatter import LicenseFormatter
from xuke.report_generator.formatters.csv_formatter import CSVFormatter
from xuke.report_generator.formatters.html_formatter import HTMLFormatter
from xuke.report_generator.formatters.json_formatter import JSONFormatter
from xuke.report_generator.formatters.kotlin_formatter import KotlinFormatter
from xuke.report_generator.formatters.markdown_formatter import MarkdownFormatter
from xuke.report_generator.formatters.python_formatter import PythonFormatter
from xuke.report_generator.formatters.text_formatter import TextFormatter

FORMATTERS: MappingProxyType[str, LicenseFormatter] = MappingProxyType(
    {
        "csv": CSVFormatter(),
        "html": HTMLFormatter(),
        "json": JSONFormatter(),
        "kt": KotlinFormatter(),
        "md": MarkdownFormatter(),
        "py": PythonFormatter(),
        "txt": TextFormatter(),
    }
)


def supported_extensions() -> list[str]:
    return sorted(FORMATTERS)


def formatter_from_file_extension(extension: str) -> LicenseFormatter:
    formatter = FORMATTERS.get(extension.lstrip(".").lower())
    if formatter is None:
        raise UnsupportedFormatError(extension)
    return formatter
