# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

from xuke.report_generator.format_options import FormatOptions
from xuke.report_generator.formatter_factory import (
    formatter_from_file_extension,
    supported_extensions,
)
from xuke.report_generator.report_generator import ReportGenerator

__all__ = [
    "FormatOptions",
    "ReportGenerator",
    "formatter_from_file_extension",
    "supported_extensions",
]
