# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

import io
import json
from dataclasses import asdict

from xuke.metadata_collector.dependency import LicenseData
from xuke.report_generator.format_options import FormatOptions
from xuke.report_generator.formatters.abstract_formatter import LicenseFormatter


class JSONFormatter(LicenseFormatter):
    def format(self, license_data: LicenseData, options: FormatOptions) -> str:
        output = io.StringIO()
        json_dependencies = [
            {
                "group": dependency.group,
                "name": dependency.name,
                "version": dependency.version,
                "licenses": [asdict(license) for license in licenses],
            }
            for dependency, licenses in license_data.items()
        ]

        json.dump(json_dependencies, output, indent=2)
        output.write("\n")
        json_string = output.getvalue()
        output.close()

        return json_string
