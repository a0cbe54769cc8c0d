# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

import csv
import io

from xuke.metadata_collector.dependency import LicenseData
from xuke.report_generator.format_options import FormatOptions
from xuke.report_generator.formatters.abstract_formatter import LicenseFormatter


class CSVFormatter(LicenseFormatter):
    """One row per declared license; dependencies without licenses get a
    single row with empty license columns."""

    field_names = [
        "group",
        "name",
        "version",
        "license",
        "url",
        "distribution",
        "comments",
    ]

    def format(self, license_data: LicenseData, options: FormatOptions) -> str:
        output = io.StringIO()
        writer = csv.DictWriter(
            output, fieldnames=self.field_names, quoting=csv.QUOTE_ALL
        )

        writer.writeheader()
        for dependency, licenses in license_data.items():
            coordinates = {
                "group": dependency.group,
                "name": dependency.name,
                "version": dependency.version,
            }
            if not licenses:
                writer.writerow(coordinates)
                continue
            for license in licenses:
                writer.writerow(
                    {
                        **coordinates,
                        "license": license.name,
                        "url": license.url,
                        "distribution": license.distribution,
                        "comments": license.comments,
                    }
                )
        csv_string = output.getvalue()
        output.close()
        return csv_string
