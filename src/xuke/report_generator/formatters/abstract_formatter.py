# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

from abc import ABC, abstractmethod

from xuke.metadata_collector.dependency import LicenseData
from xuke.report_generator.format_options import FormatOptions


class LicenseFormatter(ABC):
    @abstractmethod
    def format(self, license_data: LicenseData, options: FormatOptions) -> str:
        raise NotImplementedError
