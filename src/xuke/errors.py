# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

"""Errors raised by the license collection pipeline.

A descriptor that cannot be found is not an error: fetchers return None.
"""


class XukeError(Exception):
    """Base class for all errors raised by xuke."""


class MetadataParseError(XukeError):
    def __init__(self, message: str, source: str | None = None) -> None:
        self.source = source
        if source:
            message = f"{source}: {message}"
        super().__init__(message)


class UnsupportedFormatError(XukeError):
    def __init__(self, extension: str) -> None:
        self.extension = extension
        super().__init__(f"Unsupported output format: '{extension}'")


class OutputWriteError(XukeError):
    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        super().__init__(f"Failed to write license report to {path}: {reason}")
