# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Dependency:
    """Coordinates of one resolved dependency."""

    group: str
    name: str
    version: str

    @classmethod
    def from_coordinates(cls, coordinates: str) -> "Dependency":
        parts = coordinates.strip().split(":")
        if len(parts) != 3 or not all(parts):
            raise ValueError(
                f"Invalid dependency coordinates: {coordinates}. "
                "Expected format: 'group:name:version'"
            )
        return cls(group=parts[0], name=parts[1], version=parts[2])

    def __str__(self) -> str:
        return f"{self.group}:{self.name}:{self.version}"


# Fields are never None, formatters rely on that.
@dataclass(frozen=True)
class License:
    name: str = ""
    url: str = ""
    distribution: str = ""
    comments: str = ""


# Licenses keep declaration order, dependencies keep input order.
LicenseData = dict[Dependency, list[License]]
