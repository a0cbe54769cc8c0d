# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

import logging
from dataclasses import dataclass, field

from xuke.metadata_collector.dependency import Dependency

logger = logging.getLogger("xuke")


@dataclass
class BuildScope:
    """A named bucket of already resolved dependencies (e.g. runtimeClasspath)."""

    name: str
    resolvable: bool = True
    dependencies: list[Dependency] = field(default_factory=list)


def collect_dependencies(
    scopes: list[BuildScope], allowed_scope_names: list[str] | None = None
) -> list[Dependency]:
    """Build the deduplicated list of dependencies to report on.

    An empty allow-list selects every resolvable scope. Scopes that cannot
    be resolved are skipped. First-seen order is kept.
    """
    allowed = set(allowed_scope_names or [])
    seen: dict[Dependency, None] = {}
    for scope in scopes:
        if allowed and scope.name not in allowed:
            continue
        if not scope.resolvable:
            logger.debug(f"Skipping scope {scope.name}, it cannot be resolved.")
            continue
        for dependency in scope.dependencies:
            seen.setdefault(dependency, None)
    return list(seen)
