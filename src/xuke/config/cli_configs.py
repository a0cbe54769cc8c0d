# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

from dataclasses import dataclass


@dataclass
class Config:
    preset_remote_repositories: list[str]
    preset_maven_local_path: str
    preset_gradle_cache_path: str
    preset_max_workers: int


default_config = Config(
    preset_remote_repositories=[
        "https://repo.maven.apache.org/maven2",
        "https://dl.google.com/dl/android/maven2",
    ],
    preset_maven_local_path="~/.m2/repository",
    preset_gradle_cache_path="~/.gradle/caches/modules-2/files-2.1",
    preset_max_workers=1,
)
