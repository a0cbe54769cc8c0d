# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

"""Here we collect a set of OS wrappers and adaptors to be easily replaced during testing and debugging."""

import glob
import os


def path_exists(file_path: str) -> bool:
    return os.path.exists(file_path)


def is_file(file_path: str) -> bool:
    return os.path.isfile(file_path)


def create_dirs(path: str) -> None:
    os.makedirs(path, exist_ok=True)


def glob_files(pattern: str) -> list[str]:
    return sorted(glob.glob(pattern))


def expand_user(path: str) -> str:
    return os.path.expanduser(path)


def parent_dir(path: str) -> str:
    return os.path.dirname(path)


def file_extension(path: str) -> str:
    return os.path.splitext(path)[1].lstrip(".")


def open_file(file_path: str) -> str:
    try:
        with open(file_path, "r", encoding="utf-8") as file:
            return file.read()
    except UnicodeDecodeError:
        # POMs in old repositories are sometimes latin-1 encoded
        with open(file_path, "r", encoding="latin-1") as file:
            return file.read()


def write_file(file_path: str, content: str) -> None:
    with open(file_path, "w", encoding="utf-8") as file:
        file.write(content)


def path_join(path: str, *paths: str) -> str:
    return os.path.join(path, *paths)
