# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

"""Reads the <licenses> section of a Maven POM document."""

from xml.etree import ElementTree

from xuke.errors import MetadataParseError
from xuke.metadata_collector.dependency import License

LICENSE_FIELDS = ("name", "url", "distribution", "comments")


def _local_name(element: ElementTree.Element) -> str | None:
    # comments and processing instructions have a callable tag
    if not isinstance(element.tag, str):
        return None
    if element.tag.startswith("{"):
        return element.tag[element.tag.find("}") + 1 :]
    return element.tag


def _child_text(element: ElementTree.Element, name: str) -> str:
    for child in element:
        if _local_name(child) == name:
            return "".join(child.itertext())
    return ""


def _find_licenses_container(
    root: ElementTree.Element,
) -> ElementTree.Element | None:
    containers = [
        element
        for element in root.iter()
        if element is not root and _local_name(element) == "licenses"
    ]
    # A POM is expected to declare a single <licenses> block; anything else is
    # treated as having no license information.
    if len(containers) != 1:
        return None
    return containers[0]


def extract_licenses(document: str, source: str | None = None) -> list[License]:
    try:
        root = ElementTree.fromstring(document)  # noqa: S314
    except ElementTree.ParseError as e:
        raise MetadataParseError(str(e), source) from e

    container = _find_licenses_container(root)
    if container is None:
        return []

    licenses = []
    for license_element in container:
        if _local_name(license_element) is None:
            continue
        fields = {name: _child_text(license_element, name) for name in LICENSE_FIELDS}
        licenses.append(License(**fields))
    return licenses
