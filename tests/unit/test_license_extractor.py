# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

import pytest

from xuke.errors import MetadataParseError
from xuke.metadata_collector.dependency import License
from xuke.metadata_collector.license_extractor import extract_licenses

POM_WITH_LICENSES = """<?xml version="1.0" encoding="UTF-8"?>
<project xmlns="http://maven.apache.org/POM/4.0.0"
         xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance">
  <modelVersion>4.0.0</modelVersion>
  <groupId>org.example</groupId>
  <artifactId>lib</artifactId>
  <version>1.0</version>
  <licenses>
    <!-- the main license -->
    <license>
      <name>Apache-2.0</name>
      <url>https://www.apache.org/licenses/LICENSE-2.0.txt</url>
      <distribution>repo</distribution>
    </license>
    <license>
      <name>MIT</name>
      <comments>Only for the bundled parser</comments>
    </license>
  </licenses>
</project>
"""


def test_licenses_are_extracted_in_declaration_order() -> None:
    assert extract_licenses(POM_WITH_LICENSES) == [
        License(
            name="Apache-2.0",
            url="https://www.apache.org/licenses/LICENSE-2.0.txt",
            distribution="repo",
            comments="",
        ),
        License(
            name="MIT",
            url="",
            distribution="",
            comments="Only for the bundled parser",
        ),
    ]


def test_pom_without_namespace_is_supported() -> None:
    pom = (
        "<project><licenses><license><name>EPL-2.0</name></license>"
        "</licenses></project>"
    )

    assert extract_licenses(pom) == [License(name="EPL-2.0")]


def test_pom_without_licenses_returns_empty_list() -> None:
    pom = "<project><artifactId>lib</artifactId></project>"

    assert extract_licenses(pom) == []


def test_empty_licenses_container_returns_empty_list() -> None:
    assert extract_licenses("<project><licenses>\n</licenses></project>") == []


def test_license_without_children_yields_empty_fields() -> None:
    pom = "<project><licenses><license/></licenses></project>"

    assert extract_licenses(pom) == [License("", "", "", "")]


def test_field_text_is_kept_verbatim() -> None:
    pom = (
        "<project><licenses><license>"
        "<name> The Apache Software License, Version 2.0 </name>"
        "</license></licenses></project>"
    )

    assert extract_licenses(pom)[0].name == " The Apache Software License, Version 2.0 "


def test_only_direct_children_are_read_as_fields() -> None:
    pom = (
        "<project><licenses><license>"
        "<extra><name>not this one</name></extra>"
        "<url>https://example.com</url>"
        "</license></licenses></project>"
    )

    assert extract_licenses(pom) == [License(url="https://example.com")]


def test_ambiguous_licenses_containers_are_ignored() -> None:
    pom = (
        "<project>"
        "<licenses><license><name>MIT</name></license></licenses>"
        "<profiles><profile><licenses><license><name>GPL</name></license>"
        "</licenses></profile></profiles>"
        "</project>"
    )

    assert extract_licenses(pom) == []


def test_malformed_document_raises_parse_error_naming_the_source() -> None:
    with pytest.raises(MetadataParseError, match="org.example:lib:1.0"):
        extract_licenses("<project><licenses>", source="org.example:lib:1.0")


def test_non_xml_document_raises_parse_error() -> None:
    with pytest.raises(MetadataParseError):
        extract_licenses("404 Not Found")
