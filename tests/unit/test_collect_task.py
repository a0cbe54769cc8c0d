# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

import json
import logging
from pathlib import Path

import pytest
import pytest_mock
from pytest import LogCaptureFixture

from xuke.collect_task import CollectLicensesTask, summarize
from xuke.errors import OutputWriteError, UnsupportedFormatError
from xuke.metadata_collector.build_scope import BuildScope
from xuke.metadata_collector.dependency import Dependency, License
from xuke.metadata_collector.fetchers.abstract_metadata_fetcher import (
    MetadataFetcher,
)

LIB = Dependency("org.example", "lib", "1.0")
JUNIT = Dependency("junit", "junit", "4.13.2")
UNKNOWN = Dependency("org.example", "unknown", "0.1")

APACHE_POM = """<project><licenses><license>
<name>Apache-2.0</name><url>https://www.apache.org/licenses/LICENSE-2.0</url>
<distribution>repo</distribution>
</license></licenses></project>"""
EPL_POM = "<project><licenses><license><name>EPL-1.0</name></license></licenses></project>"


def create_fetcher_mock(mocker: pytest_mock.MockFixture) -> MetadataFetcher:
    documents = {LIB: APACHE_POM, JUNIT: EPL_POM}
    fetcher = mocker.Mock(spec=MetadataFetcher)
    fetcher.fetch.side_effect = documents.get
    return fetcher  # type: ignore[no-any-return]


def create_scopes() -> list[BuildScope]:
    return [
        BuildScope("runtimeClasspath", True, [LIB, UNKNOWN]),
        BuildScope("testImplementation", True, [JUNIT, LIB]),
    ]


def test_run_writes_report_selected_by_extension(
    mocker: pytest_mock.MockFixture, tmp_path: Path
) -> None:
    output_path = tmp_path / "build" / "licenses.json"
    task = CollectLicensesTask(create_fetcher_mock(mocker))

    license_data = task.run(create_scopes(), [], str(output_path))

    assert list(license_data) == [LIB, UNKNOWN, JUNIT]
    report = json.loads(output_path.read_text(encoding="utf-8"))
    assert [entry["name"] for entry in report] == ["lib", "unknown", "junit"]
    assert report[0]["licenses"][0]["name"] == "Apache-2.0"
    assert report[1]["licenses"] == []


def test_run_only_reports_allowed_scopes(
    mocker: pytest_mock.MockFixture, tmp_path: Path
) -> None:
    output_path = tmp_path / "licenses.txt"
    fetcher = create_fetcher_mock(mocker)
    task = CollectLicensesTask(fetcher)

    license_data = task.run(create_scopes(), ["runtimeClasspath"], str(output_path))

    assert list(license_data) == [LIB, UNKNOWN]
    assert "junit" not in output_path.read_text(encoding="utf-8")
    assert mocker.call(JUNIT) not in fetcher.fetch.call_args_list  # type: ignore[attr-defined]


def test_round_trip_produces_expected_license_data(
    mocker: pytest_mock.MockFixture, tmp_path: Path
) -> None:
    output_path = tmp_path / "licenses.csv"
    task = CollectLicensesTask(create_fetcher_mock(mocker))

    license_data = task.run_for_dependencies([LIB], str(output_path))

    assert license_data == {
        LIB: [
            License(
                name="Apache-2.0",
                url="https://www.apache.org/licenses/LICENSE-2.0",
                distribution="repo",
                comments="",
            )
        ]
    }
    assert "Apache-2.0" in output_path.read_text(encoding="utf-8")


def test_output_package_is_passed_to_source_formatters(
    mocker: pytest_mock.MockFixture, tmp_path: Path
) -> None:
    output_path = tmp_path / "Licenses.kt"
    task = CollectLicensesTask(create_fetcher_mock(mocker))

    task.run_for_dependencies([LIB], str(output_path), "com.example.licenses")

    assert output_path.read_text(encoding="utf-8").startswith(
        "package com.example.licenses\n"
    )


def test_unsupported_extension_fails_before_any_io(
    mocker: pytest_mock.MockFixture, tmp_path: Path
) -> None:
    output_path = tmp_path / "report.unknownext"
    fetcher = create_fetcher_mock(mocker)
    task = CollectLicensesTask(fetcher)

    with pytest.raises(UnsupportedFormatError) as error:
        task.run(create_scopes(), [], str(output_path))

    assert error.value.extension == "unknownext"
    assert not output_path.exists()
    fetcher.fetch.assert_not_called()  # type: ignore[attr-defined]


def test_write_failures_are_reported_as_output_write_error(
    mocker: pytest_mock.MockFixture,
) -> None:
    mocker.patch("xuke.collect_task.create_dirs")
    mocker.patch(
        "xuke.collect_task.write_file", side_effect=PermissionError("Permission denied")
    )
    task = CollectLicensesTask(create_fetcher_mock(mocker))

    with pytest.raises(OutputWriteError, match="Permission denied") as error:
        task.run_for_dependencies([LIB], "/read-only/licenses.json")

    assert error.value.path == "/read-only/licenses.json"
    assert isinstance(error.value.__cause__, PermissionError)


def test_summary_is_logged_at_info_level(
    mocker: pytest_mock.MockFixture, tmp_path: Path, caplog: LogCaptureFixture
) -> None:
    caplog.set_level(logging.INFO, logger="xuke")
    task = CollectLicensesTask(create_fetcher_mock(mocker))

    task.run_for_dependencies([LIB, UNKNOWN], str(tmp_path / "licenses.md"))

    summary_records = [
        record for record in caplog.records if "org.example:lib:1.0: " in record.message
    ]
    assert len(summary_records) == 1
    assert summary_records[0].levelno == logging.INFO


def test_summarize_writes_one_line_per_license() -> None:
    license_data = {
        LIB: [License(name="MIT"), License(name="Apache-2.0", url="https://a.org")],
        UNKNOWN: [],
    }

    assert summarize(license_data).splitlines() == [
        "org.example:lib:1.0: MIT",
        "org.example:lib:1.0: Apache-2.0 <https://a.org>",
        "org.example:unknown:0.1: No license information found",
    ]
