# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

# Command collecting the licenses of resolved dependencies into a report file

import json
from typing import Annotated, List, Optional

import typer

import xuke.config.cli_configs as cli_config
from xuke.adaptors.os import file_extension
from xuke.collect_task import CollectLicensesTask
from xuke.config.json_config_parser import JsonConfigParser
from xuke.errors import OutputWriteError, UnsupportedFormatError
from xuke.metadata_collector.build_scope import collect_dependencies
from xuke.metadata_collector.dependency import Dependency
from xuke.metadata_collector.fetchers.abstract_metadata_fetcher import (
    MetadataFetcher,
)
from xuke.metadata_collector.fetchers.chained_metadata_fetcher import (
    ChainedMetadataFetcher,
)
from xuke.metadata_collector.fetchers.local_repository_fetcher import (
    GradleCacheFetcher,
    MavenLocalRepositoryFetcher,
)
from xuke.metadata_collector.fetchers.remote_repository_fetcher import (
    RemoteRepositoryFetcher,
)
from xuke.report_generator.formatter_factory import (
    formatter_from_file_extension,
    supported_extensions,
)
from xuke.utils.logging import setup_logging


def build_fetcher(
    use_maven_local: bool,
    maven_local_path: str,
    use_gradle_cache: bool,
    gradle_cache_path: str,
    repositories: list[str],
    timeout: float | None,
) -> MetadataFetcher:
    fetchers: list[MetadataFetcher] = []
    if use_maven_local:
        fetchers.append(MavenLocalRepositoryFetcher(maven_local_path))
    if use_gradle_cache:
        fetchers.append(GradleCacheFetcher(gradle_cache_path))
    if repositories:
        fetchers.append(RemoteRepositoryFetcher(repositories, timeout=timeout))
    return ChainedMetadataFetcher(fetchers)


def collect(
    output_file: Annotated[
        str,
        typer.Argument(
            help=(
                "Path of the report to write. Its extension selects the format: "
                + ", ".join(supported_extensions())
                + "."
            )
        ),
    ],
    manifest: Annotated[
        Optional[str],
        typer.Option(
            "--manifest",
            "-m",
            help="JSON manifest listing the resolved scopes of the build.",
        ),
    ] = None,
    dependency: Annotated[
        Optional[List[str]],
        typer.Option(
            "--dependency",
            "-d",
            help="Resolved dependency as group:name:version. Can be repeated.",
        ),
    ] = None,
    scope: Annotated[
        Optional[List[str]],
        typer.Option(
            "--scope",
            "-s",
            help=(
                "Only include manifest scopes with this name. Can be repeated. "
                "All resolvable scopes are included by default."
            ),
        ),
    ] = None,
    output_package: Annotated[
        str,
        typer.Option(
            help="Package or namespace used by formats generating source code."
        ),
    ] = "",
    repository: Annotated[
        Optional[List[str]],
        typer.Option(
            "--repository",
            "-r",
            help=(
                "Remote Maven repository to fetch POMs from, searched in order. "
                "Can be repeated. Defaults to Maven Central and Google Maven."
            ),
        ),
    ] = None,
    offline: Annotated[
        bool,
        typer.Option("--offline", help="Do not contact remote repositories."),
    ] = False,
    maven_local: Annotated[
        bool,
        typer.Option(help="Look for POMs in the Maven local repository first."),
    ] = True,
    maven_local_path: Annotated[
        str,
        typer.Option(help="Location of the Maven local repository."),
    ] = cli_config.default_config.preset_maven_local_path,
    gradle_cache: Annotated[
        bool,
        typer.Option(help="Look for POMs in the Gradle module cache."),
    ] = True,
    gradle_cache_path: Annotated[
        str,
        typer.Option(help="Location of the Gradle module cache."),
    ] = cli_config.default_config.preset_gradle_cache_path,
    max_workers: Annotated[
        int,
        typer.Option(
            min=1,
            help="Number of dependencies whose metadata is fetched in parallel.",
        ),
    ] = cli_config.default_config.preset_max_workers,
    timeout: Annotated[
        Optional[float],
        typer.Option(
            help="Timeout in seconds for remote requests. No timeout by default."
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(help="Logging level (DEBUG, INFO, WARNING, ERROR)."),
    ] = "INFO",
) -> None:
    """
    Collect the licenses declared by resolved dependencies and write them to a report.
    """
    try:
        setup_logging(log_level)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--log-level")

    try:
        formatter_from_file_extension(file_extension(output_file))
    except UnsupportedFormatError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    if manifest is None and not dependency:
        typer.echo(
            "Error: Provide a manifest (--manifest) or at least one --dependency.",
            err=True,
        )
        raise typer.Exit(code=1)

    dependencies: list[Dependency] = []
    try:
        if manifest is not None:
            scopes = JsonConfigParser.load_build_scopes(manifest)
            dependencies = collect_dependencies(scopes, scope or [])
        for coordinates in dependency or []:
            parsed = Dependency.from_coordinates(coordinates)
            if parsed not in dependencies:
                dependencies.append(parsed)
    except FileNotFoundError:
        typer.echo(f"Error: File '{manifest}' not found.", err=True)
        raise typer.Exit(code=1)
    except json.JSONDecodeError as e:
        typer.echo(f"Error: Invalid JSON in '{manifest}': {e}", err=True)
        raise typer.Exit(code=1)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    repositories: list[str] = []
    if not offline:
        repositories = (
            repository or cli_config.default_config.preset_remote_repositories
        )
    fetcher = build_fetcher(
        maven_local,
        maven_local_path,
        gradle_cache,
        gradle_cache_path,
        repositories,
        timeout,
    )

    task = CollectLicensesTask(fetcher, max_workers=max_workers)
    try:
        task.run_for_dependencies(dependencies, output_file, output_package)
    except OutputWriteError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"Wrote licenses of {len(dependencies)} dependencies to {output_file}")


def list_formats() -> None:
    """
    List the report formats supported, by file extension.
    """
    for extension in supported_extensions():
        typer.echo(extension)
