# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2024-present Datadog, Inc.

# Command for normalizing the packages of a syft JSON document

import json
from dataclasses import asdict
from typing import Annotated, Any

import typer

from package_normalizer.adaptors.os import write_file
from package_normalizer.config.cli_configs import default_config
from package_normalizer.normalizer.package import Package
from package_normalizer.normalizer.package_builder import by_id, from_catalog
from package_normalizer.scanner.package import tag_value
from package_normalizer.scanner.syft_json_parser import SyftJsonParser
from package_normalizer.utils.logging import parse_log_level, setup_logging


def package_to_dict(package: Package) -> dict[str, Any]:
    result = asdict(package)
    result["type"] = tag_value(package.type)
    result["metadata_type"] = package.metadata_type.value
    return result


def normalize(
    sbom_file: Annotated[
        str,
        typer.Argument(help="Path to a syft JSON document (syft -o json)."),
    ],
    output_file: Annotated[
        str | None,
        typer.Option(
            "--output",
            "-o",
            help="Path to the output JSON file. Default is to print to stdout.",
        ),
    ] = None,
    package_id: Annotated[
        str | None,
        typer.Option(
            "--id",
            help="Only output the package with this id.",
        ),
    ] = None,
    workers: Annotated[
        int,
        typer.Option(
            "--workers",
            min=1,
            help="Number of threads used to normalize the packages.",
        ),
    ] = default_config.default_workers,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).",
        ),
    ] = default_config.default_log_level,
    no_color: Annotated[
        bool,
        typer.Option(
            "--no-color",
            help="Do not color log messages.",
        ),
    ] = False,
) -> None:
    """
    Normalize the packages found by syft into the representation used for
    vulnerability matching, including upstream source packages and the
    metadata needed for version comparison.
    """
    try:
        setup_logging(parse_log_level(log_level), colored=not no_color)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    try:
        catalog = SyftJsonParser.load_catalog(sbom_file)
    except FileNotFoundError:
        typer.echo(f"Error: File '{sbom_file}' not found.", err=True)
        raise typer.Exit(code=1)
    except json.JSONDecodeError:
        typer.echo(f"Error: File '{sbom_file}' is not valid JSON.", err=True)
        raise typer.Exit(code=1)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    packages = from_catalog(catalog, max_workers=workers)

    payload: Any
    if package_id is not None:
        package = by_id(package_id, packages)
        if package is None:
            typer.echo(f"Error: Package '{package_id}' not found.", err=True)
            raise typer.Exit(code=1)
        payload = package_to_dict(package)
    else:
        payload = [package_to_dict(p) for p in packages]

    content = json.dumps(payload, indent=default_config.json_indent)
    if output_file:
        write_file(output_file, content + "\n")
    else:
        typer.echo(content)
