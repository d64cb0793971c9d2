# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2024-present Datadog, Inc.

import logging

import pytest

from package_normalizer.normalizer.package import MetadataType, UpstreamPackage
from package_normalizer.normalizer.strategies.dpkg_extraction_strategy import (
    DpkgExtractionStrategy,
)
from package_normalizer.scanner.package import (
    DpkgMetadata,
    RpmdbMetadata,
    ScannedMetadataType,
    ScannedPackage,
)


def _dpkg_package(metadata: object) -> ScannedPackage:
    return ScannedPackage(
        id="pkg-id",
        name="libc6",
        version="2.31-13",
        type="deb",
        metadata_type=ScannedMetadataType.DPKG,
        metadata=metadata,
    )


@pytest.mark.parametrize(
    "source, source_version",
    [("glibc", "2.31-13"), ("glibc", "")],
)
def test_dpkg_from_package_with_source_returns_one_upstream(
    source: str, source_version: str
) -> None:
    package = _dpkg_package(
        DpkgMetadata(package="libc6", source=source, source_version=source_version)
    )

    result = DpkgExtractionStrategy().from_package(package)

    assert result.upstreams == [UpstreamPackage(name=source, version=source_version)]
    assert result.metadata is None
    assert result.metadata_type == MetadataType.NONE


def test_dpkg_from_package_without_source_returns_no_upstream() -> None:
    package = _dpkg_package(DpkgMetadata(package="libc6", source_version="2.31-13"))

    result = DpkgExtractionStrategy().from_package(package)

    assert result.upstreams == []


def test_dpkg_from_package_with_unexpected_metadata_logs_warning(
    caplog: pytest.LogCaptureFixture,
) -> None:
    package = _dpkg_package(RpmdbMetadata(source_rpm="glibc-2.17-317.el7.src.rpm"))

    with caplog.at_level(logging.WARNING, logger="package_normalizer"):
        result = DpkgExtractionStrategy().from_package(package)

    assert result.upstreams == []
    assert result.metadata is None
    assert (
        "unable to extract DPKG metadata for Pkg(type=deb, name=libc6, version=2.31-13)"
        in caplog.text
    )


@pytest.mark.parametrize(
    "purl, expected",
    [
        (
            "pkg:deb/debian/libc6@2.31-13?upstream=glibc%402.31-13",
            [UpstreamPackage(name="glibc", version="2.31-13")],
        ),
        (
            "pkg:deb/debian/libc6@2.31-13?upstream=glibc",
            [UpstreamPackage(name="glibc", version="")],
        ),
        (
            "pkg:deb/debian/libc6@2.31-13?upstream=glibc%402.31%40extra",
            [UpstreamPackage(name="glibc", version="2.31@extra")],
        ),
        ("pkg:deb/debian/libc6@2.31-13?arch=amd64", []),
        ("pkg:deb/debian/libc6@2.31-13", []),
        ("", []),
    ],
)
def test_dpkg_from_purl(purl: str, expected: list[UpstreamPackage]) -> None:
    result = DpkgExtractionStrategy().from_purl(purl)

    assert result.upstreams == expected
    assert result.metadata is None
