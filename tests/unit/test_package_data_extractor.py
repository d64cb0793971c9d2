# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2024-present Datadog, Inc.

import pytest_mock

from package_normalizer.normalizer.package import (
    JavaMatchingMetadata,
    MetadataType,
    RpmMatchingMetadata,
    UpstreamPackage,
)
from package_normalizer.normalizer.package_data_extractor import (
    PackageDataExtractor,
    data_from_package,
)
from package_normalizer.normalizer.strategies.abstract_extraction_strategy import (
    ExtractionResult,
    UpstreamExtractionStrategy,
)
from package_normalizer.scanner.package import (
    ApkMetadata,
    DpkgMetadata,
    JavaArchiveMetadata,
    PackageType,
    RpmdbMetadata,
    ScannedMetadataType,
    ScannedPackage,
)


def test_rpm_package_without_metadata_falls_back_to_purl() -> None:
    package = ScannedPackage(
        id="pkg-id",
        name="util-linux-ng",
        version="2.17.2",
        type=PackageType.RPM,
        purl="pkg:rpm/util-linux-ng@2.17.2?upstream=util-linux-ng-2.17.2-12.28.el6_9.2.src.rpm&epoch=4",
    )

    metadata_type, metadata, upstreams = data_from_package(package)

    assert metadata_type == MetadataType.RPMDB
    assert metadata == RpmMatchingMetadata(epoch=4)
    assert upstreams == [
        UpstreamPackage(name="util-linux-ng", version="2.17.2-12.28.el6_9.2")
    ]


def test_deb_package_without_metadata_falls_back_to_purl() -> None:
    package = ScannedPackage(
        id="pkg-id",
        name="libc6",
        version="2.31-13",
        type="deb",
        purl="pkg:deb/debian/libc6@2.31-13?upstream=glibc%402.31-13",
    )

    assert data_from_package(package) == (
        MetadataType.NONE,
        None,
        [UpstreamPackage(name="glibc", version="2.31-13")],
    )


def test_apk_package_without_metadata_falls_back_to_purl() -> None:
    package = ScannedPackage(
        id="pkg-id",
        name="libcrypto1.1",
        version="1.1.1k-r0",
        type="apk",
        purl="pkg:apk/alpine/libcrypto1.1@1.1.1k-r0?upstream=openssl",
    )

    assert data_from_package(package) == (
        MetadataType.NONE,
        None,
        [UpstreamPackage(name="openssl")],
    )


def test_java_package_without_metadata_returns_nothing() -> None:
    package = ScannedPackage(
        id="pkg-id",
        name="log4j-core",
        version="2.14.1",
        type=PackageType.JAVA,
        purl="pkg:maven/org.apache.logging.log4j/log4j-core@2.14.1?upstream=log4j",
    )

    assert data_from_package(package) == (MetadataType.NONE, None, [])


def test_typed_metadata_takes_precedence_over_purl() -> None:
    package = ScannedPackage(
        id="pkg-id",
        name="libc6",
        version="2.31-13",
        type="deb",
        purl="pkg:deb/debian/libc6@2.31-13?upstream=glibc%402.31-13",
        metadata_type="DpkgMetadata",
        metadata=DpkgMetadata(package="libc6"),
    )

    assert data_from_package(package) == (MetadataType.NONE, None, [])


def test_typed_metadata_dispatch_for_each_ecosystem() -> None:
    rpm = ScannedPackage(
        id="1",
        name="libuuid",
        version="2.17.2",
        type="rpm",
        metadata_type=ScannedMetadataType.RPMDB,
        metadata=RpmdbMetadata(
            epoch=2, source_rpm="util-linux-ng-2.17.2-12.28.el6_9.2.src.rpm"
        ),
    )
    apk = ScannedPackage(
        id="2",
        name="libcrypto1.1",
        version="1.1.1k-r0",
        type="apk",
        metadata_type="ApkMetadata",
        metadata=ApkMetadata(origin_package="openssl"),
    )
    java = ScannedPackage(
        id="3",
        name="app",
        version="1.0",
        type="java-archive",
        metadata_type="JavaMetadata",
        metadata=JavaArchiveMetadata(virtual_path="/app.jar"),
    )

    assert data_from_package(rpm) == (
        MetadataType.RPMDB,
        RpmMatchingMetadata(epoch=2),
        [UpstreamPackage(name="util-linux-ng", version="2.17.2-12.28.el6_9.2")],
    )
    assert data_from_package(apk) == (
        MetadataType.NONE,
        None,
        [UpstreamPackage(name="openssl")],
    )
    assert data_from_package(java) == (
        MetadataType.JAVA,
        JavaMatchingMetadata(virtual_path="/app.jar"),
        [],
    )


def test_unknown_metadata_type_returns_nothing() -> None:
    package = ScannedPackage(
        id="pkg-id",
        name="left-pad",
        version="1.3.0",
        type="npm",
        purl="pkg:npm/left-pad@1.3.0?upstream=left-pad",
        metadata_type="NpmPackageJsonMetadata",
        metadata={"name": "left-pad"},
    )

    assert data_from_package(package) == (MetadataType.NONE, None, [])


def test_unknown_package_type_without_metadata_returns_nothing() -> None:
    package = ScannedPackage(
        id="pkg-id",
        name="requests",
        version="2.31.0",
        type="python",
        purl="pkg:pypi/requests@2.31.0?upstream=requests",
    )

    assert data_from_package(package) == (MetadataType.NONE, None, [])


def test_extractor_uses_only_the_metadata_strategy(
    mocker: pytest_mock.MockFixture,
) -> None:
    metadata_strategy = mocker.Mock(spec=UpstreamExtractionStrategy)
    metadata_strategy.from_package.return_value = ExtractionResult(
        upstreams=[UpstreamPackage(name="source")]
    )
    purl_strategy = mocker.Mock(spec=UpstreamExtractionStrategy)
    package = ScannedPackage(
        id="pkg-id",
        name="binary",
        version="1.0",
        type="deb",
        purl="pkg:deb/debian/binary@1.0?upstream=other",
        metadata_type="DpkgMetadata",
        metadata=DpkgMetadata(source="source"),
    )
    extractor = PackageDataExtractor(
        metadata_strategies={"DpkgMetadata": metadata_strategy},
        purl_strategies={"deb": purl_strategy},
    )

    result = extractor.extract(package)

    assert result == (MetadataType.NONE, None, [UpstreamPackage(name="source")])
    metadata_strategy.from_package.assert_called_once_with(package)
    purl_strategy.from_purl.assert_not_called()


def test_extractor_falls_back_to_purl_strategy_by_package_type(
    mocker: pytest_mock.MockFixture,
) -> None:
    metadata_strategy = mocker.Mock(spec=UpstreamExtractionStrategy)
    purl_strategy = mocker.Mock(spec=UpstreamExtractionStrategy)
    purl_strategy.from_purl.return_value = ExtractionResult(
        metadata=RpmMatchingMetadata(epoch=1)
    )
    package = ScannedPackage(
        id="pkg-id",
        name="bash",
        version="4.4.19",
        type="rpm",
        purl="pkg:rpm/redhat/bash@4.4.19?epoch=1",
    )
    extractor = PackageDataExtractor(
        metadata_strategies={"RpmdbMetadata": metadata_strategy},
        purl_strategies={"rpm": purl_strategy},
    )

    result = extractor.extract(package)

    assert result == (MetadataType.RPMDB, RpmMatchingMetadata(epoch=1), [])
    purl_strategy.from_purl.assert_called_once_with("pkg:rpm/redhat/bash@4.4.19?epoch=1")
    metadata_strategy.from_package.assert_not_called()
