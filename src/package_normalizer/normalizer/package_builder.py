# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2024-present Datadog, Inc.

"""Builds canonical packages out of scanned ones."""

from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor

from package_normalizer.normalizer.package import Package, PackageID
from package_normalizer.normalizer.package_data_extractor import (
    PackageDataExtractor,
    data_from_package,
)
from package_normalizer.scanner.catalog import ScannedCatalog
from package_normalizer.scanner.package import ScannedPackage


def new_package(
    scanned: ScannedPackage, extractor: PackageDataExtractor | None = None
) -> Package:
    if extractor is None:
        _, metadata, upstreams = data_from_package(scanned)
    else:
        _, metadata, upstreams = extractor.extract(scanned)

    return Package(
        id=PackageID(scanned.id),
        name=scanned.name,
        version=scanned.version,
        locations=list(scanned.locations),
        language=scanned.language,
        licenses=list(scanned.licenses),
        type=scanned.type,
        cpes=list(scanned.cpes),
        purl=scanned.purl,
        upstreams=upstreams,
        metadata=metadata,
    )


def from_catalog(
    catalog: ScannedCatalog | Iterable[ScannedPackage],
    max_workers: int | None = None,
    extractor: PackageDataExtractor | None = None,
) -> list[Package]:
    """Convert every scanned package, keeping the catalog's sorted order.

    Packages are independent of each other, so with max_workers above one the
    conversion is spread over a thread pool.
    """
    if isinstance(catalog, ScannedCatalog):
        scanned_packages = catalog.sorted()
    else:
        scanned_packages = list(catalog)

    if max_workers is None or max_workers <= 1 or len(scanned_packages) <= 1:
        return [new_package(p, extractor) for p in scanned_packages]

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        # map yields results in submission order
        return list(executor.map(lambda p: new_package(p, extractor), scanned_packages))


def by_id(package_id: str, packages: Iterable[Package]) -> Package | None:
    for package in packages:
        if package.id == package_id:
            return package
    return None
