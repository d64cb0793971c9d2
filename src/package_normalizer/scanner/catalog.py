# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2024-present Datadog, Inc.

from collections.abc import Iterable, Iterator

from package_normalizer.scanner.package import ScannedPackage, tag_value


class ScannedCatalog:
    """Ordered collection of the packages found by one scan."""

    def __init__(self, packages: Iterable[ScannedPackage] = ()) -> None:
        self._packages = list(packages)

    def add(self, package: ScannedPackage) -> None:
        self._packages.append(package)

    def package_count(self) -> int:
        return len(self._packages)

    def sorted(self) -> list[ScannedPackage]:
        # same ordering the scanner uses for its own reports
        return sorted(self._packages, key=_sort_key)

    def __iter__(self) -> Iterator[ScannedPackage]:
        return iter(self._packages)

    def __len__(self) -> int:
        return len(self._packages)


def _sort_key(package: ScannedPackage) -> tuple[str, str, str, str]:
    first_path = package.locations[0].path if package.locations else ""
    return (package.name, package.version, tag_value(package.type), first_path)
