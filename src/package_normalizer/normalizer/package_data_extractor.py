# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2024-present Datadog, Inc.

"""Package data extractor picks the extraction strategy that fits a scanned
package and returns the data used for vulnerability matching."""

import logging

from package_normalizer.normalizer.package import (
    MatchingMetadata,
    MetadataType,
    UpstreamPackage,
)
from package_normalizer.normalizer.strategies.abstract_extraction_strategy import (
    ExtractionResult,
    UpstreamExtractionStrategy,
)
from package_normalizer.normalizer.strategies.apk_extraction_strategy import (
    ApkExtractionStrategy,
)
from package_normalizer.normalizer.strategies.dpkg_extraction_strategy import (
    DpkgExtractionStrategy,
)
from package_normalizer.normalizer.strategies.java_extraction_strategy import (
    JavaExtractionStrategy,
)
from package_normalizer.normalizer.strategies.rpm_extraction_strategy import (
    RpmExtractionStrategy,
)
from package_normalizer.scanner.package import (
    PackageType,
    ScannedMetadataType,
    ScannedPackage,
    tag_value,
)

# Get application-specific logger
logger = logging.getLogger("package_normalizer")

PackageData = tuple[MetadataType, MatchingMetadata | None, list[UpstreamPackage]]


def default_metadata_strategies() -> dict[str, UpstreamExtractionStrategy]:
    return {
        ScannedMetadataType.DPKG.value: DpkgExtractionStrategy(),
        ScannedMetadataType.RPMDB.value: RpmExtractionStrategy(),
        ScannedMetadataType.APK.value: ApkExtractionStrategy(),
        ScannedMetadataType.JAVA.value: JavaExtractionStrategy(),
    }


def default_purl_strategies() -> dict[str, UpstreamExtractionStrategy]:
    # java-archive packages have no purl fallback
    return {
        PackageType.APK.value: ApkExtractionStrategy(),
        PackageType.DEB.value: DpkgExtractionStrategy(),
        PackageType.RPM.value: RpmExtractionStrategy(),
    }


class PackageDataExtractor:
    """Strategies are chosen by the metadata type the scanner declared; only
    packages without typed metadata fall back to the purl, keyed by package
    type."""

    def __init__(
        self,
        metadata_strategies: dict[str, UpstreamExtractionStrategy] | None = None,
        purl_strategies: dict[str, UpstreamExtractionStrategy] | None = None,
    ) -> None:
        if metadata_strategies is None:
            metadata_strategies = default_metadata_strategies()
        if purl_strategies is None:
            purl_strategies = default_purl_strategies()
        self.metadata_strategies = metadata_strategies
        self.purl_strategies = purl_strategies

    def extract(self, package: ScannedPackage) -> PackageData:
        result = self._extract(package)
        return result.metadata_type, result.metadata, result.upstreams

    def _extract(self, package: ScannedPackage) -> ExtractionResult:
        metadata_type = tag_value(package.metadata_type)
        if metadata_type:
            strategy = self.metadata_strategies.get(metadata_type)
            if strategy is None:
                return ExtractionResult()
            logger.debug("Extracting %s from %s", package, metadata_type)
            return strategy.from_package(package)

        strategy = self.purl_strategies.get(tag_value(package.type))
        if strategy is None:
            return ExtractionResult()
        logger.debug("Extracting %s from purl %r", package, package.purl)
        return strategy.from_purl(package.purl)


_default_extractor = PackageDataExtractor()


def data_from_package(package: ScannedPackage) -> PackageData:
    return _default_extractor.extract(package)
