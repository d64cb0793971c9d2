# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2024-present Datadog, Inc.

import logging

from package_normalizer.normalizer.package import UpstreamPackage
from package_normalizer.normalizer.strategies.abstract_extraction_strategy import (
    ExtractionResult,
    UpstreamExtractionStrategy,
)
from package_normalizer.scanner.package import DpkgMetadata, ScannedPackage
from package_normalizer.utils.purl_qualifiers import (
    PURL_UPSTREAM_QUALIFIER,
    get_purl_qualifiers,
)

# Get application-specific logger
logger = logging.getLogger("package_normalizer")


class DpkgExtractionStrategy(UpstreamExtractionStrategy):
    def from_package(self, package: ScannedPackage) -> ExtractionResult:
        if not isinstance(package.metadata, DpkgMetadata):
            logger.warning("unable to extract DPKG metadata for %s", package)
            return ExtractionResult()

        if not package.metadata.source:
            return ExtractionResult()
        return ExtractionResult(
            upstreams=[
                UpstreamPackage(
                    name=package.metadata.source,
                    version=package.metadata.source_version,
                )
            ]
        )

    def from_purl(self, purl: str) -> ExtractionResult:
        upstream = get_purl_qualifiers(purl).get(PURL_UPSTREAM_QUALIFIER, "")
        if not upstream:
            return ExtractionResult()

        # the qualifier is either "<source>" or "<source>@<source version>"
        source, _, source_version = upstream.partition("@")
        return ExtractionResult(
            upstreams=[UpstreamPackage(name=source, version=source_version)]
        )
