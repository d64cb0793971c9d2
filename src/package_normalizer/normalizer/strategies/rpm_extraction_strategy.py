# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2024-present Datadog, Inc.

import logging
import re

from package_normalizer.normalizer.package import (
    RpmMatchingMetadata,
    UpstreamPackage,
)
from package_normalizer.normalizer.strategies.abstract_extraction_strategy import (
    ExtractionResult,
    UpstreamExtractionStrategy,
)
from package_normalizer.scanner.package import RpmdbMetadata, ScannedPackage
from package_normalizer.utils.purl_qualifiers import (
    PURL_EPOCH_QUALIFIER,
    PURL_UPSTREAM_QUALIFIER,
    get_purl_qualifiers,
)
from package_normalizer.utils.source_rpm import get_name_and_el_version

# Get application-specific logger
logger = logging.getLogger("package_normalizer")

# ASCII decimal digits with an optional sign, nothing else
EPOCH_PATTERN = re.compile(r"[+-]?[0-9]+")


class RpmExtractionStrategy(UpstreamExtractionStrategy):
    def from_package(self, package: ScannedPackage) -> ExtractionResult:
        if not isinstance(package.metadata, RpmdbMetadata):
            logger.warning("unable to extract RPM metadata for %s", package)
            return ExtractionResult()

        upstreams = []
        source_rpm = package.metadata.source_rpm
        if source_rpm:
            name, version = get_name_and_el_version(source_rpm)
            if not name:
                logger.warning(
                    "unable to extract name and version from SourceRPM=%r", source_rpm
                )
            elif name != package.name:
                # don't include matches if the source package name matches the current package name
                upstreams.append(UpstreamPackage(name=name, version=version))

        metadata = None
        if package.metadata.epoch is not None:
            metadata = RpmMatchingMetadata(epoch=package.metadata.epoch)
        return ExtractionResult(metadata=metadata, upstreams=upstreams)

    def from_purl(self, purl: str) -> ExtractionResult:
        qualifiers = get_purl_qualifiers(purl)
        upstream = qualifiers.get(PURL_UPSTREAM_QUALIFIER, "")
        epoch = qualifiers.get(PURL_EPOCH_QUALIFIER, "")

        metadata = None
        if epoch:
            if EPOCH_PATTERN.fullmatch(epoch):
                metadata = RpmMatchingMetadata(epoch=int(epoch))
            else:
                logger.warning("unable to parse RPM epoch=%r: not an integer", epoch)

        upstreams = []
        if upstream:
            name, version = get_name_and_el_version(upstream)
            if name:
                upstreams.append(UpstreamPackage(name=name, version=version))
            else:
                logger.warning(
                    "unable to extract name and version from upstream=%r", upstream
                )
        return ExtractionResult(metadata=metadata, upstreams=upstreams)
