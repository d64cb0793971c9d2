# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2024-present Datadog, Inc.

import logging

from package_normalizer.normalizer.package import JavaMatchingMetadata
from package_normalizer.normalizer.strategies.abstract_extraction_strategy import (
    ExtractionResult,
    UpstreamExtractionStrategy,
)
from package_normalizer.scanner.package import JavaArchiveMetadata, ScannedPackage

# Get application-specific logger
logger = logging.getLogger("package_normalizer")


class JavaExtractionStrategy(UpstreamExtractionStrategy):
    def from_package(self, package: ScannedPackage) -> ExtractionResult:
        if not isinstance(package.metadata, JavaArchiveMetadata):
            logger.warning("unable to extract Java metadata for %s", package)
            return ExtractionResult()

        artifact = group = name = ""
        if package.metadata.pom_properties is not None:
            artifact = package.metadata.pom_properties.artifact_id
            group = package.metadata.pom_properties.group_id
        if package.metadata.manifest is not None:
            name = package.metadata.manifest.main.get("Name", "")

        return ExtractionResult(
            metadata=JavaMatchingMetadata(
                virtual_path=package.metadata.virtual_path,
                pom_artifact_id=artifact,
                pom_group_id=group,
                manifest_name=name,
            )
        )

    def from_purl(self, purl: str) -> ExtractionResult:
        # TODO: read groupId/artifactId from maven purl namespace and name
        return ExtractionResult()
