# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2024-present Datadog, Inc.

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from package_normalizer.normalizer.package import (
    MatchingMetadata,
    MetadataType,
    UpstreamPackage,
)
from package_normalizer.scanner.package import ScannedPackage


@dataclass(frozen=True)
class ExtractionResult:
    metadata: MatchingMetadata | None = None
    upstreams: list[UpstreamPackage] = field(default_factory=list)

    @property
    def metadata_type(self) -> MetadataType:
        if self.metadata is None:
            return MetadataType.NONE
        return self.metadata.metadata_type


class UpstreamExtractionStrategy(ABC):
    """Reads upstream packages and matching metadata for one package format.

    from_package works on the typed metadata the scanner attached to a
    package; from_purl is the fallback for packages that only carry a purl.
    """

    @abstractmethod
    def from_package(self, package: ScannedPackage) -> ExtractionResult:
        raise NotImplementedError

    @abstractmethod
    def from_purl(self, purl: str) -> ExtractionResult:
        raise NotImplementedError
