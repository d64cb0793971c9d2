# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2024-present Datadog, Inc.

"""Canonical package representation consumed by vulnerability matching."""

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, NewType

from package_normalizer.scanner.package import Location, tag_value

# ID represents a unique value for each package added to a package catalog.
PackageID = NewType("PackageID", str)


class MetadataType(Enum):
    NONE = ""
    RPMDB = "RpmdbMetadata"
    JAVA = "JavaMetadata"


@dataclass(frozen=True)
class RpmMatchingMetadata:
    epoch: int | None = None

    metadata_type: ClassVar[MetadataType] = MetadataType.RPMDB


@dataclass(frozen=True)
class JavaMatchingMetadata:
    virtual_path: str = ""
    pom_artifact_id: str = ""
    pom_group_id: str = ""
    manifest_name: str = ""

    metadata_type: ClassVar[MetadataType] = MetadataType.JAVA


# This is NOT 1-for-1 the scanner metadata! Only the select data needed for
# vulnerability matching.
MatchingMetadata = RpmMatchingMetadata | JavaMatchingMetadata


@dataclass(frozen=True)
class UpstreamPackage:
    """The source package a binary package was built from."""

    name: str
    version: str = ""


@dataclass(frozen=True)
class Package:
    """An application or library that has been bundled into a distributable
    format, reduced to what vulnerability matching needs."""

    id: PackageID
    name: str
    version: str
    locations: list[Location] = field(default_factory=list)
    language: str = ""
    licenses: list[str] = field(default_factory=list)
    type: str = ""  # e.g. deb, rpm, apk, java-archive, npm
    cpes: list[str] = field(default_factory=list)
    purl: str = ""
    upstreams: list[UpstreamPackage] = field(default_factory=list)
    metadata: MatchingMetadata | None = None

    @property
    def metadata_type(self) -> MetadataType:
        if self.metadata is None:
            return MetadataType.NONE
        return self.metadata.metadata_type

    def __str__(self) -> str:
        return f"Pkg(type={tag_value(self.type)}, name={self.name}, version={self.version})"
