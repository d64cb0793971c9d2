# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2024-present Datadog, Inc.

"""Package records as reported by the scanner (syft). These shapes are owned
by the scanner; this project only reads them."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class PackageType(str, Enum):
    APK = "apk"
    DEB = "deb"
    RPM = "rpm"
    JAVA = "java-archive"
    JENKINS_PLUGIN = "jenkins-plugin"
    NPM = "npm"
    PYTHON = "python"
    GEM = "gem"
    GO_MODULE = "go-module"
    RUST = "rust-crate"
    PHP_COMPOSER = "php-composer"
    DART_PUB = "dart-pub"
    DOTNET = "dotnet"
    CONAN = "conan"
    HACKAGE = "hackage"
    COCOAPODS = "cocoapods"
    PORTAGE = "portage"
    BINARY = "binary"
    KB = "msrc-kb"


class ScannedMetadataType(str, Enum):
    DPKG = "DpkgMetadata"
    RPMDB = "RpmdbMetadata"
    APK = "ApkMetadata"
    JAVA = "JavaMetadata"


@dataclass(frozen=True)
class Location:
    path: str
    layer_id: str | None = None


@dataclass(frozen=True)
class DpkgMetadata:
    package: str = ""
    source: str = ""
    version: str = ""
    source_version: str = ""


@dataclass(frozen=True)
class RpmdbMetadata:
    name: str = ""
    version: str = ""
    epoch: int | None = None
    arch: str = ""
    release: str = ""
    source_rpm: str = ""


@dataclass(frozen=True)
class ApkMetadata:
    package: str = ""
    origin_package: str = ""
    version: str = ""


@dataclass(frozen=True)
class PomProperties:
    group_id: str = ""
    artifact_id: str = ""
    version: str = ""
    name: str = ""


@dataclass(frozen=True)
class JavaManifest:
    main: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class JavaArchiveMetadata:
    virtual_path: str = ""
    manifest: JavaManifest | None = None
    pom_properties: PomProperties | None = None


@dataclass(frozen=True)
class ScannedPackage:
    """A package as discovered by the scanner.

    metadata_type names the shape of metadata (see ScannedMetadataType); an
    empty metadata_type means the scanner attached no typed metadata, which is
    the case for packages rebuilt from a bare purl.
    """

    id: str
    name: str
    version: str
    type: str = ""
    language: str = ""
    purl: str = ""
    locations: list[Location] = field(default_factory=list)
    licenses: list[str] = field(default_factory=list)
    cpes: list[str] = field(default_factory=list)
    metadata_type: str = ""
    metadata: Any = None

    def __str__(self) -> str:
        return f"Pkg(type={tag_value(self.type)}, name={self.name}, version={self.version})"


def tag_value(tag: str) -> str:
    """Plain string form of a type or metadata tag, whether it is one of the
    enum members above or a raw string taken from scanner output."""
    if isinstance(tag, Enum):
        return str(tag.value)
    return tag or ""
