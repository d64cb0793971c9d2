# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2024-present Datadog, Inc.

import json
import logging
from typing import Any

from package_normalizer.adaptors.os import open_file
from package_normalizer.scanner.catalog import ScannedCatalog
from package_normalizer.scanner.package import (
    ApkMetadata,
    DpkgMetadata,
    JavaArchiveMetadata,
    JavaManifest,
    Location,
    PomProperties,
    RpmdbMetadata,
    ScannedMetadataType,
    ScannedPackage,
)

# Get application-specific logger
logger = logging.getLogger("package_normalizer")


class SyftJsonParser:
    """Parser for the JSON documents produced by `syft -o json`."""

    @staticmethod
    def load_catalog(sbom_file_path: str) -> ScannedCatalog:
        """Load the packages of a syft JSON document.

        Args:
            sbom_file_path: Path to the syft JSON document

        Returns:
            The catalog of scanned packages, in document order

        Raises:
            FileNotFoundError: If the document is not found
            json.JSONDecodeError: If the document is not valid JSON
            ValueError: If a package entry is malformed
        """
        try:
            document = json.loads(open_file(sbom_file_path))
            return SyftJsonParser.parse_catalog(document)
        except FileNotFoundError:
            logger.error(f"SBOM file not found: {sbom_file_path}")
            raise
        except json.JSONDecodeError:
            logger.error(f"Invalid JSON in SBOM file: {sbom_file_path}")
            raise
        except ValueError as e:
            logger.error(f"Invalid package entry in {sbom_file_path}: {e}")
            raise

    @staticmethod
    def parse_catalog(document: dict[str, Any] | list[Any]) -> ScannedCatalog:
        if isinstance(document, dict):
            artifacts = document.get("artifacts") or []
        elif isinstance(document, list):
            artifacts = document
        else:
            raise ValueError("Expected a syft document or a list of artifacts.")
        return ScannedCatalog(SyftJsonParser.parse_package(a) for a in artifacts)

    @staticmethod
    def parse_package(artifact: dict[str, Any]) -> ScannedPackage:
        if not isinstance(artifact, dict):
            raise ValueError(f"Package entry must be an object, got: {artifact!r}")
        if not artifact.get("id"):
            raise ValueError(f"Package entry has no id: {artifact.get('name')!r}")

        metadata_type = artifact.get("metadataType") or ""
        return ScannedPackage(
            id=str(artifact["id"]),
            name=artifact.get("name") or "",
            version=artifact.get("version") or "",
            type=artifact.get("type") or "",
            language=artifact.get("language") or "",
            purl=artifact.get("purl") or "",
            locations=[_location(loc) for loc in artifact.get("locations") or []],
            licenses=[_license(lic) for lic in artifact.get("licenses") or []],
            cpes=[_cpe(cpe) for cpe in artifact.get("cpes") or []],
            metadata_type=metadata_type,
            metadata=SyftJsonParser.parse_metadata(
                metadata_type, artifact.get("metadata")
            ),
        )

    @staticmethod
    def parse_metadata(metadata_type: str, metadata: Any) -> Any:
        """Map a syft metadata object onto its typed counterpart.

        Unknown metadata types, and metadata that is not an object, are kept
        as they are; extraction reports the mismatch later on.
        """
        if not isinstance(metadata, dict):
            return metadata

        if metadata_type == ScannedMetadataType.DPKG:
            return DpkgMetadata(
                package=metadata.get("package") or "",
                source=metadata.get("source") or "",
                version=metadata.get("version") or "",
                source_version=metadata.get("sourceVersion") or "",
            )
        if metadata_type == ScannedMetadataType.RPMDB:
            return RpmdbMetadata(
                name=metadata.get("name") or "",
                version=metadata.get("version") or "",
                epoch=_epoch(metadata.get("epoch")),
                arch=metadata.get("architecture") or "",
                release=metadata.get("release") or "",
                source_rpm=metadata.get("sourceRpm") or "",
            )
        if metadata_type == ScannedMetadataType.APK:
            return ApkMetadata(
                package=metadata.get("package") or "",
                origin_package=metadata.get("originPackage") or "",
                version=metadata.get("version") or "",
            )
        if metadata_type == ScannedMetadataType.JAVA:
            manifest = None
            if isinstance(metadata.get("manifest"), dict):
                manifest = JavaManifest(
                    main=dict(metadata["manifest"].get("main") or {})
                )
            pom_properties = None
            if isinstance(metadata.get("pomProperties"), dict):
                pom = metadata["pomProperties"]
                pom_properties = PomProperties(
                    group_id=pom.get("groupId") or "",
                    artifact_id=pom.get("artifactId") or "",
                    version=pom.get("version") or "",
                    name=pom.get("name") or "",
                )
            return JavaArchiveMetadata(
                virtual_path=metadata.get("virtualPath") or "",
                manifest=manifest,
                pom_properties=pom_properties,
            )
        return metadata


def _location(location: dict[str, Any] | str) -> Location:
    if isinstance(location, str):
        return Location(path=location)
    # newer syft releases call these realPath and fileSystemID
    return Location(
        path=location.get("path") or location.get("realPath") or "",
        layer_id=location.get("layerID") or location.get("fileSystemID"),
    )


def _license(license: dict[str, Any] | str) -> str:
    if isinstance(license, str):
        return license
    return str(license.get("spdxExpression") or license.get("value") or "")


def _cpe(cpe: dict[str, Any] | str) -> str:
    if isinstance(cpe, str):
        return cpe
    return str(cpe.get("cpe") or "")


def _epoch(value: Any) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"RPM epoch must be an integer or null, got: {value!r}")
    return value
