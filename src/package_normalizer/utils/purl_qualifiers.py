# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2024-present Datadog, Inc.

"""Helpers to read qualifiers out of Package URLs
(see https://github.com/package-url/purl-spec)."""

import logging

from packageurl import PackageURL

# Get application-specific logger
logger = logging.getLogger("package_normalizer")

PURL_UPSTREAM_QUALIFIER = "upstream"
PURL_EPOCH_QUALIFIER = "epoch"


def get_purl_qualifiers(purl: str | None) -> dict[str, str]:
    if not purl:
        return {}
    try:
        parsed = PackageURL.from_string(purl)
    except ValueError as e:
        logger.debug("Unable to parse purl %r: %s", purl, e)
        return {}
    if isinstance(parsed.qualifiers, dict):
        return dict(parsed.qualifiers)
    return {}
