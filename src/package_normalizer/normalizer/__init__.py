# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2024-present Datadog, Inc.

from package_normalizer.normalizer.package import (
    MetadataType,
    Package,
    UpstreamPackage,
)
from package_normalizer.normalizer.package_builder import (
    by_id,
    from_catalog,
    new_package,
)

__all__ = [
    "MetadataType",
    "Package",
    "UpstreamPackage",
    "by_id",
    "from_catalog",
    "new_package",
]
