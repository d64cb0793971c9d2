# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2024-present Datadog, Inc.

import re

from package_normalizer.utils.capture_groups import match_capture_groups

# the source-rpm field has something akin to "util-linux-ng-2.17.2-12.28.el6_9.2.src.rpm"
# in which case the pattern will extract out the following values for the named capture groups:
#   name = "util-linux-ng"
#   version = "2.17.2" (or, if there's an epoch, we'd expect a value like "4:2.17.2")
#   release = "12.28.el6_9.2"
#   arch = "src"
# \Z rather than $ so a trailing newline does not match
RPM_PACKAGE_NAME_PATTERN = re.compile(
    r"^(?P<name>.*)-(?P<version>.*)-(?P<release>.*)\.(?P<arch>[a-zA-Z][^.]+)(\.rpm)\Z"
)


def get_name_and_el_version(source_rpm: str) -> tuple[str, str]:
    """Return the package name and the "<version>-<release>" string encoded in
    a source RPM filename, or two empty strings when it cannot be parsed."""
    groups = match_capture_groups(RPM_PACKAGE_NAME_PATTERN, source_rpm)
    # arch is never empty on a match
    if not groups["arch"]:
        return "", ""
    return groups["name"], f"{groups['version']}-{groups['release']}"
