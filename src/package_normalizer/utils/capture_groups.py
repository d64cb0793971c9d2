# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2024-present Datadog, Inc.

import re


def match_capture_groups(pattern: re.Pattern[str], content: str) -> dict[str, str]:
    """Map every named group of pattern to the text it captured in content.

    Groups that did not participate in the match, or all groups when the
    pattern does not match at all, map to an empty string.
    """
    results = {name: "" for name in pattern.groupindex}
    match = pattern.search(content)
    if match is None:
        return results
    results.update(match.groupdict(default=""))
    return results
