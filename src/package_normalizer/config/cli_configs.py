# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2024-present Datadog, Inc.

from dataclasses import dataclass


@dataclass
class Config:
    default_log_level: str
    default_workers: int
    json_indent: int


default_config = Config(
    default_log_level="WARNING",
    default_workers=1,
    json_indent=2,
)
