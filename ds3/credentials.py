# -*- coding: utf-8 -*-
# DS3 Python Library for S3 Compatible Bulk Object Storage, (C)
# 2026 DS3 SDK Authors.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Credential definitions to access DS3 service."""
from __future__ import annotations

import os
from dataclasses import dataclass, field

from .error import MissingArgsError


@dataclass(frozen=True)
class Credentials:
    """Represents access ID and secret key."""

    access_id: str
    secret_key: str = field(repr=False)

    def __post_init__(self):
        if not self.access_id:
            raise MissingArgsError("Access ID must not be empty")

        if not self.secret_key:
            raise MissingArgsError("Secret key must not be empty")

    @classmethod
    def from_env(cls) -> Credentials:
        """Create credentials from DS3_ACCESS_KEY/DS3_SECRET_KEY."""
        return cls(
            access_id=os.environ.get("DS3_ACCESS_KEY") or "",
            secret_key=os.environ.get("DS3_SECRET_KEY") or "",
        )
