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

"""Helper functions."""

from __future__ import absolute_import, annotations

import os
import platform
import re
import urllib.parse
from typing import Iterable, Mapping

from . import __title__, __version__
from .datatypes import BulkObject, BulkObjectList

_DEFAULT_USER_AGENT = (
    f"DS3 ({platform.system()}; {platform.machine()}) "
    f"{__title__}/{__version__}"
)

_SIGNATURE_REGEX = re.compile(r"^AWS ([^:]+):(.+)$")


def quote(
        resource: str,
        safe: str = "/",
        encoding: str | None = None,
        errors: str | None = None,
) -> str:
    """
    Wrapper to urllib.parse.quote() replacing back to '~' for older python
    versions.
    """
    return urllib.parse.quote(
        resource,
        safe=safe,
        encoding=encoding,
        errors=errors,
    ).replace("%7E", "~")


def queryencode(
        query: str,
        safe: str = "",
        encoding: str | None = None,
        errors: str | None = None,
) -> str:
    """Encode query parameter value."""
    return quote(query, safe, encoding, errors)


def headers_to_strings(
        headers: Mapping[str, str],
        redact: bool = False,
) -> str:
    """Convert HTTP headers to multi-line string."""
    values = []
    for key, value in headers.items():
        if redact and key.lower() == "authorization":
            value = _SIGNATURE_REGEX.sub(r"AWS \1:*REDACTED*", value)
        values.append(f"{key}: {value}")
    return "\n".join(values)


def check_non_empty_string(string: str | bytes):
    """Check whether given string is not empty."""
    try:
        if not string.strip():
            raise ValueError("value must not be empty")
    except AttributeError as exc:
        raise TypeError(
            f"string expected, got {type(string).__name__}",
        ) from exc


def bulk_objects_from_files(paths: Iterable[str]) -> BulkObjectList:
    """
    Build a list of bulk objects named by given file paths sized by
    their on-disk size.
    """
    return BulkObjectList(
        [BulkObject(path, os.stat(path).st_size) for path in paths],
    )
