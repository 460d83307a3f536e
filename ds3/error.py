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

"""
ds3.error
~~~~~~~~~

This module provides exception classes for every error kind an exchange
with DS3 service can end with.

:copyright: (c) 2026 by DS3 SDK Authors.
:license: Apache 2.0, see LICENSE for more details.

"""

from __future__ import absolute_import, annotations

from enum import Enum
from typing import Optional


class ErrorCode(Enum):
    """Error kinds."""
    MISSING_ARGS = "MissingArgs"
    TRANSPORT_HANDLE = "TransportHandle"
    FAILED_REQUEST = "FailedRequest"
    INVALID_XML = "InvalidXml"
    BAD_STATUS_CODE = "BadStatusCode"


class Ds3Error(Exception):
    """Base DS3 exception."""

    code: ErrorCode = ErrorCode.FAILED_REQUEST

    def __init__(self, message: str):
        self._message = message
        super().__init__(message)

    @property
    def message(self) -> str:
        """Get error message."""
        return self._message

    def __reduce__(self):
        return type(self), (self._message,)


class MissingArgsError(Ds3Error):
    """Raised when a required client, request or object list is absent."""

    code = ErrorCode.MISSING_ARGS


class TransportHandleError(Ds3Error):
    """Raised when HTTP transport handle could not be created."""

    code = ErrorCode.TRANSPORT_HANDLE


class FailedRequestError(Ds3Error):
    """Raised to indicate transport level failure during an exchange."""

    code = ErrorCode.FAILED_REQUEST


class HeaderParseError(FailedRequestError):
    """Raised when response status line or headers could not be parsed."""

    def __init__(self, reason: str, line: Optional[str] = None):
        self._reason = reason
        self._line = line
        super().__init__(
            reason if line is None else f"{reason}: {line!r}",
        )

    @property
    def line(self) -> Optional[str]:
        """Get offending header line."""
        return self._line

    def __reduce__(self):
        return type(self), (self._reason, self._line)


class InvalidXmlError(Ds3Error):
    """
    Raised to indicate response body is not parsable XML or its root
    element does not match expected one.
    """

    code = ErrorCode.INVALID_XML

    def __init__(self, reason: str, body: bytes):
        self._reason = reason
        self._body = body
        super().__init__(
            f"{reason}.  The actual response is: "
            f"{body.decode(errors='replace')}"
        )

    @property
    def body(self) -> bytes:
        """Get raw response body."""
        return self._body

    def __reduce__(self):
        return type(self), (self._reason, self._body)


class BadStatusCodeError(Ds3Error):
    """Raised to indicate DS3 service responded with non-2xx status."""

    code = ErrorCode.BAD_STATUS_CODE

    def __init__(self, status_code: int, status_message: str, body: bytes):
        self._status_code = status_code
        self._status_message = status_message
        self._body = body
        super().__init__(
            f"server failed with HTTP status {status_code} {status_message}; "
            f"Body: {body.decode(errors='replace')}"
        )

    @property
    def status_code(self) -> int:
        """Get HTTP status code."""
        return self._status_code

    @property
    def status_message(self) -> str:
        """Get HTTP status message."""
        return self._status_message

    @property
    def body(self) -> bytes:
        """Get raw error body."""
        return self._body

    def __reduce__(self):
        return (
            type(self),
            (self._status_code, self._status_message, self._body),
        )
