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

"""Incremental parser of response status line and headers."""

from __future__ import absolute_import, annotations

import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Union

from .error import HeaderParseError

log = logging.getLogger(__name__)

_PROTOCOLS = ("HTTP/1.1", "HTTP/1.0")
_STATUS_CODE_REGEX = re.compile(r"^\d+")
_CONTINUE = 100


@dataclass(frozen=True)
class ResponseMetadata:
    """Status and headers of a response."""
    status_code: int
    status_message: str
    headers: dict[str, str] = field(default_factory=dict)


class ParserState(Enum):
    """Header parser states."""
    AWAITING_STATUS_LINE = "AwaitingStatusLine"
    READING_HEADERS = "ReadingHeaders"
    DONE = "Done"


class HeaderParser:
    """
    Consumes header lines as they are received and builds status code,
    status message and header mapping. Interim '100 Continue' responses
    are skipped. Duplicate header names keep the last value.
    """

    def __init__(self):
        self._state = ParserState.AWAITING_STATUS_LINE
        self._status_code = 0
        self._status_message = ""
        self._headers: dict[str, str] = {}

    @property
    def state(self) -> ParserState:
        """Get current state."""
        return self._state

    @property
    def status_code(self) -> int:
        """Get status code; zero until status line is parsed."""
        return self._status_code

    @property
    def status_message(self) -> str:
        """Get status message."""
        return self._status_message

    @property
    def headers(self) -> dict[str, str]:
        """Get headers."""
        return self._headers

    def feed(self, line: Union[str, bytes]):
        """Consume one raw header line."""
        if isinstance(line, bytes):
            line = line.decode("iso-8859-1")
        line = line.rstrip()

        if self._state == ParserState.AWAITING_STATUS_LINE:
            if line:
                self._parse_status_line(line)
        elif self._state == ParserState.READING_HEADERS:
            if line:
                self._parse_header(line)
            else:
                self._state = ParserState.DONE
        elif line:
            # New response after a completed one, e.g. a redirect hop.
            self._headers = {}
            self._parse_status_line(line)

    def feed_lines(self, lines: Iterable[Union[str, bytes]]):
        """Consume each line of given lines."""
        for line in lines:
            self.feed(line)

    def _parse_status_line(self, line: str):
        """Parse status line."""
        if not line.startswith(_PROTOCOLS):
            raise HeaderParseError("Unsupported protocol", line)

        tokens = line.split()
        match = (
            _STATUS_CODE_REGEX.match(tokens[1]) if len(tokens) > 1 else None
        )
        if not match or int(match.group()) == 0:
            raise HeaderParseError(
                "Encountered a problem parsing the status code", line,
            )

        status_code = int(match.group())
        if status_code == _CONTINUE:
            log.debug("Ignoring 100 status code header line")
            self._state = ParserState.AWAITING_STATUS_LINE
            return

        self._status_code = status_code
        self._status_message = " ".join(tokens[2:])
        self._state = ParserState.READING_HEADERS

    def _parse_header(self, line: str):
        """Parse header line."""
        key, sep, value = line.partition(": ")
        if not sep:
            log.warning("Skipping malformed header line %r", line)
            return
        self._headers[key] = value

    def metadata(self) -> ResponseMetadata:
        """Get parsed response metadata."""
        return ResponseMetadata(
            self._status_code, self._status_message, dict(self._headers),
        )
