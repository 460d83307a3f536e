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

"""Time formatter for the Date header of signed requests."""

from __future__ import absolute_import, annotations

from datetime import datetime

_WEEK_DAYS = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
_MONTHS = ["Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep",
           "Oct", "Nov", "Dec"]


def localnow() -> datetime:
    """Timezone-aware local time truncated to whole seconds."""
    return datetime.now().astimezone().replace(microsecond=0)


def _to_offset(value: datetime) -> str:
    """Format UTC offset of value as +HHMM/-HHMM."""
    offset = value.utcoffset()
    if offset is None:
        return "+0000"
    minutes = int(offset.total_seconds()) // 60
    sign = "-" if minutes < 0 else "+"
    hours, minutes = divmod(abs(minutes), 60)
    return f"{sign}{hours:02d}{minutes:02d}"


def to_date_header(value: datetime) -> str:
    """
    Format datetime into RFC-1123 like string keeping its own UTC offset,
    e.g. 'Tue, 27 Mar 2007 19:36:42 +0000'. Naive values are taken as
    UTC.
    """
    weekday = _WEEK_DAYS[value.weekday()]
    day = value.strftime(" %d ")
    month = _MONTHS[value.month - 1]
    suffix = value.strftime(" %Y %H:%M:%S ")
    return f"{weekday},{day}{month}{suffix}{_to_offset(value)}"
