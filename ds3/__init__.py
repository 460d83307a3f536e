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
ds3 - Python SDK for S3 compatible bulk object storage

    >>> from ds3 import Client, Credentials
    >>> from ds3.request import get_service_request
    >>> client = Client(
    ...     "http://ds3.example.com:8080",
    ...     Credentials("ACCESS-ID", "SECRET-KEY"),
    ... )
    >>> result = client.get_service(get_service_request())
    >>> for bucket in result.buckets:
    ...     print(bucket.name, bucket.creation_date)

:copyright: (C) 2026 DS3 SDK Authors.
:license: Apache 2.0, see LICENSE for more details.
"""

__title__ = "ds3-sdk"
__author__ = "DS3 SDK Authors"
__version__ = "0.3.0"
__license__ = "Apache 2.0"
__copyright__ = "Copyright 2026 DS3 SDK Authors"

# pylint: disable=unused-import,useless-import-alias,wrong-import-position
from .api import Client as Client
from .credentials import Credentials as Credentials
from .error import BadStatusCodeError as BadStatusCodeError
from .error import Ds3Error as Ds3Error
from .error import ErrorCode as ErrorCode
from .error import FailedRequestError as FailedRequestError
from .error import HeaderParseError as HeaderParseError
from .error import InvalidXmlError as InvalidXmlError
from .error import MissingArgsError as MissingArgsError
from .error import TransportHandleError as TransportHandleError
from .transport import cleanup as cleanup
