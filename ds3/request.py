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
Request definitions and factory functions of DS3 operations. Building a
request performs no network activity and no signing.
"""

from __future__ import absolute_import, annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .datatypes import BulkObjectList
from .helpers import check_non_empty_string


class HttpVerb(Enum):
    """HTTP verbs."""
    GET = "GET"
    PUT = "PUT"
    POST = "POST"
    DELETE = "DELETE"
    HEAD = "HEAD"


@dataclass(frozen=True)
class Request:
    """
    One outbound operation. Headers and query parameters keep insertion
    order so that wire output is deterministic.
    """
    verb: HttpVerb
    path: str
    headers: dict[str, str] = field(default_factory=dict)
    query_params: dict[str, str] = field(default_factory=dict)
    length: int = 0
    object_list: Optional[BulkObjectList] = field(default=None, repr=False)

    def __str__(self) -> str:
        return f"Verb: {self.verb.value}\nPath: {self.path}"


def _bucket_path(bucket_name: str) -> str:
    check_non_empty_string(bucket_name)
    return f"/{bucket_name}"


def _object_path(bucket_name: str, object_name: str) -> str:
    check_non_empty_string(object_name)
    return f"{_bucket_path(bucket_name)}/{object_name}"


def get_service_request() -> Request:
    """Request listing all buckets of the user."""
    return Request(HttpVerb.GET, "/")


def get_bucket_request(
        bucket_name: str,
        prefix: Optional[str] = None,
        delimiter: Optional[str] = None,
        marker: Optional[str] = None,
        max_keys: Optional[int] = None,
) -> Request:
    """Request listing objects of a bucket."""
    query_params = {}
    if prefix:
        query_params["prefix"] = prefix
    if delimiter:
        query_params["delimiter"] = delimiter
    if marker:
        query_params["marker"] = marker
    if max_keys is not None:
        query_params["max-keys"] = str(max_keys)
    return Request(
        HttpVerb.GET, _bucket_path(bucket_name), query_params=query_params,
    )


def put_bucket_request(bucket_name: str) -> Request:
    """Request creating a bucket."""
    return Request(HttpVerb.PUT, _bucket_path(bucket_name))


def delete_bucket_request(bucket_name: str) -> Request:
    """Request deleting a bucket."""
    return Request(HttpVerb.DELETE, _bucket_path(bucket_name))


def head_bucket_request(bucket_name: str) -> Request:
    """Request checking existence of a bucket."""
    return Request(HttpVerb.HEAD, _bucket_path(bucket_name))


def get_object_request(bucket_name: str, object_name: str) -> Request:
    """Request downloading an object."""
    return Request(HttpVerb.GET, _object_path(bucket_name, object_name))


def put_object_request(
        bucket_name: str,
        object_name: str,
        length: int,
) -> Request:
    """Request uploading an object of given length."""
    if length < 0:
        raise ValueError(f"invalid object length {length}")
    return Request(
        HttpVerb.PUT, _object_path(bucket_name, object_name), length=length,
    )


def delete_object_request(bucket_name: str, object_name: str) -> Request:
    """Request deleting an object."""
    return Request(HttpVerb.DELETE, _object_path(bucket_name, object_name))


def head_object_request(bucket_name: str, object_name: str) -> Request:
    """Request metadata of an object."""
    return Request(HttpVerb.HEAD, _object_path(bucket_name, object_name))


def _bulk_request(
        bucket_name: str,
        object_list: BulkObjectList,
        operation: str,
) -> Request:
    check_non_empty_string(bucket_name)
    return Request(
        HttpVerb.PUT,
        f"/_rest_/bucket/{bucket_name}",
        query_params={"operation": operation},
        object_list=object_list,
    )


def get_bulk_request(
        bucket_name: str,
        object_list: BulkObjectList,
) -> Request:
    """Request starting a bulk GET job of given objects."""
    return _bulk_request(bucket_name, object_list, "start_bulk_get")


def put_bulk_request(
        bucket_name: str,
        object_list: BulkObjectList,
) -> Request:
    """Request starting a bulk PUT job of given objects."""
    return _bulk_request(bucket_name, object_list, "start_bulk_put")
