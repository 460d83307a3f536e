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
Response of GetService and GetBucket API, and request/response manifests
of bulk API.
"""

from __future__ import absolute_import, annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional, Type, TypeVar
from xml.etree import ElementTree as ET

from .xml import (Element, SubElement, find, findall, findattr, findtext,
                  parse_uint, skip_unknown)

O = TypeVar("O", bound="Owner")


@dataclass(frozen=True)
class Owner:
    """Owner information."""
    id: Optional[str] = None
    display_name: Optional[str] = None

    @classmethod
    def fromxml(cls: Type[O], element: ET.Element) -> O:
        """Create new object with values from XML element."""
        skip_unknown(element, ("DisplayName", "ID"))
        return cls(
            id=findtext(element, "ID"),
            display_name=findtext(element, "DisplayName"),
        )


def _find_owner(element: ET.Element) -> Optional[Owner]:
    """Decode nested Owner element if present."""
    elem = find(element, "Owner")
    return None if elem is None else Owner.fromxml(elem)


@dataclass(frozen=True)
class Bucket:
    """Bucket information."""
    name: Optional[str]
    creation_date: Optional[str] = None


A = TypeVar("A", bound="ListAllMyBucketsResult")


@dataclass(frozen=True)
class ListAllMyBucketsResult:
    """GetService API result."""
    ROOT_TAG = "ListAllMyBucketsResult"

    owner: Optional[Owner]
    buckets: list[Bucket]

    @classmethod
    def fromxml(cls: Type[A], element: ET.Element) -> A:
        """Create new object with values from XML element."""
        skip_unknown(element, ("Buckets", "Owner"))
        buckets = []
        for elem in findall(element, "Buckets"):
            skip_unknown(elem, ("Bucket",))
            for bucket in findall(elem, "Bucket"):
                skip_unknown(bucket, ("CreationDate", "Name"))
                buckets.append(
                    Bucket(
                        findtext(bucket, "Name"),
                        findtext(bucket, "CreationDate"),
                    ),
                )
        return cls(_find_owner(element), buckets)


B = TypeVar("B", bound="Object")


@dataclass(frozen=True)
class Object:
    """Object information of a bucket listing."""
    name: Optional[str]
    etag: Optional[str] = None
    last_modified: Optional[str] = None
    storage_class: Optional[str] = None
    size: Optional[int] = None
    owner: Optional[Owner] = None

    @classmethod
    def fromxml(cls: Type[B], element: ET.Element) -> B:
        """Create new object with values from XML element."""
        skip_unknown(
            element,
            ("Key", "ETag", "LastModified", "StorageClass", "Size", "Owner"),
        )
        size = find(element, "Size")
        return cls(
            name=findtext(element, "Key"),
            etag=findtext(element, "ETag"),
            last_modified=findtext(element, "LastModified"),
            storage_class=findtext(element, "StorageClass"),
            size=None if size is None else parse_uint(size.text),
            owner=_find_owner(element),
        )


C = TypeVar("C", bound="ListBucketResult")


@dataclass(frozen=True)
class ListBucketResult:  # pylint: disable=too-many-instance-attributes
    """GetBucket API result."""
    ROOT_TAG = "ListBucketResult"

    name: Optional[str]
    objects: list[Object] = field(default_factory=list)
    creation_date: Optional[str] = None
    marker: Optional[str] = None
    next_marker: Optional[str] = None
    prefix: Optional[str] = None
    delimiter: Optional[str] = None
    max_keys: Optional[int] = None
    is_truncated: bool = False

    @classmethod
    def fromxml(cls: Type[C], element: ET.Element) -> C:
        """Create new object with values from XML element."""
        skip_unknown(
            element,
            (
                "Contents", "CreationDate", "IsTruncated", "Marker",
                "MaxKeys", "Name", "Delimiter", "NextMarker", "Prefix",
            ),
        )
        max_keys = findtext(element, "MaxKeys")
        return cls(
            name=findtext(element, "Name"),
            objects=[
                Object.fromxml(elem) for elem in findall(element, "Contents")
            ],
            creation_date=findtext(element, "CreationDate"),
            marker=findtext(element, "Marker"),
            next_marker=findtext(element, "NextMarker"),
            prefix=findtext(element, "Prefix"),
            delimiter=findtext(element, "Delimiter"),
            max_keys=None if max_keys is None else parse_uint(max_keys),
            is_truncated=findtext(element, "IsTruncated") == "true",
        )


D = TypeVar("D", bound="BulkObject")


@dataclass(frozen=True)
class BulkObject:
    """Object name and size of a bulk manifest."""
    name: Optional[str]
    size: int = 0

    @classmethod
    def fromxml(cls: Type[D], element: ET.Element) -> D:
        """Create new object with values from XML element."""
        skip_unknown(element, attributes=("Name", "Size"))
        return cls(
            findattr(element, "Name"),
            parse_uint(findattr(element, "Size")),
        )

    def toxml(self, element: Optional[ET.Element]) -> ET.Element:
        """Convert to XML."""
        if element is None:
            raise ValueError("element must be provided")
        element = SubElement(element, "Object")
        element.set("Name", self.name or "")
        element.set("Size", str(self.size))
        return element


E = TypeVar("E", bound="BulkObjectList")


@dataclass(frozen=True)
class BulkObjectList:
    """
    Ordered list of bulk objects. Server assigned `server_id` and
    `chunk_number` are present only when the list is a chunk of a job
    manifest returned by the server.
    """
    objects: list[BulkObject] = field(default_factory=list)
    server_id: Optional[str] = None
    chunk_number: Optional[int] = None

    def __iter__(self) -> Iterator[BulkObject]:
        return iter(self.objects)

    def __len__(self) -> int:
        return len(self.objects)

    @classmethod
    def fromxml(cls: Type[E], element: ET.Element) -> E:
        """Create new object with values from XML element."""
        skip_unknown(element, ("Object",), ("ServerId", "ChunkNumber"))
        chunk_number = findattr(element, "ChunkNumber")
        return cls(
            objects=[
                BulkObject.fromxml(elem) for elem in findall(element, "Object")
            ],
            server_id=findattr(element, "ServerId"),
            chunk_number=(
                None if chunk_number is None else parse_uint(chunk_number)
            ),
        )

    def toxml(self, element: Optional[ET.Element]) -> ET.Element:
        """Convert to XML manifest of a bulk request."""
        element = Element(MasterObjectList.ROOT_TAG)
        objects = SubElement(element, "Objects")
        for obj in self.objects:
            obj.toxml(objects)
        return element


F = TypeVar("F", bound="MasterObjectList")


@dataclass(frozen=True)
class MasterObjectList:
    """Bulk job manifest; each chunk is a list of objects."""
    ROOT_TAG = "MasterObjectList"

    job_id: Optional[str]
    chunks: list[BulkObjectList] = field(default_factory=list)

    @property
    def object_count(self) -> int:
        """Total count of objects across all chunks."""
        return sum(len(chunk) for chunk in self.chunks)

    @classmethod
    def fromxml(cls: Type[F], element: ET.Element) -> F:
        """Create new object with values from XML element."""
        skip_unknown(element, ("Objects",), ("JobId",))
        return cls(
            job_id=findattr(element, "JobId"),
            chunks=[
                BulkObjectList.fromxml(elem)
                for elem in findall(element, "Objects")
            ],
        )
