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

"""XML encoding and decoding functions."""

from __future__ import annotations

import io
import logging
import re
from typing import ClassVar, Iterable, Optional, TypeVar
from xml.etree import ElementTree as ET

from typing_extensions import Protocol

from .error import InvalidXmlError

log = logging.getLogger(__name__)

_UINT_REGEX = re.compile(r"^\s*\+?(\d+)")


def Element(  # pylint: disable=invalid-name
    tag: str,
    namespace: Optional[str] = None,
) -> ET.Element:
    """Create ElementTree.Element with tag and optional namespace."""
    return ET.Element(tag, {"xmlns": namespace} if namespace else {})


def SubElement(  # pylint: disable=invalid-name
    parent: ET.Element, tag: str, text: Optional[str] = None
) -> ET.Element:
    """Create ElementTree.SubElement on parent with tag and text."""
    element = ET.SubElement(parent, tag)
    if text is not None:
        element.text = text
    return element


def local_name(tag: str) -> str:
    """Strip '{namespace}' prefix of element or attribute name."""
    return tag.split("}", 1)[1] if tag.startswith("{") else tag


def _namespaced(element: ET.Element, name: str) -> tuple[str, dict[str, str]]:
    """Namespace arguments for find and findall."""
    def _get_namespace() -> str:
        """Exact namespace if found."""
        start = element.tag.find("{")
        if start < 0:
            return ""
        start += 1
        end = element.tag.find("}")
        if end < 0:
            return ""
        return element.tag[start:end]

    namespace = _get_namespace()
    if namespace:
        name = "/".join(f"ns:{token}" for token in name.split("/"))
        return name, {"ns": namespace}
    return name, {}


def findall(element: ET.Element, name: str) -> list[ET.Element]:
    """Namespace aware ElementTree.Element.findall()."""
    name, namespaces = _namespaced(element, name)
    return element.findall(name, namespaces=namespaces)


def find(element: ET.Element, name: str) -> Optional[ET.Element]:
    """Namespace aware ElementTree.Element.find()."""
    name, namespaces = _namespaced(element, name)
    return element.find(name, namespaces=namespaces)


def findtext(element: ET.Element, name: str) -> Optional[str]:
    """
    Namespace aware ElementTree.Element.findtext() returning None for
    missing element as well as for element without text.
    """
    elem = find(element, name)
    return None if elem is None else (elem.text or None)


def findattr(element: ET.Element, name: str) -> Optional[str]:
    """Get attribute value by its local name; None if absent or empty."""
    for key, value in element.attrib.items():
        if local_name(key) == name:
            return value or None
    return None


def parse_uint(text: Optional[str]) -> int:
    """
    Parse leading decimal digits of text as unsigned integer. Text
    without leading digits yields zero.
    """
    match = _UINT_REGEX.match(text or "")
    return int(match.group(1)) if match else 0


def skip_unknown(
        element: ET.Element,
        elements: Iterable[str] = (),
        attributes: Iterable[str] = (),
):
    """Log child elements and attributes not listed as known."""
    known_elements = set(elements)
    known_attributes = set(attributes)
    for key in element.attrib:
        if local_name(key) not in known_attributes:
            log.debug("Unknown attribute: (%s)", local_name(key))
    for child in element:
        if not isinstance(child.tag, str):
            continue
        if local_name(child.tag) not in known_elements:
            log.debug("Unknown element: (%s)", local_name(child.tag))


UnmarshalT = TypeVar("UnmarshalT", bound="UnmarshalProtocol")


class UnmarshalProtocol(Protocol):
    """typing stub for class with `ROOT_TAG` and `fromxml` method"""

    ROOT_TAG: ClassVar[str]

    @classmethod
    def fromxml(cls: type[UnmarshalT], element: ET.Element) -> UnmarshalT:
        """Create object by values from XML element."""


def unmarshal(cls: type[UnmarshalT], data: bytes) -> UnmarshalT:
    """
    Unmarshal given XML document to an object of passed class. The root
    element of the document must be class's `ROOT_TAG`.
    """
    try:
        element = ET.fromstring(data)
    except ET.ParseError as exc:
        raise InvalidXmlError(
            "Failed to parse response document", data,
        ) from exc

    if local_name(element.tag) != cls.ROOT_TAG:
        raise InvalidXmlError(
            f"Expected the root element to be '{cls.ROOT_TAG}'", data,
        )
    return cls.fromxml(element)


def getbytes(element: ET.Element) -> bytes:
    """Convert ElementTree.Element to bytes."""
    with io.BytesIO() as data:
        ET.ElementTree(element).write(
            data,
            encoding=None,
            xml_declaration=False,
        )
        return data.getvalue()


class MarshalT(Protocol):
    """typing stub for class with `toxml` method"""

    def toxml(self, element: Optional[ET.Element]) -> ET.Element:
        """
        Convert python object to ElementTree.Element.
        Code discipline:
        1. Do not create its own `SubElement` if needed.
        2. Always return passed `Element`.
        3. For root, `element` argument is always `None` hence
           root `Element` must be created.
        """


def marshal(obj: MarshalT) -> bytes:
    """Get XML data as bytes of ElementTree.Element."""
    return getbytes(obj.toxml(None))
