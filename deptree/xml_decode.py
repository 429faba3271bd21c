"""Decoding of raw manifest text into nested dict/list structures.

XML is decoded into the shape produced by the common ``xml2js`` convention,
which is what the tree builders walk:

* the document is ``{root_tag: root_value}``
* every child element is appended to a list stored under its tag name
* attributes are stored in a dict under ``"$"``
* text of an element that also has attributes or children is stored under ``"_"``
* an element with text only decodes to that text, an empty one to ``""``

Namespaces are stripped from tag and attribute names, and text is trimmed.
"""

import asyncio
import json
import logging
from typing import Any
from xml.etree.ElementTree import Element, ParseError

from defusedxml import ElementTree
from defusedxml.common import DefusedXmlException

from .errors import InvalidUserInputError

logger = logging.getLogger(__name__)

ATTRS_KEY = "$"
TEXT_KEY = "_"


def _local_name(tag: str) -> str:
    if tag.startswith("{"):
        return tag.split("}", 1)[1]
    return tag


def _element_value(element: Element) -> Any:
    text = (element.text or "") + "".join(child.tail or "" for child in element)
    text = text.strip()

    value: dict[str, Any] = {}
    if element.attrib:
        value[ATTRS_KEY] = {
            _local_name(key): attr for key, attr in element.attrib.items()
        }
    for child in element:
        value.setdefault(_local_name(child.tag), []).append(_element_value(child))

    if not value:
        return text
    if text:
        value[TEXT_KEY] = text
    return value


def decode_xml(text: str) -> dict:
    """Decode XML text synchronously.

    Raises:
        InvalidUserInputError: If the text is not well-formed XML or uses
            constructs rejected by defusedxml (entity expansion, DTDs with
            external references).
    """
    try:
        root = ElementTree.fromstring(text.lstrip())
    except (ParseError, DefusedXmlException) as e:
        logger.debug(f"XML decoding failed: {e}")
        raise InvalidUserInputError("xml file parsing failed") from e
    return {_local_name(root.tag): _element_value(root)}


async def parse_xml_file(text: str) -> dict:
    """Decode XML manifest text without blocking the event loop."""
    return await asyncio.to_thread(decode_xml, text)


def parse_json_file(text: str) -> dict:
    """Decode JSON manifest text.

    Raises:
        InvalidUserInputError: If the text is not valid JSON or not an object.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise InvalidUserInputError("json file parsing failed") from e
    if not isinstance(data, dict):
        raise InvalidUserInputError("json manifest must be an object")
    return data


def as_list(value: Any) -> list:
    """Return a decoded node as a list, treating a missing node as empty."""
    if value is None:
        return []
    if isinstance(value, list):
        return value
    return [value]


def text_value(value: Any) -> str | None:
    """Reduce a decoded node to its plain string value.

    A list yields its first element, an attribute-bearing element yields its
    text content.
    """
    if isinstance(value, list):
        return text_value(value[0]) if value else None
    if isinstance(value, dict):
        return value.get(TEXT_KEY)
    if value is None:
        return None
    return str(value)


def attributes(node: Any) -> dict[str, str]:
    """Return the attribute dict of a decoded element, or an empty dict."""
    if isinstance(node, dict):
        attrs = node.get(ATTRS_KEY)
        if isinstance(attrs, dict):
            return attrs
    return {}
