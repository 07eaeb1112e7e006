"""
Shared SDMX-ML helpers for the ecb-sdmx parsers.

Both parsers work on lxml trees and need the same few things:
- the SDMX-ML 2.1 namespace prefixes used in XPath expressions;
- a hardened way to turn response bytes into a tree;
- reading ``<Value id=".." value=".."/>`` blocks (series keys and
  attribute blocks in generic data messages) into ordered mappings.

Parsers accept a parsed element, an ``ElementTree``, or raw
``bytes``/``str``; ``root_of()`` normalizes all three.
"""

from __future__ import annotations

import logging
from typing import Union

from lxml import etree

from ecb_sdmx.exceptions import DataParseError

logger = logging.getLogger(__name__)

# SDMX-ML 2.1 prefixes as used by the ECB service
NAMESPACES: dict[str, str] = {
    "mes": "http://www.sdmx.org/resources/sdmxml/schemas/v2_1/message",
    "generic": "http://www.sdmx.org/resources/sdmxml/schemas/v2_1/data/generic",
    "str": "http://www.sdmx.org/resources/sdmxml/schemas/v2_1/structure",
    "com": "http://www.sdmx.org/resources/sdmxml/schemas/v2_1/common",
}

Document = Union[etree._Element, etree._ElementTree, bytes, str]


def _make_parser() -> etree.XMLParser:
    # Responses come from the network: never resolve entities or fetch DTDs
    return etree.XMLParser(
        resolve_entities=False,
        no_network=True,
        remove_blank_text=True,
        huge_tree=True,
    )


def load_document(content: bytes | str) -> etree._Element:
    """Parse an SDMX-ML response body into an lxml element.

    Args:
        content: Raw response body. ``str`` input is encoded as UTF-8
            first, since lxml refuses unicode strings that carry an
            encoding declaration.

    Returns:
        The root element of the document.

    Raises:
        DataParseError: If the content is empty or not well-formed XML.
    """
    if isinstance(content, str):
        content = content.encode("utf-8")
    if not content or not content.strip():
        raise DataParseError("Empty response body, expected an SDMX-ML document")
    try:
        return etree.fromstring(content, parser=_make_parser())
    except etree.XMLSyntaxError as exc:
        raise DataParseError(f"Response is not well-formed XML: {exc}") from exc


def root_of(document: Document) -> etree._Element:
    """Return the root element of a parsed or raw document."""
    if isinstance(document, (bytes, str)):
        return load_document(document)
    if isinstance(document, etree._ElementTree):
        return document.getroot()
    if isinstance(document, etree._Element):
        return document
    raise TypeError(
        f"Expected an lxml element, ElementTree, bytes or str, got {type(document).__name__}"
    )


def read_id_values(
    block: etree._Element | None,
    rename: dict[str, str] | None = None,
    context: str = "",
) -> dict[str, str]:
    """Read the ``id``/``value`` attribute pairs of a block's children.

    The ``id`` is lower-cased and used as field name, optionally renamed
    via *rename*. Children keep document order. A missing block yields
    an empty mapping.

    Args:
        block: A ``generic:SeriesKey`` or ``generic:Attributes`` element.
        rename: Field renames applied after lower-casing.
        context: Text naming the enclosing element, used in error messages.

    Raises:
        DataParseError: If a child lacks the ``id`` or ``value`` attribute.
    """
    fields: dict[str, str] = {}
    if block is None:
        return fields
    rename = rename or {}
    for child in block:
        if not isinstance(child.tag, str):
            # comments and processing instructions
            continue
        field_id = child.get("id")
        value = child.get("value")
        if field_id is None or value is None:
            raise DataParseError(
                f"{etree.QName(child).localname} element without id/value "
                f"attributes in {etree.QName(block).localname}{context}"
            )
        name = field_id.lower()
        fields[rename.get(name, name)] = value
    return fields
