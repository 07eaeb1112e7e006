"""
Structure metadata parser for SDMX-ML structure messages.

Structure messages list maintainable artefacts (data structures, code
lists, dataflows, ...), each with an ``id``, an ``agencyID`` and one
localized ``com:Name`` per language:

  <str:Codelist agencyID="ECB" id="CL_EXR_TYPE" version="1.0">
    <com:Name xml:lang="en">Exchange rate type code list</com:Name>
    <str:Code id="BRC0"> ... </str:Code>
  </str:Codelist>

The caller picks the element type with an XPath selector (see
``ecb_sdmx.resources.StructureResource``). Only names in the requested
language are kept; an element without such a name yields no entry.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from lxml import etree

from ecb_sdmx.exceptions import DataParseError
from ecb_sdmx.parsers.base import NAMESPACES, Document, root_of

logger = logging.getLogger(__name__)

# Direct children only: nested items (codes, concepts) carry their own names
_NAME_PATH = etree.XPath("./com:Name[@xml:lang=$lang]", namespaces=NAMESPACES)


@dataclass(frozen=True)
class MetadataEntry:
    """One localized name of a structure artefact."""
    agency: str | None
    id: str
    name: str


def parse_metadata(
    document: Document,
    selector: str,
    language: str = "en",
) -> list[MetadataEntry]:
    """Extract ``(agency, id, name)`` entries from a structure message.

    Args:
        document: Parsed structure message (or raw bytes/str).
        selector: XPath selecting the artefact elements, using the
            ``str``/``com``/``mes`` prefixes (e.g. ``//str:Codelist``).
        language: ``xml:lang`` code of the names to keep.

    Returns:
        One entry per (element, matching name) pair, in document order.
        Duplicate same-language names are all returned.

    Raises:
        DataParseError: If *selector* is not a valid XPath expression or a
            selected element has no ``id``.
    """
    root = root_of(document)
    try:
        elements = root.xpath(selector, namespaces=NAMESPACES)
    except etree.XPathError as exc:
        raise DataParseError(f"Invalid element selector {selector!r}: {exc}") from exc
    if not isinstance(elements, list):
        raise DataParseError(
            f"Selector {selector!r} must select elements, got {type(elements).__name__}"
        )

    entries: list[MetadataEntry] = []
    dropped = 0
    for element in elements:
        if not isinstance(element, etree._Element):
            raise DataParseError(
                f"Selector {selector!r} must select elements, got {type(element).__name__}"
            )
        element_id = element.get("id")
        if element_id is None:
            raise DataParseError(
                f"{etree.QName(element).localname} element without id "
                f"(line {element.sourceline})"
            )
        agency = element.get("agencyID")
        names = _NAME_PATH(element, lang=language)
        if not names:
            dropped += 1
            continue
        for name in names:
            entries.append(
                MetadataEntry(agency=agency, id=element_id, name=name.text or "")
            )

    logger.info(
        "Parsed %d entries from %d %s elements (%d without a '%s' name)",
        len(entries),
        len(elements),
        selector,
        dropped,
        language,
    )
    return entries
