"""
ecb-sdmx: Python client for the ECB statistical data warehouse (SDMX-ML).

Public API surface:

- ``fetch_series(flow, key, ...)`` -- **main entry point**. Fetches a data
  query and returns one flat record per observation.

- ``fetch_metadata(resource, agency, id)`` and the per-resource shortcuts
  (``fetch_data_structures``, ``fetch_codelists``, ``fetch_dataflows``,
  ...) -- fetch structure metadata as ``MetadataEntry`` objects.

- ``Client`` -- handle object holding the configuration and HTTP session.
  The module-level functions use a shared default client unless one is
  passed via ``client=``.

- ``to_frame()`` / ``entries_to_frame()`` -- turn results into pandas
  DataFrames.

Example::

    import ecb_sdmx

    records = ecb_sdmx.fetch_series("EXR", "D.USD.EUR.SP00.A", last_n=5)
    df = ecb_sdmx.to_frame(records)
"""

from __future__ import annotations

import logging
from typing import Any

from ecb_sdmx.client import Client
from ecb_sdmx.config import ClientConfig, load_config, save_config
from ecb_sdmx.exceptions import (
    DataParseError,
    EcbSdmxError,
    HttpError,
    ValidationError,
)
from ecb_sdmx.frames import entries_to_frame
from ecb_sdmx.frames import records_to_frame as to_frame
from ecb_sdmx.parsers import Frequency, MetadataEntry, parse_metadata, parse_observations
from ecb_sdmx.resources import StructureResource

__all__ = [
    "Client",
    "ClientConfig",
    "DataParseError",
    "EcbSdmxError",
    "Frequency",
    "HttpError",
    "MetadataEntry",
    "StructureResource",
    "ValidationError",
    "entries_to_frame",
    "fetch_agency_schemes",
    "fetch_categorisations",
    "fetch_category_schemes",
    "fetch_codelists",
    "fetch_concept_schemes",
    "fetch_content_constraints",
    "fetch_data_structures",
    "fetch_dataflows",
    "fetch_hierarchical_codelists",
    "fetch_metadata",
    "fetch_organisation_schemes",
    "fetch_series",
    "fetch_structure_sets",
    "load_config",
    "parse_metadata",
    "parse_observations",
    "save_config",
    "to_frame",
]

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

_default_client: Client | None = None


# ---------------------------------------------------------------------------
# Private helpers
# ---------------------------------------------------------------------------

def _get_client(client: Client | None) -> Client:
    """Return *client*, or the lazily created shared default client."""
    global _default_client
    if client is not None:
        return client
    if _default_client is None:
        _default_client = Client()
    return _default_client


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def fetch_series(
    flow: str,
    key: str | None = None,
    start_period: str | None = None,
    end_period: str | None = None,
    first_n: int | None = None,
    last_n: int | None = None,
    *,
    client: Client | None = None,
) -> list[dict[str, Any]]:
    """Fetch observations for a dataflow and series key.

    Args:
        flow: Dataflow to query, e.g. ``"EXR"``.
        key: Series key, e.g. ``"D.USD.EUR.SP00.A"``. ``None`` queries all
            series of the flow.
        start_period: Start of the data. Supported formats: ``YYYY``,
            ``YYYY-S[1-2]``, ``YYYY-Q[1-4]``, ``YYYY-MM``, ``YYYY-W[01-53]``,
            ``YYYY-MM-DD``. ``None`` means no restriction.
        end_period: End of the data, same formats.
        first_n: Number of observations from the start of each series.
        last_n: Number of observations from the end of each series.
        client: Client to use instead of the shared default.

    Returns:
        One record (``dict``) per observation with a value. All records
        have the same keys: ``date, key, value, title, description``
        followed by the fields common to every returned series.

    Raises:
        ValidationError: If an argument is malformed.
        HttpError: If the service answers with a non-success status.
        DataParseError: If the response cannot be parsed.

    Examples::

        # US dollar/Euro exchange rate
        ecb_sdmx.fetch_series("EXR", "D.USD.EUR.SP00.A")
    """
    return _get_client(client).data(
        flow,
        key=key,
        start_period=start_period,
        end_period=end_period,
        first_n=first_n,
        last_n=last_n,
    )


def fetch_metadata(
    resource: StructureResource | str,
    agency: str | None = None,
    id: str | None = None,
    *,
    language: str | None = None,
    client: Client | None = None,
) -> list[MetadataEntry]:
    """Fetch ``(agency, id, name)`` entries of any structure resource.

    Args:
        resource: A ``StructureResource`` or its value (``"codelist"``, ...).
        agency: Agency to filter on (upper-cased). ``None`` for all.
        id: Artefact id to filter on (upper-cased). ``None`` for all.
        language: Language of the names, default from the client config.
        client: Client to use instead of the shared default.
    """
    return _get_client(client).metadata(resource, agency, id, language)


def fetch_agency_schemes(
    agency: str | None = None,
    id: str | None = None,
    *,
    language: str | None = None,
    client: Client | None = None,
) -> list[MetadataEntry]:
    """Fetch available agency schemes."""
    return fetch_metadata(StructureResource.AGENCY_SCHEME, agency, id,
                          language=language, client=client)


def fetch_categorisations(
    agency: str | None = None,
    id: str | None = None,
    *,
    language: str | None = None,
    client: Client | None = None,
) -> list[MetadataEntry]:
    """Fetch available categorisations."""
    return fetch_metadata(StructureResource.CATEGORISATION, agency, id,
                          language=language, client=client)


def fetch_category_schemes(
    agency: str | None = None,
    id: str | None = None,
    *,
    language: str | None = None,
    client: Client | None = None,
) -> list[MetadataEntry]:
    """Fetch available category schemes."""
    return fetch_metadata(StructureResource.CATEGORY_SCHEME, agency, id,
                          language=language, client=client)


def fetch_codelists(
    agency: str | None = None,
    id: str | None = None,
    *,
    language: str | None = None,
    client: Client | None = None,
) -> list[MetadataEntry]:
    """Fetch available code lists.

    Only the code list names are returned, not the codes they contain.

    Examples::

        ecb_sdmx.fetch_codelists(id="CL_EXR_TYPE")
    """
    return fetch_metadata(StructureResource.CODELIST, agency, id,
                          language=language, client=client)


def fetch_concept_schemes(
    agency: str | None = None,
    id: str | None = None,
    *,
    language: str | None = None,
    client: Client | None = None,
) -> list[MetadataEntry]:
    """Fetch available concept schemes."""
    return fetch_metadata(StructureResource.CONCEPT_SCHEME, agency, id,
                          language=language, client=client)


def fetch_content_constraints(
    agency: str | None = None,
    id: str | None = None,
    *,
    language: str | None = None,
    client: Client | None = None,
) -> list[MetadataEntry]:
    """Fetch available content constraints."""
    return fetch_metadata(StructureResource.CONTENT_CONSTRAINT, agency, id,
                          language=language, client=client)


def fetch_dataflows(
    agency: str | None = None,
    id: str | None = None,
    *,
    language: str | None = None,
    client: Client | None = None,
) -> list[MetadataEntry]:
    """Fetch available dataflows (the ``flow`` ids accepted by ``fetch_series``)."""
    return fetch_metadata(StructureResource.DATAFLOW, agency, id,
                          language=language, client=client)


def fetch_data_structures(
    agency: str | None = None,
    id: str | None = None,
    *,
    language: str | None = None,
    client: Client | None = None,
) -> list[MetadataEntry]:
    """Fetch available data structures.

    Examples::

        ecb_sdmx.fetch_data_structures()
        # or filter by id
        ecb_sdmx.fetch_data_structures(id="ECB_BCS1")
    """
    return fetch_metadata(StructureResource.DATA_STRUCTURE, agency, id,
                          language=language, client=client)


def fetch_hierarchical_codelists(
    agency: str | None = None,
    id: str | None = None,
    *,
    language: str | None = None,
    client: Client | None = None,
) -> list[MetadataEntry]:
    """Fetch available hierarchical code lists."""
    return fetch_metadata(StructureResource.HIERARCHICAL_CODELIST, agency, id,
                          language=language, client=client)


def fetch_organisation_schemes(
    agency: str | None = None,
    id: str | None = None,
    *,
    language: str | None = None,
    client: Client | None = None,
) -> list[MetadataEntry]:
    """Fetch available organisation schemes."""
    return fetch_metadata(StructureResource.ORGANISATION_SCHEME, agency, id,
                          language=language, client=client)


def fetch_structure_sets(
    agency: str | None = None,
    id: str | None = None,
    *,
    language: str | None = None,
    client: Client | None = None,
) -> list[MetadataEntry]:
    """Fetch available structure sets."""
    return fetch_metadata(StructureResource.STRUCTURE_SET, agency, id,
                          language=language, client=client)
