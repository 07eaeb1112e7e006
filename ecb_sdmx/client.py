"""
Client handle for ecb-sdmx.

``Client`` is the Resource Fetcher: it owns a ``requests.Session`` set up
with the library's user agent, turns a resource path plus query
parameters into a GET request, and hands the parsed XML tree to the
parsers. It also exposes one method per supported query so the whole
fetch -> parse sequence is available from a single object.

Design:
- **Handle pattern**: configuration and the HTTP session are captured
  once; the module-level functions in ``ecb_sdmx`` delegate to a shared
  default client.
- **No retries**: a non-2xx answer becomes ``HttpError`` carrying the
  response body and the documentation pointer; retry policy is the
  caller's.
- Parsing is delegated to ``ecb_sdmx.parsers`` and never performs I/O.
"""

from __future__ import annotations

import logging
from typing import Any

import requests
from lxml import etree

from ecb_sdmx.config import ClientConfig
from ecb_sdmx.exceptions import HttpError, ValidationError
from ecb_sdmx.parsers.base import load_document
from ecb_sdmx.parsers.metadata import MetadataEntry, parse_metadata
from ecb_sdmx.parsers.observations import parse_observations
from ecb_sdmx.resources import StructureResource, data_path, structure_path
from ecb_sdmx.validation import validate_metadata_query, validate_series_query

logger = logging.getLogger(__name__)


class Client:
    """Handle object for the ECB SDMX web service.

    Attributes:
        config: The ``ClientConfig`` in use.
        session: The underlying ``requests.Session`` (or any object with a
            compatible ``get()``).
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self.config = config or ClientConfig()
        self.session = session if session is not None else requests.Session()
        self.session.headers.update({"User-Agent": self.config.user_agent})

    def __repr__(self) -> str:
        return f"Client(base_url={self.config.base_url!r})"

    def __enter__(self) -> Client:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the HTTP session."""
        self.session.close()

    # -- Resource Fetcher ---------------------------------------------------

    def url_for(self, resource_path: str) -> str:
        """Absolute URL of a resource path."""
        return self.config.base_url + resource_path.lstrip("/")

    def fetch(self, resource_path: str, **params: Any) -> etree._Element:
        """GET a resource and return the parsed XML document.

        Args:
            resource_path: Path below the service root, e.g.
                ``data/EXR/D.USD.EUR.SP00.A``.
            **params: Query parameters; ``None`` values are omitted.

        Returns:
            Root element of the response document.

        Raises:
            HttpError: On a non-2xx status or when no response was received.
            DataParseError: If the body is not well-formed XML.
        """
        url = self.url_for(resource_path)
        query = {name: value for name, value in params.items() if value is not None}
        logger.info("GET %s params=%s", url, query)

        try:
            response = self.session.get(url, params=query, timeout=self.config.timeout)
        except requests.RequestException as exc:
            raise HttpError(None, str(exc), self.config.docs_url) from exc

        if not 200 <= response.status_code < 300:
            logger.debug("GET %s failed with status %d", url, response.status_code)
            raise HttpError(response.status_code, response.text, self.config.docs_url)

        logger.debug("GET %s -> %d (%d bytes)", url, response.status_code, len(response.content))
        return load_document(response.content)

    # -- Data ---------------------------------------------------------------

    def data(
        self,
        flow: str,
        key: str | None = None,
        start_period: str | None = None,
        end_period: str | None = None,
        first_n: int | None = None,
        last_n: int | None = None,
    ) -> list[dict[str, Any]]:
        """Fetch observations of a dataflow as flat records.

        Args:
            flow: Dataflow id, e.g. ``EXR``.
            key: Series key, e.g. ``D.USD.EUR.SP00.A``. ``None`` fetches
                all series of the flow.
            start_period: Earliest period, in the format of the series'
                frequency (``2019``, ``2019-S1``, ``2019-Q1``, ``2019-01``,
                ``2019-W01`` or ``2019-01-01``).
            end_period: Latest period, same formats.
            first_n: Only the first *n* observations of each series.
            last_n: Only the last *n* observations of each series.

        Returns:
            One record per observation, see
            ``ecb_sdmx.parsers.observations.parse_observations``.

        Raises:
            ValidationError: If an argument is malformed.
            HttpError: If the service rejects the request.
            DataParseError: If the response has an unexpected shape.
        """
        query = validate_series_query(
            flow=flow,
            key=key,
            start_period=start_period,
            end_period=end_period,
            first_n=first_n,
            last_n=last_n,
        )
        document = self.fetch(data_path(query.flow, query.key), **query.query_params())
        return parse_observations(document)

    # -- Structure metadata -------------------------------------------------

    def metadata(
        self,
        resource: StructureResource | str,
        agency: str | None = None,
        id: str | None = None,
        language: str | None = None,
    ) -> list[MetadataEntry]:
        """Fetch ``(agency, id, name)`` entries of a structure resource.

        Args:
            resource: Resource type, as enum member or its string value
                (``"codelist"``, ``"dataflow"``, ...).
            agency: Maintenance agency, e.g. ``ECB``. ``None`` for all.
            id: Artefact id. ``None`` for all.
            language: Language of the names; defaults to
                ``config.language``.

        Raises:
            ValidationError: If an argument is malformed.
            HttpError: If the service rejects the request.
            DataParseError: If the response has an unexpected shape.
        """
        try:
            resource = StructureResource(resource)
        except ValueError as exc:
            supported = sorted(r.value for r in StructureResource)
            raise ValidationError(
                f"Unsupported structure resource {resource!r}. Supported: {supported}"
            ) from exc
        query = validate_metadata_query(agency=agency, id=id)
        document = self.fetch(structure_path(resource, query.agency, query.id))
        return parse_metadata(document, resource.selector, language or self.config.language)

    def agency_schemes(self, agency: str | None = None, id: str | None = None,
                       language: str | None = None) -> list[MetadataEntry]:
        return self.metadata(StructureResource.AGENCY_SCHEME, agency, id, language)

    def categorisations(self, agency: str | None = None, id: str | None = None,
                        language: str | None = None) -> list[MetadataEntry]:
        return self.metadata(StructureResource.CATEGORISATION, agency, id, language)

    def category_schemes(self, agency: str | None = None, id: str | None = None,
                         language: str | None = None) -> list[MetadataEntry]:
        return self.metadata(StructureResource.CATEGORY_SCHEME, agency, id, language)

    def codelists(self, agency: str | None = None, id: str | None = None,
                  language: str | None = None) -> list[MetadataEntry]:
        return self.metadata(StructureResource.CODELIST, agency, id, language)

    def concept_schemes(self, agency: str | None = None, id: str | None = None,
                        language: str | None = None) -> list[MetadataEntry]:
        return self.metadata(StructureResource.CONCEPT_SCHEME, agency, id, language)

    def content_constraints(self, agency: str | None = None, id: str | None = None,
                            language: str | None = None) -> list[MetadataEntry]:
        return self.metadata(StructureResource.CONTENT_CONSTRAINT, agency, id, language)

    def dataflows(self, agency: str | None = None, id: str | None = None,
                  language: str | None = None) -> list[MetadataEntry]:
        return self.metadata(StructureResource.DATAFLOW, agency, id, language)

    def data_structures(self, agency: str | None = None, id: str | None = None,
                        language: str | None = None) -> list[MetadataEntry]:
        return self.metadata(StructureResource.DATA_STRUCTURE, agency, id, language)

    def hierarchical_codelists(self, agency: str | None = None, id: str | None = None,
                               language: str | None = None) -> list[MetadataEntry]:
        return self.metadata(StructureResource.HIERARCHICAL_CODELIST, agency, id, language)

    def organisation_schemes(self, agency: str | None = None, id: str | None = None,
                             language: str | None = None) -> list[MetadataEntry]:
        return self.metadata(StructureResource.ORGANISATION_SCHEME, agency, id, language)

    def structure_sets(self, agency: str | None = None, id: str | None = None,
                       language: str | None = None) -> list[MetadataEntry]:
        return self.metadata(StructureResource.STRUCTURE_SET, agency, id, language)
