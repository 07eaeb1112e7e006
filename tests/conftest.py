"""
Shared test fixtures for ecb-sdmx tests.

SDMX-ML documents are built from small Python descriptions so each test
states exactly the series, attributes and observations it relies on.
HTTP is never used outside the live tests: ``FakeSession`` stands in for
``requests.Session`` and replays canned responses.
"""

from __future__ import annotations

import os
from typing import Callable

import pytest

# ---------------------------------------------------------------------------
# SDMX-ML namespaces (2.1)
# ---------------------------------------------------------------------------
MESSAGE_NS = "http://www.sdmx.org/resources/sdmxml/schemas/v2_1/message"
GENERIC_NS = "http://www.sdmx.org/resources/sdmxml/schemas/v2_1/data/generic"
STRUCTURE_NS = "http://www.sdmx.org/resources/sdmxml/schemas/v2_1/structure"
COMMON_NS = "http://www.sdmx.org/resources/sdmxml/schemas/v2_1/common"

EXR_KEY = [
    ("FREQ", "D"),
    ("CURRENCY", "USD"),
    ("CURRENCY_DENOM", "EUR"),
    ("EXR_TYPE", "SP00"),
    ("EXR_SUFFIX", "A"),
]
EXR_ATTRIBUTES = [
    ("TITLE", "US dollar/Euro"),
    ("TITLE_COMPL", "ECB reference exchange rate, US dollar/Euro, 2:15 pm (C.E.T.)"),
    ("UNIT", "USD"),
    ("UNIT_MULT", "0"),
    ("DECIMALS", "4"),
    ("COLLECTION", "A"),
    ("SOURCE_AGENCY", "4F0"),
]
EXR_OBSERVATIONS = [
    ("2021-01-04", "1.20"),
    ("2021-01-05", "1.21"),
    ("2021-01-06", "1.22"),
]


def _values(tag: str, pairs: list[tuple[str, str]]) -> str:
    inner = "".join(f'<generic:Value id="{i}" value="{v}"/>' for i, v in pairs)
    return f"<generic:{tag}>{inner}</generic:{tag}>"


def build_series(
    key: list[tuple[str, str]],
    attributes: list[tuple[str, str]] | None = None,
    observations: list[tuple[str, str | None]] | None = None,
) -> str:
    """One ``generic:Series``; an observation value of ``None`` omits ObsValue."""
    parts = [_values("SeriesKey", key)]
    if attributes is not None:
        parts.append(_values("Attributes", attributes))
    for period, value in observations or []:
        obs = f'<generic:ObsDimension value="{period}"/>'
        if value is not None:
            obs += f'<generic:ObsValue value="{value}"/>'
            obs += '<generic:Attributes><generic:Value id="OBS_STATUS" value="A"/></generic:Attributes>'
        parts.append(f"<generic:Obs>{obs}</generic:Obs>")
    return "<generic:Series>" + "".join(parts) + "</generic:Series>"


def build_generic_message(*series: str) -> bytes:
    """A generic data message wrapping the given series."""
    return (
        '<?xml version="1.0" encoding="UTF-8"?>'
        f'<message:GenericData xmlns:message="{MESSAGE_NS}" '
        f'xmlns:generic="{GENERIC_NS}" xmlns:common="{COMMON_NS}">'
        "<message:Header><message:ID>test</message:ID>"
        "<message:Test>false</message:Test></message:Header>"
        '<message:DataSet action="Replace">'
        + "".join(series)
        + "</message:DataSet></message:GenericData>"
    ).encode("utf-8")


def build_structure_message(elements: str) -> bytes:
    """A structure message with *elements* placed under ``mes:Structures``."""
    return (
        '<?xml version="1.0" encoding="UTF-8"?>'
        f'<mes:Structure xmlns:mes="{MESSAGE_NS}" xmlns:str="{STRUCTURE_NS}" '
        f'xmlns:com="{COMMON_NS}">'
        "<mes:Header><mes:ID>test</mes:ID></mes:Header>"
        f"<mes:Structures>{elements}</mes:Structures></mes:Structure>"
    ).encode("utf-8")


def build_artefact(
    tag: str,
    artefact_id: str,
    names: list[tuple[str, str]],
    agency: str | None = "ECB",
    children: str = "",
) -> str:
    """One structure artefact (``str:<tag>``) with localized names."""
    agency_attr = f' agencyID="{agency}"' if agency is not None else ""
    name_xml = "".join(f'<com:Name xml:lang="{lang}">{text}</com:Name>' for lang, text in names)
    return (
        f'<str:{tag} id="{artefact_id}"{agency_attr} version="1.0">'
        f"{name_xml}{children}</str:{tag}>"
    )


# ---------------------------------------------------------------------------
# HTTP stand-ins
# ---------------------------------------------------------------------------
class FakeResponse:
    """Minimal ``requests.Response`` replacement."""

    def __init__(self, status_code: int = 200, content: bytes = b"") -> None:
        self.status_code = status_code
        self.content = content

    @property
    def text(self) -> str:
        return self.content.decode("utf-8")


class FakeSession:
    """Replays canned responses (or raises canned exceptions) in order."""

    def __init__(self, *responses: FakeResponse | Exception) -> None:
        self.headers: dict[str, str] = {}
        self.responses = list(responses)
        self.calls: list[dict] = []
        self.closed = False

    def get(self, url: str, params: dict | None = None, timeout: float | None = None):
        self.calls.append({"url": url, "params": params, "timeout": timeout})
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    def close(self) -> None:
        self.closed = True


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def series_xml() -> Callable[..., str]:
    return build_series


@pytest.fixture
def generic_message() -> Callable[..., bytes]:
    return build_generic_message


@pytest.fixture
def structure_message() -> Callable[..., bytes]:
    return build_structure_message


@pytest.fixture
def artefact_xml() -> Callable[..., str]:
    return build_artefact


@pytest.fixture
def exr_message() -> bytes:
    """EXR D.USD.EUR.SP00.A with three daily observations."""
    return build_generic_message(build_series(EXR_KEY, EXR_ATTRIBUTES, EXR_OBSERVATIONS))


@pytest.fixture
def fake_session() -> Callable[..., FakeSession]:
    return FakeSession


@pytest.fixture
def fake_response() -> Callable[..., FakeResponse]:
    return FakeResponse


# ---------------------------------------------------------------------------
# Pytest markers
# ---------------------------------------------------------------------------
def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "integration: end-to-end tests through the public API",
    )
    config.addinivalue_line(
        "markers",
        "live: tests that call the real ECB service (set ECB_SDMX_LIVE=1)",
    )


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    if os.environ.get("ECB_SDMX_LIVE") == "1":
        return
    skip_live = pytest.mark.skip(reason="live service tests disabled (set ECB_SDMX_LIVE=1)")
    for item in items:
        if "live" in item.keywords:
            item.add_marker(skip_live)
