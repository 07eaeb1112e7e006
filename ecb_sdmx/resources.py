"""
Resource registry for ecb-sdmx.

Maps each supported structure resource type to the XPath selector of the
artefact elements in its response, and assembles the REST resource paths
the service understands:

  data/{flow}/{key | all}
  {resource}/{AGENCY | all}/{ID | all}

A static enum keeps the resource -> selector association in one place;
adding a resource type means adding one member and one selector.
"""

from __future__ import annotations

from enum import Enum


class StructureResource(str, Enum):
    """Structure (metadata) resource types served by the service."""

    AGENCY_SCHEME = "agencyscheme"
    CATEGORISATION = "categorisation"
    CATEGORY_SCHEME = "categoryscheme"
    CODELIST = "codelist"
    CONCEPT_SCHEME = "conceptscheme"
    CONTENT_CONSTRAINT = "contentconstraint"
    DATAFLOW = "dataflow"
    DATA_STRUCTURE = "datastructure"
    HIERARCHICAL_CODELIST = "hierarchicalcodelist"
    ORGANISATION_SCHEME = "organisationscheme"
    STRUCTURE_SET = "structureset"

    @property
    def selector(self) -> str:
        """XPath selecting this resource's artefacts in a structure message."""
        return _SELECTORS[self]


_SELECTORS: dict[StructureResource, str] = {
    StructureResource.AGENCY_SCHEME: "//str:AgencyScheme",
    StructureResource.CATEGORISATION: "//str:Categorisation",
    StructureResource.CATEGORY_SCHEME: "//str:CategoryScheme",
    StructureResource.CODELIST: "//str:Codelist",
    StructureResource.CONCEPT_SCHEME: "//str:ConceptScheme",
    StructureResource.CONTENT_CONSTRAINT: "//str:ContentConstraint",
    StructureResource.DATAFLOW: "//str:Dataflow",
    StructureResource.DATA_STRUCTURE: "//str:DataStructure",
    StructureResource.HIERARCHICAL_CODELIST: "//str:HierarchicalCodelist",
    # The organisation scheme endpoint answers with agency schemes
    StructureResource.ORGANISATION_SCHEME: "//str:AgencyScheme",
    StructureResource.STRUCTURE_SET: "//str:StructureSet",
}

ALL = "all"


def data_path(flow: str, key: str | None = None) -> str:
    """Build the resource path of a data query."""
    return "/".join(["data", flow, key or ALL])


def structure_path(
    resource: StructureResource | str,
    agency: str | None = None,
    resource_id: str | None = None,
) -> str:
    """Build the resource path of a structure query.

    Agency and id are upper-cased, matching how the service stores them.
    """
    resource = StructureResource(resource)
    return "/".join([
        resource.value,
        agency.upper() if agency else ALL,
        resource_id.upper() if resource_id else ALL,
    ])
