"""Map model kinds to exchange-format type and viewpoint names."""

import logging
from typing import Dict, Optional, Union

from archimate_exchange.errors import UnknownComponentTypeError
from archimate_exchange.models.archimate import (
    ArchimateElement,
    ArchimateRelationship,
    ElementType,
    RelationshipType,
    Viewpoint,
)

logger = logging.getLogger(__name__)

# Element kinds whose exchange name differs from the model name
ELEMENT_TYPE_OVERRIDES: Dict[ElementType, str] = {
    ElementType.JUNCTION: "AndJunction",
}

RELATIONSHIP_SUFFIX = "Relationship"

VIEWPOINT_NAMES: Dict[Viewpoint, str] = {
    Viewpoint.NONE: "",
    Viewpoint.ACTOR_COOPERATION: "Actor Co-operation",
    Viewpoint.APPLICATION_BEHAVIOUR: "Application Behaviour",
    Viewpoint.APPLICATION_COOPERATION: "Application Co-operation",
    Viewpoint.APPLICATION_USAGE: "Application Usage",
    Viewpoint.BUSINESS_FUNCTION: "Business Function",
    Viewpoint.BUSINESS_PROCESS_COOPERATION: "Business Process Co-operation",
    Viewpoint.BUSINESS_PROCESS: "Business Process",
    Viewpoint.BUSINESS_PRODUCT: "Business Product",
    Viewpoint.IMPLEMENTATION_DEPLOYMENT: "Implementation and Deployment",
    Viewpoint.INFORMATION_STRUCTURE: "Information Structure",
    Viewpoint.INFRASTRUCTURE_USAGE: "Infrastructure Usage",
    Viewpoint.INFRASTRUCTURE: "Infrastructure",
    Viewpoint.LAYERED: "Layered",
    Viewpoint.ORGANISATION: "Organisation",
    Viewpoint.SERVICE_REALISATION: "Service Realisation",
    Viewpoint.STAKEHOLDER: "Stakeholder",
    Viewpoint.GOAL_REALISATION: "Goal Realisation",
    Viewpoint.GOAL_CONTRIBUTION: "Goal Contribution",
    Viewpoint.PRINCIPLES: "Principles",
    Viewpoint.REQUIREMENTS_REALISATION: "Requirements Realisation",
    Viewpoint.MOTIVATION: "Motivation",
    Viewpoint.PROJECT: "Project",
    Viewpoint.MIGRATION: "Migration",
    Viewpoint.IMPLEMENTATION_MIGRATION: "Implementation and Migration",
}


def get_element_type_name(element_type: ElementType) -> str:
    return ELEMENT_TYPE_OVERRIDES.get(element_type, element_type.value)


def get_relationship_type_name(relationship_type: RelationshipType) -> str:
    """Drop the 'Relationship' suffix: UsedByRelationship -> UsedBy."""
    name = relationship_type.value
    if name.endswith(RELATIONSHIP_SUFFIX):
        return name[: -len(RELATIONSHIP_SUFFIX)]
    return name


def get_component_name(
    component: Union[ArchimateElement, ArchimateRelationship],
) -> str:
    """Return the exchange xsi:type name for an element or relationship.

    Args:
        component: Element or relationship to map

    Returns:
        Canonical type string, e.g. "BusinessActor" or "Association"

    Raises:
        UnknownComponentTypeError: If the object is not an element or relationship
    """
    if isinstance(component, ArchimateElement):
        return get_element_type_name(component.type)
    if isinstance(component, ArchimateRelationship):
        return get_relationship_type_name(component.type)
    raise UnknownComponentTypeError(
        f"No exchange type for {type(component).__name__}. "
        f"Only elements and relationships carry an xsi:type."
    )


def get_viewpoint_name(viewpoint: Optional[Viewpoint]) -> str:
    """Return the exchange viewpoint name, or "" when there is none."""
    if viewpoint is None:
        return ""
    name = VIEWPOINT_NAMES.get(viewpoint)
    if name is None:
        logger.warning(f"No exchange name for viewpoint '{viewpoint.value}', omitting")
        return ""
    return name
