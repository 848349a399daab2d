"""In-memory ArchiMate model used as the export source.

This module provides Pydantic models for the object graph the exporter reads:
folders, elements, relationships, diagrams and their properties. The graph is
a strict tree of folders; relationships point at their endpoints by identifier
only, so there is no cyclic ownership.

Structure:
    ArchimateModel
      └── Folder (one per FolderType, in default order)
            ├── Folder (USER sub-folders, nested arbitrarily)
            └── elements: ArchimateElement | ArchimateRelationship | DiagramModel

Usage:
    model = ArchimateModel.create("Enterprise")
    actor = model.add(ArchimateElement(name="Customer", type=ElementType.BUSINESS_ACTOR))
"""

import uuid
from enum import Enum
from typing import Dict, Iterator, List, Literal, Optional, Union

from pydantic import BaseModel, Field


def _new_id() -> str:
    return uuid.uuid4().hex


# ============================================================================
# Enums
# ============================================================================

class FolderType(str, Enum):
    """Semantic folder kinds. Sub-folders are always USER."""
    USER = "user"
    BUSINESS = "business"
    APPLICATION = "application"
    TECHNOLOGY = "technology"
    MOTIVATION = "motivation"
    IMPLEMENTATION_MIGRATION = "implementation_migration"
    CONNECTORS = "connectors"
    RELATIONS = "relations"
    DIAGRAMS = "diagrams"


# Order and default names of the top-level folders of a new model
DEFAULT_FOLDERS: Dict[FolderType, str] = {
    FolderType.BUSINESS: "Business",
    FolderType.APPLICATION: "Application",
    FolderType.TECHNOLOGY: "Technology & Physical",
    FolderType.MOTIVATION: "Motivation",
    FolderType.IMPLEMENTATION_MIGRATION: "Implementation & Migration",
    FolderType.CONNECTORS: "Other",
    FolderType.RELATIONS: "Relations",
    FolderType.DIAGRAMS: "Views",
}


class ElementType(str, Enum):
    """ArchiMate 2.1 element taxonomy."""
    # Business layer
    BUSINESS_ACTOR = "BusinessActor"
    BUSINESS_ROLE = "BusinessRole"
    BUSINESS_COLLABORATION = "BusinessCollaboration"
    BUSINESS_INTERFACE = "BusinessInterface"
    BUSINESS_FUNCTION = "BusinessFunction"
    BUSINESS_PROCESS = "BusinessProcess"
    BUSINESS_EVENT = "BusinessEvent"
    BUSINESS_INTERACTION = "BusinessInteraction"
    PRODUCT = "Product"
    CONTRACT = "Contract"
    BUSINESS_SERVICE = "BusinessService"
    VALUE = "Value"
    MEANING = "Meaning"
    REPRESENTATION = "Representation"
    BUSINESS_OBJECT = "BusinessObject"
    LOCATION = "Location"

    # Application layer
    APPLICATION_COMPONENT = "ApplicationComponent"
    APPLICATION_COLLABORATION = "ApplicationCollaboration"
    APPLICATION_INTERFACE = "ApplicationInterface"
    APPLICATION_FUNCTION = "ApplicationFunction"
    APPLICATION_INTERACTION = "ApplicationInteraction"
    APPLICATION_SERVICE = "ApplicationService"
    DATA_OBJECT = "DataObject"

    # Technology layer
    NODE = "Node"
    DEVICE = "Device"
    SYSTEM_SOFTWARE = "SystemSoftware"
    INFRASTRUCTURE_INTERFACE = "InfrastructureInterface"
    NETWORK = "Network"
    COMMUNICATION_PATH = "CommunicationPath"
    INFRASTRUCTURE_FUNCTION = "InfrastructureFunction"
    INFRASTRUCTURE_SERVICE = "InfrastructureService"
    ARTIFACT = "Artifact"

    # Motivation
    STAKEHOLDER = "Stakeholder"
    DRIVER = "Driver"
    ASSESSMENT = "Assessment"
    GOAL = "Goal"
    PRINCIPLE = "Principle"
    REQUIREMENT = "Requirement"
    CONSTRAINT = "Constraint"

    # Implementation & Migration
    WORK_PACKAGE = "WorkPackage"
    DELIVERABLE = "Deliverable"
    PLATEAU = "Plateau"
    GAP = "Gap"

    # Connectors
    JUNCTION = "Junction"
    OR_JUNCTION = "OrJunction"


class RelationshipType(str, Enum):
    """ArchiMate 2.1 relationship taxonomy."""
    ACCESS = "AccessRelationship"
    AGGREGATION = "AggregationRelationship"
    ASSIGNMENT = "AssignmentRelationship"
    ASSOCIATION = "AssociationRelationship"
    COMPOSITION = "CompositionRelationship"
    FLOW = "FlowRelationship"
    INFLUENCE = "InfluenceRelationship"
    REALISATION = "RealisationRelationship"
    SPECIALISATION = "SpecialisationRelationship"
    TRIGGERING = "TriggeringRelationship"
    USED_BY = "UsedByRelationship"


class Viewpoint(str, Enum):
    """ArchiMate 2.1 viewpoints. NONE means no viewpoint."""
    NONE = ""
    ACTOR_COOPERATION = "actor_cooperation"
    APPLICATION_BEHAVIOUR = "application_behaviour"
    APPLICATION_COOPERATION = "application_cooperation"
    APPLICATION_USAGE = "application_usage"
    BUSINESS_FUNCTION = "business_function"
    BUSINESS_PROCESS_COOPERATION = "business_process_cooperation"
    BUSINESS_PROCESS = "business_process"
    BUSINESS_PRODUCT = "business_product"
    IMPLEMENTATION_DEPLOYMENT = "implementation_deployment"
    INFORMATION_STRUCTURE = "information_structure"
    INFRASTRUCTURE_USAGE = "infrastructure_usage"
    INFRASTRUCTURE = "infrastructure"
    LAYERED = "layered"
    ORGANISATION = "organisation"
    SERVICE_REALISATION = "service_realisation"
    STAKEHOLDER = "stakeholder"
    GOAL_REALISATION = "goal_realisation"
    GOAL_CONTRIBUTION = "goal_contribution"
    PRINCIPLES = "principles"
    REQUIREMENTS_REALISATION = "requirements_realisation"
    MOTIVATION = "motivation"
    PROJECT = "project"
    MIGRATION = "migration"
    IMPLEMENTATION_MIGRATION = "implementation_migration"


_BUSINESS = {
    ElementType.BUSINESS_ACTOR, ElementType.BUSINESS_ROLE,
    ElementType.BUSINESS_COLLABORATION, ElementType.BUSINESS_INTERFACE,
    ElementType.BUSINESS_FUNCTION, ElementType.BUSINESS_PROCESS,
    ElementType.BUSINESS_EVENT, ElementType.BUSINESS_INTERACTION,
    ElementType.PRODUCT, ElementType.CONTRACT, ElementType.BUSINESS_SERVICE,
    ElementType.VALUE, ElementType.MEANING, ElementType.REPRESENTATION,
    ElementType.BUSINESS_OBJECT, ElementType.LOCATION,
}
_APPLICATION = {
    ElementType.APPLICATION_COMPONENT, ElementType.APPLICATION_COLLABORATION,
    ElementType.APPLICATION_INTERFACE, ElementType.APPLICATION_FUNCTION,
    ElementType.APPLICATION_INTERACTION, ElementType.APPLICATION_SERVICE,
    ElementType.DATA_OBJECT,
}
_TECHNOLOGY = {
    ElementType.NODE, ElementType.DEVICE, ElementType.SYSTEM_SOFTWARE,
    ElementType.INFRASTRUCTURE_INTERFACE, ElementType.NETWORK,
    ElementType.COMMUNICATION_PATH, ElementType.INFRASTRUCTURE_FUNCTION,
    ElementType.INFRASTRUCTURE_SERVICE, ElementType.ARTIFACT,
}
_MOTIVATION = {
    ElementType.STAKEHOLDER, ElementType.DRIVER, ElementType.ASSESSMENT,
    ElementType.GOAL, ElementType.PRINCIPLE, ElementType.REQUIREMENT,
    ElementType.CONSTRAINT,
}
_IMPLEMENTATION_MIGRATION = {
    ElementType.WORK_PACKAGE, ElementType.DELIVERABLE,
    ElementType.PLATEAU, ElementType.GAP,
}


def folder_type_for(element_type: ElementType) -> FolderType:
    """Return the top-level folder that owns elements of the given type."""
    if element_type in _BUSINESS:
        return FolderType.BUSINESS
    if element_type in _APPLICATION:
        return FolderType.APPLICATION
    if element_type in _TECHNOLOGY:
        return FolderType.TECHNOLOGY
    if element_type in _MOTIVATION:
        return FolderType.MOTIVATION
    if element_type in _IMPLEMENTATION_MIGRATION:
        return FolderType.IMPLEMENTATION_MIGRATION
    return FolderType.CONNECTORS


# ============================================================================
# Model objects
# ============================================================================

class Property(BaseModel):
    """A free-text key/value pair attached to a model object."""

    key: Optional[str] = None
    value: Optional[str] = None


class ArchimateElement(BaseModel):
    """Typed domain object (actor, process, component, ...)."""

    id: str = Field(default_factory=_new_id)
    name: Optional[str] = None
    documentation: Optional[str] = None
    type: ElementType
    properties: List[Property] = Field(default_factory=list)


class ArchimateRelationship(BaseModel):
    """Typed edge between two elements, referenced by identifier.

    Attributes:
        source_id: Identifier of the source element
        target_id: Identifier of the target element
    """

    id: str = Field(default_factory=_new_id)
    name: Optional[str] = None
    documentation: Optional[str] = None
    type: RelationshipType
    source_id: str
    target_id: str
    properties: List[Property] = Field(default_factory=list)


class DiagramModel(BaseModel):
    """Base for diagrams stored in the views folder."""

    id: str = Field(default_factory=_new_id)
    name: Optional[str] = None
    documentation: Optional[str] = None
    properties: List[Property] = Field(default_factory=list)


class ArchimateDiagramModel(DiagramModel):
    """ArchiMate view. The only diagram kind written to the exchange format."""

    kind: Literal["archimate"] = "archimate"
    viewpoint: Viewpoint = Viewpoint.NONE


class SketchModel(DiagramModel):
    """Free-form sketch. Kept in the views folder but never exported as a view."""

    kind: Literal["sketch"] = "sketch"


ModelObject = Union[
    ArchimateElement,
    ArchimateRelationship,
    ArchimateDiagramModel,
    SketchModel,
]


class Folder(BaseModel):
    """Folder node in the model's ownership tree.

    Attributes:
        folders: Sub-folders in stored order
        elements: Contained objects in stored order
    """

    id: str = Field(default_factory=_new_id)
    name: Optional[str] = None
    documentation: Optional[str] = None
    type: FolderType = FolderType.USER
    properties: List[Property] = Field(default_factory=list)
    folders: List["Folder"] = Field(default_factory=list)
    elements: List[ModelObject] = Field(default_factory=list)

    def add_folder(self, name: str, documentation: Optional[str] = None) -> "Folder":
        """Create, append and return a USER sub-folder."""
        sub_folder = Folder(name=name, documentation=documentation)
        self.folders.append(sub_folder)
        return sub_folder

    def is_empty(self) -> bool:
        return not self.folders and not self.elements


class ArchimateModel(BaseModel):
    """Root aggregate of an ArchiMate model."""

    id: str = Field(default_factory=_new_id)
    name: Optional[str] = None
    purpose: Optional[str] = None
    properties: List[Property] = Field(default_factory=list)
    folders: List[Folder] = Field(default_factory=list)

    @classmethod
    def create(cls, name: Optional[str] = None, **kwargs) -> "ArchimateModel":
        """Create a model with the default top-level folders.

        Args:
            name: Model name
            **kwargs: Other model fields (id, purpose, properties)

        Returns:
            New model with business, application, technology, motivation,
            implementation & migration, other, relations and views folders
        """
        model = cls(name=name, **kwargs)
        for folder_type, folder_name in DEFAULT_FOLDERS.items():
            model.folders.append(Folder(name=folder_name, type=folder_type))
        return model

    def get_folder(self, folder_type: FolderType) -> Optional[Folder]:
        """Return the top-level folder of the given type, if any."""
        for folder in self.folders:
            if folder.type == folder_type:
                return folder
        return None

    def get_default_folder_for(self, obj: ModelObject) -> Optional[Folder]:
        """Return the top-level folder that should own ``obj``."""
        if isinstance(obj, ArchimateElement):
            return self.get_folder(folder_type_for(obj.type))
        if isinstance(obj, ArchimateRelationship):
            return self.get_folder(FolderType.RELATIONS)
        if isinstance(obj, DiagramModel):
            return self.get_folder(FolderType.DIAGRAMS)
        return None

    def add(self, obj: ModelObject, folder: Optional[Folder] = None) -> ModelObject:
        """Append ``obj`` to ``folder`` or to its default top-level folder.

        Raises:
            ValueError: If no folder is given and the default folder is missing
        """
        target = folder or self.get_default_folder_for(obj)
        if target is None:
            raise ValueError(
                f"No folder available for {type(obj).__name__} '{obj.id}'. "
                f"Create the model with ArchimateModel.create() or pass a folder."
            )
        target.elements.append(obj)
        return obj

    def iter_all_contents(self) -> Iterator[Union[Folder, ModelObject]]:
        """Yield every nested folder and object depth-first.

        Each folder is yielded before its contained objects, which come
        before its sub-folders.
        """
        stack: List[Folder] = list(reversed(self.folders))
        while stack:
            folder = stack.pop()
            yield folder
            yield from folder.elements
            stack.extend(reversed(folder.folders))

    def diagram_models(self) -> List[DiagramModel]:
        """Return all diagrams of the views folder in traversal order."""
        diagrams_folder = self.get_folder(FolderType.DIAGRAMS)
        if diagrams_folder is None:
            return []
        result: List[DiagramModel] = []
        stack = [diagrams_folder]
        while stack:
            folder = stack.pop()
            result.extend(obj for obj in folder.elements if isinstance(obj, DiagramModel))
            stack.extend(reversed(folder.folders))
        return result

    def find_by_id(
        self, identifier: str
    ) -> Optional[Union["ArchimateModel", Folder, ModelObject]]:
        if identifier == self.id:
            return self
        for obj in self.iter_all_contents():
            if obj.id == identifier:
                return obj
        return None

    def validate_references(self) -> List[str]:
        """Return identifiers of relationships whose endpoints do not resolve.

        The exporter does not call this; endpoint integrity is a property of
        the source model.
        """
        known = {
            obj.id
            for obj in self.iter_all_contents()
            if isinstance(obj, (ArchimateElement, ArchimateRelationship))
        }
        return [
            obj.id
            for obj in self.iter_all_contents()
            if isinstance(obj, ArchimateRelationship)
            and (obj.source_id not in known or obj.target_id not in known)
        ]
