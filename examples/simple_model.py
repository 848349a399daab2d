#!/usr/bin/env python3
"""
Simple Model Example
Builds a small insurance model and exports it to exchange XML.
"""

import logging
from pathlib import Path

from archimate_exchange import ExportOptions, export_to_exchange_xml
from archimate_exchange.models import (
    ArchimateDiagramModel,
    ArchimateElement,
    ArchimateModel,
    ArchimateRelationship,
    ElementType,
    FolderType,
    Property,
    RelationshipType,
    Viewpoint,
)


def build_model() -> ArchimateModel:
    """Create a model with a few elements, relationships and one view."""
    model = ArchimateModel.create("ArchiSurance", purpose="Example insurance architecture")

    customer = model.add(ArchimateElement(
        name="Customer",
        type=ElementType.BUSINESS_ACTOR,
        properties=[Property(key="owner", value="Sales")],
    ))
    role = model.add(ArchimateElement(name="Insurant", type=ElementType.BUSINESS_ROLE))

    claims = model.get_folder(FolderType.BUSINESS).add_folder("Claims")
    handle_claim = model.add(
        ArchimateElement(name="Handle Claim", type=ElementType.BUSINESS_PROCESS),
        folder=claims,
    )
    crm = model.add(ArchimateElement(
        name="CRM System",
        type=ElementType.APPLICATION_COMPONENT,
        properties=[Property(key="owner", value="IT"), Property(key="lifecycle", value="active")],
    ))

    model.add(ArchimateRelationship(
        type=RelationshipType.ASSIGNMENT, source_id=customer.id, target_id=role.id,
    ))
    model.add(ArchimateRelationship(
        name="supports", type=RelationshipType.USED_BY,
        source_id=crm.id, target_id=handle_claim.id,
    ))

    model.add(ArchimateDiagramModel(name="Layered View", viewpoint=Viewpoint.LAYERED))
    return model


def main():
    logging.basicConfig(level=logging.INFO)

    output_path = Path("/tmp/example_models/archisurance.xml")
    options = ExportOptions(
        save_organization=True,
        language_code="en",
        metadata={"title": "ArchiSurance", "creator": "EA Team"},
    )
    stats = export_to_exchange_xml(build_model(), output_path, options)

    print(f"Exported {stats.elements} elements and {stats.relationships} relationships")
    print(f"Output: {output_path}")


if __name__ == "__main__":
    main()
