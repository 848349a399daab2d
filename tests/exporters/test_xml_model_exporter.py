"""Unit tests for the exchange XML exporter.

Tests cover:
- Root element, namespaces and schemaLocation
- Element, relationship and view export
- Section order and emptiness suppression
- Organization tree
- Property definitions and property references
- Dublin Core metadata and xml:lang propagation
- File output, XSD copying and I/O errors
"""

import logging

import pytest
from lxml import etree

from archimate_exchange.config.settings import ExportOptions
from archimate_exchange.errors import ConfigurationError
from archimate_exchange.exporters.xml_model_exporter import (
    ModelDocumentWriter,
    XMLModelExporter,
    collect_folder_contents,
    export_to_exchange_xml,
)
from archimate_exchange.models.archimate import (
    ArchimateDiagramModel,
    ArchimateElement,
    ArchimateModel,
    ArchimateRelationship,
    ElementType,
    Folder,
    FolderType,
    Property,
    RelationshipType,
    SketchModel,
    Viewpoint,
)

NS = "http://www.opengroup.org/xsd/archimate"
XSI = "http://www.w3.org/2001/XMLSchema-instance"
DC = "http://purl.org/dc/elements/1.1/"
XML_LANG = "{http://www.w3.org/XML/1998/namespace}lang"
XSI_TYPE = f"{{{XSI}}}type"
NSMAP = {"a": NS, "dc": DC}


def _q(name):
    return f"{{{NS}}}{name}"


def _child_names(element):
    return [etree.QName(child).localname for child in element]


def _build(model, **options):
    return XMLModelExporter(ExportOptions(**options)).build_document(model)


# Test Fixtures
@pytest.fixture
def empty_model():
    """Model with the default folders and nothing in them."""
    return ArchimateModel.create("Empty", id="model-1")


@pytest.fixture
def customer_model():
    """One element named Customer with an owner property."""
    model = ArchimateModel.create(id="model-1")
    model.add(
        ArchimateElement(
            id="cust",
            name="Customer",
            type=ElementType.BUSINESS_ACTOR,
            properties=[Property(key="owner", value="Sales")],
        )
    )
    return model


@pytest.fixture
def populated_model():
    """Model with nested folders, relationships and views."""
    model = ArchimateModel.create(
        "Enterprise",
        id="model-1",
        purpose="Reference architecture",
        properties=[Property(key="status", value="draft")],
    )
    business = model.get_folder(FolderType.BUSINESS)
    business.documentation = "Business layer"

    actor = model.add(ArchimateElement(id="actor", name="Customer", type=ElementType.BUSINESS_ACTOR))
    sub_folder = business.add_folder("Processes")
    process = model.add(
        ArchimateElement(
            id="process",
            name="Handle Claim",
            documentation="Claim handling",
            type=ElementType.BUSINESS_PROCESS,
            properties=[Property(key="owner", value="Claims")],
        ),
        folder=sub_folder,
    )
    role = model.add(ArchimateElement(id="role", name="Insurant", type=ElementType.BUSINESS_ROLE))
    app = model.add(ArchimateElement(id="app", name="CRM", type=ElementType.APPLICATION_COMPONENT))

    model.add(
        ArchimateRelationship(
            id="rel-1",
            type=RelationshipType.ASSIGNMENT,
            source_id=actor.id,
            target_id=role.id,
        )
    )
    model.add(
        ArchimateRelationship(
            id="rel-2",
            name="supports",
            type=RelationshipType.USED_BY,
            source_id=app.id,
            target_id=process.id,
            properties=[Property(key="criticality", value="high")],
        )
    )

    model.add(
        ArchimateDiagramModel(
            id="view-1",
            name="Overview",
            viewpoint=Viewpoint.LAYERED,
            properties=[Property(key="audience", value="board")],
        )
    )
    model.add(SketchModel(id="sketch-1", name="Whiteboard"))
    return model


class TestRootElement:
    """Test root <model> element construction."""

    def test_namespaces_and_identifier(self, empty_model):
        root = _build(empty_model)

        assert root.tag == _q("model")
        assert root.nsmap[None] == NS
        assert root.nsmap["xsi"] == XSI
        assert "dc" not in root.nsmap
        assert root.get("identifier") == "id-model-1"

    def test_schema_location_without_metadata(self, empty_model):
        root = _build(empty_model)

        assert root.get(f"{{{XSI}}}schemaLocation") == (
            f"{NS} http://www.opengroup.org/xsd/archimate/archimate_v2p1.xsd"
        )

    def test_schema_location_with_metadata(self, empty_model):
        root = _build(empty_model, metadata={"title": "Enterprise"})

        assert root.nsmap["dc"] == DC
        assert root.get(f"{{{XSI}}}schemaLocation") == (
            f"{NS} http://www.opengroup.org/xsd/archimate/archimate_v2p1.xsd "
            f"{DC} http://dublincore.org/schemas/xmls/qdc/2008/02/11/dc.xsd"
        )

    def test_empty_model_has_only_mandatory_sections(self, empty_model):
        root = _build(empty_model)

        assert _child_names(root) == ["name", "elements", "relationships"]
        assert len(root.find(_q("elements"))) == 0
        assert len(root.find(_q("relationships"))) == 0

    def test_section_order(self, populated_model):
        root = _build(
            populated_model,
            save_organization=True,
            metadata={"creator": "EA Team"},
        )

        assert _child_names(root) == [
            "metadata",
            "name",
            "documentation",
            "properties",
            "elements",
            "relationships",
            "organization",
            "propertyDefinitions",
            "views",
        ]

    def test_model_name_and_purpose(self, populated_model):
        root = _build(populated_model)

        assert root.find(_q("name")).text == "Enterprise"
        assert root.find(_q("documentation")).text == "Reference architecture"

    def test_model_without_name_or_purpose(self):
        model = ArchimateModel.create(id="m", name="", purpose=None)
        root = _build(model)

        assert root.find(_q("name")) is None
        assert root.find(_q("documentation")) is None


class TestRoundTripScenario:
    """Single element with one property, organization and metadata off."""

    def test_customer_document(self, customer_model):
        root = _build(customer_model)

        assert _child_names(root) == ["elements", "relationships", "propertyDefinitions"]

        elements = root.find(_q("elements")).findall(_q("element"))
        assert len(elements) == 1
        element = elements[0]
        assert element.get("identifier") == "id-cust"
        assert element.get(XSI_TYPE) == "BusinessActor"
        assert [label.text for label in element.findall(_q("label"))] == ["Customer"]
        assert element.find(_q("documentation")) is None

        properties = element.findall(_q("properties"))
        assert len(properties) == 1
        prop = properties[0].find(_q("property"))
        assert prop.get("identifierref") == "propid-1"
        assert prop.find(_q("value")).text == "Sales"

        assert len(root.find(_q("relationships"))) == 0
        assert root.find(_q("organization")) is None
        assert root.find(_q("metadata")) is None
        assert root.find(_q("views")) is None

        definitions = root.find(_q("propertyDefinitions")).findall(_q("propertyDefinition"))
        assert len(definitions) == 1
        assert definitions[0].get("identifier") == "propid-1"
        assert definitions[0].get("name") == "owner"
        assert definitions[0].get("type") == "string"


class TestElementsAndRelationships:
    """Test element/relationship writers and bucket traversal."""

    def test_elements_follow_folder_order(self, populated_model):
        root = _build(populated_model)

        identifiers = [e.get("identifier") for e in root.find(_q("elements"))]
        # Objects directly in Business first, then the Processes sub-folder,
        # then the Application folder
        assert identifiers == ["id-actor", "id-role", "id-process", "id-app"]

    def test_element_documentation_and_type(self, populated_model):
        root = _build(populated_model)

        process = root.find(".//a:element[@identifier='id-process']", NSMAP)
        assert process.get(XSI_TYPE) == "BusinessProcess"
        assert process.find(_q("documentation")).text == "Claim handling"

    def test_element_without_name_has_no_label(self, empty_model):
        empty_model.add(ArchimateElement(id="x", name="", type=ElementType.GOAL))
        root = _build(empty_model)

        element = root.find(".//a:element", NSMAP)
        assert element.find(_q("label")) is None
        assert element.find(_q("properties")) is None

    def test_relationship_attributes(self, populated_model):
        root = _build(populated_model)

        relationships = root.find(_q("relationships")).findall(_q("relationship"))
        assert [r.get("identifier") for r in relationships] == ["id-rel-1", "id-rel-2"]

        used_by = relationships[1]
        assert used_by.get("source") == "id-app"
        assert used_by.get("target") == "id-process"
        assert used_by.get(XSI_TYPE) == "UsedBy"
        assert used_by.find(_q("label")).text == "supports"

    def test_relationship_endpoints_resolve_to_elements(self, populated_model):
        root = _build(populated_model)

        element_ids = {e.get("identifier") for e in root.iterfind(".//a:element", NSMAP)}
        for relationship in root.iterfind(".//a:relationship", NSMAP):
            assert relationship.get("source") in element_ids
            assert relationship.get("target") in element_ids

    def test_foreign_objects_are_filtered_from_buckets(self, empty_model):
        """A relationship stored in a layer folder is not written as an element."""
        business = empty_model.get_folder(FolderType.BUSINESS)
        actor = empty_model.add(ArchimateElement(id="a", type=ElementType.BUSINESS_ACTOR))
        empty_model.add(
            ArchimateRelationship(
                id="stray",
                type=RelationshipType.ASSOCIATION,
                source_id=actor.id,
                target_id=actor.id,
            ),
            folder=business,
        )
        root = _build(empty_model)

        assert [e.get("identifier") for e in root.find(_q("elements"))] == ["id-a"]
        assert len(root.find(_q("relationships"))) == 0

    def test_missing_top_level_folders_are_skipped(self):
        model = ArchimateModel(id="m", folders=[Folder(name="Motivation", type=FolderType.MOTIVATION)])
        model.add(ArchimateElement(id="g", type=ElementType.GOAL))
        root = _build(model)

        assert [e.get("identifier") for e in root.find(_q("elements"))] == ["id-g"]
        assert len(root.find(_q("relationships"))) == 0

    def test_junction_type_name(self, empty_model):
        empty_model.add(ArchimateElement(id="j", type=ElementType.JUNCTION))
        root = _build(empty_model)

        assert root.find(".//a:element", NSMAP).get(XSI_TYPE) == "AndJunction"


class TestCollectFolderContents:
    """Test pre-order folder traversal."""

    def test_siblings_before_sub_folders(self):
        root_folder = Folder(name="root")
        first = ArchimateElement(id="1", type=ElementType.GOAL)
        second = ArchimateElement(id="2", type=ElementType.GOAL)
        nested = ArchimateElement(id="3", type=ElementType.GOAL)
        deeper = ArchimateElement(id="4", type=ElementType.GOAL)
        last = ArchimateElement(id="5", type=ElementType.GOAL)

        root_folder.elements.extend([first, second])
        sub_a = root_folder.add_folder("a")
        sub_a.elements.append(nested)
        sub_a.add_folder("a1").elements.append(deeper)
        root_folder.add_folder("b").elements.append(last)

        assert [o.id for o in collect_folder_contents(root_folder)] == ["1", "2", "3", "4", "5"]


class TestOrganization:
    """Test the <organization> reference tree."""

    def test_disabled_by_default(self, populated_model):
        root = _build(populated_model)
        assert root.find(_q("organization")) is None

    def test_empty_folders_are_omitted(self, populated_model):
        root = _build(populated_model, save_organization=True)

        organization = root.find(_q("organization"))
        labels = [item.find(_q("label")).text for item in organization.findall(_q("item"))]
        # Technology, Motivation, Implementation & Migration and Other are empty
        assert labels == ["Business", "Application", "Relations", "Views"]

    def test_folder_item_structure(self, populated_model):
        root = _build(populated_model, save_organization=True)

        business = root.find(_q("organization")).find(_q("item"))
        assert _child_names(business) == ["label", "documentation", "item", "item", "item"]
        assert business.find(_q("documentation")).text == "Business layer"

        sub_folder, actor_ref, role_ref = business.findall(_q("item"))
        assert sub_folder.find(_q("label")).text == "Processes"
        assert sub_folder.find(_q("item")).get("identifierref") == "id-process"
        assert actor_ref.get("identifierref") == "id-actor"
        assert role_ref.get("identifierref") == "id-role"
        assert len(actor_ref) == 0

    def test_sketches_are_referenced(self, populated_model):
        root = _build(populated_model, save_organization=True)

        refs = [
            item.get("identifierref")
            for item in root.find(_q("organization")).iter(_q("item"))
            if item.get("identifierref")
        ]
        assert "id-view-1" in refs
        assert "id-sketch-1" in refs

    def test_sketch_only_folder_is_not_empty(self):
        model = ArchimateModel.create(id="m")
        model.add(SketchModel(id="sk"))
        root = _build(model, save_organization=True)

        views = root.find(_q("organization")).find(_q("item"))
        assert views.find(_q("label")).text == "Views"
        refs = [item.get("identifierref") for item in views.findall(_q("item"))]
        assert refs == ["id-sk"]

    def test_references_resolve(self, populated_model):
        root = _build(populated_model, save_organization=True)

        defined = {
            node.get("identifier")
            for node in root.iter(_q("element"), _q("relationship"), _q("view"))
        }
        sketches = {
            f"id-{diagram.id}"
            for diagram in populated_model.diagram_models()
            if isinstance(diagram, SketchModel)
        }
        for item in root.find(_q("organization")).iter(_q("item")):
            ref = item.get("identifierref")
            if ref is not None:
                assert ref in defined or ref in sketches

    def test_unnamed_folder_has_empty_label(self):
        model = ArchimateModel.create(id="m")
        unnamed = model.get_folder(FolderType.MOTIVATION).add_folder("")
        model.add(ArchimateElement(id="g", type=ElementType.GOAL), folder=unnamed)
        root = _build(model, save_organization=True)

        motivation = root.find(_q("organization")).find(_q("item"))
        inner = motivation.find(_q("item"))
        label = inner.find(_q("label"))
        assert label is not None
        assert not label.text


class TestProperties:
    """Test property definitions and property references."""

    def test_definitions_sorted_by_key(self, populated_model):
        root = _build(populated_model)

        definitions = root.find(_q("propertyDefinitions")).findall(_q("propertyDefinition"))
        assert [d.get("name") for d in definitions] == [
            "audience", "criticality", "owner", "status",
        ]

    def test_definition_ids_follow_scan_order(self, populated_model):
        writer = ModelDocumentWriter(populated_model, ExportOptions())

        # Model properties first, then folder contents in traversal order
        assert writer.registry.get("status") == "propid-1"
        assert writer.registry.get("owner") == "propid-2"
        assert writer.registry.get("criticality") == "propid-3"
        assert writer.registry.get("audience") == "propid-4"

    def test_property_references_match_definitions(self, populated_model):
        root = _build(populated_model)

        defined = {
            d.get("identifier")
            for d in root.iterfind(".//a:propertyDefinition", NSMAP)
        }
        refs = [p.get("identifierref") for p in root.iterfind(".//a:property", NSMAP)]
        assert refs
        assert set(refs) <= defined

    def test_model_and_view_properties(self, populated_model):
        root = _build(populated_model)

        model_props = root.find(_q("properties")).findall(_q("property"))
        assert [p.find(_q("value")).text for p in model_props] == ["draft"]

        view = root.find(".//a:view", NSMAP)
        assert view.find(".//a:value", NSMAP).text == "board"

    def test_no_definitions_section_without_properties(self, empty_model):
        root = _build(empty_model)
        assert root.find(_q("propertyDefinitions")) is None

    def test_empty_values_and_keys_are_skipped(self, empty_model):
        empty_model.add(
            ArchimateElement(
                id="e",
                type=ElementType.GOAL,
                properties=[
                    Property(key="empty", value=""),
                    Property(key="", value="orphan"),
                    Property(key="kept", value="yes"),
                ],
            )
        )
        root = _build(empty_model)

        properties = root.find(".//a:element/a:properties", NSMAP).findall(_q("property"))
        assert len(properties) == 1
        assert properties[0].find(_q("value")).text == "yes"

    def test_no_properties_node_when_nothing_is_writable(self, empty_model):
        empty_model.add(
            ArchimateElement(
                id="e",
                type=ElementType.GOAL,
                properties=[Property(key="blank", value="")],
            )
        )
        root = _build(empty_model)

        assert root.find(".//a:element/a:properties", NSMAP) is None
        # Key is still defined because it occurs in the model
        assert root.find(".//a:propertyDefinition", NSMAP).get("name") == "blank"

    def test_unregistered_key_is_skipped(self, empty_model, caplog):
        """Properties whose key is missing from the registry are dropped."""
        from archimate_exchange.exporters.property_definitions import PropertyDefinitionRegistry

        element = empty_model.add(
            ArchimateElement(
                id="e",
                type=ElementType.GOAL,
                properties=[Property(key="known", value="1"), Property(key="unknown", value="2")],
            )
        )
        registry = PropertyDefinitionRegistry()
        registry.register("known")
        writer = ModelDocumentWriter(empty_model, ExportOptions(), registry=registry)
        parent = etree.Element("parent")

        with caplog.at_level(logging.DEBUG, logger="archimate_exchange.exporters.xml_model_exporter"):
            properties = writer.write_properties(element, parent)

        assert [p.get("identifierref") for p in properties] == ["propid-1"]
        assert writer.stats.skipped_properties == 1
        assert "unknown" in caplog.text


class TestViews:
    """Test <views> export."""

    def test_only_archimate_diagrams_are_views(self, populated_model):
        root = _build(populated_model)

        views = root.find(_q("views")).findall(_q("view"))
        assert [v.get("identifier") for v in views] == ["id-view-1"]
        assert views[0].get("viewpoint") == "Layered"
        assert views[0].find(_q("label")).text == "Overview"

    def test_no_viewpoint_attribute_without_viewpoint(self, empty_model):
        empty_model.add(ArchimateDiagramModel(id="v", name="Default"))
        root = _build(empty_model)

        assert root.find(".//a:view", NSMAP).get("viewpoint") is None

    def test_sketches_only_means_no_views_section(self, empty_model):
        empty_model.add(SketchModel(id="s", name="Idea"))
        root = _build(empty_model)

        assert root.find(_q("views")) is None

    def test_views_in_sub_folders(self, empty_model):
        views_folder = empty_model.get_folder(FolderType.DIAGRAMS)
        nested = views_folder.add_folder("Detail")
        empty_model.add(ArchimateDiagramModel(id="v2"), folder=nested)
        empty_model.add(ArchimateDiagramModel(id="v1"))
        root = _build(empty_model)

        assert [v.get("identifier") for v in root.find(_q("views"))] == ["id-v1", "id-v2"]


class TestMetadata:
    """Test the Dublin Core metadata block."""

    def test_all_empty_values_mean_no_metadata(self, empty_model):
        root = _build(empty_model, metadata={"creator": ""})

        assert root.find(_q("metadata")) is None
        assert "dc" not in root.nsmap
        assert DC not in root.get(f"{{{XSI}}}schemaLocation")

    def test_metadata_block(self, empty_model):
        root = _build(
            empty_model,
            metadata={"title": "Enterprise", "creator": "", "subject": "Claims"},
        )

        metadata = root.find(_q("metadata"))
        assert root.index(metadata) == 0
        assert metadata.find(_q("schema")).text == "Dublin Core"
        assert metadata.find(_q("schemaversion")).text == "1.1"

        dc_nodes = [node for node in metadata if etree.QName(node).namespace == DC]
        assert [(etree.QName(n).localname, n.text) for n in dc_nodes] == [
            ("title", "Enterprise"),
            ("subject", "Claims"),
        ]


class TestLanguageCode:
    """Test xml:lang propagation."""

    def test_language_on_every_text_node(self, populated_model):
        root = _build(
            populated_model,
            language_code="en",
            save_organization=True,
            metadata={"title": "Enterprise"},
        )

        text_nodes = list(root.iter(_q("name"), _q("label"), _q("documentation"), _q("value")))
        text_nodes.extend(root.find(_q("metadata")).iter(f"{{{DC}}}title"))
        assert text_nodes
        for node in text_nodes:
            assert node.get(XML_LANG) == "en"

    def test_no_language_attribute_by_default(self, populated_model):
        root = _build(populated_model, save_organization=True, metadata={"title": "T"})

        for node in root.iter():
            assert node.get(XML_LANG) is None

    def test_structural_nodes_have_no_language(self, populated_model):
        root = _build(populated_model, language_code="de")

        assert root.get(XML_LANG) is None
        assert root.find(_q("elements")).get(XML_LANG) is None
        assert root.find(".//a:element", NSMAP).get(XML_LANG) is None


class TestExportToFile:
    """Test writing the document and auxiliary files."""

    def test_export_writes_parsable_file(self, populated_model, tmp_path):
        output_file = tmp_path / "out" / "model.xml"
        stats = XMLModelExporter().export(populated_model, output_file)

        assert output_file.exists()
        content = output_file.read_bytes()
        assert content.startswith(b"<?xml version='1.0' encoding='UTF-8'?>")

        root = etree.parse(str(output_file)).getroot()
        assert root.tag == _q("model")
        assert stats.elements == 4
        assert stats.relationships == 2
        assert stats.views == 1
        assert stats.property_definitions == 4

    def test_exports_are_independent(self, customer_model, populated_model, tmp_path):
        exporter = XMLModelExporter()
        exporter.export(populated_model, tmp_path / "a.xml")
        exporter.export(customer_model, tmp_path / "b.xml")

        root = etree.parse(str(tmp_path / "b.xml")).getroot()
        names = [d.get("name") for d in root.iterfind(".//a:propertyDefinition", NSMAP)]
        assert names == ["owner"]
        assert root.find(".//a:propertyDefinition", NSMAP).get("identifier") == "propid-1"

    def test_repeated_export_is_identical(self, populated_model):
        exporter = XMLModelExporter(ExportOptions(save_organization=True))

        first = etree.tostring(exporter.build_document(populated_model))
        second = etree.tostring(exporter.build_document(populated_model))
        assert first == second

    def test_copies_archimate_xsd(self, customer_model, tmp_path):
        schema_dir = tmp_path / "xsd"
        schema_dir.mkdir()
        (schema_dir / "archimate_v2p1.xsd").write_text("<schema/>")
        (schema_dir / "dc.xsd").write_text("<dc/>")
        output_dir = tmp_path / "out"

        export_to_exchange_xml(
            customer_model,
            output_dir / "model.xml",
            include_auxiliary_files=True,
            schema_dir=schema_dir,
        )

        assert (output_dir / "archimate_v2p1.xsd").read_text() == "<schema/>"
        assert not (output_dir / "dc.xsd").exists()

    def test_copies_dublin_core_xsd_with_metadata(self, customer_model, tmp_path):
        schema_dir = tmp_path / "xsd"
        schema_dir.mkdir()
        (schema_dir / "archimate_v2p1.xsd").write_text("<schema/>")
        (schema_dir / "dc.xsd").write_text("<dc/>")

        options = ExportOptions(
            include_auxiliary_files=True,
            schema_dir=schema_dir,
            metadata={"title": "Model"},
        )
        XMLModelExporter(options).export(customer_model, tmp_path / "model.xml")

        assert (tmp_path / "archimate_v2p1.xsd").exists()
        assert (tmp_path / "dc.xsd").exists()

    def test_missing_xsd_is_rejected_before_writing(self, customer_model, tmp_path):
        with pytest.raises(ConfigurationError, match="archimate_v2p1.xsd"):
            export_to_exchange_xml(
                customer_model,
                tmp_path / "model.xml",
                include_auxiliary_files=True,
                schema_dir=tmp_path / "nowhere",
            )

        assert not (tmp_path / "model.xml").exists()

    def test_default_schema_dir_without_xsd_files(self):
        with pytest.raises(ConfigurationError, match="not found"):
            ExportOptions(include_auxiliary_files=True)

    def test_xsd_removed_after_configuration_raises(self, customer_model, tmp_path):
        schema_dir = tmp_path / "xsd"
        schema_dir.mkdir()
        xsd = schema_dir / "archimate_v2p1.xsd"
        xsd.write_text("<schema/>")
        options = ExportOptions(include_auxiliary_files=True, schema_dir=schema_dir)
        xsd.unlink()

        with pytest.raises(FileNotFoundError, match="XSD schema not found"):
            XMLModelExporter(options).export(customer_model, tmp_path / "out" / "model.xml")

    def test_unwritable_destination_raises(self, customer_model, tmp_path, caplog):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")

        with caplog.at_level(logging.ERROR):
            with pytest.raises(OSError):
                XMLModelExporter().export(customer_model, blocker / "model.xml")
        assert "failed" in caplog.text

    def test_convenience_function_overrides(self, customer_model, tmp_path):
        output_file = tmp_path / "model.xml"
        export_to_exchange_xml(
            customer_model,
            output_file,
            options=ExportOptions(language_code="fr"),
            save_organization=True,
        )

        root = etree.parse(str(output_file)).getroot()
        assert root.find(_q("organization")) is not None
        assert root.find(".//a:label", NSMAP).get(XML_LANG) == "fr"
