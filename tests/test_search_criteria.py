"""
Tests for search criteria and reference serialization.
"""

import json

import pytest
from basyx.aas import model
from pydantic import ValidationError

from aas_client.exceptions import InvalidPayloadError
from aas_client.query import (
    DEFAULT_SEARCH_CRITERIA,
    AASBasicDiscoverySearchCriteria,
    AASDescriptorSearchCriteria,
    ConceptDescriptionSearchCriteria,
    GlobalAssetIdentification,
    SearchCriteria,
    SerializationSearchCriteria,
    ShellSearchCriteria,
    SpecificAssetIdentification,
    SubmodelSearchCriteria,
)
from aas_client.utils.encoding import base64_decode, base64_encode, base64_url_encode
from aas_client.utils.references import reference_to_string


def _external_reference(value: str) -> model.ExternalReference:
    return model.ExternalReference((model.Key(model.KeyTypes.GLOBAL_REFERENCE, value),))


def _decode_value(query: str, name: str) -> str:
    prefix = f"{name}="
    assert query.startswith(prefix)
    return query[len(prefix):]


class TestDiscoverySearchCriteria:
    """Tests for AASBasicDiscoverySearchCriteria."""

    def test_standard_encodes_json_array(self):
        """Test all asset ids are sent as one base64 encoded JSON array."""
        criteria = AASBasicDiscoverySearchCriteria(
            asset_ids=[
                SpecificAssetIdentification(key="serialNumber", value="1234"),
                GlobalAssetIdentification(value="urn:asset:1"),
            ]
        )
        decoded = json.loads(base64_decode(_decode_value(criteria.to_query_string(), "assetIds")))

        assert isinstance(decoded, list)
        assert [(item["name"], item["value"]) for item in decoded] == [
            ("serialNumber", "1234"),
            ("globalAssetId", "urn:asset:1"),
        ]

    def test_fallback_encodes_separately(self):
        """Test fallback mode encodes each asset id on its own."""
        criteria = AASBasicDiscoverySearchCriteria(
            asset_ids=[
                SpecificAssetIdentification(key="a", value="1"),
                SpecificAssetIdentification(key="b", value="2"),
            ],
            fallback=True,
        )
        encoded = _decode_value(criteria.to_query_string(), "assetIds").split(",")
        decoded = [json.loads(base64_decode(value)) for value in encoded]

        assert [(item["name"], item["value"]) for item in decoded] == [("a", "1"), ("b", "2")]

    def test_modes_differ_for_same_input(self):
        """Test standard and fallback mode encode the same asset ids differently."""
        asset_ids = [
            SpecificAssetIdentification(key="a", value="1"),
            SpecificAssetIdentification(key="b", value="2"),
        ]

        standard = AASBasicDiscoverySearchCriteria(asset_ids=asset_ids).to_query_string()
        fallback = AASBasicDiscoverySearchCriteria(asset_ids=asset_ids, fallback=True).to_query_string()

        assert standard != fallback
        assert "," not in standard
        assert fallback.count(",") == 1

    def test_empty(self):
        """Test no asset ids render nothing."""
        assert AASBasicDiscoverySearchCriteria().to_query_string() == ""

    def test_invalid_asset_id(self):
        """Test values that are no asset identification are rejected."""
        criteria = AASBasicDiscoverySearchCriteria(asset_ids=["not-an-asset-id"])
        with pytest.raises(InvalidPayloadError):
            criteria.to_query_string()


class TestResourceSearchCriteria:
    """Tests for shell, submodel, concept description and serialization criteria."""

    def test_default_renders_nothing(self):
        """Test default criteria render the empty string."""
        assert DEFAULT_SEARCH_CRITERIA.to_query_string() == ""
        assert ShellSearchCriteria().to_query_string() == ""
        assert SubmodelSearchCriteria().to_query_string() == ""
        assert ConceptDescriptionSearchCriteria().to_query_string() == ""
        assert SerializationSearchCriteria().to_query_string() == ""

    def test_shell_id_short(self):
        """Test shells filtered by idShort."""
        assert ShellSearchCriteria(id_short="Robot").to_query_string() == "idShort=Robot"

    def test_submodel_semantic_id(self):
        """Test semantic id is rendered as base64 encoded reference string."""
        criteria = SubmodelSearchCriteria(semantic_id=_external_reference("urn:sem:1"), id_short="Nameplate")
        expected = base64_encode("[ExternalRef](GlobalReference)urn:sem:1")

        assert criteria.to_query_string() == f"semanticId={expected}&idShort=Nameplate"

    def test_concept_description_order(self):
        """Test concept description filters are rendered in a fixed order."""
        criteria = ConceptDescriptionSearchCriteria(
            id_short="Temperature",
            is_case_of=_external_reference("urn:case"),
            data_specification=_external_reference("urn:ds"),
        )
        names = [parameter.split("=", 1)[0] for parameter in criteria.to_query_string().split("&")]

        assert names == ["isCaseOf", "idShort", "dataSpecificationRef"]

    def test_serialization_ids(self):
        """Test shell and submodel ids are base64 encoded and comma separated."""
        criteria = SerializationSearchCriteria(aas_ids=["aas1", "aas2"], submodel_ids=["sm1"])
        expected = (
            f"aasIds={base64_encode('aas1')},{base64_encode('aas2')}"
            f"&submodelIds={base64_encode('sm1')}"
        )

        assert criteria.to_query_string() == expected

    def test_base_class_is_abstract(self):
        """Test only concrete criteria variants can be created."""
        with pytest.raises(TypeError):
            SearchCriteria()

    def test_descriptor_criteria(self):
        """Test shell descriptor filters."""
        criteria = AASDescriptorSearchCriteria(asset_kind=model.AssetKind.TYPE, asset_type="urn:t")

        assert criteria.to_query_string() == f"assetKind=Type&assetType={base64_url_encode('urn:t')}"

    def test_criteria_are_frozen(self):
        """Test criteria cannot be changed after creation."""
        criteria = ShellSearchCriteria(id_short="a")
        with pytest.raises(ValidationError):
            criteria.id_short = "b"


class TestReferenceToString:
    """Tests for reference string serialization."""

    def test_model_reference(self):
        """Test model references with several keys."""
        reference = model.ModelReference(
            (
                model.Key(model.KeyTypes.SUBMODEL, "urn:sm:1"),
                model.Key(model.KeyTypes.PROPERTY, "temperature"),
            ),
            model.Property,
        )

        assert reference_to_string(reference) == "[ModelRef](Submodel)urn:sm:1, (Property)temperature"

    def test_external_reference(self):
        """Test external references."""
        assert reference_to_string(_external_reference("urn:x")) == "[ExternalRef](GlobalReference)urn:x"

    def test_referred_semantic_id(self):
        """Test the referred semantic id is nested into the type prefix."""
        reference = model.ExternalReference(
            (model.Key(model.KeyTypes.GLOBAL_REFERENCE, "urn:x"),),
            referred_semantic_id=_external_reference("urn:sem"),
        )

        assert reference_to_string(reference) == (
            "[ExternalRef- [ExternalRef](GlobalReference)urn:sem -](GlobalReference)urn:x"
        )

    def test_not_a_reference(self):
        """Test non-reference values are rejected."""
        with pytest.raises(InvalidPayloadError):
            reference_to_string("urn:x")
