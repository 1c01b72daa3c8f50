"""
Tests del borrador en memoria
"""
from visit_report.lifecycle import (
    VisitDraft,
    customer_snapshot,
    merge_fields,
    required_fields_for_section,
    with_complementary_percentages
)


def test_organic_percentage_sets_mineral_in_same_update():
    draft = merge_fields(VisitDraft(), {"organic_percentage": 37})
    
    assert draft.organic_percentage == 37
    assert draft.mineral_percentage == 63


def test_zero_percentage_yields_full_complement():
    draft = merge_fields(VisitDraft(), {"liquids_percentage": 0})
    assert draft.substrates_percentage == 100


def test_percentage_above_100_is_not_clamped():
    draft = merge_fields(VisitDraft(), {"german_purchase_percentage": 120})
    
    assert draft.german_purchase_percentage == 120
    assert draft.european_purchase_percentage == -20


def test_complement_is_never_taken_from_input():
    draft = merge_fields(VisitDraft(), {"organic_percentage": 30})
    draft = merge_fields(draft, {"mineral_percentage": 10})
    
    assert draft.mineral_percentage == 70


def test_complement_recomputed_when_primary_changes():
    draft = merge_fields(VisitDraft(), {"organic_percentage": 30})
    draft = merge_fields(draft, {"organic_percentage": 45})
    assert draft.mineral_percentage == 55


def test_cleared_primary_yields_full_complement():
    assert with_complementary_percentages({"organic_percentage": None})["mineral_percentage"] == 100


def test_merge_is_idempotent():
    partial = {"shop_name": "Acme Grow", "organic_percentage": 37, "training_topics": ["feeding"]}
    once = merge_fields(VisitDraft(visit_date="2024-01-01"), partial)
    twice = merge_fields(once, partial)
    
    assert once == twice


def test_last_write_wins_per_field():
    draft = merge_fields(VisitDraft(), {"shop_name": "First", "city": "Berlin"})
    draft = merge_fields(draft, {"shop_name": "Second"})
    
    assert draft.shop_name == "Second"
    assert draft.city == "Berlin"


def test_defaults_match_new_form():
    draft = VisitDraft()
    
    assert draft.id is None
    assert draft.is_draft
    assert draft.visit_duration == 60
    assert draft.product_visibility_score == 50
    assert draft.overall_satisfaction == 5
    assert draft.visit_date is not None
    assert draft.calculated_score is None
    assert draft.priority_level is None


def test_null_lists_from_stored_records_become_empty():
    draft = VisitDraft.model_validate({"id": "v1", "visit_photos": None, "liquid_brands": None})
    
    assert draft.visit_photos == []
    assert draft.liquid_brands == []


def test_customer_snapshot_copies_shop_and_contact_fields():
    snapshot = customer_snapshot({
        "id": "c1",
        "shop_name": "Acme Grow",
        "shop_type": "growshop",
        "city": "Berlin",
        "contact_person": "Anna Schmidt",
        "region": "North",
        "status": "active"
    })
    
    assert snapshot["customer_id"] == "c1"
    assert snapshot["shop_name"] == "Acme Grow"
    assert snapshot["contact_person"] == "Anna Schmidt"
    assert snapshot["zipcode"] is None
    assert "region" not in snapshot
    assert "status" not in snapshot


def test_only_first_section_has_required_fields():
    assert required_fields_for_section(0) == ("customer_id", "shop_name", "shop_type", "visit_purpose")
    assert required_fields_for_section(3) == ()
