"""
Tests de la lista de verificación previa al envío
"""
from visit_report.lifecycle import VisitDraft, evaluate_checklist, missing_required_fields


def ready_draft(**overrides) -> VisitDraft:
    values = {
        "customer_id": "c1",
        "shop_name": "Acme Grow",
        "shop_type": "growshop",
        "visit_purpose": "routine_check",
        "visit_photos": ["https://files.example.com/1.jpg"],
        "signature": "data:image/png;base64,AAA=",
        "signature_signer_name": "Anna Schmidt",
        "signature_date": "2024-01-01T10:00:00Z",
    }
    values.update(overrides)
    return VisitDraft(**values)


def test_complete_draft_passes_all_items():
    result = evaluate_checklist(ready_draft())
    
    assert result.photos_attached
    assert result.questionnaire_complete
    assert result.follow_up_added
    assert result.signature_attached
    assert result.all_pass
    assert result.failed_items() == []


def test_no_photos_fails_only_photos_item():
    result = evaluate_checklist(ready_draft(visit_photos=[]))
    
    assert not result.photos_attached
    assert not result.all_pass
    assert result.failed_items() == ["photos_attached"]


def test_questionnaire_requires_customer_and_shop_fields():
    for field in ("customer_id", "shop_name", "shop_type", "visit_purpose"):
        result = evaluate_checklist(ready_draft(**{field: ""}))
        assert not result.questionnaire_complete, field


def test_follow_up_required_without_notes_fails():
    result = evaluate_checklist(ready_draft(follow_up_required=True, follow_up_notes=""))
    assert not result.follow_up_added


def test_follow_up_required_with_notes_passes():
    result = evaluate_checklist(ready_draft(follow_up_required=True, follow_up_notes="Call next week"))
    assert result.follow_up_added


def test_follow_up_not_required_passes_regardless_of_notes():
    assert evaluate_checklist(ready_draft(follow_up_required=False, follow_up_notes="")).follow_up_added
    assert evaluate_checklist(ready_draft(follow_up_required=False, follow_up_notes="x")).follow_up_added


def test_signature_needs_image_name_and_timestamp():
    assert not evaluate_checklist(ready_draft(signature=None)).signature_attached
    assert not evaluate_checklist(ready_draft(signature_signer_name="")).signature_attached
    assert not evaluate_checklist(ready_draft(signature_date=None)).signature_attached


def test_checklist_works_on_plain_mappings():
    result = evaluate_checklist({"follow_up_required": True})
    assert result.failed_items() == [
        "photos_attached", "questionnaire_complete", "follow_up_added", "signature_attached"
    ]


def test_missing_required_fields_lists_empty_fields_in_order():
    missing = missing_required_fields({"customer_id": "c1", "shop_name": "", "visit_date": None})
    assert missing == ["shop_name", "shop_type", "visit_date", "visit_purpose"]


def test_missing_required_fields_empty_for_complete_draft():
    assert missing_required_fields(ready_draft()) == []
