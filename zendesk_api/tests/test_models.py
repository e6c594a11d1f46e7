"""
Unit tests for Zendesk resource models

Tests:
- Custom field value decoding for each branch
- Custom field type errors
- Ticket parsing of nested structures
- Request serialization
- Option models
"""
import pytest
from datetime import datetime, timezone
from pydantic import ValidationError

from zendesk_api.base import CustomFieldTypeError
from zendesk_api.models import (
    CustomField,
    CustomFieldKind,
    Page,
    Ticket,
    TicketComment,
    TicketListOptions,
    TicketPriority,
    TicketStatus,
    View,
    ViewCount,
    decode_custom_field_value,
)


class TestDecodeCustomFieldValue:
    """Test the explicit custom field decode function"""

    @pytest.mark.parametrize("value", [None, True, False, "", "745", "true"])
    def test_scalar_values_pass_through(self, value):
        result = decode_custom_field_value(value)
        assert result == value
        assert type(result) is type(value)

    def test_string_list_keeps_order(self):
        assert decode_custom_field_value(["b", "a", "c"]) == ["b", "a", "c"]

    def test_empty_list(self):
        assert decode_custom_field_value([]) == []

    @pytest.mark.parametrize("value, type_name", [
        (["a", 1], "int"),
        (["a", None], "NoneType"),
        (["a", ["b"]], "list"),
        (["a", {"b": 1}], "dict"),
        ([True], "bool"),
    ])
    def test_non_string_list_element_rejected(self, value, type_name):
        with pytest.raises(CustomFieldTypeError) as exc_info:
            decode_custom_field_value(value)

        assert exc_info.value.value_type == type_name
        assert str(exc_info.value) == f"{type_name} is an invalid type for custom field value"

    @pytest.mark.parametrize("value, type_name", [
        (5, "int"),
        (1.5, "float"),
        ({"a": "b"}, "dict"),
    ])
    def test_other_types_rejected(self, value, type_name):
        with pytest.raises(CustomFieldTypeError, match=f"{type_name} is an invalid type"):
            decode_custom_field_value(value)

    def test_error_is_a_value_error(self):
        with pytest.raises(ValueError):
            decode_custom_field_value(3)


class TestCustomField:
    """Test CustomField model decoding and serialization"""

    def test_absent_value(self):
        field = CustomField.model_validate_json('{"id": 27642}')
        assert field.id == 27642
        assert field.value is None
        assert field.kind == CustomFieldKind.ABSENT

    def test_null_value(self):
        field = CustomField.model_validate_json('{"id": 27642, "value": null}')
        assert field.value is None
        assert field.kind == CustomFieldKind.ABSENT

    def test_bool_value(self):
        field = CustomField.model_validate_json('{"id": 1, "value": true}')
        assert field.value is True
        assert field.kind == CustomFieldKind.BOOL

    def test_string_value(self):
        field = CustomField.model_validate_json('{"id": 1, "value": "745"}')
        assert field.value == "745"
        assert field.kind == CustomFieldKind.STRING

    def test_string_list_value(self):
        field = CustomField.model_validate_json('{"id": 1, "value": ["x", "y"]}')
        assert field.value == ["x", "y"]
        assert field.kind == CustomFieldKind.STRING_LIST

    @pytest.mark.parametrize("raw", ['5', '1.5', '{"a": 1}', '["a", 2]'])
    def test_invalid_value_fails_validation(self, raw):
        with pytest.raises(ValidationError, match="is an invalid type for custom field value"):
            CustomField.model_validate_json(f'{{"id": 1, "value": {raw}}}')

    def test_invalid_value_on_construction(self):
        with pytest.raises(ValidationError, match="int is an invalid type for custom field value"):
            CustomField(id=1, value=42)

    def test_null_value_is_serialized(self):
        assert CustomField(id=1).model_dump(exclude_none=True) == {"id": 1, "value": None}

    def test_null_value_survives_ticket_payload(self):
        ticket = Ticket(subject="Clear field", custom_fields=[CustomField(id=7)])
        assert ticket.to_payload() == {
            "subject": "Clear field",
            "custom_fields": [{"id": 7, "value": None}]
        }


class TestTicket:
    """Test Ticket parsing and serialization"""

    def test_parse_full_ticket(self):
        raw = """
        {
            "id": 35436,
            "subject": "Help, my printer is on fire!",
            "status": "open",
            "priority": "high",
            "requester_id": 20978392,
            "collaborator_ids": [35334, 234],
            "tags": ["enterprise", "other_tag"],
            "due_at": null,
            "created_at": "2009-07-20T22:55:29Z",
            "via": {"channel": "web", "source": {"from": {}, "to": {}, "rel": null}},
            "satisfaction_rating": {"id": 1234, "score": "good", "comment": "Great support!"},
            "custom_fields": [
                {"id": 27642, "value": "745"},
                {"id": 27648, "value": ["yes", "no"]},
                {"id": 27650, "value": false}
            ],
            "metric_events": {
                "reply_time": [
                    {
                        "id": 1,
                        "ticket_id": 35436,
                        "metric": "reply_time",
                        "instance_id": 1,
                        "type": "apply_sla",
                        "time": "2020-01-01T00:00:00Z",
                        "sla": {
                            "target": 60,
                            "business_hours": false,
                            "policy": {"id": 9, "title": "Standard", "description": null}
                        }
                    }
                ],
                "agent_work_time": [
                    {
                        "id": 2,
                        "metric": "agent_work_time",
                        "type": "update_status",
                        "time": "2020-01-01T00:00:00Z",
                        "status": {"calendar": 10, "business": 5}
                    }
                ]
            },
            "unknown_key": "ignored"
        }
        """
        ticket = Ticket.model_validate_json(raw)

        assert ticket.id == 35436
        assert ticket.collaborator_ids == [35334, 234]
        assert ticket.created_at == datetime(2009, 7, 20, 22, 55, 29, tzinfo=timezone.utc)
        assert ticket.due_at is None
        assert ticket.via.channel == "web"
        assert ticket.satisfaction_rating.score == "good"
        assert [field.value for field in ticket.custom_fields] == ["745", ["yes", "no"], False]
        assert ticket.metric_events.reply_time[0].sla.policy.title == "Standard"
        assert ticket.metric_events.agent_work_time[0].status.business == 5

    def test_invalid_custom_field_fails_whole_ticket(self):
        raw = '{"id": 1, "custom_fields": [{"id": 2, "value": "ok"}, {"id": 3, "value": 4}]}'
        with pytest.raises(ValidationError, match="int is an invalid type"):
            Ticket.model_validate_json(raw)

    def test_payload_omits_unset_fields(self):
        ticket = Ticket(
            subject="Printer on fire",
            priority="urgent",
            comment=TicketComment(body="The smoke is very colorful.")
        )
        assert ticket.to_payload() == {
            "subject": "Printer on fire",
            "priority": "urgent",
            "comment": {"body": "The smoke is very colorful."}
        }

    def test_payload_serializes_datetimes(self):
        ticket = Ticket(due_at=datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc))
        assert ticket.to_payload()["due_at"] == "2024-05-01T12:00:00Z"

    def test_status_and_priority_enums_serialize_as_strings(self):
        ticket = Ticket(status=TicketStatus.SOLVED, priority=TicketPriority.URGENT)
        assert ticket.to_payload() == {"status": "solved", "priority": "urgent"}

    def test_parsed_status_maps_to_enum(self):
        ticket = Ticket.model_validate_json('{"status": "hold", "priority": "low"}')
        assert TicketStatus(ticket.status) is TicketStatus.HOLD
        assert TicketPriority(ticket.priority) is TicketPriority.LOW


class TestTicketListOptions:
    """Test ticket list options"""

    def test_defaults_are_unset(self):
        assert TicketListOptions().model_dump(exclude_none=True) == {}

    def test_start_time_from_datetime(self):
        start = datetime(2024, 1, 1, tzinfo=timezone.utc)
        assert TicketListOptions(start_time=start).start_time == 1704067200

    def test_start_time_from_int(self):
        assert TicketListOptions(start_time=1332034771).start_time == 1332034771


class TestViewModels:
    """Test view and view count models"""

    def test_parse_view(self):
        raw = """
        {
            "id": 25,
            "title": "Tickets updated <12 Hours",
            "active": true,
            "restriction": {"type": "User", "id": 4},
            "execution": {
                "group_by": "status",
                "sort_by": "updated_at",
                "sort_order": "desc",
                "columns": [{"id": "status", "title": "Status"}, {"id": 5, "title": "Custom"}],
                "group": {"id": "status", "title": "Status", "order": "desc"}
            },
            "conditions": {
                "all": [{"field": "status", "operator": "less_than", "value": "solved"}],
                "any": [{"field": "group_id", "operator": "is", "value": 12}]
            }
        }
        """
        view = View.model_validate_json(raw)

        assert view.active is True
        assert view.restriction.type == "User"
        assert view.execution.columns[1].id == 5
        assert view.conditions.all[0].operator == "less_than"
        assert view.conditions.any[0].value == 12

    def test_view_count_freshness(self):
        count = ViewCount.model_validate_json('{"view_id": 25, "value": 719, "pretty": "~700", "fresh": true}')
        assert count.value == 719
        assert count.fresh is True
        assert ViewCount().fresh is False


class TestPage:
    def test_has_next(self):
        assert Page(next_page="https://example.zendesk.com/api/v2/tickets.json?page=2").has_next
        assert not Page().has_next
        assert not Page().has_prev
