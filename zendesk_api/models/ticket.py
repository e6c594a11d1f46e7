"""
Zendesk ticket data models
"""
from typing import Dict, List, Any, Optional, Union
from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field, field_validator, model_serializer

from zendesk_api.base import CustomFieldTypeError
from zendesk_api.models.page import PageOptions, PagedResponse


class TicketStatus(str, Enum):
    """Zendesk ticket status values"""
    NEW = "new"
    OPEN = "open"
    PENDING = "pending"
    HOLD = "hold"
    SOLVED = "solved"
    CLOSED = "closed"


class TicketPriority(str, Enum):
    """Zendesk ticket priority values"""
    LOW = "low"
    NORMAL = "normal"
    HIGH = "high"
    URGENT = "urgent"


class CustomFieldKind(str, Enum):
    """Which branch of the custom field value union is populated"""
    ABSENT = "absent"
    BOOL = "bool"
    STRING = "string"
    STRING_LIST = "string_list"


CustomFieldValue = Optional[Union[bool, str, List[str]]]


def decode_custom_field_value(value: Any) -> CustomFieldValue:
    """
    Decode a raw custom field value

    Null, bool and str pass through unchanged. A list must hold only
    strings. Anything else raises CustomFieldTypeError naming the type.
    """
    if value is None or isinstance(value, (bool, str)):
        return value

    if isinstance(value, list):
        values = []
        for item in value:
            if not isinstance(item, str):
                raise CustomFieldTypeError(item)
            values.append(item)
        return values

    raise CustomFieldTypeError(value)


class CustomField(BaseModel):
    """Ticket custom field whose value is null, a bool, a string or a list of strings"""
    id: int
    value: Any = None

    @field_validator("value", mode="before")
    @classmethod
    def validate_value(cls, v):
        return decode_custom_field_value(v)

    @model_serializer(mode="wrap")
    def serialize_with_null_value(self, handler):
        # null is meaningful here: it clears the field on update
        data = handler(self)
        data.setdefault("value", None)
        return data

    @property
    def kind(self) -> CustomFieldKind:
        if self.value is None:
            return CustomFieldKind.ABSENT
        if isinstance(self.value, bool):
            return CustomFieldKind.BOOL
        if isinstance(self.value, str):
            return CustomFieldKind.STRING
        return CustomFieldKind.STRING_LIST


class Via(BaseModel):
    """How the ticket was created"""
    channel: Optional[Union[int, str]] = None
    source: Optional[Dict[str, Any]] = None


class SatisfactionRating(BaseModel):
    id: Optional[int] = None
    score: Optional[str] = None
    comment: Optional[str] = None


class TicketComment(BaseModel):
    """Comment attached to a ticket create or update (request only)"""
    body: Optional[str] = None
    html_body: Optional[str] = None
    public: Optional[bool] = None
    author_id: Optional[int] = None
    uploads: Optional[List[str]] = None


class Slas(BaseModel):
    policy_metrics: Optional[List[Any]] = None


class MetricStatus(BaseModel):
    calendar: Optional[int] = None
    business: Optional[int] = None


class SlaPolicy(BaseModel):
    id: Optional[int] = None
    title: Optional[str] = None
    description: Optional[Any] = None


class MetricSla(BaseModel):
    target: Optional[int] = None
    business_hours: Optional[bool] = None
    policy: Optional[SlaPolicy] = None


class MetricEvent(BaseModel):
    """
    One ticket metric event

    ``status`` is present on update_status events, ``sla`` and ``deleted``
    on reply_time apply_sla events.
    """
    id: Optional[int] = None
    ticket_id: Optional[int] = None
    metric: Optional[str] = None
    instance_id: Optional[int] = None
    type: Optional[str] = None
    time: Optional[datetime] = None
    status: Optional[MetricStatus] = None
    sla: Optional[MetricSla] = None
    deleted: Optional[bool] = None


class MetricEvents(BaseModel):
    periodic_update_time: Optional[List[MetricEvent]] = None
    requester_wait_time: Optional[List[MetricEvent]] = None
    resolution_time: Optional[List[MetricEvent]] = None
    pausable_update_time: Optional[List[MetricEvent]] = None
    agent_work_time: Optional[List[MetricEvent]] = None
    reply_time: Optional[List[MetricEvent]] = None


class Ticket(BaseModel):
    """
    Zendesk ticket model

    https://developer.zendesk.com/api-reference/ticketing/tickets/tickets/
    """
    id: Optional[int] = None
    url: Optional[str] = None
    external_id: Optional[str] = None
    type: Optional[str] = None
    subject: Optional[str] = None
    raw_subject: Optional[str] = None
    description: Optional[str] = None
    priority: Optional[str] = None
    status: Optional[str] = None
    recipient: Optional[str] = None
    requester_id: Optional[int] = None
    submitter_id: Optional[int] = None
    assignee_id: Optional[int] = None
    organization_id: Optional[int] = None
    group_id: Optional[int] = None
    collaborator_ids: Optional[List[int]] = None
    follower_ids: Optional[List[int]] = None
    email_cc_ids: Optional[List[int]] = None
    forum_topic_id: Optional[int] = None
    problem_id: Optional[int] = None
    has_incidents: Optional[bool] = None
    due_at: Optional[datetime] = None
    tags: Optional[List[str]] = None
    custom_fields: Optional[List[CustomField]] = None
    via: Optional[Via] = None
    satisfaction_rating: Optional[SatisfactionRating] = None
    sharing_agreement_ids: Optional[List[int]] = None
    followup_ids: Optional[List[int]] = None
    via_followup_source_id: Optional[int] = None
    macro_ids: Optional[List[int]] = None
    ticket_form_id: Optional[int] = None
    brand_id: Optional[int] = None
    allow_channelback: Optional[bool] = None
    allow_attachments: Optional[bool] = None
    is_public: Optional[bool] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    # Request only: ids, emails or {"name": ..., "email": ...} objects
    collaborators: Optional[List[Union[int, str, Dict[str, Any]]]] = None

    # Request only, required on create
    comment: Optional[TicketComment] = None

    slas: Optional[Slas] = None
    metric_events: Optional[MetricEvents] = None

    def to_payload(self) -> Dict[str, Any]:
        """Serialize for a request body, leaving out unset fields"""
        return self.model_dump(mode="json", exclude_none=True)


class TicketListOptions(PageOptions):
    """Query parameters for the ticket list and incremental export endpoints"""

    # "assignee", "assignee.name", "created_at", "group", "id", "locale",
    # "requester", "requester.name", "status", "subject", "updated_at"
    sort_by: Optional[str] = None

    # "asc" or "desc"
    sort_order: Optional[str] = None

    # UNIX timestamp where an incremental export begins
    start_time: Optional[int] = None

    # Position in a cursor based incremental export
    cursor: Optional[str] = None

    # Comma separated sideloads
    include: Optional[str] = None

    @field_validator("start_time", mode="before")
    @classmethod
    def validate_start_time(cls, v):
        if isinstance(v, datetime):
            return int(v.timestamp())
        return v


class TicketListResponse(PagedResponse):
    """Envelope of GET /tickets.json"""
    tickets: List[Ticket] = Field(default_factory=list)


class IncrementalTicketsResponse(BaseModel):
    """Envelope of GET /incremental/tickets.json"""
    tickets: List[Ticket] = Field(default_factory=list)
    after_url: Optional[str] = None
    after_cursor: Optional[str] = None
    next_page: Optional[str] = None
    end_time: Optional[int] = None
    end_of_stream: bool = False
    count: Optional[int] = None

    @property
    def continuation_url(self) -> Optional[str]:
        return self.after_url or self.next_page


class TicketEnvelope(BaseModel):
    ticket: Ticket


class TicketsEnvelope(BaseModel):
    tickets: List[Ticket] = Field(default_factory=list)
