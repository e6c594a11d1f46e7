from .page import Page, PageOptions, PagedResponse
from .ticket import (
    Ticket,
    TicketStatus,
    TicketPriority,
    TicketComment,
    TicketListOptions,
    CustomField,
    CustomFieldKind,
    CustomFieldValue,
    decode_custom_field_value,
    Via,
    SatisfactionRating,
    MetricEvent,
    MetricEvents,
    Slas,
)
from .view import (
    View,
    ViewCount,
    ViewCondition,
    ViewConditions,
    ViewExecution,
    ViewRestriction,
)
from .user import User, Group, Organization

__all__ = [
    "Page",
    "PageOptions",
    "PagedResponse",
    "Ticket",
    "TicketStatus",
    "TicketPriority",
    "TicketComment",
    "TicketListOptions",
    "CustomField",
    "CustomFieldKind",
    "CustomFieldValue",
    "decode_custom_field_value",
    "Via",
    "SatisfactionRating",
    "MetricEvent",
    "MetricEvents",
    "Slas",
    "View",
    "ViewCount",
    "ViewCondition",
    "ViewConditions",
    "ViewExecution",
    "ViewRestriction",
    "User",
    "Group",
    "Organization",
]
