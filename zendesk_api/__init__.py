"""
Zendesk Support API client
"""

from .client import ZendeskClient
from .base import (
    ZendeskError,
    AuthenticationError,
    RateLimitError,
    ZendeskAPIError,
    CustomFieldTypeError,
)
from .sideload import (
    SideLoader,
    UsersSideLoader,
    GroupsSideLoader,
    OrganizationsSideLoader,
)
from .models import (
    Ticket,
    TicketListOptions,
    CustomField,
    View,
    ViewCount,
    Page,
    PageOptions,
)

__all__ = [
    "ZendeskClient",
    "ZendeskError",
    "AuthenticationError",
    "RateLimitError",
    "ZendeskAPIError",
    "CustomFieldTypeError",
    "SideLoader",
    "UsersSideLoader",
    "GroupsSideLoader",
    "OrganizationsSideLoader",
    "Ticket",
    "TicketListOptions",
    "CustomField",
    "View",
    "ViewCount",
    "Page",
    "PageOptions",
]
