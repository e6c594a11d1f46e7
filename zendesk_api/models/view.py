"""
Zendesk view data models

https://developer.zendesk.com/api-reference/ticketing/business-rules/views/
"""
from typing import Any, Dict, List, Optional, Union
from datetime import datetime
from pydantic import BaseModel, Field

from zendesk_api.models.page import PagedResponse


class ViewRestriction(BaseModel):
    """Who can see the view: a "User" or "Group" id, absent for everyone"""
    type: Optional[str] = None
    id: Optional[int] = None


class ViewColumn(BaseModel):
    # Standard columns use string ids, custom fields use numeric ids
    id: Optional[Union[int, str]] = None
    title: Optional[str] = None


class ViewOrdering(BaseModel):
    id: Optional[Union[int, str]] = None
    title: Optional[str] = None
    order: Optional[str] = None


class ViewExecution(BaseModel):
    """How matching tickets are grouped, sorted and displayed"""
    group_by: Optional[str] = None
    sort_by: Optional[str] = None
    group_order: Optional[str] = None
    sort_order: Optional[str] = None
    columns: Optional[List[ViewColumn]] = None
    group: Optional[ViewOrdering] = None
    sort: Optional[ViewOrdering] = None


class ViewCondition(BaseModel):
    field: Optional[str] = None
    operator: Optional[str] = None
    value: Optional[Any] = None


class ViewConditions(BaseModel):
    """Tickets match when every ``all`` condition and at least one ``any`` condition holds"""
    all: Optional[List[ViewCondition]] = None
    any: Optional[List[ViewCondition]] = None


class View(BaseModel):
    """Saved ticket filter with its display configuration"""
    id: Optional[int] = None
    url: Optional[str] = None
    title: Optional[str] = None
    active: Optional[bool] = None
    restriction: Optional[ViewRestriction] = None
    position: Optional[int] = None
    execution: Optional[ViewExecution] = None
    conditions: Optional[ViewConditions] = None
    description: Optional[str] = None
    default: Optional[bool] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def to_payload(self) -> Dict[str, Any]:
        """Serialize for a request body, leaving out unset fields"""
        return self.model_dump(mode="json", exclude_none=True)


class ViewCount(BaseModel):
    """Ticket count of a view at fetch time"""
    view_id: Optional[int] = None
    url: Optional[str] = None
    value: Optional[int] = None
    pretty: Optional[str] = None
    # False while Zendesk is still computing an up to date count
    fresh: bool = False


class ViewListResponse(PagedResponse):
    """Envelope of GET /views.json and /views/active.json"""
    views: List[View] = Field(default_factory=list)


class ViewEnvelope(BaseModel):
    view: View


class ViewCountEnvelope(BaseModel):
    view_count: ViewCount
