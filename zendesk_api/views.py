"""
View endpoints
"""
import logging
from typing import List, Optional, Tuple

from zendesk_api.base import add_options
from zendesk_api.models.page import Page, PageOptions
from zendesk_api.models.view import (
    View,
    ViewCount,
    ViewListResponse,
    ViewEnvelope,
    ViewCountEnvelope,
)

logger = logging.getLogger(__name__)


class ViewMixin:
    """View accessors, mixed into ZendeskClient on top of ZendeskClientBase"""

    def _list_views(self, path: str, options: Optional[PageOptions]) -> Tuple[List[View], Page]:
        path = add_options(path, options)
        logger.info(f"Fetching views from: {path}")
        body = self.get(path)

        data = ViewListResponse.model_validate_json(body)
        logger.info(f"Fetched {len(data.views)} views")
        return data.views, data.page()

    def list_views(self, options: Optional[PageOptions] = None) -> Tuple[List[View], Page]:
        """
        List all views, active and inactive

        ref: https://developer.zendesk.com/api-reference/ticketing/business-rules/views/#list-views
        """
        return self._list_views("/views.json", options)

    def list_active_views(self, options: Optional[PageOptions] = None) -> Tuple[List[View], Page]:
        """
        List active views only

        ref: https://developer.zendesk.com/api-reference/ticketing/business-rules/views/#list-active-views
        """
        return self._list_views("/views/active.json", options)

    def get_view(self, view_id: int) -> View:
        """ref: https://developer.zendesk.com/api-reference/ticketing/business-rules/views/#show-view"""
        logger.info(f"Fetching view {view_id}")
        body = self.get(f"/views/{view_id}.json")

        return ViewEnvelope.model_validate_json(body).view

    def get_view_count(self, view_id: int) -> ViewCount:
        """
        Get the ticket count of a view

        ``fresh`` is False while Zendesk is still refreshing the number.

        ref: https://developer.zendesk.com/api-reference/ticketing/business-rules/views/#count-tickets-in-view
        """
        logger.info(f"Fetching ticket count for view {view_id}")
        body = self.get(f"/views/{view_id}/count.json")

        return ViewCountEnvelope.model_validate_json(body).view_count

    def create_view(self, view: View) -> View:
        """ref: https://developer.zendesk.com/api-reference/ticketing/business-rules/views/#create-view"""
        logger.info(f"Creating view: {view.title}")
        body = self.post("/views.json", {"view": view.to_payload()})

        created = ViewEnvelope.model_validate_json(body).view
        logger.info(f"Created view {created.id}")
        return created

    def update_view(self, view_id: int, view: View) -> View:
        """ref: https://developer.zendesk.com/api-reference/ticketing/business-rules/views/#update-view"""
        logger.info(f"Updating view {view_id}")
        body = self.put(f"/views/{view_id}.json", {"view": view.to_payload()})

        return ViewEnvelope.model_validate_json(body).view
