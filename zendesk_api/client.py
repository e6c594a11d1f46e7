"""
Zendesk API client composed from the request base and the resource mixins
"""
from zendesk_api.base import ZendeskClientBase
from zendesk_api.tickets import TicketMixin
from zendesk_api.views import ViewMixin


class ZendeskClient(ZendeskClientBase, TicketMixin, ViewMixin):
    """
    Zendesk Support API client for tickets and views

    Construct with a config dict (``subdomain`` or ``base_url``, ``email``,
    ``token``, optional ``timeout``) or without one to read the environment.
    Holds no state beyond its configuration and a requests session.
    """
    pass


__all__ = ["ZendeskClient"]
