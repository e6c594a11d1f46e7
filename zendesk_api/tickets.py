"""
Ticket endpoints
"""
import logging
from typing import Iterator, List, Optional, Sequence, Tuple

from zendesk_api.base import IncludeBuilder, add_options
from zendesk_api.models.page import Page
from zendesk_api.models.ticket import (
    Ticket,
    TicketListOptions,
    TicketListResponse,
    IncrementalTicketsResponse,
    TicketEnvelope,
    TicketsEnvelope,
)
from zendesk_api.sideload import SideLoader

logger = logging.getLogger(__name__)


class TicketMixin:
    """Ticket accessors, mixed into ZendeskClient on top of ZendeskClientBase"""

    def list_tickets(self, options: Optional[TicketListOptions] = None) -> Tuple[List[Ticket], Page]:
        """
        List tickets

        ref: https://developer.zendesk.com/api-reference/ticketing/tickets/tickets/#list-tickets
        """
        if options is None:
            options = TicketListOptions()

        path = add_options("/tickets.json", options)
        logger.info(f"Fetching tickets from: {path}")
        body = self.get(path)

        data = TicketListResponse.model_validate_json(body)
        logger.info(f"Fetched {len(data.tickets)} tickets")
        return data.tickets, data.page()

    def list_incremental_tickets(
        self,
        options: Optional[TicketListOptions] = None
    ) -> Tuple[List[Ticket], Optional[str], bool]:
        """
        Fetch one page of the incremental ticket export

        Returns the tickets, the URL of the next page and whether the end of
        the stream has been reached. Following the URL is left to the caller,
        see iter_incremental_tickets.

        ref: https://developer.zendesk.com/api-reference/ticketing/ticket-management/incremental_exports/
        """
        if options is None:
            options = TicketListOptions()

        path = add_options("/incremental/tickets.json", options)
        return self._get_incremental_page(path)

    def _get_incremental_page(self, path: str) -> Tuple[List[Ticket], Optional[str], bool]:
        logger.info(f"Fetching incremental tickets from: {path}")
        body = self.get(path)

        data = IncrementalTicketsResponse.model_validate_json(body)
        logger.info(f"Fetched {len(data.tickets)} incremental tickets (end_of_stream: {data.end_of_stream})")
        return data.tickets, data.continuation_url, data.end_of_stream

    def iter_incremental_tickets(
        self,
        options: Optional[TicketListOptions] = None,
        max_pages: int = 1000
    ) -> Iterator[Ticket]:
        """
        Walk the incremental export, yielding every ticket

        Stops at end of stream, when no continuation URL is returned, when
        the same URL comes back twice, or after max_pages pages. Errors
        propagate to the caller.
        """
        tickets, next_url, end_of_stream = self.list_incremental_tickets(options)
        seen_urls = set()
        page_count = 1
        total_fetched = len(tickets)
        yield from tickets

        while not end_of_stream and next_url:
            if next_url in seen_urls:
                logger.info("Next page URL already fetched, ending pagination")
                break
            if page_count >= max_pages:
                logger.warning(f"Reached maximum page limit ({max_pages}), stopping pagination")
                break

            seen_urls.add(next_url)
            tickets, next_url, end_of_stream = self._get_incremental_page(next_url)
            page_count += 1
            total_fetched += len(tickets)
            yield from tickets

        logger.info(f"Pagination completed: {page_count} pages processed, {total_fetched} tickets total")

    def get_ticket(self, ticket_id: int, *sideloaders: SideLoader) -> Ticket:
        """
        Get a ticket, optionally with sideloaded related records

        Each sideloader's key is added to ``include`` in the order given, and
        each one parses the response body after the ticket itself.

        ref: https://developer.zendesk.com/api-reference/ticketing/tickets/tickets/#show-ticket
        """
        builder = IncludeBuilder()
        for sideloader in sideloaders:
            builder.add_key(sideloader.key())

        path = builder.path(f"/tickets/{ticket_id}.json")
        logger.info(f"Fetching ticket {ticket_id}")
        body = self.get(path)

        ticket = TicketEnvelope.model_validate_json(body).ticket

        for sideloader in sideloaders:
            sideloader.unmarshal(body)

        return ticket

    def get_multiple_tickets(self, ticket_ids: Sequence[int]) -> List[Ticket]:
        """
        Get several tickets in one request

        A single malformed ticket fails the whole batch.

        ref: https://developer.zendesk.com/api-reference/ticketing/tickets/tickets/#show-multiple-tickets
        """
        ids = ",".join(str(ticket_id) for ticket_id in ticket_ids)
        path = add_options("/tickets/show_many.json", {"ids": ids})
        logger.info(f"Fetching {len(ticket_ids)} tickets")
        body = self.get(path)

        return TicketsEnvelope.model_validate_json(body).tickets

    def create_ticket(self, ticket: Ticket) -> Ticket:
        """
        Create a ticket and return the stored record, including its id

        ref: https://developer.zendesk.com/api-reference/ticketing/tickets/tickets/#create-ticket
        """
        logger.info(f"Creating ticket: {ticket.subject}")
        body = self.post("/tickets.json", {"ticket": ticket.to_payload()})

        created = TicketEnvelope.model_validate_json(body).ticket
        logger.info(f"Created ticket {created.id}")
        return created

    def update_ticket(self, ticket_id: int, ticket: Ticket) -> Ticket:
        """
        Update the fields set on ``ticket``

        ref: https://developer.zendesk.com/api-reference/ticketing/tickets/tickets/#update-ticket
        """
        logger.info(f"Updating ticket {ticket_id}")
        body = self.put(f"/tickets/{ticket_id}.json", {"ticket": ticket.to_payload()})

        return TicketEnvelope.model_validate_json(body).ticket
