#!/usr/bin/env python3
"""
Incremental ticket export script.
Walks the Zendesk incremental export and writes one JSON ticket per line.
"""

import sys
import logging
import argparse
from datetime import datetime, timedelta, timezone

from zendesk_api.client import ZendeskClient
from zendesk_api.core.config import get_settings
from zendesk_api.models.ticket import TicketListOptions


def export_tickets(client, start_time, max_pages, out=sys.stdout):
    """Write every exported ticket to ``out`` and return how many were written."""
    options = TicketListOptions(start_time=start_time)
    count = 0
    for ticket in client.iter_incremental_tickets(options, max_pages=max_pages):
        out.write(ticket.model_dump_json(exclude_none=True))
        out.write("\n")
        count += 1
    return count


def main():
    settings = get_settings()

    parser = argparse.ArgumentParser(description="Export Zendesk tickets incrementally")
    parser.add_argument(
        "--days",
        type=int,
        default=1,
        help="Export tickets updated in the last N days"
    )
    parser.add_argument(
        "--max-pages",
        type=int,
        default=1000,
        help="Stop after this many pages"
    )
    parser.add_argument(
        "--loglevel",
        choices=["debug", "info", "warning", "error"],
        default=settings.log_level.lower(),
        help="Log level"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, args.loglevel.upper()),
        stream=sys.stderr
    )

    client = ZendeskClient()
    if not client.is_enabled:
        print("Zendesk is not configured: set ZENDESK_SUBDOMAIN, ZENDESK_EMAIL and ZENDESK_TOKEN", file=sys.stderr)
        sys.exit(1)

    start_time = datetime.now(timezone.utc) - timedelta(days=args.days)
    count = export_tickets(client, start_time, args.max_pages)
    print(f"Exported {count} tickets", file=sys.stderr)


if __name__ == "__main__":
    main()
