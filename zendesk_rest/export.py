"""
Script to export Zendesk users or tickets to CSV.

Walks every page of the chosen resource through the paginated list
endpoint and writes one CSV row per entity.
"""

import sys
import time
import argparse
import logging
from typing import Any, Dict, List, Optional

import pandas as pd
import requests

from zendesk_rest.client import ZendeskClient
from zendesk_rest.exceptions import ZendeskError
from zendesk_rest.models import Ticket, User
from zendesk_rest.monitoring import print_api_usage_report, reset_api_tracking

logger = logging.getLogger(__name__)


def test_authentication(client: ZendeskClient) -> bool:
    """
    Test authentication with Zendesk API.

    Returns:
        bool: True if authentication is successful, False otherwise
    """
    print("Testing Zendesk API authentication...")

    is_valid, error = client.validate_credentials()

    if is_valid:
        print("[SUCCESS] Authentication successful!")
        return True
    print(f"[ERROR] Authentication failed: {error}")
    return False


def format_user_for_export(user: User) -> Dict[str, Any]:
    return {
        'id': user.id,
        'name': user.name,
        'email': user.email,
        'role': user.role,
        'active': user.active,
        'organization_id': user.organization_id,
        'created_at': user.created_at.isoformat() if user.created_at else None,
        'updated_at': user.updated_at.isoformat() if user.updated_at else None,
        'tags': ', '.join(user.tags or []),
    }


def format_ticket_for_export(ticket: Ticket) -> Dict[str, Any]:
    return {
        'id': ticket.id,
        'subject': ticket.subject,
        'description': ticket.description,
        'status': ticket.status,
        'priority': ticket.priority,
        'type': ticket.type,
        'requester_id': ticket.requester_id,
        'assignee_id': ticket.assignee_id,
        'created_at': ticket.created_at.isoformat() if ticket.created_at else None,
        'updated_at': ticket.updated_at.isoformat() if ticket.updated_at else None,
        'tags': ', '.join(ticket.tags or []),
    }


def retrieve_records(client: ZendeskClient, resource: str, per_page: int) -> List[Dict[str, Any]]:
    """
    Retrieve every entity of a resource, formatted for export.

    Args:
        client: Zendesk client
        resource: ``users`` or ``tickets``
        per_page: Page size requested from the API

    Returns:
        List[Dict[str, Any]]: One flat record per entity
    """
    print(f"\nRetrieving {resource}...")

    if resource == "users":
        records = [format_user_for_export(u) for u in client.users.iter_all(per_page=per_page)]
    else:
        records = [format_ticket_for_export(t) for t in client.tickets.iter_all(per_page=per_page)]

    print(f"[SUCCESS] Retrieved {len(records)} {resource}")
    return records


def export_records_to_csv(records: List[Dict[str, Any]], filename: str) -> bool:
    """
    Export records to a CSV file.

    Args:
        records: Flat records to export
        filename: Destination CSV path

    Returns:
        bool: True if a file was written
    """
    if not records:
        print("Nothing to export.")
        return False

    print("\nCreating CSV export...")
    df = pd.DataFrame(records)

    # utf-8-sig so spreadsheet tools detect the encoding
    df.to_csv(filename, index=False, encoding='utf-8-sig')
    print(f"[SUCCESS] Exported {len(records)} rows to {filename}")
    return True


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Export Zendesk users or tickets to CSV")
    parser.add_argument(
        "--resource",
        type=str,
        choices=["users", "tickets"],
        default="tickets",
        help="Resource to export"
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="CSV file to write (default: zendesk_<resource>.csv)"
    )
    parser.add_argument(
        "--per-page",
        type=int,
        default=100,
        help="Page size requested from the API"
    )
    parser.add_argument(
        "--skip-report",
        action="store_true",
        help="Skip the API usage report at the end"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log every request"
    )
    return parser.parse_args(argv)


def run_export(args: argparse.Namespace, client: Optional[ZendeskClient] = None) -> int:
    """
    Run the export process.

    Returns:
        int: Process exit code
    """
    reset_api_tracking()
    start_time = time.time()

    print("=" * 60)
    print(f"ZENDESK {args.resource.upper()} EXPORT")
    print("=" * 60)

    owns_client = client is None
    try:
        client = client or ZendeskClient.from_env()
    except ZendeskError as e:
        print(f"[ERROR] {e}")
        return 1

    try:
        if not test_authentication(client):
            print("Exiting due to authentication failure.")
            return 1

        records = retrieve_records(client, args.resource, args.per_page)
        export_records_to_csv(records, args.output or f"zendesk_{args.resource}.csv")
    except (ZendeskError, requests.RequestException, OSError) as e:
        print(f"[ERROR] Failed to export {args.resource}: {e}")
        return 1
    finally:
        if owns_client:
            client.close()

    if not args.skip_report:
        print_api_usage_report()

    total_time = time.time() - start_time
    print(f"\nTotal script execution time: {total_time:.2f} seconds")
    print("\nExport process completed!")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Run the Zendesk CSV export."""
    args = parse_arguments(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return run_export(args)


if __name__ == "__main__":
    sys.exit(main())
