#!/usr/bin/env python3
"""
Re-classify stored shopping-list items with the current keyword table.

Run after changing the keyword table so existing lists pick up the new
aisle categories.

Usage:
    python scripts/recategorize_shopping_list.py --db-path data/chef.db
    python scripts/recategorize_shopping_list.py --db-path data/chef.db --dry-run
"""

import argparse
import logging

from chef_utils.database import get_connection
from chef_utils.shopping import recategorize_items

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def main():
    parser = argparse.ArgumentParser(
        description="Re-run the aisle classifier over stored shopping-list items"
    )
    parser.add_argument(
        "--db-path", type=str, default="data/chef.db", help="Path to the database file"
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Report how many items would change without writing",
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Log every changed item"
    )
    args = parser.parse_args()

    if args.verbose:
        logging.getLogger("chef_utils").setLevel(logging.DEBUG)

    conn = get_connection(args.db_path)
    try:
        changed = recategorize_items(conn, dry_run=args.dry_run)
    finally:
        conn.close()

    verb = "Would update" if args.dry_run else "Updated"
    logger.info(f"{verb} {changed} shopping items")


if __name__ == "__main__":
    main()
