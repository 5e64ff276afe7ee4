#!/usr/bin/env python3
"""
Export recipe ingredient lines with their parsed item names and aisle
categories, and print how many lines fall into each category.

Useful for spotting ingredients that land in "Other" and need keywords.
"""

import argparse
import logging

from chef_utils.database import get_connection, get_recipe_ingredient_data
from chef_utils.ingredients import CATEGORIES, OTHER

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def main():
    parser = argparse.ArgumentParser(
        description="Report aisle categories of recipe ingredients"
    )
    parser.add_argument(
        "--db-path", type=str, default="data/chef.db", help="Path to the database file"
    )
    parser.add_argument(
        "--output",
        type=str,
        default="ingredient_categories.csv",
        help="CSV file to write the per-line report to",
    )
    parser.add_argument(
        "--top-other",
        type=int,
        default=20,
        help="Number of most frequent uncategorized item names to list",
    )
    args = parser.parse_args()

    conn = get_connection(args.db_path)
    try:
        df = get_recipe_ingredient_data(conn)
    finally:
        conn.close()

    df.to_csv(args.output, index=False)
    logger.info(f"Wrote {len(df)} rows to {args.output}")

    counts = df["category"].value_counts().reindex(list(CATEGORIES), fill_value=0)
    print("\nIngredient lines per category:")
    for category, count in counts.items():
        print(f"  {category:<16} {count}")

    other = df.loc[df["category"] == OTHER, "item_name"].value_counts()
    if not other.empty:
        print("\nMost frequent items without a category:")
        for name, count in other.head(args.top_other).items():
            print(f"  {name} ({count})")


if __name__ == "__main__":
    main()
