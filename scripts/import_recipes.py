#!/usr/bin/env python3
"""
Load recipes from a JSON file into a CHEF SQLite database.

The file holds a list of recipe objects with at least title, description,
ingredients and steps. Recipes whose title the user already has are skipped.
"""

import argparse
import logging
import pathlib

from tqdm.auto import tqdm

from chef_utils.database import create_schema, get_connection
from chef_utils.recipes import create_recipe, list_recipes, load_recipes, upsert_user

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def main():
    """Import recipes from JSON into the database."""
    parser = argparse.ArgumentParser(description="Import recipes from a JSON file")
    parser.add_argument("json_file", type=pathlib.Path, help="Recipe JSON file")
    parser.add_argument(
        "--db-path", type=str, default="data/chef.db", help="Path to the database file"
    )
    parser.add_argument(
        "--user-id", type=str, required=True, help="Owner of the imported recipes"
    )
    parser.add_argument("--user-name", type=str, help="Display name of the owner")
    args = parser.parse_args()

    if not args.json_file.exists():
        logger.error(f"Recipe file not found: {args.json_file}")
        return

    conn = get_connection(args.db_path)
    create_schema(conn)
    if args.user_name:
        upsert_user(conn, args.user_id, args.user_name)

    existing = {r.title for r in list_recipes(conn, args.user_id)}
    added = 0
    for recipe in tqdm(load_recipes(args.json_file), desc="Importing recipes"):
        if recipe.title in existing:
            continue
        try:
            create_recipe(conn, args.user_id, recipe)
        except ValueError as e:
            logger.error(f"⚠ Skipping '{recipe.title}': {e}")
            continue
        existing.add(recipe.title)
        added += 1

    conn.close()
    logger.info(f"Imported {added} recipes")


if __name__ == "__main__":
    main()
