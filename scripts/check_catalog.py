"""
Catalog check script for the Active Residents topic catalog.

Usage:
  - Check the default catalog: python scripts/check_catalog.py
  - Check another data file: python scripts/check_catalog.py --path ./my_topics.json
  - Also run sample searches: python scripts/check_catalog.py --search pothole --search bin

Behavior:
  - Loads the catalog through `TopicCatalog.from_file`, which enforces unique
    ids, the closed category set and consistent department contacts.
  - Prints the departments and, optionally, the ranked results for each query.
"""

import argparse
import sys

from residents.core.errors import CatalogError
from residents.core.settings import settings
from residents.services.topic_catalog import TopicCatalog
from residents.services.topic_search import rank_topics


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--path", default=str(settings.catalog_path), help="Catalog JSON file to check")
    parser.add_argument("--search", action="append", default=[], help="Sample query to rank (repeatable)")
    parser.add_argument("--limit", type=int, default=settings.SEARCH_DEFAULT_LIMIT, help="Results per query")
    args = parser.parse_args()

    try:
        catalog = TopicCatalog.from_file(args.path)
    except CatalogError as e:
        print(f"Catalog check FAILED: {e}")
        sys.exit(1)

    print(f"Catalog OK: {len(catalog)} topics (version {catalog.version})")
    for department in catalog.list_departments():
        print(f"  {department.name}: {department.head} <{department.email}>")

    for query in args.search:
        print(f"\nSEARCH {query!r}:")
        for topic in rank_topics(catalog.topics, query, args.limit):
            print(f"  [{topic.id}] {topic.title} ({topic.department})")


if __name__ == "__main__":
    main()
