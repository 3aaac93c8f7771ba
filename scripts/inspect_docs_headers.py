"""Inspect header usage across a docs directory to aid writing navigation."""

from __future__ import annotations

import argparse
from collections import Counter
from pathlib import Path

from docsnav.headers import extract_headers
from docsnav.schemas import Header


def main() -> None:
    parser = argparse.ArgumentParser(description="Inspect Markdown header levels and anchor ids.")
    parser.add_argument("docs_dir", help="Directory with the Markdown files")
    parser.add_argument("--duplicates-only", action="store_true", help="Show only ids used more than once per file")
    args = parser.parse_args()

    docs_dir = Path(args.docs_dir)
    if not docs_dir.is_dir():
        parser.error(f"Not a directory: {docs_dir}")

    for path in sorted(docs_dir.glob("*.md")):
        headers = extract_headers(path.read_text(encoding="utf-8"))
        levels, ids = collect_stats(headers)

        print(f"{path.name}:")
        if not args.duplicates_only:
            for level, count in sorted(levels.items()):
                print(f"  h{level}: {count}")
        for anchor, count in ids.most_common():
            if count < 2:
                break
            print(f"  duplicate id {anchor!r}: {count}")


def collect_stats(headers: list[Header]) -> tuple[Counter, Counter]:
    levels = Counter()
    ids = Counter()

    for header in headers:
        levels[header.level] += 1
        ids[header.id] += 1
    return levels, ids


if __name__ == "__main__":
    main()
