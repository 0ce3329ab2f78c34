"""Inspect indentation of an outline file and print the parsed tree."""

from __future__ import annotations

import argparse
from collections import Counter
from pathlib import Path

import httpx

from ideagraph.file_utils import read_text_file
from ideagraph.mindmap import build_mind_map
from ideagraph.outline_parser import iter_content_lines, measure_indent


def main() -> None:
    parser = argparse.ArgumentParser(description="Inspect outline indentation and the resulting tree.")
    parser.add_argument("--url", help="URL of a plain text outline")
    parser.add_argument("--file", help="Local text file path")
    parser.add_argument("--tab-size", type=int, default=None, help="Expand tabs to this tab stop width")
    args = parser.parse_args()

    if not args.url and not args.file:
        parser.error("Provide --url or --file")

    text = load_text(url=args.url, file_path=args.file)
    depths, whitespace = collect_stats(text, tab_size=args.tab_size)

    print("Indentation depths:")
    for depth, count in sorted(depths.items()):
        print(f"{depth}: {count}")

    print("\nLeading whitespace:")
    for kind, count in whitespace.most_common():
        print(f"{kind}: {count}")

    result = build_mind_map(text, source=args.file or args.url, tab_size=args.tab_size)
    print("\n" + result.summary)
    print("\n" + result.outline)


def load_text(*, url: str | None, file_path: str | None) -> str:
    if url:
        response = httpx.get(url, follow_redirects=True, timeout=15.0)
        response.raise_for_status()
        return response.text

    return read_text_file(Path(file_path or ""))


def collect_stats(text: str, *, tab_size: int | None = None) -> tuple[Counter, Counter]:
    depths = Counter()
    whitespace = Counter()

    for line in iter_content_lines(text):
        depths[measure_indent(line, tab_size=tab_size)] += 1
        prefix = line[: len(line) - len(line.lstrip())]
        if not prefix:
            whitespace["none"] += 1
        elif "\t" in prefix and " " in prefix:
            whitespace["mixed"] += 1
        elif "\t" in prefix:
            whitespace["tabs"] += 1
        else:
            whitespace["spaces"] += 1
    return depths, whitespace


if __name__ == "__main__":
    main()
