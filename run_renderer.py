#!/usr/bin/env python3
"""
CLI script to render rich-text documents.

Reads JSON document trees (or HTML files), renders them to HTML or flattens
them to plain text, and prints or saves a JSON report with one entry per file.

Environment (.env is loaded):
  RICH_TEXT_LOG_LEVEL  log level name, default INFO
"""

import argparse
import json
import os
from pathlib import Path

from dotenv import load_dotenv
load_dotenv()

from rich_text.exceptions import DocumentLoadError
from rich_text.loader import load_blocks, load_document
from rich_text.logger import level_from_name
from rich_text.main import RichTextRenderer


def main():
    parser = argparse.ArgumentParser(description="Render rich-text documents to HTML or plain text")
    parser.add_argument("files", nargs="+", help="JSON or HTML documents to process")
    parser.add_argument("--blocks", "-b", help="JSON file mapping block ids to content")
    parser.add_argument("--text", "-t", action="store_true", help="Output plain text instead of HTML")
    parser.add_argument("--first-paragraph", action="store_true", help="Plain text: first paragraph only")
    parser.add_argument("--max-length", type=int, help="Plain text: truncate to this many characters")
    parser.add_argument("--ignore-tag", action="append", default=[], help="Plain text: skip this tag (repeatable)")
    parser.add_argument("--strip-styles", action="store_true", help="Remove inline styles from every element")
    parser.add_argument("--output", "-o", help="Output JSON file")
    args = parser.parse_args()

    log_level = level_from_name(os.getenv("RICH_TEXT_LOG_LEVEL"))

    blocks = {}
    if args.blocks:
        try:
            blocks = load_blocks(args.blocks)
        except DocumentLoadError as e:
            print(f"✗ {e.message}")
            raise SystemExit(1)

    renderer = RichTextRenderer(
        log_level=log_level,
        blocks=blocks,
        strip_styles=args.strip_styles
    )

    results = []

    for filepath in args.files:
        path = Path(filepath)
        print(f"Rendering: {path.name}")

        try:
            document = load_document(path)
        except DocumentLoadError as e:
            results.append({"file": path.name, "status": "error", **e.to_response()})
            print(f"  ✗ {e.message}")
            continue

        if args.text:
            text = renderer.plain_text(
                document,
                first_paragraph=args.first_paragraph,
                max_length=args.max_length,
                ignore_tags=tuple(args.ignore_tag)
            )
            results.append({"file": path.name, "status": "success", "text": text})
            print(f"  ✓ {len(text)} chars of text")
        else:
            html = renderer.render_html(document)
            results.append({"file": path.name, "status": "success", "html": html})
            print(f"  ✓ {len(html)} chars of HTML")

    output = json.dumps(results, indent=2, ensure_ascii=False)

    if args.output:
        Path(args.output).write_text(output, encoding="utf-8")
        print(f"\nSaved to: {args.output}")
    else:
        print("\n" + output)


if __name__ == "__main__":
    main()
