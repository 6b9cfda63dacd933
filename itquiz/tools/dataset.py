"""
Converts a spreadsheet export (CSV) into the quiz dataset JSON.

Sheet layout, one quiz per row:
- column 1: question
- column 2: answer
- columns 3+: alternative answers (blank cells ignored)

A first row whose first cell is ``question`` is treated as a header.
"""

from __future__ import annotations

import argparse
import csv
import json
import logging
import sys
from pathlib import Path
from typing import Iterable, List

from ..core.logging import setup_logging
from ..repositories.quiz_repository import QuizRepository

logger = logging.getLogger("itquiz.tools.dataset")


def rows_to_entries(rows: Iterable[List[str]]) -> List[dict]:
    entries: List[dict] = []
    for lineno, row in enumerate(rows, start=1):
        cells = [c.strip() for c in row]
        if lineno == 1 and cells and cells[0].lower() == "question":
            continue
        question = cells[0] if len(cells) > 0 else ""
        answer = cells[1] if len(cells) > 1 else ""
        if not question and not answer:
            continue
        if not question or not answer:
            logger.warning("Row %d has an empty %s", lineno, "question" if not question else "answer")
        item: dict = {"question": question, "answer": answer}
        alternatives = [c for c in cells[2:] if c]
        if alternatives:
            item["alternativeAnswers"] = alternatives
        entries.append(item)
    return entries


def convert(src: Path, dst: Path) -> int:
    with open(src, encoding="utf-8-sig", newline="") as fh:
        entries = rows_to_entries(csv.reader(fh))

    # same checks the server applies on startup
    QuizRepository.from_dicts(entries)

    dst.write_text(json.dumps(entries, ensure_ascii=False, indent=2) + "\n", encoding="utf-8")
    logger.info("Wrote %d quiz entries to %s", len(entries), dst)
    return len(entries)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Build the quiz dataset JSON from a CSV sheet export")
    parser.add_argument("src", type=Path, help="CSV file exported from the quiz sheet")
    parser.add_argument("-o", "--output", type=Path, default=Path("quiz.json"), help="Output JSON path")
    args = parser.parse_args(argv)

    setup_logging()
    try:
        convert(args.src, args.output)
    except (OSError, ValueError) as exc:
        logger.error("Conversion failed: %s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
