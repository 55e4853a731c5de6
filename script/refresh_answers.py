"""
Refresh the bundled word lists from past Wordle answers.

What it does:
- Downloads the page with historical answers.
- Parses visible text and extracts rows like: YYYY-MM-DD (Day) <num> <ANSWER>
- Merges new answers into answers_5.txt (deduped, sorted).
- Makes sure every answer is also in allowed_5.txt, so the lists stay valid.

Usage:
    python -m script.refresh_answers
    python -m script.refresh_answers --dry-run
"""

import argparse
import re

import requests
from bs4 import BeautifulSoup

from wordle_analyzer.datasets import (ALLOWED_PATH, ANSWERS_PATH, pretty_summary, read_words,
                                      validate_wordlists, write_words)

URL = "https://wordlehints.co.uk/wordle-past-answers/"
ROW_RE = re.compile(r"(\d{4}-\d{2}-\d{2})\s*\([A-Za-z]+\)\s*\d+\s+([A-Z]{5})\b")


def fetch_answers(url: str = URL) -> list[str]:
    r = requests.get(url, timeout=30)
    r.raise_for_status()
    text = BeautifulSoup(r.text, "html.parser").get_text("\n", strip=True)
    return [m.group(2).lower() for m in ROW_RE.finditer(text)]


def main():
    ap = argparse.ArgumentParser(description="Merge past Wordle answers into the bundled lists")
    ap.add_argument("--url", default=URL)
    ap.add_argument("--answers", default=str(ANSWERS_PATH))
    ap.add_argument("--allowed", default=str(ALLOWED_PATH))
    ap.add_argument("--dry-run", action="store_true", help="report what would change, write nothing")
    args = ap.parse_args()

    answers = set(read_words(args.answers))
    allowed = set(read_words(args.allowed))
    fetched = set(fetch_answers(args.url))

    new_answers = sorted(fetched - answers)
    new_allowed = sorted((answers | fetched) - allowed)
    print(f"Fetched {len(fetched)} answers: {len(new_answers)} new, "
          f"{len(new_allowed)} missing from allowed")
    if args.dry_run:
        print(", ".join(new_answers[:20]))
        return

    write_words(sorted(answers | fetched), args.answers)
    write_words(sorted(allowed | answers | fetched), args.allowed)
    print(pretty_summary(validate_wordlists(5, args.answers, args.allowed)))


if __name__ == "__main__":
    main()
