"""
Report files for self-play runs: a per-game CSV and a JSON manifest, plus the
run id and commit hash that name and stamp them.

CSV pattern cells start with an apostrophe; "-GYY-" would otherwise be taken
for a formula by spreadsheet apps.
"""

from __future__ import annotations

import csv
import datetime as dt
import json
import subprocess
from pathlib import Path
from typing import Dict, List


def _as_text(cell: str) -> str:
    return f"'{cell}" if cell else cell


def write_csv(results: List[Dict], path: str, max_turns: int) -> str:
    """
    Columns:
      strategy, answer, success, guesses, time_ms,
      guess_1, patt_1, left_1, ..., guess_max_turns, patt_max_turns, left_max_turns

    Returns the path written.
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    fields = ["strategy", "answer", "success", "guesses", "time_ms"]
    for i in range(1, max_turns + 1):
        fields += [f"guess_{i}", f"patt_{i}", f"left_{i}"]

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()

        for r in results:
            row = {
                "strategy": r.get("strategy", "?"),
                "answer": r["answer"],
                "success": r["success"],
                "guesses": r["guesses"],
                "time_ms": round(float(r["time_ms"]), 3),
            }
            hist = r.get("history", [])
            left = r.get("remaining", [])
            for i in range(max_turns):
                g, patt = hist[i] if i < len(hist) else ("", "")
                row[f"guess_{i + 1}"] = g
                row[f"patt_{i + 1}"] = _as_text(patt)
                row[f"left_{i + 1}"] = left[i] if i < len(left) else ""
            w.writerow(row)

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """Dump `manifest` as indented JSON; returns the path written."""
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(json.dumps(manifest, indent=2) + "\n", encoding="utf-8")
    return str(p)


def timestamp_id() -> str:
    """Run id from the current UTC time, e.g. 20250820T024121Z."""
    return f"{dt.datetime.now(dt.timezone.utc):%Y%m%dT%H%M%SZ}"


def git_commit_or_unknown() -> str:
    """Short hash of HEAD, or "unknown" when git or the checkout is missing."""
    try:
        proc = subprocess.run(["git", "rev-parse", "--short", "HEAD"],
                              capture_output=True, text=True, check=True)
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
    return proc.stdout.strip() or "unknown"
