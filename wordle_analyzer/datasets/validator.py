"""
Word-list validator.

Checks the pair of lists a Dictionary is built from:
  - answers_N.txt : words that can be picked as the secret
  - allowed_N.txt : every acceptable guess (must contain all answers)

Each line must hold one lowercase a–z word of exact length N. The report
records counts, duplicates, invalid lines, a SHA-256 of each raw file and
whether answers ⊆ allowed, as a plain dict so it can go straight into a
run manifest.

Typical use:
    rep = validate_wordlists(5, "answers_5.txt", "allowed_5.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

import hashlib
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Dict, List, Tuple


@dataclass
class WordListReport:
    """Diagnostics for one word-list file."""
    path: str
    exists: bool
    count: int = 0           # valid lines
    unique_count: int = 0    # valid lines after dedupe
    invalid_lines: int = 0
    sha256: str = ""         # empty when the file is missing

    @property
    def has_duplicates(self) -> bool:
        return self.count != self.unique_count


@dataclass
class DictionaryReport:
    N: int
    answers: WordListReport
    allowed: WordListReport
    answers_subset_allowed: bool = False
    passed: bool = False
    issues: List[str] = field(default_factory=list)


def _digest(path: Path) -> str:
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _scan(path: Path, N: int) -> Tuple[WordListReport, set]:
    """Read one list; blank, non-lowercase, non-alpha or wrong-length lines are invalid."""
    report = WordListReport(path=str(path), exists=path.exists())
    words: set = set()
    if not report.exists:
        return report, words

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if w and w.islower() and w.isalpha() and w.isascii() and len(w) == N:
                report.count += 1
                words.add(w)
            else:
                report.invalid_lines += 1

    report.unique_count = len(words)
    report.sha256 = _digest(path)
    return report, words


def validate_wordlists(N: int, answers_path: str, allowed_path: str) -> Dict:
    """
    Validate the answers/allowed lists for word length N.

    Returns a JSON-serializable dict (DictionaryReport schema). `passed` is
    strict: both lists present and non-empty, no invalid lines, answers ⊆ allowed.
    Duplicates are reported in `issues` but don't fail the check.
    """
    answers, answer_words = _scan(Path(answers_path), N)
    allowed, allowed_words = _scan(Path(allowed_path), N)
    rep = DictionaryReport(N=N, answers=answers, allowed=allowed)

    for name, r in (("answers", answers), ("allowed", allowed)):
        if not r.exists:
            rep.issues.append(f"{name} file not found: {r.path}")
            continue
        if r.count == 0:
            rep.issues.append(f"{name} file contains 0 valid words")
        if r.invalid_lines:
            rep.issues.append(f"{name} has {r.invalid_lines} invalid line(s)")
        if r.has_duplicates:
            rep.issues.append(f"{name} contains duplicate lines")

    if answers.exists and allowed.exists:
        missing = sorted(answer_words - allowed_words)
        rep.answers_subset_allowed = not missing
        if missing:
            rep.issues.append(f"answers not subset of allowed (e.g., {missing[:5]})")

    rep.passed = (
        rep.answers_subset_allowed
        and answers.count > 0 and allowed.count > 0
        and answers.invalid_lines == 0 and allowed.invalid_lines == 0
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    One-line summary, e.g.
        N=5 | answers=2310 (uniq=2310, sha=abc123...) | allowed=2636 (...) | answers⊆allowed=True | OK
    """
    a, b = report["answers"], report["allowed"]
    status = "OK" if report["passed"] else "FAIL"
    return (
        f"N={report['N']} | answers={a['count']} (uniq={a['unique_count']}, sha={a['sha256'][:12]}) "
        f"| allowed={b['count']} (uniq={b['unique_count']}, sha={b['sha256'][:12]}) "
        f"| answers⊆allowed={report['answers_subset_allowed']} | {status}"
    )
