#!/usr/bin/env python3
# find_patterns.py
"""
Whole-word multi-pattern search over a text file.

Usage: python bin/find_patterns.py --text book.txt --patterns words.txt [--out matches.csv]
Either input may be omitted; the missing one is prompted for interactively.
"""
import argparse
import logging
import sys
from pathlib import Path
from typing import Callable, Dict, List, Sequence, Tuple

import pandas as pd
from ac import Automaton, build
from textio import load_patterns, read_text

MATCH_COLUMNS = ["PATTERN_INDEX", "PATTERN", "START", "END"]

# ---- prompt ------------------------------------------------------------------
def prompt_text_path(input_fn: Callable[[str], str] = input) -> Path:
    return Path(input_fn("Enter the source file for the text: "))

def prompt_pattern_list(input_fn: Callable[[str], str] = input) -> List[str]:
    raw = input_fn("Enter the number of patterns: ").strip()
    try:
        count = int(raw)
    except ValueError:
        raise ValueError(f"[prompt] Not a number of patterns: {raw!r}") from None
    if count < 0:
        raise ValueError(f"[prompt] Number of patterns cannot be negative: {count}")
    return [input_fn(f"Enter pattern {n}: ") for n in range(1, count + 1)]

def prompt_patterns(input_fn: Callable[[str], str] = input) -> Tuple[Path, List[str]]:
    """Ask for the source file, the pattern count and that many pattern lines."""
    return prompt_text_path(input_fn), prompt_pattern_list(input_fn)

# ---- output ------------------------------------------------------------------
def format_report(patterns: Sequence[str], occurrences: Dict[int, List[int]]) -> List[str]:
    lines = []
    for i in range(len(patterns)):
        positions = occurrences.get(i, [])
        shown = ", ".join(str(p) for p in positions) if positions else "no occurrences found"
        lines.append(f"Pattern {i + 1} occurs at positions: {shown}")
    return lines

def matches_frame(ac: Automaton, text: str) -> pd.DataFrame:
    rows = [
        {"PATTERN_INDEX": m.pattern, "PATTERN": m.text, "START": m.start, "END": m.end}
        for m in ac.finditer(text)
    ]
    return pd.DataFrame(rows, columns=MATCH_COLUMNS)

def write_matches(df: pd.DataFrame, out: Path) -> None:
    out = Path(out)
    out.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(out, index=False)

# ---- cli ---------------------------------------------------------------------
def parse_args(argv=None):
    ap = argparse.ArgumentParser(description="Find whole-word occurrences of several patterns in one pass.")
    ap.add_argument("--text", help="Text file to search (prompted if omitted)")
    ap.add_argument("--patterns", help="Pattern file: one per line, or a CSV/TSV column (prompted if omitted)")
    ap.add_argument("--pattern-col", default=None, help="Pattern column in a CSV/TSV pattern file")
    ap.add_argument("--encoding", default="utf-8")
    ap.add_argument("--out", default=None, help="Write matches as CSV here")
    ap.add_argument("--verbose", "-v", action="store_true", help="Verbose logging")
    return ap.parse_args(argv)

def main(argv=None, input_fn: Callable[[str], str] = input) -> int:
    args = parse_args(argv)
    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(message)s")

    try:
        text_path = Path(args.text) if args.text else prompt_text_path(input_fn)
        text = read_text(text_path, encoding=args.encoding)
        if args.patterns:
            patterns = load_patterns(Path(args.patterns), column=args.pattern_col, encoding=args.encoding)
        else:
            patterns = prompt_pattern_list(input_fn)
        logging.debug("Text %s: %d chars; %d patterns", text_path, len(text), len(patterns))

        ac = build(patterns)
        logging.debug("Automaton built with %d states", len(ac))
        occurrences = ac.search(text)
    except (OSError, EOFError, KeyError, ValueError) as e:
        logging.error("%s", e or type(e).__name__)
        return 2

    for line in format_report(patterns, occurrences):
        print(line)

    if args.out:
        df = matches_frame(ac, text)
        write_matches(df, Path(args.out))
        logging.info("✅ Matches -> %s | rows=%s", args.out, f"{len(df):,}")
    return 0

if __name__ == "__main__":
    sys.exit(main())
