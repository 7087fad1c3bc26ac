#!/usr/bin/env python3
# summarize_matches.py
import argparse
from pathlib import Path
from typing import Sequence

import pandas as pd
from textio import load_patterns, normalize_headers

SUMMARY_COLUMNS = ["PATTERN_INDEX", "PATTERN", "COUNT", "FIRST", "LAST"]

def summarize(matches: pd.DataFrame, patterns: Sequence[str]) -> pd.DataFrame:
    """One row per pattern (zero counts included) plus a TOTAL row."""
    matches = normalize_headers(matches)
    for key in ("PATTERN_INDEX", "START"):
        if key not in matches.columns:
            raise KeyError(f"[summarize] Missing {key} in matches. Columns: {list(matches.columns)}")

    grouped = matches.groupby("PATTERN_INDEX")["START"]
    counts = grouped.size()
    first = grouped.min()
    last = grouped.max()

    rows = []
    for i, pat in enumerate(patterns):
        n = int(counts.get(i, 0))
        rows.append({
            "PATTERN_INDEX": i,
            "PATTERN": pat,
            "COUNT": n,
            "FIRST": int(first[i]) if n else None,
            "LAST": int(last[i]) if n else None,
        })
    total = sum(r["COUNT"] for r in rows)
    rows.append({"PATTERN_INDEX": None, "PATTERN": "TOTAL", "COUNT": total, "FIRST": None, "LAST": None})
    out = pd.DataFrame(rows, columns=SUMMARY_COLUMNS)
    out[["PATTERN_INDEX", "FIRST", "LAST"]] = out[["PATTERN_INDEX", "FIRST", "LAST"]].astype("Int64")
    return out

def to_markdown(summary: pd.DataFrame, text_name: str = "") -> str:
    try:
        tbl_md = summary.to_markdown(index=False)
    except ImportError:
        tbl_md = summary.to_string(index=False)

    total = int(summary["COUNT"].iloc[-1]) if len(summary) else 0
    found = int((summary["COUNT"].iloc[:-1] > 0).sum())
    n_pats = len(summary) - 1
    return "\n".join([
        "# Match Summary (Whole Words)",
        "",
        f"- Source text: **{text_name or '-'}**",
        f"- Patterns: **{n_pats:,}** ({found:,} with at least one occurrence)",
        f"- Total occurrences: **{total:,}**",
        "",
        "## Breakdown table",
        tbl_md,
    ])

def parse_args(argv=None):
    ap = argparse.ArgumentParser(description="Per-pattern counts for a matches CSV")
    ap.add_argument("--matches", required=True, help="CSV written by find_patterns.py --out")
    ap.add_argument("--patterns", required=True, help="Same pattern file given to find_patterns.py")
    ap.add_argument("--pattern-col", default=None)
    ap.add_argument("--text-name", default="", help="Shown in the markdown header")
    ap.add_argument("--encoding", default="utf-8", help="Encoding of the pattern file")
    ap.add_argument("--out-dir", required=True)
    return ap.parse_args(argv)

def main(argv=None):
    args = parse_args(argv)

    out_dir = Path(args.out_dir); out_dir.mkdir(parents=True, exist_ok=True)
    matches = pd.read_csv(args.matches)
    patterns = load_patterns(Path(args.patterns), column=args.pattern_col, encoding=args.encoding)

    summary = summarize(matches, patterns)
    summary_csv = out_dir / "summary_matches.csv"
    summary_md  = out_dir / "summary_matches.md"
    summary.to_csv(summary_csv, index=False)
    summary_md.write_text(to_markdown(summary, args.text_name), encoding="utf-8")

    print("\nSummary:")
    print(summary.to_string(index=False))
    print(f"✅ Summary -> {summary_csv} | {summary_md}")

if __name__ == "__main__":
    main()
