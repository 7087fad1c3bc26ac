#!/usr/bin/env python3
"""
Runner for the whole-word search pipeline: search, then summarize.

Usage: python run.py --text book.txt --patterns words.txt
"""

import argparse
import subprocess
import sys
import shlex
import logging
from pathlib import Path

def run(cmd_list):
    """Run a command (list form). Log and raise on failure."""
    nxt = " ".join(shlex.quote(str(p)) for p in cmd_list)
    logging.info("▶ %s", nxt)
    try:
        subprocess.run(cmd_list, check=True)
    except subprocess.CalledProcessError as e:
        logging.error("Command failed (exit %s): %s", e.returncode, nxt)
        raise

def ensure_path_exists(p: Path, should_exist=True):
    if should_exist and not p.exists():
        raise FileNotFoundError(f"Required file not found: {p}")

def parse_args(argv=None):
    ap = argparse.ArgumentParser(description="Run the whole-word pattern search pipeline.")
    ap.add_argument("--text", required=True, help="Text file to search")
    ap.add_argument("--patterns", required=True, help="Pattern file (one per line, or CSV/TSV)")
    ap.add_argument("--pattern-col", default=None, help="Pattern column for CSV/TSV pattern files")
    ap.add_argument("--encoding", default="utf-8", help="Encoding of the text and pattern files")
    ap.add_argument("--python", default=sys.executable, help="Python executable to run scripts (defaults to current interpreter)")
    ap.add_argument("--outdir", default="out", help="Outputs directory")
    ap.add_argument("--clean", action="store_true", help="Remove and recreate the outputs directory before running")
    ap.add_argument("--verbose", "-v", action="store_true", help="Verbose logging")
    return ap.parse_args(argv)

def build_commands(args, bin_dir: Path):
    """The pipeline as a list of argv lists."""
    out = Path(args.outdir)
    matches = out / "matches.csv"
    col = ["--pattern-col", args.pattern_col] if args.pattern_col else []
    search = [args.python, str(bin_dir / "find_patterns.py"),
              "--text", args.text, "--patterns", args.patterns, "--out", str(matches),
              "--encoding", args.encoding] + col
    if args.verbose:
        search.append("--verbose")
    summary = [args.python, str(bin_dir / "summarize_matches.py"),
               "--matches", str(matches), "--patterns", args.patterns,
               "--text-name", Path(args.text).name, "--encoding", args.encoding,
               "--out-dir", str(out)] + col
    return [search, summary]

def main(argv=None):
    args = parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(message)s")

    for p in (Path(args.text), Path(args.patterns)):
        logging.debug("Checking input %s", p)
        ensure_path_exists(p, should_exist=True)

    out = Path(args.outdir)
    if args.clean and out.exists():
        import shutil
        logging.info("Cleaning directory: %s", out)
        shutil.rmtree(out)
    out.mkdir(parents=True, exist_ok=True)

    try:
        for cmd in build_commands(args, Path(__file__).resolve().parent / "bin"):
            run(cmd)
    except Exception as exc:
        logging.exception("Pipeline failed: %s", exc)
        sys.exit(2)

    logging.info("✅ Done! Summary at: %s", out / "summary_matches.md")

if __name__ == "__main__":
    main()
