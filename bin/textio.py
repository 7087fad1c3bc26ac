# textio.py
from typing import List, Optional
import re
import pandas as pd
from pathlib import Path

PATTERN_COL_ALIASES = ["PATTERN", "PATTERNS", "KEYWORD", "TERM", "WORD"]
CSV_SUFFIXES = {".csv", ".tsv"}

# ---------- IO ----------
def read_text(path: Path, encoding: str = "utf-8") -> str:
    """Read a text file line by line; every line ends with exactly one newline."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"[read_text] Text file not found: {path}")
    with path.open(encoding=encoding) as f:
        return "".join(line.rstrip("\r\n") + "\n" for line in f)

def load_csv_any(path: Path, *, delimiter: Optional[str]=None, encoding: Optional[str]=None) -> pd.DataFrame:
    """Sniff delimiter if not provided; every cell comes back as a string."""
    return pd.read_csv(
        path,
        sep=delimiter if delimiter is not None else None,
        encoding=encoding or "utf-8",
        engine="python",
        dtype=str,
        keep_default_na=False,
    )

# ---------- Columns / headers ----------
def _norm_header(s) -> str:
    return re.sub(r"[^\w\s]", "", str(s)).strip().upper().replace(" ", "_")

def normalize_headers(df: pd.DataFrame) -> pd.DataFrame:
    """Canonicalize headers: trim, uppercase, spaces->underscores, strip punctuation."""
    df = df.copy()
    df.columns = [_norm_header(col) for col in df.columns]
    return df

def pick_col(df: pd.DataFrame, candidates: List[str], *, must=False, label=""):
    """Pick the first existing column among candidate aliases (case/spacing tolerant)."""
    cmap = {_norm_header(c): c for c in df.columns}
    for cand in candidates:
        key = _norm_header(cand)
        if key in cmap:
            return cmap[key]
    if must:
        raise KeyError(f"[pick_col] Missing required column for {label}: tried {candidates}")
    return None

# ---------- Patterns ----------
def load_patterns(path: Path, column: Optional[str] = None, encoding: str = "utf-8") -> List[str]:
    """Patterns from a CSV/TSV column, or one per line from any other file.

    Lines are taken verbatim apart from the line terminator, so leading or
    trailing spaces stay part of the pattern.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"[load_patterns] Pattern file not found: {path}")
    if path.suffix.lower() in CSV_SUFFIXES:
        df = load_csv_any(path, delimiter="\t" if path.suffix.lower() == ".tsv" else ",",
                          encoding=encoding)
        col = pick_col(df, [column] if column else PATTERN_COL_ALIASES, must=True, label="patterns")
        return df[col].tolist()
    with path.open(encoding=encoding) as f:
        return [line.rstrip("\r\n") for line in f]
