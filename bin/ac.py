# ac.py
"""Aho–Corasick automaton with whole-word matching.

States live in parallel lists indexed by state id (root = 0). Terminal
lists are kept per state and are not merged along failure links; the
matcher walks the failure chain at every step instead.
"""
from collections import deque
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Sequence

ROOT = 0

@dataclass(frozen=True)
class Match:
    pattern: int      # index into the pattern set
    start: int
    end: int          # exclusive
    text: str         # matched pattern

def _word_boundary_ok(s: str, l: int, r: int) -> bool:
    left_ok  = (l == 0) or not s[l-1].isalpha()
    right_ok = (r == len(s)) or not s[r].isalpha()
    return left_ok and right_ok

class Automaton:
    def __init__(self, patterns: Sequence[str]):
        self.goto:   List[Dict[str, int]] = [dict()]   # root = 0
        self.fail:   List[int]            = [ROOT]
        self.out:    List[List[int]]      = [[]]
        self.is_end: List[bool]           = [False]
        self.depth:  List[int]            = [0]
        self.pats:   List[str]            = []

        for i, p in enumerate(patterns):
            if not isinstance(p, str):
                raise TypeError(f"[ac] pattern {i} is {type(p).__name__}, expected str")
            if not p:
                raise ValueError(f"[ac] empty pattern at index {i}")
            self._insert(p)
        self._build()

    def __len__(self) -> int:
        return len(self.goto)

    def _insert(self, pat: str) -> None:
        s = ROOT
        for ch in pat:
            if ch not in self.goto[s]:
                self.goto[s][ch] = len(self.goto)
                self.goto.append(dict()); self.out.append([]); self.fail.append(ROOT)
                self.is_end.append(False); self.depth.append(self.depth[s] + 1)
            s = self.goto[s][ch]
        self.is_end[s] = True
        self.out[s].append(len(self.pats))
        self.pats.append(pat)

    def _build(self) -> None:
        q = deque()
        for s in self.goto[ROOT].values():
            self.fail[s] = ROOT
            q.append(s)
        while q:
            r = q.popleft()
            for ch, s in self.goto[r].items():
                q.append(s)
                f = self.fail[r]
                while f != ROOT and ch not in self.goto[f]:
                    f = self.fail[f]
                self.fail[s] = self.goto[f].get(ch, ROOT)

    def _accept(self, text: str, pid: int, i: int) -> bool:
        pat = self.pats[pid]
        start = i - len(pat) + 1
        if start < 0:
            return False
        # re-check the window; the trie walk should already guarantee it
        if text[start:i+1] != pat:
            return False
        if len(pat) == 1:
            return True
        return _word_boundary_ok(text, start, i + 1)

    def finditer(self, text: str) -> Iterator[Match]:
        """Yield accepted matches in scan order (by end offset, then by
        candidate order along the failure chain)."""
        s = ROOT
        for i, ch in enumerate(text):
            while s != ROOT and ch not in self.goto[s]:
                s = self.fail[s]
            if ch not in self.goto[s]:
                s = ROOT
                continue
            s = self.goto[s][ch]

            node = s
            while node != ROOT:
                if self.is_end[node]:
                    for pid in self.out[node]:
                        if self._accept(text, pid, i):
                            n = len(self.pats[pid])
                            yield Match(pid, i - n + 1, i + 1, self.pats[pid])
                node = self.fail[node]

    def search(self, text: str) -> Dict[int, List[int]]:
        found: Dict[int, List[int]] = {pid: [] for pid in range(len(self.pats))}
        for m in self.finditer(text):
            found[m.pattern].append(m.start)
        return found

def build(patterns: Iterable[str]) -> Automaton:
    """Build a fully linked automaton; raises ValueError on an empty pattern."""
    return Automaton(list(patterns))

def search(automaton: Automaton, text: str) -> Dict[int, List[int]]:
    return automaton.search(text)
