import unittest

from ac import ROOT, Match, build, search


def brute_force(patterns, text):
    found = {i: [] for i in range(len(patterns))}
    for i, pat in enumerate(patterns):
        for start in range(len(text) - len(pat) + 1):
            if not text.startswith(pat, start):
                continue
            end = start + len(pat)
            if len(pat) > 1:
                if start > 0 and text[start - 1].isalpha():
                    continue
                if end < len(text) and text[end].isalpha():
                    continue
            found[i].append(start)
    return found


class BuildTest(unittest.TestCase):
    def test_build_index(self):
        # Aho, Corasick. Efficient String Matching: An Aid to Bibliographic
        # Search. Communications of the ACM, 18(6), 333-340. 1975.
        keywords = ['he', 'she', 'his', 'hers']
        ac = build(keywords)
        self.assertEqual(ac.goto, [
            {'h': 1, 's': 3},
            {'e': 2, 'i': 6},
            {'r': 8},
            {'h': 4},
            {'e': 5},
            {},
            {'s': 7},
            {},
            {'s': 9},
            {},
        ])
        self.assertEqual(ac.fail, [0, 0, 0, 0, 1, 2, 0, 3, 0, 3])
        self.assertEqual(ac.depth, [0, 1, 2, 1, 2, 3, 2, 3, 3, 4])
        # terminal lists are not merged along failure links
        self.assertEqual(ac.out, [[], [], [0], [], [], [1], [], [2], [], [3]])
        self.assertEqual([s for s, end in enumerate(ac.is_end) if end], [2, 5, 7, 9])

    def test_failure_link_invariants(self):
        ac = build(['abcab', 'bca', 'cab', 'b', 'abab', 'babb', 'x'])
        self.assertEqual(ac.fail[ROOT], ROOT)
        for s in range(1, len(ac)):
            self.assertNotEqual(ac.fail[s], s)
            self.assertLess(ac.depth[ac.fail[s]], ac.depth[s])

    def test_each_index_terminates_at_its_own_state(self):
        patterns = ['ab', 'abc', 'ab', 'bc', 'c']
        ac = build(patterns)
        for pid, pat in enumerate(patterns):
            s = ROOT
            for ch in pat:
                s = ac.goto[s][ch]
            holders = [state for state, out in enumerate(ac.out) if pid in out]
            self.assertEqual(holders, [s])

    def test_duplicates_kept_in_input_order(self):
        ac = build(['ab', 'x', 'ab'])
        self.assertEqual(ac.out[ac.goto[ac.goto[ROOT]['a']]['b']], [0, 2])

    def test_empty_pattern_rejected(self):
        with self.assertRaises(ValueError) as ctx:
            build(['foo', '', 'bar'])
        self.assertIn('index 1', str(ctx.exception))

    def test_non_string_pattern_rejected(self):
        with self.assertRaises(TypeError):
            build(['foo', 3])

    def test_accepts_any_iterable(self):
        ac = build(p for p in ['a', 'b'])
        self.assertEqual(ac.pats, ['a', 'b'])


class SearchTest(unittest.TestCase):
    def test_single_character_matches_anywhere(self):
        self.assertEqual(search(build(['s']), 'ushers'), {0: [1, 5]})

    def test_embedded_words_are_excluded(self):
        ac = build(['he', 'she', 'hers', 'his'])
        self.assertEqual(search(ac, 'ushers he saw'), {0: [7], 1: [], 2: [], 3: []})

    def test_duplicate_patterns_share_offsets(self):
        ac = build(['ab', 'ab'])
        self.assertEqual(search(ac, '1ab-ab'), {0: [1, 4], 1: [1, 4]})
        # letters on either side rule both out
        self.assertEqual(search(ac, 'cabdab'), {0: [], 1: []})

    def test_empty_pattern_set(self):
        self.assertEqual(search(build([]), 'anything at all'), {})

    def test_empty_text(self):
        self.assertEqual(search(build(['foo', 'b']), ''), {0: [], 1: []})

    def test_suffix_found_through_failure_chain(self):
        ac = build(['he', '-he'])
        self.assertEqual(list(ac.finditer('-he')), [
            Match(1, 0, 3, '-he'),
            Match(0, 1, 3, 'he'),
        ])

    def test_suffix_single_character(self):
        self.assertEqual(search(build(['she', 'e']), 'she'), {0: [0], 1: [2]})

    def test_digits_and_punctuation_are_boundaries(self):
        ac = build(['foo'])
        self.assertEqual(search(ac, 'XXfooXX'), {0: []})
        self.assertEqual(search(ac, '12foo34'), {0: [2]})
        self.assertEqual(search(ac, 'foo'), {0: [0]})
        self.assertEqual(search(ac, '(foo), foo.'), {0: [1, 7]})

    def test_non_ascii_letters_block_matches(self):
        ac = build(['ab'])
        self.assertEqual(search(ac, 'éab ab'), {0: [4]})

    def test_overlapping_repeats(self):
        self.assertEqual(search(build(['aa']), 'aaa'), {0: []})
        self.assertEqual(search(build(['a']), 'aaa'), {0: [0, 1, 2]})

    def test_pattern_longer_than_text(self):
        self.assertEqual(search(build(['longword']), 'long'), {0: []})

    def test_window_mismatch_is_dropped(self):
        ac = build(['ab'])
        # pattern text no longer agrees with the trie path
        ac.pats[0] = 'xy'
        self.assertEqual(search(ac, 'ab'), {0: []})
        self.assertEqual(list(ac.finditer('ab ab')), [])

    def test_reset_after_mismatch(self):
        ac = build(['ad', 'bac'])
        self.assertEqual(search(ac, 'la bac'), {0: [], 1: [3]})

    def test_search_does_not_mutate(self):
        ac = build(['he', 'she', 'hers', 'his'])
        before = ([dict(g) for g in ac.goto], list(ac.fail), [list(o) for o in ac.out])
        first = search(ac, 'she said hers, his, he')
        second = search(ac, 'she said hers, his, he')
        self.assertEqual(first, second)
        self.assertEqual(before, ([dict(g) for g in ac.goto], list(ac.fail), [list(o) for o in ac.out]))

    def test_matches_agree_with_brute_force(self):
        patterns = ['he', 'she', 'his', 'hers', 'e', 'a b', 'ab', 'b', 'bab', 'he ']
        texts = [
            'ushers he saw',
            'she sells; he buys. hers? his!',
            'ab bab abab a b a-b',
            'he he\nhe',
            '',
            'e',
        ]
        ac = build(patterns)
        for text in texts:
            got = search(ac, text)
            self.assertEqual(got, brute_force(patterns, text), text)
            for pid, starts in got.items():
                self.assertEqual(starts, sorted(set(starts)))
                for start in starts:
                    self.assertEqual(text[start:start + len(patterns[pid])], patterns[pid])


if __name__ == '__main__':
    unittest.main()
