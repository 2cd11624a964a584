import unittest

from commit_format.format.commit_type import COMMIT_TYPE_ALIASES, CommitType, find_commit_type


class TestFindCommitType(unittest.TestCase):
    def test_find_commit_type_cases(self) -> None:
        cases = [
            ("fail", CommitType.NONE),
            ("b", CommitType.BUILD),
            ("bUild", CommitType.BUILD),
            ("builds", CommitType.BUILD),
            ("ci", CommitType.CI),
            ("ch", CommitType.CHORE),
            ("chore", CommitType.CHORE),
            ("chOreS", CommitType.CHORE),
            ("d", CommitType.DOC),
            ("Doc", CommitType.DOC),
            ("docs", CommitType.DOC),
            ("fe", CommitType.FEATURE),
            ("feAt", CommitType.FEATURE),
            ("feats", CommitType.FEATURE),
            ("feature", CommitType.FEATURE),
            ("features", CommitType.FEATURE),
            ("fi", CommitType.FIX),
            ("Fix", CommitType.FIX),
            ("fixEs", CommitType.FIX),
            ("p", CommitType.PERF),
            ("perf", CommitType.PERF),
            ("pErFs", CommitType.PERF),
            ("performance", CommitType.PERF),
            ("performances", CommitType.PERF),
            ("r", CommitType.REFACTOR),
            ("reFactor", CommitType.REFACTOR),
            ("reFactors", CommitType.REFACTOR),
            ("s", CommitType.STYLE),
            ("style", CommitType.STYLE),
            ("stYles", CommitType.STYLE),
            ("t", CommitType.TEST),
            ("Test", CommitType.TEST),
            ("tests", CommitType.TEST),
        ]
        for token, expected in cases:
            with self.subTest(token=token):
                self.assertIs(find_commit_type(token), expected)

    def test_every_alias_in_every_casing(self) -> None:
        for ctype, aliases in COMMIT_TYPE_ALIASES.items():
            for alias in aliases:
                mixed = "".join(
                    ch.upper() if i % 2 else ch for i, ch in enumerate(alias)
                )
                for variant in (alias, alias.upper(), mixed):
                    with self.subTest(variant=variant):
                        self.assertIs(find_commit_type(variant), ctype)

    def test_unrecognized_tokens(self) -> None:
        for token in ["", "not-a-type", "buildsomething", "fea", "none", " feat", "feat "]:
            with self.subTest(token=token):
                self.assertIs(find_commit_type(token), CommitType.NONE)

    def test_alias_sets_are_disjoint(self) -> None:
        seen = set()
        for aliases in COMMIT_TYPE_ALIASES.values():
            self.assertFalse(seen & aliases)
            seen |= aliases

    def test_alias_table_is_read_only(self) -> None:
        with self.assertRaises(TypeError):
            COMMIT_TYPE_ALIASES[CommitType.CI] = frozenset({"pipeline"})  # type: ignore[index]

    def test_keywords(self) -> None:
        self.assertEqual(CommitType.FEATURE.keyword, "feat")
        self.assertEqual(CommitType.DOC.keyword, "doc")
        self.assertEqual(CommitType.NONE.keyword, "none")
        self.assertIn("features", CommitType.FEATURE.aliases)
        self.assertEqual(CommitType.NONE.aliases, frozenset())


if __name__ == "__main__":
    unittest.main()
