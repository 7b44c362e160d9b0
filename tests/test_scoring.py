import unittest

from wordle_app.models import InvalidInput, KeyStatus, LetterStatus
from wordle_app.services.scoring import aggregate, empty_key_statuses, score

C, P, A = LetterStatus.CORRECT, LetterStatus.PRESENT, LetterStatus.ABSENT


class TestScore(unittest.TestCase):
    def test_crate_against_react(self) -> None:
        self.assertEqual(score("CRATE", "REACT"), (P, P, C, P, P))

    def test_exact_match_is_all_correct(self) -> None:
        self.assertEqual(score("REACT", "REACT"), (C,) * 5)

    def test_case_insensitive(self) -> None:
        self.assertEqual(score("react", "REACT"), (C,) * 5)
        self.assertEqual(score("CrAtE", "react"), (P, P, C, P, P))

    def test_absent_letters(self) -> None:
        self.assertEqual(score("GHOST", "REACT"), (A, A, A, A, C))

    def test_repeated_letters_use_membership(self) -> None:
        # REACT holds a single E, yet every misplaced E is reported present
        self.assertEqual(score("EERIE", "REACT"), (P, C, P, A, P))

    def test_correct_iff_same_letter_same_position(self) -> None:
        pairs = [("CRATE", "REACT"), ("SLATE", "STALE"), ("PIANO", "PILOT"), ("LEMON", "MELON")]
        for guess, solution in pairs:
            for i, status in enumerate(score(guess, solution)):
                self.assertEqual(status is C, guess[i] == solution[i], (guess, solution, i))
                if status is not C:
                    self.assertEqual(status is P, guess[i] in solution, (guess, solution, i))

    def test_rejects_malformed_words(self) -> None:
        for guess, solution in [("CRAT", "REACT"), ("CRATES", "REACT"), ("CR4TE", "REACT"),
                                ("CRATE", "REAC"), ("CRATÉ", "REACT"), ("", "REACT")]:
            with self.assertRaises(InvalidInput):
                score(guess, solution)


class TestAggregate(unittest.TestCase):
    def test_first_guess(self) -> None:
        keys = aggregate(None, "CRATE", score("CRATE", "REACT"))
        self.assertEqual(len(keys), 26)
        self.assertEqual(keys["A"], KeyStatus.CORRECT)
        self.assertEqual(keys["C"], KeyStatus.PRESENT)
        self.assertEqual(keys["Z"], KeyStatus.UNSET)

    def test_does_not_mutate_prior(self) -> None:
        prior = empty_key_statuses()
        aggregate(prior, "GHOST", score("GHOST", "REACT"))
        self.assertTrue(all(status is KeyStatus.UNSET for status in prior.values()))

    def test_correct_is_never_demoted(self) -> None:
        keys = aggregate(None, "REACT", (C,) * 5)
        keys = aggregate(keys, "TRACE", (P, P, P, P, P))
        keys = aggregate(keys, "TRACE", (A, A, A, A, A))
        for letter in "REACT":
            self.assertEqual(keys[letter], KeyStatus.CORRECT)

    def test_absent_later_in_same_guess_keeps_present(self) -> None:
        keys = aggregate(None, "EERIE", (P, A, A, A, A))
        self.assertEqual(keys["E"], KeyStatus.PRESENT)

    def test_present_then_correct_upgrades(self) -> None:
        keys = aggregate(None, "CRATE", (P, P, C, P, P))
        keys = aggregate(keys, "REACT", (C,) * 5)
        self.assertEqual(keys["R"], KeyStatus.CORRECT)

    def test_status_count_must_match(self) -> None:
        with self.assertRaises(InvalidInput):
            aggregate(None, "CRATE", (C, C))
