import unittest
from dataclasses import replace

from wordle_app.models import (
    EmptyRow, GameAlreadyOver, GameStatus, IncompleteGuess, InvalidInput, KeyStatus,
    NoRowsAvailable, ScoredRow
)
from wordle_app.services import game_engine
from wordle_app.services.scoring import aggregate, score

MISSES = ["CRATE", "SLATE", "AUDIO", "PIANO", "GHOST", "LEMON"]


def typed(state, word):
    for ch in word:
        state = game_engine.append_letter(state, ch)
    return state


def play(state, word):
    return game_engine.submit_guess(typed(state, word))


class TestNewGame(unittest.TestCase):
    def test_defaults_to_fallback_solution(self) -> None:
        state = game_engine.new_game()
        self.assertEqual(state.solution, "REACT")

    def test_fresh_state_every_time(self) -> None:
        for _ in range(3):
            state = game_engine.new_game("react")
            self.assertEqual(state.solution, "REACT")
            self.assertEqual(state.rows, (EmptyRow(),) * 6)
            self.assertEqual(state.current_guess, "")
            self.assertIs(state.status, GameStatus.IN_PROGRESS)
            self.assertTrue(all(s is KeyStatus.UNSET for s in state.key_statuses.values()))

    def test_adopts_supplied_rows_and_status(self) -> None:
        row = ScoredRow("CRATE", score("CRATE", "REACT"))
        rows = (row,) + (EmptyRow(),) * 5
        state = game_engine.new_game("REACT", rows=rows, status=GameStatus.IN_PROGRESS)
        self.assertEqual(state.rows[0], row)
        self.assertEqual(game_engine.current_row_index(state), 1)

    def test_rejects_wrong_row_count(self) -> None:
        with self.assertRaises(InvalidInput):
            game_engine.new_game("REACT", rows=(EmptyRow(),) * 5)


class TestTyping(unittest.TestCase):
    def setUp(self) -> None:
        self.state = game_engine.new_game("REACT")

    def test_append_and_backspace(self) -> None:
        state = typed(self.state, "CRA")
        self.assertEqual(state.current_guess, "CRA")
        state = game_engine.backspace(state)
        self.assertEqual(state.current_guess, "CR")

    def test_buffer_caps_at_five(self) -> None:
        self.assertEqual(typed(self.state, "CRATES").current_guess, "CRATE")

    def test_non_letters_ignored(self) -> None:
        state = typed(self.state, "c1-?")
        self.assertEqual(state.current_guess, "")
        self.assertEqual(game_engine.append_letter(self.state, "AB").current_guess, "")

    def test_backspace_on_empty_is_noop(self) -> None:
        self.assertIs(game_engine.backspace(self.state), self.state)

    def test_no_typing_after_game_over(self) -> None:
        won = play(self.state, "REACT").state
        self.assertEqual(game_engine.append_letter(won, "A").current_guess, "")


class TestSubmit(unittest.TestCase):
    def setUp(self) -> None:
        self.state = game_engine.new_game("REACT")

    def test_scores_row_and_keys(self) -> None:
        result = play(self.state, "CRATE")
        statuses = score("CRATE", "REACT")
        self.assertEqual(result.state.rows[0], ScoredRow("CRATE", statuses))
        self.assertEqual(result.state.key_statuses, aggregate(None, "CRATE", statuses))
        self.assertEqual(result.state.current_guess, "")
        self.assertIs(result.state.status, GameStatus.IN_PROGRESS)
        self.assertEqual(result.message, "Keep guessing!")

    def test_win_on_first_row(self) -> None:
        result = play(self.state, "REACT")
        self.assertIs(result.state.status, GameStatus.WON)
        self.assertEqual(result.message, "You won!")
        self.assertEqual(len(game_engine.scored_rows(result.state)), 1)

    def test_win_on_last_row(self) -> None:
        state = self.state
        for word in MISSES[:5]:
            state = play(state, word).state
        result = play(state, "REACT")
        self.assertIs(result.state.status, GameStatus.WON)

    def test_six_misses_lose(self) -> None:
        state = self.state
        for i, word in enumerate(MISSES):
            result = play(state, word)
            state = result.state
            expected = GameStatus.LOST if i == 5 else GameStatus.IN_PROGRESS
            self.assertIs(state.status, expected)
        self.assertEqual(result.message, "Game over! The word was REACT")
        self.assertIsNone(game_engine.current_row_index(state))

    def test_incomplete_guess(self) -> None:
        state = typed(self.state, "CRA")
        with self.assertRaises(IncompleteGuess):
            game_engine.submit_guess(state)
        self.assertEqual(state.current_guess, "CRA")

    def test_game_already_over(self) -> None:
        won = play(self.state, "REACT").state
        with self.assertRaises(GameAlreadyOver):
            game_engine.submit_guess(replace(won, current_guess="CRATE"))

    def test_no_rows_available_while_in_progress(self) -> None:
        row = ScoredRow("CRATE", score("CRATE", "REACT"))
        full = game_engine.new_game("REACT", rows=(row,) * 6)
        with self.assertRaises(NoRowsAvailable):
            game_engine.submit_guess(typed(full, "SLATE"))

    def test_input_state_untouched(self) -> None:
        state = typed(self.state, "CRATE")
        play(self.state, "CRATE")
        game_engine.submit_guess(state)
        self.assertEqual(state.rows, (EmptyRow(),) * 6)
        self.assertEqual(state.current_guess, "CRATE")
