# tests/test_game.py

import unittest

from backend.errors import InvalidConfigurationError
from backend.game import GameSession, LOSS, WIN
from evaluation.leaderboard import Leaderboard
from tests.test_board import POCKET_BORDER, POCKET_MINES, POCKET_ZEROS

CORNER_MINES = [(0, 0), (2, 2)]


def small_session(**kwargs):
    return GameSession(rows=3, cols=3, num_mines=2, mine_positions=CORNER_MINES, **kwargs)


class TestGameSession(unittest.TestCase):

    def test_initial_state(self):
        session = GameSession()
        state = session.get_state()
        self.assertEqual(state["dimensions"], (9, 9))
        self.assertEqual(state["num_mines"], 10)
        self.assertEqual(state["score"], 0)
        self.assertEqual(state["elapsed_seconds"], 0)
        self.assertEqual(state["mines_remaining"], 10)
        self.assertFalse(state["game_over"])
        self.assertIsNone(state["result"])

    def test_invalid_configuration(self):
        with self.assertRaises(InvalidConfigurationError):
            GameSession(rows=2, cols=2, num_mines=4)

    def test_pocket_reveal_scores_zeros_and_border(self):
        session = GameSession(rows=9, cols=9, num_mines=10, mine_positions=POCKET_MINES)
        result = session.reveal(2, 3)
        self.assertIsNone(result)
        self.assertEqual(len(POCKET_ZEROS), 6)
        self.assertEqual(session.score, 10 * 6 + 5 * len(POCKET_BORDER))

    def test_reveal_numbered_cell_scores_five(self):
        session = small_session()
        session.reveal(1, 1)
        self.assertEqual(session.score, 5)

    def test_reveal_twice_keeps_score(self):
        session = small_session()
        session.reveal(0, 2)
        self.assertEqual(session.score, 10 + 3 * 5)
        self.assertIsNone(session.reveal(0, 2))
        self.assertEqual(session.score, 25)

    def test_out_of_bounds_is_ignored(self):
        session = small_session()
        self.assertIsNone(session.reveal(9, 9))
        self.assertIsNone(session.flag(-1, 0))
        self.assertEqual(session.score, 0)
        self.assertEqual(session.mines_remaining, 2)

    def test_mine_hit_is_a_loss(self):
        leaderboard = Leaderboard()
        session = small_session(leaderboard=leaderboard)
        session.reveal(1, 1)
        result = session.reveal(0, 0)

        self.assertEqual(result.outcome, LOSS)
        self.assertEqual(result.score, 5)
        self.assertEqual(session.score, 5)
        self.assertTrue(session.is_game_over())
        self.assertFalse(session.is_win())
        self.assertEqual(result.player_name, "Unknown Player")
        self.assertEqual(len(leaderboard), 1)

        board = session.get_state()["board"]
        self.assertEqual(board[0][0], "*")
        self.assertEqual(board[2][2], "M")

    def test_reveal_all_safe_cells_wins(self):
        session = small_session()
        session.set_player_name("  Ada ")
        session.tick()
        session.reveal(0, 2)
        result = session.reveal(2, 0)

        self.assertEqual(result.outcome, WIN)
        self.assertEqual(result.player_name, "Ada")
        self.assertEqual(result.elapsed_seconds, 1)
        self.assertEqual(result.score, 25 + 10 + 5 + 5)
        self.assertTrue(session.check_win())
        self.assertEqual(session.get_state()["result"]["outcome"], "win")

    def test_flag_every_mine_then_finish(self):
        session = small_session()
        self.assertIsNone(session.flag(0, 0))
        self.assertIsNone(session.flag(2, 2))
        self.assertEqual(session.mines_remaining, 0)
        self.assertFalse(session.is_game_over())

        session.reveal(0, 2)
        result = session.reveal(2, 0)
        self.assertEqual(result.outcome, WIN)
        self.assertEqual(session.mines_remaining, 0)

    def test_flag_can_win(self):
        session = small_session()
        session.reveal(0, 2)
        session.flag(0, 0)
        session.reveal(1, 0)
        session.reveal(2, 1)
        # (2, 0) is the last safe cell; flagging it settles the board
        result = session.flag(2, 0)
        self.assertEqual(session.mines_remaining, 0)
        self.assertEqual(result.outcome, WIN)

    def test_flag_counter_at_zero_without_win(self):
        session = small_session()
        session.flag(0, 0)
        self.assertIsNone(session.flag(2, 2))
        self.assertFalse(session.is_game_over())

    def test_flag_does_not_score(self):
        session = small_session()
        session.flag(1, 1)
        self.assertEqual(session.score, 0)
        self.assertEqual(session.mines_remaining, 1)
        self.assertIsNone(session.flag(1, 1))
        self.assertEqual(session.mines_remaining, 1)

    def test_actions_ignored_after_game_over(self):
        session = small_session()
        session.reveal(0, 0)
        self.assertIsNone(session.reveal(0, 2))
        self.assertIsNone(session.flag(2, 2))
        self.assertEqual(session.score, 0)

    def test_tick_stops_when_game_over(self):
        session = small_session()
        session.tick()
        session.tick()
        self.assertEqual(session.elapsed_seconds, 2)
        session.reveal(0, 0)
        session.tick()
        self.assertEqual(session.elapsed_seconds, 2)

    def test_restart_keeps_leaderboard(self):
        session = GameSession(seed=3)
        session.set_player_name("Grace")
        session.tick()
        mine = session.board.mine_positions()[0]
        session.reveal(*mine)
        session.restart()

        self.assertFalse(session.game_over)
        self.assertEqual(session.score, 0)
        self.assertEqual(session.elapsed_seconds, 0)
        self.assertEqual(session.mines_remaining, 10)
        self.assertEqual(len(session.board.mine_positions()), 10)
        self.assertEqual(len(session.leaderboard), 1)
        self.assertEqual(session.leaderboard.entries[0].player_name, "Grace")

    def test_restart_clears_player_name(self):
        session = small_session()
        session.set_player_name("Ada")
        session.restart()
        self.assertEqual(session.player_name, "")
        session.reveal(0, 0)
        self.assertEqual(session.last_result.player_name, "Unknown Player")

    def test_on_game_over_callback(self):
        seen = []
        session = small_session(on_game_over=seen.append)
        session.reveal(2, 2)
        self.assertEqual([r.outcome for r in seen], [LOSS])

    def test_step(self):
        session = small_session()
        state = session.step("reveal", 0, 2)
        self.assertEqual(state["score"], 25)
        state = session.step("flag", 0, 0)
        self.assertEqual(state["mines_remaining"], 1)
        with self.assertRaises(ValueError):
            session.step("chord", 0, 0)


if __name__ == "__main__":
    unittest.main()
