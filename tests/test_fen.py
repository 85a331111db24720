import unittest

from game import (
    Board,
    Cell,
    EMPTY_FEN,
    Move,
    ParseError,
    Player,
    STANDARD_FEN,
)


class TestSerialize(unittest.TestCase):
    def test_given_empty_board_when_serialized_then_sevens_and_zero_counters(self):
        self.assertEqual(Board().serialize(), '7/7/7/7/7/7/7/ x 0 0')

    def test_given_scattered_empties_when_serialized_then_runs_coalesced_into_one_digit(self):
        b = Board()
        b.cells[0] = Cell.BLACK
        b.cells[3] = Cell.GAP
        b.cells[6] = Cell.WHITE
        b.cells[24] = Cell.GAP
        b.turn = Player.WHITE
        b.ply = 12
        b.reversible_moves = 3
        self.assertEqual(b.serialize(), '7/7/7/3-3/7/7/x2-2o/ o 3 12')

    def test_given_row_starting_with_empties_when_serialized_then_leading_digit(self):
        b = Board()
        b.cells[48] = Cell.BLACK
        self.assertEqual(b.serialize(), '6x/7/7/7/7/7/7/ x 0 0')


class TestDeserialize(unittest.TestCase):
    def test_given_standard_text_when_deserialized_then_corner_stones(self):
        b = Board.deserialize(STANDARD_FEN)
        self.assertIs(b.cells[42], Cell.BLACK)  # a7
        self.assertIs(b.cells[48], Cell.WHITE)  # g7
        self.assertIs(b.cells[0], Cell.WHITE)   # a1
        self.assertIs(b.cells[6], Cell.BLACK)   # g1
        self.assertEqual(b.count(Cell.EMPTY), 45)
        self.assertIs(b.turn, Player.BLACK)

    def test_given_counters_when_deserialized_then_fields_loaded(self):
        b = Board.deserialize('7/7/7/7/7/7/x6/ o 17 123')
        self.assertIs(b.turn, Player.WHITE)
        self.assertEqual(b.reversible_moves, 17)
        self.assertEqual(b.ply, 123)

    def test_given_turn_aliases_when_deserialized_then_mapped_to_players(self):
        for ch in 'xXbB':
            self.assertIs(Board.deserialize(f'7/7/7/7/7/7/7/ {ch} 0 0').turn, Player.BLACK)
        for ch in 'oOwW':
            self.assertIs(Board.deserialize(f'7/7/7/7/7/7/7/ {ch} 0 0').turn, Player.WHITE)

    def test_given_split_empty_runs_when_deserialized_then_summed(self):
        b = Board.deserialize('34/7/7/7/7/7/7/ x 0 0')
        self.assertEqual(b, Board())

    def test_given_malformed_text_when_deserialized_then_parse_error(self):
        bad_inputs = [
            '',
            '7/7/7/7/7/7/7/ x 0',            # three fields
            '7/7/7/7/7/7/7/ x 0 0 9',        # five fields
            '7/7/7/7/7/7/ x 0 0',            # six separators
            '7/7/7/7/7/7/7/7/ x 0 0',        # eight separators
            '7/7/7/7/7/7/7 x 0 0',           # no trailing separator
            '7/7/7/7/7/7//7 x 0 0',          # trailing text after last separator
            '7/7/7/7/7/7/6/ x 0 0',          # short row
            '7/7/7/7/7/7/44/ x 0 0',         # long row
            '7/7/7/7/7/7/x/ x 0 0',          # short row with a stone
            '7/7/7/7/7/7/z6/ x 0 0',         # unknown piece
            '7/7/7/7/7/7/8/ x 0 0',          # digit beyond a row
            '7/7/7/7/7/7/07/ x 0 0',         # zero is not a run length
            '7/7/7/7/7/7/7/ y 0 0',          # unknown side
            '7/7/7/7/7/7/7/ xo 0 0',         # side must be one character
            '7/7/7/7/7/7/7/ x a 0',
            '7/7/7/7/7/7/7/ x 0 -1',
            '7/7/7/7/7/7/7/ x 0 1.5',
            'x5/7/7/7/7/7/7/ x 0 0',         # first row only six cells
        ]
        for text in bad_inputs:
            with self.subTest(text=text):
                with self.assertRaises(ParseError) as ctx:
                    Board.deserialize(text)
                self.assertEqual(ctx.exception.text, text)
                self.assertIsInstance(ctx.exception, ValueError)

    def test_given_non_string_when_deserialized_then_parse_error(self):
        with self.assertRaises(ParseError):
            Board.deserialize(None)  # type: ignore[arg-type]


class TestRoundTrip(unittest.TestCase):
    def test_given_fixed_texts_when_round_tripped_then_identical(self):
        for text in [EMPTY_FEN, STANDARD_FEN, '7/7/7/3-3/7/7/x2-2o/ o 3 12', '-------/7/7/7/7/7/7/ o 0 99']:
            with self.subTest(text=text):
                self.assertEqual(Board.deserialize(text).serialize(), text)

    def test_given_played_sequence_when_round_tripped_each_ply_then_equal(self):
        b = Board.deserialize('x5o/7/7/3-3/7/7/o5x/ x 0 0')
        moves = [
            Move.single(36),     # x b6
            Move.double(0, 16),  # o a1 -> c3
            Move.single(5),      # x f1
            Move.double(48, 46), # o g7 -> e7
            Move.double(36, 38), # x b6 -> d6
            Move.single(15),     # o b3
        ]
        for move in moves:
            self.assertTrue(b.is_legal(move), move)
            b.make(move)
            back = Board.deserialize(b.serialize())
            self.assertEqual(back, b)
        self.assertEqual(b.ply, 6)
        self.assertEqual(b.reversible_moves, 0)
        self.assertIs(b.turn, Player.BLACK)

    def test_given_first_move_from_standard_when_serialized_then_expected_text(self):
        b = Board.deserialize(STANDARD_FEN)
        b.make(Move.single(36))
        self.assertEqual(b.serialize(), 'x5o/1x5/7/7/7/7/o5x/ o 0 1')


if __name__ == '__main__':
    unittest.main(verbosity=2)
