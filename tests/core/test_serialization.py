"""
Unit tests for serialization and puzzle models.
"""

import json

import pytest

from countdown_toolkit.core.models import (
    Application,
    ExpressionError,
    Literal,
    Operator,
    Puzzle,
)
from countdown_toolkit.core.schemas import ValidationError
from countdown_toolkit.core.utils.serialization import (
    deserialize_expression,
    expression_from_json,
    expression_to_json,
    load_puzzles_json,
    save_puzzles_json,
    serialize_expression,
)


@pytest.fixture
def expr():
    """(1 + 50) * (25 - 10)"""
    return Application(
        Operator.MUL,
        Application(Operator.ADD, Literal(1), Literal(50)),
        Application(Operator.SUB, Literal(25), Literal(10)),
    )


class TestExpressionSerialization:
    """Tests for expression to/from dict."""

    def test_serialize_expression_when_nested_then_produces_tree(self, expr):
        data = serialize_expression(expr)

        assert data == {
            "op": "*",
            "left": {"op": "+", "left": {"value": 1}, "right": {"value": 50}},
            "right": {"op": "-", "left": {"value": 25}, "right": {"value": 10}},
        }

    def test_deserialize_expression_when_serialized_then_rebuilds_equal_tree(self, expr):
        assert deserialize_expression(serialize_expression(expr)) == expr

    def test_expression_from_json_when_compact_json_then_parses(self, expr):
        text = expression_to_json(expr)
        assert " " not in text
        assert expression_from_json(text) == expr

    def test_deserialize_expression_when_unknown_op_then_raises_error(self):
        data = {"op": "^", "left": {"value": 2}, "right": {"value": 3}}
        with pytest.raises(ValueError, match="Unknown operator"):
            deserialize_expression(data)

    def test_deserialize_expression_when_missing_child_then_raises_error(self):
        with pytest.raises(ValueError, match="missing fields"):
            deserialize_expression({"op": "+", "left": {"value": 2}})

    def test_deserialize_expression_when_inexact_and_validating_then_raises_error(self):
        data = {"op": "/", "left": {"value": 7}, "right": {"value": 2}}
        with pytest.raises(ExpressionError):
            deserialize_expression(data)

    def test_deserialize_expression_when_inexact_and_not_validating_then_builds(self):
        data = {"op": "/", "left": {"value": 7}, "right": {"value": 2}}
        result = deserialize_expression(data, validate=False)
        assert result == Application(Operator.DIV, Literal(7), Literal(2))


class TestPuzzle:
    """Tests for the Puzzle model."""

    def test_create_when_list_given_then_stores_tuple(self):
        p = Puzzle.create("r1", [1, 2], 3)
        assert p.numbers == (1, 2)

    def test_init_when_target_not_positive_then_raises_error(self):
        with pytest.raises(ValueError, match="target must be positive"):
            Puzzle.create("r1", [1, 2], 0)

    def test_init_when_empty_id_then_raises_error(self):
        with pytest.raises(ValueError, match="id must not be empty"):
            Puzzle.create("", [1, 2], 3)

    def test_to_dict_when_called_then_matches_batch_format(self):
        p = Puzzle.create("r1", [1, 2], 3)
        assert p.to_dict() == {"id": "r1", "numbers": [1, 2], "target": 3}


class TestPuzzleFiles:
    """Tests for load_puzzles_json / save_puzzles_json."""

    def test_load_puzzles_json_when_valid_then_returns_puzzles(self, batch_file):
        puzzles = load_puzzles_json(batch_file)

        assert [p.id for p in puzzles] == ["r1", "r2"]
        assert puzzles[0].numbers == (2, 3)
        assert puzzles[0].target == 6

    def test_save_puzzles_json_when_saved_then_loadable(self, tmp_path):
        puzzles = [Puzzle.create("a", [25, 50, 75, 100, 3, 6], 952)]
        path = tmp_path / "nested" / "batch.json"

        save_puzzles_json(puzzles, path)

        assert load_puzzles_json(path) == puzzles

    def test_load_puzzles_json_when_invalid_then_raises_validation_error(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"schema_version": 1, "puzzles": [{"id": "x"}]}))

        with pytest.raises(ValidationError):
            load_puzzles_json(path)
