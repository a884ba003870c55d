"""Tests for snakes_sim.board."""

import pytest

from snakes_sim.board import GOAL, LADDERS, SNAKES, Board


# ── constants ────────────────────────────────────────────────────────

def test_default_board_has_10_ladders_and_10_snakes():
    assert len(LADDERS) == 10
    assert len(SNAKES) == 10


def test_ladders_and_snakes_are_disjoint():
    assert not set(LADDERS) & set(SNAKES)


def test_directions():
    assert all(dest > sq for sq, dest in LADDERS.items())
    assert all(dest < sq for sq, dest in SNAKES.items())


def test_sources_exclude_start_and_goal():
    for sq in list(LADDERS) + list(SNAKES):
        assert 1 <= sq <= 99


# ── lookup ───────────────────────────────────────────────────────────

def test_lookup_ladder():
    board = Board()
    assert board.lookup_transfer(68) == 94
    assert board.lookup_transfer(78) == GOAL


def test_lookup_snake():
    board = Board()
    assert board.lookup_transfer(98) == 62
    assert board.lookup_transfer(16) == 6


def test_lookup_plain_square():
    board = Board()
    assert board.lookup_transfer(50) is None
    assert board.lookup_transfer(0) is None
    assert board.lookup_transfer(GOAL) is None


def test_is_ladder_and_is_snake():
    board = Board()
    assert board.is_ladder(2) is True
    assert board.is_ladder(16) is False
    assert board.is_snake(16) is True
    assert board.is_snake(2) is False


def test_special_squares_sorted():
    squares = Board().special_squares()
    assert squares == sorted(squares)
    assert len(squares) == 20


def test_custom_board():
    board = Board(ladders={5: 25}, snakes={30: 3})
    assert board.lookup_transfer(5) == 25
    assert board.lookup_transfer(30) == 3
    assert board.lookup_transfer(68) is None


def test_board_is_read_only():
    board = Board()
    with pytest.raises(TypeError):
        board.ladders[3] = 50


# ── validation ───────────────────────────────────────────────────────

def test_overlapping_sources_rejected():
    with pytest.raises(ValueError):
        Board(ladders={10: 30}, snakes={10: 2})


def test_ladder_pointing_down_rejected():
    with pytest.raises(ValueError):
        Board(ladders={30: 10}, snakes={})


def test_snake_pointing_up_rejected():
    with pytest.raises(ValueError):
        Board(ladders={}, snakes={10: 30})


def test_goal_cannot_be_a_source():
    with pytest.raises(ValueError):
        Board(ladders={}, snakes={100: 50})
