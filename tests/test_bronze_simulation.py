import pytest

from drillbook.bronze.simulation import (
    block_game,
    bubble_sort,
    mad_scientist,
    milk_mixing,
    shell_game,
    speeding_ticket,
    tic_tac_toe,
)


def test_milk_mixing_worked_example():
    assert milk_mixing([(10, 3), (11, 4), (12, 5)]) == [0, 10, 2]


def test_milk_mixing_conserves_milk_and_capacity():
    buckets = [(7, 5), (9, 1), (4, 4)]
    result = milk_mixing(buckets)
    assert sum(result) == sum(m for _, m in buckets)
    assert all(0 <= m <= c for m, (c, _) in zip(result, buckets))


def test_milk_mixing_requires_buckets():
    with pytest.raises(ValueError):
        milk_mixing([])


def test_shell_game_untouched_shell():
    swaps = [(1, 2, 3)] * 5
    assert shell_game(swaps) == len(swaps)


def test_shell_game_bounds():
    swaps = [(1, 2, 1), (3, 2, 1), (1, 3, 1), (2, 3, 2)]
    result = shell_game(swaps)
    assert -(-len(swaps) // 3) <= result <= len(swaps)


def test_shell_game_rejects_bad_shell():
    with pytest.raises(ValueError):
        shell_game([(1, 4, 2)])


def test_speeding_ticket_worked_example():
    road = [(40, 75), (50, 35), (10, 45)]
    bessie = [(40, 76), (20, 30), (40, 40)]
    assert speeding_ticket(road, bessie) == 5


def test_speeding_ticket_never_over_limit():
    road = [(40, 75), (50, 35), (10, 45)]
    slower = [(40, 70), (50, 30), (10, 10)]
    assert speeding_ticket(road, road) == speeding_ticket(road, slower)
    assert speeding_ticket(road, slower) < speeding_ticket(road, [(100, 80)])


def test_speeding_ticket_length_mismatch():
    with pytest.raises(ValueError):
        speeding_ticket([(10, 50)], [(9, 50)])


def test_bubble_sort_first_and_last():
    values = [6, 4, 1, 9, 3]
    _, first, last = bubble_sort(values)
    assert first == min(values)
    assert last == max(values)


def test_bubble_sort_reversed_needs_more_swaps():
    values = [5, 2, 8, 1, 9]
    sorted_swaps = bubble_sort(sorted(values))[0]
    mixed_swaps = bubble_sort(values)[0]
    reversed_swaps = bubble_sort(sorted(values, reverse=True))[0]
    assert sorted_swaps < mixed_swaps < reversed_swaps


def test_bubble_sort_empty():
    with pytest.raises(ValueError):
        bubble_sort([])


def test_mad_scientist_symmetric():
    assert mad_scientist("GHHGGHHH", "GHGHGHGH") == mad_scientist("GHGHGHGH", "GHHGGHHH")


def test_mad_scientist_single_run():
    assert mad_scientist("GGGG", "HHHH") == mad_scientist("G", "H")


def test_mad_scientist_separate_runs():
    a = "GHGHG"
    assert mad_scientist(a, "HHHHH") == a.count("G")


def test_mad_scientist_identical_needs_fewer():
    assert mad_scientist("GHGH", "GHGH") < mad_scientist("GHGH", "GHHH")


def test_mad_scientist_length_mismatch():
    with pytest.raises(ValueError):
        mad_scientist("GH", "G")


def test_block_game_same_word_both_sides():
    word = "moomoo"
    result = block_game([(word, word)])
    assert len(result) == 26
    assert all(result[ord(ch) - ord("a")] == word.count(ch) for ch in set(word))
    assert sum(result) == len(word)


def test_block_game_disjoint_words():
    result = block_game([("abc", "xyz")])
    assert sum(result) == len("abc") + len("xyz")


def test_block_game_accumulates_boards():
    single = block_game([("fox", "box")])
    double = block_game([("fox", "box"), ("fox", "box")])
    assert double == [2 * n for n in single]


def test_block_game_rejects_uppercase():
    with pytest.raises(ValueError):
        block_game([("Abc", "abc")])


def test_tic_tac_toe_worked_example():
    assert tic_tac_toe(["COW", "XXO", "ABC"]) == (0, 2)


def test_tic_tac_toe_relabel_and_transpose_invariant():
    rows = ["COW", "XXO", "ABC"]
    transposed = ["".join(col) for col in zip(*rows)]
    assert tic_tac_toe(rows) == tic_tac_toe(transposed)
    assert tic_tac_toe("AAAAAAAAA") == tic_tac_toe("BBBBBBBBB")


def test_tic_tac_toe_uniform_board_single_winner():
    singles, teams = tic_tac_toe("QQQQQQQQQ")
    assert singles == len(set("QQQQQQQQQ"))
    assert teams < singles


def test_tic_tac_toe_wrong_size():
    with pytest.raises(ValueError):
        tic_tac_toe("ABCD")