from contestlib.word_search import find_words

BOARD = [
    ["o", "a", "a", "n"],
    ["e", "t", "a", "e"],
    ["i", "h", "k", "r"],
    ["i", "f", "l", "v"],
]


def test_example_board():
    assert sorted(find_words(BOARD, ["oath", "pea", "eat", "rain"])) == ["eat", "oath"]


def test_results_are_subset_of_words():
    words = ["oath", "pea", "eat", "rain", "oat", "tak"]
    result = find_words(BOARD, words)
    assert set(result) <= set(words)
    assert len(result) == len(set(result))


def test_order_follows_words():
    words = ["eat", "oath"]
    assert find_words(BOARD, words) == words


def test_snake_paths_found_diagonals_not():
    board = [["a", "b"], ["c", "d"]]
    words = ["abdc", "acdb", "ad", "bc"]
    assert find_words(board, words) == words[:2]


def test_cell_not_reused():
    assert find_words([["a"]], ["aa"]) == []
    assert find_words([["a", "b"], ["c", "d"]], ["abcb"]) == []


def test_duplicates_collapsed():
    assert find_words([["a"]], ["a", "a"]) == ["a"]


def test_board_untouched():
    board = [row[:] for row in BOARD]
    find_words(board, ["oath", "eat"])
    assert board == BOARD


def test_empty_board():
    assert find_words([], ["a"]) == []