import pytest
from distle.engine import (
    compute_table, edit_distance, feedback, filter_candidates,
    reconstruct_transforms, transform_list, validate_guess,
)

WORDS = ["cat", "cot", "dog", "act", "coat", "taco", "banana", "bandana", ""]

# --- golden distances + top-down transform lists ---
@pytest.mark.parametrize("a,b,dist,transforms", [
    ("act", "cat", 1, ["T"]),
    ("dog", "cat", 3, ["R", "R", "R"]),
    ("cat", "cot", 1, ["R"]),
    ("crane", "crate", 1, ["R"]),
    ("ab", "ba", 1, ["T"]),
    ("abcd", "bacd", 1, ["T"]),
    ("", "abc", 3, ["I", "I", "I"]),
    ("abc", "", 3, ["D", "D", "D"]),
    ("ab", "b", 1, ["D"]),
    ("b", "ab", 1, ["I"]),
])
def test_distance_and_transforms_golden(a, b, dist, transforms):
    assert edit_distance(a, b) == dist
    table = compute_table(a, b)
    assert table[len(a)][len(b)] == dist
    assert reconstruct_transforms(a, b, table) == transforms

@pytest.mark.parametrize("w", ["cat", "banana", "", "a"])
def test_identity(w):
    assert edit_distance(w, w) == 0
    assert transform_list(w, w) == []

def test_table_shape_and_base_cases():
    t = compute_table("dog", "cats")
    assert len(t) == 4 and all(len(row) == 5 for row in t)
    assert t[0] == [0, 1, 2, 3, 4]
    assert [row[0] for row in t] == [0, 1, 2, 3]

def test_tie_break_prefers_replace_over_insert_and_delete():
    # Both R and I (resp. D) reach the same predecessor cost at the outer cell
    assert transform_list("a", "bc") == ["R", "I"]
    assert transform_list("bc", "a") == ["R", "D"]

def test_only_adjacent_transpositions():
    # "abc" -> "cba" is not one adjacent swap
    assert edit_distance("abc", "cba") == 2
    assert "T" not in transform_list("abc", "cba")

def test_bounds_symmetry_and_script_length():
    for a in WORDS:
        for b in WORDS:
            d = edit_distance(a, b)
            assert 0 <= d <= max(len(a), len(b))
            assert d == edit_distance(b, a)
            # every op costs 1, so a minimal script has exactly d ops
            assert len(transform_list(a, b)) == d

def test_reconstruction_is_deterministic():
    table = compute_table("banana", "bandana")
    assert reconstruct_transforms("banana", "bandana", table) == \
        reconstruct_transforms("banana", "bandana", table)

def test_feedback_normalizes():
    assert feedback(" ACT", "cat") == (1, ["T"])
    assert feedback("cat", "cat") == (0, [])

def test_filter_candidates_transposition_scenario():
    words = ["cat", "cot", "dog", "act"]
    cand = filter_candidates(words, [("act", ["T"])])
    assert "cat" in cand and "dog" not in cand and "act" not in cand

def test_filter_candidates_is_sound():
    words = [w for w in WORDS if w]
    for secret in words:
        for guess in words:
            cand = filter_candidates(words, [(guess, transform_list(guess, secret))])
            assert secret in cand

def test_filter_candidates_multi_step_history():
    words = ["cat", "cot", "dog", "act", "coat", "taco"]
    secret = "coat"
    history = [(g, transform_list(g, secret)) for g in ("dog", "cat")]
    cand = filter_candidates(words, history)
    assert "coat" in cand and "dog" not in cand and "cat" not in cand

def test_validate_guess():
    dictionary = {"cat", "dog"}
    assert validate_guess("  CAT ", dictionary) == "cat"
    assert validate_guess("bird", dictionary) is None
    assert validate_guess("", dictionary) is None
    assert validate_guess(None, dictionary) is None
    assert validate_guess("dog", ["cat", "dog"]) == "dog"

def test_predecessors_follow_tie_break_order():
    from distle.engine.distance import TIE_BREAK, _predecessors
    assert TIE_BREAK == ("R", "T", "I", "D")
    # transposition is legal at the outer cell of "ab" -> "ba"
    steps = _predecessors("ab", "ba", compute_table("ab", "ba"), 2, 2)
    assert steps == [("R", 1, 1), ("T", 0, 0), ("I", 2, 1), ("D", 1, 2)]
    # and skipped where it isn't
    steps = _predecessors("a", "bc", compute_table("a", "bc"), 1, 2)
    assert [op for op, _, _ in steps] == ["R", "I", "D"]
