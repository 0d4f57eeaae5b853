from applypatch.commit.seek import seek_sequence


def test_empty_pattern_matches_at_start():
    assert seek_sequence(["a", "b"], [], 1) == 1


def test_pattern_longer_than_file_never_matches():
    assert seek_sequence(["a"], ["a", "b"], 0) is None


def test_exact_match():
    assert seek_sequence(["a", "b", "c"], ["b", "c"], 0) == 1


def test_search_starts_at_cursor():
    lines = ["x", "y", "x", "y"]
    assert seek_sequence(lines, ["x"], 0) == 0
    assert seek_sequence(lines, ["x"], 1) == 2
    assert seek_sequence(lines, ["x"], 3) is None


def test_whitespace_drift_still_matches():
    lines = ["def f():", "    return 1   ", "\tpass"]
    assert seek_sequence(lines, ["return 1", "pass"], 0) == 1


def test_earliest_position_wins_over_exact_later():
    # Position 0 matches loosely, position 2 exactly; scanning order decides.
    lines = ["  foo", "bar", "foo"]
    assert seek_sequence(lines, ["foo"], 0) == 0


def test_no_match_returns_none():
    assert seek_sequence(["a", "b"], ["c"], 0) is None
