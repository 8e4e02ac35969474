from hypothesis import given, strategies as st

from cpalgos.kmp import kmp, prefix_function


def test_prefix_function_example():
    assert prefix_function("abacaba") == [0, 0, 1, 0, 1, 2, 3]


def test_overlapping_matches():
    assert kmp("aa", "aaaa") == [0, 1, 2]


def test_no_match():
    assert kmp("xyz", "abcabc") == []


def test_separator_character_in_text():
    assert kmp("a$", "a$a$") == [0, 2]


@given(st.text("ab", min_size=1, max_size=4), st.text("ab", max_size=20))
def test_matches_naive_search(pattern, text):
    expected = [i for i in range(len(text) - len(pattern) + 1) if text.startswith(pattern, i)]
    assert kmp(pattern, text) == expected