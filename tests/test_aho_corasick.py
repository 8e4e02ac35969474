import pytest

from cpalgos.aho_corasick import AhoCorasick


def _run(ac, text):
    state = 0
    states = []
    for ch in text:
        state = ac.transition(state, ch)
        states.append(state)
    return states


def test_state_count_is_trie_size():
    ac = AhoCorasick()
    for w in ["he", "she", "his", "hers"]:
        ac.add(w)
    assert len(ac) == 10


def test_terminal_reached_at_word_end():
    ac = AhoCorasick()
    end = ac.add("abc")
    ac.build()
    assert _run(ac, "xxabc")[-1] == end
    assert ac.is_terminal(end)
    assert not ac.is_terminal(0)


def test_suffix_link_points_to_suffix():
    ac = AhoCorasick()
    she = ac.add("she")
    he = ac.add("he")
    ac.build()
    assert ac.link(she) == he
    assert ac.link(he) == 0


def test_bad_character():
    ac = AhoCorasick("ab")
    with pytest.raises(ValueError):
        ac.add("abc")


def test_add_after_build():
    ac = AhoCorasick()
    ac.build()
    with pytest.raises(RuntimeError):
        ac.add("a")