"""Tests for splitting lines into command blocks and selecting trailing blocks."""

import pytest

from llm_termai.blocks import select_trailing_blocks, select_window, split_blocks
from llm_termai.transcript import classify_lines

SESSION = [
    "alice@h:~$ ls",
    "file.txt",
    "alice@h:~$ pwd",
    "/home/alice",
    "alice@h:~$",
]


def _select(texts, n):
    return [line.text for line in select_trailing_blocks(classify_lines(texts), n)]


def test_last_block_excludes_fresh_prompt():
    """n=1 keeps the last command block, not the bare prompt after it."""
    assert _select(SESSION, 1) == ["alice@h:~$ pwd", "/home/alice"]


def test_two_blocks():
    """n=2 keeps both command blocks with their prompts."""
    assert _select(SESSION, 2) == SESSION[:4]


def test_shortfall_returns_everything_but_fresh_prompt():
    """Asking for more blocks than exist returns all of them."""
    assert _select(SESSION, 5) == SESSION[:4]


def test_preamble_kept_only_on_shortfall():
    """Output before the first prompt is context only when blocks run out."""
    texts = ["leftover output"] + SESSION
    assert _select(texts, 2) == SESSION[:4]
    assert _select(texts, 3) == ["leftover output"] + SESSION[:4]


def test_trailing_prompt_with_output_is_a_block():
    """Without a fresh prompt at the end, the last prompt opens a real block."""
    texts = ["a@h:~$ ls", "f", "a@h:~$ make", "building"]
    assert _select(texts, 1) == ["a@h:~$ make", "building"]
    assert _select(texts, 5) == texts


def test_no_boundaries_returns_all_lines():
    """A transcript without prompts is returned whole."""
    assert _select(["x", "y"], 1) == ["x", "y"]


def test_empty_input():
    """Nothing in, nothing out."""
    assert select_trailing_blocks([], 3) == []


def test_only_fresh_prompt():
    """A lone bare prompt leaves nothing to select."""
    assert _select(["alice@h:~$"], 1) == []


def test_empty_prompt_counts_as_block():
    """Pressing enter on an empty prompt produces a block of its own."""
    texts = ["a@h:~$ ls", "out", "a@h:~$", "a@h:~$"]
    assert _select(texts, 1) == ["a@h:~$"]
    assert _select(texts, 2) == ["a@h:~$ ls", "out", "a@h:~$"]


def test_block_count_matches_request():
    """For n below the number of completed blocks, exactly n prompts are kept."""
    texts = []
    for i in range(6):
        texts += [f"bob@box:~$ cmd{i}", f"output {i}", f"more {i}"]
    texts.append("bob@box:~$")
    lines = classify_lines(texts)

    for n in range(1, 7):
        window = select_window(lines, n)
        assert window.n == n
        assert window.boundary_count == n
        assert window.texts()[0] == f"bob@box:~$ cmd{6 - n}"
        assert window.texts()[-1] == "more 5"


def test_invalid_block_count():
    """n must be positive."""
    with pytest.raises(ValueError):
        select_trailing_blocks(classify_lines(SESSION), 0)


def test_split_blocks():
    """Lines before the first prompt form a preamble block."""
    blocks = split_blocks(classify_lines(["early", "a@h:~$ ls", "f", "a@h:~$"]))
    assert [b.is_preamble for b in blocks] == [True, False, False]
    assert [line.text for line in blocks[0].lines()] == ["early"]
    assert blocks[1].prompt.text == "a@h:~$ ls"
    assert not blocks[1].is_bare
    assert blocks[2].is_bare
