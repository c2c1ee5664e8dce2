"""
Tests for the terminal transcript sanitizer.

Raw captures from script(1) carry escape sequences, carriage returns and
backspace corrections; sanitize() must resolve them to the text a user
actually saw.
"""

from llm_termai.sanitizer import TranscriptSanitizer, sanitize


def test_backspace_removes_erased_characters():
    """Two DELs erase the two preceding characters."""
    assert sanitize("abc\x7f\x7fd") == ["ad"]


def test_backspace_and_del_are_both_erasers():
    """BS and DEL both erase."""
    assert sanitize("lx\x08s -la") == ["ls -la"]
    assert sanitize("lx\x7fs -la") == ["ls -la"]


def test_osc_and_csi_are_stripped():
    """Window-title OSC and color CSI sequences leave no residue."""
    assert sanitize("\x1b]0;title\x07Hello\x1b[31mWorld\x1b[0m") == ["HelloWorld"]


def test_osc_with_string_terminator():
    """OSC may end with ESC backslash instead of BEL."""
    assert sanitize("\x1b]2;user@host: ~\x1b\\ok") == ["ok"]


def test_private_mode_csi_is_stripped():
    """Bracketed paste toggles (ESC [ ? 2004 h) are CSI sequences."""
    assert sanitize("\x1b[?2004hprompt\x1b[?2004l") == ["prompt"]


def test_delete_character_sequence_is_stripped():
    """ESC [ n P is removed like any other CSI."""
    assert sanitize("abc\x1b[2Pdef") == ["abcdef"]


def test_eraser_after_stripped_sequence():
    """A backspace after an erase-line sequence still erases the previous character."""
    assert sanitize("ab\x1b[K\x08c") == ["ac"]


def test_erasers_on_empty_line_are_dropped():
    """Erasing with nothing on the line has no effect."""
    assert sanitize("\x08\x08ls") == ["ls"]
    assert sanitize("ab\n\x7fcd") == ["ab", "cd"]


def test_line_endings():
    """CRLF is one break; a stray CR starts a new line."""
    assert sanitize("one\r\ntwo") == ["one", "two"]
    assert sanitize("Loading-\rLoading\\") == ["Loading-", "Loading\\"]


def test_nul_bytes_are_removed():
    """NUL bytes vanish, even inside escape sequences."""
    assert sanitize("a\x00b") == ["ab"]
    assert sanitize("\x1b[3\x001mred") == ["red"]


def test_bare_escape_is_removed():
    """An ESC that does not open CSI/OSC is dropped, the rest stays."""
    assert sanitize("a\x1bb") == ["ab"]
    assert sanitize("\x1b(Bx") == ["(Bx"]


def test_malformed_csi_degrades_to_text():
    """An unfinished CSI keeps its bytes as literal text."""
    assert sanitize("\x1b[12\nnext") == ["[12", "next"]


def test_unterminated_osc_degrades_to_text():
    """An OSC without terminator on its line is kept as text."""
    assert sanitize("\x1b]0;title\nhello") == ["]0;title", "hello"]


def test_many_unterminated_osc_starts():
    """Repeated unterminated OSC openers are resolved without error."""
    raw = "\x1b]" * 1000 + "x"
    assert sanitize(raw) == ["]" * 1000 + "x"]


def test_capture_noise_lines_are_filtered():
    """Recorder banners and the assistant's own status line are not shell activity."""
    raw = (
        "Script started on 2024-05-01 10:00:00+00:00\n"
        "alice@h:~$ ls\n"
        "\n"
        "   \n"
        "file.txt\n"
        "> Querying llama3.1:latest...\n"
        "--- Log trimmed ---\n"
        "Script done on 2024-05-01 10:05:00+00:00\n"
    )
    assert sanitize(raw) == ["alice@h:~$ ls", "file.txt"]


def test_trim_is_applied_to_whole_transcript():
    """Only the transcript edges are trimmed; indentation inside is kept."""
    assert sanitize("  \n  first\n    indented\n  last  \n") == ["first", "    indented", "  last"]


def test_empty_inputs():
    """Empty or noise-only captures yield no lines."""
    assert sanitize("") == []
    assert sanitize("\x1b[0m\r\n  \n\x00") == []


def test_sanitize_is_idempotent():
    """Sanitizing already sanitized lines changes nothing."""
    raw = (
        "\x1b]0;alice@h: ~\x07alice@h:~$ lx\x7fs\r\n"
        "  file.txt\r\n"
        "> Querying model\r\n"
        "\x1b[01;34mdir\x1b[0m\r\n"
        "progress 10%\rprogress 100%\r\n"
        "alice@h:~$ "
    )
    once = sanitize(raw)
    assert sanitize("\n".join(once)) == once


def test_resolve_keeps_line_structure():
    """resolve() performs the character-level pass without filtering lines."""
    assert TranscriptSanitizer.resolve("a\r\n\r\nb") == "a\n\nb"


def test_is_noise():
    """Blank lines and capture banners are noise; shell output is not."""
    assert TranscriptSanitizer.is_noise("   ")
    assert TranscriptSanitizer.is_noise("  > Querying gpt-4o...")
    assert not TranscriptSanitizer.is_noise("total 24")
