import pytest

from tagcloud.counter import gather_words, count_words_in_file


def test_counts_merge_case(separators):
    counts = gather_words(["The cat sat. The dog sat."], separators)
    assert counts == {"the": 2, "cat": 1, "sat": 2, "dog": 1}


def test_counts_across_lines(separators):
    counts = gather_words(["Go, go\n", "GO!\n", "\n", "stop\n"], separators)
    assert counts == {"go": 3, "stop": 1}


def test_extends_existing_table(separators):
    counts = {"cat": 4}
    assert gather_words(["cat dog"], separators, counts) is counts
    assert counts == {"cat": 5, "dog": 1}


def test_only_separators(separators):
    assert gather_words(["... ,,, ()\n"], separators) == {}


def test_counts_file(separators, write_text):
    path = write_text("in.txt", "One fish, two fish.\nRed fish; blue fish!\n")
    counts = count_words_in_file(str(path), separators, "utf-8")
    assert counts == {"one": 1, "two": 1, "red": 1, "blue": 1, "fish": 4}


def test_missing_file(separators, tmp_path):
    with pytest.raises(OSError):
        count_words_in_file(str(tmp_path / "missing.txt"), separators)


def test_undecodable_file(separators, tmp_path):
    path = tmp_path / "bin.txt"
    path.write_bytes(b"caf\xe9 \xff\xfe")
    with pytest.raises(OSError, match="cannot decode"):
        count_words_in_file(str(path), separators, "utf-8")
