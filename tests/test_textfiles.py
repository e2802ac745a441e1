import pytest

from recordfiles.textfiles import (
    TextStats,
    append_text,
    copy_swapping_case,
    count_chars,
    create_file,
    main,
    merge_files,
    swap_ascii_case,
    text_stats,
)


def test_create_file_makes_empty_file(tmp_path):
    target = tmp_path / "newfile.txt"
    result = create_file(target)
    assert result == target
    assert target.read_bytes() == b""


def test_create_file_truncates_existing(tmp_path):
    target = tmp_path / "f.txt"
    target.write_bytes(b"old content")
    create_file(target)
    assert target.read_bytes() == b""


def test_create_file_in_missing_directory_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        create_file(tmp_path / "nope" / "f.txt")


def test_count_chars_matches_length(tmp_path):
    data = b"some text\nwith two lines\n"
    target = tmp_path / "read.txt"
    target.write_bytes(data)
    assert count_chars(target) == len(data)


def test_count_chars_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        count_chars(tmp_path / "missing.txt")


def test_append_text_concatenates(tmp_path):
    target = tmp_path / "output.txt"
    append_text(target, "Cpp Programming")
    append_text(target, "Cpp Programming")
    assert target.read_text(encoding="utf-8") == "Cpp Programming" * 2


def test_swap_ascii_case_value():
    assert swap_ascii_case("Hello, World 123") == "hELLO, wORLD 123"


def test_swap_ascii_case_leaves_non_ascii():
    assert swap_ascii_case("é") == "é"
    assert swap_ascii_case("ß") == "ß"


@pytest.mark.parametrize("text", ["", "abcXYZ", "Mixed Case! 42", "line\nbreak"])
def test_swap_ascii_case_is_involution(text):
    assert swap_ascii_case(swap_ascii_case(text)) == text


def test_swap_ascii_case_bytes_matches_str():
    text = "Some Text 9"
    assert swap_ascii_case(text.encode()) == swap_ascii_case(text).encode()


def test_copy_swapping_case(tmp_path):
    source = tmp_path / "source.txt"
    destination = tmp_path / "destination.txt"
    data = b"Hello World\nSecond LINE\n"
    source.write_bytes(data)
    copy_swapping_case(source, destination)
    assert destination.read_bytes() == swap_ascii_case(data)


def test_copy_missing_source_creates_nothing(tmp_path):
    destination = tmp_path / "destination.txt"
    with pytest.raises(FileNotFoundError):
        copy_swapping_case(tmp_path / "source.txt", destination)
    assert not destination.exists()


def test_merge_files(tmp_path):
    first = tmp_path / "file1.txt"
    second = tmp_path / "file2.txt"
    merged = tmp_path / "merged_file.txt"
    first.write_bytes(b"alpha")
    second.write_bytes(b"beta")
    merge_files(first, second, merged)
    assert merged.read_bytes() == b"alpha" + b" " + b"beta"


def test_merge_missing_second_keeps_first_part(tmp_path):
    first = tmp_path / "file1.txt"
    merged = tmp_path / "merged_file.txt"
    first.write_bytes(b"alpha")
    with pytest.raises(FileNotFoundError):
        merge_files(first, tmp_path / "file2.txt", merged)
    assert merged.read_bytes() == b"alpha"


def test_merge_missing_first_raises(tmp_path):
    second = tmp_path / "file2.txt"
    second.write_bytes(b"beta")
    with pytest.raises(FileNotFoundError):
        merge_files(tmp_path / "file1.txt", second, tmp_path / "m.txt")


def test_text_stats_empty_file(tmp_path):
    target = tmp_path / "read.txt"
    target.write_bytes(b"")
    assert text_stats(target) == TextStats(chars=0, words=0, lines=0)


def test_text_stats_lines_and_chars(tmp_path):
    data = b"hello world\nfoo bar\n"
    target = tmp_path / "read.txt"
    target.write_bytes(data)
    stats = text_stats(target)
    assert stats.chars == len(data)
    assert stats.lines == 3


def test_text_stats_words_start_after_first_byte(tmp_path):
    target = tmp_path / "read.txt"
    target.write_bytes(b"a b")
    assert text_stats(target).words == 1


def test_text_stats_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        text_stats(tmp_path / "missing.txt")


def test_main_append_and_count(tmp_path, capsys):
    target = tmp_path / "out.txt"
    assert main(["append", str(target), "--data", "xyz"]) == 0
    assert target.read_text(encoding="utf-8") == "xyz"
    assert main(["count", str(target)]) == 0
    assert f"Number of Characters in File => {len('xyz')}" in capsys.readouterr().out


def test_main_missing_file_reports_error(tmp_path, capsys):
    assert main(["count", str(tmp_path / "missing.txt")]) == 1
    assert "Error: Unable to Open File" in capsys.readouterr().out


def test_main_create(tmp_path, capsys):
    target = tmp_path / "new.txt"
    assert main(["create", str(target)]) == 0
    assert target.exists()
    assert "File Created Successfully..." in capsys.readouterr().out