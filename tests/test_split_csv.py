# tests/test_split_csv.py
import pytest

from split_csv import (
    InvalidChunkSizeError,
    NoFileLoadedError,
    SplitError,
    chunk_file_name,
    count_chunks,
    resolve_prefix,
    split_file,
    split_lines,
    total_row_count,
)


def data_rows(chunk):
    """Content of a chunk without its header line"""
    return chunk.content.decode("utf-8").split("\n")[1:]


def test_twelve_rows_by_five(twelve_rows):
    chunks = split_file(twelve_rows, 5, "prefix")
    assert [c.row_count for c in chunks] == [5, 5, 2]
    assert [c.name for c in chunks] == [
        "prefix_part1.csv",
        "prefix_part2.csv",
        "prefix_part3.csv",
    ]


def test_chunk_content_starts_with_header(twelve_rows):
    chunks = split_file(twelve_rows, 5, "prefix")
    first = chunks[0].content.decode("utf-8")
    assert first == "id,name,qty\n1,item1,10\n2,item2,20\n3,item3,30\n4,item4,40\n5,item5,50"
    for chunk in chunks:
        assert chunk.content.decode("utf-8").split("\n")[0] == "id,name,qty"


def test_zero_rows_gives_no_chunks(parsed_factory):
    assert split_file(parsed_factory(0), 5, "prefix") == []


def test_exact_multiple_gives_full_last_chunk(parsed_factory):
    chunks = split_file(parsed_factory(10), 10, "prefix")
    assert len(chunks) == 1
    assert chunks[0].row_count == 10
    assert chunks[0].name == "prefix_part1.csv"


@pytest.mark.parametrize("chunk_size", [0, -1, -100])
def test_non_positive_chunk_size_rejected(twelve_rows, chunk_size):
    with pytest.raises(InvalidChunkSizeError):
        split_file(twelve_rows, chunk_size, "prefix")


@pytest.mark.parametrize("chunk_size", [2.5, "5", None, True])
def test_non_integer_chunk_size_rejected(twelve_rows, chunk_size):
    with pytest.raises(InvalidChunkSizeError):
        split_file(twelve_rows, chunk_size, "prefix")


def test_chunk_size_errors_are_value_errors(twelve_rows):
    with pytest.raises(ValueError):
        split_file(twelve_rows, 0, "prefix")


def test_missing_file_rejected():
    with pytest.raises(NoFileLoadedError):
        split_file(None, 5, "prefix")
    assert issubclass(NoFileLoadedError, SplitError)


def test_twelve_chunks_padded_to_two_digits(parsed_factory):
    chunks = split_file(parsed_factory(12), 1, "p")
    names = [c.name for c in chunks]
    assert names[0] == "p_part01.csv"
    assert names[8] == "p_part09.csv"
    assert names[-1] == "p_part12.csv"


@pytest.mark.parametrize("total_rows,chunk_size", [
    (1, 1), (7, 3), (99, 10), (100, 10), (101, 10), (250, 1), (1000, 7),
])
def test_counts_and_order_preserved(parsed_factory, total_rows, chunk_size):
    parsed = parsed_factory(total_rows)
    chunks = split_file(parsed, chunk_size, "p")

    assert len(chunks) == -(-total_rows // chunk_size)
    assert total_row_count(chunks) == total_rows
    assert all(c.row_count == chunk_size for c in chunks[:-1])
    assert chunks[-1].row_count == (total_rows % chunk_size or chunk_size)

    rejoined = [row for c in chunks for row in data_rows(c)]
    assert tuple(rejoined) == parsed.data_lines

    names = [c.name for c in chunks]
    assert len(set(names)) == len(names)
    assert sorted(names) == names


def test_blank_prefix_falls_back_to_base_name(twelve_rows):
    for prefix in ("", "   ", None):
        chunks = split_file(twelve_rows, 5, prefix)
        assert chunks[0].name == "orders_part1.csv"


def test_prefix_is_trimmed(twelve_rows):
    chunks = split_file(twelve_rows, 20, "  batch ")
    assert chunks[0].name == "batch_part1.csv"


def test_resolve_prefix():
    assert resolve_prefix("custom", "base") == "custom"
    assert resolve_prefix(" \t", "base") == "base"
    assert resolve_prefix(None, "base") == "base"


def test_chunk_file_name_width():
    assert chunk_file_name("x", 0, 3) == "x_part1.csv"
    assert chunk_file_name("x", 9, 10) == "x_part10.csv"
    assert chunk_file_name("x", 0, 10) == "x_part01.csv"
    assert chunk_file_name("x", 4, 100) == "x_part005.csv"


def test_count_chunks():
    assert count_chunks(0, 5) == 0
    assert count_chunks(12, 5) == 3
    assert count_chunks(10, 10) == 1
    with pytest.raises(InvalidChunkSizeError):
        count_chunks(10, 0)


def test_rows_kept_verbatim():
    lines = ('  padded , row ', 'a,"b,c",d', '')
    chunks = split_lines("h1,h2", lines, 2, "raw")
    assert chunks[0].content == b'h1,h2\n  padded , row \na,"b,c",d'
    assert chunks[1].content == b"h1,h2\n"
    assert chunks[1].row_count == 1


def test_unicode_rows_encoded_as_utf8():
    chunks = split_lines("이름,수량", ("사과,3",), 10, "fruit")
    assert chunks[0].content.decode("utf-8") == "이름,수량\n사과,3"


def test_input_not_modified(twelve_rows):
    before = twelve_rows.data_lines
    split_file(twelve_rows, 5, "p")
    assert twelve_rows.data_lines == before
    assert twelve_rows.total_rows == 12
