# tests/conftest.py
import pytest

from split_csv import ParsedFile


def make_parsed(total_rows, base_name="orders", header_line="id,name,qty"):
    data_lines = tuple(f"{i},item{i},{i * 10}" for i in range(1, total_rows + 1))
    return ParsedFile(
        base_name=base_name,
        header_line=header_line,
        data_lines=data_lines,
        file_name=f"{base_name}.csv",
        header_cols=tuple(header_line.split(",")),
    )


@pytest.fixture
def parsed_factory():
    """Build a ParsedFile with the given number of data rows"""
    return make_parsed


@pytest.fixture
def twelve_rows():
    return make_parsed(12)


@pytest.fixture
def sample_csv_bytes():
    return "id,name,qty\r\n1,apple,3\r\n2,banana,5\r\n\r\n3,cherry,7\r\n".encode("utf-8")
