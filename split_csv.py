from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from logging_config import setup_logger

logger = setup_logger(__name__)


class SplitError(ValueError):
    """Raised when a split cannot be performed."""


class InvalidChunkSizeError(SplitError):
    pass


class NoFileLoadedError(SplitError):
    pass


@dataclass(frozen=True)
class ParsedFile:
    """An uploaded file broken into its header line and data lines."""
    base_name: str
    header_line: str
    data_lines: Tuple[str, ...] = ()
    file_name: str = ""
    header_cols: Tuple[str, ...] = field(default=())

    @property
    def total_rows(self) -> int:
        return len(self.data_lines)


@dataclass(frozen=True)
class Chunk:
    content: bytes
    name: str
    row_count: int


def _validate_chunk_size(chunk_size):
    # bool is an int subclass but never a meaningful row count
    if isinstance(chunk_size, bool) or not isinstance(chunk_size, int):
        raise InvalidChunkSizeError(f"Rows per file must be a whole number, got {chunk_size!r}")
    if chunk_size <= 0:
        raise InvalidChunkSizeError(f"Rows per file must be at least 1, got {chunk_size}")


def count_chunks(total_rows: int, chunk_size: int) -> int:
    """Number of files a split of ``total_rows`` rows will produce."""
    _validate_chunk_size(chunk_size)
    if total_rows <= 0:
        return 0
    return -(-total_rows // chunk_size)


def resolve_prefix(prefix: Optional[str], base_name: str) -> str:
    """Trimmed prefix, or the file's base name when the prefix is blank."""
    prefix = (prefix or "").strip()
    return prefix or base_name


def chunk_file_name(prefix: str, index: int, total_chunks: int) -> str:
    """
    File name for the chunk at 0-based ``index``.

    The part number is zero-padded to the width of ``total_chunks`` so that
    sorting the names as strings keeps them in part order.
    """
    width = len(str(total_chunks))
    return f"{prefix}_part{str(index + 1).zfill(width)}.csv"


def split_lines(header_line: str, data_lines: Sequence[str], chunk_size: int,
                prefix: str) -> List[Chunk]:
    _validate_chunk_size(chunk_size)

    total_rows = len(data_lines)
    total_chunks = count_chunks(total_rows, chunk_size)
    chunks = []

    for i in range(total_chunks):
        start = i * chunk_size
        end = min(start + chunk_size, total_rows)
        chunk_lines = [header_line, *data_lines[start:end]]
        chunks.append(Chunk(
            content="\n".join(chunk_lines).encode("utf-8"),
            name=chunk_file_name(prefix, i, total_chunks),
            row_count=end - start,
        ))

    logger.debug(f"Split {total_rows} rows into {total_chunks} files of up to {chunk_size} rows")
    return chunks


def split_file(parsed: Optional[ParsedFile], chunk_size: int, prefix: Optional[str] = None) -> List[Chunk]:
    """
    Split the data rows of ``parsed`` into files of at most ``chunk_size`` rows.

    Every chunk starts with the original header line. Rows keep their order and
    none are dropped; only the last chunk may hold fewer than ``chunk_size``
    rows. A file without data rows yields an empty list.

    Raises:
        NoFileLoadedError: ``parsed`` is None
        InvalidChunkSizeError: ``chunk_size`` is not a positive integer
    """
    if parsed is None:
        raise NoFileLoadedError("No file loaded. Upload a CSV file first.")
    _validate_chunk_size(chunk_size)

    return split_lines(
        parsed.header_line,
        parsed.data_lines,
        chunk_size,
        resolve_prefix(prefix, parsed.base_name),
    )


def total_row_count(chunks: Sequence[Chunk]) -> int:
    return sum(chunk.row_count for chunk in chunks)
