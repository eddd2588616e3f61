import io
import os
import re

import pandas as pd

from logging_config import setup_logger
from split_csv import ParsedFile

logger = setup_logger(__name__)

PREVIEW_ROWS = 10
DELIMITER = ","

# UTF-8 (with or without BOM) first, then the Korean Windows code page that
# Excel exports use. latin-1 maps every byte, so it always succeeds.
ENCODINGS = ('utf-8-sig', 'cp949', 'latin-1')

_LINE_BREAK = re.compile(r'\r\n|\n|\r')


def decode_upload(raw):
    if isinstance(raw, str):
        return raw
    for encoding in ENCODINGS[:-1]:
        try:
            return raw.decode(encoding)
        except UnicodeDecodeError:
            continue
    return raw.decode(ENCODINGS[-1])


def base_name_of(file_name):
    """'reports/sales.2024.csv' -> 'sales.2024'"""
    name = os.path.basename((file_name or "").replace("\\", "/"))
    stem, _ext = os.path.splitext(name)
    return stem or name


def parse_csv_text(text, file_name=""):
    """
    Break CSV text into header and data lines.

    Lines are not parsed into fields; a quoted value spanning several lines
    is treated as several rows. Blank lines are dropped. Text with no
    non-blank line gives an empty header and no rows.
    """
    lines = [line for line in _LINE_BREAK.split(text or "") if line.strip()]

    header_line = lines[0] if lines else ""
    data_lines = tuple(lines[1:])
    header_cols = read_header_cols(header_line)

    return ParsedFile(
        base_name=base_name_of(file_name),
        header_line=header_line,
        data_lines=data_lines,
        file_name=file_name,
        header_cols=header_cols,
    )


def load_upload(raw, file_name):
    parsed = parse_csv_text(decode_upload(raw), file_name)
    logger.info(f"Loaded '{file_name}': {len(parsed.header_cols)} columns, {parsed.total_rows} data rows")
    return parsed


def _read_lines(lines, **kwargs):
    return pd.read_csv(
        io.StringIO("\n".join(lines)),
        sep=DELIMITER,
        dtype=str,
        keep_default_na=False,
        index_col=False,
        **kwargs,
    )


def read_header_cols(header_line):
    """Column names of the header line, quotes honoured."""
    if not header_line.strip():
        return ()
    columns = _read_lines([header_line], nrows=0).columns
    return tuple(str(col).strip() for col in columns)


def preview_frame(parsed, limit=PREVIEW_ROWS):
    """First ``limit`` data rows as a DataFrame, for display only."""
    if not parsed.header_line.strip():
        return pd.DataFrame()

    frame = _read_lines([parsed.header_line, *parsed.data_lines[:limit]], on_bad_lines="skip")
    return frame.fillna("")
