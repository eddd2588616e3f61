from dataclasses import dataclass, field
from typing import List, Optional

from logging_config import setup_logger
from split_csv import (
    Chunk,
    NoFileLoadedError,
    ParsedFile,
    SplitError,
    resolve_prefix,
    split_file,
)

logger = setup_logger(__name__)

DEFAULT_ROWS_PER_FILE = 5000


@dataclass
class SplitSession:
    """
    State of one user's splitting session.

    Owned by the page (kept in ``st.session_state``) and handed to the pure
    splitter on every split.
    """
    parsed_file: Optional[ParsedFile] = None
    rows_per_file: int = DEFAULT_ROWS_PER_FILE
    custom_prefix: str = ""
    chunks: List[Chunk] = field(default_factory=list)
    error: Optional[str] = None
    has_result: bool = False

    @property
    def effective_prefix(self):
        if self.parsed_file is None:
            return self.custom_prefix.strip()
        return resolve_prefix(self.custom_prefix, self.parsed_file.base_name)

    @property
    def is_empty_result(self):
        """The last split ran and produced no files."""
        return self.has_result and not self.chunks

    def load_file(self, parsed: ParsedFile):
        self.parsed_file = parsed
        self.custom_prefix = parsed.base_name
        self._clear_result()

    def run_split(self) -> List[Chunk]:
        self._clear_result()
        try:
            if self.parsed_file is None:
                raise NoFileLoadedError("No file loaded. Upload a CSV file first.")
            chunks = split_file(self.parsed_file, self.rows_per_file, self.custom_prefix)
        except SplitError as e:
            logger.warning(f"Split rejected: {e}")
            self.error = str(e)
            raise

        self.chunks = chunks
        self.has_result = True
        logger.info(f"Created {len(chunks)} files from '{self.parsed_file.file_name}'")
        return chunks

    def reset(self):
        self.parsed_file = None
        self.rows_per_file = DEFAULT_ROWS_PER_FILE
        self.custom_prefix = ""
        self._clear_result()

    def _clear_result(self):
        self.chunks = []
        self.error = None
        self.has_result = False
