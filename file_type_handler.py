import csv
import io
import os
import zipfile

import pandas as pd

from grid_model import Grid, column_letter
from logger import get_logger

log = get_logger(__name__)

SUPPORTED_EXTENSIONS = {".csv", ".tsv", ".xlsx", ".parquet"}
UNSUPPORTED_MSG = "Unsupported file type (use .csv, .tsv, .xlsx, or .parquet)"


class DocumentError(Exception):
    """Base class for load/save failures at the document boundary."""


class LoadError(DocumentError):
    pass


class SaveError(DocumentError):
    pass


class UnsupportedFileType(DocumentError):
    pass


def file_extension(name: str) -> str:
    _, ext = os.path.splitext(name or "")
    return ext.lower()


def _frame_to_rows(df: pd.DataFrame) -> list[list[str]]:
    return Grid.from_frame(df).rows


def _letter_columns(count: int) -> list[str]:
    return [column_letter(i) for i in range(count)]


def _read_delimited(data: bytes, sep: str, name: str) -> list[list[str]]:
    skipped = []

    def _skip_bad_line(fields):
        skipped.append(fields)
        return None

    try:
        df = pd.read_csv(
            io.BytesIO(data),
            sep=sep,
            header=None,
            dtype=str,
            keep_default_na=False,
            na_filter=False,
            encoding="utf-8-sig",
            engine="python",
            on_bad_lines=_skip_bad_line,
        )
    except pd.errors.EmptyDataError:
        return []
    except (pd.errors.ParserError, UnicodeDecodeError, csv.Error) as exc:
        raise LoadError(f"Cannot parse {name}: {exc}") from exc
    if skipped:
        log.warning("Skipped %d malformed record(s) in %s", len(skipped), name)
    return _frame_to_rows(df)


def _read_excel(data: bytes, name: str) -> list[list[str]]:
    _ensure_engine("openpyxl", "XLSX")
    from openpyxl.utils.exceptions import InvalidFileException

    try:
        df = pd.read_excel(io.BytesIO(data), sheet_name=0, header=None, dtype=str)
    except (ValueError, KeyError, OSError, zipfile.BadZipFile, InvalidFileException) as exc:
        raise LoadError(f"Cannot parse {name}: {exc}") from exc
    return _frame_to_rows(df)


def _read_parquet(data: bytes, name: str) -> list[list[str]]:
    _ensure_engine("pyarrow", "Parquet")
    try:
        df = pd.read_parquet(io.BytesIO(data))
    except (ValueError, OSError) as exc:
        raise LoadError(f"Cannot parse {name}: {exc}") from exc
    rows = _frame_to_rows(df)
    columns = [str(c) for c in df.columns]
    # Files written by gridpad carry letter names; foreign names become row 0.
    if columns and columns != _letter_columns(len(columns)):
        rows.insert(0, columns)
    return rows


def _ensure_engine(module: str, label: str, error_cls=LoadError):
    try:
        __import__(module)
    except ImportError as exc:
        raise error_cls(
            f"{label} support requires {module}. Install via: pip install {module}"
        ) from exc


def parse_bytes(data: bytes, name: str) -> list[list[str]]:
    """Decode raw file bytes into rows of strings; row 0 is ordinary data."""
    ext = file_extension(name)
    if ext == ".csv":
        return _read_delimited(data, ",", name)
    if ext == ".tsv":
        return _read_delimited(data, "\t", name)
    if ext == ".xlsx":
        return _read_excel(data, name)
    if ext == ".parquet":
        return _read_parquet(data, name)
    raise UnsupportedFileType(UNSUPPORTED_MSG)


class FileTypeHandler:
    DEFAULT_SHEET_NAME = "Sheet1"

    def __init__(self, path: str):
        self.path = path
        self.ext = file_extension(path)
        if self.ext not in SUPPORTED_EXTENSIONS:
            raise UnsupportedFileType(UNSUPPORTED_MSG)

    def exists(self) -> bool:
        return os.path.exists(self.path)

    def load(self) -> list[list[str]]:
        if not self.exists() or os.path.getsize(self.path) == 0:
            return []
        try:
            with open(self.path, "rb") as f:
                data = f.read()
        except OSError as exc:
            raise LoadError(f"Cannot read {self.path}: {exc}") from exc
        return parse_bytes(data, self.path)

    def save(self, rows) -> None:
        df = pd.DataFrame([list(r) for r in rows], dtype=object)
        try:
            if self.ext in (".csv", ".tsv"):
                sep = "\t" if self.ext == ".tsv" else ","
                df.to_csv(self.path, sep=sep, header=False, index=False)
            elif self.ext == ".xlsx":
                _ensure_engine("openpyxl", "XLSX", SaveError)
                df.to_excel(
                    self.path,
                    header=False,
                    index=False,
                    sheet_name=self.DEFAULT_SHEET_NAME,
                )
            elif self.ext == ".parquet":
                _ensure_engine("pyarrow", "Parquet", SaveError)
                df.columns = _letter_columns(len(df.columns))
                df.astype(str).to_parquet(self.path, index=False)
        except (OSError, ValueError) as exc:
            raise SaveError(f"Cannot write {self.path}: {exc}") from exc
        log.info("Saved %d row(s) to %s", len(df), self.path)

