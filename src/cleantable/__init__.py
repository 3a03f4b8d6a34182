"""cleantable -- Turn messy, irregularly delimited text into a clean table.

Quick start::

    from cleantable import convert_text, serialize_markdown

    result = convert_text("Name | Age\\nAlice | 24\\nBob | 30")
    print(result.strategy)          # pipe
    print(serialize_markdown(result.table))
"""

__version__ = "1.0.0"

from ._types import (
    CandidateScore,
    CleaningOptions,
    ConversionResult,
    FileLoadError,
    LoadedSource,
    Strategy,
    Table,
    custom_label,
)

# Inference and readers
from .ingestion import (
    infer_table,
    score_candidates,
    score_table,
    split_lines,
    looks_like_csv,
    read_csv_table,
    load_file,
    read_xlsx_table,
)

# Cleaning
from .cleaner import clean_table

# Export
from .export import (
    serialize_tsv,
    serialize_markdown,
    serialize_csv,
    export_table,
    write_xlsx,
)

# Pipeline
from .pipeline import convert_text, convert_table, convert_file


__all__ = [
    "__version__",
    # Types
    "CandidateScore",
    "CleaningOptions",
    "ConversionResult",
    "FileLoadError",
    "LoadedSource",
    "Strategy",
    "Table",
    "custom_label",
    # Inference
    "infer_table",
    "score_candidates",
    "score_table",
    "split_lines",
    # Readers
    "looks_like_csv",
    "read_csv_table",
    "read_xlsx_table",
    "load_file",
    # Cleaning
    "clean_table",
    # Export
    "serialize_tsv",
    "serialize_markdown",
    "serialize_csv",
    "export_table",
    "write_xlsx",
    # Pipeline
    "convert_text",
    "convert_table",
    "convert_file",
]
