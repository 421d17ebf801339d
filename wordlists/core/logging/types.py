from __future__ import annotations

from typing import Literal, TypedDict


class LoggingExtra(TypedDict, total=False):
    event: str
    error_code: str
    reason: str
    # Word list fields
    path: str
    input_path: str
    output_path: str
    size_from: str
    count: int
    sample_size: int
    lines_written: int
    # Classifier fields
    language: Literal["crk", "eng"]
    features: int
    pruned: int
    elapsed_seconds: float
