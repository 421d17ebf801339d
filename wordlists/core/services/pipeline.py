from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass

from ..config.settings import Settings
from ..errors.base import AppError, ErrorCode
from .data.corpus import count_lines, iter_lines, read_lines, write_lines
from .sampling.sampler import reservoir_sample, sample_lines
from .sorting.sorter import sort_case_insensitive


@dataclass
class PipelineResult:
    input_path: str
    output_path: str
    sample_size: int
    lines_written: int


@dataclass
class WordListPipeline:
    """Sample lines from a word list and write them case-insensitively sorted.

    Semantics:
    - The sample size is the input's own line count unless given explicitly
      or taken from the line count of a reference word list.
    - Sampling is without replacement, so the default run is a full shuffle
      and the output holds exactly the input's lines.
    - Each stage finishes before the next starts; the output file is only
      opened once the sorted sample exists.
    - Errors propagate as AppError; nothing is retried.
    """

    settings: Settings

    def run(
        self: WordListPipeline,
        input_path: str,
        output_path: str,
        *,
        sample_size: int | None = None,
        size_from: str | None = None,
        rng: random.Random | None = None,
    ) -> PipelineResult:
        logger = logging.getLogger(__name__)
        if sample_size is not None and size_from is not None:
            raise AppError(
                ErrorCode.INVALID_ARGUMENT,
                "sample size and size reference are mutually exclusive",
            )
        encoding = self.settings.io.encoding
        if rng is None:
            rng = random.Random(self.settings.sampling.seed)

        started = time.perf_counter()
        logger.info(
            "Word list pipeline started",
            extra={
                "event": "pipeline_started",
                "input_path": input_path,
                "output_path": output_path,
            },
        )

        if size_from is not None:
            k = count_lines(size_from, encoding=encoding)
            logger.info(
                "Sample size taken from reference word list",
                extra={"event": "sample_size_resolved", "size_from": size_from, "sample_size": k},
            )
            sampled = reservoir_sample(iter_lines(input_path, encoding=encoding), k, rng=rng)
        else:
            lines = read_lines(input_path, encoding=encoding)
            k = len(lines) if sample_size is None else sample_size
            sampled = sample_lines(lines, k, rng=rng)

        ordered = sort_case_insensitive(sampled)
        written = write_lines(output_path, ordered, encoding=encoding)

        logger.info(
            "Word list pipeline completed",
            extra={
                "event": "pipeline_completed",
                "input_path": input_path,
                "output_path": output_path,
                "sample_size": k,
                "lines_written": written,
                "elapsed_seconds": time.perf_counter() - started,
            },
        )
        return PipelineResult(
            input_path=input_path,
            output_path=output_path,
            sample_size=k,
            lines_written=written,
        )
