# volunteer_core/pipeline.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List

import pandas as pd

from volunteer_core.allocation.engine import allocate
from volunteer_core.config import AppConfig, DEFAULT_CONFIG
from volunteer_core.domain.models import AllocationResult, InputData
from volunteer_core.io_layer.paths import InputPaths
from volunteer_core.io_layer.xlsx_reader import Source, XlsxReader
from volunteer_core.reporting.report import build_assignment_frame, build_fill_summary
from volunteer_core.validation.validator import ValidationWarning, validate_input

logger = logging.getLogger(__name__)


@dataclass
class PipelineResult:
    data: InputData
    warnings: List[ValidationWarning]
    result: AllocationResult
    assignment_df: pd.DataFrame
    summary_df: pd.DataFrame


def run_allocation(
    source: Source,
    seed: int,
    cfg: AppConfig = DEFAULT_CONFIG,
    variables_sheet: str = InputPaths.variables_sheet_name,
    responses_sheet: str = InputPaths.responses_sheet_name,
) -> PipelineResult:
    """
    read -> validate -> allocate -> tabulate.
    Input problems surface as FileNotFoundError / InputFormatError / ValidationError
    before the engine runs; the engine itself does not fail.
    """
    reader = XlsxReader(cfg=cfg)
    data = reader.build_input_data(source, variables_sheet, responses_sheet)

    warnings = validate_input(data, cfg)
    if warnings:
        logger.info("%d validation warning(s)", len(warnings))

    result = allocate(
        data.volunteers,
        data.parties,
        data.field_trips,
        data.all_teachers,
        seed=seed,
        cfg=cfg,
    )
    return PipelineResult(
        data=data,
        warnings=warnings,
        result=result,
        assignment_df=build_assignment_frame(result),
        summary_df=build_fill_summary(result, cfg),
    )
