# main_cli.py
from __future__ import annotations

import argparse
import logging
from dataclasses import replace

from volunteer_core.config import DEFAULT_CONFIG
from volunteer_core.io_layer.paths import InputPaths
from volunteer_core.io_layer.xlsx_reader import InputFormatError
from volunteer_core.pipeline import run_allocation
from volunteer_core.reporting.export_xlsx import export_result_xlsx
from volunteer_core.validation.validator import ValidationError


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Assign party and field trip volunteers to teachers")
    p.add_argument("--input", default="input.xlsx", help="sign-up workbook (Variables + Form Responses 1)")
    p.add_argument("--output", default="output.xlsx", help="assignment workbook to write")
    p.add_argument("--seed", type=int, default=DEFAULT_CONFIG.default_seed, help="random seed")
    p.add_argument("--no-summary", action="store_true", help="omit the Summary sheet")
    p.add_argument("--verbose", "-v", action="store_true", help="debug logging")
    return p.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    cfg = DEFAULT_CONFIG
    if args.no_summary:
        cfg = replace(cfg, include_summary_sheet=False)

    paths = InputPaths(input_file=args.input, output_file=args.output)

    try:
        run = run_allocation(
            paths.input_file,
            seed=args.seed,
            cfg=cfg,
            variables_sheet=paths.variables_sheet_name,
            responses_sheet=paths.responses_sheet_name,
        )
    except FileNotFoundError:
        print(f"[ERROR] input file not found: {paths.input_file}")
        return 1
    except InputFormatError as e:
        print(f"[ERROR] cannot read input: {e}")
        return 1
    except ValidationError as e:
        print(f"[ERROR] {e.message}")
        return 1

    for w in run.warnings:
        print(f"[WARN] {w.message}")

    try:
        out_path = export_result_xlsx(paths.output_file, run.result, cfg)
    except OSError as e:
        print(f"[ERROR] cannot write output: {e}")
        return 1

    print(f"[RESULT] OK: {out_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
