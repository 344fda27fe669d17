# volunteer_core/io_layer/paths.py
from dataclasses import dataclass


@dataclass(frozen=True)
class InputPaths:
    """
    input_file: sign-up workbook (Variables + Form Responses sheets)
    output_file: styled assignment workbook
    """
    input_file: str
    output_file: str

    # sheet names (change here if the form is renamed)
    variables_sheet_name: str = "Variables"
    responses_sheet_name: str = "Form Responses 1"
