"""
Tabular projection of parsed values for the table view.
"""

import json

import pandas as pd

from models import ParsedValue
from models.parsed_value import is_container, type_name
from utils.performance import monitor_performance
from .errors import TableProjectionError

ROW_NUMBER_COLUMN = "#"


def display_cell(value: ParsedValue) -> str:
    """
    Render one cell as text.

    None is an empty cell, containers are compact JSON, booleans are
    true/false as in JSON.
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))


@monitor_performance("table_projection")
def to_table(value: ParsedValue) -> pd.DataFrame:
    """
    Project a parsed value onto rows and columns.

    Shapes:
    - list of maps: '#' plus the union of keys, in first-seen order
    - list of lists: '#' plus positional columns Column 1..N
    - list of scalars: Index / Value
    - map: Key / Value

    Args:
        value: Parsed value

    Returns:
        DataFrame of display strings (the '#' column holds 1-based ints)

    Raises:
        TableProjectionError: If value is a scalar
    """
    if not is_container(value):
        raise TableProjectionError(f"此数据类型 ({type_name(value)}) 不支持表格显示")

    if isinstance(value, dict):
        return pd.DataFrame(
            [{"Key": key, "Value": display_cell(item)} for key, item in value.items()],
            columns=["Key", "Value"],
        )

    if not value:
        return pd.DataFrame()

    first = value[0]
    if isinstance(first, dict):
        return _records_table(value)
    if isinstance(first, list):
        return _rows_table(value)

    return pd.DataFrame(
        [{"Index": index, "Value": display_cell(item)} for index, item in enumerate(value)],
        columns=["Index", "Value"],
    )


def _records_table(items: list) -> pd.DataFrame:
    headers = []
    seen = set()
    for item in items:
        if isinstance(item, dict):
            for key in item:
                if key not in seen:
                    seen.add(key)
                    headers.append(key)

    records = []
    for number, item in enumerate(items, start=1):
        source = item if isinstance(item, dict) else {}
        record = {ROW_NUMBER_COLUMN: number}
        for header in headers:
            record[header] = display_cell(source.get(header))
        records.append(record)

    return pd.DataFrame(records, columns=[ROW_NUMBER_COLUMN] + headers)


def _rows_table(items: list) -> pd.DataFrame:
    rows = [item if isinstance(item, list) else [item] for item in items]
    width = max(len(row) for row in rows)
    headers = [f"Column {index}" for index in range(1, width + 1)]

    records = []
    for number, row in enumerate(rows, start=1):
        record = {ROW_NUMBER_COLUMN: number}
        for index, header in enumerate(headers):
            record[header] = display_cell(row[index]) if index < len(row) else ""
        records.append(record)

    return pd.DataFrame(records, columns=[ROW_NUMBER_COLUMN] + headers)
