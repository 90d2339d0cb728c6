"""
Export Service - Spreadsheet download of the displayed list

One-shot projection of an already filtered and sorted school list into an
.xlsx workbook. Row order is the display order.

Usage:
    from services.export_service import export_workbook, export_filename

    buffer = export_workbook(filter_schools(catalog.all(), params))
    return send_file(buffer, download_name=export_filename(date.today()), ...)
"""

import io
from datetime import date
from typing import Dict, List, Sequence

import pandas as pd

from models.school import School

SHEET_NAME = 'HK_Schools'

# Bilingual headers shown in the spreadsheet
EXPORT_COLUMNS = [
    '排名 (Rank)',
    '校名 (Name)',
    '中文名 (ZH Name)',
    '区域 (District)',
    '学费 (Tuition)',
    '课程 (Curriculum)',
    '教学语言 (Language)',
    '截止日期 (Deadline)',
]

XLSX_MIMETYPE = 'application/vnd.openxmlformats-officedocument.spreadsheetml.sheet'


def export_rows(schools: Sequence[School]) -> List[Dict]:
    return [
        dict(zip(EXPORT_COLUMNS, [
            school.ranking,
            school.name,
            school.name_zh,
            school.district,
            school.tuition_fee,
            ', '.join(c.value for c in school.curriculum),
            ', '.join(school.language),
            school.application_end,
        ]))
        for school in schools
    ]


def export_dataframe(schools: Sequence[School]) -> pd.DataFrame:
    return pd.DataFrame(export_rows(schools), columns=EXPORT_COLUMNS)


def export_workbook(schools: Sequence[School]) -> io.BytesIO:
    """Write the rows to an in-memory .xlsx file, rewound for reading."""
    buffer = io.BytesIO()
    with pd.ExcelWriter(buffer, engine='openpyxl') as writer:
        export_dataframe(schools).to_excel(writer, sheet_name=SHEET_NAME, index=False)
    buffer.seek(0)
    return buffer


def export_filename(today: date) -> str:
    return f"HK_Primary_Rankings_{today.isoformat()}.xlsx"
