"""
Spreadsheet export service.

Writes retrieved climate data, and optionally the detected alerts, to an
Excel workbook.
"""

import logging
from datetime import date
from pathlib import Path
from typing import List, Optional, Union

from openpyxl import Workbook

from ..core import constants
from ..core.date_utils import DateUtils, InvalidDateKey
from ..models.alert import AnalysisResult
from ..models.climate import ClimateData

DATA_SHEET = "Climate Data"
ALERTS_SHEET = "Alerts"


def parameter_label(code: str) -> str:
    """Column header for a parameter, e.g. 'Precipitation (mm/day)'."""
    name, unit = constants.PARAMETERS.get(code, (code, ""))
    return f"{name} ({unit})" if unit else name


class ExcelExporter:
    """Export climate data to .xlsx files."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize exporter.

        Args:
            logger: Logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    @staticmethod
    def default_filename(today: Optional[date] = None) -> str:
        today = today or date.today()
        return f"climate_data_{today.strftime('%Y_%m_%d')}.xlsx"

    def build_rows(self, data: ClimateData) -> List[list]:
        """
        Build one row per date key across all selected parameters.

        Returns:
            Rows of [index, date, latitude, longitude, *parameter values];
            a parameter without a value for that day leaves an empty cell
        """
        keys = set()
        for code in data.parameters:
            keys.update(data.series(code).keys())

        rows = []
        for index, key in enumerate(sorted(keys), start=1):
            try:
                day = DateUtils.parse_date_key(key).isoformat()
            except InvalidDateKey:
                self.logger.warning(f"Skipping export row with invalid date key {key!r}")
                continue
            row = [index, day, data.latitude, data.longitude]
            for code in data.parameters:
                value = data.series(code).get(key)
                if value == constants.POWER_FILL_VALUE:
                    value = None
                row.append(value)
            rows.append(row)
        return rows

    def export(
        self,
        data: ClimateData,
        directory: Union[str, Path] = ".",
        filename: Optional[str] = None,
        result: Optional[AnalysisResult] = None
    ) -> Path:
        """
        Write the workbook.

        Args:
            data: Retrieved climate data
            directory: Output directory (created if missing)
            filename: File name; defaults to climate_data_YYYY_MM_DD.xlsx
            result: Engine result to add as an "Alerts" sheet

        Returns:
            Path of the written file

        Raises:
            ValueError: If no parameters are selected or there are no data points
        """
        if not data.parameters:
            raise ValueError("No parameters selected for export")

        rows = self.build_rows(data)
        if not rows:
            raise ValueError("No data points available for export")

        workbook = Workbook()
        sheet = workbook.active
        sheet.title = DATA_SHEET
        sheet.append(
            ["Index", "Date", "Latitude", "Longitude"]
            + [parameter_label(code) for code in data.parameters]
        )
        for row in rows:
            sheet.append(row)

        if result is not None:
            alerts_sheet = workbook.create_sheet(ALERTS_SHEET)
            alerts_sheet.append(
                ["Kind", "Severity", "Title", "Description", "Count", "First dates"]
            )
            for alert in result.alerts:
                alerts_sheet.append([
                    alert.kind.value,
                    alert.severity.value,
                    alert.title,
                    alert.description,
                    alert.matched_count,
                    ", ".join(alert.matched_dates),
                ])

        output_dir = Path(directory)
        output_dir.mkdir(parents=True, exist_ok=True)
        path = output_dir / (filename or self.default_filename())
        workbook.save(path)

        self.logger.info(f"Exported {len(rows)} rows to {path}")
        return path
