"""Output generation for JSON, CSV and Excel exports."""

from custom_reports.output.csv_exporter import CSVExporter
from custom_reports.output.excel_writer import ExcelWriter
from custom_reports.output.json_exporter import JSONExporter, payload_to_dict

__all__ = ["CSVExporter", "ExcelWriter", "JSONExporter", "payload_to_dict"]
