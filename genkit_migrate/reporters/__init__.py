"""
Report Generators

Render analysis results and migration plans as terminal tables,
JSON or YAML.
"""

from typing import Dict, Type

from genkit_migrate.core.exceptions import UnsupportedFormatError
from genkit_migrate.reporters.base import ReportGenerator
from genkit_migrate.reporters.json import JSONReportGenerator
from genkit_migrate.reporters.table import TableReportGenerator
from genkit_migrate.reporters.yaml import YAMLReportGenerator

REPORTERS: Dict[str, Type[ReportGenerator]] = {
    TableReportGenerator.format_name: TableReportGenerator,
    JSONReportGenerator.format_name: JSONReportGenerator,
    YAMLReportGenerator.format_name: YAMLReportGenerator,
}


def get_reporter(format: str) -> ReportGenerator:
    """
    Return a reporter for an output format.
    
    Raises:
        UnsupportedFormatError: If no reporter implements ``format``
    """
    reporter_class = REPORTERS.get(format.lower())
    if reporter_class is None:
        raise UnsupportedFormatError(format)
    return reporter_class()


__all__ = [
    "ReportGenerator",
    "JSONReportGenerator",
    "TableReportGenerator",
    "YAMLReportGenerator",
    "REPORTERS",
    "get_reporter",
]
