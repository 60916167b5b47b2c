"""Reporting module - text and JSON result reports."""

from .json_reporter import JsonReporter
from .text_reporter import NOT_EXECUTED_MESSAGE, TextReporter

__all__ = ["JsonReporter", "NOT_EXECUTED_MESSAGE", "TextReporter"]
