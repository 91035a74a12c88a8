from roster.cli.collector import PromptReader
from roster.cli.formatter import format_record, render

__all__ = ["PromptReader", "format_record", "render"]
