"""
Output package for API Contract Builder.

This package contains formatters for rendering API definitions
in various formats (text, JSON, YAML, Markdown).
"""

from api_contract_builder.output.formatters import (
    BaseFormatter,
    get_formatter,
)
from api_contract_builder.output.json_output import JsonFormatter
from api_contract_builder.output.markdown_output import MarkdownFormatter
from api_contract_builder.output.text_output import TextFormatter
from api_contract_builder.output.yaml_output import YamlFormatter

__all__ = [
    "BaseFormatter",
    "JsonFormatter",
    "MarkdownFormatter",
    "TextFormatter",
    "YamlFormatter",
    "get_formatter",
]
