"""
JSON output formatter.
"""

import json

from api_contract_builder.models.endpoint import Endpoint
from api_contract_builder.output.formatters import BaseFormatter, register_formatter


@register_formatter("json")
class JsonFormatter(BaseFormatter):
    """
    Format output as JSON.
    """

    def format_api(self, endpoints: list[Endpoint]) -> str:
        """Format an API definition as JSON."""
        data = {
            "total": len(endpoints),
            "endpoints": [self._endpoint_to_dict(ep) for ep in endpoints],
        }

        return json.dumps(data, indent=self.config.json_indent, default=str)
