"""
YAML output formatter.
"""

import yaml

from api_contract_builder.models.endpoint import Endpoint
from api_contract_builder.output.formatters import BaseFormatter, register_formatter


@register_formatter("yaml")
class YamlFormatter(BaseFormatter):
    """
    Format output as YAML.
    """

    def format_api(self, endpoints: list[Endpoint]) -> str:
        """Format an API definition as YAML."""
        data = {
            "total": len(endpoints),
            "endpoints": [self._endpoint_to_dict(ep) for ep in endpoints],
        }

        return yaml.dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True)
