"""
Human-readable text output formatter.
"""

from io import StringIO

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from api_contract_builder.models.endpoint import Endpoint, EndpointMethod
from api_contract_builder.output.formatters import BaseFormatter, register_formatter


@register_formatter("text")
class TextFormatter(BaseFormatter):
    """
    Format output as a table using Rich.
    """

    def _method_style(self, method: EndpointMethod) -> str:
        """Get the style for an HTTP method."""
        if not self.config.colorize:
            return ""

        styles = {
            EndpointMethod.GET: "green",
            EndpointMethod.POST: "yellow",
            EndpointMethod.PUT: "blue",
            EndpointMethod.PATCH: "cyan",
            EndpointMethod.DELETE: "red",
        }
        return styles.get(method, "")

    def format_api(self, endpoints: list[Endpoint]) -> str:
        """Format an API definition as a table."""
        output = StringIO()
        console = Console(file=output, force_terminal=self.config.colorize, width=120)

        if not endpoints:
            console.print("[dim]No endpoints declared.[/dim]")
            return output.getvalue()

        table = Table(title="API Endpoints", show_header=True, header_style="bold")
        table.add_column("Method")
        table.add_column("Path")
        table.add_column("Alias")
        table.add_column("Parameters")
        table.add_column("Response")
        table.add_column("Errors", justify="right")

        for ep in endpoints:
            params = ", ".join(f"{p.name} ({p.type.value})" for p in ep.parameters)
            table.add_row(
                ep.method.value.upper(),
                ep.path,
                ep.alias or "",
                escape(params),
                escape(ep.response.name),
                str(len(ep.errors)),
                style=self._method_style(ep.method) or None,
            )

        console.print(table)
        console.print(f"\nTotal: {len(endpoints)} endpoints")

        return output.getvalue()
