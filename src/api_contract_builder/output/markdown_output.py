"""
Markdown output formatter.
"""

from api_contract_builder.models.endpoint import Endpoint
from api_contract_builder.output.formatters import BaseFormatter, register_formatter


@register_formatter("markdown")
class MarkdownFormatter(BaseFormatter):
    """
    Format output as Markdown.
    """

    def format_api(self, endpoints: list[Endpoint]) -> str:
        """Format an API definition as Markdown: a summary table, then one section per endpoint."""
        if not endpoints:
            return "_No endpoints declared._\n"

        lines = []
        lines.append("# API Endpoints")
        lines.append("")
        lines.append(f"**Total:** {len(endpoints)} endpoints")
        lines.append("")

        lines.append("| Method | Path | Alias | Response |")
        lines.append("|--------|------|-------|----------|")
        for ep in endpoints:
            alias = f"`{ep.alias}`" if ep.alias else ""
            lines.append(
                f"| {ep.method.value.upper()} | `{ep.path}` | {alias} | `{ep.response.name}` |"
            )
        lines.append("")

        for ep in endpoints:
            lines.append(f"## {ep.method.value.upper()} `{ep.path}`")
            lines.append("")
            if ep.description:
                lines.append(ep.description)
                lines.append("")
            if ep.alias:
                lines.append(f"- **Alias:** `{ep.alias}`")
            lines.append(f"- **Response:** `{ep.response.name}`")

            if ep.parameters:
                lines.append("- **Parameters:**")
                for p in ep.parameters:
                    text = f"  - `{p.name}` ({p.type.value}): `{p.schema_.name}`"
                    if p.description:
                        text += f" - {p.description}"
                    lines.append(text)

            if ep.errors:
                lines.append("- **Errors:**")
                for e in ep.errors:
                    text = f"  - `{e.status}`: `{e.schema_.name}`"
                    if e.description:
                        text += f" - {e.description}"
                    lines.append(text)

            lines.append("")

        return "\n".join(lines)
