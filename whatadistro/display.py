# whatadistro/display.py

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from whatadistro.taxonomy import DistroVariant


def render(identity) -> Panel:
    """Fitted panel with the identity fields, the resolved variant and its family."""
    variant = identity.variant
    similar = sorted(v.value for v in identity.similar_variants)
    rows = [
        ("Name", identity.name),
        ("Pretty name", identity.pretty_name),
        ("ID", identity.id),
        ("Version", identity.version),
        ("Variant", None if variant is DistroVariant.UNKNOWN else variant.display_name),
        ("Similar", ", ".join(similar)),
    ]
    return Panel.fit(
        "\n".join(f"[bold]{label}[/bold]: {escape(value) if value else '-'}" for label, value in rows),
        title="[cyan]Distro[/cyan]",
        border_style="cyan",
    )


def show(identity, console=None):
    (console or Console()).print(render(identity))
