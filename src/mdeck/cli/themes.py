from . import app


@app.command()
def themes() -> None:
    """List the available themes and the colors of their roles."""
    from rich.console import Console
    from rich.table import Table
    from rich.text import Text

    from ..components.themes import ThemeCatalog
    from ..models import Role

    table = Table("Theme", *(role.value for role in Role))
    for theme in ThemeCatalog():
        swatches = []
        for role in Role:
            rgb = theme.resolve(role)
            hex_value = f"#{rgb.red:02x}{rgb.green:02x}{rgb.blue:02x}"
            swatches.append(Text(f"■ {hex_value}", style=hex_value))
        table.add_row(theme.get_name(), *swatches)
    Console().print(table)
