from typing import Any, List
from rich.console import Console
from rich.json import JSON
from rich.panel import Panel
from rich.table import Table

console = Console()


def success(message: str):
    """Display success message"""
    console.print(f"✔ {message}", style="bold green")


def error(message: str):
    """Display error message"""
    console.print(f"✖ {message}", style="bold red")


def warning(message: str):
    """Display warning message"""
    console.print(f"⚠  {message}", style="bold yellow")


def info(message: str):
    """Display info message"""
    console.print(f"{message}", style="cyan")


def create_table(title: str, columns: List[str]) -> Table:
    """Create a rich table"""
    table = Table(title=title, show_header=True, header_style="bold magenta")
    for column in columns:
        table.add_column(column)
    return table


def print_json(data: Any, title: str, style: str = "blue"):
    """Render data as highlighted JSON inside a panel"""
    console.print(Panel(JSON.from_data(data), title=title, border_style=style))
