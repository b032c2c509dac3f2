"""
Utility functions for copy_all_children.

Includes:
- Hidden entry detection
- UI helpers
"""

from rich.console import Console
from rich.panel import Panel

# Global console instance
console = Console()

# Entries whose name starts with this are treated as hidden
HIDDEN_PREFIX = "."


def print_header(title: str, subtitle: str = ""):
    """Print a styled header."""
    console.print(Panel(f"[bold blue]{title}[/bold blue]\n[italic]{subtitle}[/italic]", expand=False))

def print_error(msg: str):
    console.print(f"[bold red]ERROR:[/bold red] {msg}")

def print_warning(msg: str):
    console.print(f"[bold yellow]WARNING:[/bold yellow] {msg}")

def print_success(msg: str):
    console.print(f"[bold green]SUCCESS:[/bold green] {msg}")


def is_hidden(name: str) -> bool:
    """
    Check if an entry name follows the hidden file convention.

    Args:
        name: A single file or folder name.

    Returns:
        True if the name starts with a dot.
    """
    return name.startswith(HIDDEN_PREFIX)
