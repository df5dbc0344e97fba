"""Rich console configuration for CLI output."""

import logging

from rich.console import Console
from rich.markup import escape
from rich.logging import RichHandler
from rich.theme import Theme

# Custom theme for CNIS Analyzer
THEME = Theme(
    {
        "info": "cyan",
        "warning": "yellow",
        "error": "red bold",
        "success": "green",
        "highlight": "magenta",
        "muted": "dim",
        "header": "bold blue",
        "value": "bold",
        "currency": "green",
        "eligible": "green bold",
        "ineligible": "yellow",
        "pendencia": "yellow",
    }
)

# Global console instance
console = Console(theme=THEME)
err_console = Console(theme=THEME, stderr=True)


def configure_logging(level: str = "WARNING") -> None:
    """Send library logs to stderr through Rich."""
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def print_error(message: str) -> None:
    """Print error message."""
    console.print(f"[error]Erro:[/error] {escape(message)}")


def print_warning(message: str) -> None:
    """Print warning message."""
    console.print(f"[warning]Aviso:[/warning] {escape(message)}")


def print_success(message: str) -> None:
    """Print success message."""
    console.print(f"[success]{message}[/success]")


def print_info(message: str) -> None:
    """Print info message."""
    console.print(f"[info]{message}[/info]")
