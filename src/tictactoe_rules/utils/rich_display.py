"""
Rich-based display for the terminal front end.

Provides:
- Board rendering with the winning line highlighted
- Outcome and error messages
- Logging routed through the shared console
"""

import logging
from typing import Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text

from ..core import GameState, OutcomeKind, PlacementError, Player, find_winning_line
from ..core.errors import ColOutOfBounds, GameConcluded, PositionTaken, RowOutOfBounds

console = Console()

PLAYER_STYLES = {
    Player.X: "bold cyan",
    Player.O: "bold magenta",
}

ERROR_HINTS = {
    RowOutOfBounds: "Row must be 0, 1 or 2",
    ColOutOfBounds: "Column must be 0, 1 or 2",
    GameConcluded: "The game is already over",
    PositionTaken: "That cell is already marked, pick an empty one",
}


def describe_error(error: PlacementError) -> str:
    """User-facing message for a rejected placement."""
    hint = ERROR_HINTS.get(type(error), str(error))
    return f"{hint} (got {error.row}, {error.col})"


class BoardDisplay:
    """
    Rich-based display for a game in progress.

    Shows:
    - The board, with row and column indices
    - Whose turn it is
    - The final outcome
    """

    def __init__(self, output: Optional[Console] = None):
        """
        Initialize board display.

        Args:
            output: Console to print to (defaults to the shared console)
        """
        self.console = output or console

    def log(self, message: str, style: str = ""):
        """Log a message using rich console."""
        self.console.print(message, style=style)

    def log_info(self, message: str):
        """Log info message."""
        self.console.print(f"[blue]ℹ[/blue] {message}")

    def log_success(self, message: str):
        """Log success message."""
        self.console.print(f"[green]✓[/green] {message}")

    def log_error(self, message: str):
        """Log error message."""
        self.console.print(f"[red]✗[/red] {message}")

    def show_header(self, title: str):
        """Show game header."""
        self.console.rule(f"[bold blue]{title}[/bold blue]")
        self.console.print("Enter moves as 'row col' (0-2). Type 'q' to quit.")
        self.console.print()

    def render_board(self, state: GameState) -> Table:
        """Build a table for the board, highlighting any winning line."""
        winning_cells = set(find_winning_line(state.board) or ())

        table = Table(show_header=True, show_lines=True, header_style="dim")
        table.add_column("", style="dim", justify="right")
        for col in range(len(state.board)):
            table.add_column(str(col), justify="center", min_width=3)

        for row_idx, row in enumerate(state.board):
            cells = []
            for col_idx, cell in enumerate(row):
                if cell is None:
                    cells.append(Text("·", style="dim"))
                    continue
                style = PLAYER_STYLES[cell]
                if (row_idx, col_idx) in winning_cells:
                    style += " reverse"
                cells.append(Text(str(cell), style=style))
            table.add_row(str(row_idx), *cells)

        return table

    def show_board(self, state: GameState):
        """Print the board followed by the status line."""
        self.console.print(self.render_board(state))
        if not state.is_concluded:
            style = PLAYER_STYLES[state.turn]
            self.console.print(f"Player [{style}]{state.turn}[/{style}] to move")

    def show_outcome(self, state: GameState):
        """Print the final outcome."""
        outcome = state.outcome
        if outcome.kind is OutcomeKind.WON:
            self.log_success(f"[bold]{outcome.winner} wins[/bold] after {state.move_count} moves")
        elif outcome.kind is OutcomeKind.DRAW:
            self.log_info("[bold]Draw[/bold], the board is full")
        else:
            self.log_info(f"Game in progress, {state.turn} to move")

    def show_error(self, error: PlacementError):
        """Print a rejected placement."""
        self.log_error(describe_error(error))


def setup_rich_logging(level: str = "WARNING"):
    """Configure logging to work nicely with rich console."""
    from rich.logging import RichHandler

    # Remove existing handlers
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    # Add rich handler
    rich_handler = RichHandler(
        console=console,
        show_time=True,
        show_path=False,
        rich_tracebacks=True,
    )
    rich_handler.setFormatter(logging.Formatter("%(message)s"))

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        handlers=[rich_handler],
        format="%(message)s",
    )
