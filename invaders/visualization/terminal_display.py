"""
Terminal Game Display - Rich-based console view of the simulation.

Shows, updating in place:
- Status header (level, lives, score)
- Player line with health bar
- The first few enemies and a count of the rest
- Projectile counts
- Recent event messages
- Help / stats panels on request, and a final summary with the rank
"""

from collections import deque
from typing import Any, Dict, Optional, Tuple

from rich.console import Console, Group
from rich.live import Live
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ..core.renderer_interface import RendererInterface
from ..factories.enemy_type import EnemyType
from ..factories.enemy_factory import describe_enemy_type

VISIBLE_ENEMIES = 5
QUERY_PANEL_FRAMES = 30

HELP_ROWS = [
    ("a / left", "Move left"),
    ("d / right", "Move right"),
    ("w / up", "Move up"),
    ("s / down", "Move down"),
    ("space / fire", "Shoot"),
    ("q / quit", "Leave the game"),
    ("stats", "Show detailed statistics"),
    ("help", "Show this help"),
]


class TerminalGameDisplay(RendererInterface):
    """
    Rich-based terminal display for a running game.

    With live=True the view redraws in place; otherwise each render
    prints a new frame.
    """

    def __init__(
        self,
        console: Optional[Console] = None,
        live: bool = True,
        message_history: int = 10,
    ):
        """
        Initialize the terminal display.

        Args:
            console: Console to draw on (defaults to a new terminal console)
            live: Redraw in place with rich.live.Live
            message_history: Number of event messages kept on screen
        """
        # Force UTF-8 friendly output on Windows terminals
        self.console = console or Console(force_terminal=True, legacy_windows=False, markup=True)
        self.use_live = live
        self.live: Optional[Live] = None
        self.messages: deque = deque(maxlen=message_history)
        self._query: Optional[str] = None
        self._query_until = 0

    def start(self):
        """Start the live display."""
        if self.use_live and self.live is None:
            self.live = Live(
                Text("Starting..."),
                console=self.console,
                refresh_per_second=4,
                transient=False,
            )
            self.live.start()

    def stop(self):
        """Stop the live display."""
        if self.live:
            self.live.stop()
            self.live = None

    def close(self) -> None:
        self.stop()

    def get_preferred_size(self) -> Tuple[int, int]:
        return (self.console.width, self.console.height)

    def render(self, game_state: Dict[str, Any]) -> Panel:
        """Record the snapshot's events and redraw."""
        for message in game_state.get("events", []):
            # Events can echo raw user input
            self.messages.append(escape(message))

        queries = game_state.get("queries", [])
        if queries:
            self._query = queries[-1]
            self._query_until = game_state.get("frame", 0) + QUERY_PANEL_FRAMES

        display = self.build_display(game_state)
        if self.live:
            self.live.update(display)
        else:
            self.console.print(display)
        return display

    def build_display(self, game_state: Dict[str, Any]) -> Panel:
        """Build the complete display panel for a snapshot."""
        if game_state.get("game_over", False):
            return self._build_summary_panel(game_state)

        sections = [
            self._build_header(game_state),
            self._build_entities_table(game_state),
            self._build_messages_panel(),
        ]

        if self._query and game_state.get("frame", 0) <= self._query_until:
            if self._query == "help":
                sections.append(self._build_help_panel())
            elif self._query == "stats":
                sections.append(self._build_stats_panel(game_state))

        return Panel(Group(*sections), title="Space Invaders", border_style="blue")

    def _build_header(self, game_state: Dict[str, Any]) -> Panel:
        header = Text()
        header.append(f"LEVEL {game_state.get('level', 1)}", style="bold cyan")
        header.append("  |  ")
        header.append(f"LIVES {game_state.get('lives', 0)}", style="bold red")
        header.append("  |  ")
        header.append(f"SCORE {game_state.get('score', 0)}", style="bold yellow")
        header.append("\n")
        header.append(game_state.get("status", ""), style="dim")
        return Panel(header, style="cyan")

    def _build_entities_table(self, game_state: Dict[str, Any]) -> Panel:
        table = Table(show_header=False, box=None, padding=(0, 1))
        table.add_column("Entity", style="cyan")
        table.add_column("Details", style="white")

        player = game_state.get("player", {})
        if player:
            hearts = "❤" * max(0, player.get("health", 0) // 20)
            table.add_row(
                f"{player.get('sprite', '')} Player",
                f"({player.get('x')}, {player.get('y')}) [red]{hearts}[/] "
                f"{player.get('health')}/{player.get('max_health')}",
            )

        enemies = game_state.get("enemies", [])
        for enemy in enemies[:VISIBLE_ENEMIES]:
            max_health = enemy.get("max_health", 0)
            ratio = enemy.get("health", 0) / max_health if max_health else 0.0
            bar = "▓" * max(1, int(ratio * 5))
            table.add_row(
                f"{enemy.get('sprite', '')} {escape(enemy.get('name', ''))}",
                f"({enemy.get('x')}, {enemy.get('y')}) [magenta]{bar}[/]",
            )
        if len(enemies) > VISIBLE_ENEMIES:
            table.add_row("", f"[dim]... and {len(enemies) - VISIBLE_ENEMIES} more enemies[/]")

        player_shots = len(game_state.get("player_projectiles", []))
        enemy_shots = len(game_state.get("enemy_projectiles", []))
        table.add_row("Projectiles", f"🔸 {player_shots} active   🔻 {enemy_shots} active")

        return Panel(table, title=f"Enemies: {len(enemies)}", border_style="yellow")

    def _build_messages_panel(self) -> Panel:
        if not self.messages:
            content = "[dim]No messages yet...[/]"
        else:
            content = "\n".join(self.messages)
        return Panel(content, title="Messages", border_style="blue")

    def _build_help_panel(self) -> Panel:
        table = Table(show_header=False, box=None, padding=(0, 1))
        table.add_column("Key", style="bold cyan")
        table.add_column("Action", style="white")
        for key, action in HELP_ROWS:
            table.add_row(key, action)
        table.add_row("", "")
        for enemy_type in sorted(EnemyType, key=lambda t: t.points):
            table.add_row(
                f"{enemy_type.sprite} {enemy_type.label}",
                f"{enemy_type.points} points - {describe_enemy_type(enemy_type)}",
            )
        return Panel(table, title="Help", border_style="green")

    def _build_stats_panel(self, game_state: Dict[str, Any]) -> Panel:
        table = Table(show_header=False, box=None, padding=(0, 1))
        table.add_column("Stat", style="cyan")
        table.add_column("Value", style="white")

        player = game_state.get("player", {})
        stats = game_state.get("stats")
        if stats is not None:
            table.add_row("Score", f"[bold yellow]{stats.total_score}[/]")
            table.add_row("Level", f"{stats.current_level}")
            table.add_row("Lives", f"{stats.lives_remaining}")
            table.add_row("Status", stats.status)
            table.add_row("Session time", f"{stats.session_seconds:.0f}s")
        else:
            table.add_row("Score", f"[bold yellow]{game_state.get('score', 0)}[/]")
            table.add_row("Level", f"{game_state.get('level', 1)}")
            table.add_row("Lives", f"{game_state.get('lives', 0)}")
            table.add_row("Status", game_state.get("status", ""))
        table.add_row("Frames", f"{game_state.get('frame', 0)}")
        table.add_row("Enemies", f"{len(game_state.get('enemies', []))}")
        table.add_row("Player shots", f"{len(game_state.get('player_projectiles', []))}")
        table.add_row("Enemy shots", f"{len(game_state.get('enemy_projectiles', []))}")
        table.add_row("Player health", f"{player.get('health', 0)}/{player.get('max_health', 0)}")
        return Panel(table, title="Statistics", border_style="magenta")

    def _build_summary_panel(self, game_state: Dict[str, Any]) -> Panel:
        table = Table(show_header=False, box=None, padding=(0, 1))
        table.add_column("Stat", style="cyan")
        table.add_column("Value", style="white")
        table.add_row("Final score", f"[bold yellow]{game_state.get('score', 0)}[/]")
        table.add_row("Level reached", f"{game_state.get('level', 1)}")
        table.add_row("Total frames", f"{game_state.get('frame', 0)}")
        table.add_row("Rank", f"[bold]{escape(game_state.get('rank', ''))}[/]")

        title = "GAME OVER" if game_state.get("lives", 0) == 0 else "GAME FINISHED"
        return Panel(
            Group(table, self._build_messages_panel()),
            title=title,
            border_style="red",
        )
