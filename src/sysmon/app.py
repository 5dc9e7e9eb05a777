"""sysmon - Main Textual application."""

from datetime import datetime

from rich.markup import escape
from rich.text import Text
from textual.app import App, ComposeResult
from textual.containers import Container, Vertical
from textual.widgets import DataTable, Footer, Sparkline, Static

from sysmon.config import SamplerConfig
from sysmon.models import MetricsSnapshot, ProcessSnapshot
from sysmon.monitor import SamplingCycle


def format_megabytes(size_mb: float) -> str:
    """Format a size in megabytes with two decimals."""
    return f"{size_mb:.2f} MB"


def format_clock(now: datetime | None = None) -> str:
    return (now or datetime.now()).strftime("%H:%M:%S")


class HeaderStats(Static):
    """Header widget showing host identity and total memory."""

    DEFAULT_CSS = """
    HeaderStats {
        height: auto;
        padding: 0 1;
        background: $surface;
    }
    """

    def update_stats(self, snapshot: MetricsSnapshot) -> None:
        """Update the header from a metrics snapshot."""
        host = snapshot.host
        self.update(
            f"[b]SYSTEM ID: {escape(host.hostname)}[/b]    TIME: {format_clock()}\n"
            f"OS: {escape(host.os_name)}\n"
            f"CPU: {escape(host.cpu_model)}\n"
            f"TOTAL RAM: {snapshot.ram_total_gb:.2f} GB"
        )


class ChartPanel(Vertical):
    """A caption above a sparkline of one rolling window."""

    DEFAULT_CSS = """
    ChartPanel {
        height: auto;
        margin: 1 0 0 0;
    }

    ChartPanel Sparkline {
        height: 4;
    }
    """

    def __init__(self, caption: str, *args, **kwargs) -> None:
        """Initialize ChartPanel."""
        super().__init__(*args, **kwargs)
        self._caption = caption

    def compose(self) -> ComposeResult:
        """Compose the caption and chart."""
        yield Static(self._caption, classes="caption")
        yield Sparkline([], summary_function=max)

    def update_chart(self, caption: str, history: tuple[float, ...]) -> None:
        """Replace the caption and the charted history."""
        self._caption = caption
        self.query_one(".caption", Static).update(caption)
        self.query_one(Sparkline).data = list(history)


class ProcessTable(Container):
    """Container for the top processes table."""

    DEFAULT_CSS = """
    ProcessTable {
        height: 1fr;
        border: solid $primary;
    }
    """

    def compose(self) -> ComposeResult:
        """Compose the process table."""
        yield DataTable(id="process-table")

    def on_mount(self) -> None:
        """Initialize the data table when mounted."""
        table = self.query_one("#process-table", DataTable)
        table.cursor_type = "row"
        table.add_column("NAME", key="name", width=24)
        table.add_column("PID", key="pid", width=8)
        table.add_column("RAM USAGE", key="ram", width=12)

    def update_processes(self, processes: tuple[ProcessSnapshot, ...]) -> None:
        """
        Replace the table contents with the latest ranking.

        The ranking keeps no identity between ticks, so rows are rebuilt.
        """
        table = self.query_one("#process-table", DataTable)
        table.clear()
        for proc in processes:
            table.add_row(
                Text(proc.name),
                proc.pid,
                format_megabytes(proc.resident_memory_mb),
            )


class SysmonApp(App):
    """Main sysmon application."""

    TITLE = "sysmon"
    SUB_TITLE = "System Telemetry Monitor"

    CSS = """
    Screen {
        layout: vertical;
    }

    #header-stats {
        dock: top;
    }

    #footer-stats {
        height: 1;
        padding: 0 1;
    }
    """

    BINDINGS = [
        ("q", "quit", "Quit"),
    ]

    def __init__(self, config: SamplerConfig | None = None, cycle: SamplingCycle | None = None) -> None:
        """Initialize the SysmonApp."""
        super().__init__()
        self._config = config or SamplerConfig()
        self._cycle = cycle or SamplingCycle(self._config)
        self._last_snapshot: MetricsSnapshot | None = None

    @property
    def last_snapshot(self) -> MetricsSnapshot | None:
        return self._last_snapshot

    def compose(self) -> ComposeResult:
        """Compose the application layout."""
        yield HeaderStats("Loading system info...", id="header-stats")
        yield ChartPanel("CPU LOAD", id="cpu-chart")
        yield ChartPanel("RAM USAGE", id="ram-chart")
        yield ChartPanel("NET SPEED", id="net-chart")
        yield Static("TOP 10 PROCESSES (by RAM usage)")
        yield ProcessTable()
        yield Static("", id="footer-stats")
        yield Footer()

    def on_mount(self) -> None:
        """Take a first sample and schedule the fixed-interval ticks."""
        self.call_after_refresh(self._tick)
        self.set_interval(self._config.interval, self._tick)

    def _tick(self) -> None:
        """Run one sampling pass and refresh the UI."""
        snapshot = self._cycle.tick()
        self._last_snapshot = snapshot
        self._update_ui(snapshot)

    def _update_ui(self, snapshot: MetricsSnapshot) -> None:
        """Update the UI with the new metrics snapshot."""
        try:
            self.query_one("#header-stats", HeaderStats).update_stats(snapshot)
            self._update_charts(snapshot)
            self.query_one(ProcessTable).update_processes(snapshot.top_processes)
            self.query_one("#footer-stats", Static).update(
                f"UPTIME: {snapshot.uptime_seconds:.0f}s    SYSTEM THREADS: {snapshot.threads}"
            )
        except Exception:
            # Widgets are gone while the app shuts down
            pass

    def _update_charts(self, snapshot: MetricsSnapshot) -> None:
        # The core reports KB per tick; scale to KB/s for display
        net_scale = self._config.ticks_per_second
        self.query_one("#cpu-chart", ChartPanel).update_chart(
            f"CPU LOAD: {snapshot.cpu_percent:.1f}% | TEMP: {snapshot.temperature}",
            snapshot.cpu_history,
        )
        self.query_one("#ram-chart", ChartPanel).update_chart(
            f"RAM USAGE: {snapshot.ram_percent:.1f}% ({snapshot.ram_used_gb:.2f} GB used)",
            snapshot.ram_history,
        )
        self.query_one("#net-chart", ChartPanel).update_chart(
            f"NET SPEED: {snapshot.net_kb * net_scale:.1f} KB/s",
            tuple(value * net_scale for value in snapshot.net_history),
        )


def main() -> None:
    """Entry point for sysmon application."""
    app = SysmonApp()
    app.run()


if __name__ == "__main__":
    main()
