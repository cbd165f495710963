"""Interactive score dashboard powered by Textual."""

from __future__ import annotations

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.widgets import DataTable, Footer, Header, Label, Static

from ccscore.models import ScoreReport
from ccscore.report import breakdown_rows, format_share, mini_bar


CSS = """
Screen {
    layout: vertical;
}

#score-box {
    height: auto;
    padding: 1 2;
    margin: 1 2 0 2;
    border: tall $primary-background-darken-2;
}

.section-title {
    text-style: bold;
    color: $accent;
    padding: 0 2;
    margin: 1 0 0 0;
}

#breakdown-table {
    height: auto;
    margin: 0 2;
}

#share-text {
    height: auto;
    padding: 1 2;
    color: $text-muted;
    display: none;
}
"""

GRADE_STYLES = {
    "S": "bold magenta",
    "A": "bold green",
    "B": "bold cyan",
    "C": "bold yellow",
    "D": "bold dark_orange",
    "F": "bold red",
}


class ScoreApp(App):
    """cc-score: your AI productivity score."""

    TITLE = "cc-score"
    CSS = CSS

    BINDINGS = [
        Binding("s", "toggle_share", "Share"),
        Binding("q", "quit", "Quit"),
    ]

    def __init__(self, report: ScoreReport, show_share: bool = False) -> None:
        super().__init__()
        self.report = report
        self.show_share = show_share
        self.sub_title = f"last {report.consistency.window} days, as of {report.today}"

    def compose(self) -> ComposeResult:
        yield Header()
        yield Static(id="score-box")
        yield Vertical(
            Label("Breakdown", classes="section-title"),
            DataTable(id="breakdown-table", cursor_type="row"),
        )
        yield Static(id="share-text")
        yield Footer()

    def on_mount(self) -> None:
        r = self.report
        style = GRADE_STYLES.get(r.grade.grade, "bold")
        self.query_one("#score-box", Static).update(
            f"[{style}]{r.total} / 100   {r.grade.grade}[/]  {r.grade.label}\n"
            f"[dim]{r.grade.description}[/]"
        )

        table = self.query_one("#breakdown-table", DataTable)
        table.add_columns("Component", "", "Points", "Detail")
        for label, pts, max_pts, detail in breakdown_rows(r):
            table.add_row(label, mini_bar(pts, max_pts, color=False), f"{pts}/{max_pts}", detail)

        share = self.query_one("#share-text", Static)
        share.update(format_share(r))
        share.display = self.show_share

    def action_toggle_share(self) -> None:
        share = self.query_one("#share-text", Static)
        share.display = not share.display
