"""Terminal rendering of a month view with rich."""

from __future__ import annotations

from rich import box
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from choir_calendar.annotation_resolver import FALLBACK_NAME, FALLBACK_TITLE, record_field
from choir_calendar.calendar_logic import weekday_labels
from choir_calendar.month_view import AnnotatedCell, DayDetail, MonthView

KIND_STYLES = {
    "holiday": "red",
    "event": "blue",
    "song": "green",
    "birthday": "magenta",
}


def month_title(view: MonthView, locale: str = "ko") -> str:
    if locale == "ko":
        return f"{view.year}년 {view.month}월"
    return f"{view.year}-{view.month:02d}"


def _cell_text(item: AnnotatedCell, width: int) -> Text:
    ann = item.annotations
    text = Text()

    if item.is_selected:
        day_style = "bold black on bright_cyan"
    elif item.is_today:
        day_style = "bold reverse"
    elif ann.is_holiday or item.cell.date.weekday() == 6:
        day_style = "bold red"
    elif item.cell.date.weekday() == 5:
        day_style = "bold blue"
    else:
        day_style = "bold"
    if not item.cell.in_current_month:
        day_style += " dim"
    text.append(f"{item.cell.day:2d}\n", style=day_style)

    for display in ann.events + ann.birthdays + ann.songs:
        label = display.label
        if display.kind == "birthday":
            label = f"🎂 {label}"
        if len(label) > width:
            label = label[: width - 1] + "…"
        text.append(f"{label}\n", style=KIND_STYLES[display.kind])

    for kind in ("events", "birthdays", "songs"):
        hidden = ann.overflow_counts.get(kind, 0)
        if hidden:
            text.append(f"+{hidden}\n", style="dim")
    return text


def render_month(view: MonthView, locale: str = "ko", cell_width: int = 12) -> Table:
    """Render the 42-cell grid as a table of six weeks."""
    table = Table(title=month_title(view, locale), box=box.SIMPLE, show_header=True,
                  padding=(0, 1))
    for col, label in enumerate(weekday_labels(locale)):
        style = "red" if col == 0 else "blue" if col == 6 else "bold"
        table.add_column(label, header_style=style, width=cell_width)
    for week in view.weeks():
        table.add_row(*[_cell_text(item, cell_width) for item in week])
    return table


def render_detail(detail: DayDetail) -> Panel:
    """Uncapped listing for the selected date."""
    body = Text()
    if detail.holiday_name:
        body.append(f"{detail.holiday_name}\n", style=KIND_STYLES["holiday"])
    for event in detail.events:
        title = record_field(event, "title") or FALLBACK_TITLE
        body.append(f"• {title}", style=KIND_STYLES["event"])
        for extra in ("location", "time"):
            value = record_field(event, extra)
            if value:
                body.append(f"  {value}", style="dim")
        body.append("\n")
    for member in detail.birthdays:
        body.append(f"🎂 {record_field(member, 'name') or FALLBACK_NAME}\n",
                    style=KIND_STYLES["birthday"])
    for song in detail.songs:
        body.append(f"♪ {record_field(song, 'title') or FALLBACK_TITLE}\n",
                    style=KIND_STYLES["song"])
    if detail.is_empty:
        body.append("선택한 날짜에 일정이 없습니다.", style="dim")
    return Panel(body, title=detail.date.isoformat())
