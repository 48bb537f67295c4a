"""Daily note template."""

from datetime import date


def daily_note_template(target_date: date, header: str) -> str:
    """Fresh note for ``target_date``: title, blank line, section header, blank line."""
    return f"# {target_date.isoformat()}\n\n{header.strip()}\n\n"
