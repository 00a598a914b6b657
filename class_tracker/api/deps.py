from datetime import date


def get_today() -> date:
    """Server-local date. Overridden in tests for deterministic summaries."""
    return date.today()
