from .formatter import (
    count_line,
    format_row,
    render_deleted,
    render_listing,
    render_missing,
    total_amount,
    total_lines,
)

__all__ = [
    "count_line",
    "format_row",
    "render_deleted",
    "render_listing",
    "render_missing",
    "total_amount",
    "total_lines",
]
