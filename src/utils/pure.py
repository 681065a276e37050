from typing import Any, List, Literal, Optional, Sequence


def format_price(value: float) -> str:
    """Render an amount for display, always with two decimals: 1234.5 -> "$1234.50"."""
    return f"${value:.2f}"


def generate_markdown_table(
    headers: Optional[Sequence[Any]],
    rows: Sequence[Sequence[Any]],
    aligns: Optional[List[Literal["l", "c", "r"]]] = None,
) -> str:
    """
    Generate a Markdown table, used for order summaries.

    Args:
        headers: Column headers, or None to use the first row as headers.
        rows: Table rows; cells are converted with str().
        aligns: Alignment ('l', 'c', 'r') per column, left by default.

    Returns:
        str: Markdown formatted table, or "" when there is nothing to show.
    """
    if not rows and not headers:
        return ""

    if not headers:
        headers, rows = rows[0], rows[1:]

    header_cells = [str(h) for h in headers]
    body = [[str(cell) for cell in row] for row in rows]

    num_cols = len(header_cells)
    if aligns is None:
        aligns = ["l"] * num_cols
    elif len(aligns) != num_cols:
        raise ValueError("Length of aligns must match number of headers.")
    if any(len(row) != num_cols for row in body):
        raise ValueError("Every row must have one cell per header.")

    markers = {"l": ":---", "c": ":---:", "r": "---:"}

    lines = [
        "| " + " | ".join(header_cells) + " |",
        "| " + " | ".join(markers[a] for a in aligns) + " |",
    ]
    lines.extend("| " + " | ".join(row) + " |" for row in body)
    return "\n".join(lines)
