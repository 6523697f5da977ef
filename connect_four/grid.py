"""Creation and text rendering of the game grid."""

EMPTY = " "


def create_grid(rows: int, cols: int) -> list[list[str]]:
    """Return a grid of ``rows`` rows of ``cols`` empty cells."""
    return [[EMPTY] * cols for _ in range(rows)]


def format_grid(grid: list[list[str]]) -> str:
    """Render the grid as text with borders and column numbers below."""
    cols = len(grid[0])
    border = "+" + "---+" * cols + "\n"
    lines = [border]
    for row in grid:
        lines.append("|" + "".join(f" {cell} |" for cell in row) + "\n")
        lines.append(border)
    lines.append("".join(f" {number}  " for number in range(1, cols + 1)))
    lines.append("\n\n")
    return "".join(lines)


def display_grid(grid: list[list[str]]) -> None:
    """Print the grid to standard output."""
    print(format_grid(grid), end="")