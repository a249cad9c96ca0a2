"""Example: a grid of cells inside a content region.

Tiles the content region with a 4x4 grid, then shrinks every cell by a few
physical pixels so neighbouring cells are visibly separated.
"""

from regionlayout import DisplayMetrics, LayoutBuilder, grid_cell_id, grid_specs

GRID_SIZE = 4
GRID_PIXEL_PADDING = 8


def main():
    """Run the example."""
    cells = grid_specs("", "content", rows=GRID_SIZE, columns=GRID_SIZE)
    builder = (
        LayoutBuilder()
        .add(id="header", vertical="top", height=10)
        .add(id="content", positionTo="header", vertical="below", height=83, padding={"top": 1})
        .add(id="footer", vertical="bottom", height=5)
        .extend(cells)
        .shrink([cell.id for cell in cells], GRID_PIXEL_PADDING)
    )

    layout = builder.build(DisplayMetrics.from_pixels(768, 1024))

    print("=" * 70)
    print("regionlayout - Content Grid")
    print("=" * 70)
    print(f"Stage: {layout.stage}")
    print(f"Content: {layout['content']}")
    print(f"Pixel size: {layout.pixel_size:.3f} content units per pixel")
    print()

    for row in range(1, GRID_SIZE + 1):
        line = []
        for column in range(1, GRID_SIZE + 1):
            cell = layout[grid_cell_id("", row, column)]
            line.append(f"{cell.left:7.1f},{cell.top:7.1f}")
        print("  " + " | ".join(line))
    print()

    cell = layout[grid_cell_id("", 1, 1)]
    print(f"Cell size after shrinking: {cell.width:.1f} x {cell.height:.1f}")


if __name__ == "__main__":
    main()
