"""Example: header, content and footer regions in both orientations.

Builds the same three-region layout for a portrait phone and for the same
phone turned sideways, then prints the resolved rectangles.
"""

from regionlayout import DisplayMetrics, LayoutBuilder


def build_app_layout() -> LayoutBuilder:
    """Stacked regions in portrait, side-by-side regions in landscape."""
    return (
        LayoutBuilder()
        .portrait(
            {"id": "header", "vertical": "top", "height": 10},
            {
                "id": "content",
                "positionTo": "header",
                "vertical": "below",
                "height": 83,
                "padding": {"top": 1},
            },
            {"id": "footer", "vertical": "bottom", "height": 5},
        )
        .landscape(
            {"id": "header", "horizontal": "left", "width": 10},
            {
                "id": "content",
                "positionTo": "header",
                "horizontal": "after",
                "width": 83,
                "padding": {"left": 1},
            },
            {"id": "footer", "horizontal": "right", "width": 5},
        )
    )


def show(title: str, metrics: DisplayMetrics) -> None:
    """Build the layout for one display and print every user region."""
    layout = build_app_layout().build(metrics)

    print(title)
    print("-" * 70)
    print(f"  {layout!r}")
    for region in layout.user_regions():
        rect = layout.region_rect(region.name)
        print(f"  {region}  center=({rect.x_center:.1f}, {rect.y_center:.1f})")
    print()


def main():
    """Run the example."""
    print("=" * 70)
    print("regionlayout - Header / Content / Footer")
    print("=" * 70)
    print()

    phone = DisplayMetrics.from_pixels(1080, 2340, status_bar_height=60)
    show("Portrait", phone)
    show("Landscape", phone.rotated())


if __name__ == "__main__":
    main()
