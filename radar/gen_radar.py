"""Generate radar chart SVGs for the sample dataset.

Writes one SVG per zone layout into the current directory:
radar.svg (equal-arc bands) and radar_quadrant.svg (quadrant dividers).
"""
import os

from polar.geometry import poly_area
from polar.svg import scene_to_svg
from radar.config import ChartConfig
from radar.constants import EQUAL_ARC, QUADRANT
from radar.dataset import CATEGORIES, CHART_SIZE, ZONE_LABELS
from radar.scene import render

_OUTPUTS = [
    (EQUAL_ARC, "radar.svg"),
    (QUADRANT, "radar_quadrant.svg"),
]

# ============================================================
# Geometry computation
# ============================================================

def build_radar_data(layout: str = EQUAL_ARC, size: float = CHART_SIZE,
                     data=CATEGORIES, zone_labels=ZONE_LABELS):
    """Render the scene and collect summary numbers for the generator output."""
    cfg = ChartConfig(size=size, layout=layout, decorative_ring=(layout == QUADRANT))
    scene = render(cfg, data, zone_labels)
    return {
        "cfg": cfg, "scene": scene,
        "radii": scene.overlay.radii,
        "area": poly_area(scene.overlay.points),
        "labels": [d.label for d in data],
    }

# ============================================================
# SVG rendering
# ============================================================

def render_radar_svg(data) -> str:
    """Render the complete radar SVG. Returns SVG string."""
    size = data["cfg"].size
    return scene_to_svg(data["scene"].primitives, size, size)

# ============================================================
# Main entry point
# ============================================================

def main(out_dir: str | None = None):
    out_dir = out_dir or os.getcwd()
    for layout, name in _OUTPUTS:
        data = build_radar_data(layout)
        svg_path = os.path.join(out_dir, name)
        with open(svg_path, "w", encoding="utf-8") as f:
            f.write(render_radar_svg(data))
        print(f"Radar ({layout}) written to {svg_path}")
        print(f"  primitives:   {len(data['scene'].primitives)}")
        print(f"  overlay area: {data['area']:.1f} sq px")
        for label, r in zip(data["labels"], data["radii"]):
            flat = " ".join(label.split())
            print(f"    {flat:<45s} r={r:7.2f}")
        print()


if __name__ == "__main__":
    main()
