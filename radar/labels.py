"""Category and zone label placement with multi-line stacking."""
from polar.types import Point, Text, TextLine
from polar.geometry import to_point, slot_angle
from radar.config import ChartGeometry
from radar.constants import ALIGN_EPSILON, STYLE_LABEL, STYLE_ZONE_LABEL


def text_align(angle_deg: float, eps: float = ALIGN_EPSILON) -> str:
    """Anchor side for a label at angle_deg.

    Labels right of center start at their anchor, labels left of center end at
    it, and labels within *eps* of the vertical axis are centered.
    """
    c, _ = to_point(0.0, 0.0, angle_deg, 1.0)
    if c > eps:
        return "start"
    if c < -eps:
        return "end"
    return "middle"


def stack_lines(text: str, x: float, y: float, line_height: float) -> list[TextLine]:
    """Split *text* on line breaks and center the block vertically on y."""
    parts = text.split("\n")
    mid = (len(parts) - 1) / 2
    return [TextLine(part, x, y + (i - mid) * line_height) for i, part in enumerate(parts)]


def place_category_labels(geo: ChartGeometry, labels: list[str]) -> list[Text]:
    """Inner labels, one per category slot."""
    n = len(labels)
    out = []
    for i, label in enumerate(labels):
        a = slot_angle(i, n)
        x, y = to_point(geo.cx, geo.cy, a, geo.inner_label_r)
        out.append(Text((x, y), text_align(a), stack_lines(label, x, y, geo.line_height),
                        STYLE_LABEL))
    return out


def place_zone_labels(anchors: list[Point], zone_labels: list[str],
                      line_height: float) -> list[Text]:
    """Centered zone labels at the given anchors."""
    return [Text((x, y), "middle", stack_lines(label, x, y, line_height), STYLE_ZONE_LABEL)
            for (x, y), label in zip(anchors, zone_labels)]
