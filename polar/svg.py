"""SVG rendering surface: walks a primitive list in paint order."""
from html import escape
from .types import Circle, Line, Path, Text, Primitive

# Style token -> SVG presentation attributes.
THEME: dict[str, str] = {
    "background":   'fill="#f4f6fa" stroke="none"',
    "zone-ring":    'fill="#1f4e79" stroke="none"',
    "grid":         'fill="none" stroke="#9aa5b1" stroke-width="1" opacity="0.5"',
    "zone-fill":    'fill="#1f4e79" stroke="none"',
    "zone-divider": 'stroke="#ffffff" stroke-width="2"',
    "data-fill":    'fill="#e07a1f" fill-opacity="0.7" stroke="#e07a1f" stroke-width="2"',
    "data-marker":  'fill="#e07a1f" stroke="white" stroke-width="2"',
    "label-text":   'font-family="Arial" font-size="11" font-weight="500" fill="#1c2733"',
    "zone-label":   'font-family="Arial" font-size="14" font-weight="600" fill="white"',
    "center-disc":  'fill="white" stroke="#9aa5b1" stroke-width="2"',
}


def _path_d(cmds) -> str:
    parts = []
    for cmd in cmds:
        if cmd[0] == "Z":
            parts.append("Z")
        else:
            parts.append(f"{cmd[0]} {cmd[1]:.2f} {cmd[2]:.2f}")
    return " ".join(parts)


def render_primitive(out: list, prim: Primitive, theme: dict[str, str]):
    """Append the SVG element(s) for one primitive."""
    attrs = theme[prim.style]
    if isinstance(prim, Circle):
        cx, cy = prim.center
        out.append(f'<circle cx="{cx:.2f}" cy="{cy:.2f}" r="{prim.radius:.2f}" {attrs}/>')
    elif isinstance(prim, Line):
        (x1, y1), (x2, y2) = prim.start, prim.end
        out.append(f'<line x1="{x1:.2f}" y1="{y1:.2f}" x2="{x2:.2f}" y2="{y2:.2f}" {attrs}/>')
    elif isinstance(prim, Path):
        out.append(f'<path d="{_path_d(prim.commands)}" {attrs}/>')
    elif isinstance(prim, Text):
        for ln in prim.lines:
            out.append(f'<text x="{ln.x:.2f}" y="{ln.y:.2f}" text-anchor="{prim.align}"'
                       f' dominant-baseline="central" {attrs}>{escape(ln.text)}</text>')
    else:
        raise TypeError(f"Not a drawable primitive: {prim!r}")


def scene_to_svg(primitives: list[Primitive], width: float, height: float,
                 theme: dict[str, str] = THEME) -> str:
    """Render primitives to a standalone SVG document string."""
    out = [f'<svg xmlns="http://www.w3.org/2000/svg" width="{width:g}" height="{height:g}"'
           f' viewBox="0 0 {width:g} {height:g}">']
    for prim in primitives:
        render_primitive(out, prim, theme)
    out.append('</svg>')
    return "\n".join(out)
