#!/usr/bin/env python3
"""Batch render the test fixtures to SVG and PNG.

Outputs go to /tmp/flowlanes_renders/ by default.

Usage:
    python scripts/render_fixtures.py [--theme dark] [--no-png]
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from flowlanes.errors import FlowchartError
from flowlanes.layout.engine import compute_layout
from flowlanes.layout.levels import find_collisions, lane_count
from flowlanes.parser.text import parse_flowchart
from flowlanes.render.svg import render_svg, svg_to_png
from flowlanes.themes import THEMES

project_root = Path(__file__).parent.parent
FIXTURES_DIR = project_root / "tests" / "fixtures"
OUTPUT_DIR = Path("/tmp/flowlanes_renders")


def render_file(
    flow_path: Path, output_dir: Path, theme: str, *, png: bool = True
) -> tuple[str, list[str]]:
    """Parse, lay out and render a .flow file.

    Returns (name, list_of_issues).
    """
    name = flow_path.stem
    issues: list[str] = []

    try:
        graph = parse_flowchart(flow_path.read_text())
    except FlowchartError as e:
        return name, [f"PARSE ERROR: {e}"]

    geometry = compute_layout(graph)
    for a, b in find_collisions(graph):
        issues.append(f"LANE ERROR: {a.source}->{a.target} / {b.source}->{b.target}")

    svg = render_svg(geometry, THEMES[theme], title=name)
    (output_dir / f"{name}.svg").write_text(svg)
    if png:
        (output_dir / f"{name}.png").write_bytes(svg_to_png(svg))

    issues.append(f"{len(graph.nodes)} nodes, {lane_count(graph)} lanes")
    return name, issues


def main():
    parser = argparse.ArgumentParser(description="Batch render flowchart fixtures")
    parser.add_argument("--theme", choices=sorted(THEMES), default="light")
    parser.add_argument("--no-png", action="store_true", help="Skip PNG conversion")
    parser.add_argument("--output-dir", type=Path, default=OUTPUT_DIR)
    args = parser.parse_args()

    args.output_dir.mkdir(parents=True, exist_ok=True)
    files = sorted(FIXTURES_DIR.glob("*.flow"))
    print(f"Rendering {len(files)} files to {args.output_dir}/")
    print()

    max_name_len = max(len(f.stem) for f in files)
    any_errors = False

    for flow_path in files:
        name, issues = render_file(flow_path, args.output_dir, args.theme, png=not args.no_png)
        status = "OK"
        if any(i.startswith("PARSE ERROR") for i in issues):
            status = "SKIP"
        elif any("ERROR" in i for i in issues):
            status = "FAIL"
            any_errors = True

        print(f"  {name:<{max_name_len}}  [{status}]")
        for issue in issues:
            print(f"    - {issue}")

    if any_errors:
        sys.exit(1)


if __name__ == "__main__":
    main()
