"""Scaling/projection of canonical geometry into a viewport.

INVARIANT: one :class:`Projection` per render pass. Every boundary point
and every placement is mapped with the same scale and offset.
"""

from __future__ import annotations

from tileplan.domain.models import LayoutResult, Point, ProjectedLayout, Projection, TilePlacement

DEFAULT_MARGIN = 20.0
MIN_GROUT_PIXELS = 0.5


def compute_projection(
    room_length: float,
    room_width: float,
    viewport_width: float,
    viewport_height: float,
    margin: float = DEFAULT_MARGIN,
) -> Projection:
    """Uniform scale fitting the room inside the viewport minus *margin*.

    ``scale = min((vw - 2m) / length, (vh - 2m) / width)``, centered.
    A degenerate room or viewport gives scale 0 at the viewport center.
    """
    usable_w = viewport_width - 2 * margin
    usable_h = viewport_height - 2 * margin
    if room_length <= 0 or room_width <= 0 or usable_w <= 0 or usable_h <= 0:
        scale = 0.0
    else:
        scale = min(usable_w / room_length, usable_h / room_width)
    return Projection(
        scale=scale,
        offset_x=(viewport_width - room_length * scale) / 2,
        offset_y=(viewport_height - room_width * scale) / 2,
        viewport_width=viewport_width,
        viewport_height=viewport_height,
        margin=margin,
    )


def project_point(point: Point, projection: Projection) -> Point:
    return projection.frame.point(point.x, point.y)


def project_placement(placement: TilePlacement, projection: Projection) -> TilePlacement:
    origin = project_point(Point(x=placement.x, y=placement.y), projection)
    return placement.model_copy(
        update={
            "x": origin.x,
            "y": origin.y,
            "width": placement.width * projection.scale,
            "height": placement.height * projection.scale,
        }
    )


def project_layout(layout: LayoutResult, projection: Projection | None = None) -> ProjectedLayout:
    """Map a canonical layout into viewport coordinates.

    Uses ``layout.projection`` unless another projection is supplied.
    Grout is drawn at least :data:`MIN_GROUT_PIXELS` wide.
    """
    proj = projection or layout.projection
    return ProjectedLayout(
        boundary_path=tuple(project_point(p, proj) for p in layout.boundary_path),
        placements=tuple(project_placement(p, proj) for p in layout.placements),
        grout_width=max(MIN_GROUT_PIXELS, layout.grout_width_canonical * proj.scale),
        scale=proj.scale,
        viewport_width=proj.viewport_width,
        viewport_height=proj.viewport_height,
    )
