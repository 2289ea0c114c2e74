"""Edge banding estimation per board part."""

from __future__ import annotations

from furnili.domain.value_objects import (
    BoardPart,
    EdgeBanding,
    PartCategory,
    mm_to_feet,
)

from .constants import EDGE_BANDING_RULES, BandingRule


class EdgeBandingEstimator:
    """Computes linear edge banding for board parts.

    Visible edges take 2 mm banding and concealed edges 0.8 mm, per the
    category rule table. Categories without a rule, and parts without
    dimensions, get no banding.
    """

    def __init__(
        self, rules: dict[PartCategory, BandingRule] | None = None
    ) -> None:
        self.rules = EDGE_BANDING_RULES if rules is None else rules

    def estimate_piece(self, part: BoardPart) -> EdgeBanding:
        """Banding for a single piece of ``part``, in linear feet."""
        rule = self.rules.get(part.category)
        if rule is None or part.length is None or part.width is None:
            return EdgeBanding()

        visible_mm = rule.visible_long * part.length + rule.visible_short * part.width
        concealed_mm = (
            rule.concealed_long * part.length + rule.concealed_short * part.width
        )
        return EdgeBanding(
            banding_2mm=mm_to_feet(visible_mm),
            banding_08mm=mm_to_feet(concealed_mm),
        )

    def estimate(self, part: BoardPart) -> EdgeBanding:
        """Banding for all pieces of ``part``, in linear feet."""
        return self.estimate_piece(part).scaled(part.quantity)
