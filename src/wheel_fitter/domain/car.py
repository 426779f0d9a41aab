from __future__ import annotations

from dataclasses import dataclass, field

from wheel_fitter.domain.images import ImageRef


@dataclass(frozen=True, slots=True)
class FittingCombination:
    """Pre-rendered picture of the owning car wearing a disc brand/diameter."""

    disc_brand: str
    disc_diameter: float
    result_image: ImageRef | None = None

    def matches(self, disc_brand: str, disc_diameter: float) -> bool:
        # Brand is compared case-sensitively, diameter numerically (18 == 18.0)
        return self.disc_brand == disc_brand and self.disc_diameter == disc_diameter


@dataclass(frozen=True)
class Car:
    id: str
    make: str
    model: str
    image: ImageRef | None = None
    fitting_combinations: tuple[FittingCombination, ...] = field(default_factory=tuple)

    def find_combination(self, disc_brand: str, disc_diameter: float) -> FittingCombination | None:
        """
        Return the first combination recorded for the disc brand and diameter.

        Combinations are not unique per (brand, diameter); stored order decides.
        """
        for combination in self.fitting_combinations:
            if combination.matches(disc_brand, disc_diameter):
                return combination
        return None
