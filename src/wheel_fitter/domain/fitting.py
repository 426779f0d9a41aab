from __future__ import annotations

from dataclasses import dataclass

from wheel_fitter.domain.car import Car
from wheel_fitter.domain.disc import Disc
from wheel_fitter.domain.images import EmbeddedImage


@dataclass(frozen=True, slots=True)
class EligibilityRule:
    """A (make, model, disc brand) triple whose fittings may be shown."""

    make: str
    model: str
    disc_brand: str

    def allows(self, car: Car, disc: Disc) -> bool:
        return (
            car.make.casefold() == self.make.casefold()
            and car.model.casefold() == self.model.casefold()
            and disc.brand.casefold() == self.disc_brand.casefold()
        )


# Only this pairing has approved renders; other stored combinations stay hidden
ELIGIBLE_COMBINATIONS: tuple[EligibilityRule, ...] = (
    EligibilityRule(make="toyota", model="corolla", disc_brand="vossen"),
)


def is_eligible(
    car: Car,
    disc: Disc,
    rules: tuple[EligibilityRule, ...] = ELIGIBLE_COMBINATIONS,
) -> bool:
    """Check the car and disc identity (not the matched combination) against the allow-list."""
    return any(rule.allows(car, disc) for rule in rules)


@dataclass(frozen=True, slots=True)
class FittingResult:
    result_image: EmbeddedImage
    from_predefined: bool = True
