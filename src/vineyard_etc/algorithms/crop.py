"""
Grapevine crop coefficients and growth stage calendar.
"""

from types import MappingProxyType
from typing import List, Mapping, Tuple, Union

from ..core import constants
from ..core.date_utils import DateUtils, DateLike
from ..core.exceptions import ValidationError
from ..models import GrowthStage, CropCoefficient, SeasonalRequirement


# Grape crop coefficients (Kc) per growth stage, read-only
GRAPE_KC_VALUES: Mapping[GrowthStage, CropCoefficient] = MappingProxyType({
    GrowthStage.DORMANT: CropCoefficient(0.15, "Dormant season - minimal water needs"),
    GrowthStage.BUDBREAK: CropCoefficient(0.30, "Early season - buds swelling and breaking"),
    GrowthStage.FLOWERING: CropCoefficient(0.70, "Flowering stage - moderate water needs"),
    GrowthStage.FRUIT_SET: CropCoefficient(0.95, "Fruit development - peak water needs"),
    GrowthStage.VERAISON: CropCoefficient(0.85, "Ripening stage - reducing water stress"),
    GrowthStage.HARVEST: CropCoefficient(0.45, "Harvest time - controlled irrigation"),
    GrowthStage.POST_HARVEST: CropCoefficient(0.60, "Post-harvest recovery and storage"),
})

# Assumed stage lengths (days) for the seasonal budget, in stage order
STAGE_DURATIONS: Tuple[Tuple[GrowthStage, int], ...] = (
    (GrowthStage.DORMANT, 90),
    (GrowthStage.BUDBREAK, 30),
    (GrowthStage.FLOWERING, 30),
    (GrowthStage.FRUIT_SET, 60),
    (GrowthStage.VERAISON, 60),
    (GrowthStage.HARVEST, 30),
    (GrowthStage.POST_HARVEST, 60),
)

# Calendar month -> stage (northern hemisphere, Indian subcontinent seasons)
_MONTH_STAGES: Mapping[int, GrowthStage] = MappingProxyType({
    12: GrowthStage.DORMANT,
    1: GrowthStage.DORMANT,
    2: GrowthStage.DORMANT,
    3: GrowthStage.BUDBREAK,
    4: GrowthStage.FLOWERING,
    5: GrowthStage.FRUIT_SET,
    6: GrowthStage.FRUIT_SET,
    7: GrowthStage.VERAISON,
    8: GrowthStage.VERAISON,
    9: GrowthStage.HARVEST,
    10: GrowthStage.HARVEST,
    11: GrowthStage.POST_HARVEST,
})


def to_growth_stage(stage: Union[GrowthStage, str]) -> GrowthStage:
    """Coerce a stage name to GrowthStage."""
    if isinstance(stage, GrowthStage):
        return stage
    try:
        return GrowthStage(stage)
    except ValueError:
        raise ValidationError(f"Unknown growth stage: {stage!r}", field="growth_stage", value=stage)


def get_crop_coefficient(stage: Union[GrowthStage, str]) -> CropCoefficient:
    """Kc and description for a growth stage."""
    return GRAPE_KC_VALUES[to_growth_stage(stage)]


def growth_stage_for_date(current_date: DateLike) -> GrowthStage:
    """Growth stage implied by the calendar month of a date."""
    month = DateUtils.parse_date(current_date).month
    return _MONTH_STAGES[month]


def seasonal_requirements(
    average_eto: float = constants.SEASONAL_AVERAGE_ETO
) -> List[SeasonalRequirement]:
    """
    Rough per-stage water budget.

    total_etc = average_eto * Kc * days for each stage. Not weather driven.
    """
    requirements = []
    for stage, days in STAGE_DURATIONS:
        coefficient = GRAPE_KC_VALUES[stage]
        requirements.append(SeasonalRequirement(
            stage=stage,
            days=days,
            total_etc=average_eto * coefficient.kc * days,
            description=coefficient.description
        ))
    return requirements
