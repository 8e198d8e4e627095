"""
Grapevine crop data models.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Any


class GrowthStage(str, Enum):
    """Grapevine phenological stage."""

    DORMANT = "dormant"
    BUDBREAK = "budbreak"
    FLOWERING = "flowering"
    FRUIT_SET = "fruit_set"
    VERAISON = "veraison"
    HARVEST = "harvest"
    POST_HARVEST = "post_harvest"


@dataclass(frozen=True)
class CropCoefficient:
    """Crop coefficient for one growth stage."""

    kc: float
    description: str


@dataclass(frozen=True)
class SeasonalRequirement:
    """Rough water budget for one growth stage."""

    stage: GrowthStage
    days: int
    total_etc: float  # mm over the stage
    description: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "stage": self.stage.value,
            "days": self.days,
            "totalETc": self.total_etc,
            "description": self.description,
        }
