"""
Comparison of calculated ETo against a weather provider's ETo.
"""

from ..core import constants
from ..core.exceptions import WeatherServiceError
from ..models import EToDifference, EToAnalysis, ProviderDay


def compare_eto(our_eto: float, provider_eto: float) -> EToDifference:
    """
    Difference between our ETo and the provider's.

    Percentage error is relative to the provider value and is 0 when the
    provider reports 0.
    """
    difference = our_eto - provider_eto
    percentage_error = (difference / provider_eto) * 100 if provider_eto != 0 else 0.0

    return EToDifference(
        difference=round(difference, 2),
        percentage_error=round(percentage_error, 1),
        is_accurate=abs(percentage_error) <= constants.ETO_ACCURACY_TOLERANCE_PCT
    )


def analyze_eto(our_eto: float, provider_day: ProviderDay) -> EToAnalysis:
    """
    Compare our ETo with the provider's FAO Penman-Monteith ETo.

    Raises:
        WeatherServiceError: If the provider day carries no ETo
    """
    if provider_day.provider_eto is None:
        raise WeatherServiceError(
            f"Provider ETo not available for {provider_day.observation.date.isoformat()}"
        )

    provider_eto = provider_day.provider_eto
    result = compare_eto(our_eto, provider_eto)

    if result.is_accurate:
        recommendation = "Our calculation is accurate within 5% of Open-Meteo FAO Penman-Monteith"
    elif result.difference > 0:
        recommendation = (
            "Our calculation is higher than Open-Meteo - consider checking radiation inputs"
        )
    else:
        recommendation = (
            "Our calculation is lower than Open-Meteo - consider checking wind/humidity inputs"
        )

    return EToAnalysis(
        our_eto=our_eto,
        provider_eto=provider_eto,
        difference=result.difference,
        percentage_error=result.percentage_error,
        is_accurate=result.is_accurate,
        recommendation=recommendation
    )
