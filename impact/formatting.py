"""
Result Formatting
=================

Human-readable impact summaries.
"""

from .estimator import ImpactResult


def format_number(num: float) -> str:
    """Abbreviate with B/M/K suffixes, two decimals."""
    if num >= 1e9:
        return f"{num / 1e9:.2f}B"
    if num >= 1e6:
        return f"{num / 1e6:.2f}M"
    if num >= 1e3:
        return f"{num / 1e3:.2f}K"
    return f"{num:.2f}"


def format_summary(result: ImpactResult) -> str:
    """Multi-line report of an impact estimate."""
    return f"""
Impact Results
==============
Energy released: {format_number(result.energy_joules)} J
                 {format_number(result.energy_megatons)} Mt TNT
Coordinates: {result.coordinates}
Impact radius: {format_number(result.impact_radius_km)} km
Affected area: {format_number(result.area_km2)} km²
Population density: {format_number(result.population_density)} persons/km²
Affected population: {format_number(result.affected_population)}
Estimated deaths: {format_number(result.estimated_deaths)}

Note: population figures are estimates from average densities.
"""
