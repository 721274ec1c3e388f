"""
M-Pulse Services
Centralized export of the store and supporting services
"""

from .data_store import SharedDataStore
from .environment_data import (
    EnvironmentalDataService,
    EnvironmentalDataSource,
    UpstreamUnavailable
)
from .risk_scorer import (
    RiskAssessment,
    calculate_risk_score,
    classify_risk_level,
    predict_condition,
    score_environment,
    FALLBACK_WEATHER,
    FALLBACK_AIR_QUALITY
)
from .alert_distributor import AlertDistributor, create_alert_distributor
from .seed_data import (
    DISEASES,
    WARD_COORDS,
    SEED_HOSPITALS,
    generate_civic_baseline,
    generate_outbreak_baseline
)

__all__ = [
    # Store
    "SharedDataStore",

    # Environmental feeds
    "EnvironmentalDataService",
    "EnvironmentalDataSource",
    "UpstreamUnavailable",

    # Risk model
    "RiskAssessment",
    "calculate_risk_score",
    "classify_risk_level",
    "predict_condition",
    "score_environment",
    "FALLBACK_WEATHER",
    "FALLBACK_AIR_QUALITY",

    # Alerts
    "AlertDistributor",
    "create_alert_distributor",

    # Seed data
    "DISEASES",
    "WARD_COORDS",
    "SEED_HOSPITALS",
    "generate_civic_baseline",
    "generate_outbreak_baseline",
]
