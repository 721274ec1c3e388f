"""
Static seed data and baseline generators for Mumbai wards.

The baselines stand in for a real model: they produce plausible civic
snapshots and 7-day outbreak projections from an injected random source so
callers can reproduce them exactly with a seeded ``random.Random``.
"""

import random
from datetime import date, timedelta
from typing import Dict, List, Tuple

from models.base import EventDensity, RiskLevel
from models.model import CivicSnapshot, ForecastPoint, Hospital

WARD_COORDS: Dict[str, Tuple[float, float]] = {
    "G North": (19.0390, 72.8425),
    "G South": (19.0053, 72.8256),
    "F North": (19.0433, 72.8637),
    "F South": (19.0011, 72.8410),
    "D Ward": (18.9593, 72.8365),
    "E Ward": (18.9750, 72.8330),
    "H West": (19.0566, 72.8323),
    "H East": (19.0700, 72.8500),
}

DISEASES = [
    "Dengue",
    "Leptospirosis",
    "Malaria",
    "Respiratory Issues",
    "Waterborne Diseases",
]

SEED_HOSPITALS: List[Dict] = [
    {
        "id": "1",
        "name": "KEM Hospital",
        "ward": "G North",
        "beds_available": 145,
        "total_beds": 250,
        "doctors_on_duty": 32,
        "alert_level": "moderate",
        "coordinates": (72.8479, 19.0053),
        "website": "https://www.kem.edu/",
        "phone": "+91-22-2410-7000",
        "email": "info@kem.edu",
    },
    {
        "id": "2",
        "name": "Sion Hospital",
        "ward": "F North",
        "beds_available": 89,
        "total_beds": 200,
        "doctors_on_duty": 28,
        "alert_level": "high",
        "coordinates": (72.8637, 19.0433),
        "website": "https://sionhospitalmumbai.com/",
        "phone": "+91-22-2407-6521",
        "email": "sion.hospital@gov.in",
    },
    {
        "id": "3",
        "name": "JJ Hospital",
        "ward": "D Ward",
        "beds_available": 178,
        "total_beds": 300,
        "doctors_on_duty": 45,
        "alert_level": "low",
        "coordinates": (72.8365, 18.9593),
        "website": "https://jjhospital.org/",
        "phone": "+91-22-2373-5555",
        "email": "admin@jjhospital.org",
    },
    {
        "id": "4",
        "name": "Cooper Hospital",
        "ward": "H West",
        "beds_available": 67,
        "total_beds": 150,
        "doctors_on_duty": 22,
        "alert_level": "high",
        "coordinates": (72.8323, 19.0566),
        "website": "https://www.cooperhospitals.com/",
        "phone": "+91-22-2620-2891",
        "email": "contact@cooperhospital.org",
    },
    {
        "id": "5",
        "name": "Nair Hospital",
        "ward": "E Ward",
        "beds_available": 112,
        "total_beds": 220,
        "doctors_on_duty": 35,
        "alert_level": "moderate",
        "coordinates": (72.8418, 18.9950),
        "website": "https://www.tnmchospital.com/",
        "phone": "+91-22-2307-4761",
        "email": "info@nairhospital.org",
    },
]


def load_seed_hospitals() -> List[Hospital]:
    """Validated copy of the static hospital roster"""
    return [Hospital(**record) for record in SEED_HOSPITALS]


def generate_civic_baseline(rng: random.Random) -> CivicSnapshot:
    """
    Generate a plausible civic snapshot without live readings.

    Used to seed the default region at startup and as the base the
    aggregator merges scored readings over.
    """
    rainfall = int(rng.random() * 150)
    aqi = int(rng.random() * 300) + 50
    event_density = rng.choice(list(EventDensity))

    predicted_condition = "None"
    risk_level = RiskLevel.LOW

    if rainfall > 100:
        predicted_condition = "Leptospirosis & Waterborne Diseases"
        risk_level = RiskLevel.HIGH
        confidence = 85 + int(rng.random() * 15)
    elif rainfall > 50:
        predicted_condition = "Dengue & Malaria"
        risk_level = RiskLevel.MODERATE
        confidence = 65 + int(rng.random() * 20)
    elif aqi > 200:
        predicted_condition = "Respiratory Issues"
        risk_level = RiskLevel.HIGH
        confidence = 75 + int(rng.random() * 20)
    elif aqi > 150:
        predicted_condition = "Mild Respiratory Symptoms"
        risk_level = RiskLevel.MODERATE
        confidence = 60 + int(rng.random() * 15)
    elif event_density == EventDensity.HIGH:
        predicted_condition = "Trauma & Crowd-related Injuries"
        risk_level = RiskLevel.MODERATE
        confidence = 70 + int(rng.random() * 15)
    else:
        confidence = 40 + int(rng.random() * 20)

    return CivicSnapshot(
        rainfall_mm=rainfall,
        aqi=aqi,
        event_density=event_density,
        predicted_condition=predicted_condition,
        confidence=confidence,
        risk_level=risk_level,
    )


def generate_outbreak_baseline(rng: random.Random, start: date, days: int = 7) -> List[ForecastPoint]:
    """One projection per day for ``days`` days, starting the day after ``start``"""
    return [
        ForecastPoint(
            date=start + timedelta(days=offset),
            disease=rng.choice(DISEASES),
            predicted_cases=rng.randrange(20, 120),
            confidence=rng.randrange(70, 100),
        )
        for offset in range(1, days + 1)
    ]
