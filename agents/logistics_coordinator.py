"""
Logistics Coordinator (Agent 3)

Advisory load balancing across the hospital roster. Reads the store,
never writes to it.
"""

import logging
from typing import List

from models.base import DEFAULT_REGION
from models.model import (
    AmbulanceRoute, DiversionSuggestion, ForecastPoint, GeoPoint, Hospital, ResourceAllocation
)
from services.data_store import SharedDataStore

logger = logging.getLogger("mpulse.agents.logistics")

OVERLOAD_THRESHOLD = 0.85
SPARE_CAPACITY_THRESHOLD = 0.60
SURGE_CASE_THRESHOLD = 50

# Disclosure template returned to callers; not assembled from the
# computed diversions or surge diseases.
RECOMMENDATION_TEMPLATE = [
    "Divert 20% of non-critical patients from Sion to KEM",
    "Activate reserve nursing staff for Night Shift in G-North",
    "Restock O2 cylinders in Cooper Hospital (Stock < 15%)",
]


class LogisticsCoordinator:
    """Agent that optimizes medical resources across Mumbai hospitals"""

    def __init__(self, store: SharedDataStore):
        self.store = store

    def allocate_resources(self) -> ResourceAllocation:
        logger.info("Analyzing resource allocation...")

        hospitals = self.store.get_hospitals()
        forecast = self.store.get_forecast(DEFAULT_REGION) or []

        diversions = self.find_diversions(hospitals)
        surge_diseases = self.find_surge_diseases(forecast)
        if surge_diseases:
            logger.info(f"High risk detected for {', '.join(surge_diseases)}. "
                        f"Recommending overtime for emergency staff.")

        return ResourceAllocation(
            status="Optimized",
            recommendations=list(RECOMMENDATION_TEMPLATE),
            diversions=diversions,
            surge_diseases=surge_diseases,
        )

    def find_diversions(self, hospitals: List[Hospital]) -> List[DiversionSuggestion]:
        """Pair each overloaded hospital with the first other one that has spare capacity"""
        diversions = []
        for hospital in hospitals:
            occupancy = hospital.occupancy_rate
            if occupancy <= OVERLOAD_THRESHOLD:
                continue

            logger.info(f"{hospital.name} is overloaded ({occupancy * 100:.1f}%). Recommending diversion.")
            target = next(
                (h for h in hospitals
                 if h.id != hospital.id and h.occupancy_rate < SPARE_CAPACITY_THRESHOLD),
                None
            )
            if target:
                logger.info(f"-> Divert non-critical patients to {target.name}")

            diversions.append(DiversionSuggestion(
                from_hospital_id=hospital.id,
                from_hospital=hospital.name,
                occupancy_rate=round(occupancy, 4),
                to_hospital_id=target.id if target else None,
                to_hospital=target.name if target else None,
            ))
        return diversions

    def find_surge_diseases(self, forecast: List[ForecastPoint]) -> List[str]:
        """Diseases with any day above the surge threshold, in first-seen order"""
        diseases = []
        for point in forecast:
            if point.predicted_cases > SURGE_CASE_THRESHOLD and point.disease not in diseases:
                diseases.append(point.disease)
        return diseases

    def suggest_ambulance_routes(self, start: GeoPoint, end: GeoPoint) -> AmbulanceRoute:
        # Routing service integration point (OSRM / Maps); fixed answer for now
        logger.debug(f"Route requested from ({start.lat}, {start.lon}) to ({end.lat}, {end.lon})")
        return AmbulanceRoute(
            route="Via Western Express Highway",
            eta="25 mins",
            traffic_status="Moderate",
        )
