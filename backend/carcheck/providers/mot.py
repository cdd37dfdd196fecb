"""
DVSA MOT history provider.

GET with ``registration`` as a query parameter and the key in ``x-api-key``.
The response is a list of matching vehicles, each carrying its ``motTests``
with ``rfrAndComments`` (reasons for refusal and advisories).
"""

from typing import Any

from carcheck.errors import UpstreamStatusError
from carcheck.providers.base import BaseProvider, UpstreamRequest
from carcheck.schemas.vehicle import MotDefect, MotTest, VehicleReport, VehicleSummary
from carcheck.services.remapping import as_bool, as_int, as_str, dig, map_list


class MOTHistoryProvider(BaseProvider):
    name = "mot"
    not_found_message = "No MOT history found for this registration."
    unavailable_message = "Server error while contacting the MOT history service."

    @property
    def api_key(self) -> str:
        return self.settings.mot_api_key

    def build_request(self, plate: str) -> UpstreamRequest:
        return UpstreamRequest(
            method="GET",
            url=self.settings.mot_url,
            headers={"x-api-key": self.api_key, "Accept": "application/json+v6"},
            params={"registration": plate},
        )

    def check_payload(self, payload: Any) -> None:
        if isinstance(payload, list) and not payload:
            raise UpstreamStatusError(self.not_found_message, details="Empty vehicle list", status_code=404)

    def remap(self, payload: Any, plate: str) -> VehicleReport:
        vehicle = _first_vehicle(payload)
        registration = (as_str(vehicle.get("registration")) or plate).upper()
        tests = map_list(vehicle.get("motTests"), _mot_test)
        latest = tests[0] if tests else None

        summary = VehicleSummary(
            registration=registration,
            make=as_str(vehicle.get("make")),
            model=as_str(vehicle.get("model")),
            colour=as_str(vehicle.get("primaryColour")),
            fuel_type=as_str(vehicle.get("fuelType")),
            first_registered=as_str(vehicle.get("firstUsedDate")),
            engine_capacity=as_int(vehicle.get("engineSize")),
            mot_status=_mot_status(latest),
            mot_expiry_date=latest.expiry_date if latest else None,
        )
        return VehicleReport(provider="mot", registration=registration, summary=summary, mot_tests=tests)


def _first_vehicle(payload: Any) -> dict:
    if isinstance(payload, list):
        vehicle = dig(payload, "0")
    else:
        vehicle = payload
    return vehicle if isinstance(vehicle, dict) else {}


def _mot_status(latest: MotTest | None) -> str | None:
    if latest is None or not latest.test_result:
        return None
    return "Valid" if latest.test_result.upper() == "PASSED" else "Not valid"


def _mot_test(item: dict) -> MotTest:
    return MotTest(
        completed_date=as_str(item.get("completedDate")),
        test_result=as_str(item.get("testResult")),
        expiry_date=as_str(item.get("expiryDate")),
        odometer_value=as_int(item.get("odometerValue")),
        odometer_unit=as_str(item.get("odometerUnit")),
        test_number=as_str(item.get("motTestNumber")),
        defects=map_list(item.get("rfrAndComments") or item.get("defects"), _defect),
    )


def _defect(item: dict) -> MotDefect:
    return MotDefect(
        text=as_str(item.get("text")),
        type=as_str(item.get("type")),
        dangerous=as_bool(item.get("dangerous")),
    )
