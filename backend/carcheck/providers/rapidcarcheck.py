"""
RapidCarCheck provider.

GET with ``key`` and ``vrm`` query parameters. Responses group PascalCase
fields under ``Results`` (VehicleDetails, VehicleHistory, PerformanceDetails,
TechnicalDetails) and report lookup failures in ``ResponseInformation``
alongside a 200 status.
"""

import json
from typing import Any

from carcheck.errors import UpstreamPayloadError, UpstreamStatusError
from carcheck.providers.base import BaseProvider, UpstreamRequest
from carcheck.schemas.vehicle import (
    FinanceAgreement,
    KeeperChange,
    Performance,
    PlateChange,
    Technical,
    VehicleHistory,
    VehicleReport,
    VehicleSummary,
)
from carcheck.services.remapping import as_bool, as_float, as_int, as_str, dig, dig_dict, map_list
from carcheck.utils.text import clean_error_text


class RapidCarCheckProvider(BaseProvider):
    name = "rapidcarcheck"
    not_found_message = "Vehicle not found or invalid registration."
    unavailable_message = "Server error while contacting RapidCarCheck."

    @property
    def api_key(self) -> str:
        return self.settings.rapidcarcheck_key

    def build_request(self, plate: str) -> UpstreamRequest:
        return UpstreamRequest(
            method="GET",
            url=self.settings.rapidcarcheck_url,
            headers={"Accept": "application/json"},
            params={"key": self.api_key, "vrm": plate},
        )

    def check_payload(self, payload: Any) -> None:
        if dig(payload, "ResponseInformation.IsSuccessStatusCode") is False:
            message = dig(payload, "ResponseInformation.StatusMessage")
            raise UpstreamStatusError(
                self.not_found_message,
                details=message if isinstance(message, str) else json.dumps(payload),
                status_code=404,
            )
        if not isinstance(dig(payload, "Results"), dict):
            raise UpstreamPayloadError(
                f"Invalid response from {self.name}.",
                details=clean_error_text(json.dumps(payload), self.settings.error_details_max_length),
            )

    def remap(self, payload: Any, plate: str) -> VehicleReport:
        details = dig_dict(payload, "Results.VehicleDetails")
        hist = dig_dict(payload, "Results.VehicleHistory")
        perf = dig_dict(payload, "Results.PerformanceDetails")
        tech = dig_dict(payload, "Results.TechnicalDetails")
        registration = (as_str(details.get("Vrm")) or plate).upper()

        return VehicleReport(
            provider="rapidcarcheck",
            registration=registration,
            summary=VehicleSummary(
                registration=registration,
                make=as_str(details.get("Make")),
                model=as_str(details.get("Model")),
                colour=as_str(details.get("Colour")),
                fuel_type=as_str(details.get("FuelType")),
                body_style=as_str(details.get("BodyStyle")),
                transmission=as_str(details.get("Transmission")),
                year_of_manufacture=as_int(details.get("YearOfManufacture")),
                first_registered=as_str(details.get("DateFirstRegistered")),
                engine_capacity=as_int(details.get("EngineCapacityCc")),
                co2_emissions=as_int(details.get("Co2Emissions")),
                euro_status=as_str(details.get("EuroStatus")),
            ),
            history=VehicleHistory(
                stolen=as_bool(hist.get("Stolen")),
                written_off=as_bool(hist.get("WrittenOff")),
                write_off_category=as_str(hist.get("WriteOffCategory")),
                scrapped=as_bool(hist.get("Scrapped")),
                imported=as_bool(hist.get("Imported")),
                exported=as_bool(hist.get("Exported")),
                colour_changes=as_int(hist.get("ColourChangeCount")),
                mileage_anomaly=as_bool(hist.get("MileageAnomaly")),
                last_recorded_mileage=as_int(hist.get("LastRecordedMileage")),
            ),
            finance=map_list(hist.get("FinanceRecords"), _finance),
            keepers=map_list(hist.get("KeeperChanges"), _keeper),
            plate_history=map_list(hist.get("PlateChanges"), _plate_change),
            performance=Performance(
                power_bhp=as_float(perf.get("PowerBhp")),
                torque_nm=as_float(perf.get("TorqueNm")),
                top_speed_mph=as_float(perf.get("MaxSpeedMph")),
                zero_to_sixty_seconds=as_float(perf.get("ZeroToSixtyMph")),
            ),
            technical=Technical(
                engine_code=as_str(tech.get("EngineCode")),
                cylinders=as_int(tech.get("NumberOfCylinders")),
                drive_type=as_str(tech.get("DriveType")),
                gears=as_int(tech.get("NumberOfGears")),
                doors=as_int(tech.get("NumberOfDoors")),
                seats=as_int(tech.get("NumberOfSeats")),
                kerb_weight_kg=as_int(tech.get("KerbWeightKg")),
                fuel_consumption_combined_mpg=as_float(tech.get("CombinedMpg")),
            ),
        )


def _finance(item: dict) -> FinanceAgreement:
    return FinanceAgreement(
        agreement_type=as_str(item.get("AgreementType")),
        finance_company=as_str(item.get("FinanceCompany")),
        agreement_date=as_str(item.get("AgreementDate")),
        term_months=as_int(item.get("AgreementTerm")),
    )


def _keeper(item: dict) -> KeeperChange:
    return KeeperChange(
        keeper_number=as_int(item.get("NumberOfPreviousKeepers")),
        date_of_change=as_str(item.get("DateOfLastKeeperChange")),
    )


def _plate_change(item: dict) -> PlateChange:
    return PlateChange(
        previous_plate=as_str(item.get("PreviousVrm")),
        date_changed=as_str(item.get("DateChanged")),
        transfer_type=as_str(item.get("TransferType")),
    )
