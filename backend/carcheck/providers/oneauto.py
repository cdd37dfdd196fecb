"""
OneAutoAPI vehicle history provider.

GET with the plate as ``vehicle_registration_mark`` and the key in the
``x-api-key`` header. Responses are wrapped as ``{"success": bool, "result": {...}}``
with snake_case fields; history markers come back as record lists.
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
from carcheck.services.remapping import (
    as_bool,
    as_float,
    as_int,
    as_str,
    dig,
    dig_dict,
    first_of,
    has_records,
    map_list,
)
from carcheck.utils.text import clean_error_text


class OneAutoProvider(BaseProvider):
    name = "oneauto"
    not_found_message = "Vehicle not found or invalid registration."
    unavailable_message = "Server error while contacting OneAutoAPI."

    @property
    def api_key(self) -> str:
        return self.settings.oneauto_api_key

    def build_request(self, plate: str) -> UpstreamRequest:
        return UpstreamRequest(
            method="GET",
            url=self.settings.oneauto_url,
            headers={"x-api-key": self.api_key, "Accept": "application/json"},
            params={"vehicle_registration_mark": plate},
        )

    def check_payload(self, payload: Any) -> None:
        if isinstance(payload, dict) and payload.get("success") is False:
            details = first_of(payload, "result.error", "result.message", "message", "error")
            raise UpstreamStatusError(
                self.not_found_message,
                details=details if isinstance(details, str) else json.dumps(payload),
                status_code=404,
            )
        if not isinstance(dig(payload, "result"), dict):
            raise UpstreamPayloadError(
                f"Invalid response from {self.name}.",
                details=clean_error_text(json.dumps(payload), self.settings.error_details_max_length),
            )

    def remap(self, payload: Any, plate: str) -> VehicleReport:
        r = dig_dict(payload, "result")
        registration = (as_str(r.get("vehicle_registration_mark")) or plate).upper()

        summary = VehicleSummary(
            registration=registration,
            make=as_str(first_of(r, "manufacturer_desc", "make")),
            model=as_str(first_of(r, "model_range_desc", "model")),
            colour=as_str(first_of(r, "colour", "colour_desc")),
            fuel_type=as_str(first_of(r, "fuel_type_desc", "fuel_type")),
            body_style=as_str(r.get("body_type_desc")),
            transmission=as_str(r.get("transmission_type_desc")),
            year_of_manufacture=as_int(r.get("year_of_manufacture")),
            first_registered=as_str(r.get("date_first_registered")),
            engine_capacity=as_int(r.get("engine_capacity_cc")),
            co2_emissions=as_int(r.get("co2_emissions_gpkm")),
            euro_status=as_str(r.get("euro_status")),
        )

        write_offs = r.get("write_off_record_list")
        history = VehicleHistory(
            stolen=has_records(r.get("stolen_record_list")),
            written_off=has_records(write_offs),
            write_off_category=as_str(dig(write_offs, "0.category")),
            scrapped=as_bool(r.get("scrapped")),
            imported=as_bool(r.get("imported")),
            exported=as_bool(r.get("exported")),
            colour_changes=as_int(r.get("colour_change_count")),
            mileage_anomaly=as_bool(r.get("mileage_anomaly_detected")),
            last_recorded_mileage=as_int(dig(r, "mileage_record_list.0.mileage")),
        )

        return VehicleReport(
            provider="oneauto",
            registration=registration,
            summary=summary,
            history=history,
            finance=map_list(r.get("finance_record_list"), _finance),
            keepers=map_list(r.get("keeper_change_list"), _keeper),
            plate_history=map_list(r.get("plate_change_list"), _plate_change),
            performance=Performance(
                power_bhp=as_float(r.get("power_bhp")),
                torque_nm=as_float(r.get("torque_nm")),
                top_speed_mph=as_float(r.get("max_speed_mph")),
                zero_to_sixty_seconds=as_float(r.get("acceleration_0_60_mph_secs")),
            ),
            technical=Technical(
                engine_code=as_str(r.get("engine_code")),
                cylinders=as_int(r.get("number_of_cylinders")),
                drive_type=as_str(r.get("drive_type_desc")),
                gears=as_int(r.get("number_of_gears")),
                doors=as_int(r.get("number_of_doors")),
                seats=as_int(r.get("number_of_seats")),
                kerb_weight_kg=as_int(r.get("kerb_weight_kg")),
                fuel_consumption_combined_mpg=as_float(r.get("combined_mpg")),
            ),
        )


def _finance(item: dict) -> FinanceAgreement:
    return FinanceAgreement(
        agreement_type=as_str(item.get("agreement_type")),
        finance_company=as_str(item.get("finance_company")),
        agreement_date=as_str(item.get("agreement_date")),
        term_months=as_int(item.get("agreement_term_months")),
    )


def _keeper(item: dict) -> KeeperChange:
    return KeeperChange(
        keeper_number=as_int(item.get("number_previous_keepers")),
        date_of_change=as_str(item.get("date_of_last_keeper_change")),
    )


def _plate_change(item: dict) -> PlateChange:
    return PlateChange(
        previous_plate=as_str(item.get("previous_vehicle_registration_mark")),
        date_changed=as_str(item.get("date_of_transfer")),
        transfer_type=as_str(item.get("transfer_type")),
    )
