"""
DVLA Vehicle Enquiry API provider.

POSTs the plate as JSON with the ``x-api-key`` header. The response is a flat
object (make, colour, taxStatus, motStatus, ...), used verbatim by
/api/check and as the summary section of a DVLA-backed full report.
"""

from typing import Any

from carcheck.providers.base import BaseProvider, UpstreamRequest
from carcheck.schemas.vehicle import VehicleReport, VehicleSummary
from carcheck.services.remapping import as_bool, as_int, as_str, first_of


class DVLAProvider(BaseProvider):
    name = "dvla"
    not_found_message = "Vehicle not found or invalid registration."
    unavailable_message = "Server error while contacting DVLA."

    @property
    def api_key(self) -> str:
        return self.settings.dvla_api_key

    def build_request(self, plate: str) -> UpstreamRequest:
        return UpstreamRequest(
            method="POST",
            url=self.settings.dvla_url,
            headers={"x-api-key": self.api_key, "Content-Type": "application/json"},
            json={"registrationNumber": plate},
        )

    def with_registration(self, payload: Any, plate: str) -> dict:
        """Copy of the flat DVLA object with ``registrationNumber`` always set."""
        record = dict(payload) if isinstance(payload, dict) else {}
        if not as_str(record.get("registrationNumber")):
            record["registrationNumber"] = plate
        return record

    def remap(self, payload: Any, plate: str) -> VehicleReport:
        record = self.with_registration(payload, plate)
        registration = as_str(record["registrationNumber"]).upper()
        summary = VehicleSummary(
            registration=registration,
            make=as_str(record.get("make")),
            colour=as_str(record.get("colour")),
            fuel_type=as_str(record.get("fuelType")),
            year_of_manufacture=as_int(record.get("yearOfManufacture")),
            first_registered=as_str(first_of(record, "monthOfFirstRegistration", "monthOfFirstDvlaRegistration")),
            engine_capacity=as_int(record.get("engineCapacity")),
            co2_emissions=as_int(record.get("co2Emissions")),
            euro_status=as_str(record.get("euroStatus")),
            tax_status=as_str(record.get("taxStatus")),
            tax_due_date=as_str(record.get("taxDueDate")),
            mot_status=as_str(record.get("motStatus")),
            mot_expiry_date=as_str(record.get("motExpiryDate")),
            marked_for_export=as_bool(record.get("markedForExport")),
        )
        return VehicleReport(provider="dvla", registration=registration, summary=summary)
