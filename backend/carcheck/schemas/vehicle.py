"""
Pydantic schemas for vehicle lookup responses.

Every full-report provider is normalized to ``VehicleReport``. Fields are
snake_case in Python and camelCase on the wire, matching the upstream
DVLA naming the client already understands.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

ProviderName = Literal["dvla", "rapidcarcheck", "oneauto", "mot"]


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class VehicleSummary(CamelModel):
    """Headline identification and status fields."""

    registration: str
    make: str | None = None
    model: str | None = None
    colour: str | None = None
    fuel_type: str | None = None
    body_style: str | None = None
    transmission: str | None = None
    year_of_manufacture: int | None = None
    first_registered: str | None = None
    engine_capacity: int | None = None  # cc
    co2_emissions: int | None = None  # g/km
    euro_status: str | None = None
    tax_status: str | None = None
    tax_due_date: str | None = None
    mot_status: str | None = None
    mot_expiry_date: str | None = None
    marked_for_export: bool | None = None


class VehicleHistory(CamelModel):
    """Risk markers from a history check."""

    stolen: bool | None = None
    written_off: bool | None = None
    write_off_category: str | None = None
    scrapped: bool | None = None
    imported: bool | None = None
    exported: bool | None = None
    colour_changes: int | None = None
    mileage_anomaly: bool | None = None
    last_recorded_mileage: int | None = None


class FinanceAgreement(CamelModel):
    agreement_type: str | None = None
    finance_company: str | None = None
    agreement_date: str | None = None
    term_months: int | None = None


class KeeperChange(CamelModel):
    keeper_number: int | None = None
    date_of_change: str | None = None


class PlateChange(CamelModel):
    previous_plate: str | None = None
    date_changed: str | None = None
    transfer_type: str | None = None


class Performance(CamelModel):
    power_bhp: float | None = None
    torque_nm: float | None = None
    top_speed_mph: float | None = None
    zero_to_sixty_seconds: float | None = None


class Technical(CamelModel):
    engine_code: str | None = None
    cylinders: int | None = None
    drive_type: str | None = None
    gears: int | None = None
    doors: int | None = None
    seats: int | None = None
    kerb_weight_kg: int | None = None
    fuel_consumption_combined_mpg: float | None = None


class MotDefect(CamelModel):
    text: str | None = None
    type: str | None = None  # "ADVISORY", "MINOR", "MAJOR", "DANGEROUS", "FAIL"
    dangerous: bool | None = None


class MotTest(CamelModel):
    completed_date: str | None = None
    test_result: str | None = None  # "PASSED" / "FAILED"
    expiry_date: str | None = None
    odometer_value: int | None = None
    odometer_unit: str | None = None
    test_number: str | None = None
    defects: list[MotDefect] = Field(default_factory=list)


class VehicleReport(CamelModel):
    """Full report, normalized from whichever provider served it."""

    provider: ProviderName
    registration: str
    summary: VehicleSummary
    history: VehicleHistory | None = None
    finance: list[FinanceAgreement] = Field(default_factory=list)
    keepers: list[KeeperChange] = Field(default_factory=list)
    plate_history: list[PlateChange] = Field(default_factory=list)
    performance: Performance | None = None
    technical: Technical | None = None
    mot_tests: list[MotTest] = Field(default_factory=list)
    raw: Any | None = None  # upstream payload, debug only


class ErrorResponse(BaseModel):
    error: str
    details: str | None = None


class HealthResponse(BaseModel):
    ok: bool = True
    service: str
    time: str
