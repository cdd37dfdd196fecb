"""
Shared fixtures for CarCheck backend tests.
"""
import os
import sys

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

# Ensure the backend package is importable
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from carcheck.config import Settings  # noqa: E402
from carcheck.main import create_app  # noqa: E402


@pytest.fixture
def settings():
    """Settings with fake keys, isolated from any local .env file."""
    return Settings(
        _env_file=None,
        dvla_api_key="test-dvla-key",
        oneauto_api_key="test-oneauto-key",
        rapidcarcheck_key="test-rcc-key",
        mot_api_key="test-mot-key",
        full_report_provider="oneauto",
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest_asyncio.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def dvla_payload():
    """Sample DVLA Vehicle Enquiry API response."""
    return {
        "registrationNumber": "AB12CDE",
        "taxStatus": "Taxed",
        "taxDueDate": "2026-03-01",
        "motStatus": "Valid",
        "motExpiryDate": "2026-05-14",
        "make": "FORD",
        "yearOfManufacture": 2012,
        "engineCapacity": 1596,
        "co2Emissions": 139,
        "fuelType": "PETROL",
        "markedForExport": False,
        "colour": "BLUE",
        "typeApproval": "M1",
        "dateOfLastV5CIssued": "2021-06-10",
        "wheelplan": "2 AXLE RIGID BODY",
        "monthOfFirstRegistration": "2012-03",
        "euroStatus": "EURO 5",
    }


@pytest.fixture
def oneauto_payload():
    """Sample OneAutoAPI vehicle history response."""
    return {
        "success": True,
        "result": {
            "vehicle_registration_mark": "AB12CDE",
            "manufacturer_desc": "FORD",
            "model_range_desc": "FOCUS",
            "colour": "BLUE",
            "fuel_type_desc": "PETROL",
            "body_type_desc": "HATCHBACK",
            "transmission_type_desc": "MANUAL",
            "year_of_manufacture": "2012",
            "date_first_registered": "2012-03-01",
            "engine_capacity_cc": "1,596",
            "co2_emissions_gpkm": 139,
            "euro_status": "5",
            "stolen_record_list": [],
            "write_off_record_list": [{"category": "S", "date": "2018-02-11"}],
            "scrapped": False,
            "imported": "No",
            "exported": "No",
            "colour_change_count": 1,
            "mileage_anomaly_detected": False,
            "mileage_record_list": [{"mileage": 65000, "date": "2024-05-14"}],
            "finance_record_list": [
                {
                    "agreement_type": "Hire Purchase",
                    "finance_company": "Example Finance Ltd",
                    "agreement_date": "2022-01-05",
                    "agreement_term_months": 36,
                }
            ],
            "keeper_change_list": [
                {"number_previous_keepers": 2, "date_of_last_keeper_change": "2021-06-10"},
                {"number_previous_keepers": 1, "date_of_last_keeper_change": "2016-09-01"},
            ],
            "plate_change_list": [
                {
                    "previous_vehicle_registration_mark": "FO12RDX",
                    "date_of_transfer": "2019-04-02",
                    "transfer_type": "Transfer off",
                }
            ],
            "power_bhp": "123.4",
            "torque_nm": 159,
            "max_speed_mph": 121,
            "acceleration_0_60_mph_secs": "10.9",
            "engine_code": "IQDB",
            "number_of_cylinders": 4,
            "drive_type_desc": "FWD",
            "number_of_gears": 5,
            "number_of_doors": 5,
            "number_of_seats": 5,
            "kerb_weight_kg": 1276,
            "combined_mpg": "47.9",
        },
    }


@pytest.fixture
def rapidcarcheck_payload():
    """Sample RapidCarCheck response."""
    return {
        "ResponseInformation": {"IsSuccessStatusCode": True, "StatusMessage": "Success"},
        "Results": {
            "VehicleDetails": {
                "Vrm": "AB12CDE",
                "Make": "VAUXHALL",
                "Model": "ASTRA",
                "Colour": "SILVER",
                "FuelType": "DIESEL",
                "YearOfManufacture": 2015,
                "EngineCapacityCc": 1598,
            },
            "VehicleHistory": {
                "Stolen": False,
                "WrittenOff": "Yes",
                "WriteOffCategory": "N",
                "ColourChangeCount": 0,
                "FinanceRecords": [],
                "KeeperChanges": [{"NumberOfPreviousKeepers": 3, "DateOfLastKeeperChange": "2022-02-02"}],
                "PlateChanges": [{"PreviousVrm": "PL8TE", "DateChanged": "2020-01-01", "TransferType": "Retention"}],
            },
            "PerformanceDetails": {"PowerBhp": 134, "MaxSpeedMph": 127},
            "TechnicalDetails": {"NumberOfCylinders": 4, "NumberOfDoors": 5},
        },
    }


@pytest.fixture
def mot_payload():
    """Sample DVSA MOT history response."""
    return [
        {
            "registration": "AB12CDE",
            "make": "FORD",
            "model": "FOCUS",
            "firstUsedDate": "2012.03.01",
            "fuelType": "Petrol",
            "primaryColour": "Blue",
            "motTests": [
                {
                    "completedDate": "2025.05.14 09:12:44",
                    "testResult": "PASSED",
                    "expiryDate": "2026.05.14",
                    "odometerValue": "65000",
                    "odometerUnit": "mi",
                    "motTestNumber": "123456789012",
                    "rfrAndComments": [
                        {"text": "Nearside front tyre worn close to legal limit", "type": "ADVISORY", "dangerous": False}
                    ],
                },
                {
                    "completedDate": "2024.05.10 10:01:02",
                    "testResult": "FAILED",
                    "odometerValue": "58000",
                    "odometerUnit": "mi",
                    "motTestNumber": "987654321098",
                    "rfrAndComments": [{"text": "Brake disc excessively worn", "type": "MAJOR", "dangerous": True}],
                },
            ],
        }
    ]
