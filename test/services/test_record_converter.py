"""
Test per RecordConverter e helper di conversione
"""

import pytest

from src.schemas.accessory_schema import AccessoryStatus
from src.services.csv_import.models import CSVAsset, CSVComponent, CSVAccessory, CSVVirtualMachine
from src.services.csv_import.record_converter import (
    RecordConverter,
    parse_quantity,
    parse_internet_access,
    map_accessory_status,
    IMPORTED_NOTE,
)
from src.services.csv_import.tag_generator import generate_asset_tag


class TestAssetConversion:

    def test_minimal_asset_defaults(self):
        asset = RecordConverter.to_asset(CSVAsset(knox_id="K100", serial_number="SN001"))

        assert asset.asset_tag == generate_asset_tag(None, "SN001")
        assert asset.asset_tag.startswith("AST-")
        assert asset.name == "Asset - SN001"
        assert asset.description == "Imported from CSV. Knox ID: K100"
        assert asset.category == "Laptop"
        assert asset.status == "available"
        assert asset.knox_id == "K100"
        assert asset.model is None

    def test_explicit_values_are_kept(self):
        csv_asset = CSVAsset(
            knox_id="K1",
            serial_number="SN1",
            asset_tag="TAG-9",
            name="CEO phone",
            category="Mobile",
            status="deployed",
        )
        asset = RecordConverter.to_asset(csv_asset)

        assert asset.asset_tag == "TAG-9"
        assert asset.name == "CEO phone"
        assert asset.category == "Mobile"
        assert asset.status == "deployed"

    def test_name_uses_category(self):
        asset = RecordConverter.to_asset(CSVAsset(knox_id="K1", serial_number="SN1", category="Tablet"))
        assert asset.name == "Tablet - SN1"
        assert asset.asset_tag.startswith("TAB-")

    def test_default_category_and_tag_generator_are_injectable(self):
        asset = RecordConverter.to_asset(
            CSVAsset(knox_id="K1", serial_number="SN1"),
            default_category="Desktop",
            tag_generator=lambda category, serial: f"FIXED-{serial}"
        )
        assert asset.category == "Desktop"
        assert asset.asset_tag == "FIXED-SN1"

    def test_conversion_is_repeatable(self):
        csv_asset = CSVAsset(knox_id="K1", serial_number="SN1", category="Laptop")
        assert RecordConverter.to_asset(csv_asset).model_dump() == RecordConverter.to_asset(csv_asset).model_dump()

    def test_camel_case_payload(self):
        payload = RecordConverter.to_asset(CSVAsset(knox_id="K1", serial_number="SN1")).model_dump(by_alias=True)
        assert payload["serialNumber"] == "SN1"
        assert payload["knoxId"] == "K1"
        assert "assetTag" in payload
        assert payload["purchaseCost"] is None


class TestComponentConversion:

    def test_defaults(self):
        component = RecordConverter.to_component(CSVComponent(name="RAM", category="Memory"))

        assert component.quantity == 1
        assert component.notes == IMPORTED_NOTE
        assert component.serial_number is None
        assert component.description is None
        assert component.location is None

    def test_optional_values(self):
        component = RecordConverter.to_component(CSVComponent(
            name="SSD", category="Storage", quantity="4", serial_number="S-1",
            manufacturer="Samsung", model="970", notes="spare"
        ))

        assert component.quantity == 4
        assert component.serial_number == "S-1"
        assert component.manufacturer == "Samsung"
        assert component.notes == "spare"

    def test_empty_values_become_null(self):
        component = RecordConverter.to_component(CSVComponent(
            name="SSD", category="Storage", quantity="", serial_number="", notes=""
        ))
        assert component.quantity == 1
        assert component.serial_number is None
        assert component.notes == IMPORTED_NOTE


class TestAccessoryConversion:

    def test_defaults(self):
        accessory = RecordConverter.to_accessory(CSVAccessory(name="Headset", category="Audio"))

        assert accessory.status == AccessoryStatus.AVAILABLE
        assert accessory.quantity == 1
        assert accessory.notes == IMPORTED_NOTE
        assert accessory.assigned_to is None

    def test_status_mapping(self):
        accessory = RecordConverter.to_accessory(
            CSVAccessory(name="Headset", category="Audio", status="Borrowed by Alice")
        )
        assert accessory.status == AccessoryStatus.BORROWED
        assert accessory.model_dump(mode="json")["status"] == "borrowed"


class TestVirtualMachineConversion:

    def test_defaults(self):
        vm = RecordConverter.to_virtual_machine(CSVVirtualMachine(vm_id="vm-1", vm_name="web01", hypervisor="ESXi"))

        assert vm.vm_status == "Provisioning"
        assert vm.internet_access is False
        assert vm.vm_ip == ""
        assert vm.remarks == ""
        assert vm.date_deleted is None

    def test_values(self):
        vm = RecordConverter.to_virtual_machine(CSVVirtualMachine(
            vm_id="vm-1", vm_name="web01", hypervisor="ESXi",
            vm_status="Running", internet_access="YES", vm_ip="10.0.0.1"
        ))

        assert vm.vm_status == "Running"
        assert vm.internet_access is True
        assert vm.vm_ip == "10.0.0.1"

    def test_camel_case_payload(self):
        payload = RecordConverter.to_virtual_machine(
            CSVVirtualMachine(vm_id="vm-1", vm_name="web01", hypervisor="ESXi")
        ).model_dump(by_alias=True)

        assert payload["vmId"] == "vm-1"
        assert payload["vmOsVersion"] == ""
        assert payload["internetAccess"] is False
        assert payload["dateDeleted"] is None


class TestConversionHelpers:

    @pytest.mark.parametrize("value,expected", [
        ("5", 5),
        (None, 1),
        ("", 1),
        ("12 pcs", 12),
        ("abc", 1),
        ("0", 0),
        ("-3", -3),
    ])
    def test_parse_quantity(self, value, expected):
        assert parse_quantity(value) == expected

    @pytest.mark.parametrize("value,expected", [
        ("true", True),
        ("YES", True),
        ("1", True),
        ("false", False),
        ("2", False),
        ("y", False),
        ("", False),
        (None, False),
    ])
    def test_parse_internet_access(self, value, expected):
        assert parse_internet_access(value) is expected

    @pytest.mark.parametrize("value,expected", [
        ("Borrowed on 2023-01-01", AccessoryStatus.BORROWED),
        ("returned, was defective", AccessoryStatus.RETURNED),
        ("borrowed then returned", AccessoryStatus.BORROWED),
        ("DEFECTIVE screen", AccessoryStatus.DEFECTIVE),
        ("in stock", AccessoryStatus.AVAILABLE),
        ("", AccessoryStatus.AVAILABLE),
        (None, AccessoryStatus.AVAILABLE),
    ])
    def test_map_accessory_status(self, value, expected):
        assert map_accessory_status(value) == expected
