# sigsvc/tests/unit/test_device_service.py
'''
Test Suite para DeviceService:
    Orquestación Algoritmo -> Firmante -> Dispositivo -> Registro -> Firma.
'''

import sys
import os
import base64
import uuid
import logging
from unittest.mock import patch

import pytest

# --- AJUSTE DE RUTA ---
current_dir = os.path.dirname(os.path.abspath(__file__))
root_dir = os.path.abspath(os.path.join(current_dir, '../../..'))
if root_dir not in sys.path:
    sys.path.append(root_dir)

from sigsvc.core.services.device_service import DeviceService
from sigsvc.core.exceptions import (
    UnknownAlgorithmError, DeviceAlreadyExistsError, DeviceNotFoundError, KeyGenerationError
)
from sigsvc.infra.persistence.in_memory_device_repository import InMemoryDeviceRepository
from sigsvc.tests.mocks.mock_signer import MockSigner

logging.basicConfig(level=logging.CRITICAL)

@pytest.fixture
def service() -> DeviceService:
    return DeviceService(InMemoryDeviceRepository())

@pytest.fixture
def mocked_factory():
    # Evita generar claves reales en los tests de orquestación
    with patch("sigsvc.core.services.device_service.SignerFactory.create_signer", side_effect=lambda alg: MockSigner()) as m:
        yield m

def test_create_device_with_explicit_id(service: DeviceService, mocked_factory):
    device = service.create_device("RSA", "Caja 1", "d1")

    mocked_factory.assert_called_once_with("RSA")
    assert device.id == "d1"
    assert device.label == "Caja 1"
    assert service.get_device("d1") is device

def test_create_device_generates_uuid_when_id_omitted(service: DeviceService, mocked_factory):
    device = service.create_device("ECC", "sin id")

    assert str(uuid.UUID(device.id)) == device.id
    assert service.count_devices() == 1

def test_unknown_algorithm_registers_nothing(service: DeviceService):
    with pytest.raises(UnknownAlgorithmError):
        service.create_device("DSA", "x", "d1")

    assert service.list_devices() == []
    with pytest.raises(DeviceNotFoundError):
        service.get_device("d1")

def test_key_generation_failure_registers_nothing(service: DeviceService):
    with patch("sigsvc.core.services.device_service.SignerFactory.create_signer", side_effect=KeyGenerationError("boom")):
        with pytest.raises(KeyGenerationError):
            service.create_device("RSA", "x", "d1")

    assert service.count_devices() == 0

def test_duplicate_id_surfaces_already_exists(service: DeviceService, mocked_factory):
    first = service.create_device("RSA", "primero", "d1")

    with pytest.raises(DeviceAlreadyExistsError):
        service.create_device("ECC", "segundo", "d1")

    assert service.get_device("d1") is first
    assert service.count_devices() == 1

def test_list_devices(service: DeviceService, mocked_factory):
    service.create_device("RSA", "a", "d1")
    service.create_device("ECC", "b", "d2")

    assert sorted((d.id, d.label) for d in service.list_devices()) == [("d1", "a"), ("d2", "b")]

def test_sign_data_on_unknown_device(service: DeviceService):
    with pytest.raises(DeviceNotFoundError):
        service.sign_data("ghost", "hello")

def test_sign_data_scenario_with_real_rsa(service: DeviceService):
    service.create_device("RSA", "", "d1")

    first = service.sign_data("d1", "hello")
    second = service.sign_data("d1", "world")

    assert first.signed_data == "0_hello_" + base64.b64encode(b"d1").decode()
    assert second.signed_data == "1_world_" + first.signature
    assert service.get_device("d1").signature_counter == 2

def test_devices_have_independent_chains(service: DeviceService, mocked_factory):
    service.create_device("RSA", "", "a")
    service.create_device("RSA", "", "b")

    service.sign_data("a", "1")
    service.sign_data("a", "2")
    res_b = service.sign_data("b", "1")

    assert res_b.signed_data.startswith("0_1_")
    assert service.get_device("a").signature_counter == 2
    assert service.get_device("b").signature_counter == 1

def test_verify_chain_with_device_public_key(service: DeviceService):
    service.create_device("ECC", "", "e1")
    chain = [service.sign_data("e1", f"venta-{i}") for i in range(3)]

    assert service.verify_chain("e1", chain)
    assert not service.verify_chain("e1", [chain[1], chain[2]])

def test_verify_chain_rejects_signatures_of_other_device(service: DeviceService):
    service.create_device("ECC", "", "a")
    service.create_device("ECC", "", "b")
    chain_a = [service.sign_data("a", "x")]

    assert not service.verify_chain("b", chain_a)

def test_verify_chain_on_unknown_device(service: DeviceService):
    with pytest.raises(DeviceNotFoundError):
        service.verify_chain("ghost", [])
