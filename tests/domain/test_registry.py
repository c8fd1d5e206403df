# tests/domain/test_registry.py
import pytest

from rh_dispatch.domain.entities.driver import Driver
from rh_dispatch.domain.entities.geography import Location
from rh_dispatch.domain.errors import DriverNotFoundError, DuplicateDriverError
from rh_dispatch.domain.registry import DriverRegistry


def _registry():
    reg = DriverRegistry()
    reg.register(Driver(1, "A", Location(2.0, 3.0)))
    reg.register(Driver(2, "B", Location(10.0, 20.0)))
    reg.register(Driver(3, "C", Location(4.0, 4.0)))
    return reg


def test_register_keeps_registration_order():
    reg = _registry()
    assert [d.id for d in reg.list_all()] == [1, 2, 3]
    assert len(reg) == 3
    assert 2 in reg and 99 not in reg


def test_register_rejects_duplicate_id():
    reg = _registry()
    with pytest.raises(DuplicateDriverError) as ei:
        reg.register(Driver(2, "B2", Location(0.0, 0.0)))
    assert ei.value.driver_id == 2
    # original entry untouched
    assert reg.get(2).name == "B"
    assert len(reg) == 3


def test_list_available_filters_and_keeps_order():
    reg = _registry()
    reg.set_availability(2, False)
    assert [d.id for d in reg.list_available()] == [1, 3]
    reg.set_availability(2, True)
    assert [d.id for d in reg.list_available()] == [1, 2, 3]


def test_update_location():
    reg = _registry()
    reg.update_location(3, Location(7.0, 8.0))
    assert reg.get(3).loc == Location(7.0, 8.0)


def test_unknown_driver_raises_not_found():
    reg = _registry()
    with pytest.raises(DriverNotFoundError):
        reg.update_location(42, Location(0.0, 0.0))
    with pytest.raises(DriverNotFoundError):
        reg.set_availability(42, False)
    with pytest.raises(LookupError):
        reg.get(42)


def test_list_all_is_a_read_only_view():
    reg = _registry()
    view = reg.list_all()
    assert isinstance(view, tuple)
    with pytest.raises(AttributeError):
        view.append(Driver(9, "X", Location(0.0, 0.0)))
    assert len(reg) == 3
