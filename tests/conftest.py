import pytest
from unittest.mock import MagicMock

from Store import DataStore
from Entities.helper import Helper
from Entities.location import Location
from Entities.vehicle import Vehicle
from services import AssistanceService


def make_helper(hid, cap, lat, lon, name=None, rating=4.0):
    return Helper(id=hid, name=name or f"helper-{hid}", capability=cap,
                  location=Location(lat, lon), rating=rating)


def messages(notifier):
    return [c.args[0] for c in notifier.notify.call_args_list]


@pytest.fixture
def notifier():
    return MagicMock()


@pytest.fixture
def vehicle():
    return Vehicle("KA01AB1234", "Swift", "Petrol")


@pytest.fixture
def svc(notifier):
    return AssistanceService(DataStore(), notifier)


@pytest.fixture
def make_service(notifier):
    def _make(helpers):
        return AssistanceService(DataStore(helpers), notifier)
    return _make
