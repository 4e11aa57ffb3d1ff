from unittest.mock import Mock

import pytest

from hexproducts.cli_adapter import run
from hexproducts.product import Product

PRODUCT_NAME = "Product Test"
PRODUCT_PRICE = 25.99
PRODUCT_STATUS = "enabled"
PRODUCT_ID = "abc"


@pytest.fixture
def service():
    product = Product(
        id=PRODUCT_ID, name=PRODUCT_NAME, price=PRODUCT_PRICE, status=PRODUCT_STATUS
    )
    mock = Mock()
    mock.create.return_value = product
    mock.get.return_value = product
    mock.enable.return_value = product
    mock.disable.return_value = product
    return mock


def test_create(service):
    result = run(service, "create", "", PRODUCT_NAME, PRODUCT_PRICE)
    assert result == (
        "Product ID abc with the name Product Test has been created "
        "with the price 25.990000 and status enabled"
    )
    service.create.assert_called_once_with(PRODUCT_NAME, PRODUCT_PRICE)


def test_enable(service):
    assert run(service, "enable", PRODUCT_ID, "", 0) == "Product Product Test has been enabled."
    service.get.assert_called_once_with(PRODUCT_ID)


def test_disable(service):
    assert run(service, "disable", PRODUCT_ID, "", 0) == "Product Product Test has been disabled."
    service.get.assert_called_once_with(PRODUCT_ID)


@pytest.mark.parametrize("action", ["get", ""])
def test_get(service, action):
    result = run(service, action, PRODUCT_ID, "", 0)
    assert result == "Product ID: abc\nName: Product Test\nPrice: 25.990000\nStatus: enabled"


def test_errors_propagate(service):
    service.get.side_effect = LookupError("missing")
    with pytest.raises(LookupError):
        run(service, "enable", "nope", "", 0)
    service.enable.assert_not_called()