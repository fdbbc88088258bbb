"""
Tests for the console driver.
"""

import io

import pytest

from order_delivery.app import main as driver
from order_delivery.app.core.exceptions import InvalidStageNameError

BOOK_LINES = (
    "OOP in Kotlin Book is received at Stockholm City depot.\n"
    "OOP in Kotlin Book is dispatched, Truck ID is AXV-122 and driver is Logan\n"
    "OOP in Kotlin Book delivered at New York City.\n"
    "Delivery to customer = true.\n"
    "\n"
)

KNIFE_LINES = (
    "Kitchen Knife Sets is received at Stockholm City depot.\n"
    "Kitchen Knife Sets is dispatched, Truck ID is JVY-354 and driver is Peter Parker\n"
    "Kitchen Knife Sets delivered at Arkansas.\n"
    "Delivery to customer = true.\n"
    "\n"
)


def test_run_prints_sample_journeys():
    stream = io.StringIO()

    assert driver.run([], stream=stream) == 0
    assert stream.getvalue() == BOOK_LINES + KNIFE_LINES


def test_run_defaults_to_stdout(capsys):
    driver.run([])

    assert capsys.readouterr().out == BOOK_LINES + KNIFE_LINES


def test_run_filters_by_stage():
    stream = io.StringIO()
    driver.run(["--stage", "Dispatched"], stream=stream)

    assert stream.getvalue() == (
        "OOP in Kotlin Book is dispatched, Truck ID is AXV-122 and driver is Logan\n"
        "Kitchen Knife Sets is dispatched, Truck ID is JVY-354 and driver is Peter Parker\n"
    )


def test_unknown_stage_propagates(mocker):
    """The lookup error is logged, then re-raised to the caller."""
    mock_logger = mocker.patch.object(driver, "logger")
    stream = io.StringIO()

    with pytest.raises(InvalidStageNameError):
        driver.run(["--stage", "Lost"], stream=stream)

    assert stream.getvalue() == ""
    message = mock_logger.error.call_args.args[0]
    extra = mock_logger.error.call_args.kwargs["extra"]
    assert message == "Run Failed"
    assert extra["error"]["error_code"] == "ERR_LOOKUP_001"
    assert extra["error"]["details"]["name"] == "Lost"


def test_run_logs_correlation_id(mocker):
    mocker.patch.object(driver, "new_correlation_id", return_value="run-1")
    mock_logger = mocker.patch.object(driver, "logger")

    driver.run([], stream=io.StringIO())

    extras = [call.kwargs["extra"] for call in mock_logger.info.call_args_list]
    assert [extra["correlation_id"] for extra in extras] == ["run-1", "run-1"]


def test_main_exits_with_run_code(mocker):
    mocker.patch.object(driver, "run", return_value=0)

    with pytest.raises(SystemExit) as exc_info:
        driver.main()

    assert exc_info.value.code == 0
