"""Tests for the input/logic/output trio."""

import pytest
from business_logic import BusinessLogic
from handlers import InputHandler, OutputHandler


class TestInputOutput:
    def test_get_input(self) -> None:
        assert InputHandler().get_input() == "Start Car"

    def test_display_output(self, capsys) -> None:
        OutputHandler().display_output("Car started successfully!")
        assert capsys.readouterr().out == "Output: Car started successfully!\n"


class TestBusinessLogic:
    """Tests for BusinessLogic."""

    @pytest.mark.parametrize("action", ["Start Car", "start car", "START CAR", "sTaRt CaR"])
    def test_start_car_ignores_case(self, action, capsys) -> None:
        BusinessLogic().process_action(action)
        assert capsys.readouterr().out == "Processing car startup.\n"

    @pytest.mark.parametrize("action", ["Stop Car", "", " Start Car", "Start Car ", "StartCar"])
    def test_unknown_action(self, action, capsys) -> None:
        BusinessLogic().process_action(action)
        assert capsys.readouterr().out == "Unknown action.\n"
