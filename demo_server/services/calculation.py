"""Calculation use case."""

from demo_server.domain.models import Calculation
from demo_server.domain.values import Operation
from demo_server.errors import DemoServerError
from demo_server.ports.outbound import Logger


class CalculationService:
    def __init__(self, logger: Logger) -> None:
        self._logger = logger

    def calculate(self, operation: Operation, a: float, b: float) -> Calculation:
        self._logger.info(f"Performing calculation: {a} {operation.value} {b}")
        try:
            calculation = Calculation.perform(operation, a, b)
        except DemoServerError as exc:
            self._logger.warn(f"Calculation rejected: {exc}")
            raise
        self._logger.info(f"Calculation result: {calculation.result}")
        return calculation
