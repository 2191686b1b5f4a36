from abc import ABC, abstractmethod

from engine import Engine


class EngineOperations(ABC):
    """Anything whose engine can be started"""

    @abstractmethod
    def start_engine(self) -> None:
        ...


class FuelOperations(ABC):
    """Anything that can be refueled"""

    @abstractmethod
    def refuel(self) -> None:
        ...


class Vehicle(EngineOperations):
    """Base class for vehicles; works against the Engine capability, not a concrete engine"""

    def __init__(self, engine: Engine):
        """Take ownership of the engine this vehicle drives with"""
        self._engine = engine  # Set once, never reassigned

    @property
    def engine(self) -> Engine:
        return self._engine

    def start_engine(self) -> None:
        """Delegate straight to the owned engine"""
        self._engine.start()


class Car(Vehicle, FuelOperations):
    """Vehicle that can also refuel"""

    def refuel(self) -> None:
        print("Car is refueling.")


class Bike(Vehicle):
    """Vehicle with no refuel capability"""


class Truck(Vehicle, FuelOperations):
    def refuel(self) -> None:
        print("Truck is refueling.")
