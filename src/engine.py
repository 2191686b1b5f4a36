'''
This module defines the Engine capability and the concrete engines a vehicle can own.
'''

from abc import ABC, abstractmethod


class Engine(ABC):
    """Capability every engine provides: it can be started"""

    @abstractmethod
    def start(self) -> None:
        """Start the engine"""


class PetrolEngine(Engine):
    def start(self) -> None:
        print("Petrol engine starts.")


class ElectricEngine(Engine):
    def start(self) -> None:
        print("Electric engine starts.")
