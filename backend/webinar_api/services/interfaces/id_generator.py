"""
Identifier source interface.
"""

from abc import ABC, abstractmethod


class IdGenerator(ABC):
    """
    Produces webinar identifiers.

    Implementations:
    - RealIdGenerator: random UUID4, unique for the lifetime of the system
    - FixedIdGenerator: deterministic id-1, id-2, ... sequence for tests
    """

    @abstractmethod
    def generate(self) -> str:
        pass
