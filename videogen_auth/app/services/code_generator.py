from abc import ABC, abstractmethod


class ICodeGenerator(ABC):
    """Source of six-digit one-time codes"""

    @abstractmethod
    def generate(self) -> str:
        pass
