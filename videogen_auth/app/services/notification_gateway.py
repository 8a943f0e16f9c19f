from abc import ABC, abstractmethod


class INotificationGateway(ABC):
    """
    Outbound email capability.

    Every method returns True when the message was handed off and False
    when delivery failed. Callers decide whether a failure matters.
    """

    @abstractmethod
    async def send_verification_code(self, email: str, name: str, code: str) -> bool:
        pass

    @abstractmethod
    async def send_password_reset_code(self, email: str, name: str, code: str) -> bool:
        pass

    @abstractmethod
    async def send_welcome(self, email: str, name: str) -> bool:
        pass

    @abstractmethod
    async def send_password_changed(self, email: str, name: str) -> bool:
        pass
