from abc import ABC, abstractmethod


class INotifier(ABC):
    """Outbound email capability - application layer"""

    @abstractmethod
    async def send(
        self, subject: str, html_body: str, to_address: str, from_address: str
    ) -> bool:
        """Deliver an HTML message. Returns False when delivery failed."""
        pass
