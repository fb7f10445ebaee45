from abc import ABC, abstractmethod


class MailDeliveryError(Exception):
    """Outbound mail could not be delivered"""


class MailNotifier(ABC):
    """Outbound mail transport - application layer"""

    @abstractmethod
    async def send(self, sender: str, recipient: str, subject: str, body: str) -> None:
        """Deliver a plain-text message; raises MailDeliveryError on failure"""
        pass
