from abc import ABC, abstractmethod

from src.service.webinar.domain.value_object.mail_message import MailMessage


class IMailer(ABC):
    @abstractmethod
    async def send(self, *, message: MailMessage) -> None:
        pass
