"""Mock mailer that records messages and echoes them to the log instead of sending."""

from typing import List

from src.platform.logging.loguru_io import Logger
from src.service.webinar.app.interface.i_mailer import IMailer
from src.service.webinar.domain.value_object.mail_message import MailMessage


class MockMailerImpl(IMailer):
    def __init__(self, debug: bool = True) -> None:
        self.debug = debug
        self.sent_messages: List[MailMessage] = []  # Inspected by tests

    @Logger.io
    async def send(self, *, message: MailMessage) -> None:
        self.sent_messages.append(message)

        if self.debug:
            Logger.base.info(
                '\n'.join(
                    (
                        '📧 MOCK EMAIL SENT',
                        f'To: {message.to}',
                        f'Subject: {message.subject}',
                        f'Body: {message.body}',
                    )
                )
            )
