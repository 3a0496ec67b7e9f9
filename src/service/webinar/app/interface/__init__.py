from src.service.webinar.app.interface.i_mailer import IMailer
from src.service.webinar.app.interface.i_participation_repo import IParticipationRepo
from src.service.webinar.app.interface.i_user_repo import IUserRepo
from src.service.webinar.app.interface.i_webinar_repo import IWebinarRepo


__all__ = [
    'IMailer',
    'IParticipationRepo',
    'IUserRepo',
    'IWebinarRepo',
]
