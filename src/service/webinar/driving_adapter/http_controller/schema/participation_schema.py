from typing import List

from pydantic import BaseModel, SecretStr

from src.service.webinar.domain.entity.participation_entity import Participation


class UserPayload(BaseModel):
    id: str
    email: str
    password: SecretStr


class BookSeatHttpRequest(BaseModel):
    model_config = {
        'json_schema_extra': {
            'example': {
                'user': {'id': 'user-1', 'email': 'user@example.com', 'password': 'P@ssw0rd'},
            }
        },
    }

    user: UserPayload


class ParticipationResponse(BaseModel):
    model_config = {
        'json_schema_extra': {
            'example': {'webinar_id': 'webinar-1', 'user_id': 'user-1'},
        },
    }

    webinar_id: str
    user_id: str

    @classmethod
    def from_entity(cls, participation: Participation) -> 'ParticipationResponse':
        return cls(webinar_id=participation.webinar_id, user_id=participation.user_id)


ParticipationListResponse = List[ParticipationResponse]
