from typing import Annotated, Literal, Union

from pydantic import Field, TypeAdapter

from .game import CamelModel


class RoundPrompt(CamelModel):
    question: str | None = None
    option_a: str | None = None
    option_b: str | None = None


class RegisterMessage(CamelModel):
    type: Literal["register"]
    role: str | None = None
    name: str | None = None
    player_id: str | None = None
    passcode: str | None = Field(default=None, alias="pass")


class LeaveMessage(CamelModel):
    type: Literal["leave"]


class VoteMessage(CamelModel):
    type: Literal["vote"]
    choice: str | None = None


class StartMessage(RoundPrompt):
    type: Literal["admin:start"]


class QueueAddMessage(RoundPrompt):
    type: Literal["admin:queue:add"]


class QueueBulkMessage(CamelModel):
    type: Literal["admin:queue:bulk"]
    items: list[RoundPrompt] = Field(default_factory=list)


class QueueRemoveMessage(CamelModel):
    type: Literal["admin:queue:remove"]
    id: str | None = None


class NextMessage(CamelModel):
    type: Literal["admin:next"]


class RevealMessage(CamelModel):
    type: Literal["admin:reveal"]


class FinalMessage(CamelModel):
    type: Literal["admin:final"]


class ResetMessage(CamelModel):
    type: Literal["admin:reset"]


class ResetKeepQueueMessage(CamelModel):
    type: Literal["admin:reset:keep-queue"]


InboundMessage = Annotated[
    Union[
        RegisterMessage,
        LeaveMessage,
        VoteMessage,
        StartMessage,
        QueueAddMessage,
        QueueBulkMessage,
        QueueRemoveMessage,
        NextMessage,
        RevealMessage,
        FinalMessage,
        ResetMessage,
        ResetKeepQueueMessage,
    ],
    Field(discriminator="type"),
]

inbound_adapter: TypeAdapter[InboundMessage] = TypeAdapter(InboundMessage)

ADMIN_MESSAGES = (
    StartMessage,
    QueueAddMessage,
    QueueBulkMessage,
    QueueRemoveMessage,
    NextMessage,
    RevealMessage,
    FinalMessage,
    ResetMessage,
    ResetKeepQueueMessage,
)
