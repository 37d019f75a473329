import base64
from collections.abc import Sequence
from dataclasses import dataclass

Message = dict[str, object]


@dataclass(frozen=True)
class ImageInput:
    """Raw image bytes to be sent inline to a vision-capable model."""

    data: bytes
    media_type: str

    def data_url(self) -> str:
        encoded = base64.b64encode(self.data).decode("ascii")
        return f"data:{self.media_type};base64,{encoded}"


@dataclass(frozen=True)
class UserContent:
    """Body of the user turn: plain text, optionally with an inline image."""

    text: str
    image: ImageInput | None = None

    def to_message_content(self) -> str | list[dict[str, object]]:
        if self.image is None:
            return self.text
        return [
            {"type": "image_url", "image_url": {"url": self.image.data_url()}},
            {"type": "text", "text": self.text},
        ]


@dataclass(frozen=True)
class ChatMessage:
    """A prior turn of a conversation."""

    role: str
    content: str

    ROLES = ("user", "assistant")

    def __post_init__(self) -> None:
        if self.role not in self.ROLES:
            raise ValueError(f"Unknown chat role '{self.role}'. Choose from: {list(self.ROLES)}")


def build_messages(
    system_instruction: str,
    user_content: UserContent,
    history: Sequence[ChatMessage] = (),
) -> list[Message]:
    """Assemble the provider message list: system, prior turns, then the user turn."""
    messages: list[Message] = [{"role": "system", "content": system_instruction}]
    messages.extend({"role": m.role, "content": m.content} for m in history)
    messages.append({"role": "user", "content": user_content.to_message_content()})
    return messages
