"""Messages posted from worker threads to the app.

Workers never touch widgets or the transcript. They post one of these
(``post_message`` is thread-safe) and the app handles it on its own loop.
"""

from textual.message import Message

from ..errors import ChatTransportError
from ..llm.models import ChatReply


class ReplyReceived(Message):
    """A chat call completed with a reply."""

    def __init__(self, reply: ChatReply, epoch: int, elapsed: float) -> None:
        super().__init__()
        self.reply = reply
        self.epoch = epoch
        self.elapsed = elapsed


class ReplyFailed(Message):
    """A chat call failed."""

    def __init__(self, error: ChatTransportError, epoch: int) -> None:
        super().__init__()
        self.error = error
        self.epoch = epoch
