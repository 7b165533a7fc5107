"""pyzulip - Async Zulip client with an identity-preserving message store."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pyzulip")
except PackageNotFoundError:
    __version__ = "0+local"
from pyzulip.client import ZulipClient
from pyzulip.config import ZulipConfig
from pyzulip.exceptions import (
    ZulipApiError,
    ZulipBadEventQueueError,
    ZulipConfigError,
    ZulipError,
    ZulipStateError,
    ZulipTransportError,
)
from pyzulip.models import (
    CombinedFeedNarrow,
    DmMessage,
    DmNarrow,
    Message,
    MessageEvent,
    MessageFlag,
    Reaction,
    ReactionEvent,
    ReactionOp,
    ReactionType,
    StreamMessage,
    StreamNarrow,
    TopicNarrow,
    UpdateMessageEvent,
)
from pyzulip.state.message_list import MessageListView
from pyzulip.state.store import MessageStore

__all__ = [
    "__version__",
    "CombinedFeedNarrow",
    "DmMessage",
    "DmNarrow",
    "Message",
    "MessageEvent",
    "MessageFlag",
    "MessageListView",
    "MessageStore",
    "Reaction",
    "ReactionEvent",
    "ReactionOp",
    "ReactionType",
    "StreamMessage",
    "StreamNarrow",
    "TopicNarrow",
    "UpdateMessageEvent",
    "ZulipApiError",
    "ZulipBadEventQueueError",
    "ZulipClient",
    "ZulipConfig",
    "ZulipConfigError",
    "ZulipError",
    "ZulipStateError",
    "ZulipTransportError",
]
