"""Internal constants shared across the library."""

USER_AGENT = "pyzulip/0.1"
API_PREFIX = "/api/v1"

#: Messages requested on either side of the anchor by a view's first fetch.
DEFAULT_FETCH_BATCH_SIZE = 100

BAD_EVENT_QUEUE_ID_CODE = "BAD_EVENT_QUEUE_ID"

#: Event types a message store needs from ``/register``.
MESSAGE_EVENT_TYPES: tuple[str, ...] = ("message", "update_message", "reaction")
