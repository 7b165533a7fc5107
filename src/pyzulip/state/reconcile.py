"""Merge incoming messages into the repository without breaking identity.

Views keep references to the instances in the repository, so a message
that is already known must never be displaced by a redundant copy (a
backfill fetch overlapping a pushed event, say). The incoming copy is
dropped and the caller's list is pointed at the canonical instance.
"""

from __future__ import annotations

from collections.abc import MutableSequence

from pyzulip.models.message import Message
from pyzulip.state.repository import MessageRepository


def reconcile_messages(repository: MessageRepository, messages: MutableSequence[Message]) -> None:
    """Reconcile *messages* against *repository*, in place.

    After the call every element of *messages* is the repository's
    canonical instance for its id. Elements are processed in order, so
    when an id repeats within *messages* the first occurrence wins.
    """
    for index, message in enumerate(messages):
        canonical = repository.get(message.id)
        if canonical is None:
            repository.insert(message)
        else:
            messages[index] = canonical
