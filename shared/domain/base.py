"""
Base Domain Classes

Building blocks shared by the storefront bounded contexts:
- ValueObject: Immutable objects compared by value
- DomainEvent: Something that happened (order placed, status changed, ...)
- EventRecorder: Mixin letting Django models collect events until commit
"""

from abc import ABC
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Optional
from uuid import UUID, uuid4


@dataclass(frozen=True)
class ValueObject(ABC):
    """
    Base class for value objects

    Value objects are immutable and have no identity.
    Two value objects are equal if all their attributes are equal.
    """
    pass


@dataclass(kw_only=True)
class DomainEvent:
    """
    Base class for domain events

    Events are recorded inside a unit of work and handed to the
    message bus only after the surrounding transaction commits.
    """
    event_id: UUID = field(default_factory=uuid4)
    occurred_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    aggregate_id: Optional[UUID] = None

    def to_dict(self) -> dict:
        """Convert event to dictionary for serialization"""
        return {
            'event_id': str(self.event_id),
            'event_type': self.__class__.__name__,
            'occurred_at': self.occurred_at.isoformat(),
            'aggregate_id': str(self.aggregate_id) if self.aggregate_id else None,
        }


class EventRecorder:
    """
    Mixin for aggregate roots persisted as Django models.

    Model instances do not run dataclass initialisation, so the event
    buffer is created lazily on first use.
    """

    def record_event(self, event: DomainEvent) -> None:
        if event.aggregate_id is None:
            event.aggregate_id = getattr(self, 'pk', None)
        self._pending_events().append(event)

    def pull_events(self) -> List[DomainEvent]:
        """Return collected events and clear the buffer"""
        events = list(self._pending_events())
        self._pending_events().clear()
        return events

    def _pending_events(self) -> List[DomainEvent]:
        buffer = self.__dict__.get('_domain_events')
        if buffer is None:
            buffer = []
            self.__dict__['_domain_events'] = buffer
        return buffer
