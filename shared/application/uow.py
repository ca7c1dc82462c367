"""
Unit of Work Pattern

Wraps a database transaction and makes sure domain events are published
only after the transaction commits.
"""

from typing import List
import logging

from django.db import transaction

from shared.domain.base import DomainEvent

logger = logging.getLogger(__name__)


class DjangoUnitOfWork:
    """
    Django implementation of Unit of Work

    Usage:
        with DjangoUnitOfWork() as uow:
            order = Order.objects.select_for_update().get(pk=order_id)
            order.transition_to(OrderStatus.SHIPPED)
            order.save()
            uow.collect_events(order)
        # Events are published after commit
    """

    def __init__(self):
        self._events: List[DomainEvent] = []
        self._transaction = None

    def __enter__(self):
        self._transaction = transaction.atomic()
        self._transaction.__enter__()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        try:
            if exc_type is None:
                self.commit()
            else:
                self.rollback()
        finally:
            if self._transaction:
                self._transaction.__exit__(exc_type, exc_val, exc_tb)

    def commit(self):
        """Schedule publishing of collected events on transaction commit"""
        events = self._events.copy()
        self._events.clear()
        logger.debug("Committing unit of work with %s events", len(events))
        if events:
            transaction.on_commit(lambda: self._publish_events(events))

    def rollback(self):
        if self._events:
            logger.warning("Rolling back transaction, discarding %s events", len(self._events))
        self._events.clear()

    def add_event(self, event: DomainEvent):
        self._events.append(event)

    def collect_events(self, aggregate):
        """Take pending events from an aggregate recorded via EventRecorder"""
        pull = getattr(aggregate, 'pull_events', None)
        if pull is None:
            return
        new_events = pull()
        if new_events:
            self._events.extend(new_events)
            logger.debug(
                "Collected %s events from %s (ID: %s)",
                len(new_events), aggregate.__class__.__name__, getattr(aggregate, 'pk', None),
            )

    def _publish_events(self, events: List[DomainEvent]):
        from shared.application.message_bus import message_bus

        logger.info("Publishing %s domain events after commit", len(events))
        message_bus.publish_events(events)
