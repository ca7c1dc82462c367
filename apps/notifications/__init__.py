"""Notifications app package.

Customer and administrator emails sent from Celery tasks. Tasks are
queued by message bus handlers once the transaction that produced the
domain event has committed.
"""
