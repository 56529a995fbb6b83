"""Ports - interfaces for external dependencies."""

from .event_publisher import EventPublisher, ProcessingEvent, SimpleEventPublisher

__all__ = [
    'EventPublisher',
    'ProcessingEvent',
    'SimpleEventPublisher',
]
