from enum import StrEnum


class OrderStatus(StrEnum):
    ALL = 'all'
    OPEN = 'open'
    PART_FILLED = 'part_filled'
    CANCELING = 'canceling'
    FILLED = 'filled'
    CANCELLED = 'cancelled'
    ORDERING = 'ordering'
    FAILURE = 'failure'
