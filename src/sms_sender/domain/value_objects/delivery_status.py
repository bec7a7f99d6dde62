# src/sms_sender/domain/value_objects/delivery_status.py
"""
Delivery Status Enum
"""
from enum import Enum


class DeliveryStatus(str, Enum):
    """
    Lifecycle tag carried by a delivery event.

    Flow: PENDING (published by the sender) → SENT (set downstream)
    """
    PENDING = "PENDING"
    SENT = "SENT"
