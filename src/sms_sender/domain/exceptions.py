# src/sms_sender/domain/exceptions.py
"""
SMS Domain Exceptions
"""
from fastapi import status

from shared.exceptions import DomainError


class SmsDomainError(DomainError):
    """Base exception for SMS domain errors."""
    code = "sms_error"


class InvalidPhoneNumberError(SmsDomainError):
    """Raised for invalid phone number format."""
    code = "invalid_phone_number"
    status_code = status.HTTP_400_BAD_REQUEST


class InvalidMessageContentError(SmsDomainError):
    """Raised when message content is empty or too long."""
    code = "invalid_message"
    status_code = status.HTTP_400_BAD_REQUEST


class KafkaDeliveryError(SmsDomainError):
    """Raised (into a send future) when the broker rejects or fails to deliver an event."""
    code = "kafka_delivery_failed"
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
