from sms_sender.infrastructure.kafka.producer import KafkaEventProducer, serialize_event

__all__ = ["KafkaEventProducer", "serialize_event"]
