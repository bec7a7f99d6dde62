from sms_sender.domain.protocols.block_store import BlockStore
from sms_sender.domain.protocols.event_producer import AckPosition, EventProducer

__all__ = ["AckPosition", "BlockStore", "EventProducer"]
