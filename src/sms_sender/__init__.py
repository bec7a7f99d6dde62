"""SMS Sender bounded context: block-list guard, delivery-event publishing, send dispatch."""
