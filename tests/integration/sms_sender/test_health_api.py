from fastapi.testclient import TestClient

from shared.config import Settings
from sms_sender.main import create_app


def test_health_ok(client: TestClient):
    assert client.get("/_health/redis").json() == {"service": "redis", "status": "ok"}
    assert client.get("/_health/kafka").json() == {"service": "kafka", "status": "ok"}


def test_health_unavailable(settings: Settings, failing_store, make_producer):
    producer = make_producer()
    producer.reachable = False
    app = create_app(settings, block_store=failing_store, event_producer=producer)
    with TestClient(app) as c:
        assert c.get("/_health/redis").status_code == 503
        assert c.get("/_health/kafka").status_code == 503
    assert producer.closed is True


def test_startup_survives_unreachable_block_store(settings: Settings, failing_store, producer):
    app = create_app(settings, block_store=failing_store, event_producer=producer)
    with TestClient(app) as c:
        r = c.post("/api/v1/sms/send", json={"phoneNumber": "+1111111111", "message": "hi"})
        assert r.json()["status"] == "SUCCESS"
        assert c.get("/api/v1/sms/blocklist/size").json() == {"size": 0}
