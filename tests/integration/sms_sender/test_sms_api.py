from fastapi.testclient import TestClient


def test_send_to_blocked_number(client: TestClient, producer):
    r = client.post("/api/v1/sms/send", json={"phoneNumber": "+1111111111", "message": "hi"})
    assert r.status_code == 403, r.text
    body = r.json()
    assert body["status"] == "BLOCKED"
    assert body["phoneNumber"] == "+1111111111"
    assert body["message"] == "Phone number is in the block list"
    assert "timestamp" in body
    assert producer.sent == []


def test_send_success(client: TestClient, producer):
    r = client.post("/api/v1/sms/send", json={"phoneNumber": "+15551234567", "message": "hello", "userId": "u-7"})
    assert r.status_code == 200, r.text
    body = r.json()
    assert body["status"] == "SUCCESS"
    assert body["phoneNumber"] == "+15551234567"
    topic, key, event = producer.sent[0]
    assert (topic, key) == ("sms.events", "+15551234567")
    assert event.user_id == "u-7"


def test_send_broker_failure(client: TestClient, producer):
    producer.mode = "fail"
    r = client.post("/api/v1/sms/send", json={"phoneNumber": "+15551234567", "message": "hello"})
    assert r.status_code == 503
    body = r.json()
    assert body["status"] == "FAILED"
    assert body["phoneNumber"] == "+15551234567"


def test_send_rejects_malformed_body(client: TestClient, producer):
    r = client.post("/api/v1/sms/send", json={"phoneNumber": "12", "message": "x" * 200})
    assert r.status_code == 400
    body = r.json()
    assert body["code"] == "validation_error"
    assert body["correlation_id"]
    assert producer.sent == []


def test_request_id_is_echoed(client: TestClient):
    r = client.post(
        "/api/v1/sms/send",
        json={"phoneNumber": "+15551234567", "message": "hello"},
        headers={"X-Request-ID": "req-123"},
    )
    assert r.headers["X-Request-ID"] == "req-123"


def test_send_rejects_non_ascii_digits(client: TestClient, producer):
    r = client.post("/api/v1/sms/send", json={"phoneNumber": "+1١١١١١١١١١", "message": "hi"})
    assert r.status_code == 400, r.text
    assert r.json()["code"] == "validation_error"
    assert producer.sent == []


def test_send_rejects_message_over_limit_in_utf16_units(client: TestClient, producer):
    r = client.post("/api/v1/sms/send", json={"phoneNumber": "+15551234567", "message": "\U0001F600" * 100})
    assert r.status_code == 400, r.text
    assert r.json()["status"] == "FAILED"
    assert producer.sent == []
