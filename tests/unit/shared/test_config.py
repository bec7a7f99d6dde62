import pytest

from shared.config import Settings, load_settings


def test_defaults():
    s = load_settings({})
    assert s.environment == "local"
    assert s.blocklist_key == "sms:blocklist"
    assert s.kafka_topic == "sms.events"
    assert s.kafka_acks == "all"
    assert s.is_local is True


def test_env_overrides():
    s = load_settings({
        "ENVIRONMENT": "prod",
        "APP_REDIS_BLOCKLIST_KEY": "blocked:numbers",
        "KAFKA_TOPIC": "sms.out",
        "KAFKA_BOOTSTRAP_SERVERS": "kafka:9092",
        "BLOCKLIST_BACKEND": "memory",
    })
    assert s.is_prod is True
    assert s.blocklist_key == "blocked:numbers"
    assert s.kafka_topic == "sms.out"
    assert s.blocklist_backend == "memory"
    assert s.kafka_producer_config()["bootstrap.servers"] == "kafka:9092"


@pytest.mark.parametrize(
    "env",
    [
        {"ENVIRONMENT": "qa"},
        {"REDIS_URL": "http://localhost:6379"},
        {"LOG_LEVEL": "LOUD"},
        {"KAFKA_ACKS": "some"},
        {"KAFKA_DELIVERY_TIMEOUT_MS": "abc"},
        {"KAFKA_DELIVERY_TIMEOUT_MS": "60000", "KAFKA_SEND_TIMEOUT_SECONDS": "30"},
    ],
)
def test_invalid_values_raise(env):
    with pytest.raises(ValueError):
        load_settings(env)


def test_producer_config_enables_idempotence_only_with_full_acks():
    assert Settings(kafka_acks="all").kafka_producer_config()["enable.idempotence"] is True
    assert Settings(kafka_acks="1").kafka_producer_config()["enable.idempotence"] is False


def test_safe_dict_masks_redis_password():
    s = Settings(redis_url="redis://:s3cret@redis:6379/0")
    assert "s3cret" not in s.safe_dict()["redis_url"]
