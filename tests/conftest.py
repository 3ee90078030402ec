import pytest

from smsly_message.config import MessageConfig


@pytest.fixture
def config():
    return MessageConfig(autodetect_encoding=False, client_ref_max_length=40, wap_validity_ms=172800000)


@pytest.fixture
def parted_reply():
    """Send result for a long text split into two parts."""
    return {
        "message-count": "2",
        "messages": [
            {
                "status": "0",
                "message-id": "00000123",
                "to": "447700900000",
                "remaining-balance": "7.97",
                "message-price": "0.03330000",
                "network": "23410",
            },
            {
                "status": "1",
                "message-id": "00000124",
                "to": "447700900000",
                "remaining-balance": "7.94",
                "message-price": "0.03330000",
                "network": "23410",
                "final-status": "delivered",
            },
        ],
    }


@pytest.fixture
def flat_reply():
    """Inbound message lookup result."""
    return {
        "message-id": "00000126",
        "account-id": "abcd1234",
        "network": "23410",
        "from": "SMSLY",
        "to": "447700900000",
        "body": "Hello there",
        "price": "0.03330000",
        "date-received": "2016-05-25 21:24:33",
        "final-status": "DELIVRD",
        "status": "1",
        "error-code": "0",
        "error-code-label": "Delivered",
        "type": "MT",
    }
