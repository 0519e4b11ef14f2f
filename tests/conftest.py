import pytest

@pytest.fixture
def success_status():
    from models.delivery_status import DeliveryStatus
    return DeliveryStatus(status="SUCCESS")

@pytest.fixture
def failed_status():
    from models.delivery_status import DeliveryStatus
    return DeliveryStatus(status="FAILED", message="Mailbox unavailable")

@pytest.fixture
def recipient_status(success_status):
    from models.email_recipient_status import EmailRecipientStatus
    return EmailRecipientStatus(
        recipient="alice@example.com",
        delivery_status=success_status
    )

@pytest.fixture
def failed_recipient_status(failed_status):
    from models.email_recipient_status import EmailRecipientStatus
    return EmailRecipientStatus(
        recipient="bob.smith+alerts@mail.example.org",
        delivery_status=failed_status
    )
