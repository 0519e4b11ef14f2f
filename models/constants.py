# Field tags shared by every notification model document.
RECIPIENT_TAG = "recipient"
DELIVERY_STATUS_TAG = "delivery_status"
STATUS_TAG = "status"
MESSAGE_TAG = "message"
