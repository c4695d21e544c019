"""Relay addressing helpers."""


def recipient_string(recipient_hash: str, relay_server: str) -> str:
    """
    Get the recipient string used in relay room messages.

    Args:
        recipient_hash: Hex hash identifying the recipient
        relay_server: Relay server host name

    Returns:
        "@<recipient_hash>:<relay_server>"
    """
    return f"@{recipient_hash}:{relay_server}"
