"""
Discord request signature verification.

Discord signs `timestamp + raw body` with the application's Ed25519 key and
sends the hex signature and timestamp as headers.
"""
from nacl.exceptions import BadSignatureError
from nacl.signing import VerifyKey

from factbot.logger import logger

SIGNATURE_HEADER = "X-Signature-Ed25519"
TIMESTAMP_HEADER = "X-Signature-Timestamp"


def verify_key(body: bytes, signature: str, timestamp: str, public_key: str) -> bool:
    try:
        key = VerifyKey(bytes.fromhex(public_key))
        key.verify(timestamp.encode() + body, bytes.fromhex(signature))
    except BadSignatureError:
        logger.warning("Discord request signature did not verify")
        return False
    except (ValueError, TypeError) as e:
        logger.warning("Could not decode Discord signature or public key: %s", e)
        return False
    return True


def verify_discord_request(headers, body: bytes, public_key: str) -> bool:
    """
    Check the signature headers of an inbound request.
    Missing headers count as an invalid signature.
    """
    signature = headers.get(SIGNATURE_HEADER)
    timestamp = headers.get(TIMESTAMP_HEADER)
    if not signature or not timestamp:
        logger.warning("Discord request is missing signature headers")
        return False
    return verify_key(body, signature, timestamp, public_key)
