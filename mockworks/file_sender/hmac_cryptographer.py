import base64
import hashlib
import hmac
import json

from mockworks.file_sender.base import BaseCryptographer
from mockworks.file_sender.exceptions import CredentialError
from mockworks.file_sender.models import Credential


class HmacCryptographer(BaseCryptographer):
    """Signs content with an HMAC keyed by the credential secret."""

    def __init__(self, algorithm: str = "sha256") -> None:
        if algorithm not in hashlib.algorithms_guaranteed:
            raise ValueError(
                f"Unknown signing algorithm '{algorithm}'. "
                f"Choose from: {sorted(hashlib.algorithms_guaranteed)}"
            )
        self._algorithm = algorithm

    def sign(self, content: bytes, credential: Credential) -> bytes:
        if not credential.secret:
            raise CredentialError(f"Credential '{credential.subject}' has no secret")
        signature = hmac.new(credential.secret, content, self._algorithm).hexdigest()
        envelope = {
            "signer": credential.subject,
            "algorithm": f"hmac-{self._algorithm}",
            "content": base64.b64encode(content).decode("ascii"),
            "signature": signature,
        }
        return json.dumps(envelope, sort_keys=True).encode("utf-8")
