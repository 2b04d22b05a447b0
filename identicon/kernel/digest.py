"""
Digest - deterministic fixed-length hex string from a username
"""

import hashlib
import logging

from identicon.config import DIGEST_ALGORITHM

log = logging.getLogger(__name__)

MIN_DIGEST_LENGTH = 24

# every entry yields at least MIN_DIGEST_LENGTH hex characters
ALGORITHMS = ("md5", "sha1", "sha224", "sha256", "sha512", "blake2b", "blake2s")


class UnknownDigestError(ValueError):
    def __init__(self, algorithm: str):
        super().__init__(f"unknown digest algorithm: {algorithm}")
        self.algorithm = algorithm


def digest(text: str, algorithm: str = DIGEST_ALGORITHM) -> str:
    if algorithm not in ALGORITHMS:
        raise UnknownDigestError(algorithm)
    h = hashlib.new(algorithm, (text or "").encode("utf-8")).hexdigest()
    log.debug("digest %s(%r) -> %s", algorithm, text, h)
    return h
