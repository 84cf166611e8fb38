"""
Content hashing used as the identity key for stored files
"""
import hashlib
from typing import BinaryIO

# Bytes read per chunk while hashing a stream
CHUNK_SIZE = 64 * 1024


def hash_stream(stream: BinaryIO, chunk_size: int = CHUNK_SIZE) -> str:
    """
    Compute the SHA-256 digest of a binary stream, reading it in chunks
    from its current position to EOF.

    Args:
        stream: Readable binary file-like object
        chunk_size: Number of bytes to read per iteration

    Returns:
        Lowercase hex digest (64 characters)

    Raises:
        OSError: If reading from the stream fails
    """
    digest = hashlib.sha256()
    while chunk := stream.read(chunk_size):
        digest.update(chunk)
    return digest.hexdigest()


def hash_bytes(content: bytes) -> str:
    """ SHA-256 hex digest of an in-memory buffer """
    return hashlib.sha256(content).hexdigest()
