"""
Tests for content hashing
"""
import hashlib
import io

import pytest

from core.hashing import CHUNK_SIZE, hash_bytes, hash_stream

HELLO_SHA256 = "2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824"
EMPTY_SHA256 = "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"


class FailingStream(io.BytesIO):
    def read(self, *args):
        raise OSError("disk went away")


def test_known_digests():
    assert hash_stream(io.BytesIO(b"hello")) == HELLO_SHA256
    assert hash_stream(io.BytesIO(b"")) == EMPTY_SHA256
    assert hash_bytes(b"hello") == HELLO_SHA256
    assert hash_bytes(b"") == EMPTY_SHA256


def test_hash_is_deterministic():
    data = b"some file content\n" * 100
    assert hash_stream(io.BytesIO(data)) == hash_stream(io.BytesIO(data))


def test_different_content_different_digest():
    assert hash_stream(io.BytesIO(b"hello")) != hash_stream(io.BytesIO(b"hello!"))


@pytest.mark.parametrize("chunk_size", [1, 7, 4096, CHUNK_SIZE])
def test_chunk_size_does_not_change_digest(chunk_size):
    """ Content spanning several chunks hashes like the whole buffer """
    data = bytes(range(256)) * 600
    assert hash_stream(io.BytesIO(data), chunk_size=chunk_size) == \
        hashlib.sha256(data).hexdigest()


def test_stream_is_read_to_eof():
    stream = io.BytesIO(b"abc" * 1000)
    hash_stream(stream, chunk_size=10)
    assert stream.read() == b""


def test_read_error_propagates():
    with pytest.raises(OSError):
        hash_stream(FailingStream(b"data"))
