from typing import IO, Iterator

# 4 MiB, the size of every boot-resource upload chunk but the last.
CHUNK_SIZE = 1 << 22


def iter_chunks(fileobj: IO[bytes], chunk_size: int = CHUNK_SIZE) -> Iterator[bytes]:
    """Yield full chunks, then the trimmed remainder; never an empty chunk."""
    while True:
        chunk = fileobj.read(chunk_size)
        if not chunk:
            return
        yield chunk
        if len(chunk) < chunk_size:
            return
