"""
Live transcript buffer for the answer in progress.

Chunks from the speech recognizer are appended while the candidate talks;
freeze() copies out the immutable text that gets scored.
"""

from typing import List


class TranscriptBuffer:
    """Owned, growable transcript for one answer"""

    def __init__(self):
        self._chunks: List[str] = []

    def append(self, chunk: str) -> None:
        if not isinstance(chunk, str):
            raise TypeError("transcript chunk must be a string")
        chunk = chunk.strip()
        if chunk:
            self._chunks.append(chunk)

    def freeze(self) -> str:
        """Snapshot of everything recorded so far"""
        return ' '.join(self._chunks)

    def reset(self) -> None:
        self._chunks = []

    def __len__(self) -> int:
        return len(self._chunks)

    def __bool__(self) -> bool:
        return bool(self._chunks)
