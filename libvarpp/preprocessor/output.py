from __future__ import annotations

# Highest index `#output` may select, every lower buffer is materialized on selection
MAX_OUTPUT_BUFFER_INDEX = 4095


class OutputBuffers:
    """Ordered output buffers indexed from zero, lines are appended to selected one.

    Buffer is materialized (with all lower ones) when it is selected first time.
    """

    def __init__(self) -> None:
        self._buffers: list[list[str]] = [[]]
        self._selected = 0

    def select(self, index: int) -> None:
        assert 0 <= index <= MAX_OUTPUT_BUFFER_INDEX, "Output buffer index is out of range"
        if index >= len(self._buffers):
            self._buffers.extend([] for _ in range(index + 1 - len(self._buffers)))
        self._selected = index

    def append_line(self, line: str) -> None:
        self._buffers[self._selected].append(line + "\n")

    def collect(self) -> list[str]:
        return ["".join(buffer) for buffer in self._buffers]
