"""Low-level terminal input decoding.

Reads raw bytes from stdin and translates them into normalized key tokens.
The first byte is a blocking read; only the tail of an escape sequence is read
with a short timeout so a lone ESC is not mistaken for an arrow key.
"""

from __future__ import annotations

import os
import select

ESC_SEQUENCE_TIMEOUT_MS = 25
MAX_CSI_PARAMETER_BYTES = 16
EOF_KEY = "EOF"

_PENDING_BYTES: list[bytes] = []
_ARROW_KEYS: dict[bytes, str] = {
    b"A": "UP",
    b"B": "DOWN",
    b"C": "RIGHT",
    b"D": "LEFT",
}


def _read_ready_byte(fd: int, timeout_ms: int) -> bytes | None:
    ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
    if not ready:
        return None
    ch = os.read(fd, 1)
    if not ch:
        return None
    return ch


def _read_utf8_tail(fd: int, first: bytes) -> str:
    """Complete a multi-byte UTF-8 character started by ``first``."""
    lead = first[0]
    if lead >= 0xF0:
        missing = 3
    elif lead >= 0xE0:
        missing = 2
    elif lead >= 0xC0:
        missing = 1
    else:
        missing = 0
    data = first
    for _ in range(missing):
        nxt = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if nxt is None:
            break
        data += nxt
    return data.decode("utf-8", errors="replace")


def _skip_csi_parameters(fd: int, seq: bytes) -> str:
    """Consume an unsupported CSI sequence so its bytes do not leak as keys."""
    consumed = 0
    while not (0x40 <= seq[0] <= 0x7E):
        nxt = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        consumed += 1
        if nxt is None or consumed > MAX_CSI_PARAMETER_BYTES:
            break
        seq = nxt
    return "ESC"


def read_key(fd: int) -> str:
    """Block until one key arrives on ``fd`` and return its token.

    Returns ``EOF_KEY`` when the input stream is closed.
    """
    if _PENDING_BYTES:
        ch = _PENDING_BYTES.pop(0)
    else:
        ch = os.read(fd, 1)
        if not ch:
            return EOF_KEY

    if ch in {b"\x08", b"\x7f"}:
        return "BACKSPACE"
    if ch == b"\r":
        return "ENTER_CR"
    if ch == b"\n":
        return "ENTER_LF"
    if ch == b"\t":
        return "TAB"
    if ch == b"\x03":
        return "CTRL_C"

    if ch != b"\x1b":
        return _read_utf8_tail(fd, ch)

    # Escape / arrow key sequences.
    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq is None:
        return "ESC"
    if seq == b"O":
        # SS3 arrows sent in application cursor mode.
        final = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if final is None:
            return "ESC"
        return _ARROW_KEYS.get(final, "ESC")
    if seq != b"[":
        _PENDING_BYTES.append(seq)
        return "ESC"
    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq is None:
        return "ESC"
    if seq in _ARROW_KEYS:
        return _ARROW_KEYS[seq]
    return _skip_csi_parameters(fd, seq)


__all__ = [
    "ESC_SEQUENCE_TIMEOUT_MS",
    "EOF_KEY",
    "_PENDING_BYTES",
    "read_key",
]
