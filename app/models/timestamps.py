import threading
import time
from datetime import datetime, timezone

_position_lock = threading.Lock()
_last_position = 0


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def next_position() -> int:
    """Ordem de cadastro: nanossegundos do relógio, sempre crescente neste processo."""
    global _last_position
    with _position_lock:
        _last_position = max(time.time_ns(), _last_position + 1)
        return _last_position
