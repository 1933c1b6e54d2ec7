import time


def pause(seconds: float) -> None:
    """Suspends the calling thread for ``seconds``; non-positive values return at once."""
    if seconds <= 0:
        return
    time.sleep(seconds)
