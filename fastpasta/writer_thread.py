"""Run a BufferedWriter on its own thread, fed from a queue."""

from __future__ import annotations

import logging
import queue
import threading

from .writer import BUFFER_SIZE, BufferedWriter, OutputTarget

_log = logging.getLogger(__name__)


def spawn_writer(
    output: OutputTarget,
    stop_event: threading.Event,
    data_queue: queue.Queue,
) -> threading.Thread:
    """Start a thread named ``Writer`` that writes CDP chunks from ``data_queue``.

    Each item on the queue is a CDP chunk: an iterable of
    ``(rdh, payload, memory_position)`` entries. Putting ``None`` on the queue
    ends the thread. If ``stop_event`` is set when a chunk arrives, the thread
    stops without writing that chunk. Buffered data is flushed when the
    thread ends.
    """
    writer = BufferedWriter(output, BUFFER_SIZE)

    def run() -> None:
        with writer:
            while True:
                chunk = data_queue.get()
                if chunk is None:
                    break
                if stop_event.is_set():
                    _log.debug("Stopping writer thread")
                    break
                writer.push_cdp_chunk(chunk)

    thread = threading.Thread(target=run, name="Writer")
    thread.start()
    return thread