"""Process-wide state shared by every sandbox build."""

from __future__ import annotations

from dataclasses import dataclass, field
import threading


@dataclass(frozen=True)
class RuntimeContext:
    # Berkshelf and Librarian-Chef share on-disk resolver state (~/.berkshelf,
    # .librarian) and must not run twice at once within one process.
    berkshelf_lock: threading.Lock = field(default_factory=threading.Lock)
    librarian_lock: threading.Lock = field(default_factory=threading.Lock)


DEFAULT_RUNTIME = RuntimeContext()
