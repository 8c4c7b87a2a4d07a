# directives/document_cache.py

import os
import threading
from collections import OrderedDict
from typing import Optional

from dotenv import load_dotenv

from directives.composer import DirectiveComposer, DEFAULT_COMPOSER
from directives.entities import Configuration, Document

load_dotenv()


class DocumentCache:
    """
    Process-local memo of composed documents.

    - Keyed on full Configuration equality (Configuration is frozen, so hashable).
    - Bounded: the oldest entry is evicted once max_entries is exceeded.
    - Pure optimization; compose() gives the same Document without it.
    """

    def __init__(self, max_entries: int = 64, composer: Optional[DirectiveComposer] = None) -> None:
        self.max_entries = max(1, int(max_entries))
        self.composer = composer or DEFAULT_COMPOSER
        self._lock = threading.Lock()
        self._items: "OrderedDict[Configuration, Document]" = OrderedDict()
        self.hits = 0
        self.misses = 0

    def get(self, config: Optional[Configuration] = None) -> Document:
        config = config or Configuration()
        with self._lock:
            doc = self._items.get(config)
            if doc is not None:
                self.hits += 1
                return doc
            self.misses += 1

        # composing outside the lock; two racing misses produce identical documents
        doc = self.composer.compose(config)

        with self._lock:
            self._items[config] = doc
            while len(self._items) > self.max_entries:
                self._items.popitem(last=False)
        return doc

    def clear(self) -> None:
        with self._lock:
            self._items.clear()
            self.hits = 0
            self.misses = 0

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)


# Global, process-local singleton
DOCUMENT_CACHE = DocumentCache(max_entries=int(os.getenv("DIRECTIVES_CACHE_SIZE", "64")))


def compose_cached(config: Optional[Configuration] = None) -> Document:
    return DOCUMENT_CACHE.get(config)
