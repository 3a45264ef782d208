from __future__ import annotations

import contextlib
import logging
from typing import Callable, Dict, Iterator, List, Tuple

logger = logging.getLogger(__name__)

# (deleter, label) for each live object id
_Entry = Tuple[Callable[[int], None], str]


class GLResourceManager:
    """
    Owns the GL objects the renderer creates (status text textures) and
    deletes them on release or at shutdown.
    """

    def __init__(self) -> None:
        self._live: Dict[int, _Entry] = {}

    def gen(
        self,
        creator: Callable[[], int],
        deleter: Callable[[int], None],
        label: str = "object",
    ) -> int:
        """Create one GL object id and remember how to delete it."""
        obj_id = int(creator())
        self._live[obj_id] = (deleter, label)
        return obj_id

    def release(self, obj_id: int) -> None:
        """Delete a single tracked object; unknown ids are ignored."""
        entry = self._live.pop(obj_id, None)
        if entry is not None:
            entry[0](obj_id)

    def live_ids(self) -> List[int]:
        return list(self._live)

    @contextlib.contextmanager
    def bind(self, binder: Callable[[int], None], obj_id: int) -> Iterator[None]:
        """Context-manager for glBind*, auto-unbinds to 0."""
        binder(obj_id)
        try:
            yield
        finally:
            binder(0)

    def shutdown(self) -> None:
        """Delete every tracked object; needs a current GL context."""
        for obj_id, (deleter, label) in list(self._live.items()):
            logger.debug("Deleting GL %s %d", label, obj_id)
            deleter(obj_id)
        self._live.clear()
