"""
Registry Module - In-process store of admin editors, one per browser session
"""

import threading
import uuid
from collections import OrderedDict


class EditorRegistry:
    """Maps editor ids (kept in the Flask session) to live AdminView objects"""

    def __init__(self, max_editors=256):
        self.max_editors = max_editors
        self._lock = threading.Lock()
        self._editors = OrderedDict()

    def add(self, editor, replaces=None):
        """
        Register a freshly mounted editor

        Args:
            editor: The new AdminView
            replaces (str, optional): Id of the editor it supersedes; that
                editor is unmounted so late results are dropped

        Returns:
            str: The new editor id
        """
        editor_id = uuid.uuid4().hex
        with self._lock:
            if replaces:
                old = self._editors.pop(replaces, None)
                if old is not None:
                    old.unmount()
            self._editors[editor_id] = editor
            while len(self._editors) > self.max_editors:
                _, evicted = self._editors.popitem(last=False)
                evicted.unmount()
        return editor_id

    def get(self, editor_id):
        """Look up an editor; a hit marks it most recently used"""
        if not editor_id:
            return None
        with self._lock:
            editor = self._editors.get(editor_id)
            if editor is not None:
                self._editors.move_to_end(editor_id)
            return editor

    def clear(self):
        with self._lock:
            for editor in self._editors.values():
                editor.unmount()
            self._editors.clear()

    def __len__(self):
        with self._lock:
            return len(self._editors)
