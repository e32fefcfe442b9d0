# pumlhelper/models/attachable.py
from __future__ import annotations
from typing import List

_NOTE_END = ("end note", "endnote")


class Attachable:
    """Raw trailing lines (notes, comments, ...) bound to a statement.

    Expects the concrete class to provide an `attached` list.
    """
    attached: List[str]

    def attach(self, line: str) -> None:
        self.attached.append(line)

    def _note_end(self) -> int:
        # index after the last line that belongs to a note
        end = 0
        in_note = False
        for idx, text in enumerate(self.attached):
            s = text.strip()
            if in_note:
                if s.lower() in _NOTE_END:
                    in_note = False
                    end = idx + 1
            elif s.startswith("note "):
                end = idx + 1
                in_note = ":" not in s
        return len(self.attached) if in_note else end

    def is_note_attached(self) -> bool:
        return bool(self.attached) and self._note_end() == len(self.attached)

    def move_attached(self) -> List[str]:
        """Detaches and returns the trailing lines that are not part of a note.

        Notes belong to the statement they follow, anything after them does not.
        """
        end = self._note_end()
        moved = self.attached[end:]
        del self.attached[end:]
        return moved

    def attached_to_string(self) -> str:
        return "".join("\n" + s for s in self.attached)
