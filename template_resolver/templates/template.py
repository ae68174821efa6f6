from __future__ import annotations
from pathlib import Path
from typing import Any, ClassVar, Mapping, Optional

from ..registry import resolve


class Template:
    """Base for typed templates, e.g.::

        @dataclass
        class Greeting(Template):
            parent = "greetings"
            name = "hello"
            user: str

        Greeting(user="ann").render()  # "hello ann" for 'hello = "hello {user}"'
    """

    parent: ClassVar[str]
    name: ClassVar[str]

    def variant(self) -> str:
        return self.name

    def fields(self) -> Mapping[str, Any]:
        return vars(self)

    def apply(self, text: str) -> Optional[str]:
        try:
            return text.format_map(self.fields())
        except (KeyError, IndexError, ValueError, AttributeError, TypeError):
            # missing placeholder, bad field access or malformed format string
            return None

    def render(self, path: Path | str | None = None) -> Optional[str]:
        text = resolve(self.parent, self.variant(), path)
        if text is None:
            return None
        return self.apply(text)
