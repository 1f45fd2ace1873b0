"""
Data loader: fields populated asynchronously after a delay.

Two independent payloads arrive through keyed setters. The loader owns the
pending tasks and cancels them on close(), so a torn-down view never
receives a late update.
"""

import asyncio
import json
from typing import Any, Dict, List, Optional

from ..core import ObjectState
from ..logging_config import get_logger

GLOSSARY: Dict[str, Any] = {
    "glossary": {
        "title": "example glossary",
        "GlossDiv": {
            "title": "S",
            "GlossList": {
                "GlossEntry": {
                    "ID": "SGML",
                    "SortAs": "SGML",
                    "GlossTerm": "Standard Generalized Markup Language",
                    "Acronym": "SGML",
                    "Abbrev": "ISO 8879:1986",
                    "GlossDef": {
                        "para": "A meta-markup language, used to create markup languages such as DocBook.",
                        "GlossSeeAlso": ["GML", "XML"],
                    },
                    "GlossSee": "markup",
                }
            },
        },
    }
}

ANOTHER_JSON = "5000"


class DataLoader:
    """
    Populates json after json_delay seconds and anotherJson after
    another_delay seconds.

    Usage:
        loader = DataLoader()
        loader.start()          # inside a running event loop
        await loader.wait()
        loader.lines()
    """

    def __init__(self, json_delay: float = 1.0, another_delay: float = 3.0) -> None:
        self.state = ObjectState({"json": None, "anotherJson": None}, name="data-loader")
        self.json_delay = json_delay
        self.another_delay = another_delay
        self._tasks: List[asyncio.Task] = []
        self._log = get_logger(__name__, form_id="data-loader")

    def start(self) -> None:
        """Schedule both populations on the running loop."""
        if self._tasks:
            return
        self._tasks = [
            asyncio.create_task(self._populate("json", GLOSSARY, self.json_delay)),
            asyncio.create_task(self._populate("anotherJson", ANOTHER_JSON, self.another_delay)),
        ]

    async def _populate(self, key: str, payload: Any, delay: float) -> None:
        set_value = self.state.update(key)
        await asyncio.sleep(delay)
        set_value(payload)
        self._log.info("Loaded %s", key)

    async def wait(self) -> None:
        """Wait for all pending populations; cancelled ones are ignored."""
        results = await asyncio.gather(*self._tasks, return_exceptions=True)
        for result in results:
            if isinstance(result, Exception):
                raise result

    def close(self) -> None:
        """Cancel populations that have not fired yet."""
        for task in self._tasks:
            if not task.done():
                task.cancel()
                self._log.debug("Cancelled pending load")

    @property
    def loaded(self) -> bool:
        return all(v is not None for v in self.state.values.values())

    def lines(self, values: Optional[Dict[str, Any]] = None) -> List[str]:
        """Render each field as JSON, or a loading placeholder while empty."""
        values = values if values is not None else self.state.values
        return [
            json.dumps(value) if value else f"Loading {key}"
            for key, value in values.items()
        ]
