"""
Fact sources — where the raw brand and retailer strings come from.

In production a browser scraper supplies them; the engine only needs the
FactSource shape. An element that cannot be located is reported as None
(never raised), and None is treated exactly like an empty string.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Mapping, Optional, Protocol

from .exceptions import FactSourceError
from .models import FactKind

logger = logging.getLogger(__name__)


class FactSource(Protocol):
    """Supplies the raw text of one fact kind, or None when not found."""

    label: str

    def fetch(self, kind: FactKind) -> Optional[str]: ...


class StaticFactSource:
    """In-memory source backed by a mapping of fact kind → raw text."""

    def __init__(self, facts: Mapping[FactKind | str, Optional[str]], label: str = "static"):
        self.label = label
        self._facts: dict[FactKind, Optional[str]] = {}
        for key, value in facts.items():
            try:
                kind = FactKind(key)
            except ValueError:
                raise FactSourceError(
                    f"Unknown fact kind '{key}' in {label} facts.",
                    details={"source": label, "fact_kind": str(key)},
                ) from None
            if value is not None and not isinstance(value, str):
                raise FactSourceError(
                    f"Fact '{kind.value}' in {label} facts must be text or null.",
                    details={"source": label, "fact_kind": kind.value},
                )
            self._facts[kind] = value

    def fetch(self, kind: FactKind) -> Optional[str]:
        value = self._facts.get(kind)
        if value is None:
            logger.debug("%s: %s not found", self.label, kind.value)
        return value


# ─── Facts File ──────────────────────────────────────────────────────


def load_store_facts(path: str | Path) -> tuple[str, StaticFactSource, StaticFactSource]:
    """Load one store's brand and retailer facts from a JSON file.

    Expected shape:
        {
          "store_id": "paris-vendome",
          "brand":    {"address": "...", "phone": "...", "opening_hours": "..."},
          "retailer": {"address": "...", "phone": "...", "opening_hours": "..."}
        }

    Raises:
        FactSourceError: unreadable file, invalid JSON, or wrong shape.
    """
    resolved = Path(path)
    try:
        with resolved.open(encoding="utf-8") as f:
            data: Any = json.load(f)
    except OSError as e:
        raise FactSourceError(
            f"Cannot read facts file '{resolved}': {e}", details={"path": str(resolved)}
        ) from e
    except json.JSONDecodeError as e:
        raise FactSourceError(
            f"Facts file '{resolved}' is not valid JSON: {e.msg} (line {e.lineno})",
            details={"path": str(resolved)},
        ) from e

    if not isinstance(data, dict):
        raise FactSourceError("Facts file must contain a JSON object.", details={"path": str(resolved)})

    sides: dict[str, StaticFactSource] = {}
    for side in ("brand", "retailer"):
        facts = data.get(side)
        if not isinstance(facts, dict):
            raise FactSourceError(
                f"Facts file is missing the '{side}' object.",
                details={"path": str(resolved), "side": side},
            )
        sides[side] = StaticFactSource(facts, label=side)

    store_id = str(data.get("store_id") or resolved.stem)
    logger.info("Loaded facts for store '%s' from %s", store_id, resolved)
    return store_id, sides["brand"], sides["retailer"]
