"""Loads optional JSON data files on top of the built-in tables."""

import asyncio
import json
import logging
from pathlib import Path
from typing import Any, Callable, Dict, Optional

from ..config import Config
from ..exceptions import DataLoadError
from ..languages.registry import LanguageRegistry
from ..models.idiom_entry import IdiomCategory, IdiomEntry, Register
from ..models.language_profile import AdjectivePosition, LanguageProfile, WordOrder
from .idioms import IdiomDictionary
from .phrases import PhraseDictionary

logger = logging.getLogger(__name__)


def _read_json(path: Path) -> Any:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        raise DataLoadError(str(path), "file not found")
    except (OSError, UnicodeDecodeError) as e:
        raise DataLoadError(str(path), str(e))
    except json.JSONDecodeError as e:
        raise DataLoadError(str(path), f"invalid JSON: {e}")


def _profile_from_row(row: Dict[str, Any]) -> LanguageProfile:
    name = row["name"].strip().lower()
    return LanguageProfile(
        name=name,
        code=row.get("code", name),
        native_name=row.get("native_name", name),
        script=row.get("script", "Latin"),
        rtl=bool(row.get("rtl", False)),
        word_order=WordOrder(row.get("word_order", "SVO").upper()),
        has_gender=bool(row.get("has_gender", False)),
        has_articles=bool(row.get("has_articles", False)),
        adjective_position=AdjectivePosition(row.get("adjective_position", "before")),
        uses_postpositions=bool(row.get("uses_postpositions", False)),
        subject_dropping=bool(row.get("subject_dropping", False)),
        has_cases=bool(row.get("has_cases", False)),
        has_honorifics=bool(row.get("has_honorifics", False)),
        sentence_end_particle=row.get("sentence_end_particle"),
    )


def _idiom_from_row(row: Dict[str, Any]) -> IdiomEntry:
    return IdiomEntry(
        phrase=row["phrase"],
        meaning=row.get("meaning", ""),
        translations={k.lower(): v for k, v in (row.get("translations") or {}).items() if v},
        category=IdiomCategory(row.get("category", "idiom")),
        register=Register(row.get("register", "neutral")),
    )


class DataLoader:
    """
    Merges external grammar, idiom and phrase files into the live tables.

    Every loader is idempotent: the first call starts the load and any
    concurrent or later call awaits the same task. A missing or invalid
    file is logged and skipped; the built-in tables stay in effect.
    """

    def __init__(
        self,
        config: Config,
        registry: LanguageRegistry,
        idioms: IdiomDictionary,
        phrases: PhraseDictionary,
    ):
        self.config = config
        self.registry = registry
        self.idioms = idioms
        self.phrases = phrases
        self._tasks: Dict[str, asyncio.Task] = {}

    async def load_grammar_rules(self) -> int:
        return await self._once("grammar", self.config.grammar_path, self._apply_grammar)

    async def load_idioms(self) -> int:
        return await self._once("idioms", self.config.idioms_path, self._apply_idioms)

    async def load_phrases(self) -> int:
        return await self._once("phrases", self.config.phrases_path, self._apply_phrases)

    async def load_all(self) -> Dict[str, int]:
        """Load every configured file concurrently; returns entries loaded per table."""
        grammar, idioms, phrases = await asyncio.gather(
            self.load_grammar_rules(), self.load_idioms(), self.load_phrases()
        )
        return {"grammar": grammar, "idioms": idioms, "phrases": phrases}

    def status(self) -> Dict[str, bool]:
        return {
            name: name in self._tasks and self._tasks[name].done()
            for name in ("grammar", "idioms", "phrases")
        }

    async def _once(
        self,
        name: str,
        path: Optional[str],
        apply: Callable[[Any], int],
    ) -> int:
        task = self._tasks.get(name)
        if task is None:
            task = asyncio.ensure_future(self._load(name, path, apply))
            self._tasks[name] = task
        return await asyncio.shield(task)

    async def _load(self, name: str, path: Optional[str], apply: Callable[[Any], int]) -> int:
        if path is None:
            logger.debug("No %s file configured", name)
            return 0
        try:
            data = await asyncio.to_thread(_read_json, Path(path))
            count = apply(data)
        except DataLoadError as e:
            logger.warning("Skipping %s data: %s", name, e)
            return 0
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            logger.warning("Skipping %s data from %s: malformed entry (%s)", name, path, e)
            return 0
        logger.info("Loaded %d %s entries from %s", count, name, path)
        return count

    def _apply_grammar(self, data: Any) -> int:
        rows = data if isinstance(data, list) else data["languages"]
        profiles = [_profile_from_row(row) for row in rows]
        for profile in profiles:
            self.registry.register(profile)
        return len(profiles)

    def _apply_idioms(self, data: Any) -> int:
        rows = data if isinstance(data, list) else data["idioms"]
        entries = [_idiom_from_row(row) for row in rows]
        for entry in entries:
            self.idioms.add(entry)
        return len(entries)

    def _apply_phrases(self, data: Any) -> int:
        if not isinstance(data, dict):
            raise TypeError("phrase file must be an object of english -> translations")
        for english, translations in data.items():
            self.phrases.add(english, translations)
        return len(data)
