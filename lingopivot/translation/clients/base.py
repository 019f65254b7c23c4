"""Interface shared by model translation backends."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class TranslationBackend(Protocol):
    """
    A model-backed translator.

    Language codes are script-qualified NLLB codes such as ``hin_Deva`` or
    ``eng_Latn``. Implementations are synchronous; the model pipeline runs
    them in a worker thread.
    """

    name: str

    def load(self) -> None:
        """Warm up the backend (open clients, fetch metadata)."""
        ...

    def translate(self, text: str, source_code: str, target_code: str) -> str:
        ...
