# src/hmcon_shell/core/managers/completion_manager.py
import logging
from typing import Iterable, List

from prompt_toolkit.completion import Completion
from prompt_toolkit.document import Document

from hmcon_shell.core.command_registry import CommandContext
from hmcon_shell.core.context.session_context import SessionContext

logger = logging.getLogger(__name__)

INPUT_KEYWORDS = ["batch", "exit", "quit"]
EXPORT_KEYWORDS = ["export", "abort", "format", "mod", "modify", "define", "definep"]
BATCH_KEYWORDS = ["join", "equalizeheightmaps"]


class CompletionManager:
    """
    Generates completion suggestions for the phase the session is in.
    """

    def __init__(self, ctx: SessionContext):
        self.ctx = ctx

    def generate_completions(self, document: Document) -> Iterable[Completion]:
        text_before_cursor = document.text_before_cursor
        word_before_cursor = document.get_word_before_cursor(WORD=True)

        if "${" in word_before_cursor or document.char_before_cursor == "{":
            yield from self._get_variable_completions(word_before_cursor)
            return

        words = text_before_cursor.lstrip().split()
        completing_first = not words or (len(words) == 1 and not text_before_cursor.endswith(" "))
        if completing_first:
            yield from self._complete(self.command_names(), word_before_cursor, "Command")
            return

        if self.ctx.job is None:
            return
        head = words[0].lower()
        completing_second = (
            (len(words) == 1 and text_before_cursor.endswith(" ")) or
            (len(words) == 2 and not text_before_cursor.endswith(" "))
        )
        if head in ("mod", "modify") and completing_second:
            names = [m.name for m in self.ctx.registry.modifiers()]
            yield from self._complete(names, word_before_cursor, "Modifier")
        elif head == "format":
            keys = [f.command_key for f in self.ctx.export_manager.get_supported_formats()]
            yield from self._complete(keys, word_before_cursor, "Format")

    def command_names(self) -> List[str]:
        """Every name the dispatch loop accepts right now."""
        if self.ctx.job is None:
            names = list(INPUT_KEYWORDS)
            names += [c.name for c in self.ctx.registry.commands(CommandContext.BEFORE_IMPORT)]
        else:
            names = list(EXPORT_KEYWORDS)
            names += [c.name for c in self.ctx.registry.commands(CommandContext.AFTER_IMPORT)]
            if self.ctx.job.batch_mode:
                names += BATCH_KEYWORDS
        return sorted(set(names))

    def _get_variable_completions(self, word_before_cursor: str) -> Iterable[Completion]:
        if self.ctx.job is None:
            return
        prefix = word_before_cursor[word_before_cursor.rfind("${"):] if "${" in word_before_cursor else ""
        for name in self.ctx.job.variables.names():
            suggestion = f"${{{name}}}"
            if suggestion.startswith(prefix):
                yield Completion(suggestion, start_position=-len(prefix), display_meta="Variable")

    @staticmethod
    def _complete(candidates: Iterable[str], word: str, meta: str) -> Iterable[Completion]:
        lowered = word.lower()
        for candidate in sorted(candidates):
            if candidate.startswith(lowered):
                yield Completion(candidate, start_position=-len(word), display_meta=meta)
