"""Meet-in-the-middle dictionary attack on a pair of related symbol hashes.

The unknown middle part of symbol 1 is assumed to be a concatenation of up to
four dictionary words. Candidates that produce the first goal hash are then
checked against the second goal hash. The second symbol is either the
demangled form of the first or a custom prefix/suffix around the same middle.
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path

from .demangler import demangle
from .hashing import DEFAULT_SEED, hash_string, inverse_hash

NO_COLLISIONS = "No collisions found."

ProgressCallback = Callable[[int], None]


def load_word_list(path: str | PathLike[str]) -> list[str]:
    """Read one word per line from ``path``; the empty word is appended last."""
    words = Path(path).read_text(encoding="utf-8").splitlines()
    words.append("")
    return words


def _notify(progress: ProgressCallback | None, value: float) -> None:
    """Pass ``value`` as a whole percentage to ``progress`` when one is given."""
    if progress is not None:
        progress(int(value))


@dataclass
class DictionaryAttack:
    """Parameters of one dictionary attack."""

    word_list: list[str]
    goal_h1: int
    goal_h2: int
    prefix1: str = ""
    suffix1: str = ""
    prefix2: str = ""
    suffix2: str = ""
    use_demangler: bool = True
    _memo: dict[int, list[tuple[str, str]]] = field(
        default_factory=dict, init=False, repr=False, compare=False
    )

    def _first_half(
        self, progress: ProgressCallback | None
    ) -> dict[int, list[tuple[str, str]]]:
        start = hash_string(self.prefix1, DEFAULT_SEED)
        count = len(self.word_list)
        memo: dict[int, list[tuple[str, str]]] = defaultdict(list)
        for index, first in enumerate(self.word_list):
            middle = hash_string(first, start)
            for second in self.word_list:
                memo[hash_string(second, middle)].append((first, second))
            _notify(progress, 50.0 * index / count)
        return memo

    def _second_half(
        self,
        memo: dict[int, list[tuple[str, str]]],
        progress: ProgressCallback | None,
    ) -> list[str]:
        end = inverse_hash(self.goal_h1, self.suffix1)
        count = len(self.word_list)
        before_last = [(fourth, inverse_hash(end, fourth)) for fourth in self.word_list]
        found: list[str] = []
        for index, third in enumerate(self.word_list):
            for fourth, state in before_last:
                pairs = memo.get(inverse_hash(state, third))
                if pairs is None:
                    continue
                found.extend(first + second + third + fourth for first, second in pairs)
            _notify(progress, 50.0 + 50.0 * index / count)
        return found

    def _other_symbol(self, middle: str) -> str:
        if self.use_demangler:
            return demangle(self.prefix1 + middle + self.suffix1)
        return self.prefix2 + middle + self.suffix2

    def run(self, progress: ProgressCallback | None = None) -> list[str]:
        """Search for full names of symbol 1 that match both goal hashes.

        ``progress`` is called with a percentage as the search advances.
        Results are returned without duplicates, in the order they were found.
        """
        _notify(progress, 0)
        memo = self._first_half(progress)
        candidates = self._second_half(memo, progress)
        matches = (
            self.prefix1 + middle + self.suffix1
            for middle in candidates
            if hash_string(self._other_symbol(middle), DEFAULT_SEED) == self.goal_h2
        )
        return list(dict.fromkeys(matches))


def format_results(results: Iterable[str]) -> str:
    """Render results one per line, or a notice when there are none."""
    text = "".join(entry + "\n" for entry in results)
    return text or NO_COLLISIONS