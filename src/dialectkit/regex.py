"""
Translation of reference regular expressions into engine-specific predicates.

Reference patterns are written in the portable syntax used by the query
engine: an optional leading inline flag group such as ``(?i)`` and optional
``\\Q...\\E`` literal spans. Targets either accept flags as a separate argument
(``REGEXP_LIKE``) or as an embedded option prefix (PostgreSQL ARE).
"""

from __future__ import annotations

import io
import re
from dataclasses import dataclass, field
from typing import Callable, Final

from .errors import InvalidPatternError
from .quoting import StringQuoter

LiteralEscaper = Callable[[str], str]

_POSIX_METACHARACTERS: Final[frozenset[str]] = frozenset("\\.^$|?*+()[]{}")


def escape_posix_literal(text: str) -> str:
    """
    Escape ``text`` so a POSIX extended regex matches it literally.

    Backslashes stay literal backslashes by being doubled.
    """

    return "".join(f"\\{ch}" if ch in _POSIX_METACHARACTERS else ch for ch in text)


@dataclass(frozen=True)
class TranslatedRegex:
    """
    A reference pattern with its flag group stripped and literal spans rewritten.

    ``flags`` holds the reference flag letters in the order they appeared.
    """

    pattern: str
    flags: str = ""


class RegexTranslator:
    """
    Rewrite reference patterns for a target engine.

    Matchers are compiled once at class creation and shared by every instance.
    """

    SUPPORTED_FLAGS: Final[frozenset[str]] = frozenset("icm")
    FLAGS_PATTERN: Final[re.Pattern[str]] = re.compile(r"^\(\?([a-zA-Z]+)\)")
    # an even run of backslashes before \Q is a series of escaped backslashes
    ESCAPE_PATTERN: Final[re.Pattern[str]] = re.compile(
        r"(?<!\\)((?:\\\\)*)\\Q(.*?)(?:\\E|\Z)", re.DOTALL
    )
    _PYTHON_FLAGS: Final[dict[str, re.RegexFlag]] = {
        "i": re.IGNORECASE,
        "m": re.MULTILINE,
    }

    def translate(self, pattern: str, literal_escaper: LiteralEscaper = escape_posix_literal) -> TranslatedRegex:
        flags, body = self.split_flags(pattern)
        self._validate(pattern, flags, body)
        rewritten = self.ESCAPE_PATTERN.sub(
            lambda match: match.group(1) + literal_escaper(match.group(2)), body
        )
        return TranslatedRegex(pattern=rewritten, flags=flags)

    def split_flags(self, pattern: str) -> tuple[str, str]:
        """
        Separate a leading ``(?X)`` group from the rest of the pattern.

        Returns ``("", pattern)`` when there is no such group.
        """

        match = self.FLAGS_PATTERN.match(pattern)
        if match is None:
            return "", pattern
        letters = match.group(1)
        unsupported = sorted(set(letters) - self.SUPPORTED_FLAGS)
        if unsupported:
            raise InvalidPatternError(pattern, f"unsupported inline flags {''.join(unsupported)!r}")
        flags = "".join(dict.fromkeys(letters))
        return flags, pattern[match.end():]

    def _validate(self, pattern: str, flags: str, body: str) -> None:
        compiled_flags = 0
        for letter in flags:
            compiled_flags |= self._PYTHON_FLAGS.get(letter, 0)
        probe = self.ESCAPE_PATTERN.sub(
            lambda match: match.group(1) + re.escape(match.group(2)), body
        )
        try:
            re.compile(probe, compiled_flags)
        except (re.error, OverflowError, RecursionError) as exc:
            raise InvalidPatternError(pattern, str(exc)) from exc


_TRANSLATOR: Final[RegexTranslator] = RegexTranslator()


@dataclass(frozen=True)
class RegexFlavor:
    """
    How one engine family spells a regular-expression predicate.

    ``flag_map`` lists ``(reference letter, target letter)`` pairs in the
    target's canonical order; reference flags without a pair are dropped.
    """

    name: str
    flag_map: tuple[tuple[str, str], ...]
    render: Callable[[str, str, str, StringQuoter], str]
    literal_escaper: LiteralEscaper = field(default=escape_posix_literal)

    def flag_suffix(self, flags: str) -> str:
        return "".join(target for reference, target in self.flag_map if reference in flags)

    def generate(self, source: str, pattern: str, string_quoter: StringQuoter) -> str:
        """
        Build the predicate for ``source`` matching ``pattern``.

        Raises :class:`InvalidPatternError` when the pattern cannot be translated.
        """

        translated = _TRANSLATOR.translate(pattern, self.literal_escaper)
        return self.render(source, translated.pattern, self.flag_suffix(translated.flags), string_quoter)


def _render_regexp_like(source: str, pattern: str, flags: str, string_quoter: StringQuoter) -> str:
    buf = io.StringIO()
    buf.write("REGEXP_LIKE(")
    buf.write(source)
    buf.write(", ")
    string_quoter(buf, pattern)
    buf.write(", ")
    string_quoter(buf, flags)
    buf.write(")")
    return buf.getvalue()


def _render_embedded_options(source: str, pattern: str, flags: str, string_quoter: StringQuoter) -> str:
    buf = io.StringIO()
    buf.write(source)
    buf.write(" ~ ")
    string_quoter(buf, f"(?{flags}){pattern}" if flags else pattern)
    return buf.getvalue()


REGEXP_LIKE: Final[RegexFlavor] = RegexFlavor(
    name="regexp_like",
    flag_map=(("i", "i"), ("c", "c"), ("m", "m")),
    render=_render_regexp_like,
)

# PostgreSQL ARE options: "n" is newline-sensitive matching, the multiline mode.
POSTGRES_ARE: Final[RegexFlavor] = RegexFlavor(
    name="postgres_are",
    flag_map=(("i", "i"), ("c", "c"), ("m", "n")),
    render=_render_embedded_options,
)


def translate_regex(pattern: str) -> TranslatedRegex:
    """Translate ``pattern`` with the shared translator and POSIX literal escaping."""
    return _TRANSLATOR.translate(pattern)
