"""Independent idea matchers.

Each matcher reads the raw text and returns either None (no evidence) or one
contribution for a single Target.  Matchers never look at the current draft
and never raise for any string input; merging is the extractor's job.

MATCHERS is ordered by priority: when two matchers feed the same target, the
first one that finds evidence wins (explicit "palette: ..." beats palette
keywords, and so on).  Within a matcher, ambiguous cues resolve to the first
match scanning left to right.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import Any, Callable, List, Optional, Sequence, Tuple, TypeVar, Union

from prompt_builder.drafting.lexicon import (
    ARTIFACT_TERMS,
    ASPECT_RATIO_TERMS,
    CAMERA_BODY_TERMS,
    FRAMING_CUES,
    GRADE_TERMS,
    LENS_FAMILY_TERMS,
    LIGHTING_TERMS,
    MOVEMENT_TERMS,
    MUSIC_GENRES,
    MUSIC_NOUNS,
    NON_NAME_WORDS,
    PALETTE_TERMS,
    PLACE_NOUNS,
    ROLE_TERMS,
    RUNTIME_WORDS,
    SOUND_TERMS,
    TIME_OF_DAY_TERMS,
    TONE_TERMS,
    WARDROBE_TERMS,
    FramingCue,
    Term,
)

Number = Union[int, float]
T = TypeVar("T")


class Target(str, Enum):
    TITLE = "title"
    SUMMARY = "summary"
    DURATION = "durationSeconds"
    ASPECT_RATIO = "aspectRatio"
    FPS = "fps"
    TONE = "style.tone"
    COLOR_PALETTE = "style.colorPalette"
    INSPIRATIONS = "style.inspirations"
    CAMERA_BODY = "cinematography.cameraBody"
    LENSES = "cinematography.lenses"
    MOVEMENT = "cinematography.movement"
    LIGHTING = "cinematography.lighting"
    COLOR_GRADE = "cinematography.colorGrade"
    MUSIC = "audio.music"
    SOUND_DESIGN = "audio.soundDesign"
    VOICEOVER = "audio.voiceover"
    SEED = "consistency.seed"
    CHARACTERS = "characters"
    LOCATIONS = "locations"
    SHOTS = "shots"
    AVOID = "constraints.avoid"
    NEGATIVE_PROMPTS = "negativePrompts"


@dataclass(frozen=True)
class CharacterCue:
    name: str
    role: str
    appearance: Tuple[str, ...]
    wardrobe: Tuple[str, ...]


@dataclass(frozen=True)
class LocationCue:
    name: str
    description: str
    time_of_day: str


@dataclass(frozen=True)
class ShotCue:
    type: str
    movement: str
    action: str
    notes: str
    duration: Optional[Number]


@dataclass(frozen=True)
class Matcher:
    name: str
    target: Target
    match: Callable[[str], Any]


# ── Text helpers ──────────────────────────────────────────────────────────────

# A "." followed by a digit is a decimal point (2.39:1, 2.5s), not a full stop.
_SENTENCE_RE = re.compile(r"[;!?\n]+|\.(?!\d)")
_CLAUSE_RE = re.compile(r",|\bthen\b", re.IGNORECASE)
_CLAUSE_END = r"(?=[,;\n]|\.(?!\d)|$)"
_SENTENCE_END = r"(?=[;\n]|\.(?!\d)|$)"
_WS_RE = re.compile(r"\s+")

_DURATION_RE = re.compile(
    r"\b(\d{1,3}(?:\.\d+)?)\s*-?\s*(s|secs?|seconds?|min|mins|minutes?)\b", re.IGNORECASE
)
_DECADE_RE = re.compile(r"[1-9]0s", re.IGNORECASE)
_DECADE_LEAD_RE = re.compile(r"(?:['’]|\b(?:the|early|mid|late)[\s-]*)$", re.IGNORECASE)
_NEXT_WORD_RE = re.compile(r"[\s-]*([a-z]+)", re.IGNORECASE)
_FOCAL_RE = re.compile(r"\b((?:\d{1,3}\s*/\s*)*\d{1,3})\s*mm\b(?!\s+film)", re.IGNORECASE)
_ARTIFACT_RE = re.compile(r"\b(?:" + ARTIFACT_TERMS + r")\b", re.IGNORECASE)
_WARDROBE_RE = re.compile(r"\b(?:" + WARDROBE_TERMS + r")\b", re.IGNORECASE)
_LEADING_ARTICLE_RE = re.compile(r"^(?:a|an|the|any|some)\s+", re.IGNORECASE)


def _tidy(value: str) -> str:
    return _WS_RE.sub(" ", value).strip(" \t\"'“”")


def _sentences(text: str) -> List[str]:
    return [s for s in _SENTENCE_RE.split(text) if s.strip()]


def _clauses(sentence: str) -> List[str]:
    return [c for c in _CLAUSE_RE.split(sentence) if c.strip()]


def _number(raw: str) -> Number:
    value = float(raw)
    return int(value) if value.is_integer() else value


def _dedupe(values: Sequence[str]) -> List[str]:
    seen = set()
    out = []
    for v in values:
        key = v.lower()
        if v and key not in seen:
            seen.add(key)
            out.append(v)
    return out


@lru_cache(maxsize=None)
def _compile(pattern: str) -> "re.Pattern[str]":
    return re.compile(r"\b(?:" + pattern + r")\b", re.IGNORECASE)


def _scan(text: str, table: Sequence[Tuple[str, T]]) -> List[Tuple[int, str, T]]:
    """Return non-overlapping (start, matched text, payload) hits in text order.

    At equal start positions the longer match wins, so "neo-noir" shadows the
    "noir" inside it.
    """
    hits = []
    for pattern, payload in table:
        for m in _compile(pattern).finditer(text):
            hits.append((m.start(), m.end(), m.group(0), payload))
    hits.sort(key=lambda h: (h[0], -(h[1] - h[0])))
    out: List[Tuple[int, str, T]] = []
    last_end = -1
    for start, end, matched, payload in hits:
        if start >= last_end:
            out.append((start, matched, payload))
            last_end = end
    return out


def _term_values(text: str, table: Sequence[Term]) -> List[str]:
    return _dedupe([canonical or _tidy(matched) for _, matched, canonical in _scan(text, table)])


def _joined_terms(text: str, table: Sequence[Term]) -> Optional[str]:
    values = _term_values(text, table)
    return ", ".join(values) if values else None


def _first_term(text: str, table: Sequence[Term]) -> Optional[str]:
    values = _term_values(text, table)
    return values[0] if values else None


def _focal_lengths(text: str) -> List[str]:
    out = []
    for m in _FOCAL_RE.finditer(text):
        out.extend(f"{part.strip()}mm" for part in m.group(1).split("/"))
    return _dedupe(out)


def _split_items(raw: str) -> List[str]:
    parts = re.split(r",|\band\b|\bor\b", raw)
    return [_LEADING_ARTICLE_RE.sub("", _tidy(p)) for p in parts if _tidy(p)]


def _framing_cues(clause: str) -> List[FramingCue]:
    return [cue for _, _, cue in _scan(clause, [(c.pattern, c) for c in FRAMING_CUES])]


# ── Overview ──────────────────────────────────────────────────────────────────

_TITLE_QUOTED_RE = re.compile(r"\b(?:titled|called|title\s*:)\s*[\"“']([^\"”']+)[\"”']", re.IGNORECASE)
_TITLE_PLAIN_RE = re.compile(r"\btitle\s*:\s*([^,;\n]+?)" + _CLAUSE_END, re.IGNORECASE)


def match_title(text: str) -> Optional[str]:
    m = _TITLE_QUOTED_RE.search(text) or _TITLE_PLAIN_RE.search(text)
    return _tidy(m.group(1)) or None if m else None


def match_summary(text: str) -> Optional[str]:
    sentences = _sentences(text)
    return _tidy(sentences[0]) or None if sentences else None


def match_duration(text: str) -> Optional[Number]:
    """First explicit running time ("30s", "45 seconds", "2 min").

    Clauses that carry a framing cue are skipped: "close-up 2s" times a shot,
    not the whole piece.  Decades ("80s synthwave", "the 90s", "'70s") are
    not running times.
    """
    for sentence in _sentences(text):
        for clause in _clauses(sentence):
            if _framing_cues(clause):
                continue
            for m in _DURATION_RE.finditer(clause):
                if _is_decade(clause, m):
                    continue
                value = _number(m.group(1))
                return _number(str(value * 60)) if m.group(2).lower().startswith("min") else value
    return None


def _is_decade(clause: str, m: re.Match) -> bool:
    """A bare "80s" is a decade when introduced as one or followed by a non-runtime word."""
    if not _DECADE_RE.fullmatch(m.group(0)):
        return False
    if _DECADE_LEAD_RE.search(clause, 0, m.start()):
        return True
    following = _NEXT_WORD_RE.match(clause, m.end())
    return following is not None and following.group(1).lower() not in RUNTIME_WORDS


_ASPECT_RE = re.compile(r"(?<![\d.:])(\d{1,2}(?:\.\d{1,2})?)\s*:\s*(\d{1,2}(?:\.\d{1,2})?)(?![\w.:])")


def match_aspect_ratio(text: str) -> Optional[str]:
    candidates = [
        (m.start(), f"{m.group(1)}:{m.group(2)}")
        for m in _ASPECT_RE.finditer(text)
        if float(m.group(1)) > 0 and float(m.group(2)) > 0
    ]
    candidates.extend((start, canonical) for start, _, canonical in _scan(text, ASPECT_RATIO_TERMS))
    return min(candidates)[1] if candidates else None


_FPS_RE = re.compile(r"\b(\d{2,3}(?:\.\d{1,3})?)\s*(?:fps|frames?\s+per\s+second)\b", re.IGNORECASE)


def match_fps(text: str) -> Optional[Number]:
    m = _FPS_RE.search(text)
    return _number(m.group(1)) if m else None


_SEED_RE = re.compile(r"\bseed\s*(?:[:=#]\s*([\w-]+)|(\d[\w-]*))", re.IGNORECASE)


def match_seed(text: str) -> Optional[str]:
    m = _SEED_RE.search(text)
    return (m.group(1) or m.group(2)) if m else None


# ── Style & cinematography ────────────────────────────────────────────────────


def match_tone(text: str) -> Optional[str]:
    return _joined_terms(text, TONE_TERMS)


_PALETTE_EXPLICIT_RE = re.compile(
    r"\b(?:colou?r\s+)?palette\s*(?::|of)\s*([^,;\n]+?)" + _CLAUSE_END, re.IGNORECASE
)


def match_explicit_palette(text: str) -> Optional[str]:
    m = _PALETTE_EXPLICIT_RE.search(text)
    return _tidy(m.group(1)) or None if m else None


def match_palette_terms(text: str) -> Optional[str]:
    return _joined_terms(text, PALETTE_TERMS)


def match_camera_body(text: str) -> Optional[str]:
    return _first_term(text, CAMERA_BODY_TERMS)


def match_lenses(text: str) -> Optional[str]:
    values = _term_values(text, LENS_FAMILY_TERMS) + _focal_lengths(text)
    return ", ".join(values) if values else None


def match_movement(text: str) -> Optional[str]:
    return _joined_terms(text, MOVEMENT_TERMS)


def match_lighting(text: str) -> Optional[str]:
    return _joined_terms(text, LIGHTING_TERMS)


def match_color_grade(text: str) -> Optional[str]:
    return _joined_terms(text, GRADE_TERMS)


_INSPIRATION_RE = re.compile(
    r"\b(?:inspired\s+by|in\s+the\s+style\s+of|reminiscent\s+of|(?:a|à)\s+la|"
    r"influences?\s*:|references?\s*:)\s*([^;\n]+?)" + _SENTENCE_END,
    re.IGNORECASE,
)
_VIBES_RE = re.compile(r"\b([A-Z][\w'-]*(?:\s+[A-Z0-9][\w'-]*)*)\s+(?i:vibes?|aesthetic)\b")


def match_inspirations(text: str) -> Optional[Tuple[str, ...]]:
    """Named works after "inspired by" / "in the style of" / "X vibes".

    A list after the cue continues while its items are capitalised, so
    "inspired by Blade Runner, Akira, slow pacing" stops before "slow pacing".
    """
    found: List[Tuple[int, str]] = []
    for m in _INSPIRATION_RE.finditer(text):
        for i, item in enumerate(_split_items(m.group(1))):
            if i > 0 and not item[:1].isupper() and not item[:1].isdigit():
                break
            found.append((m.start(1), item))
    for m in _VIBES_RE.finditer(text):
        name = _tidy(m.group(1))
        if name.split()[0].lower() not in NON_NAME_WORDS:
            found.append((m.start(1), name))
    found.sort(key=lambda f: f[0])
    items = _dedupe([item for _, item in found])
    return tuple(items) or None


# ── Audio ─────────────────────────────────────────────────────────────────────

_MUSIC_EXPLICIT_RE = re.compile(
    r"\b(?:music|score|soundtrack)\s*:\s*([^,;\n]+?)" + _CLAUSE_END, re.IGNORECASE
)
_MUSIC_GENRE_RE = re.compile(
    r"\b((?:" + MUSIC_GENRES + r")\s+(?:" + MUSIC_NOUNS + r"))\b", re.IGNORECASE
)


def match_music(text: str) -> Optional[str]:
    m = _MUSIC_EXPLICIT_RE.search(text)
    if m:
        return _tidy(m.group(1)) or None
    m = _MUSIC_GENRE_RE.search(text)
    return _tidy(m.group(1)).lower() if m else None


_SOUND_EXPLICIT_RE = re.compile(
    r"\bsound(?:\s+design)?\s*:\s*([^,;\n]+?)" + _CLAUSE_END, re.IGNORECASE
)


def match_sound_design(text: str) -> Optional[str]:
    m = _SOUND_EXPLICIT_RE.search(text)
    if m:
        return _tidy(m.group(1)) or None
    return _joined_terms(text, SOUND_TERMS)


_VOICEOVER_EXPLICIT_RE = re.compile(
    r"\b(?:voice[- ]?over|narration|vo)\s*:\s*(.+?)" + _SENTENCE_END, re.IGNORECASE
)
_VOICEOVER_QUOTED_RE = re.compile(r"\bvoice[- ]?over\s+[\"“]([^\"”]+)[\"”]", re.IGNORECASE)
_NARRATED_BY_RE = re.compile(r"\bnarrated\s+by\s+([^,;\n]+?)" + _CLAUSE_END, re.IGNORECASE)


def match_voiceover(text: str) -> Optional[str]:
    m = _VOICEOVER_EXPLICIT_RE.search(text) or _VOICEOVER_QUOTED_RE.search(text)
    if m:
        return _tidy(m.group(1)) or None
    m = _NARRATED_BY_RE.search(text)
    return f"narrated by {_tidy(m.group(1))}" if m else None


# ── Characters ────────────────────────────────────────────────────────────────

_ROLE_RE = re.compile(
    r"\b(?P<role>(?i:" + ROLE_TERMS + r"))\b"
    r"(?:\s*,)?(?:\s+(?i:named|called))?"
    r"(?:\s+(?P<name>[A-Z][\w'-]*))?"
    r"\s*(?:\((?P<paren>[^)]*)\))?"
    r"(?:\s+(?P<prep>(?i:in|wearing|with))\s+(?:(?i:an?|the)\s+)?(?P<trail>[^,;()\n]+?)"
    + _CLAUSE_END + r")?"
)
_NAME_PAREN_RE = re.compile(r"\b(?P<name>[A-Z][\w'-]*)\s*\((?P<paren>[^)]*)\)")
_ROLE_WORD_RE = re.compile(r"^(?:" + ROLE_TERMS + r")$", re.IGNORECASE)


def _descriptors(raw: Optional[str]) -> List[str]:
    if not raw:
        return []
    return [d for d in (_tidy(p) for p in re.split(r",|;|\band\b", raw)) if d]


def _is_name(word: Optional[str]) -> bool:
    return bool(word) and word.lower() not in NON_NAME_WORDS and not _ROLE_WORD_RE.match(word)


def _classify(descriptors: Sequence[str]) -> Tuple[Tuple[str, ...], Tuple[str, ...]]:
    appearance = tuple(d for d in descriptors if not _WARDROBE_RE.search(d))
    wardrobe = tuple(d for d in descriptors if _WARDROBE_RE.search(d))
    return appearance, wardrobe


def match_characters(text: str) -> Optional[Tuple[CharacterCue, ...]]:
    """Characters named with a role term, a parenthetical, or both.

    "protagonist Aya (pink bob cut, leather jacket)" and
    "antagonist in chrome mask" each yield one cue; a bare role word with no
    name and no descriptors ("lead to a chase") yields nothing.
    """
    found: List[Tuple[int, CharacterCue]] = []
    role_spans: List[Tuple[int, int]] = []
    for m in _ROLE_RE.finditer(text):
        role = m.group("role").lower()
        name = m.group("name") if _is_name(m.group("name")) else None
        descriptors = _descriptors(m.group("paren"))
        trail, prep = m.group("trail"), (m.group("prep") or "").lower()
        if trail:
            trail = _tidy(trail)
            if prep == "wearing":
                descriptors.append(trail)
            elif prep == "with":
                descriptors.extend(_descriptors(trail))
            # "in ..." is wardrobe only when it names clothing; "in Tokyo" is a place.
            elif not name and _WARDROBE_RE.search(trail):
                descriptors.append(trail)
        if not name and not descriptors:
            continue
        appearance, wardrobe = _classify(descriptors)
        if prep == "wearing" and trail and trail in appearance:
            appearance = tuple(d for d in appearance if d != trail)
            wardrobe = wardrobe + (trail,)
        found.append((m.start(), CharacterCue(name or role.title(), role, appearance, wardrobe)))
        role_spans.append(m.span())

    for m in _NAME_PAREN_RE.finditer(text):
        if any(start <= m.start() < end for start, end in role_spans):
            continue
        name = m.group("name")
        descriptors = _descriptors(m.group("paren"))
        if not _is_name(name) or not any(c.isalpha() for c in m.group("paren")):
            continue
        appearance, wardrobe = _classify(descriptors)
        found.append((m.start(), CharacterCue(name, "", appearance, wardrobe)))

    found.sort(key=lambda f: f[0])
    merged: List[CharacterCue] = []
    for _, cue in found:
        prior = next((c for c in merged if c.name.lower() == cue.name.lower()), None)
        if prior is None:
            merged.append(cue)
            continue
        merged[merged.index(prior)] = CharacterCue(
            prior.name,
            prior.role or cue.role,
            tuple(_dedupe(prior.appearance + cue.appearance)),
            tuple(_dedupe(prior.wardrobe + cue.wardrobe)),
        )
    return tuple(merged) or None


# ── Locations ─────────────────────────────────────────────────────────────────

_PREPOSITIONS = r"(?i:in|at|inside|through|across|near)"
_ARTICLES = r"(?:(?i:the|an?|my|our)\s+)?"
_ADJECTIVES = (
    r"(?P<adj>(?:(?!(?:of|and|or|with|by|for|to|from|style|vein|spirit|manner|"
    r"order|front|which|that|this|his|her|their|its)\b)[a-z][a-z-]*\s+){0,2}?)"
)
_PROPER_PLACE_RE = re.compile(
    r"\b" + _PREPOSITIONS + r"\s+" + _ARTICLES + _ADJECTIVES
    + r"(?P<name>[A-Z][\w'-]*(?:\s+[A-Z][\w'-]*)*)"
)
_NOUN_PLACE_RE = re.compile(
    r"\b(?:" + _PREPOSITIONS + r"|(?i:on))\s+" + _ARTICLES + _ADJECTIVES
    + r"(?P<name>(?i:" + PLACE_NOUNS + r"))\b"
)


def _time_of_day(text: str) -> str:
    hits = _scan(text, TIME_OF_DAY_TERMS)
    return hits[0][2] or "" if hits else ""


def match_locations(text: str) -> Optional[Tuple[LocationCue, ...]]:
    """Places introduced by a preposition: "in rainy Tokyo", "at an old diner".

    Adjectives before the place become its description; the time-of-day cue
    of the same sentence (else of the whole text) becomes its time of day.
    """
    fallback_time = _time_of_day(text)
    cues: List[LocationCue] = []
    for sentence in _sentences(text):
        hits = []
        for regex in (_PROPER_PLACE_RE, _NOUN_PLACE_RE):
            for m in regex.finditer(sentence):
                name = _tidy(m.group("name"))
                if regex is _PROPER_PLACE_RE and not _is_name(name.split()[0]):
                    continue
                if _scan(name, TIME_OF_DAY_TERMS):
                    continue
                hits.append((m.start("name"), m.end("name"), name, _tidy(m.group("adj") or "")))
        hits.sort(key=lambda h: (h[0], -(h[1] - h[0])))
        time_of_day = _time_of_day(sentence) or fallback_time
        last_end = -1
        for start, end, name, adjectives in hits:
            if start < last_end:
                continue
            last_end = end
            prior = next((c for c in cues if c.name.lower() == name.lower()), None)
            if prior is None:
                cues.append(LocationCue(name, adjectives, time_of_day))
            elif not prior.description and adjectives:
                cues[cues.index(prior)] = LocationCue(prior.name, adjectives, prior.time_of_day)
    return tuple(cues) or None


# ── Shots ─────────────────────────────────────────────────────────────────────


def match_shots(text: str) -> Optional[Tuple[ShotCue, ...]]:
    """One ShotCue per framing cue, in text order.

    Movement, lens notes and an explicit duration are read from the same
    clause as the framing cue; clauses split on commas and "then".
    """
    cues: List[ShotCue] = []
    for sentence in _sentences(text):
        for clause in _clauses(sentence):
            framings = _framing_cues(clause)
            if not framings:
                continue
            movement = _first_term(clause, MOVEMENT_TERMS) or "static"
            notes = ", ".join(_focal_lengths(clause))
            m = _DURATION_RE.search(clause)
            duration = None
            if m:
                duration = _number(m.group(1))
                if m.group(2).lower().startswith("min"):
                    duration = _number(str(duration * 60))
            for framing in framings:
                cues.append(ShotCue(framing.code, movement, framing.label, notes, duration))
    return tuple(cues) or None


# ── Constraints ───────────────────────────────────────────────────────────────

_AVOID_RE = re.compile(
    r"\b(?:avoid(?:ing)?|without|(?:do\s+not|don'?t|never)\s+(?:show|include|use))\s+"
    r"([^,;\n]+?)" + _CLAUSE_END,
    re.IGNORECASE,
)
_NO_CLAUSE_RE = re.compile(r"^\s*no\s+(.+?)\s*$", re.IGNORECASE)
_NEGATIVE_RE = re.compile(
    r"\bnegative(?:\s+prompts?)?\s*:\s*([^;\n]+?)" + _SENTENCE_END, re.IGNORECASE
)


def _avoid_items(text: str) -> List[str]:
    found: List[Tuple[int, str]] = []
    for m in _AVOID_RE.finditer(text):
        found.extend((m.start(1), item) for item in _split_items(m.group(1)))
    cursor = 0
    for sentence in _sentences(text):
        for clause in _clauses(sentence):
            cursor = max(cursor, text.find(clause, cursor))
            m = _NO_CLAUSE_RE.match(clause)
            if m:
                found.extend((cursor, item) for item in _split_items(m.group(1)))
    found.sort(key=lambda f: f[0])
    return _dedupe([item for _, item in found])


def match_avoid(text: str) -> Optional[Tuple[str, ...]]:
    return tuple(_avoid_items(text)) or None


def match_negative_prompts(text: str) -> Optional[Tuple[str, ...]]:
    """Explicit "negative: ..." lists plus avoided generation artifacts."""
    items: List[str] = []
    for m in _NEGATIVE_RE.finditer(text):
        items.extend(_split_items(m.group(1)))
    items.extend(item for item in _avoid_items(text) if _ARTIFACT_RE.search(item))
    return tuple(_dedupe(items)) or None


# ── Registry ──────────────────────────────────────────────────────────────────

MATCHERS: Tuple[Matcher, ...] = (
    Matcher("title", Target.TITLE, match_title),
    Matcher("summary", Target.SUMMARY, match_summary),
    Matcher("duration", Target.DURATION, match_duration),
    Matcher("aspect_ratio", Target.ASPECT_RATIO, match_aspect_ratio),
    Matcher("fps", Target.FPS, match_fps),
    Matcher("tone", Target.TONE, match_tone),
    Matcher("explicit_palette", Target.COLOR_PALETTE, match_explicit_palette),
    Matcher("palette_terms", Target.COLOR_PALETTE, match_palette_terms),
    Matcher("inspirations", Target.INSPIRATIONS, match_inspirations),
    Matcher("camera_body", Target.CAMERA_BODY, match_camera_body),
    Matcher("lenses", Target.LENSES, match_lenses),
    Matcher("movement", Target.MOVEMENT, match_movement),
    Matcher("lighting", Target.LIGHTING, match_lighting),
    Matcher("color_grade", Target.COLOR_GRADE, match_color_grade),
    Matcher("music", Target.MUSIC, match_music),
    Matcher("sound_design", Target.SOUND_DESIGN, match_sound_design),
    Matcher("voiceover", Target.VOICEOVER, match_voiceover),
    Matcher("seed", Target.SEED, match_seed),
    Matcher("characters", Target.CHARACTERS, match_characters),
    Matcher("locations", Target.LOCATIONS, match_locations),
    Matcher("shots", Target.SHOTS, match_shots),
    Matcher("avoid", Target.AVOID, match_avoid),
    Matcher("negative_prompts", Target.NEGATIVE_PROMPTS, match_negative_prompts),
)
