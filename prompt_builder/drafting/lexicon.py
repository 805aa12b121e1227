"""Keyword tables used by the idea matchers.

Each table is an ordered tuple of (regex fragment, canonical value).  A
canonical value of None means "keep the matched text as written".  Fragments
are matched case-insensitively between word boundaries.  No external state.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

Term = Tuple[str, Optional[str]]


@dataclass(frozen=True)
class FramingCue:
    code: str
    label: str
    pattern: str


# Longest phrasing first where two cues share a prefix; the scanner also
# prefers the longer match at equal positions.
FRAMING_CUES: Tuple[FramingCue, ...] = (
    FramingCue("ECU", "Extreme close-up", r"extreme\s+close[- ]?ups?|ecu"),
    FramingCue("MCU", "Medium close-up", r"medium\s+close[- ]?ups?|mcu"),
    FramingCue("CU", "Close-up", r"close[- ]?ups?"),
    FramingCue("EWS", "Extreme wide", r"extreme\s+wide(?:\s+shots?)?"),
    FramingCue("WS", "Establishing wide", r"(?:wide\s+)?establishing(?:\s+shots?)?"),
    FramingCue("WS", "Wide shot", r"wide\s+shots?|long\s+shots?|wides"),
    FramingCue("MS", "Medium shot", r"medium\s+shots?|mid[- ]shots?"),
    FramingCue("OTS", "Over-the-shoulder", r"over[- ]the[- ]shoulder(?:\s+shots?)?|ots"),
    FramingCue("POV", "Point of view", r"pov(?:\s+shots?)?|point[- ]of[- ]view(?:\s+shots?)?"),
    FramingCue("AERIAL", "Aerial", r"aerial(?:\s+shots?)?|drone\s+shots?"),
    FramingCue("INSERT", "Insert", r"insert\s+shots?|inserts"),
    FramingCue("2S", "Two-shot", r"two[- ]shots?"),
)

TONE_TERMS: Tuple[Term, ...] = (
    (r"neo[- ]noir", "neo-noir"),
    (r"noir", "noir"),
    (r"gritty", "gritty"),
    (r"cyberpunk", "cyberpunk"),
    (r"dystopian", "dystopian"),
    (r"dreamy|dreamlike", "dreamy"),
    (r"ethereal", "ethereal"),
    (r"whimsical", "whimsical"),
    (r"playful", "playful"),
    (r"epic", "epic"),
    (r"melancholic|melancholy", "melancholic"),
    (r"somber|sombre", "somber"),
    (r"moody", "moody"),
    (r"nostalgic", "nostalgic"),
    (r"hopeful|uplifting", "hopeful"),
    (r"romantic", "romantic"),
    (r"tense|suspenseful", "tense"),
    (r"surreal", "surreal"),
    (r"horror", "horror"),
    (r"thriller", "thriller"),
    (r"comedic|comedy", "comedic"),
    (r"documentary", "documentary"),
    (r"sci[- ]fi|science\s+fiction", "sci-fi"),
    (r"fantasy", "fantasy"),
    (r"western", "western"),
)

PALETTE_TERMS: Tuple[Term, ...] = (
    (r"neon", "neon"),
    (r"teal\s*(?:/|and|&)\s*orange", "teal/orange"),
    (r"pastels?", "pastel"),
    (r"monochrome|monochromatic", "monochrome"),
    (r"black[- ]and[- ]white", "black and white"),
    (r"desaturated|muted\s+colou?rs?", "desaturated"),
    (r"earth\s+tones?|earthy", "earth tones"),
    (r"sepia", "sepia"),
    (r"vibrant|saturated", "vibrant"),
    (r"warm\s+(?:tones?|palette|colou?rs?)", "warm"),
    (r"(?:cool|cold)\s+(?:tones?|palette|colou?rs?)", "cool"),
    (r"candy[- ]colou?red", "candy-colored"),
)

CAMERA_BODY_TERMS: Tuple[Term, ...] = (
    (r"(?:arri\s+)?alexa\s+lf", "ARRI Alexa LF"),
    (r"(?:arri\s+)?alexa\s+mini(?:\s+lf)?", "ARRI Alexa Mini"),
    (r"arri\s+alexa|alexa|arri", "ARRI Alexa"),
    (r"red\s+komodo", "RED Komodo"),
    (r"red\s+v-?raptor", "RED V-Raptor"),
    (r"sony\s+venice", "Sony Venice"),
    (r"sony\s+fx[369]", None),
    (r"blackmagic(?:\s+ursa)?|bmpcc", "Blackmagic"),
    (r"iphone", "iPhone"),
    (r"imax", "IMAX"),
    (r"16\s*mm\s+film", "16mm film"),
    (r"35\s*mm\s+film", "35mm film"),
    (r"super\s*8", "Super 8"),
    (r"vhs|camcorder", "VHS camcorder"),
    (r"gopro", "GoPro"),
)

LENS_FAMILY_TERMS: Tuple[Term, ...] = (
    (r"cooke(?:\s+s4(?:/i)?)?", "Cooke S4/i"),
    (r"zeiss(?:\s+supreme(?:\s+primes?)?)?", "Zeiss"),
    (r"panavision", "Panavision"),
    (r"anamorphic", "anamorphic"),
    (r"vintage\s+(?:glass|lens(?:es)?)", "vintage glass"),
    (r"tilt[- ]shift", "tilt-shift"),
    (r"fisheye", "fisheye"),
    (r"macro", "macro"),
)

MOVEMENT_TERMS: Tuple[Term, ...] = (
    (r"slow\s+push[- ]?ins?", "slow push-in"),
    (r"push[- ]?ins?", "push-in"),
    (r"pull[- ]?(?:outs?|backs?)", "pull-out"),
    (r"dolly\s+zoom", "dolly zoom"),
    (r"dolly|dollies", "dolly"),
    (r"slow\s+gimbal", "slow gimbal"),
    (r"gimbal", "gimbal"),
    (r"hand[- ]?held", "handheld"),
    (r"steadicam", "steadicam"),
    (r"crane(?:\s+shots?)?", "crane"),
    (r"tracking(?:\s+shots?)?", "tracking"),
    (r"whip[- ]pans?", "whip pan"),
    (r"pans?|panning", "pan"),
    (r"tilts?(?![- ]shift)|tilting", "tilt"),
    (r"orbit(?:ing|s)?|arc\s+shots?", "orbit"),
    (r"zoom(?:s|ing)?(?:\s+(?:in|out))?", "zoom"),
    (r"static|locked[- ]off|tripod", "static"),
    (r"slow[- ]motion|slo[- ]mo", "slow motion"),
)

LIGHTING_TERMS: Tuple[Term, ...] = (
    (r"deep\s+shadows?", "deep shadows"),
    (r"high[- ]contrast", "high contrast"),
    (r"low[- ]key", "low-key"),
    (r"high[- ]key", "high-key"),
    (r"soft\s+(?:key|light(?:ing)?)", "soft light"),
    (r"hard\s+light(?:ing)?", "hard light"),
    (r"back[- ]?lit|backlight(?:ing)?", "backlit"),
    (r"rim\s+light(?:ing)?", "rim light"),
    (r"(?:motivated\s+)?practicals?", "motivated practicals"),
    (r"chiaroscuro", "chiaroscuro"),
    (r"volumetric(?:\s+(?:light(?:ing)?|fog|haze))?", "volumetric light"),
    (r"neon\s+(?:lights?|glow|signs?|reflections?)", "neon glow"),
    (r"candle[- ]?lit|candlelight", "candlelight"),
    (r"silhouettes?", "silhouettes"),
    (r"natural\s+light(?:ing)?", "natural light"),
    (r"moon[- ]?lit|moonlight", "moonlight"),
)

GRADE_TERMS: Tuple[Term, ...] = (
    (r"bleach\s+bypass", "bleach bypass"),
    (r"film\s+grain|grainy", "film grain"),
    (r"kodak(?:\s+(?:\d{4}|portra|vision3?))?", None),
    (r"fuji(?:film)?", "Fujifilm"),
    (r"filmic(?:\s+contrast)?", "filmic contrast"),
    (r"crushed\s+blacks", "crushed blacks"),
    (r"lifted\s+blacks", "lifted blacks"),
    (r"teal\s*(?:/|and|&)\s*orange\s+grade", "teal/orange grade"),
    (r"cross[- ]processed", "cross-processed"),
    (r"technicolor", "Technicolor"),
    (r"hdr", "HDR"),
)

TIME_OF_DAY_TERMS: Tuple[Term, ...] = (
    (r"golden\s+hour", "golden hour"),
    (r"blue\s+hour", "blue hour"),
    (r"midnight", "midnight"),
    (r"night(?:time)?|nocturnal", "night"),
    (r"dawn|daybreak", "dawn"),
    (r"sunrise", "sunrise"),
    (r"dusk", "dusk"),
    (r"sunset", "sunset"),
    (r"twilight", "twilight"),
    (r"noon|midday", "midday"),
    (r"morning", "morning"),
    (r"afternoon", "afternoon"),
    (r"evening", "evening"),
    (r"daytime|daylight", "day"),
)

MUSIC_GENRES = (
    r"synthwave|synth|orchestral|piano|ambient|lo-?fi|jazz|techno|electronic|"
    r"strings|choir|rock|hip[- ]hop|trap|classical|cello|guitar|industrial|folk|"
    r"chiptune|8-bit|trip[- ]hop|drum\s+and\s+bass|house|noise|minimalist|epic"
)

MUSIC_NOUNS = r"score|soundtrack|music|track|beat|theme"

SOUND_TERMS: Tuple[Term, ...] = (
    (r"[a-z]+\s+ambien(?:ce|t\s+sound)", None),
    (r"footsteps", "footsteps"),
    (r"thunder(?:claps?)?", "thunder"),
    (r"sirens?", "sirens"),
    (r"heartbeats?", "heartbeat"),
    (r"whooshe?s?", "whooshes"),
    (r"foley", "foley"),
    (r"(?:distant\s+)?traffic", None),
    (r"rain(?:fall)?\s+(?:sounds?|on\s+[a-z]+)", None),
)

# Nouns that make "in/at the <noun>" a location even without a proper name.
PLACE_NOUNS = (
    r"warehouse|alley(?:way)?|rooftop|forest|woods|desert|beach|city|streets?|"
    r"diner|subway|station|apartment|office|castle|village|harbou?r|port|market|"
    r"bar|nightclub|club|church|temple|cathedral|hospital|school|classroom|"
    r"library|kitchen|bedroom|garden|park|field|meadow|mountains?|valley|lake|"
    r"river|ocean|sea|island|cave|jungle|highway|road|bridge|tunnel|"
    r"parking\s+lot|garage|spaceship|space\s+station|laboratory|lab|factory|"
    r"mall|stadium|arena|motel|hotel|farm|barn|cabin|palace|ruins|cemetery|"
    r"graveyard|shore|coast|cliffs?|canyon|tundra|swamp"
)

ROLE_TERMS = (
    r"protagonist|antagonist|heroine|hero|villain|sidekick|mentor|narrator|"
    r"detective|lead"
)

WARDROBE_TERMS = (
    r"jacket|coat|trench|dress|gown|skirt|suit|tuxedo|shirt|t-shirt|hoodie|"
    r"sweater|jeans|pants|trousers|boots|shoes|sneakers|heels|hat|cap|beanie|"
    r"helmet|mask|glasses|sunglasses|goggles|scarf|gloves|uniform|armou?r|"
    r"cloak|cape|robe|kimono|vest|tie|necklace|earrings|jewelry|backpack|"
    r"apron|overalls|leather|denim"
)

ASPECT_RATIO_TERMS: Tuple[Term, ...] = (
    (r"cinemascope|scope\s+(?:ratio|format)", "2.39:1"),
    (r"vertical(?:\s+(?:video|format))?|portrait\s+(?:mode|format)|tiktok|reels", "9:16"),
    (r"square\s+(?:format|aspect|frame)", "1:1"),
)

# Artifacts that belong in negative prompts as well as the avoid list.
ARTIFACT_TERMS = (
    r"extra\s+(?:hands|fingers|limbs|arms|legs)|deformed|distorted|blurry|"
    r"watermarks?|text\s+overlays?|logos?|low[- ]quality|jpe?g\s+artifacts|"
    r"mutated|disfigured|bad\s+anatomy|flicker(?:ing)?|morphing"
)

# Capitalised words that look like names but are not characters or places.
NON_NAME_WORDS = frozenset({
    "i", "the", "a", "an", "then", "and", "but", "opening", "closing", "ending",
    "arri", "alexa", "red", "sony", "cooke", "zeiss", "kodak", "fuji",
    "fujifilm", "panavision", "imax", "iphone", "gopro", "blackmagic", "vhs",
    "technicolor", "hdr", "super", "pov", "ecu", "mcu", "ots", "avoid", "no",
    "negative", "title", "music", "seed",
})

# Words that may follow a bare "30s" and still leave it a running time
# ("a 30s teaser", "30s long").  Any other word makes it a decade ("80s synthwave").
RUNTIME_WORDS = frozenset({
    "long", "total", "runtime", "max", "tops", "spot", "clip", "video", "ad",
    "commercial", "trailer", "teaser", "reel", "short", "cut", "edit", "piece",
    "loop", "sequence", "montage", "promo", "of",
})
