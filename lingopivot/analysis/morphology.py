"""English morphology: stemming, lemmatization, inflection and POS guessing.

All functions are pure and operate on the module-level tables below.
"""

import re
from typing import Dict, FrozenSet, Optional, Tuple

from ..models.token import MorphologicalFeatures, PartOfSpeech, Tense

# infinitive -> (past, past participle); "a/b" marks singular/plural past forms
IRREGULAR_VERBS: Dict[str, Tuple[str, str]] = {
    "be": ("was/were", "been"),
    "have": ("had", "had"),
    "do": ("did", "done"),
    "go": ("went", "gone"),
    "come": ("came", "come"),
    "see": ("saw", "seen"),
    "take": ("took", "taken"),
    "get": ("got", "gotten"),
    "make": ("made", "made"),
    "know": ("knew", "known"),
    "think": ("thought", "thought"),
    "say": ("said", "said"),
    "give": ("gave", "given"),
    "find": ("found", "found"),
    "tell": ("told", "told"),
    "feel": ("felt", "felt"),
    "become": ("became", "become"),
    "leave": ("left", "left"),
    "put": ("put", "put"),
    "keep": ("kept", "kept"),
    "let": ("let", "let"),
    "begin": ("began", "begun"),
    "show": ("showed", "shown"),
    "hear": ("heard", "heard"),
    "run": ("ran", "run"),
    "bring": ("brought", "brought"),
    "write": ("wrote", "written"),
    "sit": ("sat", "sat"),
    "stand": ("stood", "stood"),
    "lose": ("lost", "lost"),
    "pay": ("paid", "paid"),
    "meet": ("met", "met"),
    "set": ("set", "set"),
    "lead": ("led", "led"),
    "understand": ("understood", "understood"),
    "speak": ("spoke", "spoken"),
    "read": ("read", "read"),
    "spend": ("spent", "spent"),
    "grow": ("grew", "grown"),
    "win": ("won", "won"),
    "buy": ("bought", "bought"),
    "send": ("sent", "sent"),
    "build": ("built", "built"),
    "fall": ("fell", "fallen"),
    "cut": ("cut", "cut"),
    "eat": ("ate", "eaten"),
    "sleep": ("slept", "slept"),
    "drink": ("drank", "drunk"),
    "swim": ("swam", "swum"),
    "drive": ("drove", "driven"),
    "fly": ("flew", "flown"),
    "break": ("broke", "broken"),
    "choose": ("chose", "chosen"),
    "forget": ("forgot", "forgotten"),
    "hide": ("hid", "hidden"),
    "ride": ("rode", "ridden"),
    "ring": ("rang", "rung"),
    "rise": ("rose", "risen"),
    "shake": ("shook", "shaken"),
    "sing": ("sang", "sung"),
    "sink": ("sank", "sunk"),
    "steal": ("stole", "stolen"),
    "strike": ("struck", "struck"),
    "tear": ("tore", "torn"),
    "throw": ("threw", "thrown"),
    "wake": ("woke", "woken"),
    "wear": ("wore", "worn"),
    "teach": ("taught", "taught"),
    "catch": ("caught", "caught"),
    "sell": ("sold", "sold"),
    "hold": ("held", "held"),
    "mean": ("meant", "meant"),
    "feed": ("fed", "fed"),
    "speed": ("sped", "sped"),
    "bleed": ("bled", "bled"),
}

# Regular verbs whose base form cannot be recovered by suffix stripping alone
REGULAR_VERBS: FrozenSet[str] = frozenset({
    "love", "like", "live", "move", "believe", "use", "hope", "change", "create",
    "close", "smile", "dance", "share", "care", "include", "continue", "serve",
    "arrive", "hate", "bake", "open", "visit", "happen", "listen", "offer",
    "remember", "consider", "answer", "enter", "order", "cook", "play", "stay",
    "help", "walk", "talk", "want", "need", "work", "call", "ask", "wait",
    "watch", "learn", "study", "try", "cry", "stop", "plan", "shop", "travel",
    "die", "tie", "agree",
})

IRREGULAR_PLURALS: Dict[str, str] = {
    "child": "children",
    "person": "people",
    "man": "men",
    "woman": "women",
    "foot": "feet",
    "tooth": "teeth",
    "goose": "geese",
    "mouse": "mice",
    "louse": "lice",
    "ox": "oxen",
    "sheep": "sheep",
    "deer": "deer",
    "fish": "fish",
    "species": "species",
    "series": "series",
    "aircraft": "aircraft",
    "knife": "knives",
    "wife": "wives",
    "life": "lives",
    "leaf": "leaves",
    "half": "halves",
    "wolf": "wolves",
    "calf": "calves",
    "loaf": "loaves",
    "thief": "thieves",
    "self": "selves",
    "shelf": "shelves",
    "elf": "elves",
    "analysis": "analyses",
    "basis": "bases",
    "crisis": "crises",
    "thesis": "theses",
    "phenomenon": "phenomena",
    "criterion": "criteria",
    "datum": "data",
    "medium": "media",
    "curriculum": "curricula",
    "bacterium": "bacteria",
    "cactus": "cacti",
    "focus": "foci",
    "fungus": "fungi",
    "nucleus": "nuclei",
    "radius": "radii",
    "stimulus": "stimuli",
    "syllabus": "syllabi",
}

PLURALS_TO_SINGULAR: Dict[str, str] = {plural: single for single, plural in IRREGULAR_PLURALS.items()}

# Inflected forms of auxiliaries that suffix rules would get wrong
AUXILIARY_FORMS: Dict[str, str] = {
    "am": "be", "is": "be", "are": "be", "was": "be", "were": "be", "been": "be", "being": "be",
    "has": "have", "having": "have", "does": "do", "goes": "go",
}

STEM_SUFFIXES = (
    "ational", "tional", "ization", "fulness", "ousness", "iveness",
    "ement", "ness", "ment", "able", "ible", "ally", "ance", "ence",
    "ism", "ity", "ous", "ive", "ful", "less", "ing", "tion", "sion",
    "ed", "ly", "er", "est", "en", "s",
)

NOUN_SUFFIXES = ("tion", "sion", "ness", "ment", "ity", "ance", "ence", "er", "or", "ist", "ism")
VERB_SUFFIXES = ("ize", "ify", "ate", "en")
ADJECTIVE_SUFFIXES = ("ful", "less", "ous", "ive", "able", "ible", "al", "ical", "ic", "ish")
ADVERB_SUFFIXES = ("ly",)

DETERMINERS: FrozenSet[str] = frozenset({
    "the", "a", "an", "this", "that", "these", "those", "my", "your", "his", "her", "its",
    "our", "their", "some", "any", "no", "every", "each", "all", "both", "few", "many",
    "much", "several",
})
PRONOUNS: FrozenSet[str] = frozenset({
    "i", "me", "mine", "myself", "you", "yours", "yourself", "he", "him", "himself",
    "she", "hers", "herself", "it", "itself", "we", "us", "ours", "ourselves", "they",
    "them", "theirs", "themselves", "who", "whom", "whose", "which", "what", "whoever",
    "whomever", "whatever", "whichever",
})
PREPOSITIONS: FrozenSet[str] = frozenset({
    "in", "on", "at", "to", "for", "of", "with", "by", "from", "up", "about", "into",
    "over", "after", "beneath", "under", "above", "below", "between", "among", "through",
    "during", "before", "behind", "beyond", "near", "across", "around", "against", "along",
    "beside", "towards", "without", "within",
})
CONJUNCTIONS: FrozenSet[str] = frozenset({
    "and", "but", "or", "nor", "yet", "so", "because", "although", "while", "if", "when",
    "where", "unless", "until", "since", "though", "whether", "whereas", "whenever",
    "wherever", "however", "moreover", "therefore", "thus", "hence", "otherwise",
    "nevertheless", "furthermore", "besides", "consequently",
})
INTERJECTIONS: FrozenSet[str] = frozenset({
    "hello", "hi", "hey", "oh", "wow", "ouch", "oops", "yes", "yeah", "okay", "ok",
    "please", "thanks", "bye", "goodbye", "alas", "hmm",
})
ADVERBS: FrozenSet[str] = frozenset({
    "very", "too", "not", "never", "always", "often", "here", "there", "now", "then",
    "today", "tomorrow", "yesterday", "how", "why", "again", "soon", "well", "also",
})
COMMON_ADJECTIVES: FrozenSet[str] = frozenset({
    "good", "bad", "big", "small", "new", "old", "young", "red", "blue", "green", "black",
    "white", "happy", "sad", "beautiful", "hot", "cold", "long", "short", "tall", "great",
    "little", "nice", "fast", "slow", "easy", "hard", "fine", "sweet", "pretty", "rich",
    "poor", "cheap", "clean", "dirty", "fair", "light", "dark",
})
_VERB_FORMS = {"be", "am", "is", "are", "was", "were", "been", "being", "will", "would",
               "shall", "should", "may", "might", "must", "can", "could"}
for _verb, (_past, _participle) in IRREGULAR_VERBS.items():
    _VERB_FORMS.update({_verb, _participle, *_past.split("/")})
for _verb in REGULAR_VERBS:
    _VERB_FORMS.add(_verb)
COMMON_VERBS: FrozenSet[str] = frozenset(_VERB_FORMS)

KNOWN_VERBS: FrozenSet[str] = frozenset(IRREGULAR_VERBS) | REGULAR_VERBS

# Checked in this order
CLOSED_CLASSES = (
    (DETERMINERS, PartOfSpeech.DETERMINER),
    (PRONOUNS, PartOfSpeech.PRONOUN),
    (PREPOSITIONS, PartOfSpeech.PREPOSITION),
    (CONJUNCTIONS, PartOfSpeech.CONJUNCTION),
    (INTERJECTIONS, PartOfSpeech.INTERJECTION),
    (COMMON_VERBS, PartOfSpeech.VERB),
    (COMMON_ADJECTIVES, PartOfSpeech.ADJECTIVE),
    (ADVERBS, PartOfSpeech.ADVERB),
)

SUFFIX_CLASSES = (
    (ADVERB_SUFFIXES, PartOfSpeech.ADVERB),
    (ADJECTIVE_SUFFIXES, PartOfSpeech.ADJECTIVE),
    (VERB_SUFFIXES, PartOfSpeech.VERB),
    (NOUN_SUFFIXES, PartOfSpeech.NOUN),
)

VOWELS = "aeiou"
_SIBILANT_END = re.compile(r"(s|x|z|ch|sh)$")
_CONSONANT_Y = re.compile(r"[^aeiou]y$")


def _has_suffix(word: str, suffix: str) -> bool:
    return word.endswith(suffix) and len(word) > len(suffix) + 2


def _doubles_final_consonant(verb: str) -> bool:
    """One-syllable CVC verbs double their last letter (stop -> stopped)."""
    if len(verb) < 3 or verb[-1] in VOWELS + "wxy":
        return False
    vowel_groups = re.findall(r"[aeiou]+", verb)
    return (
        len(vowel_groups) == 1
        and verb[-2] in VOWELS
        and verb[-3] not in VOWELS
    )


def stem(word: str) -> str:
    """Strip the first matching derivational/inflectional suffix (Porter-like)."""
    result = word.lower()
    for suffix in STEM_SUFFIXES:
        if _has_suffix(result, suffix):
            result = result[: -len(suffix)]
            break
    if len(result) > 3 and result[-1] == result[-2]:
        result = result[:-1]
    return result


def _restore_base(base: str) -> str:
    """Undo consonant doubling or restore a dropped silent e after stripping -ing/-ed."""
    if len(base) > 2 and base[-1] == base[-2] and base[-1] not in "ls":
        if base[:-1] in KNOWN_VERBS or base not in KNOWN_VERBS:
            return base[:-1]
    if base in KNOWN_VERBS:
        return base
    if base + "e" in KNOWN_VERBS:
        return base + "e"
    if len(base) <= 3 and re.search(r"[^aeiou][aeiou][^aeiouwxy]$", base):
        return base + "e"
    return base


def lemmatize(word: str, pos: Optional[PartOfSpeech] = None) -> str:
    """
    Get the dictionary form of an English word.

    Args:
        word: Inflected word (e.g. "running", "children")
        pos: Optional part of speech; nouns are only singularized

    Returns:
        Lowercase lemma ("run", "child")
    """
    lower = word.lower()
    if lower in AUXILIARY_FORMS:
        return AUXILIARY_FORMS[lower]
    if pos == PartOfSpeech.NOUN:
        return singularize(lower)
    if pos not in (None, PartOfSpeech.VERB, PartOfSpeech.UNKNOWN):
        return lower

    for infinitive, (past, participle) in IRREGULAR_VERBS.items():
        if lower == participle or lower in past.split("/"):
            return infinitive
    if lower in PLURALS_TO_SINGULAR:
        return PLURALS_TO_SINGULAR[lower]
    if len(lower) <= 3 or any(lower in closed for closed, _ in CLOSED_CLASSES[:5]):
        return lower
    if lower in KNOWN_VERBS:
        return lower

    if lower.endswith("ing") and len(lower) > 4:
        base = lower[:-3]
        if base.endswith("y") and base[:-1] + "ie" in KNOWN_VERBS:
            return base[:-1] + "ie"
        return _restore_base(base)
    if lower.endswith("ied"):
        return lower[:-1] if len(lower) <= 4 else lower[:-3] + "y"
    if lower.endswith("eed"):
        return lower[:-1] if lower[:-1] in KNOWN_VERBS else lower
    if lower.endswith("ed") and len(lower) > 3:
        return _restore_base(lower[:-2])
    if lower.endswith("ies"):
        return lower[:-1] if len(lower) <= 4 else lower[:-3] + "y"
    if lower.endswith("es") and _SIBILANT_END.search(lower[:-2]):
        return lower[:-2]
    if lower.endswith("oes"):
        return lower[:-2]
    if lower.endswith("s") and not lower.endswith(("ss", "us", "is")):
        return lower[:-1]
    return lower


def pluralize(word: str) -> str:
    """Convert a singular noun to its plural."""
    lower = word.lower()
    if lower in IRREGULAR_PLURALS:
        return IRREGULAR_PLURALS[lower]
    if _CONSONANT_Y.search(lower):
        return lower[:-1] + "ies"
    if _SIBILANT_END.search(lower):
        return lower + "es"
    if lower.endswith("fe"):
        return lower[:-2] + "ves"
    if lower.endswith("f") and not lower.endswith("ff"):
        return lower[:-1] + "ves"
    return lower + "s"


def singularize(word: str) -> str:
    """Convert a plural noun to its singular."""
    lower = word.lower()
    if lower in PLURALS_TO_SINGULAR:
        return PLURALS_TO_SINGULAR[lower]
    if lower in IRREGULAR_PLURALS:
        return lower
    if lower.endswith("ies") and len(lower) > 4:
        return lower[:-3] + "y"
    if lower.endswith("ves") and len(lower) > 4:
        return lower[:-3] + "f"
    if lower.endswith(("sses", "xes", "zes", "ches", "shes")):
        return lower[:-2]
    if lower.endswith("s") and not lower.endswith(("ss", "us", "is")) and len(lower) > 3:
        return lower[:-1]
    return lower


def conjugate(verb: str, tense: Tense, person: int = 3, number: str = "singular") -> str:
    """
    Inflect an English verb.

    Args:
        verb: Infinitive ("go")
        tense: Target tense
        person: 1, 2 or 3
        number: "singular" or "plural"

    Returns:
        Inflected form ("goes", "went", "gone", "going", "will go")
    """
    lower = verb.lower()
    irregular = IRREGULAR_VERBS.get(lower)
    plural = number == "plural"

    if tense == Tense.FUTURE:
        return f"will {lower}"

    if tense == Tense.PAST:
        if irregular:
            past = irregular[0]
            if "/" in past:
                singular_form, plural_form = past.split("/")
                return plural_form if plural or person == 2 else singular_form
            return past
        if lower.endswith("e"):
            return lower + "d"
        if _CONSONANT_Y.search(lower):
            return lower[:-1] + "ied"
        if _doubles_final_consonant(lower):
            return lower + lower[-1] + "ed"
        return lower + "ed"

    if tense == Tense.PERFECT:
        if irregular:
            return irregular[1]
        return conjugate(lower, Tense.PAST)

    if tense == Tense.PROGRESSIVE:
        if lower.endswith("ie"):
            return lower[:-2] + "ying"
        if lower.endswith("e") and not lower.endswith("ee") and lower != "be":
            return lower[:-1] + "ing"
        if _doubles_final_consonant(lower):
            return lower + lower[-1] + "ing"
        return lower + "ing"

    # Present
    if lower == "be":
        if person == 1 and not plural:
            return "am"
        if plural or person == 2:
            return "are"
        return "is"
    if person == 3 and not plural:
        if lower == "have":
            return "has"
        if _CONSONANT_Y.search(lower):
            return lower[:-1] + "ies"
        if _SIBILANT_END.search(lower) or lower.endswith("o"):
            return lower + "es"
        return lower + "s"
    return lower


def detect_pos(
    word: str,
    previous: Optional[str] = None,
    next_word: Optional[str] = None,
) -> PartOfSpeech:
    """
    Guess the part of speech of an English word.

    Closed-class lexicons are consulted first, then suffixes, then
    -ing/-ed verb forms, then the previous word. Defaults to noun.
    """
    lower = word.lower()
    if not lower or not any(char.isalpha() for char in lower):
        return PartOfSpeech.UNKNOWN

    for words, pos in CLOSED_CLASSES:
        if lower in words:
            return pos

    for suffixes, pos in SUFFIX_CLASSES:
        if any(_has_suffix(lower, suffix) for suffix in suffixes):
            return pos

    if lower.endswith(("ing", "ed")) and len(lower) > 4:
        return PartOfSpeech.VERB

    if previous:
        prev = previous.lower()
        if prev in DETERMINERS:
            return PartOfSpeech.NOUN
        if prev in ("very", "so", "too"):
            return PartOfSpeech.ADJECTIVE
        if prev == "to":
            return PartOfSpeech.VERB

    return PartOfSpeech.NOUN


def extract_features(word: str, pos: PartOfSpeech) -> MorphologicalFeatures:
    """Derive number, tense, person and negation from a word and its POS."""
    lower = word.lower()
    features = MorphologicalFeatures()

    if pos == PartOfSpeech.NOUN:
        features.is_plural = singularize(lower) != lower
        features.number = "plural" if features.is_plural else "singular"
    elif pos == PartOfSpeech.VERB:
        lemma = lemmatize(lower, PartOfSpeech.VERB)
        irregular = IRREGULAR_VERBS.get(lemma)
        if lower == "will":
            features.tense = Tense.FUTURE
        elif lower.endswith("ing"):
            features.tense = Tense.PROGRESSIVE
        elif irregular and lower == irregular[1] and lower not in irregular[0].split("/"):
            features.tense = Tense.PERFECT
        elif lower.endswith("ed") or (irregular and lower in irregular[0].split("/")):
            features.tense = Tense.PAST
        else:
            features.tense = Tense.PRESENT
    elif pos == PartOfSpeech.PRONOUN:
        if lower in ("i", "me", "myself", "we", "us", "ourselves"):
            features.person = 1
        elif lower in ("you", "yours", "yourself"):
            features.person = 2
        else:
            features.person = 3
        features.number = "plural" if lower in ("we", "us", "they", "them") else "singular"

    features.is_negated = lower in ("not", "never", "no") or lower.endswith("n't")
    return features
