"""Confidence scoring for pipeline results."""

PASSTHROUGH = 1.0
PHRASE_MATCH = 0.95
IDIOM_BONUS = 0.3
IDIOM_CAP = 0.95
WORD_BY_WORD = 0.8
PIVOT_FACTOR = 0.85
MODEL = 0.85
UNTRANSLATED = 0.0


class ConfidenceScorer:
    """
    Scores how much a translation can be trusted.

    Scale:
    - Passthrough: 1.0
    - Whole phrase found in the dictionary: 0.95
    - Word by word: 0.8 x share of words translated
    - Idioms found: +0.3, capped at 0.95
    - Pivot through English: x0.85, applied once per pivot
    - Model backend: 0.85
    - Nothing translated: 0.0
    """

    def passthrough(self) -> float:
        return PASSTHROUGH

    def phrase_match(self) -> float:
        return PHRASE_MATCH

    def model(self) -> float:
        return MODEL

    def word_by_word(self, translated: int, total: int, idioms: int = 0) -> float:
        """
        Score a word-by-word translation.

        Args:
            translated: Words that were found in the dictionary
            total: Words in the input
            idioms: Idioms replaced in the input

        Returns:
            Confidence between 0 and 1
        """
        if total <= 0 or translated <= 0:
            return UNTRANSLATED
        score = WORD_BY_WORD * min(1.0, translated / total)
        if idioms:
            score = min(IDIOM_CAP, score + IDIOM_BONUS)
        return round(score, 4)

    def pivot(self, first_leg: float, second_leg: float) -> float:
        """Combine the two legs of an English pivot.

        The weaker leg bounds the result; the pivot factor is applied once.
        """
        return round(min(first_leg, second_leg) * PIVOT_FACTOR, 4)

