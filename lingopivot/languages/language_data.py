"""Static language tables: profiles, aliases, Unicode blocks and model codes."""

from typing import Dict, List, Tuple

from ..models.language_profile import AdjectivePosition, LanguageProfile, WordOrder

SOV = WordOrder.SOV
VSO = WordOrder.VSO
AFTER = AdjectivePosition.AFTER


def _indic(name: str, code: str, native_name: str, script: str, **grammar) -> LanguageProfile:
    """Profile for an Indian language: SOV, postpositions, gendered, honorifics."""
    defaults = dict(
        word_order=SOV,
        has_gender=True,
        uses_postpositions=True,
        subject_dropping=True,
        has_cases=True,
        has_honorifics=True,
    )
    defaults.update(grammar)
    return LanguageProfile(name, code, native_name, script, **defaults)


def _romance(name: str, code: str, native_name: str) -> LanguageProfile:
    return LanguageProfile(
        name,
        code,
        native_name,
        has_gender=True,
        has_articles=True,
        adjective_position=AFTER,
        subject_dropping=True,
    )


LANGUAGES: List[LanguageProfile] = [
    # Indian languages
    _indic("hindi", "hi", "हिन्दी", "Devanagari"),
    _indic("bengali", "bn", "বাংলা", "Bengali", has_gender=False),
    _indic("telugu", "te", "తెలుగు", "Telugu"),
    _indic("tamil", "ta", "தமிழ்", "Tamil"),
    _indic("marathi", "mr", "मराठी", "Devanagari"),
    _indic("gujarati", "gu", "ગુજરાતી", "Gujarati"),
    _indic("kannada", "kn", "ಕನ್ನಡ", "Kannada"),
    _indic("malayalam", "ml", "മലയാളം", "Malayalam", has_gender=False),
    _indic("punjabi", "pa", "ਪੰਜਾਬੀ", "Gurmukhi"),
    _indic("odia", "or", "ଓଡ଼ିଆ", "Odia", has_gender=False),
    _indic("assamese", "as", "অসমীয়া", "Bengali", has_gender=False),
    _indic("urdu", "ur", "اردو", "Arabic", rtl=True),
    _indic("sanskrit", "sa", "संस्कृतम्", "Devanagari"),
    _indic("kashmiri", "ks", "कश्मीरी", "Devanagari"),
    _indic("sindhi", "sd", "سنڌي", "Arabic", rtl=True),
    _indic("nepali", "ne", "नेपाली", "Devanagari"),
    _indic("konkani", "kok", "कोंकणी", "Devanagari"),
    _indic("maithili", "mai", "मैथिली", "Devanagari"),
    _indic("santali", "sat", "ᱥᱟᱱᱛᱟᱲᱤ", "Ol Chiki", has_gender=False),
    _indic("bodo", "brx", "बड़ो", "Devanagari", has_gender=False),
    _indic("dogri", "doi", "डोगरी", "Devanagari"),
    _indic("manipuri", "mni", "মণিপুরী", "Bengali", has_gender=False),
    _indic("bhojpuri", "bho", "भोजपुरी", "Devanagari"),
    _indic("rajasthani", "raj", "राजस्थानी", "Devanagari"),
    _indic("magahi", "mag", "मगही", "Devanagari"),
    _indic("awadhi", "awa", "अवधी", "Devanagari"),
    _indic("chhattisgarhi", "hne", "छत्तीसगढ़ी", "Devanagari"),
    _indic("marwari", "rwr", "मारवाड़ी", "Devanagari"),
    _indic("haryanvi", "bgc", "हरियाणवी", "Devanagari"),
    _indic("kumaoni", "kfy", "कुमाऊँनी", "Devanagari"),
    _indic("garhwali", "gbm", "गढ़वाली", "Devanagari"),
    _indic("tulu", "tcy", "ತುಳು", "Kannada"),
    _indic("sinhala", "si", "සිංහල", "Sinhala", has_gender=False),
    LanguageProfile("mizo", "lus", "Mizo ṭawng", word_order=SOV, uses_postpositions=True),
    LanguageProfile("khasi", "kha", "Ka Ktien Khasi", has_gender=True, has_articles=True,
                    adjective_position=AFTER),
    LanguageProfile("garo", "grt", "A·chik", word_order=SOV, uses_postpositions=True),
    # European languages
    LanguageProfile("english", "en", "English", has_articles=True),
    _romance("spanish", "es", "Español"),
    _romance("french", "fr", "Français"),
    _romance("italian", "it", "Italiano"),
    _romance("portuguese", "pt", "Português"),
    _romance("romanian", "ro", "Română"),
    _romance("catalan", "ca", "Català"),
    LanguageProfile("german", "de", "Deutsch", has_gender=True, has_articles=True, has_cases=True),
    LanguageProfile("dutch", "nl", "Nederlands", has_gender=True, has_articles=True),
    LanguageProfile("swedish", "sv", "Svenska", has_gender=True, has_articles=True),
    LanguageProfile("norwegian", "no", "Norsk", has_gender=True, has_articles=True),
    LanguageProfile("danish", "da", "Dansk", has_gender=True, has_articles=True),
    LanguageProfile("finnish", "fi", "Suomi", has_cases=True, subject_dropping=True),
    LanguageProfile("polish", "pl", "Polski", has_gender=True, has_cases=True, subject_dropping=True),
    LanguageProfile("czech", "cs", "Čeština", has_gender=True, has_cases=True, subject_dropping=True),
    LanguageProfile("hungarian", "hu", "Magyar", has_articles=True, has_cases=True,
                    subject_dropping=True),
    LanguageProfile("greek", "el", "Ελληνικά", "Greek", has_gender=True, has_articles=True,
                    has_cases=True, subject_dropping=True),
    LanguageProfile("russian", "ru", "Русский", "Cyrillic", has_gender=True, has_cases=True),
    LanguageProfile("ukrainian", "uk", "Українська", "Cyrillic", has_gender=True, has_cases=True),
    LanguageProfile("bulgarian", "bg", "Български", "Cyrillic", has_gender=True, has_articles=True),
    LanguageProfile("serbian", "sr", "Српски", "Cyrillic", has_gender=True, has_cases=True),
    LanguageProfile("welsh", "cy", "Cymraeg", word_order=VSO, has_gender=True, has_articles=True,
                    adjective_position=AFTER),
    LanguageProfile("irish", "ga", "Gaeilge", word_order=VSO, has_gender=True, has_articles=True,
                    adjective_position=AFTER),
    # East and Southeast Asian languages
    LanguageProfile("chinese", "zh", "中文", "Han"),
    LanguageProfile("japanese", "ja", "日本語", "Japanese", word_order=SOV, uses_postpositions=True,
                    subject_dropping=True, has_honorifics=True, sentence_end_particle="か"),
    LanguageProfile("korean", "ko", "한국어", "Hangul", word_order=SOV, uses_postpositions=True,
                    subject_dropping=True, has_honorifics=True),
    LanguageProfile("thai", "th", "ไทย", "Thai", adjective_position=AFTER, subject_dropping=True,
                    has_honorifics=True),
    LanguageProfile("vietnamese", "vi", "Tiếng Việt", adjective_position=AFTER),
    LanguageProfile("indonesian", "id", "Bahasa Indonesia", adjective_position=AFTER),
    LanguageProfile("malay", "ms", "Bahasa Melayu", adjective_position=AFTER),
    LanguageProfile("tagalog", "tl", "Tagalog", word_order=VSO, has_articles=True),
    LanguageProfile("burmese", "my", "မြန်မာစာ", "Myanmar", word_order=SOV, adjective_position=AFTER,
                    uses_postpositions=True, subject_dropping=True),
    LanguageProfile("khmer", "km", "ភាសាខ្មែរ", "Khmer", adjective_position=AFTER),
    LanguageProfile("lao", "lo", "ພາສາລາວ", "Lao", adjective_position=AFTER),
    # Middle Eastern languages
    LanguageProfile("arabic", "ar", "العربية", "Arabic", rtl=True, word_order=VSO, has_gender=True,
                    has_articles=True, adjective_position=AFTER, has_cases=True,
                    subject_dropping=True),
    LanguageProfile("persian", "fa", "فارسی", "Arabic", rtl=True, word_order=SOV,
                    adjective_position=AFTER, subject_dropping=True),
    LanguageProfile("hebrew", "he", "עברית", "Hebrew", rtl=True, has_gender=True, has_articles=True,
                    adjective_position=AFTER),
    LanguageProfile("turkish", "tr", "Türkçe", word_order=SOV, uses_postpositions=True,
                    has_cases=True, subject_dropping=True),
    # African languages
    LanguageProfile("swahili", "sw", "Kiswahili", adjective_position=AFTER),
    LanguageProfile("amharic", "am", "አማርኛ", "Ethiopic", word_order=SOV, has_gender=True,
                    uses_postpositions=True),
    LanguageProfile("hausa", "ha", "Hausa", has_gender=True, adjective_position=AFTER),
    LanguageProfile("yoruba", "yo", "Yorùbá", adjective_position=AFTER),
    LanguageProfile("igbo", "ig", "Igbo", adjective_position=AFTER),
    LanguageProfile("zulu", "zu", "isiZulu", adjective_position=AFTER),
    LanguageProfile("afrikaans", "af", "Afrikaans", has_articles=True),
    LanguageProfile("somali", "so", "Soomaali", word_order=SOV, has_gender=True),
]

# Alternative names -> canonical name
LANGUAGE_ALIASES: Dict[str, str] = {
    "bangla": "bengali",
    "oriya": "odia",
    "farsi": "persian",
    "mandarin": "chinese",
    "chinese (mandarin)": "chinese",
    "hindustani": "hindi",
    "filipino": "tagalog",
    "panjabi": "punjabi",
    "sinhalese": "sinhala",
    "myanmar": "burmese",
    "hangul": "korean",
    "nihongo": "japanese",
    "meitei": "manipuri",
    "castilian": "spanish",
    "flemish": "dutch",
    "bokmal": "norwegian",
}

# (script, representative language, [(first, last) code point ranges])
# Order matters: the first block that matches wins.
UNICODE_BLOCKS: List[Tuple[str, str, List[Tuple[int, int]]]] = [
    ("Devanagari", "hindi", [(0x0900, 0x097F)]),
    ("Bengali", "bengali", [(0x0980, 0x09FF)]),
    ("Gurmukhi", "punjabi", [(0x0A00, 0x0A7F)]),
    ("Gujarati", "gujarati", [(0x0A80, 0x0AFF)]),
    ("Odia", "odia", [(0x0B00, 0x0B7F)]),
    ("Tamil", "tamil", [(0x0B80, 0x0BFF)]),
    ("Telugu", "telugu", [(0x0C00, 0x0C7F)]),
    ("Kannada", "kannada", [(0x0C80, 0x0CFF)]),
    ("Malayalam", "malayalam", [(0x0D00, 0x0D7F)]),
    ("Sinhala", "sinhala", [(0x0D80, 0x0DFF)]),
    ("Ol Chiki", "santali", [(0x1C50, 0x1C7F)]),
    ("Tibetan", "tibetan", [(0x0F00, 0x0FFF)]),
    ("Han", "chinese", [(0x4E00, 0x9FFF), (0x3400, 0x4DBF)]),
    ("Japanese", "japanese", [(0x3040, 0x309F), (0x30A0, 0x30FF)]),
    ("Hangul", "korean", [(0xAC00, 0xD7AF), (0x1100, 0x11FF)]),
    ("Thai", "thai", [(0x0E00, 0x0E7F)]),
    ("Lao", "lao", [(0x0E80, 0x0EFF)]),
    ("Myanmar", "burmese", [(0x1000, 0x109F)]),
    ("Khmer", "khmer", [(0x1780, 0x17FF)]),
    ("Arabic", "arabic", [(0x0600, 0x06FF), (0x0750, 0x077F), (0x08A0, 0x08FF)]),
    ("Hebrew", "hebrew", [(0x0590, 0x05FF)]),
    ("Cyrillic", "russian", [(0x0400, 0x04FF)]),
    ("Greek", "greek", [(0x0370, 0x03FF), (0x1F00, 0x1FFF)]),
    ("Georgian", "georgian", [(0x10A0, 0x10FF)]),
    ("Armenian", "armenian", [(0x0530, 0x058F)]),
    ("Ethiopic", "amharic", [(0x1200, 0x137F), (0x1380, 0x139F)]),
]

# Basic Latin, Latin-1 Supplement, Latin Extended-A/B, IPA, Latin Extended Additional
LATIN_RANGES: List[Tuple[int, int]] = [
    (0x0041, 0x005A),
    (0x0061, 0x007A),
    (0x00C0, 0x024F),
    (0x0250, 0x02AF),
    (0x1E00, 0x1EFF),
]

# Script-qualified codes used by model backends (NLLB-200 format)
NLLB_CODES: Dict[str, str] = {
    "english": "eng_Latn",
    "chinese": "zho_Hans",
    "spanish": "spa_Latn",
    "french": "fra_Latn",
    "german": "deu_Latn",
    "portuguese": "por_Latn",
    "russian": "rus_Cyrl",
    "japanese": "jpn_Jpan",
    "korean": "kor_Hang",
    "italian": "ita_Latn",
    "dutch": "nld_Latn",
    "polish": "pol_Latn",
    "turkish": "tur_Latn",
    "vietnamese": "vie_Latn",
    "thai": "tha_Thai",
    "indonesian": "ind_Latn",
    "greek": "ell_Grek",
    "czech": "ces_Latn",
    "romanian": "ron_Latn",
    "hungarian": "hun_Latn",
    "swedish": "swe_Latn",
    "danish": "dan_Latn",
    "finnish": "fin_Latn",
    "norwegian": "nob_Latn",
    "ukrainian": "ukr_Cyrl",
    "bulgarian": "bul_Cyrl",
    "serbian": "srp_Cyrl",
    "catalan": "cat_Latn",
    "welsh": "cym_Latn",
    "irish": "gle_Latn",
    "hebrew": "heb_Hebr",
    "arabic": "arb_Arab",
    "persian": "pes_Arab",
    "hindi": "hin_Deva",
    "bengali": "ben_Beng",
    "telugu": "tel_Telu",
    "tamil": "tam_Taml",
    "marathi": "mar_Deva",
    "gujarati": "guj_Gujr",
    "kannada": "kan_Knda",
    "malayalam": "mal_Mlym",
    "punjabi": "pan_Guru",
    "odia": "ory_Orya",
    "assamese": "asm_Beng",
    "urdu": "urd_Arab",
    "sanskrit": "san_Deva",
    "kashmiri": "kas_Deva",
    "sindhi": "snd_Arab",
    "nepali": "npi_Deva",
    "maithili": "mai_Deva",
    "santali": "sat_Olck",
    "manipuri": "mni_Beng",
    "bhojpuri": "bho_Deva",
    "magahi": "mag_Deva",
    "awadhi": "awa_Deva",
    "chhattisgarhi": "hne_Deva",
    "sinhala": "sin_Sinh",
    "mizo": "lus_Latn",
    "malay": "zsm_Latn",
    "tagalog": "tgl_Latn",
    "burmese": "mya_Mymr",
    "khmer": "khm_Khmr",
    "lao": "lao_Laoo",
    "swahili": "swh_Latn",
    "amharic": "amh_Ethi",
    "hausa": "hau_Latn",
    "yoruba": "yor_Latn",
    "igbo": "ibo_Latn",
    "zulu": "zul_Latn",
    "afrikaans": "afr_Latn",
    "somali": "som_Latn",
}
