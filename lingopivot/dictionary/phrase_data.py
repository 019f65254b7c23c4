"""Built-in common phrases and basic vocabulary.

Rows are English -> translations in the column order of the table's
language tuple. An empty cell means no translation.
"""

from typing import Dict, Sequence, Tuple

PHRASE_LANGS = (
    "spanish", "french", "german", "italian", "portuguese", "dutch", "russian",
    "hindi", "bengali", "telugu", "tamil", "kannada", "malayalam", "marathi",
    "gujarati", "punjabi", "urdu", "arabic", "persian", "turkish", "chinese",
    "japanese", "korean", "indonesian", "vietnamese",
)

PHRASE_ROWS: Sequence[Tuple[str, Tuple[str, ...]]] = (
    ("hello", (
        "hola", "bonjour", "hallo", "ciao", "olá", "hallo", "привет",
        "नमस्ते", "নমস্কার", "నమస్కారం", "வணக்கம்", "ನಮಸ್ಕಾರ", "നമസ്കാരം", "नमस्कार",
        "નમસ્તે", "ਸਤ ਸ੍ਰੀ ਅਕਾਲ", "السلام علیکم", "مرحبا", "سلام", "merhaba", "你好",
        "こんにちは", "안녕하세요", "halo", "xin chào",
    )),
    ("goodbye", (
        "adiós", "au revoir", "auf Wiedersehen", "arrivederci", "adeus", "tot ziens", "до свидания",
        "अलविदा", "বিদায়", "వీడ్కోలు", "போய் வருகிறேன்", "ಹೋಗಿ ಬನ್ನಿ", "വിട", "पुन्हा भेटू",
        "આવજો", "ਅਲਵਿਦਾ", "خدا حافظ", "مع السلامة", "خداحافظ", "hoşça kal", "再见",
        "さようなら", "안녕히 가세요", "selamat tinggal", "tạm biệt",
    )),
    ("thank you", (
        "gracias", "merci", "danke", "grazie", "obrigado", "dank je", "спасибо",
        "धन्यवाद", "ধন্যবাদ", "ధన్యవాదాలు", "நன்றி", "ಧನ್ಯವಾದ", "നന്ദി", "धन्यवाद",
        "આભાર", "ਧੰਨਵਾਦ", "شکریہ", "شكرا", "متشکرم", "teşekkür ederim", "谢谢",
        "ありがとう", "감사합니다", "terima kasih", "cảm ơn",
    )),
    ("please", (
        "por favor", "s'il vous plaît", "bitte", "per favore", "por favor", "alstublieft", "пожалуйста",
        "कृपया", "দয়া করে", "దయచేసి", "தயவுசெய்து", "ದಯವಿಟ್ಟು", "ദയവായി", "कृपया",
        "કૃપા કરીને", "ਕਿਰਪਾ ਕਰਕੇ", "براہ کرم", "من فضلك", "لطفا", "lütfen", "请",
        "お願いします", "부탁합니다", "tolong", "làm ơn",
    )),
    ("yes", (
        "sí", "oui", "ja", "sì", "sim", "ja", "да",
        "हाँ", "হ্যাঁ", "అవును", "ஆம்", "ಹೌದು", "അതെ", "हो",
        "હા", "ਹਾਂ", "جی ہاں", "نعم", "بله", "evet", "是",
        "はい", "네", "ya", "vâng",
    )),
    ("no", (
        "no", "non", "nein", "no", "não", "nee", "нет",
        "नहीं", "না", "కాదు", "இல்லை", "ಇಲ್ಲ", "ഇല്ല", "नाही",
        "ના", "ਨਹੀਂ", "نہیں", "لا", "نه", "hayır", "不",
        "いいえ", "아니요", "tidak", "không",
    )),
    ("sorry", (
        "lo siento", "désolé", "Entschuldigung", "scusa", "desculpe", "het spijt me", "извините",
        "माफ़ कीजिए", "দুঃখিত", "క్షమించండి", "மன்னிக்கவும்", "ಕ್ಷಮಿಸಿ", "ക്ഷമിക്കണം", "माफ करा",
        "માફ કરશો", "ਮਾਫ਼ ਕਰਨਾ", "معاف کیجیے", "آسف", "ببخشید", "özür dilerim", "对不起",
        "ごめんなさい", "죄송합니다", "maaf", "xin lỗi",
    )),
    ("i am fine", (
        "estoy bien", "je vais bien", "mir geht es gut", "sto bene", "estou bem", "het gaat goed",
        "у меня всё хорошо", "मैं ठीक हूँ", "আমি ভালো আছি", "నేను బాగున్నాను",
        "நான் நலமாக இருக்கிறேன்", "ನಾನು ಚೆನ್ನಾಗಿದ್ದೇನೆ", "എനിക്ക് സുഖമാണ്", "मी ठीक आहे",
        "હું ઠીક છું", "ਮੈਂ ਠੀਕ ਹਾਂ", "میں ٹھیک ہوں", "أنا بخير", "من خوبم", "iyiyim", "我很好",
        "元気です", "잘 지내요", "saya baik-baik saja", "tôi khỏe",
    )),
    ("what is your name", (
        "¿cómo te llamas?", "comment tu t'appelles?", "wie heißt du?", "come ti chiami?",
        "qual é o seu nome?", "hoe heet je?", "как тебя зовут?", "आपका नाम क्या है?",
        "আপনার নাম কি?", "మీ పేరు ఏమిటి?", "உங்கள் பெயர் என்ன?", "ನಿಮ್ಮ ಹೆಸರು ಏನು?",
        "നിങ്ങളുടെ പേര് എന്താണ്?", "तुमचे नाव काय आहे?", "તમારું નામ શું છે?", "ਤੁਹਾਡਾ ਨਾਮ ਕੀ ਹੈ?",
        "آپ کا نام کیا ہے؟", "ما اسمك؟", "اسم شما چیست؟", "adın ne?", "你叫什么名字？",
        "お名前は何ですか？", "이름이 뭐예요?", "siapa nama anda?", "bạn tên là gì?",
    )),
    ("nice to meet you", (
        "encantado de conocerte", "enchanté", "freut mich", "piacere di conoscerti",
        "prazer em conhecê-lo", "aangenaam", "приятно познакомиться", "आपसे मिलकर खुशी हुई",
        "আপনার সাথে দেখা করে ভালো লাগলো", "మిమ్మల్ని కలవడం సంతోషం", "உங்களை சந்தித்ததில் மகிழ்ச்சி",
        "ನಿಮ್ಮನ್ನು ಭೇಟಿಯಾಗಿ ಸಂತೋಷವಾಯಿತು", "നിങ്ങളെ കണ്ടതിൽ സന്തോഷം", "तुम्हाला भेटून आनंद झाला",
        "તમને મળીને આનંદ થયો", "ਤੁਹਾਨੂੰ ਮਿਲ ਕੇ ਖੁਸ਼ੀ ਹੋਈ", "آپ سے مل کر خوشی ہوئی", "تشرفت بمعرفتك",
        "از آشنایی با شما خوشبختم", "tanıştığıma memnun oldum", "很高兴认识你", "はじめまして",
        "만나서 반갑습니다", "senang bertemu dengan anda", "rất vui được gặp bạn",
    )),
)

VOCABULARY_LANGS = (
    "spanish", "french", "german", "portuguese", "russian",
    "hindi", "bengali", "telugu", "tamil", "arabic",
)

VOCABULARY_ROWS: Sequence[Tuple[str, Tuple[str, ...]]] = (
    ("i", ("yo", "je", "ich", "eu", "я", "मैं", "আমি", "నేను", "நான்", "أنا")),
    ("you", ("tú", "tu", "du", "você", "ты", "तुम", "তুমি", "నువ్వు", "நீ", "أنت")),
    ("we", ("nosotros", "nous", "wir", "nós", "мы", "हम", "আমরা", "మేము", "நாங்கள்", "نحن")),
    ("he", ("él", "il", "er", "ele", "он", "वह", "সে", "అతను", "அவன்", "هو")),
    ("she", ("ella", "elle", "sie", "ela", "она", "वह", "সে", "ఆమె", "அவள்", "هي")),
    ("they", ("ellos", "ils", "sie", "eles", "они", "वे", "তারা", "వారు", "அவர்கள்", "هم")),
    ("my", ("mi", "mon", "mein", "meu", "мой", "मेरा", "আমার", "నా", "என்", "لي")),
    ("your", ("tu", "ton", "dein", "seu", "твой", "तुम्हारा", "তোমার", "నీ", "உன்", "لك")),
    ("love", ("amar", "aimer", "lieben", "amar", "любить", "प्यार", "ভালোবাসা", "ప్రేమ", "அன்பு", "أحب")),
    ("like", ("gustar", "aimer", "mögen", "gostar", "нравиться", "पसंद", "পছন্দ", "ఇష్టం", "பிடிக்கும்", "يعجب")),
    ("eat", ("comer", "manger", "essen", "comer", "есть", "खाना", "খাওয়া", "తిను", "சாப்பிடு", "يأكل")),
    ("drink", ("beber", "boire", "trinken", "beber", "пить", "पीना", "পান করা", "తాగు", "குடி", "يشرب")),
    ("go", ("ir", "aller", "gehen", "ir", "идти", "जाना", "যাওয়া", "వెళ్ళు", "போ", "يذهب")),
    ("come", ("venir", "venir", "kommen", "vir", "приходить", "आना", "আসা", "రా", "வா", "يأتي")),
    ("see", ("ver", "voir", "sehen", "ver", "видеть", "देखना", "দেখা", "చూడు", "பார்", "يرى")),
    ("want", ("querer", "vouloir", "wollen", "querer", "хотеть", "चाहना", "চাওয়া", "కావాలి", "வேண்டும்", "يريد")),
    ("know", ("saber", "savoir", "wissen", "saber", "знать", "जानना", "জানা", "తెలుసు", "தெரியும்", "يعرف")),
    ("speak", ("hablar", "parler", "sprechen", "falar", "говорить", "बोलना", "বলা", "మాట్లాడు", "பேசு", "يتكلم")),
    ("cat", ("gato", "chat", "Katze", "gato", "кошка", "बिल्ली", "বিড়াল", "పిల్లి", "பூனை", "قطة")),
    ("cats", ("gatos", "chats", "Katzen", "gatos", "кошки", "बिल्लियाँ", "বিড়ালগুলো", "పిల్లులు", "பூனைகள்", "قطط")),
    ("dog", ("perro", "chien", "Hund", "cachorro", "собака", "कुत्ता", "কুকুর", "కుక్క", "நாய்", "كلب")),
    ("dogs", ("perros", "chiens", "Hunde", "cachorros", "собаки", "कुत्ते", "কুকুরগুলো", "కుక్కలు", "நாய்கள்", "كلاب")),
    ("water", ("agua", "eau", "Wasser", "água", "вода", "पानी", "জল", "నీరు", "தண்ணீர்", "ماء")),
    ("food", ("comida", "nourriture", "Essen", "comida", "еда", "भोजन", "খাবার", "ఆహారం", "உணவு", "طعام")),
    ("friend", ("amigo", "ami", "Freund", "amigo", "друг", "दोस्त", "বন্ধু", "స్నేహితుడు", "நண்பன்", "صديق")),
    ("house", ("casa", "maison", "Haus", "casa", "дом", "घर", "বাড়ি", "ఇల్లు", "வீடு", "بيت")),
    ("book", ("libro", "livre", "Buch", "livro", "книга", "किताब", "বই", "పుస్తకం", "புத்தகம்", "كتاب")),
    ("car", ("coche", "voiture", "Auto", "carro", "машина", "गाड़ी", "গাড়ি", "కారు", "கார்", "سيارة")),
    ("today", ("hoy", "aujourd'hui", "heute", "hoje", "сегодня", "आज", "আজ", "ఈరోజు", "இன்று", "اليوم")),
    ("tomorrow", ("mañana", "demain", "morgen", "amanhã", "завтра", "कल", "আগামীকাল", "రేపు", "நாளை", "غدا")),
    ("good", ("bueno", "bon", "gut", "bom", "хороший", "अच्छा", "ভালো", "మంచి", "நல்ல", "جيد")),
    ("bad", ("malo", "mauvais", "schlecht", "mau", "плохой", "बुरा", "খারাপ", "చెడు", "கெட்ட", "سيء")),
    ("big", ("grande", "grand", "groß", "grande", "большой", "बड़ा", "বড়", "పెద్ద", "பெரிய", "كبير")),
    ("small", ("pequeño", "petit", "klein", "pequeno", "маленький", "छोटा", "ছোট", "చిన్న", "சிறிய", "صغير")),
    ("beautiful", ("hermoso", "beau", "schön", "bonito", "красивый", "सुंदर", "সুন্দর", "అందమైన", "அழகான", "جميل")),
    ("happy", ("feliz", "heureux", "glücklich", "feliz", "счастливый", "खुश", "খুশি", "సంతోషం", "மகிழ்ச்சி", "سعيد")),
    ("red", ("rojo", "rouge", "rot", "vermelho", "красный", "लाल", "লাল", "ఎరుపు", "சிவப்பு", "أحمر")),
    ("very", ("muy", "très", "sehr", "muito", "очень", "बहुत", "খুব", "చాలా", "மிகவும்", "جدا")),
    ("and", ("y", "et", "und", "e", "и", "और", "এবং", "మరియు", "மற்றும்", "و")),
    ("with", ("con", "avec", "mit", "com", "с", "साथ", "সঙ্গে", "తో", "உடன்", "مع")),
    ("not", ("no", "pas", "nicht", "não", "не", "नहीं", "না", "కాదు", "இல்லை", "لا")),
)


def _build(languages: Tuple[str, ...], rows) -> Dict[str, Dict[str, str]]:
    table: Dict[str, Dict[str, str]] = {}
    for english, cells in rows:
        table[english] = {lang: cell for lang, cell in zip(languages, cells) if cell}
    return table


def builtin_phrases() -> Dict[str, Dict[str, str]]:
    """Get a fresh English -> {language: translation} table."""
    table = _build(PHRASE_LANGS, PHRASE_ROWS)
    table.update(_build(VOCABULARY_LANGS, VOCABULARY_ROWS))
    return table
