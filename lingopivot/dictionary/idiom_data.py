"""Built-in English idioms and colloquial expressions with equivalents."""

from typing import Dict, List

from ..models.idiom_entry import IdiomCategory, IdiomEntry, Register

_IDIOM_LANGS = (
    "spanish", "french", "german", "italian", "portuguese", "hindi",
    "arabic", "chinese", "japanese", "korean", "russian",
)

_COLLOQUIAL_LANGS = (
    "spanish", "french", "german", "italian", "portuguese", "hindi", "bengali",
    "tamil", "telugu", "kannada", "malayalam", "gujarati", "marathi", "punjabi",
    "arabic", "chinese", "japanese", "korean", "russian", "turkish", "thai",
    "vietnamese", "indonesian",
)


def _entry(phrase, meaning, languages, translations, category=IdiomCategory.IDIOM,
           register=Register.NEUTRAL, **extra) -> IdiomEntry:
    mapping: Dict[str, str] = dict(zip(languages, translations))
    mapping.update(extra)
    return IdiomEntry(
        phrase=phrase,
        meaning=meaning,
        translations=mapping,
        category=category,
        register=register,
    )


IDIOMS: List[IdiomEntry] = [
    _entry("kick the bucket", "to die", _IDIOM_LANGS, (
        "estirar la pata", "casser sa pipe", "ins Gras beißen", "tirare le cuoia",
        "bater as botas", "चल बसना", "انتقل إلى رحمة الله", "翘辫子", "亡くなる",
        "세상을 떠나다", "сыграть в ящик",
    ), register=Register.INFORMAL),
    _entry("break a leg", "good luck (especially in performing arts)", _IDIOM_LANGS, (
        "mucha mierda", "merde", "Hals- und Beinbruch", "in bocca al lupo", "boa sorte",
        "शुभकामनाएं", "حظ سعيد", "祝你好运", "頑張って", "행운을 빌어요", "ни пуха, ни пера",
    ), register=Register.INFORMAL),
    _entry("piece of cake", "something very easy", _IDIOM_LANGS, (
        "pan comido", "c'est du gâteau", "ein Kinderspiel", "una passeggiata", "moleza",
        "बाएं हाथ का खेल", "سهل جداً", "小菜一碟", "朝飯前", "식은 죽 먹기", "пара пустяков",
    ), register=Register.INFORMAL),
    _entry("raining cats and dogs", "raining very heavily", _IDIOM_LANGS, (
        "llueve a cántaros", "il pleut des cordes", "es regnet in Strömen", "piove a catinelle",
        "chovendo canivetes", "मूसलाधार बारिश", "تمطر بغزارة", "倾盆大雨", "土砂降り",
        "비가 억수같이 오다", "льёт как из ведра",
    ), register=Register.INFORMAL),
    _entry("cost an arm and a leg", "very expensive", _IDIOM_LANGS, (
        "costar un ojo de la cara", "coûter les yeux de la tête", "ein Vermögen kosten",
        "costare un occhio della testa", "custar os olhos da cara", "बहुत महंगा", "يكلف ثروة",
        "价值连城", "目の玉が飛び出るほど高い", "팔다리가 빠지는 값", "стоить целое состояние",
    ), register=Register.INFORMAL),
    _entry("hit the nail on the head", "to be exactly right", _IDIOM_LANGS, (
        "dar en el clavo", "mettre le doigt dessus", "den Nagel auf den Kopf treffen",
        "colpire nel segno", "acertar na mosca", "बिल्कुल सही कहना", "أصاب كبد الحقيقة",
        "一针见血", "的を射る", "정곡을 찌르다", "попасть в точку",
    )),
    _entry("beat around the bush", "to avoid getting to the point", _IDIOM_LANGS, (
        "andarse por las ramas", "tourner autour du pot", "um den heißen Brei herumreden",
        "menare il can per l'aia", "enrolar", "इधर-उधर की बात करना", "يلف ويدور", "拐弯抹角",
        "遠回しに言う", "빙빙 돌려 말하다", "ходить вокруг да около",
    )),
    _entry("once in a blue moon", "very rarely", _IDIOM_LANGS, (
        "de higos a brevas", "tous les trente-six du mois", "alle Jubeljahre",
        "una volta ogni morte di papa", "de vez em quando", "कभी-कभार", "نادراً جداً", "千载难逢",
        "ごく稀に", "아주 드물게", "в кои-то веки",
    )),
    _entry("let the cat out of the bag", "to reveal a secret", _IDIOM_LANGS, (
        "descubrir el pastel", "vendre la mèche", "die Katze aus dem Sack lassen",
        "vuotare il sacco", "soltar a língua", "राज़ खोलना", "كشف السر", "泄露秘密",
        "秘密をばらす", "비밀을 누설하다", "проболтаться",
    ), register=Register.INFORMAL),
    _entry("under the weather", "feeling ill or unwell", _IDIOM_LANGS, (
        "estar pachucho", "être patraque", "angeschlagen sein", "sentirsi poco bene",
        "estar adoentado", "तबीयत ठीक नहीं", "أشعر بتوعك", "身体不适", "体調が悪い",
        "몸이 안 좋다", "неважно себя чувствовать",
    ), register=Register.INFORMAL),
    _entry("the ball is in your court", "it is your decision or responsibility now", _IDIOM_LANGS, (
        "la pelota está en tu tejado", "la balle est dans ton camp", "der Ball liegt bei dir",
        "la palla è nel tuo campo", "a bola está no seu campo", "अब यह तुम पर निर्भर है",
        "الكرة في ملعبك", "轮到你了", "あなた次第です", "당신 차례입니다", "мяч на твоей стороне",
    )),
    _entry("bite off more than you can chew", "to take on more than you can handle", _IDIOM_LANGS, (
        "abarcar más de lo que puedes", "avoir les yeux plus gros que le ventre", "sich übernehmen",
        "fare il passo più lungo della gamba", "dar um passo maior que a perna",
        "अपनी हद से ज़्यादा लेना", "يحمل أكثر من طاقته", "贪多嚼不烂", "無理をする", "무리하다",
        "откусить больше, чем можешь прожевать",
    )),
    _entry("get out of hand", "to get out of control", _IDIOM_LANGS, (
        "írsele de las manos", "échapper à tout contrôle", "außer Kontrolle geraten",
        "sfuggire di mano", "sair do controle", "हाथ से निकल जाना", "يخرج عن السيطرة", "失控",
        "手に負えなくなる", "통제불능이 되다", "выйти из-под контроля",
    )),
    _entry("add insult to injury", "to make a bad situation worse", _IDIOM_LANGS, (
        "para colmo de males", "ajouter l'insulte à l'injure", "noch eins draufsetzen",
        "oltre al danno la beffa", "para piorar as coisas", "जले पर नमक छिड़कना", "زاد الطين بلة",
        "雪上加霜", "泣きっ面に蜂", "설상가상", "подливать масла в огонь",
    )),
    _entry("back to square one", "back to the beginning", _IDIOM_LANGS, (
        "volver a empezar de cero", "retour à la case départ", "wieder bei null anfangen",
        "tornare al punto di partenza", "voltar à estaca zero", "फिर से शुरू करना",
        "العودة إلى نقطة البداية", "回到原点", "振り出しに戻る", "원점으로 돌아가다",
        "вернуться к исходной точке",
    )),
    # Greetings and everyday expressions
    _entry("how are you", "asking about wellbeing", _COLLOQUIAL_LANGS, (
        "¿cómo estás?", "comment allez-vous?", "wie geht es dir?", "come stai?",
        "como você está?", "आप कैसे हैं?", "আপনি কেমন আছেন?", "நீங்கள் எப்படி இருக்கிறீர்கள்?",
        "మీరు ఎలా ఉన్నారు?", "ನೀವು ಹೇಗಿದ್ದೀರಿ?", "നിങ്ങൾ എങ്ങനെയുണ്ട്?", "તમે કેમ છો?",
        "तुम्ही कसे आहात?", "ਤੁਸੀਂ ਕਿਵੇਂ ਹੋ?", "كيف حالك؟", "你好吗？", "お元気ですか？",
        "어떻게 지내세요?", "как дела?", "nasılsınız?", "สบายดีไหม?", "bạn khỏe không?", "apa kabar?",
    ), category=IdiomCategory.COLLOQUIAL),
    _entry("thank you very much", "expressing gratitude", _COLLOQUIAL_LANGS, (
        "muchas gracias", "merci beaucoup", "vielen Dank", "grazie mille", "muito obrigado",
        "बहुत धन्यवाद", "অনেক ধন্যবাদ", "மிக்க நன்றி", "చాలా ధన్యవాదాలు", "ತುಂಬಾ ಧನ್ಯವಾದಗಳು",
        "വളരെ നന്ദി", "ખૂબ ખૂબ આભાર", "खूप खूप धन्यवाद", "ਬਹੁਤ ਧੰਨਵਾਦ", "شكرا جزيلا", "非常感谢",
        "どうもありがとうございます", "대단히 감사합니다", "большое спасибо", "çok teşekkür ederim",
        "ขอบคุณมาก", "cảm ơn rất nhiều", "terima kasih banyak",
    ), category=IdiomCategory.COLLOQUIAL),
    _entry("i love you", "expressing love", _COLLOQUIAL_LANGS, (
        "te quiero", "je t'aime", "ich liebe dich", "ti amo", "eu te amo",
        "मैं तुमसे प्यार करता हूं", "আমি তোমাকে ভালোবাসি", "நான் உன்னை காதலிக்கிறேன்",
        "నేను నిన్ను ప్రేమిస్తున్నాను", "ನಾನು ನಿನ್ನನ್ನು ಪ್ರೀತಿಸುತ್ತೇನೆ", "ഞാൻ നിന്നെ സ്നേഹിക്കുന്നു",
        "હું તને પ્રેમ કરું છું", "मी तुझ्यावर प्रेम करतो", "ਮੈਂ ਤੈਨੂੰ ਪਿਆਰ ਕਰਦਾ ਹਾਂ", "أنا أحبك",
        "我爱你", "愛してる", "사랑해요", "я тебя люблю", "seni seviyorum", "ฉันรักคุณ",
        "tôi yêu bạn", "aku cinta kamu",
    ), category=IdiomCategory.COLLOQUIAL, register=Register.INFORMAL,
        urdu="میں تم سے محبت کرتا ہوں"),
    _entry("good morning", "morning greeting", _COLLOQUIAL_LANGS, (
        "buenos días", "bonjour", "guten Morgen", "buongiorno", "bom dia", "सुप्रभात",
        "সুপ্রভাত", "காலை வணக்கம்", "శుభోదయం", "ಶುಭೋದಯ", "സുപ്രഭാതം", "સુપ્રભાત", "सुप्रभात",
        "ਸ਼ੁਭ ਸਵੇਰ", "صباح الخير", "早上好", "おはようございます", "좋은 아침이에요", "доброе утро",
        "günaydın", "สวัสดีตอนเช้า", "chào buổi sáng", "selamat pagi",
    ), category=IdiomCategory.COLLOQUIAL),
    _entry("good night", "night farewell", _COLLOQUIAL_LANGS, (
        "buenas noches", "bonne nuit", "gute Nacht", "buonanotte", "boa noite", "शुभ रात्रि",
        "শুভ রাত্রি", "இனிய இரவு", "శుభ రాత్రి", "ಶುಭ ರಾತ್ರಿ", "ശുഭരാത്രി", "શુભ રાત્રી", "शुभ रात्री",
        "ਸ਼ੁਭ ਰਾਤ", "تصبح على خير", "晚安", "おやすみなさい", "좋은 밤 되세요", "спокойной ночи",
        "iyi geceler", "ราตรีสวัสดิ์", "chúc ngủ ngon", "selamat malam",
    ), category=IdiomCategory.COLLOQUIAL),
]
