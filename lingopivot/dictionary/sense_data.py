"""Built-in senses for common ambiguous English words."""

from typing import Dict, List

from ..models.idiom_entry import WordSense

_LANGS = ("spanish", "french", "german", "hindi", "chinese", "japanese", "arabic")


def _sense(sense_id: str, meaning: str, clues: str, *translations: str) -> WordSense:
    return WordSense(
        id=sense_id,
        meaning=meaning,
        context_clues=clues.split(","),
        translations=dict(zip(_LANGS, translations)),
    )


# Sense order matters: the first sense is the default when no clue matches
AMBIGUOUS_WORDS: Dict[str, List[WordSense]] = {
    "bank": [
        _sense("bank_financial", "financial institution",
               "money,account,deposit,withdraw,loan,credit,atm,savings,interest,mortgage,finance,banking,teller",
               "banco", "banque", "Bank", "बैंक", "银行", "銀行", "بنك"),
        _sense("bank_river", "side of a river",
               "river,water,stream,fish,shore,riverside,lake,pond,creek,flow",
               "orilla", "rive", "Ufer", "किनारा", "河岸", "岸", "ضفة"),
    ],
    "bat": [
        _sense("bat_animal", "flying mammal",
               "fly,night,cave,vampire,wing,nocturnal,animal,mammal,echo,blind",
               "murciélago", "chauve-souris", "Fledermaus", "चमगादड़", "蝙蝠", "コウモリ", "خفاش"),
        _sense("bat_sports", "sports equipment",
               "baseball,cricket,hit,ball,swing,game,player,sport,innings,pitch,home run",
               "bate", "batte", "Schläger", "बल्ला", "球棒", "バット", "مضرب"),
    ],
    "hot": [
        _sense("hot_temperature", "high temperature",
               "weather,sun,summer,heat,warm,cold,temperature,fire,burning,boiling,sweat",
               "caliente", "chaud", "heiß", "गर्म", "热的", "暑い", "حار"),
        _sense("hot_spicy", "spicy food",
               "food,pepper,spicy,chili,taste,mouth,eat,curry,sauce,dish",
               "picante", "épicé", "scharf", "तीखा", "辣", "辛い", "حار"),
        _sense("hot_attractive", "sexually attractive (slang)",
               "sexy,attractive,look,person,girl,guy,model,gorgeous,beautiful",
               "guapo", "sexy", "heiß", "आकर्षक", "性感", "セクシー", "جذاب"),
    ],
    "run": [
        _sense("run_movement", "move quickly on foot",
               "fast,jog,sprint,marathon,race,exercise,leg,foot,athlete,track",
               "correr", "courir", "laufen", "दौड़ना", "跑", "走る", "يركض"),
        _sense("run_operate", "operate or manage",
               "business,company,manage,operate,machine,program,software,engine",
               "operar", "gérer", "betreiben", "चलाना", "运行", "運営する", "يشغل"),
    ],
    "light": [
        _sense("light_illumination", "electromagnetic radiation",
               "sun,lamp,bright,dark,shine,bulb,switch,ray,beam,glow",
               "luz", "lumière", "Licht", "रोशनी", "光", "光", "ضوء"),
        _sense("light_weight", "not heavy",
               "weight,heavy,carry,lift,feather,kg,pound,portable",
               "ligero", "léger", "leicht", "हल्का", "轻", "軽い", "خفيف"),
    ],
    "spring": [
        _sense("spring_season", "season after winter",
               "season,winter,summer,flower,bloom,april,march,weather",
               "primavera", "printemps", "Frühling", "वसंत", "春天", "春", "ربيع"),
        _sense("spring_water", "water source",
               "water,natural,mineral,fountain,source,fresh,drink",
               "manantial", "source", "Quelle", "झरना", "泉水", "泉", "نبع"),
        _sense("spring_coil", "elastic device",
               "coil,bounce,mattress,metal,elastic,jump,mechanical",
               "resorte", "ressort", "Feder", "स्प्रिंग", "弹簧", "ばね", "نابض"),
    ],
    "cold": [
        _sense("cold_temperature", "low temperature",
               "weather,winter,freeze,ice,snow,warm,hot,temperature",
               "frío", "froid", "kalt", "ठंडा", "冷", "寒い", "بارد"),
        _sense("cold_illness", "common illness",
               "sick,flu,sneeze,cough,fever,medicine,doctor,symptom,nose",
               "resfriado", "rhume", "Erkältung", "सर्दी", "感冒", "風邪", "زكام"),
    ],
    "present": [
        _sense("present_gift", "a gift",
               "gift,birthday,christmas,wrap,give,receive,box,surprise",
               "regalo", "cadeau", "Geschenk", "उपहार", "礼物", "プレゼント", "هدية"),
        _sense("present_time", "current time",
               "now,current,today,time,moment,past,future,tense",
               "presente", "présent", "Gegenwart", "वर्तमान", "现在", "現在", "حاضر"),
    ],
    "fair": [
        _sense("fair_just", "just and equitable",
               "justice,equal,unfair,right,honest,treatment,judge",
               "justo", "juste", "fair", "निष्पक्ष", "公平", "公正な", "عادل"),
        _sense("fair_event", "carnival or exhibition",
               "carnival,exhibition,ride,booth,festival,county,fun",
               "feria", "foire", "Messe", "मेला", "集市", "フェア", "معرض"),
        _sense("fair_light", "light colored (skin/hair)",
               "skin,hair,complexion,light,pale,blonde,color",
               "claro", "clair", "hell", "गोरा", "白皙", "色白の", "فاتح"),
    ],
}

DOMAIN_KEYWORDS: Dict[str, List[str]] = {
    "sports": ["game", "player", "team", "score", "win", "lose"],
    "finance": ["money", "account", "payment", "bank", "credit"],
    "casual": ["friend", "chat", "fun", "like", "love"],
}
