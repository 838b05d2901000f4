from base.BaseData import BaseData


class BaseLanguage(BaseData):

    EN: str = "EN"                                          # 英文 (English)
    FR: str = "FR"                                          # 法文 (French)
    DE: str = "DE"                                          # 德文 (German)
    ES: str = "ES"                                          # 西班牙文 (Spanish)
    IT: str = "IT"                                          # 意大利文 (Italian)
    PT: str = "PT"                                          # 葡萄牙文 (Portuguese)
    PL: str = "PL"                                          # 波兰文 (Polish)
    RU: str = "RU"                                          # 俄文 (Russian)
    TR: str = "TR"                                          # 土耳其文 (Turkish)
    JA: str = "JA"                                          # 日文 (Japanese)
    KO: str = "KO"                                          # 韩文 (Korean)
    ZH: str = "ZH"                                          # 中文 (Chinese)

    # 语言代码 -> 英文名称 / Ren'Py tl 目录名
    LANGUAGE_NAMES = {
        EN: {"en": "English", "renpy": "english"},
        FR: {"en": "French", "renpy": "french"},
        DE: {"en": "German", "renpy": "german"},
        ES: {"en": "Spanish", "renpy": "spanish"},
        IT: {"en": "Italian", "renpy": "italian"},
        PT: {"en": "Portuguese", "renpy": "portuguese"},
        PL: {"en": "Polish", "renpy": "polish"},
        RU: {"en": "Russian", "renpy": "russian"},
        TR: {"en": "Turkish", "renpy": "turkish"},
        JA: {"en": "Japanese", "renpy": "japanese"},
        KO: {"en": "Korean", "renpy": "korean"},
        ZH: {"en": "Chinese", "renpy": "schinese"},
    }

    @classmethod
    def get_name_en(cls, language: str) -> str:
        return cls.LANGUAGE_NAMES.get(language.upper(), {}).get("en", "")

    @classmethod
    def get_renpy_name(cls, language: str) -> str:
        return cls.LANGUAGE_NAMES.get(language.upper(), {}).get("renpy", "")

    @classmethod
    def get_languages(cls) -> list[str]:
        return list(cls.LANGUAGE_NAMES.keys())
