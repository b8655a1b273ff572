"""Language code reference table and its first-wins lookup index."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Sequence


@dataclass(frozen=True, slots=True)
class LanguageEntry:
    """A language code paired with its human readable name."""

    code: str
    name: str

    def to_dict(self) -> Dict[str, str]:
        return {"code": self.code, "name": self.name}


UNKNOWN_LANGUAGE = LanguageEntry(code="", name="Unknown")

LANGUAGE_TABLE: tuple[LanguageEntry, ...] = (
    LanguageEntry("af", "Afrikaans"),
    LanguageEntry("af-ZA", "Afrikaans (South Africa)"),
    LanguageEntry("sq", "Albanian"),
    LanguageEntry("sq-AL", "Albanian (Albania)"),
    LanguageEntry("am", "Amharic"),
    LanguageEntry("ar", "Arabic"),
    LanguageEntry("ar-DZ", "Arabic (Algeria)"),
    LanguageEntry("ar-BH", "Arabic (Bahrain)"),
    LanguageEntry("ar-EG", "Arabic (Egypt)"),
    LanguageEntry("ar-IQ", "Arabic (Iraq)"),
    LanguageEntry("ar-JO", "Arabic (Jordan)"),
    LanguageEntry("ar-KW", "Arabic (Kuwait)"),
    LanguageEntry("ar-LB", "Arabic (Lebanon)"),
    LanguageEntry("ar-LY", "Arabic (Libya)"),
    LanguageEntry("ar-MA", "Arabic (Morocco)"),
    LanguageEntry("ar-OM", "Arabic (Oman)"),
    LanguageEntry("ar-QA", "Arabic (Qatar)"),
    LanguageEntry("ar-SA", "Arabic (Saudi Arabia)"),
    LanguageEntry("ar-SY", "Arabic (Syria)"),
    LanguageEntry("ar-TN", "Arabic (Tunisia)"),
    LanguageEntry("ar-AE", "Arabic (U.A.E.)"),
    LanguageEntry("ar-YE", "Arabic (Yemen)"),
    LanguageEntry("hy", "Armenian"),
    LanguageEntry("hy-AM", "Armenian (Armenia)"),
    LanguageEntry("as", "Assamese"),
    LanguageEntry("ay", "Aymara"),
    LanguageEntry("az-AZ", "Azeri (Cyrillic) (Azerbaijan)"),
    LanguageEntry("az", "Azeri (Latin)"),
    LanguageEntry("az-AZ", "Azeri (Latin) (Azerbaijan)"),
    LanguageEntry("bm", "Bambara"),
    LanguageEntry("eu", "Basque"),
    LanguageEntry("eu-ES", "Basque (Spain)"),
    LanguageEntry("be", "Belarusian"),
    LanguageEntry("be-BY", "Belarusian (Belarus)"),
    LanguageEntry("bn", "Bengali"),
    LanguageEntry("bho", "Bhojpuri"),
    LanguageEntry("bs", "Bosnian"),
    LanguageEntry("bs-BA", "Bosnian (Bosnia and Herzegovina)"),
    LanguageEntry("bg", "Bulgarian"),
    LanguageEntry("bg-BG", "Bulgarian (Bulgaria)"),
    LanguageEntry("ca", "Catalan"),
    LanguageEntry("ca-ES", "Catalan (Spain)"),
    LanguageEntry("ceb", "Cebuano"),
    LanguageEntry("ny", "Chichewa"),
    LanguageEntry("zh", "Chinese"),
    LanguageEntry("zh-HK", "Chinese (Hong Kong)"),
    LanguageEntry("zh-MO", "Chinese (Macau)"),
    LanguageEntry("zh-CN", "Chinese (S)"),
    LanguageEntry("zh-SG", "Chinese (Singapore)"),
    LanguageEntry("zh-TW", "Chinese (T)"),
    LanguageEntry("co", "Corsican"),
    LanguageEntry("hr", "Croatian"),
    LanguageEntry("hr-BA", "Croatian (Bosnia and Herzegovina)"),
    LanguageEntry("hr-HR", "Croatian (Croatia)"),
    LanguageEntry("cs", "Czech"),
    LanguageEntry("cs-CZ", "Czech (Czech Republic)"),
    LanguageEntry("da", "Danish"),
    LanguageEntry("da-DK", "Danish (Denmark)"),
    LanguageEntry("dv", "Divehi"),
    LanguageEntry("dv-MV", "Divehi (Maldives)"),
    LanguageEntry("doi", "Dogri"),
    LanguageEntry("nl", "Dutch"),
    LanguageEntry("nl-BE", "Dutch (Belgium)"),
    LanguageEntry("nl-NL", "Dutch (Netherlands)"),
    LanguageEntry("en", "English"),
    LanguageEntry("en-AU", "English (Australia)"),
    LanguageEntry("en-BZ", "English (Belize)"),
    LanguageEntry("en-CA", "English (Canada)"),
    LanguageEntry("en-CB", "English (Caribbean)"),
    LanguageEntry("en-IE", "English (Ireland)"),
    LanguageEntry("en-JM", "English (Jamaica)"),
    LanguageEntry("en-NZ", "English (New Zealand)"),
    LanguageEntry("en-PH", "English (Republic of the Philippines)"),
    LanguageEntry("en-ZA", "English (South Africa)"),
    LanguageEntry("en-TT", "English (Trinidad and Tobago)"),
    LanguageEntry("en-GB", "English (United Kingdom)"),
    LanguageEntry("en-US", "English (United States)"),
    LanguageEntry("en-ZW", "English (Zimbabwe)"),
    LanguageEntry("eo", "Esperanto"),
    LanguageEntry("et", "Estonian"),
    LanguageEntry("et-EE", "Estonian (Estonia)"),
    LanguageEntry("ee", "Ewe"),
    LanguageEntry("fo", "Faroese"),
    LanguageEntry("fo-FO", "Faroese (Faroe Islands)"),
    LanguageEntry("fa", "Farsi"),
    LanguageEntry("fa-IR", "Farsi (Iran)"),
    LanguageEntry("fi", "Finnish"),
    LanguageEntry("fi-FI", "Finnish (Finland)"),
    LanguageEntry("fr", "French"),
    LanguageEntry("fr-BE", "French (Belgium)"),
    LanguageEntry("fr-CA", "French (Canada)"),
    LanguageEntry("fr-FR", "French (France)"),
    LanguageEntry("fr-LU", "French (Luxembourg)"),
    LanguageEntry("fr-MC", "French (Principality of Monaco)"),
    LanguageEntry("fr-CH", "French (Switzerland)"),
    LanguageEntry("fy", "Frisian"),
    LanguageEntry("mk", "FYRO Macedonian"),
    LanguageEntry("mk-MK", "FYRO Macedonian (Former Yugoslav Republic of Macedonia)"),
    LanguageEntry("gl", "Galician"),
    LanguageEntry("gl-ES", "Galician (Spain)"),
    LanguageEntry("ka", "Georgian"),
    LanguageEntry("ka-GE", "Georgian (Georgia)"),
    LanguageEntry("de", "German"),
    LanguageEntry("de-AT", "German (Austria)"),
    LanguageEntry("de-DE", "German (Germany)"),
    LanguageEntry("de-LI", "German (Liechtenstein)"),
    LanguageEntry("de-LU", "German (Luxembourg)"),
    LanguageEntry("de-CH", "German (Switzerland)"),
    LanguageEntry("el", "Greek"),
    LanguageEntry("el-GR", "Greek (Greece)"),
    LanguageEntry("gn", "Guarani"),
    LanguageEntry("gu", "Gujarati"),
    LanguageEntry("gu-IN", "Gujarati (India)"),
    LanguageEntry("ht", "Haitian Creole"),
    LanguageEntry("ha", "Hausa"),
    LanguageEntry("haw", "Hawaiian"),
    LanguageEntry("he", "Hebrew"),
    LanguageEntry("iw", "Hebrew"),
    LanguageEntry("he-IL", "Hebrew (Israel)"),
    LanguageEntry("hi", "Hindi"),
    LanguageEntry("hi-IN", "Hindi (India)"),
    LanguageEntry("hmn", "Hmong"),
    LanguageEntry("hu", "Hungarian"),
    LanguageEntry("hu-HU", "Hungarian (Hungary)"),
    LanguageEntry("is", "Icelandic"),
    LanguageEntry("is-IS", "Icelandic (Iceland)"),
    LanguageEntry("ig", "Igbo"),
    LanguageEntry("ilo", "Ilocano"),
    LanguageEntry("id", "Indonesian"),
    LanguageEntry("id-ID", "Indonesian (Indonesia)"),
    LanguageEntry("ga", "Irish"),
    LanguageEntry("it", "Italian"),
    LanguageEntry("it-IT", "Italian (Italy)"),
    LanguageEntry("it-CH", "Italian (Switzerland)"),
    LanguageEntry("ja", "Japanese"),
    LanguageEntry("ja-JP", "Japanese (Japan)"),
    LanguageEntry("jw", "Javanese"),
    LanguageEntry("kn", "Kannada"),
    LanguageEntry("kn-IN", "Kannada (India)"),
    LanguageEntry("kk", "Kazakh"),
    LanguageEntry("kk-KZ", "Kazakh (Kazakhstan)"),
    LanguageEntry("km", "Khmer"),
    LanguageEntry("rw", "Kinyarwanda"),
    LanguageEntry("kok", "Konkani"),
    LanguageEntry("gom", "Konkani"),
    LanguageEntry("kok-IN", "Konkani (India)"),
    LanguageEntry("ko", "Korean"),
    LanguageEntry("ko-KR", "Korean (Korea)"),
    LanguageEntry("kri", "Krio"),
    LanguageEntry("ku", "Kurdish (Kurmanji)"),
    LanguageEntry("ckb", "Kurdish (Sorani)"),
    LanguageEntry("ky", "Kyrgyz"),
    LanguageEntry("ky-KG", "Kyrgyz (Kyrgyzstan)"),
    LanguageEntry("lo", "Lao"),
    LanguageEntry("la", "Latin"),
    LanguageEntry("lv", "Latvian"),
    LanguageEntry("lv-LV", "Latvian (Latvia)"),
    LanguageEntry("ln", "Lingala"),
    LanguageEntry("lt", "Lithuanian"),
    LanguageEntry("lt-LT", "Lithuanian (Lithuania)"),
    LanguageEntry("lg", "Luganda"),
    LanguageEntry("lb", "Luxembourgish"),
    LanguageEntry("mai", "Maithili"),
    LanguageEntry("mg", "Malagasy"),
    LanguageEntry("ms", "Malay"),
    LanguageEntry("ms-BN", "Malay (Brunei Darussalam)"),
    LanguageEntry("ms-MY", "Malay (Malaysia)"),
    LanguageEntry("ml", "Malayalam"),
    LanguageEntry("mt", "Maltese"),
    LanguageEntry("mt-MT", "Maltese (Malta)"),
    LanguageEntry("mi", "Maori"),
    LanguageEntry("mi-NZ", "Maori (New Zealand)"),
    LanguageEntry("mr", "Marathi"),
    LanguageEntry("mr-IN", "Marathi (India)"),
    LanguageEntry("mni-Mtei", "Meiteilon (Manipuri)"),
    LanguageEntry("lus", "Mizo"),
    LanguageEntry("mn", "Mongolian"),
    LanguageEntry("mn-MN", "Mongolian (Mongolia)"),
    LanguageEntry("my", "Myanmar (Burmese)"),
    LanguageEntry("ne", "Nepali"),
    LanguageEntry("ns", "Northern Sotho"),
    LanguageEntry("ns-ZA", "Northern Sotho (South Africa)"),
    LanguageEntry("no", "Norwegian"),
    LanguageEntry("nb", "Norwegian (Bokm?l)"),
    LanguageEntry("nb-NO", "Norwegian (Bokm?l) (Norway)"),
    LanguageEntry("nn-NO", "Norwegian (Nynorsk) (Norway)"),
    LanguageEntry("or", "Odia (Oriya)"),
    LanguageEntry("om", "Oromo"),
    LanguageEntry("ps", "Pashto"),
    LanguageEntry("ps-AR", "Pashto (Afghanistan)"),
    LanguageEntry("pl", "Polish"),
    LanguageEntry("pl-PL", "Polish (Poland)"),
    LanguageEntry("pt", "Portuguese"),
    LanguageEntry("pt-BR", "Portuguese (Brazil)"),
    LanguageEntry("pt-PT", "Portuguese (Portugal)"),
    LanguageEntry("pa", "Punjabi"),
    LanguageEntry("pa-IN", "Punjabi (India)"),
    LanguageEntry("qu", "Quechua"),
    LanguageEntry("qu-BO", "Quechua (Bolivia)"),
    LanguageEntry("qu-EC", "Quechua (Ecuador)"),
    LanguageEntry("qu-PE", "Quechua (Peru)"),
    LanguageEntry("ro", "Romanian"),
    LanguageEntry("ro-RO", "Romanian (Romania)"),
    LanguageEntry("ru", "Russian"),
    LanguageEntry("ru-RU", "Russian (Russia)"),
    LanguageEntry("se-FI", "Sami (Inari) (Finland)"),
    LanguageEntry("se-NO", "Sami (Lule) (Norway)"),
    LanguageEntry("se-SE", "Sami (Lule) (Sweden)"),
    LanguageEntry("se", "Sami (Northern)"),
    LanguageEntry("se-FI", "Sami (Northern) (Finland)"),
    LanguageEntry("se-NO", "Sami (Northern) (Norway)"),
    LanguageEntry("se-SE", "Sami (Northern) (Sweden)"),
    LanguageEntry("se-FI", "Sami (Skolt) (Finland)"),
    LanguageEntry("se-NO", "Sami (Southern) (Norway)"),
    LanguageEntry("se-SE", "Sami (Southern) (Sweden)"),
    LanguageEntry("sm", "Samoan"),
    LanguageEntry("sa", "Sanskrit"),
    LanguageEntry("sa-IN", "Sanskrit (India)"),
    LanguageEntry("gd", "Scots Gaelic"),
    LanguageEntry("nso", "Sepedi"),
    LanguageEntry("sr", "Serbian"),
    LanguageEntry("sr-BA", "Serbian (Cyrillic) (Bosnia and Herzegovina)"),
    LanguageEntry("sr-SP", "Serbian (Cyrillic) (Serbia and Montenegro)"),
    LanguageEntry("sr-BA", "Serbian (Latin) (Bosnia and Herzegovina)"),
    LanguageEntry("sr-SP", "Serbian (Latin) (Serbia and Montenegro)"),
    LanguageEntry("st", "Sesotho"),
    LanguageEntry("sn", "Shona"),
    LanguageEntry("sd", "Sindhi"),
    LanguageEntry("si", "Sinhala"),
    LanguageEntry("sk", "Slovak"),
    LanguageEntry("sk-SK", "Slovak (Slovakia)"),
    LanguageEntry("sl", "Slovenian"),
    LanguageEntry("sl-SI", "Slovenian (Slovenia)"),
    LanguageEntry("so", "Somali"),
    LanguageEntry("es", "Spanish"),
    LanguageEntry("es-AR", "Spanish (Argentina)"),
    LanguageEntry("es-BO", "Spanish (Bolivia)"),
    LanguageEntry("es-ES", "Spanish (Castilian)"),
    LanguageEntry("es-CL", "Spanish (Chile)"),
    LanguageEntry("es-CO", "Spanish (Colombia)"),
    LanguageEntry("es-CR", "Spanish (Costa Rica)"),
    LanguageEntry("es-DO", "Spanish (Dominican Republic)"),
    LanguageEntry("es-EC", "Spanish (Ecuador)"),
    LanguageEntry("es-SV", "Spanish (El Salvador)"),
    LanguageEntry("es-GT", "Spanish (Guatemala)"),
    LanguageEntry("es-HN", "Spanish (Honduras)"),
    LanguageEntry("es-MX", "Spanish (Mexico)"),
    LanguageEntry("es-NI", "Spanish (Nicaragua)"),
    LanguageEntry("es-PA", "Spanish (Panama)"),
    LanguageEntry("es-PY", "Spanish (Paraguay)"),
    LanguageEntry("es-PE", "Spanish (Peru)"),
    LanguageEntry("es-PR", "Spanish (Puerto Rico)"),
    LanguageEntry("es-ES", "Spanish (Spain)"),
    LanguageEntry("es-UY", "Spanish (Uruguay)"),
    LanguageEntry("es-VE", "Spanish (Venezuela)"),
    LanguageEntry("su", "Sundanese"),
    LanguageEntry("sw", "Swahili"),
    LanguageEntry("sw-KE", "Swahili (Kenya)"),
    LanguageEntry("sv", "Swedish"),
    LanguageEntry("sv-FI", "Swedish (Finland)"),
    LanguageEntry("sv-SE", "Swedish (Sweden)"),
    LanguageEntry("syr", "Syriac"),
    LanguageEntry("syr-SY", "Syriac (Syria)"),
    LanguageEntry("tl", "Tagalog"),
    LanguageEntry("tl-PH", "Tagalog (Philippines)"),
    LanguageEntry("tg", "Tajik"),
    LanguageEntry("ta", "Tamil"),
    LanguageEntry("ta-IN", "Tamil (India)"),
    LanguageEntry("tt", "Tatar"),
    LanguageEntry("tt-RU", "Tatar (Russia)"),
    LanguageEntry("te", "Telugu"),
    LanguageEntry("te-IN", "Telugu (India)"),
    LanguageEntry("th", "Thai"),
    LanguageEntry("th-TH", "Thai (Thailand)"),
    LanguageEntry("ti", "Tigrinya"),
    LanguageEntry("ts", "Tsonga"),
    LanguageEntry("tn", "Tswana"),
    LanguageEntry("tn-ZA", "Tswana (South Africa)"),
    LanguageEntry("tr", "Turkish"),
    LanguageEntry("tr-TR", "Turkish (Turkey)"),
    LanguageEntry("tk", "Turkmen"),
    LanguageEntry("ak", "Twi"),
    LanguageEntry("uk", "Ukrainian"),
    LanguageEntry("uk-UA", "Ukrainian (Ukraine)"),
    LanguageEntry("ur", "Urdu"),
    LanguageEntry("ur-PK", "Urdu (Islamic Republic of Pakistan)"),
    LanguageEntry("ug", "Uyghur"),
    LanguageEntry("uz-UZ", "Uzbek (Cyrillic) (Uzbekistan)"),
    LanguageEntry("uz", "Uzbek (Latin)"),
    LanguageEntry("uz-UZ", "Uzbek (Latin) (Uzbekistan)"),
    LanguageEntry("vi", "Vietnamese"),
    LanguageEntry("vi-VN", "Vietnamese (Viet Nam)"),
    LanguageEntry("cy", "Welsh"),
    LanguageEntry("cy-GB", "Welsh (United Kingdom)"),
    LanguageEntry("xh", "Xhosa"),
    LanguageEntry("xh-ZA", "Xhosa (South Africa)"),
    LanguageEntry("yi", "Yiddish"),
    LanguageEntry("yo", "Yoruba"),
    LanguageEntry("zu", "Zulu"),
    LanguageEntry("zu-ZA", "Zulu (South Africa)"),
)


def build_language_index(table: Sequence[LanguageEntry]) -> Dict[str, int]:
    """Map codes to the position of the first row of their language family.

    A row is skipped once its base code (the part before the first ``-``) is
    already a key, but rows are inserted under their *full* code. A family
    whose first row carries a region suffix (``az-AZ``) is therefore only
    reachable through base-code lookup once a bare row (``az``) follows it.
    """
    index: Dict[str, int] = {}
    for position, entry in enumerate(table):
        base = entry.code.split("-")[0]
        if base in index or entry.code in index:
            continue
        index[entry.code] = position
    return index


LANGUAGE_INDEX: Dict[str, int] = build_language_index(LANGUAGE_TABLE)
