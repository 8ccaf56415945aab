"""Static transliteration table.

Each key is the ASCII replacement, each value the non-ASCII characters that
collapse to it. Variant sets are disjoint, so the order in which entries are
applied does not affect the result.
"""

from __future__ import annotations

from types import MappingProxyType

TRANSLITERATIONS = MappingProxyType(
    {
        # Digits
        "0": ("°", "₀", "۰"),
        "1": ("¹", "₁", "۱"),
        "2": ("²", "₂", "۲"),
        "3": ("³", "₃", "۳"),
        "4": ("⁴", "₄", "۴", "٤"),
        "5": ("⁵", "₅", "۵", "٥"),
        "6": ("⁶", "₆", "۶", "٦"),
        "7": ("⁷", "₇", "۷"),
        "8": ("⁸", "₈", "۸"),
        "9": ("⁹", "₉", "۹"),
        # Lowercase
        "a": (
            "à", "á", "ả", "ã", "ạ", "ă", "ắ", "ằ", "ẳ", "ẵ", "ặ", "â", "ấ", "ầ",
            "ẩ", "ẫ", "ậ", "ä", "ā", "ą", "å", "α", "ά", "а", "ª",
        ),
        "b": ("б", "β", "ب"),
        "c": ("ç", "ć", "č", "ĉ", "ċ"),
        "d": ("ď", "ð", "đ", "ɖ", "ɗ", "д", "δ", "د", "ض"),
        "e": (
            "é", "è", "ẻ", "ẽ", "ẹ", "ê", "ế", "ề", "ể", "ễ", "ệ", "ë", "ē", "ę",
            "ě", "ĕ", "ė", "ε", "έ", "е", "ё", "э", "є", "ə",
        ),
        "f": ("ф", "φ", "ف", "ƒ"),
        "g": ("ĝ", "ğ", "ġ", "ģ", "г", "ґ", "γ", "ج"),
        "h": ("ĥ", "ħ", "ح", "ه"),
        "i": (
            "í", "ì", "ỉ", "ĩ", "ị", "î", "ï", "ī", "ĭ", "į", "ı", "ι", "ί", "ϊ",
            "ΐ", "η", "ή", "і", "ї", "и",
        ),
        "j": ("ĵ", "ј"),
        "k": ("ķ", "ĸ", "к", "κ", "ق", "ك"),
        "l": ("ł", "ľ", "ĺ", "ļ", "ŀ", "л", "λ", "ل"),
        "m": ("м", "μ", "م"),
        "n": ("ñ", "ń", "ň", "ņ", "ŉ", "ŋ", "ν", "н", "ن"),
        "o": (
            "ó", "ò", "ỏ", "õ", "ọ", "ô", "ố", "ồ", "ổ", "ỗ", "ộ", "ơ", "ớ", "ờ",
            "ở", "ỡ", "ợ", "ö", "ø", "ō", "ő", "ŏ", "ο", "ό", "о", "º",
        ),
        "p": ("п", "π"),
        "r": ("ŕ", "ř", "ŗ", "р", "ρ", "ر"),
        "s": ("ś", "š", "ş", "ŝ", "ș", "ſ", "с", "σ", "ς", "س", "ص"),
        "t": ("ť", "ţ", "ț", "ŧ", "т", "τ", "ت", "ط"),
        "u": (
            "ú", "ù", "ủ", "ũ", "ụ", "ư", "ứ", "ừ", "ử", "ữ", "ự", "û", "ü", "ū",
            "ů", "ű", "ŭ", "ų", "у",
        ),
        "v": ("в", "ϑ", "و"),
        "w": ("ŵ", "ω", "ώ"),
        "x": ("χ", "ξ"),
        "y": ("ý", "ỳ", "ỷ", "ỹ", "ỵ", "ÿ", "ŷ", "й", "ы", "υ", "ϋ", "ύ", "ΰ", "ي"),
        "z": ("ź", "ž", "ż", "з", "ζ", "ز", "ظ"),
        "aa": ("ع",),
        "ae": ("æ", "ǽ"),
        "ch": ("ч",),
        "dj": ("ђ",),
        "dz": ("џ",),
        "gh": ("غ",),
        "kh": ("х", "خ"),
        "lj": ("љ",),
        "nj": ("њ",),
        "oe": ("œ",),
        "ps": ("ψ",),
        "sh": ("ш", "ش"),
        "shch": ("щ",),
        "ss": ("ß",),
        "th": ("þ", "θ", "ث", "ذ"),
        "ts": ("ц",),
        "ya": ("я",),
        "yu": ("ю",),
        "zh": ("ж",),
        # Uppercase
        "A": (
            "Á", "À", "Ả", "Ã", "Ạ", "Ă", "Ắ", "Ằ", "Ẳ", "Ẵ", "Ặ", "Â", "Ấ", "Ầ",
            "Ẩ", "Ẫ", "Ậ", "Å", "Ä", "Ā", "Ą", "Α", "Ά", "А",
        ),
        "B": ("Б", "Β"),
        "C": ("Ç", "Ć", "Č", "Ĉ", "Ċ"),
        "D": ("Ď", "Ð", "Đ", "Д", "Δ"),
        "E": (
            "É", "È", "Ẻ", "Ẽ", "Ẹ", "Ê", "Ế", "Ề", "Ể", "Ễ", "Ệ", "Ë", "Ē", "Ę",
            "Ě", "Ĕ", "Ė", "Ε", "Έ", "Е", "Ё", "Э", "Є", "Ə",
        ),
        "F": ("Ф", "Φ"),
        "G": ("Ğ", "Ġ", "Ģ", "Ĝ", "Г", "Ґ", "Γ"),
        "H": ("Ĥ", "Ħ"),
        "I": (
            "Í", "Ì", "Ỉ", "Ĩ", "Ị", "Î", "Ï", "Ī", "Ĭ", "Į", "İ", "Ι", "Ί", "Ϊ",
            "Η", "Ή", "И", "І", "Ї",
        ),
        "J": ("Ĵ", "Ј"),
        "K": ("Ķ", "К", "Κ"),
        "L": ("Ĺ", "Ł", "Л", "Λ", "Ļ", "Ľ", "Ŀ"),
        "M": ("М", "Μ"),
        "N": ("Ń", "Ñ", "Ň", "Ņ", "Ŋ", "Н", "Ν"),
        "O": (
            "Ó", "Ò", "Ỏ", "Õ", "Ọ", "Ô", "Ố", "Ồ", "Ổ", "Ỗ", "Ộ", "Ơ", "Ớ", "Ờ",
            "Ở", "Ỡ", "Ợ", "Ö", "Ø", "Ō", "Ő", "Ŏ", "Ο", "Ό", "О",
        ),
        "P": ("П", "Π"),
        "R": ("Ř", "Ŕ", "Ŗ", "Р", "Ρ"),
        "S": ("Ş", "Ŝ", "Ș", "Š", "Ś", "С", "Σ"),
        "T": ("Ť", "Ţ", "Ŧ", "Ț", "Т", "Τ"),
        "U": (
            "Ú", "Ù", "Ủ", "Ũ", "Ụ", "Ư", "Ứ", "Ừ", "Ử", "Ữ", "Ự", "Û", "Ü", "Ū",
            "Ů", "Ű", "Ŭ", "Ų", "У",
        ),
        "V": ("В",),
        "W": ("Ω", "Ώ", "Ŵ"),
        "X": ("Χ", "Ξ"),
        "Y": ("Ý", "Ỳ", "Ỷ", "Ỹ", "Ỵ", "Ÿ", "Ŷ", "Υ", "Ύ", "Ϋ", "Ы", "Й"),
        "Z": ("Ź", "Ž", "Ż", "З", "Ζ"),
        "AE": ("Æ", "Ǽ"),
        "CH": ("Ч",),
        "DJ": ("Ђ",),
        "DZ": ("Џ",),
        "KH": ("Х",),
        "LJ": ("Љ",),
        "NJ": ("Њ",),
        "OE": ("Œ",),
        "PS": ("Ψ",),
        "SH": ("Ш",),
        "SHCH": ("Щ",),
        "TH": ("Þ", "Θ"),
        "TS": ("Ц",),
        "YA": ("Я",),
        "YU": ("Ю",),
        "ZH": ("Ж",),
    }
)

# Single translation map built from the table above; str.translate applies it
# in one pass.
TRANSLITERATION_MAP = MappingProxyType(
    {
        ord(variant): canonical
        for canonical, variants in TRANSLITERATIONS.items()
        for variant in variants
    }
)
