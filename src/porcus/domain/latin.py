"""Sets of Latin-script characters for classifying vowels vs consonants.

All entries are single decomposed codepoints, e.g. ``á`` is listed as ``a``.
Modifier characters are not listed.
"""

# Latin-script letters which are always vowels.
VOWELS: frozenset[str] = frozenset(
    # Basic Latin
    "AEIOU"
    "aeiou"
    # Latin-1 supplement
    "ªº"  # symbol
    "ÆØæøıĲĳŒœ"  # letter
    # Extended B
    "ƎƏƐƖƗƟƱ"  # non-european & historic
    "ǝ"  # phonetic & historic
    "Ⱥ"  # Sencoten
    "ȢȣɄɆɇ"  # misc
    # IPA
    "ɐɑɒ"  # a-like
    "ɘəɚɛɜɝɞ"  # e-like
    "ɨɩɪ"  # i-like
    "ɵɶɷ"  # o-like
    "ʉʊ"  # u-like
    # Phonetic letters
    "ᴀᴁᴂ"  # a-like
    "ᴇᴈ"  # e-like
    "ᴉ"  # i-like
    "ᴏᴐᴑᴒᴓᴔᴕᴖᴗ"  # o-like
    "ᴜᴝᴞᵫ"  # u-like
    "ᵻᵼᵾᵿ"  # phonetic sign
    "ᶏᶐᶒᶓᶔᶕᶖᶗᶙ"  # retroflex hook
    "ẚ"  # general extension
    "ⁱ"  # superscript
    "ₐₑₒₔ"  # subscript
    # Extended C
    "ⱥ"  # orthographic addition
    "ⱭⱯⱰ"  # misc
    "ⱸⱺⱻ"  # UPA
    # Extended D
    "ꜲꜳꜴꜵꜶꜷꜸꜹꜺꜻꜼꜽ"  # medievalist a-like
    "ꝊꝋꝌꝍꝎꝏ"  # medievalist o-like
    "ꝪꝫꝬꝭꝸ"  # abbreviations
    "ꞚꞛꞜꞝꞞꞟ"  # Volapük
    "Ɜ"  # letters
    "Ɪ"  # West African
    "Ꞷꞷ"  # African
    "Ꞹꞹ"  # Mazahua
    "ꞺꞻꞼꞽꞾꞿ"  # Ugaritic & Egyptologic
    "ꟷ"  # Celtic
    "ꟹ"  # IPA
    "ꟾ"  # Roman
    # Extended E, German dialects
    "ꬰꬱ"  # a-like
    "ꬲꬳꬴ"  # e-like
    "ꬽꬾꬿꭀꭁꭂꭃꭄ"  # o-like
    "ꭎꭏꭐꭑꭒ"  # u-like
    "ꭠꭡꭢꭣ"  # Sakha
    "ꭤ"  # American
    # Fullwidth
    "ＡＥＩＯＵ"
    "ａｅｉｏｕ"
)

# Latin-script letters which may be vowels, depending on context.
# Currently these are all variants of ``y``, e.g. ``ÿ`` is listed as ``y``.
AMBIGUOUS_VOWELS: frozenset[str] = frozenset("YyƳƴɎɏʎʏỾỿＹｙꭚ")

# Punctuation treated as consonants, e.g. ``M'lady`` becomes ``Adym'lay``.
CONSONANT_LIKE_PUNCTUATION: frozenset[str] = frozenset("'’＇·՟״‧")
