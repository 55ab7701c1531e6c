from __future__ import annotations
from typing import Dict

# english descriptions of Penn Treebank tags
# tags missing here render as Unknown(<TAG>)
PENN_TAG_EN: Dict[str, str] = {
    "CC": "Coordinating Conjunction",
    "CD": "Cardinal Number",
    "DT": "Determiner",
    "EX": "Existential There",
    "FW": "Foreign Word",
    "IN": "Preposition / Subordinating Conjunction",
    "JJ": "Adjective",
    "JJR": "Adjective, Comparative",
    "JJS": "Adjective, Superlative",
    "LS": "List Item Marker",
    "MD": "Modal",
    "NN": "Noun, Singular or Mass",
    "NNS": "Noun, Plural",
    "NNP": "Proper Noun, Singular",
    "NNPS": "Proper Noun, Plural",
    "PDT": "Predeterminer",
    "POS": "Possessive Ending",
    "PRP": "Personal Pronoun",
    "PRP$": "Possessive Pronoun",
    "RB": "Adverb",
    "RBR": "Adverb, Comparative",
    "RBS": "Adverb, Superlative",
    "RP": "Particle",
    "SYM": "Symbol",
    "TO": "To",
    "UH": "Interjection",
    "VB": "Verb, Base Form",
    "VBD": "Verb, Past Tense",
    "VBG": "Verb, Gerund / Present Participle",
    "VBN": "Verb, Past Participle",
    "VBP": "Verb, Non-3rd Person Singular Present",
    "VBZ": "Verb, 3rd Person Singular Present",
    "WDT": "Wh-Determiner",
    "WP": "Wh-Pronoun",
    "WP$": "Possessive Wh-Pronoun",
    "WRB": "Wh-Adverb",
    # punctuation
    ".": "Sentence-Final Punctuation",
    ",": "Comma",
    ":": "Colon / Semicolon",
    "``": "Opening Quote",
    "''": "Closing Quote",
    "-LRB-": "Left Bracket",
    "-RRB-": "Right Bracket",
    "#": "Pound Sign",
    "$": "Dollar Sign",
}


def translate_tag(tag: str) -> str:
    if not tag:
        return ""
    return PENN_TAG_EN.get(tag, f"Unknown({tag})")
