"""Persian text analysis for speech synthesis: lexicon with affixes, phonetics and phonemes."""

__version__ = "0.1.0"