# tihu

Tihu prepares Persian text for speech synthesis. You give it words, and for
each word it works out the pronunciation, part of speech, stem and lemma that
a synthesizer needs. Pronunciations can then be turned into phoneme lines for
an MBROLA voice.

## What it does

- **Lexicon lookup with affixes.** `tihu.lexicon.Lexicon` loads an affix file
  (`./data/lexicon.aff` by default) and then a dictionary
  (`./data/lexicon.dic`). It tags Persian words by looking up their roots
  with prefixes and suffixes stripped off. It marks words that end in a kasre
  as genitive. It joins up to three neighbouring words into a compound with a
  zero-width non-joiner. It splits run-together words into known parts.
- **Phonetics.** `tihu.phonetics.Phonetics` gives every word that still has
  no entry a guessed entry, tagged `.`:
  - numbers are read out by `tihu.number2phoneme.number_to_phoneme`;
  - punctuation is looked up in a table (`tihu.punctuation.PunctuationTable`,
    loaded from `data/punctuations.txt` by default);
  - unknown Persian words go to an external `g2p-seq2seq --interactive`
    process through `tihu.g2p.G2PSeq2Seq`. `tihu.word2phoneme.Word2Phoneme`
    counts these words in `./log/unknown_words.txt`.
- **Corpus model.** `tihu.corpus.Corpus` holds `tihu.word.Word` objects. Each
  word has `tihu.entry.Entry` candidates. `Corpus.to_xml()` and
  `Corpus.to_txt()` render a corpus, and `Corpus.dump()` writes it to a file.
- **Phonemes.** `tihu.phoneme.Phoneme` picks an entry from a built-in phoneme
  table, taking the neighbouring phonemes into account. It produces MBROLA
  input lines (`name duration`), with a glottal stop before a vowel that
  starts a word or follows another vowel. `Word.parse_pronunciation()` does
  this for a word's first entry.

## Installing

```
pip install .
```

The package needs nothing beyond the standard library. Automatic
transcription of unknown words needs the `g2p-seq2seq` program on `PATH` and
a trained model directory (`./data/g2p-seq2seq-tihudict` by default).

## Examples

Reading numbers aloud:

```python
from tihu.number2phoneme import number_to_phoneme

number_to_phoneme("25")    # "bistopanj"
number_to_phoneme("-7")    # "manfiyehaft"
```

Joining pronunciations the way Persian morphology does:

```python
from tihu.helper import concat_pronunciations

concat_pronunciations("tanbAku", "aS")   # "tanbAkuS"
```

A phoneme line for MBROLA:

```python
from tihu.phoneme import Phoneme

Phoneme.from_context("", "s", "a").mbrola_string()   # "s 123 \n"
```

Running the lexicon and the phonetics stage over a corpus:

```python
from tihu.corpus import Corpus
from tihu.helper import TokenType
from tihu.lexicon import Lexicon
from tihu.phonetics import Phonetics
from tihu.word import Word

lexicon = Lexicon()
lexicon.load()
phonetics = Phonetics()
phonetics.load()

corpus = Corpus(text="کتاب", words=[Word(text="کتاب", type=TokenType.PERSIAN, length=4)])
lexicon.parse_text(corpus)
phonetics.parse_text(corpus)
print(corpus.to_xml())

phonetics.close()   # saves the unknown-word counts and stops g2p-seq2seq
```

Both stages write a debug copy of the corpus (`lexicon.xml`, `g2p.xml`) into
the `log` directory. Pass `log_dir=None` to turn this off. If the directory
cannot be written to, the copy is skipped.

The stages are subclasses of `tihu.parser.Parser`. Each stage holds a
`tihu.settings.Settings` object with pitch, rate, volume, frequency and debug
mode. A stage can be given an optional message callback. `stop(True)` makes a
stage stop partway through a corpus.

## What it does not do

- It has no tokenizer. You build the `Word` objects of a corpus yourself,
  with their token type.
- It has no part-of-speech tagging stage beyond the tags in the dictionary.
- It produces no audio. It stops at pronunciations and MBROLA phoneme lines.
- It has no command-line program. It is used as a library.

## Running the tests

```
pip install .[test]
pytest
```