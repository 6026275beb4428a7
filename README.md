# wordseg

Building blocks for search-engine dictionaries over Chinese and English
text. It uses only the standard library.

## Modules

- `wordseg.strutil`: `split`, `ltrim`, `rtrim`, `trim`, `join`,
  `path_join`, and `decode_runes` / `encode_runes` for UTF-8 code points.
- `wordseg.ini`: `parse_ini` and `IniReader`. The reader looks up sections
  and names case-insensitively. It has typed getters (`get`, `get_string`,
  `get_integer`, `get_unsigned`, `get_real`, `get_boolean`) plus
  `has_section`, `has_value` and `parse_error`.
- `wordseg.config`: `Config` reads `key = value` files. `ArgvContext`
  separates positional arguments, `-key value` options and bare `-flag`
  switches.
- `wordseg.prefilter`: `PreFilter` yields rune spans of a sentence, split at
  separator characters. `make_separators` builds a separator set.
- `wordseg.hmm`: `HMMModel` holds B/E/M/S start, transition and emission
  probabilities. `HMMSegment` cuts text with Viterbi decoding and keeps runs
  of ASCII letters and numbers whole.
- `wordseg.dicttrie`: `DictTrie` is a word dictionary built from
  `word freq tag` lines. It stores log-probability weights, takes user words
  (`insert_user_word`, `delete_user_word`, `load_user_dict`) and chooses a
  default user weight through `WeightOption`.
- `wordseg.keywords`: `KeywordExtractor` ranks by TF-IDF, with `load_idf` to
  read IDF data. `TextRankExtractor` ranks with PageRank over a `WordGraph`.
  Both return `Keyword` records holding a word, its byte offsets and a
  weight.
- `wordseg.simhash`: `fingerprint` combines `(hash, weight)` pairs into a
  64-bit simhash. Also `hamming_distance`, `is_equal`, `to_binary_string`
  and `binary_string_to_int`.
- `wordseg.dictproducer`: `DictProducer` counts words in English and Chinese
  corpora and appends `word count` lines to dictionary files. It can also
  index words into a sorted-set store under each of their characters.
  Helpers: `is_chinese` and `read_stopwords`.

## Installing

Install with pip from the project directory. The `test` extra adds pytest
for running the test suite.

## Examples

Reading settings from an INI document:

```python
from wordseg.ini import IniReader

reader = IniReader("[user]\ndict = data/dict.dat\nworkers = 4\n")
reader.get("user", "dict", "UNKNOWN")      # 'data/dict.dat'
reader.get_integer("user", "workers", 1)   # 4
reader.has_section("user")                 # True
```

Cutting text and extracting keywords:

```python
from wordseg.hmm import HMMModel, HMMSegment
from wordseg.keywords import KeywordExtractor

model = HMMModel.from_file("dict/hmm_model.utf8")
segment = HMMSegment(model)
words = segment.cut("我来到北京")

with open("dict/idf.utf8", encoding="utf-8") as handle:
    idf_text = handle.read()
extractor = KeywordExtractor(segment, idf_text, {"的", "了"})
for keyword in extractor.extract("我来到北京清华大学", 5):
    print(keyword.word, keyword.weight)
```

Comparing simhash fingerprints:

```python
from wordseg.simhash import fingerprint, is_equal, to_binary_string

a = fingerprint([(0x1234, 2.0), (0xFF00, 1.5)])
b = fingerprint([(0x1234, 2.0), (0xFF01, 1.5)])
is_equal(a, b, 3)          # True when at most 3 bits differ
to_binary_string(a)        # 64 characters of '0' and '1'
```

Building a dictionary from an English corpus. The paths come from the
`[user]` section:

```python
from wordseg.dictproducer import DictProducer
from wordseg.ini import IniReader

producer = DictProducer.from_config(IniReader.from_file("conf/myconf.conf"))
producer.build_en_dict("data/dict.dat")
```

## What it does not do

- It has no command-line program and no server. Everything is used as a
  library.
- It does not connect to a database. `DictProducer.load_dict_and_store` and
  `save_dict_to_store` take any object with a `zadd(key, member, score)`
  method, and you supply that store.
- `DictTrie` is a lookup table of words and weights. No segmenter in the
  package uses it. Segmentation comes only from `HMMSegment`, or from any
  object with a `cut(sentence)` method that you pass to the extractors or
  (as a callable) to `DictProducer`.
- `fingerprint` works on hashes that are already computed. The package
  does not hash keywords itself.