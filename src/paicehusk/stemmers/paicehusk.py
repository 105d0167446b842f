#!/bin/python
import sys
import multiprocessing as mp
from functools import lru_cache

from paicehusk import utils
from paicehusk.stemmers.abstractstemmer import AbstractStemmer
from paicehusk.stemmers.engine import StemmerConfig, StemmingEngine
from paicehusk.stemmers.rules import RuleTable, default_rules, load_rules


class PaiceHuskStemmer(AbstractStemmer):
    """
    Paice/Husk (Lancaster) stemmer over a rule table.

    Args:
        rules (RuleTable | str, optional): a loaded table or the path of a rule file; the bundled table if None.
        config (StemmerConfig, optional): engine switches; takes precedence over lineage.
        lineage (str): name of a preset in param.lineages.
        ascii_only (bool): word extraction treats only a-z and A-Z as letters, so 'naïve' reads as 'na' and 've'.

    Example Usage:
        stemmer = PaiceHuskStemmer(lineage='legacy')
        stemmer.stem_word('provision')      # 'provid'
        stemmer.stem_query('Presumably, multiplying!')
    """
    def __init__(self, rules=None, config=None, lineage='canonical', ascii_only=False):
        super(PaiceHuskStemmer, self).__init__(ascii_only)
        if rules is None: rules = default_rules()
        elif not isinstance(rules, RuleTable): rules = load_rules(rules)
        self.engine = StemmingEngine(rules, config if config is not None else StemmerConfig.from_lineage(lineage))
        self.basename = 'paicehusk'

    @property
    def rules(self): return self.engine.rules

    @property
    def config(self): return self.engine.config

    def stem_word(self, word): return self.engine.stem(word)

    def explain(self, word): return self.engine.explain(word)

    def process(self, words):
        return [self.stem_word(word) for word in words]

    def stem_words(self, words, ncore=1, trace=False):
        """
        Stem a list of words, in input order. With ncore > 1 the words are spread over a process pool.
        With trace=True each item is a (stem, Trace) pair instead of a stem.
        """
        func = self.explain if trace else self.stem_word
        words = list(words)
        if ncore <= 1 or len(words) < 2: return [func(word) for word in words]
        with mp.Pool(ncore) as p:
            return p.map(func, words, chunksize=max(1, len(words) // (ncore * 4)))


@lru_cache(maxsize=None)
def default_stemmer():
    return PaiceHuskStemmer()


def stem(*words):
    """
    Stem raw tokens with the bundled rules: each token is cut to its first run of letters and lowercased.
    Tokens without letters give None.
    """
    stemmer = default_stemmer()
    stems = []
    for raw in words:
        word = utils.first_word(raw)
        stems.append(stemmer.stem_word(word) if word else None)
    return stems


if __name__ == '__main__':
    print(' '.join(s or '' for s in stem(*sys.argv[1:])))
