import pandas as pd

from paicehusk.stemmers.engine import StemmerConfig, StemmingEngine
from paicehusk.stemmers.rules import default_rules

'''
Runs several lineages over one word list and lines their stems up, word by word.
Independent implementations have been seen to disagree on up to 8% of real words.
'''


def compare(words, lineages, rules=None):
    """
    Args:
        words (iterable of str): lowercase words.
        lineages (list of str | dict of str -> StemmerConfig): lineage names, or named configs.
        rules (RuleTable, optional): the bundled table if None.

    Returns:
        pd.DataFrame: columns 'word', one per lineage, and 'agree'.
    """
    rules = rules if rules is not None else default_rules()
    if not isinstance(lineages, dict): lineages = {name: StemmerConfig.from_lineage(name) for name in lineages}
    engines = {name: StemmingEngine(rules, config) for name, config in lineages.items()}
    words = list(words)
    df = pd.DataFrame({'word': words, **{name: [engine.stem(word) for word in words] for name, engine in engines.items()}})
    df['agree'] = df[list(engines)].nunique(axis=1) <= 1
    return df


def divergence(df):
    if len(df) == 0: return 0.0
    return float((~df['agree']).mean())


def write(df, output):
    df.to_csv(output, sep='\t', index=False)
