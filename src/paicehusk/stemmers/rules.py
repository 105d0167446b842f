import os
import re
import gzip
from dataclasses import dataclass
from functools import lru_cache

DEFAULT_RULES = os.path.join(os.path.dirname(__file__), 'paicehusk_rules.txt')
TERMINATOR = 'end0.'

# <reversed suffix><'*'?><remove count><append letters?><'>'|'.'><comment>
rule_format = re.compile(r'^\s*(([a-z]+)(\*?)(\d+)([a-z]*)([>.]))')


class SourceUnavailable(OSError):
    """A rule or word source cannot be read, or an output cannot be written."""
    def __init__(self, path, reason='', action='read'):
        super(SourceUnavailable, self).__init__(f'cannot {action} {path}{f": {reason}" if reason else ""}')
        self.path = path


class RuleFormatError(ValueError):
    def __init__(self, line, text):
        super(RuleFormatError, self).__init__(f'invalid rule at line {line}: {text!r}')
        self.line = line
        self.text = text


@dataclass(frozen=True)
class Rule:
    """
    One Paice/Husk rule.

    Attributes:
        suffix (str): the suffix in natural reading order (the rule text stores it reversed).
        intact (bool): the rule may only fire on a word no earlier rule has modified.
        remove (int): number of trailing characters to delete; may exceed the stem length.
        append (str): letters appended after removal, possibly empty.
        restem (bool): '>' in the rule text; another pass follows a commit. '.' ends stemming.
        id (str): diagnostic label '(<line>:<encoding>)', e.g. '(8:dei3y>)'.
    """
    suffix: str
    intact: bool
    remove: int
    append: str
    restem: bool
    id: str

    @property
    def letter(self):
        return self.suffix[-1]

    def matches(self, stem, intact=True):
        if self.intact and not intact: return False
        return len(self.suffix) <= len(stem) and stem.endswith(self.suffix)

    def apply(self, stem):
        return stem[:max(len(stem) - self.remove, 0)] + self.append


class RuleTable:
    """
    Rules bucketed by the final letter of their suffix. Within a bucket, rules keep
    the order of the rule source, which is their matching precedence.
    The table is read-only once built and can be shared by any number of stemmers.
    """
    def __init__(self, rules=()):
        buckets = dict()
        for rule in rules: buckets.setdefault(rule.letter, []).append(rule)
        self._buckets = {letter: tuple(bucket) for letter, bucket in buckets.items()}
        self._size = sum(len(bucket) for bucket in self._buckets.values())

    def get(self, letter): return self._buckets.get(letter, ())

    def __getitem__(self, letter): return self.get(letter)

    def __contains__(self, letter): return letter in self._buckets

    def __len__(self): return self._size

    def __iter__(self):
        for letter in sorted(self._buckets):
            yield from self._buckets[letter]

    def __eq__(self, other):
        return isinstance(other, RuleTable) and self._buckets == other._buckets

    def __hash__(self): return hash(tuple(self))

    def letters(self): return sorted(self._buckets)

    def __repr__(self): return f'RuleTable({self._size} rules, letters={"".join(self.letters())})'


def parse_rule(text, line):
    """Parse one rule record; returns None for the terminator."""
    match = rule_format.match(text)
    if not match: raise RuleFormatError(line, text.rstrip('\n'))
    encoding, suffix, intact, remove, append, restem = match.groups()
    if encoding == TERMINATOR: return None
    return Rule(suffix=suffix[::-1], intact=intact == '*', remove=int(remove), append=append, restem=restem == '>', id=f'({line}:{encoding})')


def parse_rules(lines):
    rules = []
    for no, text in enumerate(lines, 1):
        if isinstance(text, bytes): text = text.decode('utf-8')
        # We drop empty lines but keep counting them
        if len(text.strip()) == 0: continue
        rule = parse_rule(text, no)
        if rule is None: break
        rules.append(rule)
    return RuleTable(rules)


def open_source(path):
    # We can work with both gzip and non-gzip
    try:
        if str(path).endswith('gz'): return gzip.open(path, 'rt', encoding='utf-8')
        return open(path, encoding='utf-8')
    except OSError as e:
        raise SourceUnavailable(path, e.strerror or str(e)) from e


def load_rules(path):
    with open_source(path) as f:
        try:
            return parse_rules(f)
        except (OSError, UnicodeDecodeError) as e:
            raise SourceUnavailable(path, str(e)) from e


@lru_cache(maxsize=None)
def default_rules():
    return load_rules(DEFAULT_RULES)
