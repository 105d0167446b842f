"""
Acceptability tests for candidate stems.

Each policy takes a candidate stem (lowercase letters, possibly empty) and tells whether
it is long enough and vowel-bearing enough to be kept. Implementations of Paice/Husk
disagree here, so the variants are kept side by side and selected by name:

    classic  vowel-led: length >= 2; otherwise length >= 3 and a vowel somewhere,
             where 'y' counts only after the first position.
    legacy   as classic, but a leading 'y' also satisfies the vowel requirement.
             This is the test used by the ANSI C, Pascal, Java and Perl programs.
    revised  vowel- or 'y'-led followed by a consonant: length >= 2; otherwise length >= 4.
"""

VOWELS = 'aeiou'
VOWELS_Y = 'aeiouy'


def classic(stem):
    if not stem: return False
    if stem[0] in VOWELS: return len(stem) >= 2
    return len(stem) >= 3 and (any(ch in VOWELS for ch in stem) or 'y' in stem[1:])


def legacy(stem):
    if not stem: return False
    if stem[0] in VOWELS: return len(stem) >= 2
    return len(stem) >= 3 and any(ch in VOWELS_Y for ch in stem)


def revised(stem):
    if not stem: return False
    if stem[0] in VOWELS_Y and (len(stem) < 2 or stem[1] not in VOWELS_Y): return len(stem) >= 2
    return len(stem) >= 4


policies = {
    'classic': classic,
    'legacy': legacy,
    'revised': revised,
}


def get_policy(policy):
    """Resolve a policy name, or pass a custom predicate through."""
    if callable(policy): return policy
    try:
        return policies[policy]
    except KeyError:
        raise ValueError(f'unknown acceptability policy {policy!r}; expected one of {sorted(policies)}') from None


def has_vowel(word):
    return any(ch in VOWELS_Y for ch in word)


def first_vowel(stem):
    """Index of the first vowel, or of the first non-initial 'y' when no vowel precedes it; None if neither."""
    for i, ch in enumerate(stem):
        if ch in VOWELS or (ch == 'y' and i > 0): return i
    return None
