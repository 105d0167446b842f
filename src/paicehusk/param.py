import os

settings = {
    'cmd': ['stem'],            # steps of pipeline, ['stem', 'compare']
    'rules': None,              # path to a rule file, if None, the bundled paicehusk_rules.txt
    'lineage': 'canonical',     # engine preset for 'stem', any key of lineages below
    'compare': ['canonical', 'legacy', 'revised', 'strict'],  # lineages run side by side by 'compare'
    'ncore': 1,                 # worker processes for stemming a word list, 1 stems in-process
    'ascii': False,            # word extraction keeps ASCII letters only, as the reference programs do
    'color': os.environ.get('NO_COLOR') is None,
}

# StemmerConfig keyword arguments per known behaviour
lineages = {
    'canonical': {
        'policy': 'classic',
        'skip_acceptability_on_terminal_rules': False,
        'abort_on_rejected_candidate': False,
        'gate': 'acceptability',
        'first_vowel_guard': False,
    },
    # ANSI C, Pascal, Java and Perl reference programs; their outputs are identical
    'legacy': {
        'policy': 'legacy',
        'skip_acceptability_on_terminal_rules': False,
        'abort_on_rejected_candidate': False,
        'gate': 'acceptability',
        'first_vowel_guard': False,
    },
    'revised': {
        'policy': 'revised',
        'skip_acceptability_on_terminal_rules': False,
        'abort_on_rejected_candidate': False,
        'gate': 'acceptability',
        'first_vowel_guard': False,
    },
    'strict': {
        'policy': 'classic',
        'skip_acceptability_on_terminal_rules': True,
        'abort_on_rejected_candidate': True,
        'gate': 'vowel_min_length',
        'first_vowel_guard': True,
        'guard_exempts_single_letter': True,
    },
}
