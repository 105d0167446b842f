from dataclasses import dataclass
from typing import Callable, Union

from paicehusk import param
from paicehusk.stemmers import acceptability
from paicehusk.stemmers.trace import Trace

GATES = ('acceptability', 'vowel_min_length')


class StemmingInvariantError(RuntimeError):
    pass


@dataclass(frozen=True)
class StemmerConfig:
    """
    The points where Paice/Husk implementations are known to diverge.

    Attributes:
        policy: acceptability policy name ('classic', 'legacy', 'revised') or a predicate str -> bool.
        skip_acceptability_on_terminal_rules: a '.' rule commits without the acceptability test,
            so the stem may become empty.
        abort_on_rejected_candidate: a matching rule whose candidate is rejected ends stemming,
            instead of passing on to the next rule of the bucket.
        gate: the test a word must pass before any rule is tried; 'acceptability' runs the policy,
            'vowel_min_length' asks for at least four letters and a vowel.
        first_vowel_guard: reject a rule whose matched suffix covers the stem's first vowel.
        guard_exempts_single_letter: a one-letter suffix may cover the first vowel, provided its candidate
            passes the acceptability test, even under skip_acceptability_on_terminal_rules.
            Whether this exemption was intended upstream is unknown, so it is a switch of its own.
    """
    policy: Union[str, Callable[[str], bool]] = 'classic'
    skip_acceptability_on_terminal_rules: bool = False
    abort_on_rejected_candidate: bool = False
    gate: str = 'acceptability'
    first_vowel_guard: bool = False
    guard_exempts_single_letter: bool = True

    def __post_init__(self):
        acceptability.get_policy(self.policy)
        if self.gate not in GATES: raise ValueError(f'unknown gate {self.gate!r}; expected one of {GATES}')

    @classmethod
    def from_lineage(cls, name, **overrides):
        if name not in param.lineages: raise ValueError(f'unknown lineage {name!r}; expected one of {sorted(param.lineages)}')
        return cls(**{**param.lineages[name], **overrides})


class StemmingEngine:
    """
    Applies a rule table to single words. The engine keeps no per-word state, so one
    instance can serve any number of calls, threads or (pickled) worker processes.
    """
    def __init__(self, rules, config=None):
        self.rules = rules
        self.config = config if config is not None else StemmerConfig()
        self.is_acceptable = acceptability.get_policy(self.config.policy)

    def passes_gate(self, word):
        if self.config.gate == 'vowel_min_length': return len(word) >= 4 and acceptability.has_vowel(word)
        return self.is_acceptable(word)

    def covers_first_vowel(self, rule, stem):
        vowel = acceptability.first_vowel(stem)
        return vowel is not None and vowel >= len(stem) - len(rule.suffix)

    def stem(self, word, trace=None):
        """
        Reduce a lowercase, letters-only word to its stem.

        Args:
            word (str): the word to stem.
            trace (Trace, optional): receives every committed (before, rule, after) step.

        Returns:
            str: the stem; the word itself when no rule applies, possibly '' when a terminal
            rule skipped the acceptability test.
        """
        if not self.passes_gate(word): return word
        if trace is not None: trace.start(word)

        stem, intact = word, True
        # capped at word length + table size
        for _ in range(len(word) + len(self.rules) + 1):
            if not stem: return stem
            committed = None
            for rule in self.rules.get(stem[-1]):
                if not rule.matches(stem, intact): continue
                # an exempt one-letter suffix must still yield an acceptable candidate
                exempt = False
                if self.config.first_vowel_guard and self.covers_first_vowel(rule, stem):
                    if len(rule.suffix) > 1 or not self.config.guard_exempts_single_letter: continue
                    exempt = True
                candidate = rule.apply(stem)
                skip_test = not rule.restem and self.config.skip_acceptability_on_terminal_rules and not exempt
                if skip_test or self.is_acceptable(candidate):
                    committed = rule
                    break
                if self.config.abort_on_rejected_candidate: return stem
            if committed is None: return stem
            if trace is not None: trace.record(stem, committed, candidate)
            stem, intact = candidate, False
            if not committed.restem: return stem
        raise StemmingInvariantError(f'stemming {word!r} did not settle within {len(word) + len(self.rules) + 1} rule applications')

    def explain(self, word):
        trace = Trace()
        return self.stem(word, trace), trace
