from collections import namedtuple

Step = namedtuple('Step', 'before rule after')


class Trace:
    """
    Ordered record of the rules committed while stemming one word.
    Observational only; the engine never reads it back.
    """
    def __init__(self, word=None):
        self.word = word
        self.steps = []

    def start(self, word):
        self.word = word
        self.steps = []

    def record(self, before, rule, after):
        self.steps.append(Step(before, rule.id, after))

    @property
    def stems(self):
        if self.word is None: return []
        return [self.word] + [step.after for step in self.steps]

    def __len__(self): return len(self.steps)

    def __iter__(self): return iter(self.steps)

    def render(self):
        # 'word =(id)=> stem =(id)=> stem', empty if the word was never stemmed
        if self.word is None: return ''
        return self.word + ''.join(f' ={step.rule}=> {step.after}' for step in self.steps)

    def __str__(self): return self.render()

    def __repr__(self): return f'Trace({self.render()!r})'
