from nltk.tokenize import WordPunctTokenizer

from paicehusk import utils
from paicehusk.stemmers.rules import open_source, SourceUnavailable


class AbstractStemmer(object):
    def __init__(self, ascii_only=False):
        super(AbstractStemmer, self).__init__()
        self.ascii_only = ascii_only
        self.tokenizer = WordPunctTokenizer()
        self.vocab = set()
        self.basename = 'nostemmer'

    def words(self, text):
        # maximal runs of letters, lowercased; everything else separates
        return [word.lower() for word in self.tokenizer.tokenize(utils.clean(text, self.ascii_only))]

    def stem_query(self, q):
        processed_words = self.process(self.words(q))
        self.vocab.update(processed_words)
        return ' '.join(processed_words)

    def read_words(self, path):
        """Yield the words of a word file (plain or gzip) in order."""
        with open_source(path) as f:
            try:
                for line in f:
                    # We drop empty lines
                    if len(line.strip()) == 0: continue
                    yield from self.words(line)
            except (OSError, UnicodeDecodeError) as e:
                raise SourceUnavailable(path, str(e)) from e

    def process(self, words):
        raise NotImplementedError("No stemmer here!")
