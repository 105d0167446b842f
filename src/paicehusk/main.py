import sys
import argparse
from contextlib import ExitStack
from multiprocessing import freeze_support

from paicehusk import param, utils
from paicehusk.evl import compare as cmp
from paicehusk.stemmers.engine import StemmerConfig
from paicehusk.stemmers.paicehusk import PaiceHuskStemmer
from paicehusk.stemmers.rules import RuleFormatError, SourceUnavailable, default_rules, load_rules


def open_output(path, default):
    if path is None or path == '-': return default
    try:
        return open(path, 'w', encoding='utf-8')
    except OSError as e:
        raise SourceUnavailable(path, e.strerror or str(e), action='write') from e


def run(rules_path, words_path, output, trace, settings):
    rules = load_rules(rules_path) if rules_path else default_rules()
    utils.info(f'Loaded {len(rules)} rules from {utils.highlight(rules_path or "the bundled rule table")}')
    stemmer = PaiceHuskStemmer(rules=rules, lineage=settings['lineage'], ascii_only=settings['ascii'])
    words = list(stemmer.read_words(words_path))
    if not words: utils.warning(f'No words found in {words_path}')

    if 'stem' in settings['cmd']:
        utils.info(f'Stemming {len(words)} words with the {utils.highlight(settings["lineage"])} lineage ...')
        results = stemmer.stem_words(words, ncore=settings['ncore'], trace=True)
        with ExitStack() as stack:
            out = open_output(output, sys.stdout)
            if out is not sys.stdout: stack.enter_context(out)
            err = open_output(trace, sys.stderr)
            if err is not sys.stderr: stack.enter_context(err)
            # stems and '<stem> (<trace>)' lines stay in input order
            for stem, steps in results:
                out.write(f'{stem}\n')
                err.write(f'{stem} ({steps.render()})\n')
        stemmer.vocab.update(stem for stem, _ in results)
        utils.info(f'Resulting vocab size: {len(stemmer.vocab)}')

    if 'compare' in settings['cmd']:
        lineages = {name: StemmerConfig.from_lineage(name) for name in settings['compare']}
        utils.info(f'Comparing lineages {utils.highlight(", ".join(lineages))} ...')
        df = cmp.compare(words, lineages, rules=rules)
        if output is None or output == '-':
            cmp.write(df, sys.stdout)
        else:
            cmp.write(df, f'{output}.compare.tsv')
            utils.info(f'Writing the comparison in {output}.compare.tsv')
        utils.info(f'Lineages disagree on {cmp.divergence(df):.2%} of {len(df)} words')


def addargs(parser):
    source = parser.add_argument_group('source')
    source.add_argument('-rules', '--rules', type=str, default=param.settings['rules'], help='a rule file (plain or .gz); default: the bundled rule table (eg. -rules ./paicehusk_rules.txt)')
    source.add_argument('-words', '--words', type=str, required=True, help='a text file whose words are stemmed; required; (eg. -words ./wordlist.txt)')

    output = parser.add_argument_group('output')
    output.add_argument('-output', '--output', type=str, default=None, help='where stems go, one per line (default: stdout)')
    output.add_argument('-trace', '--trace', type=str, default=None, help='where "<stem> (<trace>)" lines go (default: stderr)')

    engine = parser.add_argument_group('engine')
    engine.add_argument('-lineage', '--lineage', type=str, default=param.settings['lineage'], choices=sorted(param.lineages), help=f'engine preset (default: -lineage {param.settings["lineage"]})')
    engine.add_argument('-cmd', '--cmd', nargs='+', type=str, default=param.settings['cmd'], choices=['stem', 'compare'], help='steps of the pipeline (default: -cmd stem)')
    engine.add_argument('-compare', '--compare', nargs='+', type=str, default=param.settings['compare'], choices=sorted(param.lineages), help='lineages for the compare step')
    engine.add_argument('-ncore', '--ncore', type=int, default=param.settings['ncore'], help='worker processes (default: -ncore 1)')
    source.add_argument('--ascii', action='store_true', default=param.settings['ascii'], help='only a-z and A-Z are letters when reading words; with -lineage legacy this reproduces the reference programs')
    parser.add_argument('--no-color', action='store_true', help='plain console messages')

# paicehusk -words ./wordlist.txt 1> stems.out 2> stems.err
# paicehusk -rules ./paicehusk_rules.txt -words ./wordlist.txt -lineage legacy -output stems.out -trace stems.err
# paicehusk -words ./wordlist.txt -cmd compare -output wordlist


def main(argv=None):
    parser = argparse.ArgumentParser(description='Paice/Husk stemmer')
    addargs(parser)
    args = parser.parse_args(argv)

    settings = {**param.settings, 'cmd': args.cmd, 'lineage': args.lineage, 'compare': args.compare, 'ncore': args.ncore, 'ascii': args.ascii}
    if args.no_color: param.settings['color'] = False
    try:
        run(rules_path=args.rules,
            words_path=args.words,
            output=args.output,
            trace=args.trace,
            settings=settings)
    except (SourceUnavailable, RuleFormatError) as e:
        utils.error(e)
        return 1
    return 0


if __name__ == '__main__':
    freeze_support()
    sys.exit(main())
