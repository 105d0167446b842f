import gzip
import pickle

import pytest

from paicehusk.stemmers.rules import (
    Rule, RuleTable, RuleFormatError, SourceUnavailable,
    parse_rule, parse_rules, load_rules, default_rules,
)


def test_parse_intact_rule():
    rule = parse_rule('ai*2.', 1)
    assert rule == Rule(suffix='ia', intact=True, remove=2, append='', restem=False, id='(1:ai*2.)')


def test_parse_append_and_continue():
    rule = parse_rule('dei3y>', 8)
    assert rule.suffix == 'ied'
    assert rule.remove == 3
    assert rule.append == 'y'
    assert rule.restem is True
    assert rule.intact is False
    assert rule.letter == 'd'


def test_comment_and_leading_whitespace_are_ignored():
    rule = parse_rule('   ssen4>  { -ness }\n', 3)
    assert rule.suffix == 'ness'
    assert rule.id == '(3:ssen4>)'


def test_multi_digit_remove_count():
    assert parse_rule('s12.', 1).remove == 12


@pytest.mark.parametrize('text', ['s*.', 'S1.', '1s.', 's1', '*s1.', 'hello world'])
def test_malformed_rule(text):
    with pytest.raises(RuleFormatError) as e:
        parse_rules(['s1.', text])
    assert e.value.line == 2
    assert e.value.text == text


def test_blank_lines_are_skipped_but_counted():
    table = parse_rules(['', 's1.', '   ', 'e1>'])
    assert [rule.id for rule in table] == ['(4:e1>)', '(2:s1.)']


def test_bucket_keeps_file_order():
    table = parse_rules(['tnem4>', 'ss0.', 'tne3>', 'tna3>'])
    assert [rule.suffix for rule in table['t']] == ['ment', 'ent', 'ant']
    assert len(table) == 4
    assert table.letters() == ['s', 't']


def test_terminator_stops_loading():
    table = parse_rules(['s1.', 'end0.', 'z2.'])
    assert len(table['s']) == 1
    assert 'z' not in table
    assert table['z'] == ()


def test_terminator_must_be_exact():
    table = parse_rules(['xend0.', 's1.'])
    assert len(table) == 2


def test_missing_bucket_is_empty():
    assert RuleTable().get('a') == ()
    assert len(RuleTable()) == 0


def test_apply_clamps_to_empty():
    rule = parse_rule('s9.', 1)
    assert rule.apply('cats') == ''
    assert parse_rule('ytl2.', 1).apply('ability') == 'abili'


def test_matches_needs_intact_word():
    rule = parse_rule('mu*2.', 1)
    assert rule.matches('maximum', intact=True)
    assert not rule.matches('maximum', intact=False)
    assert not parse_rule('ytl2.', 1).matches('ty')


def test_load_rules(tmp_path):
    path = tmp_path / 'rules.txt'
    path.write_text('ai*2.\na*1.\nbb1.\nend0.\n')
    table = load_rules(str(path))
    assert len(table) == 3
    assert [rule.id for rule in table['a']] == ['(1:ai*2.)', '(2:a*1.)']


def test_load_gzip_rules(tmp_path):
    path = tmp_path / 'rules.txt.gz'
    with gzip.open(path, 'wt') as f: f.write('bb1.\nend0.\n')
    assert len(load_rules(str(path))) == 1


def test_load_missing_rules(tmp_path):
    with pytest.raises(SourceUnavailable) as e:
        load_rules(str(tmp_path / 'nope.txt'))
    assert e.value.path.endswith('nope.txt')


def test_default_rules():
    table = default_rules()
    assert len(table) == 115
    assert [rule.id for rule in table['d']] == ['(7:dd1.)', '(8:dei3y>)', '(9:deec2ss.)', '(10:dee1.)', '(11:de2>)', '(12:dooh4>)']
    assert default_rules() is table


def test_table_survives_pickling():
    table = default_rules()
    assert pickle.loads(pickle.dumps(table)) == table
