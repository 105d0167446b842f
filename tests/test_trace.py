from paicehusk.stemmers.rules import parse_rule
from paicehusk.stemmers.trace import Trace


def test_empty_trace():
    trace = Trace()
    assert trace.render() == ''
    assert trace.stems == []
    assert len(trace) == 0


def test_render():
    trace = Trace()
    trace.start('owed')
    trace.record('owed', parse_rule('de2>', 11), 'ow')
    assert trace.render() == 'owed =(11:de2>)=> ow'
    assert trace.stems == ['owed', 'ow']
    assert list(trace)[0].rule == '(11:de2>)'


def test_start_resets():
    trace = Trace('ear')
    trace.record('ear', parse_rule('rae0.', 62), 'ear')
    trace.start('owed')
    assert trace.render() == 'owed'
