import re
import argparse
import pytest
from tagcount.utils import (split_csv, is_excluded, compile_patterns_from_env,
                            parse_limit_from_env, positive_int, regex_list)

def test_split_csv_drops_blanks():
    assert split_csv(' pain, ,emotion/.* ,') == ['pain', 'emotion/.*']

def test_is_excluded_uses_search():
    pats = [re.compile('Indexes'), re.compile('^draft-')]
    assert is_excluded('00 Indexes.md', pats)
    assert is_excluded('draft-idea.md', pats)
    assert not is_excluded('my-draft-idea.md', pats)
    assert not is_excluded('indexes.md', pats)  # case-sensitive

def test_compile_patterns_from_env_skips_invalid(monkeypatch, capsys):
    monkeypatch.setenv('TAG_COUNT_EXCLUDE_TAGS', 'pain, (broken, emotion/.*')
    pats = compile_patterns_from_env('TAG_COUNT_EXCLUDE_TAGS')
    assert [p.pattern for p in pats] == ['pain', 'emotion/.*']
    assert '[!] Invalid regex in TAG_COUNT_EXCLUDE_TAGS' in capsys.readouterr().err

def test_compile_patterns_from_env_unset(monkeypatch):
    monkeypatch.delenv('TAG_COUNT_EXCLUDE_TAGS', raising=False)
    assert compile_patterns_from_env('TAG_COUNT_EXCLUDE_TAGS') == []

def test_parse_limit_from_env(monkeypatch, capsys):
    monkeypatch.setenv('TAG_COUNT_LIMIT', '12')
    assert parse_limit_from_env('TAG_COUNT_LIMIT') == 12
    monkeypatch.setenv('TAG_COUNT_LIMIT', '-3')
    assert parse_limit_from_env('TAG_COUNT_LIMIT') is None
    assert '[!] Invalid TAG_COUNT_LIMIT' in capsys.readouterr().err

def test_positive_int():
    assert positive_int('5') == 5
    for bad in ('0', '-1', 'five', '2.5'):
        with pytest.raises(argparse.ArgumentTypeError):
            positive_int(bad)

def test_regex_list():
    assert [p.pattern for p in regex_list('a,b/.*')] == ['a', 'b/.*']
    assert regex_list('') == []
    with pytest.raises(argparse.ArgumentTypeError):
        regex_list('ok,[unclosed')
