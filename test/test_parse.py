import pytest

import suffixsplit
from suffixsplit import ErrorCode, ParseResult


def test_not_a_string(parser):
    """Test parse raises TypeError when not given a string"""
    with pytest.raises(TypeError):
        parser.parse(1)


@pytest.mark.parametrize(('domain', 'error'), [
    ('', ErrorCode.DOMAIN_TOO_SHORT),
    ('.', ErrorCode.DOMAIN_TOO_SHORT),
    ('x' * 256, ErrorCode.DOMAIN_TOO_LONG),
    ('a..com', ErrorCode.LABEL_TOO_SHORT),
    ('x' * 64 + '.com', ErrorCode.LABEL_TOO_LONG),
    ('-foo', ErrorCode.LABEL_STARTS_WITH_DASH),
    ('aa.-foo.com', ErrorCode.LABEL_STARTS_WITH_DASH),
    ('foo-', ErrorCode.LABEL_ENDS_WITH_DASH),
    ('foo-.net', ErrorCode.LABEL_ENDS_WITH_DASH),
    ('foo-^%&!*&^.com', ErrorCode.LABEL_INVALID_CHARS),
])
def test_error(parser, domain, error):
    """Test invalid domains produce an error and nothing else"""
    parsed = parser.parse(domain)
    assert parsed.input == domain
    assert parsed.error == error
    assert parsed.error == error.value
    assert parsed.tld is None
    assert parsed.sld is None
    assert parsed.domain is None
    assert parsed.subdomain is None
    assert not parsed.listed


@pytest.mark.parametrize(
    ('domain', 'tld', 'sld', 'registrable', 'subdomain', 'listed'), [
        ('xn----dqo34k.xn----dqo34k', 'xn----dqo34k', 'xn----dqo34k',
         'xn----dqo34k.xn----dqo34k', None, False),
        ('foo.blogspot.co.uk', 'blogspot.co.uk', 'foo',
         'foo.blogspot.co.uk', None, True),
        ('google.com', 'com', 'google', 'google.com', None, True),
        ('www.google.com', 'com', 'google', 'google.com', 'www', True),
        ('www.google.com.', 'com', 'google', 'google.com', 'www', True),
        ('a.b.c.d.foo.com', 'com', 'foo', 'foo.com', 'a.b.c.d', True),
        ('data.gov.uk', 'gov.uk', 'data', 'data.gov.uk', None, True),
        ('gov.uk', 'gov.uk', None, None, None, True),
        ('github.io', 'github.io', None, None, None, True),
        ('a.b.example.example', 'example', 'example', 'example.example',
         'a.b', False),
        ('example', None, None, None, None, False),
        ('test.ck', 'test.ck', None, None, None, True),
        ('a.b.test.ck', 'test.ck', 'b', 'b.test.ck', 'a', True),
        ('x.www.ck', 'ck', 'www', 'www.ck', 'x', True),
        ('city.kobe.jp', 'kobe.jp', 'city', 'city.kobe.jp', None, True),
    ]
)
def test_parse(parser, domain, tld, sld, registrable, subdomain, listed):
    """Test parse splits domains into the right parts"""
    parsed = parser.parse(domain)
    assert parsed.input == domain
    assert parsed.error is None
    assert parsed.tld == tld
    assert parsed.sld == sld
    assert parsed.domain == registrable
    assert parsed.subdomain == subdomain
    assert parsed.listed is listed


def test_local_is_never_looked_up(parser_factory):
    """Test domains under .local stay unlisted even with a matching rule"""
    parser = parser_factory(['local'])
    parsed = parser.parse('printer.local')
    assert parsed.error is None
    assert parsed.tld is None
    assert parsed.domain is None
    assert not parsed.listed


def test_unicode_tld_on_punycode_input(parser):
    """Test the public suffix comes from the rule while the domain and
    subdomain are re-encoded for punycode input"""
    parsed = parser.parse('www.xn--85x722f.xn--55qx5d.cn')
    assert parsed.tld == '公司.cn'
    assert parsed.sld == 'xn--85x722f'
    assert parsed.domain == 'xn--85x722f.xn--55qx5d.cn'
    assert parsed.subdomain == 'www'


def test_mixed_script_input(parser):
    """Test input mixing Unicode and punycode labels is returned as
    punycode"""
    parsed = parser.parse('食狮.xn--55qx5d.cn')
    assert parsed.domain == 'xn--85x722f.xn--55qx5d.cn'


def test_unicode_subdomain(parser):
    """Test Unicode input keeps Unicode output"""
    parsed = parser.parse('第一.食狮.中国')
    assert parsed.tld == '中国'
    assert parsed.domain == '食狮.中国'
    assert parsed.subdomain == '第一'


@pytest.mark.parametrize('domain', [
    'www.google.com',
    'a.b.c.d.foo.com',
    'data.gov.uk',
    'x.www.ck',
    'a.b.test.ck',
    'www.www.city.kobe.jp',
    'a.foo.blogspot.co.uk',
    'www.食狮.中国',
    'www.xn--85x722f.xn--fiqs8s',
])
def test_listed_round_trip(parser, domain):
    """Test subdomain and domain join back into the normalized input"""
    parsed = parser.parse(domain.upper() + '.')
    assert parsed.listed
    if parsed.subdomain is not None:
        assert parsed.subdomain + '.' + parsed.domain == domain
    else:
        assert parsed.domain == domain


def test_unlisted_fallback(parser_factory):
    """Test the last two labels become the domain when nothing matches"""
    parser = parser_factory([])
    parsed = parser.parse('x.y.example.test')
    assert not parsed.listed
    assert parsed.tld == 'test'
    assert parsed.sld == 'example'
    assert parsed.domain == 'example.test'
    assert parsed.subdomain == 'x.y'


def test_exception_without_wildcard(parser_factory):
    """Test an exception rule works on its own"""
    parser = parser_factory(['!www.example'])
    parsed = parser.parse('a.www.example')
    assert parsed.listed
    assert parsed.tld == 'example'
    assert parsed.domain == 'www.example'
    assert parsed.subdomain == 'a'


def test_last_matching_rule_wins(parser_factory):
    """Test a shorter rule listed later beats a longer one listed earlier"""
    parser = parser_factory(['co.uk', 'uk'])
    parsed = parser.parse('www.example.co.uk')
    assert parsed.tld == 'uk'
    assert parsed.domain == 'co.uk'
    assert parsed.subdomain == 'www.example'


def test_malformed_rules_never_match(parser_factory):
    """Test garbage rules are accepted but do not match anything"""
    parser = parser_factory(['', '*.', 'Co m', '..'])
    parsed = parser.parse('example.com')
    assert not parsed.listed
    assert parsed.domain == 'example.com'


def test_result_as_dict(parser):
    """Test as_dict gives plain values"""
    assert parser.parse('www.google.com').as_dict() == {
        'input': 'www.google.com',
        'tld': 'com',
        'sld': 'google',
        'domain': 'google.com',
        'subdomain': 'www',
        'listed': True,
        'error': None,
    }
    assert parser.parse('').as_dict()['error'] == 'DOMAIN_TOO_SHORT'


def test_result_equality(parser):
    """Test results with the same fields are equal"""
    assert parser.parse('google.com') == parser.parse('google.com')
    assert parser.parse('google.com') != parser.parse('google.com.')
    assert ParseResult('x') == ParseResult('x')
    assert 'google.com' in repr(parser.parse('google.com'))


def test_module_parse(mocker, parser):
    """Test the module-level parse uses the default parser"""
    mocker.patch('suffixsplit.parser.default_parser', return_value=parser)
    assert suffixsplit.parse('gov.uk') == parser.parse('gov.uk')


def test_result_not_hashable(parser):
    """Test results can't be used as dict keys or set members"""
    with pytest.raises(TypeError):
        hash(parser.parse('google.com'))
