import pathlib

import pytest

import suffixsplit

DATA_DIR = pathlib.Path(__file__).parent / 'data'


@pytest.fixture(scope='session')
def psl_path():
    """Path to the fixture copy of the Public Suffix List"""
    return DATA_DIR / 'test_psl.dat'


@pytest.fixture(scope='session')
def fixture_rules(psl_path):
    """Rule strings from the fixture list, private domains included"""
    return suffixsplit.load_rules_from_path(psl_path)


@pytest.fixture(scope='session')
def rule_table(fixture_rules):
    return suffixsplit.RuleTable.build(fixture_rules)


@pytest.fixture(scope='session')
def parser(rule_table):
    """A :class:`~suffixsplit.Parser` using the fixture list"""
    return suffixsplit.Parser(rule_table)


@pytest.fixture
def parser_factory():
    """Fixture creating a factory for parsers with inline rule lists"""
    def factory(rules):
        return suffixsplit.Parser(suffixsplit.RuleTable.build(rules))
    return factory
