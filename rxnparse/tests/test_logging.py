import logging

import pytest

from rxnparse import ReactionNetwork
from rxnparse.logging import setup_logger, get_logger, EXTENDED_DEBUG, \
    LOG_LEVEL_ENV_VAR, BASE_LOGGER_NAME, NetworkLoggerAdapter, \
    level_from_environment


@pytest.fixture
def restore_logger(monkeypatch):
    yield
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)
    setup_logger(level=logging.DEBUG, console_output=False)


def test_level_from_environment_name(monkeypatch, restore_logger):
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, 'EXTENDED_DEBUG')
    log = setup_logger(console_output=False)
    assert log.level == EXTENDED_DEBUG


def test_level_from_environment_integer(monkeypatch, restore_logger):
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, '40')
    log = setup_logger(console_output=False)
    assert log.level == logging.ERROR


def test_level_from_environment_unset(monkeypatch):
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)
    assert level_from_environment(logging.INFO) == logging.INFO


def test_invalid_environment_level(monkeypatch, restore_logger):
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, 'LOUD')
    with pytest.raises(ValueError):
        setup_logger(console_output=False)


def test_extended_debug_level_name():
    assert logging.getLevelName(EXTENDED_DEBUG) == 'EXTENDED_DEBUG'


def test_file_output(tmp_path, restore_logger):
    filename = str(tmp_path / 'rxnparse.log')
    log = setup_logger(level=logging.INFO, console_output=False,
                       file_output=filename)
    log.info('hello from the test')
    for handler in log.handlers:
        handler.flush()
    with open(filename) as f:
        assert 'hello from the test' in f.read()


def test_network_adapter(caplog):
    network = ReactionNetwork([], ['X'], name='my_network')
    log = get_logger('rxnparse.test', network=network)
    assert isinstance(log, NetworkLoggerAdapter)
    with caplog.at_level(logging.DEBUG, logger=BASE_LOGGER_NAME):
        log.warning('something happened')
    assert '[my_network] something happened' in caplog.text


def test_network_adapter_reaction(caplog):
    network = ReactionNetwork([], ['X'], name='my_network')
    log = get_logger('rxnparse.test', network=network)
    with caplog.at_level(logging.DEBUG, logger=BASE_LOGGER_NAME):
        log.warning('odd propensity %s', 'k', reaction=3)
        NetworkLoggerAdapter(get_logger('rxnparse.test'), {}).warning(
            'no network', reaction=4)
    assert '[my_network] reaction #3: odd propensity k' in caplog.text
    assert 'reaction #4: no network' in caplog.text


def test_log_level_override():
    log = get_logger('rxnparse.test.level', log_level=logging.ERROR)
    assert log.level == logging.ERROR
    with pytest.raises(ValueError):
        get_logger('rxnparse.test.level', log_level='loud')
